"""
Shared fixtures and sample API payloads.
"""

import datetime

import pytest

from mturk_client import MechanicalTurkClient, Response, TransportFailure


VALID_BODY = """<?xml version="1.0" encoding="UTF-8"?>
<GetAccountBalanceResponse>
  <OperationRequest><RequestId>a1b2c3</RequestId></OperationRequest>
  <GetAccountBalanceResult>
    <Request><IsValid>True</IsValid></Request>
    <AvailableBalance>
      <Amount>10000.00</Amount>
      <CurrencyCode>USD</CurrencyCode>
      <FormattedPrice>$10,000.00</FormattedPrice>
    </AvailableBalance>
  </GetAccountBalanceResult>
</GetAccountBalanceResponse>"""

NAMESPACED_BODY = """<?xml version="1.0"?>
<GetAccountBalanceResponse xmlns="http://requester.mturk.amazonaws.com/doc/2014-08-15">
  <OperationRequest><RequestId>a1b2c3</RequestId></OperationRequest>
  <GetAccountBalanceResult>
    <Request><IsValid>True</IsValid></Request>
    <AvailableBalance><Amount>5.00</Amount></AvailableBalance>
  </GetAccountBalanceResult>
</GetAccountBalanceResponse>"""

INVALID_BODY = """<?xml version="1.0"?>
<GetHITResponse>
  <OperationRequest><RequestId>d4e5f6</RequestId></OperationRequest>
  <HIT>
    <Request>
      <IsValid>False</IsValid>
      <Errors>
        <Error>
          <Code>AWS.MechanicalTurk.HITDoesNotExist</Code>
          <Message>Hit 123 does not exist.</Message>
        </Error>
      </Errors>
    </Request>
  </HIT>
</GetHITResponse>"""

NOT_AUTHORIZED_BODY = """<?xml version="1.0"?>
<GetAccountBalanceResponse>
  <OperationRequest>
    <RequestId>g7h8i9</RequestId>
    <Errors>
      <Error>
        <Code>AWS.NotAuthorized</Code>
        <Message>The identity contained in the request is not authorized to use this AWSAccessKeyId</Message>
      </Error>
    </Errors>
  </OperationRequest>
</GetAccountBalanceResponse>"""

FIXED_NOW = datetime.datetime(2014, 8, 15, 12, 30, 45, tzinfo=datetime.timezone.utc)


class FakeTransport:
    """In-memory transport that records calls and replays canned outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [Response(200, VALID_BODY)]
        self.calls = []

    def get(self, url, params):
        self.calls.append((url, dict(params)))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, TransportFailure):
            raise outcome
        return outcome


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return MechanicalTurkClient(
        "AKIAEXAMPLE",
        "test-secret-key",
        transport=transport,
        clock=lambda: FIXED_NOW,
    )
