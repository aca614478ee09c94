"""
Mechanical Turk Requester API client library

A Python client library that builds HMAC-signed GET requests for the
Mechanical Turk Requester REST API and classifies its responses.

Example usage:
    from mturk_client import MechanicalTurkClient

    client = MechanicalTurkClient("your-access-key-id", "your-secret-key")
    response = client.get("GetAccountBalance")
"""

from .client import MechanicalTurkClient, Result
from .exceptions import (
    MechanicalTurkError,
    ConfigurationError,
    RequestFailure,
    TransportFailure
)
from .response import Response, ResponseError
from .signing import flatten_parameters, format_timestamp, sign
from .transport import RequestsTransport, Transport
from .constants import (
    SERVICE,
    VERSION,
    SANDBOX_URI,
    PRODUCTION_URI,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "MechanicalTurkClient",
    "Result",
    "MechanicalTurkError",
    "ConfigurationError",
    "RequestFailure",
    "TransportFailure",
    "Response",
    "ResponseError",
    "Transport",
    "RequestsTransport",
    "flatten_parameters",
    "format_timestamp",
    "sign",
    "SERVICE",
    "VERSION",
    "SANDBOX_URI",
    "PRODUCTION_URI",
    "DEFAULT_CONFIG"
]
