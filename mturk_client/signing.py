"""
Request signing and parameter formatting for the Requester REST API.

The API authenticates a request with an HMAC-SHA1 signature computed over
the service name, the operation and the request timestamp, and encodes
list parameters as indexed flat keys.
"""

import base64
import datetime
import hashlib
import hmac
from typing import Any, Dict, Mapping

from .constants import SERVICE, TIMESTAMP_FORMAT


def format_timestamp(moment: datetime.datetime) -> str:
    """
    Render a datetime in the API timestamp format (UTC, second precision).

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(datetime.timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def sign(secret_access_key: str, operation: str, timestamp: str, service: str = SERVICE) -> str:
    """
    Generate the request signature.

    Format: base64(HMAC-SHA1(secret, service + operation + timestamp))

    Args:
        secret_access_key: AWS secret access key (HMAC key)
        operation: API operation name
        timestamp: Request timestamp, as sent in the Timestamp field
        service: Service name, as sent in the Service field

    Returns:
        Base64-encoded signature
    """
    message = f"{service}{operation}{timestamp}"
    mac = hmac.new(
        secret_access_key.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha1
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def flatten_parameters(parameters: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Flatten operation parameters into query parameter form.

    Scalars pass through unchanged. The element at index i of a list or
    tuple value is sent as "{key}.{i + 1}.{i}".

    Args:
        parameters: Operation parameters

    Returns:
        Flat mapping of query parameters
    """
    output = {}

    for key, value in parameters.items():
        if not isinstance(value, (list, tuple)):
            output[key] = value
            continue

        for index, item in enumerate(value):
            output[f"{key}.{index + 1}.{index}"] = item

    return output
