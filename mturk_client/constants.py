"""
Constants for the Mechanical Turk Requester client library.
Wire values match the Requester REST API (version 2014-08-15).
"""

# Service identity (part of both the query string and the signature message)
SERVICE = "AWSMechanicalTurkRequester"
VERSION = "2014-08-15"

# Endpoints
SANDBOX_URI = "https://mechanicalturk.sandbox.amazonaws.com/"
PRODUCTION_URI = "https://mechanicalturk.amazonaws.com/"

# UTC, YYYY-MM-DDTHH:mm:ssZ
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Query parameter names
PARAM_SERVICE = "Service"
PARAM_ACCESS_KEY_ID = "AWSAccessKeyId"
PARAM_VERSION = "Version"
PARAM_OPERATION = "Operation"
PARAM_SIGNATURE = "Signature"
PARAM_TIMESTAMP = "Timestamp"

PROTOCOL_FIELDS = (
    PARAM_SERVICE,
    PARAM_ACCESS_KEY_ID,
    PARAM_VERSION,
    PARAM_OPERATION,
    PARAM_SIGNATURE,
    PARAM_TIMESTAMP,
)

# Never written to logs
SECRET_FIELDS = (PARAM_ACCESS_KEY_ID, PARAM_SIGNATURE)

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
}

# Environment variables read by MechanicalTurkClient.from_env()
ENV_ACCESS_KEY_ID = "MTURK_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "MTURK_SECRET_ACCESS_KEY"
ENV_SANDBOX = "MTURK_SANDBOX"
ENV_TIMEOUT = "MTURK_TIMEOUT"
