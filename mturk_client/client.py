"""
Mechanical Turk Requester API client.

This module builds and signs Requester REST API calls: every request is a
GET whose query string carries the service identity, the access key id,
the API version, the operation, an HMAC-SHA1 signature and a timestamp,
followed by the operation parameters.
"""

import datetime
import logging
import os
import threading
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .constants import (
    SERVICE,
    VERSION,
    SANDBOX_URI,
    PRODUCTION_URI,
    PARAM_SERVICE,
    PARAM_ACCESS_KEY_ID,
    PARAM_VERSION,
    PARAM_OPERATION,
    PARAM_SIGNATURE,
    PARAM_TIMESTAMP,
    SECRET_FIELDS,
    DEFAULT_CONFIG,
    ENV_ACCESS_KEY_ID,
    ENV_SECRET_ACCESS_KEY,
    ENV_SANDBOX,
    ENV_TIMEOUT,
)
from .exceptions import ConfigurationError, RequestFailure, TransportFailure
from .response import Response
from .signing import flatten_parameters, format_timestamp, sign
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

Result = Union[Response, RequestFailure, TransportFailure]

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _redact(query: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: ('***' if key in SECRET_FIELDS else value) for key, value in query.items()}


class MechanicalTurkClient:
    """
    Signed-request client for the Mechanical Turk Requester API.

    The request timestamp is taken once, on first use, and shared by every
    request the instance issues afterwards.
    """

    def __init__(self, access_key_id: str, secret_access_key: str, sandbox: bool = True,
                 transport: Optional[Transport] = None,
                 clock: Optional[Callable[[], datetime.datetime]] = None,
                 **config):
        """
        Initialize the client.

        Args:
            access_key_id: AWS access key id, sent with every request
            secret_access_key: AWS secret access key, used only to sign
            sandbox: Use the sandbox endpoint instead of production
            transport: Transport to issue requests with (defaults to requests)
            clock: Source of the request timestamp (defaults to current UTC time)
            **config: Configuration options (timeout)
        """
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.sandbox = sandbox

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config, 'sandbox': sandbox}
        self._validate_config()

        self._owns_transport = transport is None
        self.transport = transport or RequestsTransport(timeout=self.config['timeout'])
        self._clock = clock or _utcnow
        self._timestamp = None
        self._timestamp_lock = threading.Lock()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs) -> "MechanicalTurkClient":
        """
        Create a client configured from environment variables.

        Reads MTURK_ACCESS_KEY_ID, MTURK_SECRET_ACCESS_KEY, MTURK_SANDBOX and
        MTURK_TIMEOUT. Keyword arguments override the environment.

        Raises:
            ConfigurationError: If credentials are missing or a value is malformed
        """
        environ = os.environ if environ is None else environ

        options: Dict[str, Any] = {}
        if ENV_SANDBOX in environ:
            options['sandbox'] = _parse_bool(ENV_SANDBOX, environ[ENV_SANDBOX])
        if ENV_TIMEOUT in environ:
            try:
                options['timeout'] = float(environ[ENV_TIMEOUT])
            except ValueError:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {environ[ENV_TIMEOUT]!r}")
        options.update(kwargs)

        access_key_id = options.pop('access_key_id', environ.get(ENV_ACCESS_KEY_ID, ''))
        secret_access_key = options.pop('secret_access_key', environ.get(ENV_SECRET_ACCESS_KEY, ''))
        return cls(access_key_id, secret_access_key, **options)

    def _validate_config(self):
        """Validate client configuration."""
        if not self.access_key_id:
            raise ConfigurationError("access_key_id cannot be empty")

        if not self.secret_access_key:
            raise ConfigurationError("secret_access_key cannot be empty")

        if self.config['timeout'] is not None and self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def base_url(self) -> str:
        """Endpoint selected at construction."""
        return SANDBOX_URI if self.sandbox else PRODUCTION_URI

    @property
    def timestamp(self) -> str:
        """Request timestamp, fixed on first access."""
        if self._timestamp is None:
            with self._timestamp_lock:
                if self._timestamp is None:
                    self._timestamp = format_timestamp(self._clock())
        return self._timestamp

    def signature(self, operation: str) -> str:
        """Signature for operation at this client's timestamp."""
        return sign(self.secret_access_key, operation, self.timestamp)

    def build_query(self, operation: str, parameters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Assemble the full query parameter set for an operation.

        Args:
            operation: API operation name
            parameters: Operation parameters; list values are flattened

        Returns:
            Protocol fields followed by the flattened parameters
        """
        query = {
            PARAM_SERVICE: SERVICE,
            PARAM_ACCESS_KEY_ID: self.access_key_id,
            PARAM_VERSION: VERSION,
            PARAM_OPERATION: operation,
            PARAM_SIGNATURE: self.signature(operation),
            PARAM_TIMESTAMP: self.timestamp,
        }
        query.update(flatten_parameters(parameters or {}))
        return query

    def send(self, operation: str, parameters: Optional[Mapping[str, Any]] = None) -> Result:
        """
        Issue one signed GET request and classify the outcome.

        Failures are returned, not raised.

        Returns:
            The Response if it is valid, RequestFailure carrying the response
            if the API rejected the call, or TransportFailure if no response
            was obtained
        """
        query = self.build_query(operation, parameters)
        logger.debug("GET %s %s", self.base_url, _redact(query))

        try:
            response = self.transport.get(self.base_url, query)
        except TransportFailure as e:
            logger.warning("%s failed without a response: %s", operation, e)
            return e

        logger.debug("%s -> %s", operation, response.status_code)

        if not response.is_valid():
            failure = RequestFailure(response)
            logger.warning("%s rejected: %s", operation, failure)
            return failure

        return response

    def get(self, operation: str, parameters: Optional[Mapping[str, Any]] = None) -> Response:
        """
        Make a signed GET request to the API.

        Args:
            operation: API operation name
            parameters: Operation parameters

        Returns:
            The valid Response

        Raises:
            RequestFailure: If the API returned an invalid or error response
            TransportFailure: If no response was obtained
        """
        result = self.send(operation, parameters)
        if isinstance(result, (RequestFailure, TransportFailure)):
            raise result
        return result

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")
