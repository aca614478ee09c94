"""
HTTP transport for the Mechanical Turk client.

The client depends only on the Transport protocol, so tests and callers
can swap in their own implementation without touching request signing.
"""

from typing import Mapping, Optional, Protocol, runtime_checkable

import requests

from .constants import DEFAULT_CONFIG
from .exceptions import TransportFailure
from .response import Response


@runtime_checkable
class Transport(Protocol):
    """Issue a GET request and return the wrapped response."""

    def get(self, url: str, params: Mapping[str, str]) -> Response:
        """
        Returns:
            Response for any HTTP status

        Raises:
            TransportFailure: If no response was obtained at all
        """
        ...


class RequestsTransport:
    """Transport backed by a requests.Session."""

    def __init__(self, timeout: float = DEFAULT_CONFIG['timeout'],
                 session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, url: str, params: Mapping[str, str]) -> Response:
        try:
            response = self.session.request('GET', url, params=dict(params), timeout=self.timeout)
        except requests.RequestException as e:
            if e.response is not None:
                return Response.from_requests(e.response)
            raise TransportFailure(f"HTTP request failed: {e}") from e
        return Response.from_requests(response)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
