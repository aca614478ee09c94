"""
Custom exceptions for the Mechanical Turk client library.
"""


class MechanicalTurkError(Exception):
    """Base exception for Mechanical Turk client errors."""
    pass


class ConfigurationError(MechanicalTurkError):
    """Raised when client configuration is invalid."""
    pass


class TransportFailure(MechanicalTurkError):
    """Raised when no response could be obtained (DNS, connection, timeout)."""

    response = None


class RequestFailure(MechanicalTurkError):
    """
    Raised when the API answered but the response is not valid.

    Covers both HTTP error statuses and body-level API errors. The wrapped
    response is kept so callers can inspect status and body.
    """

    def __init__(self, response):
        super().__init__(response)
        self.response = response

    def __str__(self) -> str:
        return self._describe(self.response)

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def errors(self):
        return self.response.errors

    @staticmethod
    def _describe(response) -> str:
        message = f"Mechanical Turk request failed with status {response.status_code}"
        errors = response.errors
        if errors:
            message += f": {errors[0].code}: {errors[0].message}"
        return message
