"""Error taxonomy shared by the request handlers.

Every error carries the HTTP status it maps to; the exception handlers in
``meetnotes.main`` turn them into ``{"error": message}`` bodies.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(ServiceError):
    """Raised when the caller's payload is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConfigError(ServiceError):
    """Raised when required process configuration (API keys, relay credentials) is absent."""

    pass


class UpstreamError(ServiceError):
    """
    Raised when the completion service or the mail relay reports a failure.
    The provider's message is passed through unmodified.
    """

    pass
