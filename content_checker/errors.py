"""Error types turned into ``{"success": false, "error": ...}`` responses."""
from typing import Optional


class CheckerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InputValidationError(CheckerError):
    """Missing, empty, wrong-typed or oversized input."""

    status_code = 400


class ConfigurationError(CheckerError):
    """Required external credentials are absent."""

    status_code = 500


class ExternalServiceError(CheckerError):
    """A call to a third-party service failed or answered with an error."""

    status_code = 502


class ExternalServiceUnavailable(ExternalServiceError):
    """The third-party service is temporarily unavailable; the caller may retry."""

    status_code = 503
