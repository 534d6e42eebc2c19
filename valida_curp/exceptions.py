"""
ValidaCurp client exceptions
Every error raised by the library itself derives from ValidaCurpError
"""
from typing import Any, Optional


class ValidaCurpError(Exception):
    """Base class for classified errors raised by the ValidaCurp client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingTokenError(ValidaCurpError):
    """No project token configured."""

    def __init__(self, message: str = "The token was not set"):
        super().__init__(message)


class MissingFieldError(ValidaCurpError):
    """A field required to calculate a CURP is absent."""

    def __init__(self, field_name: str):
        super().__init__(f"The {field_name} was not set")
        self.field_name = field_name


class InvalidVersionError(ValidaCurpError):
    """API version other than 1 or 2."""

    def __init__(self, message: str = "The version is invalid"):
        super().__init__(message)


class ValidaCurpAPIError(ValidaCurpError):
    """
    Error reported by the remote service.

    Attributes:
        status_code: HTTP status of the response
        body: decoded response body (JSON value or raw text)
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(ValidaCurpAPIError):
    """Remote service answered 401 or 403."""


class BadRequestError(ValidaCurpAPIError):
    """Remote service answered 400."""


class RequestFailedError(ValidaCurpAPIError):
    """Remote service answered any other non-200 status."""
