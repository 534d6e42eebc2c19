"""
Response decoding for the ValidaCurp API
Turns a status code and body into the success payload or a classified error
"""
import httpx
from typing import Any, Mapping
import logging

from valida_curp.exceptions import (
    AuthenticationError,
    BadRequestError,
    RequestFailedError,
)

logger = logging.getLogger(__name__)


def parse_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any, error_message_field: str, default: str) -> str:
    if isinstance(body, Mapping) and body.get(error_message_field):
        return str(body[error_message_field])
    return default


def decode_response(
    status_code: int,
    body: Any,
    error_message_field: str,
    reason_phrase: str = "",
) -> Any:
    """
    Decode an API response.

    Args:
        status_code: HTTP status of the response
        body: decoded JSON body, or raw text when it was not JSON
        error_message_field: body field holding the error message
            ("error_message" for v1, "msn" for v2)
        reason_phrase: textual reason for the status

    Returns:
        The value of the "response" envelope field when present, otherwise
        the whole body

    Raises:
        AuthenticationError: status 401 or 403
        BadRequestError: status 400
        RequestFailedError: any other status
    """
    if status_code == 200:
        if isinstance(body, Mapping) and "response" in body:
            return body["response"]
        return body

    if status_code in (401, 403):
        error_msg = _error_message(body, error_message_field, "Authentication failed")
        logger.warning(f"ValidaCurp authentication failed - status_code: {status_code}, message: {error_msg}")
        raise AuthenticationError(
            f"Failed authentication: {error_msg}", status_code=status_code, body=body
        )

    if status_code == 400:
        error_msg = _error_message(body, error_message_field, "Bad request")
        logger.warning(f"ValidaCurp bad request - message: {error_msg}")
        raise BadRequestError(f"Bad request: {error_msg}", status_code=status_code, body=body)

    reason = reason_phrase or httpx.codes.get_reason_phrase(status_code)
    logger.warning(f"ValidaCurp request failed - status_code: {status_code}, reason: {reason}")
    raise RequestFailedError(f"The request failed: {reason}", status_code=status_code, body=body)

