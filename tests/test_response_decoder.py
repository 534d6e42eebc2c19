"""
Unit tests for response decoding
"""
import httpx
import pytest

from valida_curp.exceptions import (
    AuthenticationError,
    BadRequestError,
    RequestFailedError,
    ValidaCurpAPIError,
    ValidaCurpError,
)
from valida_curp.utils.response_decoder import decode_response, parse_body
from valida_curp.versions import API_V1, API_V2


class TestSuccess:
    """Status 200 unwraps the response envelope"""

    def test_unwraps_response_field(self):
        assert decode_response(200, {"response": {"curp": "X"}, "error": False}, "msn") == {"curp": "X"}

    def test_falsy_response_field_still_unwrapped(self):
        assert decode_response(200, {"response": []}, "msn") == []

    def test_body_without_envelope(self):
        body = {"valid": True}

        assert decode_response(200, body, "msn") is body

    def test_non_mapping_body(self):
        assert decode_response(200, "OK", "msn") == "OK"


class TestErrors:
    """Non-200 statuses raise classified errors"""

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_authentication_v2(self, status_code):
        with pytest.raises(AuthenticationError) as exc_info:
            API_V2.decode_response(status_code, {"msn": "bad token"})

        assert str(exc_info.value) == "Failed authentication: bad token"
        assert exc_info.value.status_code == status_code

    def test_authentication_v1(self):
        with pytest.raises(AuthenticationError, match="bad token"):
            API_V1.decode_response(401, {"error_message": "bad token"})

    def test_authentication_fallback_message(self):
        with pytest.raises(AuthenticationError, match="Failed authentication: Authentication failed"):
            API_V1.decode_response(401, {"msn": "v2 field"})

    def test_bad_request(self):
        with pytest.raises(BadRequestError) as exc_info:
            API_V2.decode_response(400, {"msn": "Invalid CURP"})

        assert exc_info.value.message == "Bad request: Invalid CURP"
        assert exc_info.value.body == {"msn": "Invalid CURP"}

    def test_bad_request_with_text_body(self):
        with pytest.raises(BadRequestError, match="Bad request: Bad request"):
            API_V2.decode_response(400, "not json")

    def test_other_status_uses_reason_phrase(self):
        with pytest.raises(RequestFailedError, match="The request failed: Service Unavailable"):
            API_V2.decode_response(503, {"msn": "down"}, "Service Unavailable")

    def test_other_status_without_reason_phrase(self):
        with pytest.raises(RequestFailedError, match="The request failed: Not Found"):
            decode_response(404, None, "msn")

    def test_error_hierarchy(self):
        for error_cls in (AuthenticationError, BadRequestError, RequestFailedError):
            assert issubclass(error_cls, ValidaCurpAPIError)
            assert issubclass(error_cls, ValidaCurpError)


class TestParseBody:
    """Bodies are decoded as JSON when possible"""

    def test_json(self):
        assert parse_body(httpx.Response(200, json={"response": 1})) == {"response": 1}

    def test_text(self):
        assert parse_body(httpx.Response(500, text="Internal error")) == "Internal error"

    def test_empty(self):
        assert parse_body(httpx.Response(204)) == ""
