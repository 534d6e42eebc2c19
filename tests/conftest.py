"""
Shared pytest fixtures and configuration
"""
import httpx
import pytest
from typing import Any, List, Optional

from valida_curp import ValidaCurp


TEST_TOKEN = "test-token-123"


class RecordingHandler:
    """
    httpx.MockTransport handler that records every request and answers
    with a fixed response.
    """

    def __init__(self, status_code: int = 200, json: Any = None, text: Optional[str] = None, error: Exception = None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json if self.json is not None else {})


@pytest.fixture(autouse=True)
def clear_environment(monkeypatch):
    """Keep the developer's token and timeout out of the tests."""
    monkeypatch.delenv("TOKEN_VALIDA_API_CURP", raising=False)
    monkeypatch.delenv("VALIDA_CURP_TIMEOUT", raising=False)


@pytest.fixture
def person_data():
    """Personal data with every field required to calculate a CURP."""
    return {
        "names": "Edson Edian",
        "lastName": "Burgos",
        "secondLastName": "Macedo",
        "birthDay": "28",
        "birthMonth": "05",
        "birthYear": "1998",
        "gender": "H",
        "entity": "15",
    }


@pytest.fixture
def make_client():
    """
    Build a ValidaCurp client wired to a MockTransport.

    Returns (client, handler); handler.requests holds what was sent.
    """
    def _make(
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        error: Exception = None,
        token: Optional[str] = TEST_TOKEN,
        custom_endpoint: Optional[str] = None,
        version: int = 2,
    ):
        handler = RecordingHandler(status_code=status_code, json=json, text=text, error=error)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = ValidaCurp(token=token, custom_endpoint=custom_endpoint, http_client=http_client)
        client.set_version(version)
        return client, handler

    return _make
