"""
Request builders for the ValidaCurp API
Shape an OperationRequest into the GET (v1) or POST (v2) form the remote API expects
"""
import httpx
from typing import Dict, Any

from valida_curp.config import LIBRARY_TYPE, LIBRARY_VERSION
from valida_curp.schemas import OperationRequest, PreparedRequest


def library_fields(api_version: int) -> Dict[str, Any]:
    """Fields identifying this library, sent with every request."""
    return {
        "library": LIBRARY_TYPE,
        "library_version": LIBRARY_VERSION,
        "api_version": api_version,
    }


def _payload(token: str, request: OperationRequest) -> Dict[str, Any]:
    data: Dict[str, Any] = {"token": token}

    if request.curp:
        data["curp"] = request.curp

    if request.extra_fields:
        data.update(request.extra_fields)

    return data


def make_url(endpoint: str, token: str, request: OperationRequest, api_version: int = 1) -> PreparedRequest:
    """
    Build a GET request for API v1.

    Everything travels in the query string: token, curp, extra fields and
    the library fields, all URL-encoded.
    """
    data = _payload(token, request)
    data.update(library_fields(api_version))

    query_string = str(httpx.QueryParams(data))
    return PreparedRequest(
        http_method="GET",
        url=f"{endpoint}{request.method_name}?{query_string}",
    )


def make_request(endpoint: str, token: str, request: OperationRequest, api_version: int = 2) -> PreparedRequest:
    """
    Build a POST request for API v2.

    Only the library fields go in the query string; token, curp and extra
    fields are sent as the JSON body.
    """
    query_string = str(httpx.QueryParams(library_fields(api_version)))
    return PreparedRequest(
        http_method="POST",
        url=f"{endpoint}{request.method_name}?{query_string}",
        body=_payload(token, request),
        headers={"Content-Type": "application/json"},
    )
