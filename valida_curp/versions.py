"""
ValidaCurp API versions
One strategy object per remote API generation
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from valida_curp.config import URL_V1, URL_V2
from valida_curp.schemas import OperationRequest, PersonalData, PreparedRequest
from valida_curp.utils.curp_transformers import (
    transform_v1_calculate_payload,
    transform_v2_calculate_payload,
)
from valida_curp.utils.request_builders import make_request, make_url
from valida_curp.utils.response_decoder import decode_response


class ApiVersion(ABC):
    """Everything that differs between API generations."""

    number: int
    default_endpoint: str
    error_message_field: str
    validate_method: str
    get_data_method: str
    calculate_method: str
    entities_method: str

    @abstractmethod
    def build_request(
        self,
        endpoint: str,
        token: str,
        method_name: str,
        curp: Optional[str] = None,
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> PreparedRequest:
        raise NotImplementedError

    @abstractmethod
    def calculate_payload(self, data: PersonalData) -> Dict[str, Any]:
        raise NotImplementedError

    def decode_response(self, status_code: int, body: Any, reason_phrase: str = "") -> Any:
        return decode_response(status_code, body, self.error_message_field, reason_phrase)

    def __repr__(self) -> str:
        return f"<ApiVersion {self.number}>"


class ApiVersionV1(ApiVersion):
    """Deprecated API: GET with every field in the query string."""

    number = 1
    default_endpoint = URL_V1
    error_message_field = "error_message"
    validate_method = "validar"
    get_data_method = "obtener_datos"
    calculate_method = "calcular_curp"
    entities_method = "entidades"

    def build_request(self, endpoint, token, method_name, curp=None, extra_fields=None):
        request = OperationRequest(method_name=method_name, curp=curp, extra_fields=extra_fields)
        return make_url(endpoint, token, request, api_version=self.number)

    def calculate_payload(self, data):
        return transform_v1_calculate_payload(data)


class ApiVersionV2(ApiVersion):
    """Current API: POST with a JSON body."""

    number = 2
    default_endpoint = URL_V2
    error_message_field = "msn"
    validate_method = "validateCurpStructure"
    get_data_method = "getData"
    calculate_method = "calculateCURP"
    entities_method = "getEntities"

    def build_request(self, endpoint, token, method_name, curp=None, extra_fields=None):
        request = OperationRequest(method_name=method_name, curp=curp, extra_fields=extra_fields)
        return make_request(endpoint, token, request, api_version=self.number)

    def calculate_payload(self, data):
        return transform_v2_calculate_payload(data)


API_V1 = ApiVersionV1()
API_V2 = ApiVersionV2()

API_VERSIONS: Dict[int, ApiVersion] = {
    API_V1.number: API_V1,
    API_V2.number: API_V2,
}


def get_api_version(version: Any) -> Optional[ApiVersion]:
    """Look up a supported API version; None for anything but the ints 1 and 2."""
    if type(version) is not int:
        return None
    return API_VERSIONS.get(version)
