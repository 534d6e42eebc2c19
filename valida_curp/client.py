"""
ValidaCurp API client
Async client to validate, calculate and obtain CURP information in México
"""
import httpx
from typing import Any, Dict, Mapping, Optional, Union
import logging

from valida_curp.config import (
    DEFAULT_VERSION,
    LIBRARY_TYPE,
    LIBRARY_VERSION,
    TOKEN_ENV_VAR,
    URL_V1,
    URL_V2,
    get_default_timeout,
    get_env_var,
)
from valida_curp.exceptions import (
    InvalidVersionError,
    MissingFieldError,
    MissingTokenError,
)
from valida_curp.schemas import PersonalData, PreparedRequest
from valida_curp.utils.response_decoder import parse_body
from valida_curp.versions import ApiVersion, get_api_version

logger = logging.getLogger(__name__)


class ValidaCurp:
    """
    Client for the ValidaCurp API with async support.

    The token is taken from the constructor, or read once from the
    TOKEN_VALIDA_API_CURP environment variable (a .env file is honoured).
    API version 2 is used by default; version 1 is deprecated by the
    remote service but still selectable with set_version(1).

    An httpx.AsyncClient may be injected to reuse connections; it is never
    closed by this class. Without one, a client is opened for each call.
    """

    URL_V1 = URL_V1
    URL_V2 = URL_V2
    LIBRARY_VERSION = LIBRARY_VERSION
    TYPE = LIBRARY_TYPE

    def __init__(
        self,
        token: Optional[str] = None,
        custom_endpoint: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.token = token or get_env_var(TOKEN_ENV_VAR, "") or None
        self.custom_endpoint = custom_endpoint
        self.api: ApiVersion = get_api_version(DEFAULT_VERSION)
        self.endpoint = custom_endpoint or self.api.default_endpoint
        self.http_client = http_client
        self.timeout = timeout if timeout is not None else get_default_timeout()

    def get_version(self) -> int:
        """Get the current API version."""
        return self.api.number

    def set_version(self, version: int = DEFAULT_VERSION) -> None:
        """
        Set the API version.

        Version 1 of the API is deprecated. Please use version 2 of the API.

        Raises:
            InvalidVersionError: if version is neither 1 nor 2
        """
        api = get_api_version(version)
        if api is None:
            raise InvalidVersionError()

        if api.number == 1:
            logger.warning("ValidaCurp API version 1 is deprecated, use version 2")

        self.api = api
        self.endpoint = self.custom_endpoint or api.default_endpoint

    def get_endpoint(self) -> str:
        """Get the current endpoint URL."""
        return self.endpoint

    def get_token(self) -> Optional[str]:
        """Get the current token."""
        return self.token

    def _ensure_token(self) -> None:
        if not self.get_token():
            raise MissingTokenError()

    async def is_valid(self, curp: str) -> Any:
        """
        Validate CURP structure.

        The structure check is done by the remote service; the CURP is sent as given.
        """
        self._ensure_token()
        api = self.api
        return await self._call(api, api.validate_method, curp=curp)

    async def get_data(self, curp: str) -> Any:
        """Get the information registered in RENAPO for a CURP."""
        self._ensure_token()
        api = self.api
        return await self._call(api, api.get_data_method, curp=curp)

    async def calculate(self, data: Union[PersonalData, Mapping[str, Any]]) -> Any:
        """
        Calculate a CURP from personal data.

        Args:
            data: PersonalData, or a mapping with the keys names, lastName,
                secondLastName, birthDay, birthMonth, birthYear, gender (H/M)
                and entity

        Returns:
            The remote result with the calculated CURP and check digit

        Raises:
            MissingTokenError: no token configured
            MissingFieldError: a required field is missing, checked before
                anything is sent
        """
        self._ensure_token()
        personal_data = data if isinstance(data, PersonalData) else PersonalData.model_validate(dict(data))
        self._validate_data_calculate(personal_data)

        api = self.api
        return await self._call(api, api.calculate_method, extra_fields=api.calculate_payload(personal_data))

    def _validate_data_calculate(self, data: PersonalData) -> None:
        for field_name, value in data.required_values():
            if value is None:
                raise MissingFieldError(field_name)

    async def get_entities(self) -> Any:
        """Get the entity (state) codes and their names."""
        self._ensure_token()
        api = self.api
        return await self._call(api, api.entities_method)

    async def _call(
        self,
        api: ApiVersion,
        method_name: str,
        curp: Optional[str] = None,
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> Any:
        prepared = api.build_request(self.get_endpoint(), self.get_token(), method_name, curp, extra_fields)
        logger.info(
            f"Making {prepared.http_method} request to ValidaCurp API - method: {method_name}, api_version: {api.number}"
        )

        response = await self._send(prepared)
        return api.decode_response(
            response.status_code,
            parse_body(response),
            response.reason_phrase,
        )

    async def _send(self, prepared: PreparedRequest) -> httpx.Response:
        try:
            if self.http_client is not None:
                response = await self._execute(self.http_client, prepared)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._execute(client, prepared)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as http_err:
            logger.error(
                f"HTTP Error from ValidaCurp API - url: {self._safe_url(prepared)}, status_code: {http_err.response.status_code}"
            )
            return http_err.response
        except httpx.RequestError as req_err:
            logger.error(
                f"Request Exception from ValidaCurp API - url: {self._safe_url(prepared)}, message: {str(req_err)}"
            )
            raise

    @staticmethod
    async def _execute(client: httpx.AsyncClient, prepared: PreparedRequest) -> httpx.Response:
        if prepared.http_method == "GET":
            return await client.get(prepared.url, headers=prepared.headers)
        return await client.post(prepared.url, json=prepared.body, headers=prepared.headers)

    @staticmethod
    def _safe_url(prepared: PreparedRequest) -> str:
        # v1 URLs carry the token in the query string
        return prepared.url.split("?", 1)[0]
