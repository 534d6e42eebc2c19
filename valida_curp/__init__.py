"""
ValidaCurp client for Python

Validate, calculate and obtain CURP information in México through the
ValidaCurp API (https://valida-curp.com.mx).
"""
from valida_curp.client import ValidaCurp
from valida_curp.config import LIBRARY_VERSION
from valida_curp.exceptions import (
    AuthenticationError,
    BadRequestError,
    InvalidVersionError,
    MissingFieldError,
    MissingTokenError,
    RequestFailedError,
    ValidaCurpAPIError,
    ValidaCurpError,
)
from valida_curp.schemas import PersonalData
from valida_curp.versions import API_V1, API_V2, ApiVersion

__version__ = LIBRARY_VERSION

__all__ = [
    'ValidaCurp',
    'PersonalData',
    'ValidaCurpError',
    'ValidaCurpAPIError',
    'MissingTokenError',
    'MissingFieldError',
    'InvalidVersionError',
    'AuthenticationError',
    'BadRequestError',
    'RequestFailedError',
    'ApiVersion',
    'API_V1',
    'API_V2',
]
