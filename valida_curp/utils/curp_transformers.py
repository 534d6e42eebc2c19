"""
CURP Calculation Payload Transformers
Reshape personal data into the field names each API version expects
"""
from typing import Dict, Any
import logging

from valida_curp.schemas import PersonalData

logger = logging.getLogger(__name__)


def transform_v1_calculate_payload(data: PersonalData) -> Dict[str, Any]:
    """
    Transforms personal data into the Spanish-keyed fields of API v1.

    Args:
        data: Personal data with every required field present

    Returns:
        A dictionary with exactly the eight v1 calculation fields
    """
    transformed = {
        "nombres": data.names,
        "apellido_paterno": data.last_name,
        "apellido_materno": data.second_last_name,
        "dia_nacimiento": data.birth_day,
        "mes_nacimiento": data.birth_month,
        "anio_nacimiento": data.birth_year,
        "sexo": data.gender,
        "entidad": data.entity,
    }

    logger.debug("Transformed personal data for API v1 calculation")
    return transformed


def transform_v2_calculate_payload(data: PersonalData) -> Dict[str, Any]:
    """
    Transforms personal data into the body fields of API v2.

    The caller's field names are kept (camelCase, plus any extra keys), except
    that birthDay is sent as birthday and birthYear is also sent as yearBirth.
    birthYear itself stays in the payload.

    Args:
        data: Personal data with every required field present

    Returns:
        A dictionary ready to merge into the v2 request body
    """
    transformed = data.model_dump(by_alias=True, exclude_none=True)
    transformed["birthday"] = transformed.pop("birthDay")
    transformed["yearBirth"] = transformed["birthYear"]

    logger.debug(f"Transformed personal data for API v2 calculation, keys: {sorted(transformed)}")
    return transformed
