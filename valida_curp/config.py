"""
Configuration settings for the ValidaCurp client
Endpoints, library identification and environment lookups
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Remote API endpoints
URL_V1 = "https://api.valida-curp.com.mx/curp/"
URL_V2 = "https://version.valida-curp.com.mx/api/v2/curp/"

# Library identification sent with every request
LIBRARY_TYPE = "python"
LIBRARY_VERSION = "1.0.0"

# Environment variable holding the project token
TOKEN_ENV_VAR = "TOKEN_VALIDA_API_CURP"

DEFAULT_VERSION = 2

# Transport timeout in seconds when VALIDA_CURP_TIMEOUT is not set
DEFAULT_TIMEOUT = 10.0


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


def get_default_timeout() -> float:
    """Get the transport timeout in seconds"""
    value = get_env_var("VALIDA_CURP_TIMEOUT", "")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Invalid VALIDA_CURP_TIMEOUT value: {value}")
