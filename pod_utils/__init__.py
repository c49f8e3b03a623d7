"""
POD Utilities
Signing, schema validation, ids, object trimming and Jalali calendar helpers
shared by POD services
"""

from .constants import SERVICE_VERSION as __version__

# Core exports
from .config import UtilitiesConfig, get_utilities_config, load_utilities_config
from .exceptions import (
    PodError, AppError, PodUtilitiesError,
    CryptoError, InvalidKeyError, UnsupportedAlgorithmError,
    UnsupportedEncodingError, SignatureDecodeError,
    InvalidSchemaError, InvalidDateError,
)
from .logging_config import configure_logging

# Cryptography
from .crypto import sign, verify

# Schema validation
from .validation import ValidationResult, validate

# Utilities
from .utils import (
    unique_id, is_unique_id,
    clone, extract_keys, trim_object, trim_nested_object,
    to_shamsi_date_string, to_shamsi_datetime_string, shamsi_to_gregorian_string,
    to_datetime_string, to_datetime_string_utc,
    to_datetime_string_to_min, to_datetime_string_to_min_utc,
    invalid_config_param,
)

__all__ = [
    # Config
    "UtilitiesConfig",
    "get_utilities_config",
    "load_utilities_config",
    "configure_logging",

    # Errors
    "PodError",
    "AppError",
    "PodUtilitiesError",
    "CryptoError",
    "InvalidKeyError",
    "UnsupportedAlgorithmError",
    "UnsupportedEncodingError",
    "SignatureDecodeError",
    "InvalidSchemaError",
    "InvalidDateError",

    # Crypto
    "sign",
    "verify",

    # Validation
    "ValidationResult",
    "validate",

    # Utils
    "unique_id",
    "is_unique_id",
    "clone",
    "extract_keys",
    "trim_object",
    "trim_nested_object",
    "to_shamsi_date_string",
    "to_shamsi_datetime_string",
    "shamsi_to_gregorian_string",
    "to_datetime_string",
    "to_datetime_string_utc",
    "to_datetime_string_to_min",
    "to_datetime_string_to_min_utc",
    "invalid_config_param",
]
