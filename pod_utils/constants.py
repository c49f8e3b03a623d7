"""
Constants for POD Utilities

Centralized tables for signing algorithms and encodings, calendar
formats, schema defaults and error codes.
"""

from typing import Final, Tuple

# =============================================================================
# SERVICE IDENTIFICATION
# =============================================================================

SERVICE_NAME: Final[str] = "pod-utils"
SERVICE_VERSION: Final[str] = "1.0.0"

# =============================================================================
# SIGNING
# =============================================================================

class SigningDefaults:
    """Default signing parameters"""
    ALGORITHM: Final[str] = "RSA-SHA256"
    ENCODING: Final[str] = "base64"


class SignatureEncodings:
    """Text encodings accepted for signatures"""
    BASE64: Final[str] = "base64"
    BASE64URL: Final[str] = "base64url"
    HEX: Final[str] = "hex"
    LATIN1: Final[str] = "latin1"
    BINARY: Final[str] = "binary"

    ALL: Final[Tuple[str, ...]] = (BASE64, BASE64URL, HEX, LATIN1, BINARY)


# Algorithm names are matched after lowercasing and dropping the key-type
# prefix or suffix, so "RSA-SHA256", "sha256", "ecdsa-with-SHA256" and
# "sha256WithRSAEncryption" all map to sha256.
ALGORITHM_PREFIXES: Final[Tuple[str, ...]] = ("rsa-", "ecdsa-with-", "dsa-with-", "dsa-")
ALGORITHM_SUFFIXES: Final[Tuple[str, ...]] = ("withrsaencryption", "withecdsa", "withdsa")

# =============================================================================
# SCHEMA VALIDATION
# =============================================================================

class SchemaDefaults:
    """Schema validation defaults"""
    DRAFT: Final[str] = "https://json-schema.org/draft/2020-12/schema"
    CACHE_SIZE: Final[int] = 256


# =============================================================================
# CALENDAR
# =============================================================================

class CalendarFormats:
    """strftime patterns for Jalali (Shamsi) and Gregorian date strings"""
    SHAMSI_DATE: Final[str] = "%Y/%m/%d"
    SHAMSI_DATETIME: Final[str] = "%Y/%m/%d %H:%M:%S"
    SHAMSI_DATETIME_TO_MIN: Final[str] = "%Y/%m/%d %H:%M"
    GREGORIAN_DATETIME: Final[str] = "%Y-%m-%d %H:%M:%S"
    GREGORIAN_DATETIME_TO_MIN: Final[str] = "%Y-%m-%d %H:%M"


# =============================================================================
# ERROR CODES
# =============================================================================

class ErrorCodes:
    """Standardized error codes for the utilities"""
    UNKNOWN_ERROR: Final[str] = "UNKNOWN_ERROR"

    # Crypto errors
    CRYPTO_ERROR: Final[str] = "CRYPTO_ERROR"
    INVALID_KEY: Final[str] = "INVALID_KEY"
    UNSUPPORTED_ALGORITHM: Final[str] = "UNSUPPORTED_ALGORITHM"
    UNSUPPORTED_ENCODING: Final[str] = "UNSUPPORTED_ENCODING"
    SIGNATURE_DECODE_ERROR: Final[str] = "SIGNATURE_DECODE_ERROR"

    # Schema errors
    INVALID_SCHEMA: Final[str] = "INVALID_SCHEMA"

    # Calendar errors
    INVALID_DATE: Final[str] = "INVALID_DATE"
