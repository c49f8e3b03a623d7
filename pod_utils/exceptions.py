"""
Custom Exceptions for POD Utilities

Provides the application error carried across POD services (PodError)
and the hierarchy of errors the utilities themselves raise.
"""

from typing import Optional, Dict, Any, Union

from .constants import ErrorCodes


class PodError(Exception):
    """
    Error type shared by all POD services.

    Callers construct and raise it when they detect a failure; the
    utilities never raise it themselves.

    Attributes:
        code: Upstream error code
        message: Human or machine readable message
        original_result: Original error payload received from a server
    """

    def __init__(
        self,
        code: int,
        message: Union[str, Dict[str, Any]],
        original_result: Optional[Dict[str, Any]] = None
    ):
        self._code = code
        self._message = message
        self._original_result = original_result
        super().__init__(code, message, original_result)

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> Union[str, Dict[str, Any]]:
        return self._message

    @property
    def original_result(self) -> Optional[Dict[str, Any]]:
        return self._original_result

    def __str__(self) -> str:
        return str(self._message)

    def __repr__(self) -> str:
        return f"PodError(code={self._code!r}, message={self._message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses"""
        return {
            "code": self._code,
            "message": self._message,
            "original_result": self._original_result,
        }


AppError = PodError


class PodUtilitiesError(Exception):
    """
    Base exception for errors raised by the utility functions.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCodes.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# CRYPTO ERRORS
# =============================================================================

class CryptoError(PodUtilitiesError):
    """Base exception for signing and verification errors"""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCodes.CRYPTO_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class InvalidKeyError(CryptoError):
    """Raised when key material cannot be loaded or has the wrong type"""

    def __init__(
        self,
        message: str = "Invalid key material",
        reason: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if reason:
            details["reason"] = reason
        super().__init__(message, ErrorCodes.INVALID_KEY, details)


class UnsupportedAlgorithmError(CryptoError):
    """Raised when the signature algorithm name is not recognized"""

    def __init__(self, algorithm: str):
        super().__init__(
            message=f"Unsupported signature algorithm: {algorithm}",
            error_code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details={"algorithm": algorithm}
        )


class UnsupportedEncodingError(CryptoError):
    """Raised when the signature encoding is not recognized"""

    def __init__(self, encoding: str):
        super().__init__(
            message=f"Unsupported signature encoding: {encoding}",
            error_code=ErrorCodes.UNSUPPORTED_ENCODING,
            details={"encoding": encoding}
        )


class SignatureDecodeError(CryptoError):
    """Raised when a signature cannot be decoded under the given encoding"""

    def __init__(
        self,
        encoding: str,
        reason: Optional[str] = None
    ):
        details: Dict[str, Any] = {"encoding": encoding}
        if reason:
            details["reason"] = reason
        super().__init__(
            message=f"Signature is not valid {encoding}",
            error_code=ErrorCodes.SIGNATURE_DECODE_ERROR,
            details=details
        )


# =============================================================================
# SCHEMA ERRORS
# =============================================================================

class InvalidSchemaError(PodUtilitiesError):
    """Raised when a schema is itself invalid"""

    def __init__(
        self,
        message: str,
        schema_path: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if schema_path:
            details["schema_path"] = schema_path
        super().__init__(f"Invalid schema: {message}", ErrorCodes.INVALID_SCHEMA, details)


# =============================================================================
# CALENDAR ERRORS
# =============================================================================

class InvalidDateError(PodUtilitiesError):
    """Raised when a date value cannot be converted"""

    def __init__(
        self,
        value: Any,
        reason: Optional[str] = None
    ):
        details: Dict[str, Any] = {"value": str(value)}
        if reason:
            details["reason"] = reason
        super().__init__(f"Invalid date: {value}", ErrorCodes.INVALID_DATE, details)
