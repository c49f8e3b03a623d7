"""
Schema validation for POD services
Checks data against JSON Schema documents and reports violations as values
"""

import json
from functools import lru_cache
from typing import Any, Dict, List, Optional
import structlog

from jsonschema import validators
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from pydantic import BaseModel, Field, model_validator

from .config import get_utilities_config
from .constants import SchemaDefaults
from .exceptions import InvalidSchemaError

logger = structlog.get_logger(__name__)


class ValidationResult(BaseModel):
    """Outcome of a schema check; errors is set iff status is False"""

    status: bool = Field(default=True)
    errors: Optional[List[Dict[str, Any]]] = Field(default=None)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _errors_match_status(self) -> "ValidationResult":
        if self.status and self.errors is not None:
            raise ValueError("errors must be None when status is True")
        if not self.status and self.errors is None:
            raise ValueError("errors must be set when status is False")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Plain {status, errors} mapping"""
        return {"status": self.status, "errors": self.errors}


def _build_validator(schema: Dict[str, Any]) -> Validator:
    default_cls = validators.validator_for(
        {"$schema": get_utilities_config().json_schema_draft},
        default=validators.Draft202012Validator,
    )
    cls = validators.validator_for(schema, default=default_cls)
    try:
        cls.check_schema(schema)
    except SchemaError as e:
        path = "/".join(str(part) for part in e.absolute_schema_path)
        raise InvalidSchemaError(e.message, schema_path=path or None) from e
    return cls(schema, format_checker=cls.FORMAT_CHECKER)


@lru_cache(maxsize=SchemaDefaults.CACHE_SIZE)
def _cached_validator(schema_json: str) -> Validator:
    return _build_validator(json.loads(schema_json))


def get_validator(schema: Dict[str, Any]) -> Validator:
    """Compiled validator for a schema, cached by its canonical JSON form"""
    try:
        schema_json = json.dumps(schema, sort_keys=True)
    except (TypeError, ValueError):
        return _build_validator(schema)
    return _cached_validator(schema_json)


def _describe(error) -> Dict[str, Any]:
    return {
        "instance_path": "".join(f"/{part}" for part in error.absolute_path),
        "schema_path": "#" + "".join(f"/{part}" for part in error.absolute_schema_path),
        "keyword": error.validator,
        "message": error.message,
    }


def validate(schema: Dict[str, Any], data: Any) -> ValidationResult:
    """
    Check data against a JSON Schema

    Args:
        schema: JSON Schema document
        data: Value to check

    Returns:
        ValidationResult with status True and no errors when data conforms,
        otherwise status False and the list of violations

    Raises:
        InvalidSchemaError: If the schema itself is invalid
    """
    validator = get_validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))

    if not errors:
        return ValidationResult(status=True, errors=None)

    logger.debug("Schema validation failed", error_count=len(errors))
    return ValidationResult(status=False, errors=[_describe(error) for error in errors])
