"""
Tests for schema validation
"""

import pytest
from pydantic import ValidationError

from pod_utils.exceptions import InvalidSchemaError
from pod_utils.validation import ValidationResult, get_validator, validate

SCHEMA = {
    "type": "object",
    "properties": {
        "test": {
            "type": "string"
        }
    },
    "required": ["test"],
    "additionalProperties": False
}


class TestValidate:
    """Test validate()"""

    def test_conforming_data(self):
        """Test conforming data"""
        result = validate(SCHEMA, {"test": "test"})

        assert result.status is True
        assert result.errors is None
        assert result.to_dict() == {"status": True, "errors": None}

    def test_wrong_type(self):
        """Test wrong type"""
        result = validate(SCHEMA, {"test": 125})

        assert result.status is False
        assert result.errors is not None
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error["instance_path"] == "/test"
        assert error["keyword"] == "type"
        assert error["schema_path"] == "#/properties/test/type"

    def test_all_violations_reported(self):
        """Test all violations reported"""
        result = validate(SCHEMA, {"extra": 1})

        assert result.status is False
        keywords = {error["keyword"] for error in result.errors}
        assert keywords == {"required", "additionalProperties"}
        assert all(error["instance_path"] == "" for error in result.errors)

    def test_non_object_data_does_not_raise(self):
        """Test non object data does not raise"""
        result = validate(SCHEMA, ["not", "an", "object"])

        assert result.status is False

    def test_formats_are_checked(self):
        """Test formats are checked"""
        schema = {"type": "string", "format": "email"}

        assert validate(schema, "user@example.com").status
        assert not validate(schema, "not-an-email").status

    def test_declared_draft_is_honoured(self):
        """Test declared draft is honoured"""
        schema = {
            "$schema": "http://json-schema.org/draft-04/schema#",
            "type": "integer",
            "maximum": 10,
            "exclusiveMaximum": True,
        }

        assert validate(schema, 9).status
        assert not validate(schema, 10).status

    def test_invalid_schema(self):
        """Test invalid schema"""
        with pytest.raises(InvalidSchemaError) as exc_info:
            validate({"type": 5}, {})

        assert exc_info.value.error_code == "INVALID_SCHEMA"

    def test_validator_is_cached(self):
        """Test validator is cached"""
        same_schema = dict(reversed(list(SCHEMA.items())))

        assert get_validator(SCHEMA) is get_validator(same_schema)


class TestValidationResult:
    """Test the result model invariants"""

    def test_failure_requires_errors(self):
        """Test failure requires errors"""
        with pytest.raises(ValidationError):
            ValidationResult(status=False, errors=None)

    def test_success_rejects_errors(self):
        """Test success rejects errors"""
        with pytest.raises(ValidationError):
            ValidationResult(status=True, errors=[{"message": "x"}])

    def test_result_is_frozen(self):
        """Test result is frozen"""
        result = ValidationResult()

        with pytest.raises(ValidationError):
            result.status = False
