"""Tests for validation utilities."""

import pytest
from attribute_converter.utils.validation import ValidationUtils
from attribute_converter.types import ErrorType


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_empty_json_string(self):
        """Test validation of empty input."""
        result = ValidationUtils.validate_json_string("   ")

        assert not result.is_valid
        assert result.errors[0].message == "JSON string is empty"

    def test_validate_json_syntax_error_location(self):
        """Test that syntax errors report their location."""
        result = ValidationUtils.validate_json_string('{"a": }')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "line 1" in result.errors[0].location

    def test_validate_json_root_type(self):
        """Test root type checking."""
        result = ValidationUtils.validate_json_string('"text"')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE

    def test_valid_nested_attribute(self):
        """Test a well-formed nested attribute."""
        attribute = {"M": {
            "list": {"L": [{"S": "a"}, {"N": "1"}, {"NULL": True}]},
            "set": {"NS": ["1", "2.5"]},
            "flag": {"BOOL": False},
        }}

        result = ValidationUtils.validate_attribute(attribute)

        assert result.is_valid
        assert result.warnings == []

    def test_missing_type_key(self):
        """Test attributes without a recognised key."""
        result = ValidationUtils.validate_attribute({"M": {"a": {}}})

        assert not result.is_valid
        assert result.errors[0].location == "$.M.a"
        assert "no recognised type key" in result.errors[0].message

    def test_multiple_type_keys(self):
        """Test attributes with more than one key."""
        result = ValidationUtils.validate_attribute({"S": "a", "BOOL": True})

        assert not result.is_valid
        assert "multiple type keys" in result.errors[0].message

    def test_unknown_variant_is_warning(self):
        """Test that the forward-compatible variant only warns."""
        result = ValidationUtils.validate_attribute({"S": "a", "$unknown": ["X", 1]})

        assert result.is_valid
        assert any("$unknown" in warning for warning in result.warnings)

    def test_invalid_numbers(self):
        """Test numeric payload checks."""
        result = ValidationUtils.validate_attribute({"L": [{"N": "abc"}, {"NS": ["1", "x"]}]})

        assert not result.is_valid
        assert [error.type for error in result.errors] == [
            ErrorType.INVALID_NUMBER,
            ErrorType.INVALID_NUMBER,
        ]
        assert result.errors[1].location == "$.L[1].NS[1]"

    def test_invalid_sets(self):
        """Test set payload checks."""
        assert not ValidationUtils.validate_attribute({"SS": ["a", 1]}).is_valid
        assert not ValidationUtils.validate_attribute({"BS": "not a list"}).is_valid

    def test_invalid_container_payloads(self):
        """Test M and L payload type checks."""
        assert not ValidationUtils.validate_attribute({"M": []}).is_valid
        assert not ValidationUtils.validate_attribute({"L": {}}).is_valid

    def test_soft_payload_warnings(self):
        """Test payloads that decode but are unusual."""
        result = ValidationUtils.validate_attribute({"NULL": False})

        assert result.is_valid
        assert "should be true" in result.warnings[0]

    def test_validate_record(self, sample_user_record):
        """Test record validation."""
        assert ValidationUtils.validate_record(sample_user_record).is_valid

        result = ValidationUtils.validate_record({"a": "plain"})
        assert not result.is_valid
        assert result.errors[0].location == "a"

    def test_validate_record_requires_mapping(self):
        """Test that records must be mappings."""
        result = ValidationUtils.validate_record([{"S": "a"}])

        assert not result.is_valid
        assert result.errors[0].location == "root"
