"""Validation utilities for JSON input and tagged attribute shape."""

import json
from collections.abc import Mapping
from typing import Any, List, Tuple
from ..types import (
    AttributeKey,
    ErrorType,
    KEY_PRECEDENCE,
    ValidationError,
    ValidationResult,
)
from ..models.number_value import is_numeric_text


RECOGNISED_KEYS = {key.value for key in KEY_PRECEDENCE}


class ValidationUtils:
    """Utility class for validating input documents and attribute structures."""

    @staticmethod
    def validate_json_string(json_string: str, require_object: bool = True) -> ValidationResult:
        """
        Validate JSON string syntax and root type.

        Args:
            json_string: JSON string to validate
            require_object: Require the root to be a JSON object

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if require_object and not isinstance(data, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be an object, got {type(data).__name__}",
                location="root"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_record(record: Any) -> ValidationResult:
        """
        Validate a map of tagged attributes.

        Args:
            record: Mapping of attribute name to tagged attribute

        Returns:
            ValidationResult with validation details
        """
        if not isinstance(record, Mapping):
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Record must be a mapping, got {type(record).__name__}",
                    location="root"
                )],
                warnings=[]
            )

        errors = []
        warnings = []
        for name, attribute in record.items():
            attr_errors, attr_warnings = ValidationUtils._check_attribute(attribute, str(name))
            errors.extend(attr_errors)
            warnings.extend(attr_warnings)

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)

    @staticmethod
    def validate_attribute(attribute: Any) -> ValidationResult:
        """
        Validate a single tagged attribute, recursing into M and L.

        Args:
            attribute: Tagged attribute to validate

        Returns:
            ValidationResult with validation details
        """
        errors, warnings = ValidationUtils._check_attribute(attribute, "$")
        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)

    @staticmethod
    def _check_attribute(attribute: Any, location: str) -> Tuple[List[ValidationError], List[str]]:
        """Check one attribute and its children."""
        errors = []
        warnings = []

        if not isinstance(attribute, Mapping):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Attribute must be a mapping, got {type(attribute).__name__}",
                location=location
            ))
            return errors, warnings

        keys = [key for key in attribute if key in RECOGNISED_KEYS]
        unknown = [key for key in attribute if key not in RECOGNISED_KEYS]

        if AttributeKey.UNKNOWN.value in unknown:
            unknown.remove(AttributeKey.UNKNOWN.value)
            warnings.append(f"Forward-compatible {AttributeKey.UNKNOWN.value} variant at {location} "
                            f"will be ignored")
        if unknown:
            warnings.append(f"Unknown attribute keys {sorted(map(str, unknown))} at {location}")

        if not keys:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="Attribute has no recognised type key",
                location=location
            ))
            return errors, warnings

        if len(keys) > 1:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Attribute has multiple type keys: {sorted(keys)}",
                location=location
            ))

        for key in keys:
            child_errors, child_warnings = ValidationUtils._check_payload(
                AttributeKey(key), attribute[key], location
            )
            errors.extend(child_errors)
            warnings.extend(child_warnings)

        return errors, warnings

    @staticmethod
    def _check_payload(key: AttributeKey, payload: Any,
                       location: str) -> Tuple[List[ValidationError], List[str]]:
        """Check the payload stored under a single attribute key."""
        errors = []
        warnings = []
        path = f"{location}.{key.value}"

        if key is AttributeKey.M:
            if not isinstance(payload, Mapping):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"M payload must be a mapping, got {type(payload).__name__}",
                    location=path
                ))
            else:
                for name, child in payload.items():
                    child_errors, child_warnings = ValidationUtils._check_attribute(
                        child, f"{path}.{name}"
                    )
                    errors.extend(child_errors)
                    warnings.extend(child_warnings)

        elif key is AttributeKey.L:
            if not isinstance(payload, list):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"L payload must be a list, got {type(payload).__name__}",
                    location=path
                ))
            else:
                for index, child in enumerate(payload):
                    child_errors, child_warnings = ValidationUtils._check_attribute(
                        child, f"{path}[{index}]"
                    )
                    errors.extend(child_errors)
                    warnings.extend(child_warnings)

        elif key in (AttributeKey.SS, AttributeKey.NS, AttributeKey.BS):
            if not isinstance(payload, list):
                errors.append(ValidationError(
                    type=ErrorType.INVALID_SET,
                    message=f"{key.value} payload must be a list, got {type(payload).__name__}",
                    location=path
                ))
            elif key is AttributeKey.SS and not all(isinstance(item, str) for item in payload):
                errors.append(ValidationError(
                    type=ErrorType.INVALID_SET,
                    message="SS elements must be strings",
                    location=path
                ))
            elif key is AttributeKey.NS:
                for index, item in enumerate(payload):
                    if not is_numeric_text(item):
                        errors.append(ValidationError(
                            type=ErrorType.INVALID_NUMBER,
                            message=f"NS element {item!r} is not numeric",
                            location=f"{path}[{index}]"
                        ))

        elif key is AttributeKey.N:
            if not is_numeric_text(payload):
                errors.append(ValidationError(
                    type=ErrorType.INVALID_NUMBER,
                    message=f"N payload {payload!r} is not numeric",
                    location=path
                ))

        elif key is AttributeKey.S:
            if not isinstance(payload, str):
                warnings.append(f"S payload at {path} is not a string and will be stringified")

        elif key is AttributeKey.NULL:
            if payload is not True:
                warnings.append(f"NULL payload at {path} should be true")

        elif key is AttributeKey.BOOL:
            if not isinstance(payload, bool):
                warnings.append(f"BOOL payload at {path} is not a boolean")

        return errors, warnings
