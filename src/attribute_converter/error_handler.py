"""Error handling implementation for the Attribute Converter."""

import logging
from typing import Any, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for Attribute Converter operations.

    Provides input validation, opt-in strict checking of tagged attribute
    shape, and recovery suggestions for conversion errors. The converter
    itself stays permissive; callers that want multi-key or unknown-key
    attributes rejected run validate_attribute/validate_record first.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str, require_object: bool = True) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate
            require_object: Require the root to be a JSON object

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data, require_object)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_attribute(self, attribute: Any) -> ValidationResult:
        """
        Validate the shape of a single tagged attribute.

        Args:
            attribute: Tagged attribute to validate

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_attribute(attribute)
        self._log_result(result)
        return result

    def validate_record(self, record: Any) -> ValidationResult:
        """
        Validate the shape of every attribute in a record.

        Args:
            record: Mapping of attribute name to tagged attribute

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_record(record)
        self._log_result(result)
        return result

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle conversion errors and provide recovery suggestions.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.UNCONVERTIBLE_TYPE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Remove functions and undefined values from the input, "
                               "or convert them to strings, numbers or mappings first."
            )
        elif error.error_type == ErrorType.INVALID_SET:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Sets must hold string, number or binary values. "
                               "Pass element_type explicitly for empty sets."
            )
        elif error.error_type in (ErrorType.STRUCTURE, ErrorType.SYNTAX):
            return ErrorResponse(
                can_recover=False,
                suggested_action="Check the input shape: records must be JSON objects and "
                               "every attribute must carry exactly one type key."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                partial_results=None
            )

    def _log_result(self, result: ValidationResult) -> None:
        for warning in result.warnings:
            self.logger.warning(warning)
        for error in result.errors:
            self.logger.debug(f"Validation error at {error.location}: {error.message}")
