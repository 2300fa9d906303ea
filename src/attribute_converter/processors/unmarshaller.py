"""Unmarshaller converting tagged attributes into native values."""

import logging
from typing import Any, Dict, List, Optional, Union
from ..types import (
    AttributeKey,
    AttributeProcessorInterface,
    AttributeValue,
    ConversionError,
    ErrorType,
    KEY_PRECEDENCE,
    UNDEFINED,
    ValueType,
)
from ..models import ConverterOptions, NumberValue, TypedSet
from ..models.number_value import parse_number
from ..type_detector import TypeDetector


class Unmarshaller(AttributeProcessorInterface):
    """
    Processor for the tagged attribute -> native direction.

    Only one key of an attribute is honoured; when several are present
    the first one in KEY_PRECEDENCE wins. Attributes without any
    recognised key decode to UNDEFINED instead of raising.
    """

    def __init__(self, detector: Optional[TypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the unmarshaller.

        Args:
            detector: Optional TypeDetector instance
            logger: Optional logger instance
        """
        self.detector = detector or TypeDetector()
        self.logger = logger or logging.getLogger(__name__)
        self._handlers = {
            AttributeKey.M: self._convert_map,
            AttributeKey.L: self._convert_list,
            AttributeKey.SS: self._convert_string_set,
            AttributeKey.NS: self._convert_number_set,
            AttributeKey.BS: self._convert_binary_set,
            AttributeKey.S: self._convert_string,
            AttributeKey.N: self._convert_number_attribute,
            AttributeKey.B: lambda value, options: self.to_binary(value),
            AttributeKey.BOOL: self._convert_bool,
            AttributeKey.NULL: lambda value, options: None,
        }

    def process(self, data: AttributeValue, options: Optional[ConverterOptions] = None) -> Any:
        """
        Convert a tagged attribute to its native value.

        Args:
            data: Tagged attribute
            options: Optional ConverterOptions

        Returns:
            Native value, or UNDEFINED if no recognised key is present
        """
        options = options or ConverterOptions()
        keys = self.present_keys(data)

        if not keys:
            self.logger.debug(f"No recognised attribute key in {list(data or ())}")
            return UNDEFINED
        if len(keys) > 1:
            self.logger.debug(
                f"Attribute has multiple keys {[key.value for key in keys]}, using {keys[0].value}"
            )

        key = keys[0]
        return self._handlers[key](data[key.value], options)

    @staticmethod
    def present_keys(data: Any) -> List[AttributeKey]:
        """List the recognised keys of an attribute in precedence order."""
        if not isinstance(data, dict):
            return []
        return [key for key in KEY_PRECEDENCE if key.value in data]

    def _convert_map(self, value: Optional[Dict[str, Any]], options: ConverterOptions) -> Dict[str, Any]:
        result = {}
        for key, item in (value or {}).items():
            converted = self.process(item, options)
            if converted is not UNDEFINED:
                result[key] = converted
        return result

    def _convert_list(self, value: Optional[List[Any]], options: ConverterOptions) -> List[Any]:
        return [self.process(item, options) for item in (value or [])]

    def _convert_string_set(self, value: Optional[List[Any]], options: ConverterOptions) -> TypedSet:
        return TypedSet([str(item) for item in (value or [])],
                        element_type=ValueType.STRING)

    def _convert_number_set(self, value: Optional[List[Any]], options: ConverterOptions) -> TypedSet:
        return TypedSet([self.convert_number(item, options.wrap_numbers) for item in (value or [])],
                        element_type=ValueType.NUMBER)

    def _convert_binary_set(self, value: Optional[List[Any]], options: ConverterOptions) -> TypedSet:
        return TypedSet([self.to_binary(item) for item in (value or [])],
                        element_type=ValueType.BINARY)

    def _convert_string(self, value: Any, options: ConverterOptions) -> str:
        return str(value)

    def _convert_number_attribute(self, value: Any, options: ConverterOptions) -> Any:
        if not value:
            return None
        return self.convert_number(value, options.wrap_numbers)

    def _convert_bool(self, value: Any, options: ConverterOptions) -> bool:
        return value is True or str(value).lower() == "true"

    @staticmethod
    def convert_number(value: Any, wrap_numbers: bool = False) -> Union[int, float, NumberValue]:
        """
        Convert numeric text to a native number or a NumberValue.

        Args:
            value: Numeric text
            wrap_numbers: Keep the exact text in a NumberValue

        Returns:
            NumberValue if wrap_numbers is set, otherwise int or float
        """
        if wrap_numbers:
            return NumberValue(value)
        return parse_number(str(value))

    def to_binary(self, value: Any) -> Any:
        """
        Coerce a B payload to binary.

        Existing byte buffers are returned as-is, without copying. Strings
        are UTF-8 encoded and sequences of byte values are packed.
        """
        if self.detector.is_binary(value):
            return value
        if isinstance(value, int):
            raise ConversionError(
                f"B payload must be binary, text or a sequence of byte values, got {value!r}",
                ErrorType.STRUCTURE,
                context=value
            )
        if not value:
            return b""
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)
