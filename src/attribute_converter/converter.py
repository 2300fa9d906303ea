"""Main Attribute Converter implementation."""

import logging
from typing import Any, Dict, Mapping, Optional, Union
from .types import (
    AttributeConverterInterface,
    AttributeKey,
    AttributeMap,
    AttributeValue,
    ConversionError,
    ErrorType,
)
from .models import ConverterOptions
from .processors import Marshaller, Unmarshaller
from .type_detector import TypeDetector


OptionsLike = Union[ConverterOptions, Mapping[str, Any], None]


class AttributeConverter(AttributeConverterInterface):
    """
    Main implementation of the Attribute Converter interface.

    Provides bidirectional conversion between native Python values and
    the tagged attribute representation.
    """

    def __init__(self, options: OptionsLike = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the Attribute Converter.

        Args:
            options: Default ConverterOptions (or a mapping of option values)
                used when a call does not pass its own
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.options = self._resolve_options(options) or ConverterOptions()

        self.detector = TypeDetector(self.logger)
        self.marshaller = Marshaller(self.detector, self.logger)
        self.unmarshaller = Unmarshaller(self.detector, self.logger)

    @staticmethod
    def _resolve_options(options: OptionsLike) -> Optional[ConverterOptions]:
        if options is None or isinstance(options, ConverterOptions):
            return options
        return ConverterOptions.from_dict(dict(options))

    def _options_for_call(self, options: OptionsLike) -> ConverterOptions:
        return self._resolve_options(options) or self.options

    def input(self, data: Any, options: OptionsLike = None) -> AttributeValue:
        """
        Convert a native value to its tagged attribute form.

        Args:
            data: The value to convert
            options: Optional per-call options

        Returns:
            Tagged attribute

        Raises:
            UnconvertibleTypeError: If the value (or a nested value) is a
                function or undefined
        """
        return self.marshaller.process(data, self._options_for_call(options))

    def marshall(self, data: Mapping[str, Any], options: OptionsLike = None) -> AttributeMap:
        """
        Convert a native record into a tagged attribute map.

        Example:
            >>> AttributeConverter().marshall({"name": "foo", "count": 3})
            {'name': {'S': 'foo'}, 'count': {'N': '3'}}
        """
        attribute = self.input(data, options)
        if AttributeKey.M.value not in attribute:
            raise ConversionError(
                f"Records must convert to a map attribute, got {list(attribute)}",
                ErrorType.STRUCTURE,
                context=data,
            )
        return attribute[AttributeKey.M.value]

    def output(self, data: AttributeValue, options: OptionsLike = None) -> Any:
        """
        Convert a tagged attribute to its native value.

        Args:
            data: The tagged attribute
            options: Optional per-call options

        Returns:
            Native value (UNDEFINED when no recognised key is present)
        """
        return self.unmarshaller.process(data, self._options_for_call(options))

    def unmarshall(self, data: AttributeMap, options: OptionsLike = None) -> Dict[str, Any]:
        """
        Convert a tagged attribute map into a native record.

        Example:
            >>> AttributeConverter().unmarshall({"name": {"S": "foo"}, "count": {"N": "3"}})
            {'name': 'foo', 'count': 3}
        """
        return self.output({AttributeKey.M.value: data}, options)


_default_converter = AttributeConverter()


def marshal_value(value: Any, options: OptionsLike = None) -> AttributeValue:
    """Convert a native value to a tagged attribute."""
    return _default_converter.input(value, options)


def marshal_record(value: Mapping[str, Any], options: OptionsLike = None) -> AttributeMap:
    """Convert a native record to a map of tagged attributes."""
    return _default_converter.marshall(value, options)


def unmarshal_value(attr: AttributeValue, options: OptionsLike = None) -> Any:
    """Convert a tagged attribute to a native value."""
    return _default_converter.output(attr, options)


def unmarshal_record(record: AttributeMap, options: OptionsLike = None) -> Dict[str, Any]:
    """Convert a map of tagged attributes to a native record."""
    return _default_converter.unmarshall(record, options)
