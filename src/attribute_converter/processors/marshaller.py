"""Marshaller converting native values into tagged attributes."""

import logging
import math
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional
from ..types import (
    AttributeKey,
    AttributeProcessorInterface,
    AttributeValue,
    DateFormat,
    InvalidSetError,
    UnconvertibleTypeError,
    ValueType,
)
from ..models import ConverterOptions, TypedSet
from ..type_detector import TypeDetector


class Marshaller(AttributeProcessorInterface):
    """
    Processor for the native -> tagged attribute direction.

    Dispatches on the TypeDetector tag of each value and recurses into
    mappings, sequences and custom objects.
    """

    def __init__(self, detector: Optional[TypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the marshaller.

        Args:
            detector: Optional TypeDetector instance
            logger: Optional logger instance
        """
        self.detector = detector or TypeDetector()
        self.logger = logger or logging.getLogger(__name__)

    def process(self, data: Any, options: Optional[ConverterOptions] = None) -> AttributeValue:
        """
        Convert a native value to its tagged attribute form.

        Args:
            data: Value to convert
            options: Optional ConverterOptions

        Returns:
            Tagged attribute with exactly one key

        Raises:
            UnconvertibleTypeError: If the value is undefined or a function
            InvalidSetError: If a builtin set cannot be typed
        """
        options = options or ConverterOptions()
        value_type = self.detector.detect(data)

        if value_type is ValueType.DATE:
            return self._format_date(data, options)
        elif value_type is ValueType.OBJECT:
            return self._format_map(data.items(), options)
        elif value_type is ValueType.ARRAY:
            return self._format_list(data, options)
        elif value_type is ValueType.SET:
            return self._format_set(data, options)
        elif value_type is ValueType.STRING:
            if len(data) == 0 and options.convert_empty_values:
                return self._null()
            return {AttributeKey.S.value: data}
        elif value_type in (ValueType.NUMBER, ValueType.NUMBER_VALUE):
            return {AttributeKey.N.value: str(data)}
        elif value_type is ValueType.BINARY:
            if self.detector.binary_length(data) == 0 and options.convert_empty_values:
                return self._null()
            return {AttributeKey.B.value: data}
        elif value_type is ValueType.BOOLEAN:
            return {AttributeKey.BOOL.value: data}
        elif value_type is ValueType.NULL:
            return self._null()
        elif value_type is ValueType.CUSTOM:
            return self._format_map(self.detector.get_attributes(data).items(), options)

        raise UnconvertibleTypeError(self.detector.type_name(data), context=data)

    def _null(self) -> AttributeValue:
        return {AttributeKey.NULL.value: True}

    def _format_map(self, items, options: ConverterOptions) -> AttributeValue:
        """Marshal key/value pairs into an M attribute, dropping undefined values."""
        result: Dict[str, AttributeValue] = {}

        for key, value in items:
            if self.detector.detect(value) is ValueType.UNDEFINED:
                self.logger.debug(f"Omitting undefined property {key!r} from map")
                continue
            result[str(key)] = self.process(value, options)

        return {AttributeKey.M.value: result}

    def _format_list(self, data, options: ConverterOptions) -> AttributeValue:
        """Marshal a sequence into an L attribute, preserving order."""
        return {AttributeKey.L.value: [self.process(item, options) for item in data]}

    def _format_date(self, data: date, options: ConverterOptions) -> AttributeValue:
        """Marshal a date as an ISO-8601 or unix-seconds string."""
        if not isinstance(data, datetime):
            data = datetime.combine(data, time())
        if data.tzinfo is None:
            data = data.replace(tzinfo=timezone.utc)
        data = data.astimezone(timezone.utc)

        if options.date_format is DateFormat.UNIX:
            return {AttributeKey.S.value: str(math.floor(data.timestamp()))}

        iso = data.replace(tzinfo=None).isoformat(timespec="milliseconds")
        return {AttributeKey.S.value: f"{iso}Z"}

    def _format_set(self, data: Any, options: ConverterOptions) -> AttributeValue:
        """Marshal a typed set (or builtin set) into SS, NS or BS."""
        if not isinstance(data, TypedSet):
            if not data and options.convert_empty_values:
                return self._null()
            data = TypedSet(data, detector=self.detector)

        values = list(data.values)
        if options.convert_empty_values:
            values = self._filter_empty_set_values(data)
            if len(values) == 0:
                return self._null()

        if data.type is ValueType.STRING:
            return {AttributeKey.SS.value: values}
        elif data.type is ValueType.BINARY:
            return {AttributeKey.BS.value: values}
        elif data.type is ValueType.NUMBER:
            return {AttributeKey.NS.value: [str(value) for value in values]}

        raise InvalidSetError(f"Unsupported set element type: {data.type}")

    def _filter_empty_set_values(self, data: TypedSet) -> List[Any]:
        """Drop zero-length elements from string and binary sets."""
        if data.type is ValueType.STRING:
            return [value for value in data.values if len(value) != 0]
        elif data.type is ValueType.BINARY:
            return [value for value in data.values
                    if self.detector.binary_length(value) != 0]
        return data.values
