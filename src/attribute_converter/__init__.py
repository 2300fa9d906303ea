"""
Attribute Converter - Bidirectional tagged attribute conversion.

Converts between native Python values and the single-key tagged
attribute representation used by document-style key/value stores.
"""

__version__ = "1.0.0"

from .converter import (
    AttributeConverter,
    marshal_value,
    marshal_record,
    unmarshal_value,
    unmarshal_record,
)
from .models import ConverterOptions, NumberValue, TypedSet
from .type_detector import TypeDetector
from .types import (
    UNDEFINED,
    ConversionError,
    DateFormat,
    InvalidSetError,
    UnconvertibleTypeError,
    ValueType,
)

__all__ = [
    "AttributeConverter",
    "marshal_value",
    "marshal_record",
    "unmarshal_value",
    "unmarshal_record",
    "ConverterOptions",
    "NumberValue",
    "TypedSet",
    "TypeDetector",
    "UNDEFINED",
    "ConversionError",
    "DateFormat",
    "InvalidSetError",
    "UnconvertibleTypeError",
    "ValueType",
]
