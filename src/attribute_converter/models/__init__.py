"""Data models for the Attribute Converter."""

from .converter_options import ConverterOptions
from .number_value import NumberValue
from .typed_set import TypedSet

__all__ = ["ConverterOptions", "NumberValue", "TypedSet"]
