"""JSON transport for tagged attributes and native records."""

from .attribute_json import AttributeJSONCodec

__all__ = ["AttributeJSONCodec"]
