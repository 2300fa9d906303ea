"""Value classification for attribute conversion."""

import dataclasses
import inspect
import io
import logging
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional
from .types import DeclaredType, ValueType, UNDEFINED


class TypeDetector:
    """
    Classifier mapping arbitrary native values to a ValueType tag.

    Binary detection is structural: anything that exposes a byte buffer
    (or is a binary stream) counts, regardless of its concrete class.
    """

    BINARY_STREAM_TYPES = (io.BufferedIOBase, io.RawIOBase)
    NUMBER_TYPES = (int, float, Decimal)
    ARRAY_TYPES = (list, tuple)
    SET_TYPES = (set, frozenset)

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the type detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def detect(self, value: Any) -> ValueType:
        """
        Classify a native value.

        Args:
            value: Value to classify

        Returns:
            ValueType tag for the value
        """
        if isinstance(value, date):
            return ValueType.DATE
        if value is None:
            return ValueType.NULL
        if value is UNDEFINED:
            return ValueType.UNDEFINED
        if self.is_binary(value):
            return ValueType.BINARY
        if isinstance(value, DeclaredType):
            return value.declared_type
        if isinstance(value, bool):
            return ValueType.BOOLEAN
        if isinstance(value, str):
            return ValueType.STRING
        if isinstance(value, self.NUMBER_TYPES):
            return ValueType.NUMBER
        if isinstance(value, Mapping):
            return ValueType.OBJECT
        if isinstance(value, self.ARRAY_TYPES):
            return ValueType.ARRAY
        if isinstance(value, self.SET_TYPES):
            return ValueType.SET
        if inspect.isroutine(value) or inspect.isclass(value):
            return ValueType.FUNCTION
        if self.has_attributes(value):
            return ValueType.CUSTOM
        return ValueType.UNDEFINED

    def is_binary(self, value: Any) -> bool:
        """Check whether a value is a byte buffer or binary stream."""
        if isinstance(value, self.BINARY_STREAM_TYPES):
            return True
        try:
            with memoryview(value):
                return True
        except TypeError:
            return False

    def binary_length(self, value: Any) -> Optional[int]:
        """
        Get the byte length of a binary value.

        Returns:
            Number of bytes, or None for streams whose length is unknown
        """
        try:
            with memoryview(value) as view:
                return view.nbytes
        except TypeError:
            return None

    @staticmethod
    def has_attributes(value: Any) -> bool:
        """Check whether a value exposes attributes that can be traversed."""
        return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")

    @staticmethod
    def get_attributes(value: Any) -> Dict[str, Any]:
        """
        Collect the attributes of a custom object.

        Dataclass fields take priority, then the instance dictionary,
        then any populated slots across the class hierarchy.
        """
        if dataclasses.is_dataclass(value):
            return {field.name: getattr(value, field.name)
                    for field in dataclasses.fields(value)}

        if hasattr(value, "__dict__"):
            return dict(vars(value))

        attributes = {}
        for klass in type(value).__mro__:
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name not in attributes and hasattr(value, name):
                    attributes[name] = getattr(value, name)
        return attributes

    def type_name(self, value: Any) -> str:
        """Readable type name used in error messages."""
        value_type = self.detect(value)
        if value_type in (ValueType.CUSTOM, ValueType.UNDEFINED) and value is not UNDEFINED:
            return type(value).__name__
        if value_type is ValueType.FUNCTION:
            return ValueType.FUNCTION.value
        return value_type.value
