"""Typed set model for string, number and binary sets."""

from typing import Any, Iterable, Iterator, List, Optional
from ..types import DeclaredType, InvalidSetError, ValueType
from ..type_detector import TypeDetector


MEMBER_TYPE_TO_SET_TYPE = {
    ValueType.STRING: ValueType.STRING,
    ValueType.NUMBER: ValueType.NUMBER,
    ValueType.NUMBER_VALUE: ValueType.NUMBER,
    ValueType.BINARY: ValueType.BINARY,
}

SET_ELEMENT_TYPES = (ValueType.STRING, ValueType.NUMBER, ValueType.BINARY)


class TypedSet(DeclaredType):
    """
    Ordered collection of homogeneous string, number or binary values.

    The element type is inferred from the first element unless given
    explicitly. Later elements are not checked against it.
    """

    def __init__(self, values: Iterable[Any], element_type: Optional[ValueType] = None,
                 detector: Optional[TypeDetector] = None):
        """
        Initialize the typed set.

        Args:
            values: Elements of the set, in order
            element_type: Optional explicit element type
            detector: Optional TypeDetector used for inference

        Raises:
            InvalidSetError: If the element type cannot be determined
        """
        self.values: List[Any] = list(values)
        if element_type is None:
            self.type = self._detect_type(detector or TypeDetector())
        elif element_type in SET_ELEMENT_TYPES:
            self.type = element_type
        else:
            raise InvalidSetError(f"Unsupported set element type: {element_type}")

    def _detect_type(self, detector: TypeDetector) -> ValueType:
        """Infer the element type from the first element."""
        if not self.values:
            raise InvalidSetError("Cannot infer the element type of an empty set")

        set_type = MEMBER_TYPE_TO_SET_TYPE.get(detector.detect(self.values[0]))
        if set_type is None:
            raise InvalidSetError(context=self.values[0])
        return set_type

    @property
    def declared_type(self) -> ValueType:
        return ValueType.SET

    def to_json(self) -> List[Any]:
        """Render only the underlying values when serialising to JSON."""
        return self.values

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedSet):
            return NotImplemented
        return self.type == other.type and self.values == other.values

    __hash__ = None

    def __repr__(self) -> str:
        return f"TypedSet({self.values!r}, element_type={self.type})"
