"""Precision-preserving numeric wrapper."""

import math
import re
from dataclasses import dataclass
from typing import Any, Union
from ..types import DeclaredType, ValueType


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def is_numeric_text(text: Any) -> bool:
    """Check whether a value is plain decimal or exponent number text."""
    return isinstance(text, str) and NUMBER_PATTERN.fullmatch(text) is not None


def parse_number(text: str) -> Union[int, float]:
    """
    Parse numeric text into a native number.

    Integer text becomes an int, other number text a float. Empty text
    is 0 and anything that is not plain number text is NaN.
    """
    if text == "":
        return 0
    if not is_numeric_text(text):
        return math.nan
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return float(text)


@dataclass(frozen=True)
class NumberValue(DeclaredType):
    """
    Numeric value that keeps the exact text it was decoded from.

    Lets numbers of arbitrary size and precision survive a
    decode/encode round trip unchanged.
    """

    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", str(self.value))

    @property
    def declared_type(self) -> ValueType:
        return ValueType.NUMBER_VALUE

    def to_number(self) -> Union[int, float]:
        """Convert the underlying text to a native number."""
        return parse_number(self.value)

    def to_json(self) -> Union[int, float]:
        """Render as a number when serialising to JSON."""
        return self.to_number()

    def __str__(self) -> str:
        return self.value

    def __int__(self) -> int:
        return int(self.to_number())

    def __float__(self) -> float:
        return float(self.to_number())
