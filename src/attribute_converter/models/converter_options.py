"""Conversion options model with validation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from ..types import DateFormat


@dataclass
class ConverterOptions:
    """
    Options recognised by both conversion directions.

    Attributes:
        convert_empty_values: Encode empty strings, binaries and sets as NULL
        wrap_numbers: Decode N/NS into NumberValue instead of native numbers
        date_format: Encoding used for date values when marshalling
    """

    convert_empty_values: bool = False
    wrap_numbers: bool = False
    date_format: Union[DateFormat, str] = DateFormat.ISO

    def __post_init__(self):
        """Validate options after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate option values."""
        if not isinstance(self.convert_empty_values, bool):
            raise ValueError("convert_empty_values must be a boolean")

        if not isinstance(self.wrap_numbers, bool):
            raise ValueError("wrap_numbers must be a boolean")

        try:
            self.date_format = DateFormat(self.date_format)
        except ValueError:
            raise ValueError(
                f"date_format must be one of {[f.value for f in DateFormat]}, "
                f"got {self.date_format!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a camelCase dictionary."""
        return {
            "convertEmptyValues": self.convert_empty_values,
            "wrapNumbers": self.wrap_numbers,
            "dateFormat": self.date_format.value,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ConverterOptions':
        """
        Create options from a dictionary.

        Accepts both camelCase and snake_case keys; missing keys take
        their defaults.

        Args:
            data: Dictionary of option values

        Returns:
            ConverterOptions instance
        """
        data = data or {}
        return cls(
            convert_empty_values=data.get(
                "convertEmptyValues", data.get("convert_empty_values", False)
            ),
            wrap_numbers=data.get("wrapNumbers", data.get("wrap_numbers", False)),
            date_format=data.get("dateFormat", data.get("date_format", DateFormat.ISO)),
        )
