"""Core type definitions for the Attribute Converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


AttributeValue = Dict[str, Any]
AttributeMap = Dict[str, AttributeValue]


class ValueType(Enum):
    """Enumeration of classifier tags for native values."""
    DATE = "Date"
    NULL = "Null"
    BINARY = "Binary"
    OBJECT = "Object"
    ARRAY = "Array"
    STRING = "String"
    NUMBER = "Number"
    NUMBER_VALUE = "NumberValue"
    BOOLEAN = "Boolean"
    SET = "Set"
    FUNCTION = "Function"
    CUSTOM = "Custom"
    UNDEFINED = "Undefined"


class AttributeKey(str, Enum):
    """Enumeration of tagged attribute keys."""
    S = "S"
    N = "N"
    B = "B"
    SS = "SS"
    NS = "NS"
    BS = "BS"
    M = "M"
    L = "L"
    NULL = "NULL"
    BOOL = "BOOL"
    UNKNOWN = "$unknown"


# Unmarshal honours the first key present in this order.
KEY_PRECEDENCE = (
    AttributeKey.M,
    AttributeKey.L,
    AttributeKey.SS,
    AttributeKey.NS,
    AttributeKey.BS,
    AttributeKey.S,
    AttributeKey.N,
    AttributeKey.B,
    AttributeKey.BOOL,
    AttributeKey.NULL,
)


class DateFormat(str, Enum):
    """Enumeration of date encodings."""
    ISO = "iso"
    UNIX = "unix"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    UNCONVERTIBLE_TYPE = "unconvertible_type"
    INVALID_SET = "invalid_set"
    INVALID_NUMBER = "invalid_number"


class _Undefined:
    """Marker for an absent value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


class ConversionError(Exception):
    """Custom exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class UnconvertibleTypeError(ConversionError):
    """Raised when a value cannot be represented as a tagged attribute."""

    def __init__(self, type_name: str, context: Optional[Any] = None):
        super().__init__(
            f"Unable to convert property to an attribute value with type {type_name}",
            ErrorType.UNCONVERTIBLE_TYPE,
            context,
        )
        self.type_name = type_name


class InvalidSetError(ConversionError):
    """Raised when a typed set cannot infer its element type."""

    def __init__(self, message: str = "Sets can contain string, number, or binary values",
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.INVALID_SET, context)


# Abstract base classes for interfaces

class DeclaredType(ABC):
    """Capability for values that declare their own classifier tag."""

    @property
    @abstractmethod
    def declared_type(self) -> ValueType:
        """Classifier tag reported for this value."""
        pass


class AttributeProcessorInterface(ABC):
    """Abstract interface for one conversion direction."""

    @abstractmethod
    def process(self, data: Any, options: Optional["ConverterOptions"] = None) -> Any:
        """Convert a single value."""
        pass


class AttributeConverterInterface(ABC):
    """Abstract interface for the attribute converter façade."""

    @abstractmethod
    def marshall(self, data: Dict[str, Any],
                 options: Optional["ConverterOptions"] = None) -> AttributeMap:
        """Convert a native record into a tagged attribute map."""
        pass

    @abstractmethod
    def unmarshall(self, data: AttributeMap,
                   options: Optional["ConverterOptions"] = None) -> Dict[str, Any]:
        """Convert a tagged attribute map into a native record."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str, require_object: bool = True) -> ValidationResult:
        """Validate raw JSON input."""
        pass

    @abstractmethod
    def validate_attribute(self, attribute: Any) -> ValidationResult:
        """Validate the shape of a tagged attribute."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
