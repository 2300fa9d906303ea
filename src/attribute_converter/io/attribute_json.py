"""JSON codec for moving tagged attributes and native records through text."""

import base64
import json
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from ..types import AttributeKey, UNDEFINED
from ..models import NumberValue, TypedSet
from ..type_detector import TypeDetector


class AttributeJSONCodec:
    """
    JSON serialisation helper for the command-line interface.

    Binary payloads travel as base64 text. Native documents are parsed
    with Decimal floats so numeric text reaches N attributes unchanged.
    """

    def __init__(self, detector: Optional[TypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.

        Args:
            detector: Optional TypeDetector instance
            logger: Optional logger instance
        """
        self.detector = detector or TypeDetector()
        self.logger = logger or logging.getLogger(__name__)

    def load_native(self, json_string: str) -> Any:
        """Parse a native JSON document, keeping float text exact."""
        return json.loads(json_string, parse_float=Decimal)

    def load_attributes(self, json_string: str) -> Any:
        """
        Parse a tagged attribute document.

        B and BS payloads are base64-decoded wherever they occur.
        """
        data = json.loads(json_string)
        if isinstance(data, dict):
            return {name: self.decode_binary(attribute) for name, attribute in data.items()}
        return data

    def decode_binary(self, attribute: Any) -> Any:
        """Base64-decode binary payloads of one attribute, recursively."""
        if not isinstance(attribute, dict):
            return attribute

        result = dict(attribute)
        if isinstance(result.get(AttributeKey.B.value), str):
            result[AttributeKey.B.value] = base64.b64decode(result[AttributeKey.B.value])
        if isinstance(result.get(AttributeKey.BS.value), list):
            result[AttributeKey.BS.value] = [
                base64.b64decode(item) if isinstance(item, str) else item
                for item in result[AttributeKey.BS.value]
            ]
        if isinstance(result.get(AttributeKey.M.value), dict):
            result[AttributeKey.M.value] = {
                key: self.decode_binary(value)
                for key, value in result[AttributeKey.M.value].items()
            }
        if isinstance(result.get(AttributeKey.L.value), list):
            result[AttributeKey.L.value] = [
                self.decode_binary(item) for item in result[AttributeKey.L.value]
            ]
        return result

    def dump(self, data: Any, indent: Optional[int] = 2) -> str:
        """Serialise tagged attributes or native values to JSON text."""
        return json.dumps(data, default=self._default, indent=indent, ensure_ascii=False)

    def _default(self, value: Any) -> Any:
        """Fallback serialiser for values json cannot handle natively."""
        if isinstance(value, (TypedSet, NumberValue)):
            return value.to_json()
        if isinstance(value, Decimal):
            if value == value.to_integral_value():
                return int(value)
            return float(value)
        if isinstance(value, date):
            return value.isoformat()
        if value is UNDEFINED:
            return None
        if self.detector.is_binary(value):
            if hasattr(value, "read"):
                value = value.read()
            return base64.b64encode(bytes(memoryview(value))).decode("ascii")
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
