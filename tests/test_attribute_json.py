"""Tests for the JSON transport codec."""

import base64
import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from attribute_converter.io import AttributeJSONCodec
from attribute_converter.models import NumberValue, TypedSet
from attribute_converter.types import UNDEFINED


class TestAttributeJSONCodec:
    """Tests for AttributeJSONCodec class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = AttributeJSONCodec()

    def test_load_native_keeps_float_text(self):
        """Test that floats are parsed as Decimal."""
        data = self.codec.load_native('{"price": 0.1000000000000000000001, "qty": 2}')

        assert data["price"] == Decimal("0.1000000000000000000001")
        assert data["qty"] == 2

    def test_load_attributes_decodes_binary(self, picture_bytes):
        """Test base64 decoding of nested binary payloads."""
        encoded = base64.b64encode(picture_bytes).decode("ascii")
        text = json.dumps({
            "pic": {"B": encoded},
            "pics": {"BS": [encoded]},
            "nested": {"M": {"inner": {"L": [{"B": encoded}]}}},
            "name": {"S": encoded},
        })

        data = self.codec.load_attributes(text)

        assert data["pic"] == {"B": picture_bytes}
        assert data["pics"] == {"BS": [picture_bytes]}
        assert data["nested"]["M"]["inner"]["L"][0] == {"B": picture_bytes}
        assert data["name"] == {"S": encoded}

    def test_dump_binary_as_base64(self):
        """Test binary serialisation."""
        text = self.codec.dump({"B": b"\x00\xff"}, indent=None)
        assert text == '{"B": "AP8="}'

    def test_dump_special_values(self):
        """Test serialisation of sets, wrappers, decimals, dates and UNDEFINED."""
        value = {
            "set": TypedSet(["a", "b"]),
            "wrapped": NumberValue("12"),
            "decimal": Decimal("2.50"),
            "whole": Decimal("3"),
            "when": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "gap": [UNDEFINED],
        }

        assert json.loads(self.codec.dump(value)) == {
            "set": ["a", "b"],
            "wrapped": 12,
            "decimal": 2.5,
            "whole": 3,
            "when": "2024-01-01T00:00:00+00:00",
            "gap": [None],
        }

    def test_dump_rejects_unknown_objects(self):
        """Test that unsupported values still fail."""
        with pytest.raises(TypeError):
            self.codec.dump({"x": object()})
