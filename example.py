#!/usr/bin/env python3
"""
Example usage of the Attribute Converter.

This script demonstrates converting a native record into tagged
attributes and back again.
"""

import json
from datetime import datetime, timezone
from src.attribute_converter import (
    AttributeConverter,
    ConverterOptions,
    TypedSet,
    UnconvertibleTypeError,
)
from src.attribute_converter.io import AttributeJSONCodec


def main():
    """Main example function."""
    print("Attribute Converter Example")
    print("=" * 50)

    # Create sample data
    sample_user = {
        "id": 575,
        "name": "Danny",
        "favorites": ["apples", "pears"],
        "lastPayment": None,
        "createdAt": datetime(2021, 7, 9, 21, 44, 7, 15000, tzinfo=timezone.utc),
        "address": {
            "streetNumber": 112,
            "streetName": "Drive",
        },
        "colors": TypedSet(["red", "blue"]),
        "nickname": "",
        "avatar": b"\x89PNG",
    }

    converter = AttributeConverter()
    codec = AttributeJSONCodec()

    print("\n📦 Marshalled record:")
    record = converter.marshall(sample_user)
    print(codec.dump(record))

    print("\n📦 Marshalled with convertEmptyValues and unix dates:")
    options = ConverterOptions(convert_empty_values=True, date_format="unix")
    compact = converter.marshall(sample_user, options)
    print(json.dumps({key: compact[key] for key in ("createdAt", "nickname")}, indent=2))

    print("\n🔄 Unmarshalled record:")
    native = converter.unmarshall(record)
    print(codec.dump(native))

    print("\n🔢 Wrapped numbers keep their exact text:")
    wrapped = converter.unmarshall(
        {"balance": {"N": "12345678901234567890.000000000001"}},
        ConverterOptions(wrap_numbers=True),
    )
    print(f"   balance = {wrapped['balance']} (number projection: {wrapped['balance'].to_number()})")

    print("\n❌ Functions cannot be converted:")
    try:
        converter.marshall({"callback": print})
    except UnconvertibleTypeError as e:
        print(f"   {e}")


if __name__ == "__main__":
    main()
