"""Pytest configuration and fixtures."""

import base64
import pytest
import tempfile
from datetime import datetime, timezone
from pathlib import Path


PICTURE_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAUAAAAFCAYAAACNbyblAAAAHElEQVQI12P4//8/w38GIAXDIBKE0DHxgljNBAAO9TXL0Y4OHwAAAABJRU5ErkJggg=="
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def picture_bytes():
    """Small binary payload (a 5x5 PNG)."""
    return base64.b64decode(PICTURE_BASE64)


@pytest.fixture
def sample_user(picture_bytes):
    """Native user record covering every scalar kind."""
    return {
        "id": 575,
        "name": "Danny",
        "favorites": ["apples", "pears"],
        "lastPayment": None,
        "createdAt": datetime(2021, 7, 9, 21, 44, 7, 15000, tzinfo=timezone.utc),
        "address": {
            "streetNumber": 112,
            "streetName": "Drive",
        },
        "profilePicture": picture_bytes,
    }


@pytest.fixture
def sample_user_record(picture_bytes):
    """Tagged attribute form of sample_user."""
    return {
        "id": {"N": "575"},
        "name": {"S": "Danny"},
        "favorites": {"L": [{"S": "apples"}, {"S": "pears"}]},
        "lastPayment": {"NULL": True},
        "createdAt": {"S": "2021-07-09T21:44:07.015Z"},
        "address": {
            "M": {"streetNumber": {"N": "112"}, "streetName": {"S": "Drive"}},
        },
        "profilePicture": {"B": picture_bytes},
    }
