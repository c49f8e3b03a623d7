"""
ID generation and validation utilities for POD services
Random UUIDv4 identifiers
"""

import re
import uuid
from typing import Any

UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def unique_id() -> str:
    """Generate a random UUIDv4 string"""
    return str(uuid.uuid4())


def is_unique_id(value: Any) -> bool:
    """Check that a value is a canonical lowercase UUIDv4 string"""
    if not value or not isinstance(value, str):
        return False
    return UUID4_PATTERN.match(value) is not None
