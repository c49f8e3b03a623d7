"""
Utility functions for POD services
ID generation, object helpers, calendar formatting and messages
"""

from .ids import unique_id, is_unique_id
from .objects import clone, extract_keys, trim_object, trim_nested_object
from .calendar import (
    to_shamsi_date_string,
    to_shamsi_datetime_string,
    shamsi_to_gregorian_string,
    to_datetime_string,
    to_datetime_string_utc,
    to_datetime_string_to_min,
    to_datetime_string_to_min_utc,
)
from .messages import invalid_config_param

__all__ = [
    # ID generation
    "unique_id",
    "is_unique_id",
    # Objects
    "clone",
    "extract_keys",
    "trim_object",
    "trim_nested_object",
    # Calendar
    "to_shamsi_date_string",
    "to_shamsi_datetime_string",
    "shamsi_to_gregorian_string",
    "to_datetime_string",
    "to_datetime_string_utc",
    "to_datetime_string_to_min",
    "to_datetime_string_to_min_utc",
    # Messages
    "invalid_config_param",
]
