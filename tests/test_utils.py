"""
Tests for ids, messages and calendar helpers
"""

import re
from datetime import date, datetime, timedelta, timezone

import pytest

from pod_utils.exceptions import InvalidDateError
from pod_utils.utils import (
    invalid_config_param,
    is_unique_id,
    shamsi_to_gregorian_string,
    to_datetime_string,
    to_datetime_string_to_min,
    to_datetime_string_to_min_utc,
    to_datetime_string_utc,
    to_shamsi_date_string,
    to_shamsi_datetime_string,
    unique_id,
)


class TestUniqueId:
    """Test UUIDv4 generation"""

    def test_uuid4_shape(self):
        """Test the id has the UUIDv4 layout"""
        value = unique_id()

        assert isinstance(value, str)
        assert len(value) == 36
        assert value.count("-") == 4
        assert value[14] == "4"
        assert value[19] in "89ab"

    def test_two_calls_differ(self):
        """Test consecutive ids differ"""
        assert unique_id() != unique_id()

    def test_is_unique_id(self):
        """Test UUIDv4 string detection"""
        assert is_unique_id(unique_id())
        assert not is_unique_id("")
        assert not is_unique_id(None)
        assert not is_unique_id("00000000-0000-1000-8000-000000000000")
        assert not is_unique_id(unique_id().upper())


class TestInvalidConfigParam:
    """Test config error messages"""

    def test_message(self):
        """Test the message names the module"""
        assert invalid_config_param("Module") == "Invalid Config Parameters. Module: Module"


class TestShamsiCalendar:
    """Test Jalali and Gregorian date strings"""

    def test_date_string(self):
        """Test Jalali date formatting"""
        assert to_shamsi_date_string(date(2019, 8, 13)) == "1398/05/22"
        assert to_shamsi_date_string(datetime(2024, 3, 20, 23, 59)) == "1403/01/01"

    def test_datetime_string(self):
        """Test Jalali date-time formatting"""
        assert to_shamsi_datetime_string(datetime(2019, 8, 13, 17, 54, 7)) == "1398/05/22 17:54:07"

    def test_date_only_input_is_midnight(self):
        """Test a plain date renders at midnight"""
        assert to_shamsi_datetime_string(date(2019, 8, 13)) == "1398/05/22 00:00:00"

    def test_timestamp_input(self):
        """Test POSIX timestamps are read in local time"""
        timestamp = 1565700000
        local = datetime.fromtimestamp(timestamp)

        assert to_shamsi_datetime_string(timestamp) == to_shamsi_datetime_string(local)

    def test_defaults_to_now(self):
        """Test no argument formats the current time"""
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2}", to_shamsi_date_string())
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}", to_shamsi_datetime_string())

    def test_unsupported_input(self):
        """Test strings and booleans are rejected"""
        with pytest.raises(InvalidDateError):
            to_shamsi_date_string("2019-08-13")
        with pytest.raises(InvalidDateError):
            to_shamsi_date_string(True)

    def test_shamsi_to_gregorian(self):
        """Test Jalali to Gregorian conversion"""
        assert shamsi_to_gregorian_string("1398/05/22 17:54") == "2019-08-13 17:54"

    def test_shamsi_to_gregorian_custom_format(self):
        """Test Jalali parsing with a custom pattern"""
        assert shamsi_to_gregorian_string("1403/01/01", fmt="%Y/%m/%d") == "2024-03-20 00:00"

    def test_shamsi_to_gregorian_invalid(self):
        """Test unparseable Jalali input"""
        with pytest.raises(InvalidDateError) as exc_info:
            shamsi_to_gregorian_string("not a date")

        assert exc_info.value.error_code == "INVALID_DATE"

    def test_gregorian_local_strings(self):
        """Test local Gregorian strings keep the wall-clock time"""
        value = datetime(2019, 8, 13, 17, 54, 7)

        assert to_datetime_string(value) == "2019-08-13 17:54:07"
        assert to_datetime_string_to_min(value) == "2019-08-13 17:54"

    def test_gregorian_utc_strings(self):
        """Test UTC Gregorian strings convert aware values to UTC"""
        value = datetime(2019, 8, 13, 21, 24, 7, tzinfo=timezone(timedelta(hours=3, minutes=30)))

        assert to_datetime_string_utc(value) == "2019-08-13 17:54:07"
        assert to_datetime_string_to_min_utc(value) == "2019-08-13 17:54"

    def test_gregorian_utc_from_timestamp(self):
        """Test timestamps render the same instant in UTC"""
        assert to_datetime_string_utc(0) == "1970-01-01 00:00:00"
        assert to_datetime_string_to_min_utc(1565718840) == "2019-08-13 17:54"

    def test_gregorian_local_matches_timestamp(self):
        """Test local strings for timestamps follow local time"""
        timestamp = 1565718840
        local = datetime.fromtimestamp(timestamp)

        assert to_datetime_string(timestamp) == local.strftime("%Y-%m-%d %H:%M:%S")
        assert to_datetime_string_to_min(timestamp) == local.strftime("%Y-%m-%d %H:%M")

    def test_gregorian_aware_local(self):
        """Test aware values are shown in local time"""
        value = datetime(2019, 8, 13, 17, 54, 7, tzinfo=timezone.utc)

        assert to_datetime_string(value) == value.astimezone().strftime("%Y-%m-%d %H:%M:%S")
