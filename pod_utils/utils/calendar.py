"""
Calendar helpers for POD services
Render dates as Gregorian (local or UTC) and Jalali (Shamsi) strings
"""

from datetime import date as date_type, datetime, timezone
from typing import Optional, Union
import jdatetime
import structlog

from ..constants import CalendarFormats
from ..exceptions import InvalidDateError

logger = structlog.get_logger(__name__)

DateLike = Union[datetime, date_type, int, float]


def _to_datetime(value: Optional[DateLike]) -> datetime:
    """Normalize a datetime, date or POSIX timestamp; None means now"""
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(value, reason=str(e)) from e
    raise InvalidDateError(value, reason=f"unsupported type: {type(value).__name__}")


def to_shamsi_date_string(value: Optional[DateLike] = None) -> str:
    """Jalali date of ``value`` as YYYY/MM/DD"""
    dt = _to_datetime(value)
    return jdatetime.date.fromgregorian(date=dt.date()).strftime(CalendarFormats.SHAMSI_DATE)


def to_shamsi_datetime_string(value: Optional[DateLike] = None) -> str:
    """Jalali date and wall-clock time of ``value`` as YYYY/MM/DD HH:MM:SS"""
    dt = _to_datetime(value)
    return jdatetime.datetime.fromgregorian(datetime=dt).strftime(CalendarFormats.SHAMSI_DATETIME)


def shamsi_to_gregorian_string(value: str,
                               fmt: str = CalendarFormats.SHAMSI_DATETIME_TO_MIN) -> str:
    """
    Convert a Jalali date-time string to its Gregorian form

    Args:
        value: Jalali date-time, e.g. "1398/05/22 17:54"
        fmt: strptime pattern of ``value``

    Returns:
        Gregorian date-time as YYYY-MM-DD HH:MM

    Raises:
        InvalidDateError: If ``value`` does not match ``fmt``
    """
    try:
        parsed = jdatetime.datetime.strptime(value, fmt)
    except (TypeError, ValueError) as e:
        logger.debug("Unparseable Jalali date", value=value, format=fmt)
        raise InvalidDateError(value, reason=str(e)) from e

    return parsed.togregorian().strftime(CalendarFormats.GREGORIAN_DATETIME_TO_MIN)


def _local(value: Optional[DateLike]) -> datetime:
    dt = _to_datetime(value)
    return dt.astimezone() if dt.tzinfo is not None else dt


def _utc(value: Optional[DateLike]) -> datetime:
    # naive values are wall-clock local time
    return _to_datetime(value).astimezone(timezone.utc)


def to_datetime_string(value: Optional[DateLike] = None) -> str:
    """Gregorian local date-time as YYYY-MM-DD HH:MM:SS"""
    return _local(value).strftime(CalendarFormats.GREGORIAN_DATETIME)


def to_datetime_string_utc(value: Optional[DateLike] = None) -> str:
    """Gregorian UTC date-time as YYYY-MM-DD HH:MM:SS"""
    return _utc(value).strftime(CalendarFormats.GREGORIAN_DATETIME)


def to_datetime_string_to_min(value: Optional[DateLike] = None) -> str:
    """Gregorian local date-time as YYYY-MM-DD HH:MM"""
    return _local(value).strftime(CalendarFormats.GREGORIAN_DATETIME_TO_MIN)


def to_datetime_string_to_min_utc(value: Optional[DateLike] = None) -> str:
    """Gregorian UTC date-time as YYYY-MM-DD HH:MM"""
    return _utc(value).strftime(CalendarFormats.GREGORIAN_DATETIME_TO_MIN)
