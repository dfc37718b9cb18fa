"""
Formatting of timestamps in a target timezone.

``format_in_tz`` is the single place where an instant is moved into a
viewer's zone and turned into text. It trusts its ``tz`` argument: resolve
untrusted names with ``djust_tz.utils.timezone.resolve_timezone`` first.
"""

import datetime
import math
import numbers
from typing import Any, List, Optional, Union
from zoneinfo import ZoneInfo

from .exceptions import TimestampTypeError
from .utils.timezone import get_default_timezone, utc_from_timestamp

DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def is_missing(value: Any) -> bool:
    """True for None and the not-a-number sentinel (an unset epoch value)."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_timestamp(value: Any) -> bool:
    """True for values ``format_in_tz`` can place on the time line."""
    if isinstance(value, datetime.datetime):
        return True
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    # Infinite or out-of-range epochs have no datetime
    try:
        utc_from_timestamp(value)
    except (OverflowError, OSError, ValueError):
        return False
    return True


def _to_instant(value: Any, default_tz: str, function_name: str) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            # Naive values are wall-clock times in the default zone
            return value.replace(tzinfo=ZoneInfo(default_tz))
        return value
    if is_timestamp(value):
        return utc_from_timestamp(value)
    raise TimestampTypeError(value, function_name)


def _format_one(value, fmt: str, zone: ZoneInfo, default_tz: str) -> str:
    instant = _to_instant(value, default_tz, "format_in_tz")
    return instant.astimezone(zone).strftime(fmt)


def format_in_tz(
    value: Any,
    fmt: str = DEFAULT_DATETIME_FORMAT,
    tz: Optional[str] = None,
    locale: Optional[str] = None,
) -> Union[str, List[str]]:
    """
    Format a timestamp in a specific timezone using strftime syntax.

    Args:
        value: An aware or naive ``datetime``, POSIX epoch seconds, or a
            list/tuple of those. Naive datetimes are read as wall-clock
            time in the default timezone.
        fmt: strftime format string (%Y, %m, %d, %H, %M, %S, %I, %p, %A,
            %B, %Z, ...).
        tz: Target IANA timezone name. Defaults to the configured default
            timezone when None.
        locale: BCP 47 locale code. Reserved; currently has no effect.

    Returns:
        The formatted string. ``""`` for None, NaN, or a collection holding
        only such values. For other collections, a list of strings with
        ``""`` in place of each missing element.

    Raises:
        TimestampTypeError: if the value is not a timestamp.
        zoneinfo.ZoneInfoNotFoundError: if ``tz`` is not a known zone.

    Example:
        ts = datetime.datetime(2026, 1, 20, 12, 0, tzinfo=datetime.timezone.utc)
        format_in_tz(ts, "%H:%M %Z", "America/New_York")  # "07:00 EST"
        format_in_tz(ts, "%H:%M %Z", "Asia/Tokyo")        # "21:00 JST"
    """
    if is_missing(value):
        return ""

    default_tz = get_default_timezone()
    if tz is None:
        tz = default_tz

    if isinstance(value, (list, tuple)):
        if all(is_missing(item) for item in value):
            return ""
        zone = ZoneInfo(tz)
        return [
            "" if is_missing(item) else _format_one(item, fmt, zone, default_tz)
            for item in value
        ]

    return _format_one(value, fmt, ZoneInfo(tz), default_tz)


def tz_abbreviation(value: Any, tz: Optional[str] = None) -> str:
    """
    Abbreviated zone name in effect in ``tz`` at the instant ``value``.

    Example:
        tz_abbreviation(datetime(2026, 1, 20, 12, tzinfo=utc), "America/New_York")  # "EST"
        tz_abbreviation(datetime(2026, 7, 20, 12, tzinfo=utc), "America/New_York")  # "EDT"
    """
    return format_in_tz(value, "%Z", tz)
