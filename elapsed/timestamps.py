"""Helpers for turning caller values into timezone-aware datetimes.

Example:
    >>> from elapsed.timestamps import at_tz
    >>> at = at_tz("US/Pacific")
    >>> at("2025-01-15T14:00")
    datetime.datetime(2025, 1, 15, 14, 0, tzinfo=zoneinfo.ZoneInfo(key='US/Pacific'))
    >>> at(2025, 1, 15, 14, 0)
    datetime.datetime(2025, 1, 15, 14, 0, tzinfo=zoneinfo.ZoneInfo(key='US/Pacific'))
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, time, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)


def zone(tz: str) -> ZoneInfo:
    """Look up an IANA timezone, raising ValueError for unknown names."""
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(
            f"Unknown timezone: {tz!r}\n"
            f"Hint: Use an IANA name such as 'UTC', 'US/Pacific' or 'Europe/Paris'"
        ) from e


def coerce(value: Any, tz: str = "UTC") -> datetime:
    """Convert a timestamp-like value to a timezone-aware datetime.

    Accepts:
    - int: Unix timestamp in seconds, interpreted as UTC
    - datetime: Must be timezone-aware, passed through unchanged
    - date: Midnight of that day in ``tz``

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise TypeError(
                f"Timestamp must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value
    if isinstance(value, date):
        resolved = datetime.combine(value, time.min, tzinfo=zone(tz))
        logger.debug("Resolved date %s to %s", value, resolved.isoformat())
        return resolved
    raise TypeError(
        f"Timestamp must be int, datetime, or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  Elapsed(1700000000)  # int (Unix seconds)\n"
        f"  Elapsed(datetime(2025,1,1,tzinfo=timezone.utc))  "
        f"# timezone-aware datetime\n"
        f"  Elapsed(date(2025,1,1), tz='US/Pacific')  # date objects"
    )


def at_tz(tz: str) -> Callable[..., datetime]:
    """Return a constructor for aware datetimes in the given timezone.

    The returned function accepts either a single ISO 8601 string or
    datetime components (year, month, day, ...). Strings that carry their
    own offset keep it; strings without one are placed in ``tz``.
    """
    tzinfo = zone(tz)

    def at(*args: Any) -> datetime:
        if len(args) == 1 and isinstance(args[0], str):
            text = args[0]
            try:
                parsed = isoparse(text)
            except ValueError as e:
                raise ValueError(
                    f"Could not parse timestamp: {text!r}\n"
                    f"Expected ISO 8601, e.g. '2025-01-15', '2025-01-15T14:00' "
                    f"or '1993-10-30T04:20:00Z'"
                ) from e
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=tzinfo)
            return parsed
        return datetime(*args, tzinfo=tzinfo)

    return at
