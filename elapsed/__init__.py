from .core import Direction, Duration, Elapsed, Part, humanize
from .timestamps import at_tz, coerce
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "Elapsed",
    "Duration",
    "Part",
    "Direction",
    "humanize",
    "at_tz",
    "coerce",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
