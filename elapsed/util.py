"""Utility constants for elapsed.

Time unit constants represent durations in seconds. They are fixed
approximations: a month is always 30 days and a year always 365 days, no
matter where in the calendar an interval falls.
"""

from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

Unit: TypeAlias = Literal[
    "years", "months", "weeks", "days", "hours", "minutes", "seconds"
]

# Coarsest first
UNITS: tuple[tuple[Unit, int], ...] = (
    ("years", YEAR),
    ("months", MONTH),
    ("weeks", WEEK),
    ("days", DAY),
    ("hours", HOUR),
    ("minutes", MINUTE),
    ("seconds", SECOND),
)

ABBREVIATIONS: dict[Unit, str] = {
    "years": "y",
    "months": "m",
    "weeks": "w",
    "days": "d",
    "hours": "hr",
    "minutes": "min",
    "seconds": "sec",
}
