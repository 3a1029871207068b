import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from functools import total_ordering
from typing import Any, Literal, TypeAlias

from typing_extensions import override

from elapsed.timestamps import coerce
from elapsed.util import ABBREVIATIONS, DAY, UNITS, Unit

logger = logging.getLogger(__name__)

Direction: TypeAlias = Literal["past", "future"]

# Never display more than this many units
MAX_PARTS = 2


@dataclass(frozen=True, kw_only=True)
class Part:
    unit: Unit
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Part count ({self.count}) must be >= 0")

    @property
    def seconds(self) -> int:
        return self.count * dict(UNITS)[self.unit]

    @override
    def __str__(self) -> str:
        return f"{self.count}{ABBREVIATIONS[self.unit]}"


@dataclass(frozen=True)
class Duration:
    """Unsigned span of whole seconds."""

    seconds: int

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError(f"Duration seconds ({self.seconds}) must be >= 0")

    @classmethod
    def between(cls, a: datetime, b: datetime) -> "Duration":
        """Absolute distance between two aware datetimes, truncated to seconds.

        Both sides are moved to UTC first: datetimes sharing a tzinfo subtract
        by wall clock, which is off by the DST shift. Works on timedelta
        integers rather than float timestamps so very large spans stay exact.
        """
        delta = abs(b.astimezone(timezone.utc) - a.astimezone(timezone.utc))
        return cls(delta.days * DAY + delta.seconds)

    def parts(self) -> tuple[Part, ...]:
        """Greedily decompose into at most two non-zero units, coarsest first.

        Zero-count units are skipped, so the two retained units need not be
        adjacent on the ladder. A zero duration yields a single ``0sec``.
        """
        remaining = self.seconds
        parts: list[Part] = []
        for unit, scale in UNITS:
            if len(parts) == MAX_PARTS:
                break
            count, remaining = divmod(remaining, scale)
            if count:
                parts.append(Part(unit=unit, count=count))

        if not parts:
            return (Part(unit="seconds", count=0),)
        return tuple(parts)


@total_ordering
class Elapsed:
    """Time between a reference instant and a single captured "now".

    ``now`` is sampled once at construction (unless supplied), so repeated
    formatting of the same instance always gives the same answer.

    Example:
        >>> from datetime import datetime, timezone
        >>> due = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        >>> now = datetime(2025, 1, 1, 13, 5, tzinfo=timezone.utc)
        >>> e = Elapsed(due, now=now)
        >>> str(e), e.direction
        ('1hr 5min', 'past')
    """

    def __init__(self, reference: Any, *, now: Any = None, tz: str = "UTC"):
        """
        Args:
            reference: Instant to measure from. An aware datetime, an int
                (Unix seconds) or a date (midnight in ``tz``)
            now: Current instant; sampled from the UTC clock if omitted
            tz: IANA timezone used to resolve date values
        """
        self._reference: datetime = coerce(reference, tz)
        self._now: datetime = (
            datetime.now(timezone.utc) if now is None else coerce(now, tz)
        )
        # Instants for comparison; same-tzinfo datetimes compare by wall clock
        self._reference_utc: datetime = self._reference.astimezone(timezone.utc)
        self._now_utc: datetime = self._now.astimezone(timezone.utc)

    @property
    def reference(self) -> datetime:
        return self._reference

    @property
    def now(self) -> datetime:
        return self._now

    @property
    def date(self) -> date:
        """Calendar date of the reference in its own offset."""
        return self._reference.date()

    @property
    def passed(self) -> bool:
        """True when the reference is at or before now (overdue)."""
        return self._reference_utc <= self._now_utc

    @property
    def direction(self) -> Direction:
        return "past" if self.passed else "future"

    @property
    def duration(self) -> Duration:
        return Duration.between(self._reference, self._now)

    def breakdown(self) -> tuple[Part, ...]:
        parts = self.duration.parts()
        logger.debug(
            "Elapsed %s -> %s (%s): %s",
            self._reference.isoformat(),
            self._now.isoformat(),
            self.direction,
            parts,
        )
        return parts

    def format(self) -> str:
        return " ".join(str(part) for part in self.breakdown())

    def _key(self) -> tuple[datetime, datetime]:
        return (self._reference_utc, self._now_utc)

    @override
    def __str__(self) -> str:
        return self.format()

    @override
    def __repr__(self) -> str:
        return (
            f"Elapsed(reference={self._reference.isoformat()}, "
            f"now={self._now.isoformat()}, {self.direction}: {self.format()})"
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Elapsed):
            return NotImplemented
        return self._key() == other._key()

    @override
    def __lt__(self, other: "Elapsed") -> bool:
        if not isinstance(other, Elapsed):
            return NotImplemented
        return self._key() < other._key()

    @override
    def __hash__(self) -> int:
        return hash(self._key())


def humanize(reference: Any, *, now: Any = None, tz: str = "UTC") -> str:
    """Render the elapsed label for a single reference, e.g. ``"4min 46sec"``."""
    return Elapsed(reference, now=now, tz=tz).format()
