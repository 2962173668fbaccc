"""
Time-of-day value type.

A TimeOfDay is an hour/minute pair confined to one day: 00:00 up to 23:59.
There is no wraparound; arithmetic that would leave the day raises RangeError.
"""

from __future__ import annotations

from dataclasses import dataclass

from dayschedule.errors import InvalidArgumentError, RangeError

MINUTES_PER_HOUR = 60
MAX_MINUTE_OF_DAY = 23 * 60 + 59


def _check_int(value: object, name: str) -> int:
    # bool is an int subclass, but True:False is not a time
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    Immutable hour/minute value.

    Dataclass ordering compares (hour, minute), which is the same total order
    as comparing minutes since midnight.
    """

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        h = _check_int(self.hour, "hour")
        m = _check_int(self.minute, "minute")
        if not (0 <= h <= 23 and 0 <= m <= 59):
            raise RangeError("Hour must be within [0, 23]; Minute must be within [0, 59]!")

    @classmethod
    def from_minutes(cls, total: int) -> TimeOfDay:
        """
        Build a TimeOfDay from minutes since midnight.
        """
        total = _check_int(total, "minutes")
        if not (0 <= total <= MAX_MINUTE_OF_DAY):
            raise RangeError(f"{total} minutes is outside a single day [0, {MAX_MINUTE_OF_DAY}]")
        return cls(total // MINUTES_PER_HOUR, total % MINUTES_PER_HOUR)

    @property
    def total_minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def compare(self, other: TimeOfDay) -> int:
        """
        Return -1 if self is before other, 1 if after, 0 if equal.
        """
        if other is None:
            raise InvalidArgumentError("Null Time object!")
        a, b = self.total_minutes, other.total_minutes
        return (a > b) - (a < b)

    def minutes_until(self, other: TimeOfDay) -> int:
        """
        Return the number of minutes from self to other.

        Raises RangeError if other comes before self: a negative duration is
        never a valid answer inside one day.
        """
        if other is None:
            raise InvalidArgumentError("Null Time object!")
        diff = other.total_minutes - self.total_minutes
        if diff < 0:
            raise RangeError(f"{other} is before {self}")
        return diff

    def plus_minutes(self, minutes: int) -> TimeOfDay:
        """
        Return the time that is `minutes` after self.
        """
        minutes = _check_int(minutes, "minutes")
        if minutes < 0:
            raise RangeError("Duration must be non-negative!")
        total = self.total_minutes + minutes
        if total > MAX_MINUTE_OF_DAY:
            raise RangeError(f"{self} + {minutes} min goes past the end of the day")
        return TimeOfDay.from_minutes(total)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
