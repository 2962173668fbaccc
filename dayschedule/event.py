"""
One entry of the daily schedule.

An Event has a start time, an end time and a free-text description.
Events order by start time only; end time and description do not take part
in comparisons.
"""

from __future__ import annotations

from typing import Optional

from dayschedule.errors import InvalidArgumentError, RangeError
from dayschedule.timeofday import TimeOfDay


class Event:
    """
    Time-bounded, describable schedule entry.

    Invariant: start <= end. Mutators compute the new end first, validate it,
    and only then assign, so a failed call leaves the event as it was.

    <, <=, > and >= compare start times only, but == stays identity: two
    different events that start at the same minute are "equal" for sorting
    (compare() returns 0) without being the same event. Events are mutable
    and looked up by identity/event_id, so they keep the default hash.
    """

    __slots__ = ("_start", "_end", "_description", "event_id")

    def __init__(self, start: TimeOfDay, end: TimeOfDay, description: Optional[str] = "") -> None:
        if start is None or end is None:
            raise InvalidArgumentError("Null Time object!")
        if start > end:
            raise InvalidArgumentError("End Time cannot come before Start Time!")

        self._start = start
        self._end = end
        self._description = "" if description is None else description
        # assigned by the owning Schedule
        self.event_id: Optional[int] = None

    @property
    def start(self) -> TimeOfDay:
        return self._start

    @property
    def end(self) -> TimeOfDay:
        return self._end

    @property
    def description(self) -> str:
        return self._description

    @property
    def duration(self) -> int:
        """Length of the event in minutes."""
        return self._start.minutes_until(self._end)

    def move_start(self, new_start: Optional[TimeOfDay]) -> bool:
        """
        Move the event to begin at new_start, keeping its duration.

        Returns False (event unchanged) if new_start is None or the moved
        event would end after 23:59.
        """
        if new_start is None:
            return False
        try:
            new_end = new_start.plus_minutes(self.duration)
        except RangeError:
            return False

        self._start = new_start
        self._end = new_end
        return True

    def change_duration(self, minutes: int) -> bool:
        """
        Set the end time to start + minutes.

        Returns False (event unchanged) if minutes is negative or the new end
        would be after 23:59.
        """
        if minutes is None or minutes < 0:
            return False
        try:
            new_end = self._start.plus_minutes(minutes)
        except RangeError:
            return False

        self._end = new_end
        return True

    def set_description(self, text: Optional[str]) -> None:
        self._description = "" if text is None else text

    def _other_start(self, other: Event) -> TimeOfDay:
        if other is None:
            raise InvalidArgumentError("Null Event object!")
        return other._start

    def compare(self, other: Event) -> int:
        """
        -1 / 0 / 1 by start time.
        """
        return self._start.compare(self._other_start(other))

    def __lt__(self, other: Event) -> bool:
        return self._start < self._other_start(other)

    def __le__(self, other: Event) -> bool:
        return self._start <= self._other_start(other)

    def __gt__(self, other: Event) -> bool:
        return self._start > self._other_start(other)

    def __ge__(self, other: Event) -> bool:
        return self._start >= self._other_start(other)

    def __repr__(self) -> str:
        return f"Event({self._start}, {self._end}, {self._description!r})"

    def __str__(self) -> str:
        return f"{self._start}-{self._end}/{self._description}"
