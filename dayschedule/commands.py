"""
Command surface used by the user interface.

Each command takes plain numbers/strings (as typed by the user), runs the
matching Schedule operation, and returns a CommandResult instead of raising.
Validation failures therefore never escape into the menu loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from dayschedule.errors import ErrorKind, IndexOutOfRangeError, InvalidArgumentError, RangeError, ScheduleError
from dayschedule.event import Event
from dayschedule.schedule import Schedule
from dayschedule.timeofday import TimeOfDay

V = TypeVar("V")


@dataclass(frozen=True)
class EventView:
    """
    Read-only snapshot of an event, safe to hand to the UI.
    """

    index: int
    event_id: Optional[int]
    start: str
    end: str
    description: str
    display: str

    @classmethod
    def of(cls, index: int, ev: Event) -> EventView:
        return cls(
            index=index,
            event_id=ev.event_id,
            start=str(ev.start),
            end=str(ev.end),
            description=ev.description,
            display=str(ev),
        )


@dataclass(frozen=True)
class CommandResult(Generic[V]):
    ok: bool
    value: Optional[V] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Optional[V] = None, message: str = "") -> CommandResult[V]:
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> CommandResult[V]:
        return cls(ok=False, error=error, message=message)

    @classmethod
    def from_error(cls, exc: ScheduleError) -> CommandResult[V]:
        return cls.failure(exc.kind, str(exc))


class ScheduleCommands:
    def __init__(self, schedule: Optional[Schedule] = None) -> None:
        self.schedule = schedule if schedule is not None else Schedule()

    def _index_error(self, index: int) -> CommandResult:
        return CommandResult.from_error(IndexOutOfRangeError(index, self.schedule.size))

    def list_events(self) -> list[tuple[int, str]]:
        return self.schedule.lines()

    def get_event(self, index: int) -> CommandResult[EventView]:
        ev = self.schedule.get(index)
        if ev is None:
            return self._index_error(index)
        return CommandResult.success(EventView.of(index, ev))

    def add_event(
        self, start_hour: int, start_min: int, end_hour: int, end_min: int, description: Optional[str] = ""
    ) -> CommandResult[EventView]:
        try:
            start = TimeOfDay(start_hour, start_min)
            end = TimeOfDay(end_hour, end_min)
            ev = self.schedule.add(Event(start, end, description))
        except ScheduleError as exc:
            return CommandResult.from_error(exc)

        idx = self.schedule.index_of(ev.event_id)
        return CommandResult.success(EventView.of(idx, ev), "New event added!")

    def move_event_start(self, index: int, new_hour: int, new_min: int) -> CommandResult[None]:
        if self.schedule.get(index) is None:
            return self._index_error(index)
        try:
            new_start = TimeOfDay(new_hour, new_min)
        except ScheduleError as exc:
            return CommandResult.from_error(exc)

        if not self.schedule.move_item(index, new_start):
            return CommandResult.failure(ErrorKind.RANGE_ERROR, "Moved event would end after 23:59")
        return CommandResult.success(message="Event changed!")

    def resize_event(self, index: int, minutes: int) -> CommandResult[None]:
        if self.schedule.get(index) is None:
            return self._index_error(index)
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            return CommandResult.from_error(InvalidArgumentError(f"minutes must be an integer, got {minutes!r}"))
        if minutes < 0:
            return CommandResult.from_error(RangeError("Duration must be non-negative!"))

        try:
            changed = self.schedule.change_duration(index, minutes)
        except ScheduleError as exc:
            return CommandResult.from_error(exc)
        if not changed:
            return CommandResult.failure(ErrorKind.RANGE_ERROR, "Resized event would end after 23:59")
        return CommandResult.success(message="Event changed!")

    def rename_event(self, index: int, text: Optional[str]) -> CommandResult[None]:
        if not self.schedule.change_description(index, text):
            return self._index_error(index)
        return CommandResult.success(message="Event changed!")

    def remove_event(self, index: int) -> CommandResult[EventView]:
        ev = self.schedule.remove(index)
        if ev is None:
            return self._index_error(index)
        return CommandResult.success(EventView.of(index, ev), "Event removed!")
