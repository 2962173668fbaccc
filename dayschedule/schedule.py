"""
The Schedule: one session's collection of events.

Storage and ordering are delegated to a SortedList[Event]; this module only
adds index-based editing on top. Index arguments follow the current order and
become stale after any call that may reorder events (add, move_item, remove).
Callers that need a lasting reference should keep Event.event_id and look it
up again with index_of().
"""

from __future__ import annotations

import itertools
from typing import Iterator, Optional

from dayschedule.errors import InvalidArgumentError
from dayschedule.event import Event
from dayschedule.sorted_list import OrderedContainer, SortedList
from dayschedule.timeofday import TimeOfDay


class Schedule:
    def __init__(self, storage: Optional[OrderedContainer[Event]] = None) -> None:
        self._items: OrderedContainer[Event] = storage if storage is not None else SortedList()
        self._ids = itertools.count(1)

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._items)

    def _valid_index(self, index: int) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self._items)

    def add(self, event: Event) -> Event:
        """
        Insert event at its sorted position and give it a stable id.

        An event that is already in this schedule is rejected.
        """
        if event is None:
            raise InvalidArgumentError("Null Event object!")
        if any(ev is event for ev in self._items):
            raise InvalidArgumentError(f"Event {event} is already in the schedule")
        if event.event_id is None or self.index_of(event.event_id) is not None:
            event.event_id = next(self._ids)
        self._items.insert(event)
        return event

    def get(self, index: int) -> Optional[Event]:
        if not self._valid_index(index):
            return None
        return self._items.get(index)

    def index_of(self, event_id: int) -> Optional[int]:
        """
        Current index of the event with this id, or None.
        """
        for i, ev in enumerate(self._items):
            if ev.event_id == event_id:
                return i
        return None

    def find(self, event_id: int) -> Optional[Event]:
        idx = self.index_of(event_id)
        return None if idx is None else self._items.get(idx)

    def move_item(self, index: int, new_start: Optional[TimeOfDay]) -> bool:
        """
        Move the event at index to start at new_start (same duration).

        If the event no longer sorts between its neighbours it is taken out
        and inserted again, so the schedule stays ordered by start time.
        """
        if not self._valid_index(index) or new_start is None:
            return False

        event = self._items.get(index)
        if not event.move_start(new_start):
            return False

        before = self._items.get(index - 1) if index > 0 else None
        after = self._items.get(index + 1) if index + 1 < len(self._items) else None
        if (before is not None and event < before) or (after is not None and after < event):
            self._items.delete_at(index)
            self._items.insert(event)
        return True

    def change_duration(self, index: int, minutes: int) -> bool:
        # only the end time changes, so the order is unaffected
        if not self._valid_index(index) or minutes is None or minutes < 0:
            return False
        return self._items.get(index).change_duration(minutes)

    def change_description(self, index: int, description: Optional[str]) -> bool:
        if not self._valid_index(index):
            return False
        self._items.get(index).set_description(description)
        return True

    def remove(self, index: int) -> Optional[Event]:
        """
        Remove and return the event at index, or None if index is invalid.
        """
        if not self._valid_index(index):
            return None
        return self._items.delete_at(index)

    def lines(self) -> list[tuple[int, str]]:
        return [(i, str(ev)) for i, ev in enumerate(self._items)]

    def __str__(self) -> str:
        return "\n".join(f"[{i}]{text}" for i, text in self.lines())
