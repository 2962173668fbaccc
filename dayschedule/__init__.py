"""
dayschedule: in-memory daily schedule editor.
"""

from dayschedule.errors import (
    CapacityExhaustedError,
    ErrorKind,
    IndexOutOfRangeError,
    InvalidArgumentError,
    RangeError,
    ScheduleError,
)
from dayschedule.event import Event
from dayschedule.schedule import Schedule
from dayschedule.sorted_list import SortedList
from dayschedule.timeofday import TimeOfDay

__all__ = [
    "CapacityExhaustedError",
    "ErrorKind",
    "Event",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "RangeError",
    "Schedule",
    "ScheduleError",
    "SortedList",
    "TimeOfDay",
]
