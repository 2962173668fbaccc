"""
Error types shared by the core modules.

Every failure the core can report has an ErrorKind, so that the command layer
(dayschedule/commands.py) can turn exceptions into plain result values
without caring which module raised them.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    RANGE_ERROR = "range_error"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    CAPACITY_EXHAUSTED = "capacity_exhausted"


class ScheduleError(Exception):
    """
    Base class for all errors raised by dayschedule.
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(ScheduleError, ValueError):
    """A required value is missing (None) or has the wrong type."""

    kind = ErrorKind.INVALID_ARGUMENT


class RangeError(ScheduleError, ValueError):
    """A number lies outside its domain (hour, minute, duration, ...)."""

    kind = ErrorKind.RANGE_ERROR


class IndexOutOfRangeError(ScheduleError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} out of bounds (size {size})")
        self.index = index
        self.size = size


class CapacityExhaustedError(ScheduleError, RuntimeError):
    kind = ErrorKind.CAPACITY_EXHAUSTED
