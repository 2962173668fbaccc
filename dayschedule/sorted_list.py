"""
Ordered dynamic array.

SortedList keeps its elements in ascending order (by an optional key) inside a
fixed-size backing list that is managed by hand:

- capacity doubles when an insert finds the array full
- capacity halves after a delete leaves it less than one third used
- slots at [size, capacity) always hold None

The growth rule lives in a CapacityPolicy so it can be swapped and tested on
its own (e.g. with a tiny upper bound to reach CapacityExhaustedError).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar

from dayschedule.errors import CapacityExhaustedError, IndexOutOfRangeError, InvalidArgumentError

T = TypeVar("T")

MIN_CAPACITY = 2
# Java-style int ceiling, minus headroom for the doubling arithmetic
MAX_CAPACITY = 2**31 - 1 - 50


class OrderedContainer(Protocol[T]):
    """
    What the Schedule needs from its storage.
    """

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def insert(self, value: T) -> None: ...

    def get(self, index: int) -> T: ...

    def delete_at(self, index: int) -> T: ...


class CapacityPolicy(ABC):
    """
    Decides the next capacity when growing or shrinking.
    """

    def __init__(self, min_capacity: int = MIN_CAPACITY, max_capacity: int = MAX_CAPACITY) -> None:
        if min_capacity < MIN_CAPACITY or max_capacity < min_capacity:
            raise InvalidArgumentError(f"Invalid capacity bounds: [{min_capacity}, {max_capacity}]")
        self.min_capacity = min_capacity
        self.max_capacity = max_capacity

    @abstractmethod
    def grown(self, capacity: int) -> int:
        ...

    @abstractmethod
    def shrunk(self, capacity: int, size: int) -> int:
        ...

    @abstractmethod
    def should_shrink(self, capacity: int, size: int) -> bool:
        ...


class DoublingPolicy(CapacityPolicy):
    """
    Double on growth, halve on shrink, shrink once size*3 < capacity.
    """

    def grown(self, capacity: int) -> int:
        return max(self.min_capacity, min(capacity * 2, self.max_capacity))

    def shrunk(self, capacity: int, size: int) -> int:
        return max(capacity // 2, self.min_capacity, size)

    def should_shrink(self, capacity: int, size: int) -> bool:
        return size * 3 < capacity


class SortedList(Generic[T]):
    """
    Amortized-growth array maintained in ascending order.

    Indices are zero-based against the current size and are only valid until
    the next mutating call (insert may move elements around).
    """

    def __init__(
        self,
        initial_capacity: int = MIN_CAPACITY,
        key: Optional[Callable[[T], Any]] = None,
        policy: Optional[CapacityPolicy] = None,
    ) -> None:
        self._policy = policy if policy is not None else DoublingPolicy()
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise InvalidArgumentError(f"Capacity must be an integer, got {initial_capacity!r}")
        if initial_capacity < self._policy.min_capacity:
            raise InvalidArgumentError(f"Capacity must be at least {self._policy.min_capacity}!")
        if initial_capacity > self._policy.max_capacity:
            raise InvalidArgumentError(f"Capacity must be at most {self._policy.max_capacity}!")

        self._key: Callable[[T], Any] = key if key is not None else (lambda v: v)
        self._data: list[Optional[T]] = [None] * initial_capacity
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]  # type: ignore[misc]

    def __repr__(self) -> str:
        items = ", ".join(repr(v) for v in self)
        return f"SortedList([{items}], capacity={self.capacity})"

    # ----- helpers -----

    def _check_index(self, index: int, upper: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < upper):
            raise IndexOutOfRangeError(index, self._size)

    def _check_room(self) -> None:
        if self.capacity >= self._policy.max_capacity:
            raise CapacityExhaustedError("Cannot add: capacity upper-bound reached!")
        if self._size == self.capacity:
            self.grow_capacity()

    def _upper_bound(self, value: T) -> int:
        """
        First position whose element sorts strictly after value.

        Equal keys go after existing ones, so insertion order is kept for ties.
        """
        k = self._key(value)
        lo, hi = 0, self._size
        while lo < hi:
            mid = (lo + hi) // 2
            if k < self._key(self._data[mid]):  # type: ignore[arg-type]
                hi = mid
            else:
                lo = mid + 1
        return lo

    def _fits_between(self, index_before: int, value: T, index_after: int) -> bool:
        k = self._key(value)
        if index_before >= 0 and k < self._key(self._data[index_before]):  # type: ignore[arg-type]
            return False
        if index_after < self._size and self._key(self._data[index_after]) < k:  # type: ignore[arg-type]
            return False
        return True

    def _shift_right_from(self, index: int) -> None:
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]

    # ----- public API -----

    def insert(self, value: T) -> None:
        """
        Add value and keep [0, size) ascending.
        """
        if value is None:
            raise InvalidArgumentError("Cannot add: null value!")
        self._check_room()

        pos = self._upper_bound(value)
        self._shift_right_from(pos)
        self._data[pos] = value
        self._size += 1

    def get(self, index: int) -> T:
        self._check_index(index, self._size)
        return self._data[index]  # type: ignore[return-value]

    def replace_at(self, index: int, value: T) -> bool:
        """
        Overwrite the element at index, but only if value still sorts between
        its neighbours. A missing neighbour (first/last slot) is no constraint.

        Returns False and leaves the list untouched otherwise.
        """
        self._check_index(index, self._size)
        if value is None:
            raise InvalidArgumentError("Cannot replace: null value!")

        if not self._fits_between(index - 1, value, index + 1):
            return False
        self._data[index] = value
        return True

    def insert_at(self, index: int, value: T) -> bool:
        """
        Insert value at a position the caller already knows to be sorted.

        index may equal size (append). Returns False without changing anything
        if value does not sort between the elements around index.
        """
        self._check_index(index, self._size + 1)
        if value is None:
            raise InvalidArgumentError("Cannot add: null value!")
        if not self._fits_between(index - 1, value, index):
            return False
        self._check_room()

        self._shift_right_from(index)
        self._data[index] = value
        self._size += 1
        return True

    def delete_at(self, index: int) -> T:
        """
        Remove and return the element at index; may shrink the capacity.
        """
        self._check_index(index, self._size)
        removed = self._data[index]

        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._data[self._size - 1] = None
        self._size -= 1

        if self._policy.should_shrink(self.capacity, self._size):
            self.shrink_capacity()

        return removed  # type: ignore[return-value]

    def grow_capacity(self) -> bool:
        """
        Double the capacity (capped at the upper bound).

        Returns False only if the capacity is already at the bound.
        """
        if self.capacity >= self._policy.max_capacity:
            return False
        self._resize(self._policy.grown(self.capacity))
        return True

    def shrink_capacity(self) -> bool:
        """
        Halve the capacity, never below the minimum or the current size.

        Returns False if nothing changed.
        """
        if self.capacity <= self._policy.min_capacity or self._size == self.capacity:
            return False
        new_cap = self._policy.shrunk(self.capacity, self._size)
        if new_cap >= self.capacity:
            return False
        self._resize(new_cap)
        return True

    def _resize(self, new_capacity: int) -> None:
        new_data: list[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
