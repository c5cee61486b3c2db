"""Fixed-capacity slot containers indexed by small integer ids."""

from __future__ import annotations

import operator
import threading
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def _checked(index, capacity: int) -> int:
    position = operator.index(index)
    if not 0 <= position < capacity:
        raise IndexError(f"index {position} out of range for capacity {capacity}")
    return position


class UniversalHolder(Generic[T]):
    """A fixed number of optional slots; entries are looked up by index or name."""

    def __init__(self, capacity: int) -> None:
        self._slots: List[Optional[T]] = [None] * capacity

    def __repr__(self) -> str:
        return f"UniversalHolder(capacity={len(self._slots)})"

    def __iter__(self) -> Iterator[T]:
        return (value for value in self._slots if value is not None)

    def __getitem__(self, key) -> T:
        value = self.get_by_name(key) if isinstance(key, str) else self.get(key)
        if value is None:
            raise KeyError(f"there is no entry for {key!r}")
        return value

    def remove(self, index) -> Optional[T]:
        """Empty the slot and return what it held."""
        position = _checked(index, len(self._slots))
        value, self._slots[position] = self._slots[position], None
        return value

    def set(self, index, value: Optional[T]) -> None:
        self._slots[_checked(index, len(self._slots))] = value

    def get(self, index) -> Optional[T]:
        return self._slots[_checked(index, len(self._slots))]

    def push(self, value: T) -> int:
        """Store value in the first free slot and return that slot's index."""
        for position, slot in enumerate(self._slots):
            if slot is None:
                self._slots[position] = value
                return position
        raise IndexError("no free slot left")

    def remove_by_name(self, name: str) -> Optional[T]:
        for position, slot in enumerate(self._slots):
            if slot is not None and slot.name == name:
                self._slots[position] = None
                return slot
        return None

    def get_by_name(self, name: str) -> Optional[T]:
        return next((value for value in self if value.name == name), None)


class UniversalArcHolder(Generic[T]):
    """Thread-safe slots holding shared objects that carry their own ``id``."""

    def __init__(self, capacity: int) -> None:
        self._slots: List[Optional[T]] = [None] * capacity
        self._count = 0
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"UniversalArcHolder(capacity={len(self._slots)}, elements={self._count})"

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            snapshot = [value for value in self._slots if value is not None]
        return iter(snapshot)

    def __len__(self) -> int:
        return self._count

    def remove(self, index) -> T:
        value = self.remove_opt(index)
        if value is None:
            raise KeyError(f"there is no entry for index {index!r}")
        return value

    def remove_opt(self, index) -> Optional[T]:
        with self._lock:
            position = _checked(index, len(self._slots))
            value = self._slots[position]
            if value is not None:
                self._slots[position] = None
                self._count -= 1
            return value

    def populate(self, value: T) -> T:
        """Store value in the slot named by its ``id`` and return it."""
        self.set(value.id, value)
        return value

    def set(self, index, value: Optional[T]) -> None:
        with self._lock:
            position = _checked(index, len(self._slots))
            previous = self._slots[position]
            self._slots[position] = value
            if previous is None and value is not None:
                self._count += 1
            elif previous is not None and value is None:
                self._count -= 1

    def get(self, index) -> T:
        position = operator.index(index)
        if 0 <= position < len(self._slots):
            value = self._slots[position]
            if value is not None:
                return value
        raise KeyError(f"there is no entry for index {index!r}")

    def get_opt(self, index) -> Optional[T]:
        return self._slots[_checked(index, len(self._slots))]

    def has(self, index) -> bool:
        position = operator.index(index)
        return 0 <= position < len(self._slots) and self._slots[position] is not None

    def has_not(self, index) -> bool:
        return not self.has(index)