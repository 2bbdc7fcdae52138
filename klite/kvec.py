"""A growable vector that tracks its allocated capacity."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


def _roundup(value: int) -> int:
    """Smallest power of two not below ``value`` (``value`` >= 1)."""
    return 1 << (value - 1).bit_length()


class Vector:
    """List-backed vector with doubling growth and grow-on-access."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list = list(items) if items is not None else []
        self._capacity = len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def push(self, value: Any) -> None:
        """Append a value, doubling capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 2
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def _grow_to(self, index: int) -> None:
        if index < 0:
            raise IndexError(f"negative index {index}")
        if self._capacity <= index:
            self._capacity = _roundup(index + 1)
        if len(self._items) <= index:
            self._items.extend([None] * (index + 1 - len(self._items)))

    def at(self, index: int) -> Any:
        """Return the value at ``index``, growing the vector to include it."""
        self._grow_to(index)
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Store ``value`` at ``index``, growing the vector to include it."""
        self._grow_to(index)
        self._items[index] = value

    def resize(self, capacity: int) -> None:
        """Set the capacity, dropping values that no longer fit."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        del self._items[capacity:]

    def copy_from(self, other: Iterable[Any]) -> None:
        """Replace the contents with those of ``other``."""
        values = list(other)
        if self._capacity < len(values):
            self._capacity = len(values)
        self._items = values

    def reverse(self) -> None:
        """Reverse the values in place."""
        self._items.reverse()

    def capacity(self) -> int:
        """The number of slots allocated."""
        return self._capacity