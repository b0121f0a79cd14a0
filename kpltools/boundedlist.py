"""A fixed-capacity list addressed by one-based positions."""

from __future__ import annotations

from typing import Iterable, Iterator

DEFAULT_CAPACITY = 100


class BoundedListError(Exception):
    """Raised when an operation on a BoundedList cannot be carried out."""


class BoundedList:
    """A list of at most ``capacity`` integers with one-based positions."""

    def __init__(self, values: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items = list(values)
        if len(self._items) > capacity:
            raise BoundedListError(f"list holds at most {capacity} elements")

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedList({self._items!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` at ``position`` (1 .. len + 1)."""
        if self.is_full():
            raise BoundedListError("list is full")
        if not 1 <= position <= len(self._items) + 1:
            raise BoundedListError("invalid insert position")
        self._items.insert(position - 1, value)

    def search(self, value: int) -> int | None:
        """Return the position of the first ``value``, or None if absent."""
        for position, item in enumerate(self._items, start=1):
            if item == value:
                return position
        return None

    def delete_at(self, position: int) -> int:
        """Remove and return the element at ``position``."""
        if self.is_empty():
            raise BoundedListError("list is empty")
        if not 1 <= position <= len(self._items):
            raise BoundedListError("invalid delete position")
        return self._items.pop(position - 1)

    def remove_all(self, value: int) -> int:
        """Remove every occurrence of ``value`` and return how many went."""
        if self.is_empty():
            raise BoundedListError("list is empty")
        if value not in self._items:
            raise BoundedListError(f"list does not contain {value}")
        before = len(self._items)
        self._items = [item for item in self._items if item != value]
        return before - len(self._items)

    def format(self) -> str:
        """Render the list as a header line and right-aligned values."""
        return "List: \n" + "".join(f"{item:5d}" for item in self._items) + "\n"