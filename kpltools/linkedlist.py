"""A list with a movable cursor, supporting cursor-relative edits."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class CursorList:
    """A sequence that remembers a current position.

    Every insertion moves the cursor onto the new element. Deleting the
    first or last element moves the cursor to the new first or last
    element. Deleting the current element moves it to the one after.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        self._cursor: int | None = None
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, current={self.current()!r})"

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def current(self) -> Any:
        """Return the element under the cursor, or None if there is none."""
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    def insert_at_head(self, value: Any) -> None:
        self._items.insert(0, value)
        self._cursor = 0

    def append(self, value: Any) -> None:
        self._items.append(value)
        self._cursor = len(self._items) - 1

    def insert_after_current(self, value: Any) -> None:
        if self._cursor is None:
            self._items = [value]
            self._cursor = 0
            return
        self._cursor += 1
        self._items.insert(self._cursor, value)

    def insert_before_current(self, value: Any) -> None:
        if self._cursor is None:
            self._items = [value]
            self._cursor = 0
            return
        self._items.insert(self._cursor, value)

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at zero-based ``position``."""
        if position < 0:
            raise IndexError("position must not be negative")
        if position == 0:
            self.insert_at_head(value)
            return
        if not self._items:
            raise IndexError("there is no list")
        if position > len(self._items):
            raise IndexError("not enough elements")
        if position == len(self._items):
            self.append(value)
            return
        self._cursor = position
        self.insert_before_current(value)

    def delete_first(self) -> None:
        if not self._items:
            return
        del self._items[0]
        self._cursor = 0 if self._items else None

    def delete_last(self) -> None:
        if not self._items:
            return
        self._items.pop()
        self._cursor = len(self._items) - 1 if self._items else None

    def delete_current(self) -> None:
        if self._cursor is None:
            return
        if self._cursor == 0:
            self.delete_first()
        elif self._cursor == len(self._items) - 1:
            self.delete_last()
        else:
            del self._items[self._cursor]

    def delete_at(self, position: int) -> None:
        """Delete the element at zero-based ``position``."""
        if not self._items:
            return
        if position < 0 or position >= len(self._items):
            raise IndexError("not enough elements")
        self._cursor = position
        self.delete_current()

    def reverse(self) -> None:
        """Reverse the list in place; the cursor moves to the new head."""
        self._items.reverse()
        self._cursor = 0 if self._items else None