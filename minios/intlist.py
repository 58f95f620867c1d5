"""A singly linked list of integers used as a last-in, first-out store."""

from __future__ import annotations

from collections import deque


class IntList:
    """Integers added at the front and taken off the front."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def prepend(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self._items.appendleft(value)

    def remove(self) -> int:
        """Take the first integer off the list and return it."""
        if not self._items:
            raise IndexError("remove from an empty list")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True if the list has no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)