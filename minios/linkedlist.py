"""Singly linked lists of arbitrary items, plain and kept in sorted order.

Items are compared with ``==``; a list never holds the same item twice.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T) -> None:
        self.item = item
        self.next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list with cheap access to both ends."""

    def __init__(self) -> None:
        self._first: _Node[T] | None = None
        self._last: _Node[T] | None = None
        self._count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _require_absent(self, item: T) -> None:
        if item in self:
            raise ValueError(f"{item!r} is already in the list")

    def prepend(self, item: T) -> None:
        """Put ``item`` at the front of the list."""
        self._require_absent(item)
        node = _Node(item)
        if self._first is None:
            self._first = self._last = node
        else:
            node.next = self._first
            self._first = node
        self._count += 1

    def append(self, item: T) -> None:
        """Put ``item`` at the end of the list."""
        self._require_absent(item)
        node = _Node(item)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._count += 1

    def front(self) -> T:
        """Return the first item without removing it."""
        if self._first is None:
            raise IndexError("front of an empty list")
        return self._first.item

    def remove_front(self) -> T:
        """Remove the first item and return it."""
        node = self._first
        if node is None:
            raise IndexError("remove from an empty list")
        if node is self._last:
            self._first = self._last = None
        else:
            self._first = node.next
        self._count -= 1
        return node.item

    def remove(self, item: T) -> None:
        """Remove ``item``, which must be in the list."""
        if self._first is None:
            raise ValueError(f"{item!r} is not in the list")
        if self._first.item == item:
            self.remove_front()
            return
        prev = self._first
        node = prev.next
        while node is not None:
            if node.item == item:
                prev.next = node.next
                if prev.next is None:
                    self._last = prev
                self._count -= 1
                return
            prev, node = node, node.next
        raise ValueError(f"{item!r} is not in the list")

    def __contains__(self, item: object) -> bool:
        return any(existing == item for existing in self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.item
            node = node.next

    def is_empty(self) -> bool:
        """Return True if the list has no items."""
        return self._count == 0

    def apply(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def sanity_check(self) -> None:
        """Raise RuntimeError if the links and the item count disagree."""
        if self._first is None:
            if self._count != 0 or self._last is not None:
                raise RuntimeError("empty list has a count or a last element")
            return
        if self._last is None or self._last.next is not None:
            raise RuntimeError("last element is missing or not at the end")
        found = 1
        node = self._first
        while node is not self._last:
            node = node.next
            found += 1
            if node is None or found > self._count:
                raise RuntimeError("last element not reachable within the item count")
        if found != self._count:
            raise RuntimeError(f"list holds {found} items but counts {self._count}")


class SortedList(LinkedList[T]):
    """A linked list kept in increasing order by a comparison function.

    ``compare(x, y)`` returns a negative number, zero or a positive number
    as ``x`` is less than, equal to or greater than ``y``.  An item goes
    after any items that compare equal to it.
    """

    def __init__(self, compare: Callable[[T, T], int]) -> None:
        super().__init__()
        self._compare = compare

    def insert(self, item: T) -> None:
        """Put ``item`` in its place in the order."""
        self._require_absent(item)
        node = _Node(item)
        if self._first is None:
            self._first = self._last = node
        elif self._compare(item, self._first.item) < 0:
            node.next = self._first
            self._first = node
        else:
            current = self._first
            while current.next is not None:
                if self._compare(item, current.next.item) < 0:
                    node.next = current.next
                    current.next = node
                    self._count += 1
                    return
                current = current.next
            current.next = node
            self._last = node
        self._count += 1

    def prepend(self, item: T) -> None:
        """Insert ``item`` in order; a sorted list has no front to put it at."""
        self.insert(item)

    def append(self, item: T) -> None:
        """Insert ``item`` in order; a sorted list has no end to put it at."""
        self.insert(item)

    def sanity_check(self) -> None:
        """Raise RuntimeError if the list is corrupt or out of order."""
        super().sanity_check()
        items = list(self)
        for earlier, later in zip(items, items[1:]):
            if self._compare(earlier, later) > 0:
                raise RuntimeError(f"{earlier!r} comes before {later!r} out of order")