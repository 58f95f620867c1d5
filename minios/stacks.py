"""Last-in, first-out stacks: bounded arrays, unbounded lists, and any item type.

:class:`Stack` is the shared interface.  :class:`ArrayStack` holds integers
up to a fixed capacity and :class:`ListStack` holds any number of them.
:class:`BoundedStack` holds items of any type up to a fixed capacity.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from minios.intlist import IntList

T = TypeVar("T")

SELF_TEST_START = 17


def _successor(value: T) -> T:
    """Return the value after ``value``: the next integer or the next character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"cannot step past the string {value!r}")
        return chr(ord(value) + 1)  # type: ignore[return-value]
    return value + 1  # type: ignore[operator,no-any-return]


class Stack(ABC):
    """A last-in, first-out stack of integers."""

    @abstractmethod
    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""

    @abstractmethod
    def pop(self) -> int:
        """Take the top value off the stack and return it."""

    @abstractmethod
    def full(self) -> bool:
        """Return True if no more values fit."""

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the stack holds nothing."""

    def self_test(self, num_to_push: int) -> list[int]:
        """Push ``num_to_push`` values counting up from 17, then pop them all.

        Each step is printed; the popped values are returned in the order
        they came off.
        """
        count = SELF_TEST_START
        for _ in range(num_to_push):
            if self.full():
                raise OverflowError("stack filled up during the self test")
            print(f"pushing {count}")
            self.push(count)
            count += 1
        popped = []
        while not self.empty():
            value = self.pop()
            print(f"popping {value}")
            popped.append(value)
        return popped


class ArrayStack(Stack):
    """A stack of integers with room for at most ``size`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"a stack needs room for at least one value, got {size}")
        self._size = size
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._size}, items={self._items!r})"

    def push(self, value: int) -> None:
        if self.full():
            raise OverflowError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> int:
        if self.empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def full(self) -> bool:
        return len(self._items) == self._size

    def empty(self) -> bool:
        return not self._items


class ListStack(Stack):
    """A stack of integers that never fills up."""

    def __init__(self) -> None:
        self._list = IntList()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._list!r})"

    def push(self, value: int) -> None:
        self._list.prepend(value)

    def pop(self) -> int:
        if self.empty():
            raise IndexError("pop from an empty stack")
        return self._list.remove()

    def full(self) -> bool:
        return False

    def empty(self) -> bool:
        return self._list.is_empty()


class BoundedStack(Generic[T]):
    """A stack of items of any type with room for at most ``size`` of them."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"a stack needs room for at least one item, got {size}")
        self._size = size
        self._items: list[T] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._size}, items={self._items!r})"

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.full():
            raise OverflowError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> T:
        """Take the top item off the stack and return it."""
        if self.empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def full(self) -> bool:
        """Return True if no more items fit."""
        return len(self._items) == self._size

    def empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def self_test(self, start: T) -> list[T]:
        """Fill the stack with successive values from ``start``, then empty it.

        ``start`` is an integer or a single character.  Each step is printed;
        the popped items are returned in the order they came off.
        """
        count = start
        while not self.full():
            print(f"pushing {count}")
            self.push(count)
            count = _successor(count)
        popped = []
        while not self.empty():
            value = self.pop()
            print(f"popping {value}")
            popped.append(value)
        return popped


def _run_simple() -> None:
    BoundedStack[int](10).self_test(SELF_TEST_START)


def _run_inherit() -> None:
    print("Testing ArrayStack")
    ArrayStack(10).self_test(10)
    print("Testing ListStack")
    ListStack().self_test(10)


def _run_template() -> None:
    print("Testing BoundedStack[int]")
    BoundedStack[int](10).self_test(SELF_TEST_START)
    print("Testing BoundedStack[str]")
    BoundedStack[str](10).self_test("a")


_DEMOS = {"simple": _run_simple, "inherit": _run_inherit, "template": _run_template}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the stack demonstrations and return the exit status."""
    parser = argparse.ArgumentParser(description="Exercise the stack implementations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=[*_DEMOS, "all"],
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    if args.demo == "all":
        for run in _DEMOS.values():
            run()
    else:
        _DEMOS[args.demo]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())