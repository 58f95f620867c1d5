"""A hash table of items, each found by a key taken from the item itself.

Collisions are resolved by chaining: each bucket is a linked list.  The
table grows by a fixed factor whenever the average bucket gets too long.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any, Generic, TypeVar

from minios.linkedlist import LinkedList

K = TypeVar("K")
T = TypeVar("T")

INITIAL_BUCKETS = 4
RESIZE_RATIO = 3
INCREASE_SIZE_BY = 4


class HashTable(Generic[K, T]):
    """Items keyed by ``get_key(item)`` and placed by ``hash_func(key)``.

    Keys are compared with ``==``; no two items in the table share a key.
    """

    def __init__(
        self, get_key: Callable[[T], K], hash_func: Callable[[K], int]
    ) -> None:
        self._get_key = get_key
        self._hash = hash_func
        self._count = 0
        self._buckets: list[LinkedList[T]] = self._new_buckets(INITIAL_BUCKETS)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @staticmethod
    def _new_buckets(size: int) -> list[LinkedList[T]]:
        return [LinkedList() for _ in range(size)]

    def _bucket_of(self, key: K) -> int:
        return self._hash(key) % len(self._buckets)

    def _find_in_bucket(self, bucket: int, key: K) -> tuple[bool, T | None]:
        for item in self._buckets[bucket]:
            if self._get_key(item) == key:
                return True, item
        return False, None

    def _rehash(self) -> None:
        self.sanity_check()
        old = self._buckets
        self._buckets = self._new_buckets(len(old) * INCREASE_SIZE_BY)
        for bucket in old:
            while not bucket.is_empty():
                item = bucket.remove_front()
                self._buckets[self._bucket_of(self._get_key(item))].append(item)
        self.sanity_check()

    def insert(self, item: T) -> None:
        """Put ``item`` in the table; its key must not be there already."""
        key = self._get_key(item)
        if key in self:
            raise KeyError(f"key {key!r} is already in the table")
        if self._count // len(self._buckets) >= RESIZE_RATIO:
            self._rehash()
        self._buckets[self._bucket_of(key)].append(item)
        self._count += 1

    def remove(self, key: K) -> T:
        """Remove the item with ``key``, which must be in the table, and return it."""
        bucket = self._bucket_of(key)
        found, item = self._find_in_bucket(bucket, key)
        if not found:
            raise KeyError(key)
        self._buckets[bucket].remove(item)  # type: ignore[arg-type]
        self._count -= 1
        return item  # type: ignore[return-value]

    def find(self, key: K) -> T | None:
        """Return the item with ``key``, or None if there is none."""
        return self._find_in_bucket(self._bucket_of(key), key)[1]

    def __contains__(self, key: object) -> bool:
        return self._find_in_bucket(self._bucket_of(key), key)[0]  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket

    def is_empty(self) -> bool:
        """Return True if the table holds no items."""
        return self._count == 0

    def apply(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item in the table."""
        for item in self:
            func(item)

    def sanity_check(self) -> None:
        """Raise RuntimeError if a bucket is corrupt, an item is misplaced or the count is off."""
        found = 0
        for index, bucket in enumerate(self._buckets):
            bucket.sanity_check()
            found += len(bucket)
            for item in bucket:
                if self._bucket_of(self._get_key(item)) != index:
                    raise RuntimeError(f"{item!r} is stored in the wrong bucket")
        if found != self._count:
            raise RuntimeError(f"table holds {found} items but counts {self._count}")


__all__ = ["HashTable", "Hashable"]