# minios

Small, readable building blocks of a teaching operating system, written in
plain Python with no third-party dependencies:

- `minios.linkedlist` – `LinkedList`, a singly linked list of arbitrary items
  (`prepend`, `append`, `front`, `remove_front`, `remove`, `apply`,
  `sanity_check`, plus `len()`, `in` and iteration), and `SortedList`, which
  keeps its items in increasing order by a comparison function. A list never
  holds the same item twice; adding a duplicate raises `ValueError`.
- `minios.intlist` – `IntList`, a minimal list of integers added at and taken
  off the front.
- `minios.hashtable` – `HashTable`, a chained hash table whose items carry
  their own keys (`get_key(item)`) and are placed by `hash_func(key)`. It
  starts with four buckets and grows fourfold when the average bucket holds
  three items. Inserting a key twice or removing a missing key raises
  `KeyError`; `find` returns `None` for a missing key.
- `minios.debug` – `Debug`, flag-controlled debug messages. `is_enabled(flag)`
  is true when the flag character is in the flag string or the string holds
  `"+"`; `log(flag, message)` prints to standard error when the flag is on.
- `minios.stacks` – the `Stack` interface with `ArrayStack` (bounded, integers)
  and `ListStack` (unbounded, integers), and `BoundedStack` for items of any
  type. Pushing onto a full stack raises `OverflowError`; popping an empty one
  raises `IndexError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Quick tour

```python
from minios.linkedlist import SortedList
from minios.hashtable import HashTable
from minios.stacks import ArrayStack, ListStack, BoundedStack
from minios.debug import Debug

ordered = SortedList(lambda x, y: (x > y) - (x < y))
for value in (9, 5, 7):
    ordered.insert(value)
assert list(ordered) == [5, 7, 9]

table = HashTable(int, lambda key: key)
table.insert("14")
assert 14 in table
assert table.remove(14) == "14"
assert table.is_empty()

stack = ArrayStack(10)
stack.push(17)
assert stack.pop() == 17

unbounded = ListStack()
assert not unbounded.full()

letters = BoundedStack(3)
assert letters.self_test("a") == ["c", "b", "a"]

debug = Debug("f")
assert debug.is_enabled("f") and not debug.is_enabled("t")
```

## The stack demonstration

The `minios-stacks` command pushes a run of values onto each stack
implementation and prints them as they are popped off again:

```
minios-stacks            # every demonstration
minios-stacks simple     # one BoundedStack of ten integers from 17
minios-stacks inherit    # ArrayStack and ListStack, ten integers each
minios-stacks template   # BoundedStack of integers, then of characters from "a"
```

## What this package does not do

Everything here lives in memory. The package has no bitmap of free sectors,
no simulated disk, no file headers, no directory and no file system: nothing
is stored to or read back from disk, and there is no command for creating,
listing or removing files.