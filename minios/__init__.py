"""In-memory building blocks for a teaching operating system: linked lists, a hash table, stacks and debug flags."""

__version__ = "0.1.0"