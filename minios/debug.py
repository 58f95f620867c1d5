"""Debug messages that are printed only for the flags that were switched on."""

from __future__ import annotations

import sys

DBG_ALL = "+"
DBG_THREAD = "t"
DBG_SYNCH = "s"
DBG_INT = "i"
DBG_MACH = "m"
DBG_DISK = "d"
DBG_FILE = "f"
DBG_ADDR = "a"
DBG_NET = "n"
DBG_SYS = "u"
DBG_TRA_CODE = "c"


class Debug:
    """Decides which debug messages to print from a string of flag characters.

    A flag of ``+`` in the string switches every message on.  With no flags
    at all (``None`` or an empty string) nothing is printed.
    """

    def __init__(self, flags: str | None = None) -> None:
        self._flags = flags

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._flags!r})"

    def is_enabled(self, flag: str) -> bool:
        """Return True if messages tagged with ``flag`` are to be printed."""
        if not self._flags:
            return False
        return flag in self._flags or DBG_ALL in self._flags

    def log(self, flag: str, message: object) -> bool:
        """Print ``message`` to standard error if ``flag`` is on; return whether it was."""
        if not self.is_enabled(flag):
            return False
        print(message, file=sys.stderr)
        return True