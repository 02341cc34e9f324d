"""History store interface for workspace recency.

The history store is the sole owner of recency data: a mapping from a
workspace's display name to the Unix time it was last accessed.  It is loaded
lazily once per process and flushed after every mutation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for reading and mutating workspace access times.

    Every method normalizes the names it is given, so ``~/p`` and
    ``/home/user/p`` address the same entry.
    """

    def load(self) -> dict[str, int]:
        """Return the live mapping, reading it from disk on first call."""
        ...

    def snapshot(self) -> dict[str, int]:
        """Return a copy of the mapping, safe to hold across mutations."""
        ...

    def get(self, name: str) -> int | None:
        """Last access time of *name*, or ``None`` if never recorded."""
        ...

    def record_access(self, name: str) -> int:
        """Stamp *name* with the current time and persist.  Returns the timestamp."""
        ...

    def remove(self, name: str) -> bool:
        """Forget *name* and persist.  Returns whether an entry existed."""
        ...

    def migrate(self, old_name: str, new_name: str) -> int:
        """Move the access time of *old_name* to *new_name* and persist."""
        ...
