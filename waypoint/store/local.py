"""Local filesystem history store.

Stores the access-time mapping as a single JSON object::

    {"~/projects/foo": 1718000000, "~/work/bar": 1718000500}

The file is read once, on first access.  A missing or unparsable file is
treated as empty history.  Every mutation rewrites the whole file; write
failures are logged and swallowed because recency is a convenience, not
something callers can act on.

Writes are atomic: data is written to a temporary file in the same directory,
then renamed to the target path, so a concurrent reader never sees a
half-written file.  There is no cross-process locking; the last writer wins.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from waypoint.paths import display_name

_TIMESTAMP = TypeAdapter(int)


def _now() -> int:
    return int(time.time())


class JsonHistoryStore:
    """JSON file implementation of the HistoryStore protocol.

    Not thread-safe.  The registry runs one operation at a time, so the
    in-memory mirror is mutated without locking.
    """

    def __init__(self, path: str | Path, clock: Callable[[], int] | None = None) -> None:
        self._path = Path(path)
        self._clock = clock or _now
        self._times: dict[str, int] | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._times is not None

    # -- Read ------------------------------------------------------------------

    def load(self) -> dict[str, int]:
        if self._times is None:
            self._times = _read_history(self._path)
            logger.debug("History: loaded {} entries from {}", len(self._times), self._path)
        return self._times

    def snapshot(self) -> dict[str, int]:
        return dict(self.load())

    def get(self, name: str) -> int | None:
        return self.load().get(display_name(name))

    # -- Mutation --------------------------------------------------------------

    def record_access(self, name: str) -> int:
        key = display_name(name)
        stamp = self._clock()
        self.load()[key] = stamp
        self.flush()
        return stamp

    def remove(self, name: str) -> bool:
        times = self.load()
        key = display_name(name)
        if key not in times:
            return False
        del times[key]
        self.flush()
        return True

    def migrate(self, old_name: str, new_name: str) -> int:
        """Move the access time of *old_name* to *new_name*.

        Without an old timestamp, *new_name* keeps its own record if it has
        one and is stamped with the current time otherwise.
        """
        times = self.load()
        old_key = display_name(old_name)
        new_key = display_name(new_name)
        old_stamp = times.pop(old_key, None)
        if old_stamp is not None:
            stamp = old_stamp
        else:
            stamp = times.get(new_key) or self._clock()
        times[new_key] = stamp
        self.flush()
        return stamp

    # -- Persistence -----------------------------------------------------------

    def flush(self) -> None:
        """Write the mapping to disk.  Never raises."""
        data = json.dumps(self.load(), indent=2, sort_keys=True)
        try:
            _atomic_write(self._path, data)
        except OSError as exc:
            logger.warning("History: could not write {}: {}", self._path, exc)
        else:
            logger.debug("History: saved {} entries", len(self.load()))


# -- Helpers -------------------------------------------------------------------


def _read_history(path: Path) -> dict[str, int]:
    """Parse the history file, dropping anything that is not ``name -> int``."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("History: could not read {}: {}", path, exc)
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("History: {} is not valid JSON, starting empty", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("History: {} is not a JSON object, starting empty", path)
        return {}

    times: dict[str, int] = {}
    for name, value in data.items():
        try:
            times[display_name(name)] = _TIMESTAMP.validate_python(value)
        except ValidationError:
            logger.debug("History: dropping {!r} with bad timestamp {!r}", name, value)
    return times


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename.

    The temp file is created in the same directory so ``os.replace`` is atomic
    on POSIX.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up temp file on any failure.
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
