"""Alphabetical next/previous navigation over live workspaces.

Always case-insensitive alphabetical, whatever the switcher sort order, so
repeated steps visit workspaces in a predictable order.
"""

from __future__ import annotations

from collections.abc import Iterable


def cycle_workspace(names: Iterable[str], current: str | None, step: int) -> str | None:
    """Return the workspace *step* positions away from *current*, wrapping around.

    Falls back to the first workspace when *current* is not in *names* (for
    example, closed by someone else in the meantime).  ``None`` if there are
    no workspaces at all.
    """
    ordered = sorted(names, key=lambda name: (name.lower(), name))
    if not ordered:
        return None
    try:
        index = ordered.index(current)
    except ValueError:
        return ordered[0]
    return ordered[(index + step) % len(ordered)]


def next_workspace(names: Iterable[str], current: str | None) -> str | None:
    return cycle_workspace(names, current, 1)


def previous_workspace(names: Iterable[str], current: str | None) -> str | None:
    return cycle_workspace(names, current, -1)
