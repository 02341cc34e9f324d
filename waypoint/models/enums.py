"""Shared enumerations."""

from __future__ import annotations

from enum import StrEnum


class SortOrder(StrEnum):
    """Ordering of live workspaces in the switcher.

    Cycling ignores this and is always alphabetical.
    """

    RECENCY = "recency"
    ALPHABETICAL = "alphabetical"


class ChoiceKind(StrEnum):
    """What selecting a choice does."""

    WORKSPACE = "workspace"
    """Switch to a workspace that already exists in the multiplexer."""

    SUGGESTION = "suggestion"
    """Create a workspace for a directory suggested by the history oracle."""
