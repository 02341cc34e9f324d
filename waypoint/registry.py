"""In-process focus tracking for the "switch to previous workspace" toggle.

Ephemeral: empty on process restart.  Durable recency lives in the history
store.
"""

from __future__ import annotations

from loguru import logger


class FocusTracker:
    """Remembers the most recently left workspace.

    The host calls :meth:`notify` on every focus change.  Repeated
    notifications for the same workspace are ignored, so ``previous`` only
    moves when focus lands on a different workspace.
    """

    def __init__(self) -> None:
        self._last_focused: str | None = None
        self._previous: str | None = None

    @property
    def previous(self) -> str | None:
        return self._previous

    @property
    def last_focused(self) -> str | None:
        return self._last_focused

    # -- Notifications ---------------------------------------------------------

    def notify(self, workspace: str | None) -> None:
        if not workspace or workspace == self._last_focused:
            return
        if self._last_focused is not None:
            self._previous = self._last_focused
            logger.debug("Focus: {} -> {}", self._last_focused, workspace)
        self._last_focused = workspace

    # -- Toggle ----------------------------------------------------------------

    def toggle(self, current: str) -> str | None:
        """Return the workspace to switch to, or ``None`` if there is none.

        The workspace being left becomes the new ``previous``.
        """
        target = self._previous
        if target is None or target == current:
            return None
        self._previous = current
        self._last_focused = target
        return target

    # -- Maintenance -----------------------------------------------------------

    def rename(self, old_name: str, new_name: str) -> None:
        if self._previous == old_name:
            self._previous = new_name
        if self._last_focused == old_name:
            self._last_focused = new_name

    def forget(self, workspace: str) -> None:
        if self._previous == workspace:
            self._previous = None
