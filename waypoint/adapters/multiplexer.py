"""Terminal multiplexer interface.

The multiplexer owns which workspaces, windows and panes exist.  The registry
never caches any of it: every operation asks again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from waypoint.models.results import ProcessResult
from waypoint.models.workspace import PaneInfo, WindowInfo

FocusCallback = Callable[[str], None]


@runtime_checkable
class Multiplexer(Protocol):
    def list_workspace_names(self) -> list[str]: ...

    def list_windows(self) -> list[WindowInfo]: ...

    def list_panes(self) -> list[PaneInfo]:
        """All panes with their workspace.  Raises ``PaneListingError`` on failure."""
        ...

    def active_workspace(self) -> str: ...

    def activate_workspace(self, name: str, spawn_directory: str | None = None) -> None:
        """Switch to *name*, creating it rooted at *spawn_directory* if it does not exist."""
        ...

    def set_window_workspace(self, window_id: int, name: str) -> None: ...

    def rename_workspace(self, old_name: str, new_name: str) -> None: ...

    def kill_pane(self, pane_id: int) -> ProcessResult:
        """Terminate one pane.  Best effort; the result may be ignored."""
        ...

    def on_focus_change(self, callback: FocusCallback) -> None:
        """Call *callback* with the newly focused workspace name."""
        ...
