"""Domain exceptions.

Managers and adapters raise these; only the command line (or whatever host
embeds the registry) turns them into user-visible notices.  None of them is
meant to terminate the hosting terminal session.
"""

from __future__ import annotations


class WaypointError(Exception):
    """Base class for every error raised by the registry."""


class ToolNotConfiguredError(WaypointError, ValueError):
    """Raised when a required external executable path is not set."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} not configured; set WAYPOINT_{setting.upper()}")


class ActiveWorkspaceError(WaypointError, ValueError):
    """Raised when asked to close the workspace the caller is running in."""

    def __init__(self, workspace: str) -> None:
        self.workspace = workspace
        super().__init__(f"Cannot close active workspace: {workspace}")


class MultiplexerError(WaypointError, RuntimeError):
    """Raised when a multiplexer command exits non-zero."""


class PaneListingError(MultiplexerError):
    """Raised when the pane list cannot be fetched or parsed."""
