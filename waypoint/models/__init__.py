"""Data models for the workspace registry."""

from waypoint.models.choice import Choice, SwitcherPrompt
from waypoint.models.enums import ChoiceKind, SortOrder
from waypoint.models.results import ProcessResult
from waypoint.models.workspace import CloseResult, PaneInfo, RenameResult, WindowInfo

__all__ = [
    # Switcher
    "Choice",
    # Enums
    "ChoiceKind",
    # Results
    "CloseResult",
    # Multiplexer views
    "PaneInfo",
    "ProcessResult",
    "RenameResult",
    "SortOrder",
    "SwitcherPrompt",
    "WindowInfo",
]
