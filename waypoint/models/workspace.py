"""Multiplexer-side views of workspaces and the results of lifecycle operations."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PaneInfo(BaseModel):
    """One row of ``wezterm cli list --format json`` (extra keys ignored)."""

    pane_id: int
    window_id: int
    tab_id: int | None = None
    workspace: str
    cwd: str | None = None
    title: str | None = None


class WindowInfo(BaseModel):
    window_id: int
    workspace: str


class RenameResult(BaseModel):
    old_name: str
    new_name: str = Field(description="Display form the workspace now carries")
    merged: bool = Field(default=False, description="True if folded into an existing workspace")


class CloseResult(BaseModel):
    workspace: str
    pane_ids: list[int] = Field(default_factory=list, description="Panes that were asked to terminate")

    @property
    def closed(self) -> bool:
        """False when no pane belonged to the workspace (nothing to do)."""
        return bool(self.pane_ids)
