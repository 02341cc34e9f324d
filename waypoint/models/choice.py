"""Switcher choices.

Choices are rebuilt on every switcher invocation and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from waypoint.models.enums import ChoiceKind


class Choice(BaseModel):
    id: str = Field(description="Raw name to act on: live workspace name or oracle path")
    identity: str = Field(description="Normalized display form")
    label: str
    kind: ChoiceKind
    access_time: int | None = Field(default=None, description="Last access (Unix seconds), live workspaces only")
    is_current: bool = False

    @property
    def is_workspace(self) -> bool:
        return self.kind == ChoiceKind.WORKSPACE


class SwitcherPrompt(BaseModel):
    """Everything a selector UI needs to render one prompt."""

    title: str
    description: str
    fuzzy_description: str
    fuzzy: bool = True
    choices: list[Choice] = Field(default_factory=list)
