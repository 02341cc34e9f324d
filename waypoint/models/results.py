"""Outcome of an external process call."""

from __future__ import annotations

from pydantic import BaseModel


class ProcessResult(BaseModel):
    """Captured result of running an executable.

    Fire-and-forget callers may discard it; correctness never depends on it.
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
