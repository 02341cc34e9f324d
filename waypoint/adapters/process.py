"""Synchronous process runner.

Used for every call to an external tool (zoxide, ``wezterm cli``).  Calls
block until the child exits; no timeout is enforced.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from loguru import logger

from waypoint.models.results import ProcessResult


@runtime_checkable
class ProcessRunner(Protocol):
    def run(self, executable: str, args: Sequence[str]) -> ProcessResult:
        """Run *executable* with *args* and capture its output.  Never raises."""
        ...


class SubprocessRunner:
    """ProcessRunner backed by :func:`subprocess.run`.

    A missing or non-executable binary is reported as a failed result rather
    than an exception, the same as a non-zero exit.
    """

    def run(self, executable: str, args: Sequence[str]) -> ProcessResult:
        cmd = [executable, *args]
        logger.debug("Running: {}", shlex.join(cmd))
        try:
            completed = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as exc:
            logger.debug("Could not start {}: {}", executable, exc)
            return ProcessResult(success=False, stderr=str(exc))

        if completed.returncode != 0:
            logger.debug("{} exited with {}: {}", executable, completed.returncode, completed.stderr.strip())
        return ProcessResult(
            success=completed.returncode == 0,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
