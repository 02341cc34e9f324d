"""Directory-history oracle backed by zoxide."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger

from waypoint.adapters.process import ProcessRunner
from waypoint.models.results import ProcessResult


@runtime_checkable
class DirectoryOracle(Protocol):
    def query_list(self) -> list[str]:
        """Known directories, best first.  Empty on any failure."""
        ...

    def add_visit(self, path: str) -> ProcessResult:
        """Record a visit to *path*.  Best effort; the result may be ignored."""
        ...


class ZoxideOracle:
    """DirectoryOracle using ``zoxide query -l`` and ``zoxide add``."""

    def __init__(self, executable: str | None, runner: ProcessRunner) -> None:
        self._executable = executable
        self._runner = runner

    def query_list(self) -> list[str]:
        if not self._executable:
            return []
        result = self._runner.run(self._executable, ["query", "-l"])
        if not result.success:
            logger.warning("zoxide query failed, no directory suggestions: {}", result.stderr.strip())
            return []
        return [line for line in result.stdout.splitlines() if line]

    def add_visit(self, path: str) -> ProcessResult:
        if not self._executable:
            return ProcessResult(success=False, stderr="zoxide not configured")
        result = self._runner.run(self._executable, ["add", "--", path])
        if not result.success:
            logger.debug("zoxide add {} failed: {}", path, result.stderr.strip())
        return result
