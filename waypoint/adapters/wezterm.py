"""Multiplexer adapter over ``wezterm cli``.

Command mapping:

- list panes / workspaces / windows: ``wezterm cli list --format json``
- activate existing workspace: ``wezterm cli activate-pane --pane-id N``
  (first pane found in that workspace)
- create workspace: ``wezterm cli spawn --new-window --workspace NAME [--cwd DIR]``
- rename: ``wezterm cli rename-workspace --workspace OLD NEW``
- move window: every pane of the window is moved with
  ``wezterm cli move-pane-to-new-tab --pane-id N --new-window --workspace NAME``
- close pane: ``wezterm cli kill-pane --pane-id N``

The CLI has no way to subscribe to focus changes, so the embedding host
forwards them through :meth:`WeztermCli.emit_focus_change`.  The bundled
``waypoint`` command runs one short process per invocation and never emits
them, so it has no toggle command; a long-lived host that forwards focus
changes gets toggling from :meth:`WorkspaceManager.toggle_previous`.
"""

from __future__ import annotations

import os

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from waypoint.adapters.multiplexer import FocusCallback
from waypoint.adapters.process import ProcessRunner
from waypoint.errors import MultiplexerError, PaneListingError, ToolNotConfiguredError
from waypoint.models.results import ProcessResult
from waypoint.models.workspace import PaneInfo, WindowInfo

DEFAULT_WORKSPACE = "default"

_PANES = TypeAdapter(list[PaneInfo])


class WeztermCli:
    """Multiplexer implementation driving a running WezTerm through its CLI.

    *pane_id* identifies the pane the caller runs in (``$WEZTERM_PANE``) and
    decides which workspace counts as active.
    """

    def __init__(
        self,
        executable: str | None,
        runner: ProcessRunner,
        *,
        pane_id: int | None = None,
    ) -> None:
        self._executable = executable
        self._runner = runner
        self._pane_id = pane_id if pane_id is not None else _env_pane_id()
        self._focus_callbacks: list[FocusCallback] = []

    # -- Query -----------------------------------------------------------------

    def list_panes(self) -> list[PaneInfo]:
        result = self._cli("list", "--format", "json")
        if not result.success:
            msg = f"Failed to list panes: {result.stderr.strip() or 'wezterm cli list failed'}"
            raise PaneListingError(msg)
        try:
            return _PANES.validate_json(result.stdout)
        except ValidationError as exc:
            msg = f"Unexpected output from wezterm cli list: {exc.error_count()} error(s)"
            raise PaneListingError(msg) from exc

    def list_workspace_names(self) -> list[str]:
        return list(dict.fromkeys(p.workspace for p in self.list_panes()))

    def list_windows(self) -> list[WindowInfo]:
        windows: dict[int, WindowInfo] = {}
        for p in self.list_panes():
            windows.setdefault(p.window_id, WindowInfo(window_id=p.window_id, workspace=p.workspace))
        return list(windows.values())

    def active_workspace(self) -> str:
        panes = self.list_panes()
        for p in panes:
            if p.pane_id == self._pane_id:
                return p.workspace
        return panes[0].workspace if panes else DEFAULT_WORKSPACE

    # -- Mutation --------------------------------------------------------------

    def activate_workspace(self, name: str, spawn_directory: str | None = None) -> None:
        existing = [p for p in self.list_panes() if p.workspace == name]
        if existing:
            self._check(self._cli("activate-pane", "--pane-id", str(existing[0].pane_id)), "activate-pane")
            return

        args = ["spawn", "--new-window", "--workspace", name]
        if spawn_directory:
            args += ["--cwd", spawn_directory]
        self._check(self._cli(*args), "spawn")

    def set_window_workspace(self, window_id: int, name: str) -> None:
        for p in self.list_panes():
            if p.window_id == window_id:
                result = self._cli(
                    "move-pane-to-new-tab", "--pane-id", str(p.pane_id), "--new-window", "--workspace", name
                )
                self._check(result, "move-pane-to-new-tab")

    def rename_workspace(self, old_name: str, new_name: str) -> None:
        self._check(self._cli("rename-workspace", "--workspace", old_name, new_name), "rename-workspace")

    def kill_pane(self, pane_id: int) -> ProcessResult:
        result = self._cli("kill-pane", "--pane-id", str(pane_id))
        if not result.success:
            logger.warning("kill-pane {} failed: {}", pane_id, result.stderr.strip())
        return result

    # -- Focus -----------------------------------------------------------------

    def on_focus_change(self, callback: FocusCallback) -> None:
        self._focus_callbacks.append(callback)

    def emit_focus_change(self, workspace: str) -> None:
        for callback in self._focus_callbacks:
            callback(workspace)

    # -- Helpers ---------------------------------------------------------------

    def _cli(self, *args: str) -> ProcessResult:
        if not self._executable:
            raise ToolNotConfiguredError("wezterm_path")
        return self._runner.run(self._executable, ["cli", *args])

    @staticmethod
    def _check(result: ProcessResult, command: str) -> None:
        if not result.success:
            msg = f"wezterm cli {command} failed: {result.stderr.strip()}"
            raise MultiplexerError(msg)


def _env_pane_id() -> int | None:
    raw = os.environ.get("WEZTERM_PANE")
    try:
        return int(raw) if raw else None
    except ValueError:
        return None
