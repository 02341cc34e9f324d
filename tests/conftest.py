"""Shared test fixtures: in-memory fakes for every external collaborator.

No WezTerm, zoxide or real home directory required.  ``HOME`` is pinned to
``/home/user`` so normalization is deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from waypoint.errors import PaneListingError
from waypoint.managers.workspaces import WorkspaceManager
from waypoint.models.results import ProcessResult
from waypoint.models.workspace import PaneInfo, WindowInfo
from waypoint.registry import FocusTracker
from waypoint.settings import WaypointSettings, _get_settings_cached
from waypoint.store.local import JsonHistoryStore

HOME = "/home/user"


def pane(pane_id: int, workspace: str, window_id: int | None = None) -> PaneInfo:
    return PaneInfo(pane_id=pane_id, window_id=window_id if window_id is not None else pane_id, workspace=workspace)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeClock:
    def __init__(self, now: int = 1_718_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class FakeMultiplexer:
    """Multiplexer holding its panes in a list; records every mutation."""

    def __init__(self, panes: Sequence[PaneInfo] = (), active: str = "default") -> None:
        self.panes = list(panes)
        self.active = active
        self.fail_listing = False
        self.activated: list[tuple[str, str | None]] = []
        self.renamed: list[tuple[str, str]] = []
        self.moved: list[tuple[int, str]] = []
        self.killed: list[int] = []
        self._callbacks = []

    def list_workspace_names(self) -> list[str]:
        return list(dict.fromkeys(p.workspace for p in self.panes))

    def list_windows(self) -> list[WindowInfo]:
        windows = {p.window_id: WindowInfo(window_id=p.window_id, workspace=p.workspace) for p in self.panes}
        return list(windows.values())

    def list_panes(self) -> list[PaneInfo]:
        if self.fail_listing:
            msg = "Failed to list panes: mux server unreachable"
            raise PaneListingError(msg)
        return list(self.panes)

    def active_workspace(self) -> str:
        return self.active

    def activate_workspace(self, name: str, spawn_directory: str | None = None) -> None:
        self.activated.append((name, spawn_directory))
        if name not in self.list_workspace_names():
            next_id = max((p.pane_id for p in self.panes), default=0) + 1
            self.panes.append(pane(next_id, name))
        self.focus(name)

    def set_window_workspace(self, window_id: int, name: str) -> None:
        self.moved.append((window_id, name))
        self.panes = [p.model_copy(update={"workspace": name}) if p.window_id == window_id else p for p in self.panes]

    def rename_workspace(self, old_name: str, new_name: str) -> None:
        self.renamed.append((old_name, new_name))
        self.panes = [p.model_copy(update={"workspace": new_name}) if p.workspace == old_name else p for p in self.panes]
        if self.active == old_name:
            self.active = new_name

    def kill_pane(self, pane_id: int) -> ProcessResult:
        self.killed.append(pane_id)
        self.panes = [p for p in self.panes if p.pane_id != pane_id]
        return ProcessResult(success=True)

    def on_focus_change(self, callback) -> None:
        self._callbacks.append(callback)

    def focus(self, name: str) -> None:
        """Simulate the user focusing a window of workspace *name*."""
        self.active = name
        for callback in self._callbacks:
            callback(name)


class FakeOracle:
    def __init__(self, paths: Sequence[str] = (), *, fail: bool = False) -> None:
        self.paths = list(paths)
        self.fail = fail
        self.visits: list[str] = []

    def query_list(self) -> list[str]:
        return [] if self.fail else list(self.paths)

    def add_visit(self, path: str) -> ProcessResult:
        self.visits.append(path)
        return ProcessResult(success=not self.fail, stderr="zoxide: not found" if self.fail else "")


class FakeRunner:
    """ProcessRunner answering from a table keyed by the argument list."""

    def __init__(self, responses: dict[tuple[str, ...], ProcessResult] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def run(self, executable: str, args: Sequence[str]) -> ProcessResult:
        self.calls.append((executable, tuple(args)))
        return self.responses.get(tuple(args), ProcessResult(success=True))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", HOME)
    monkeypatch.delenv("WEZTERM_PANE", raising=False)
    for key in ("WAYPOINT_WEZTERM_PATH", "WAYPOINT_ZOXIDE_PATH", "WAYPOINT_SORT_ORDER", "WAYPOINT_DATA_ROOT"):
        monkeypatch.delenv(key, raising=False)
    _get_settings_cached.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / "wezterm" / "workspace_history.json"


@pytest.fixture
def store(history_path: Path, clock: FakeClock) -> JsonHistoryStore:
    return JsonHistoryStore(history_path, clock=clock)


@pytest.fixture
def settings(tmp_path: Path) -> WaypointSettings:
    return WaypointSettings(_env_file=None, data_root=str(tmp_path / "wezterm"), wezterm_path="wezterm")


@pytest.fixture
def multiplexer() -> FakeMultiplexer:
    return FakeMultiplexer(
        [pane(1, "~/x"), pane(2, "~/y"), pane(3, "~/y", window_id=2), pane(4, "default")],
        active="default",
    )


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def tracker() -> FocusTracker:
    return FocusTracker()


@pytest.fixture
def manager(
    store: JsonHistoryStore,
    multiplexer: FakeMultiplexer,
    oracle: FakeOracle,
    settings: WaypointSettings,
    tracker: FocusTracker,
) -> WorkspaceManager:
    return WorkspaceManager(store=store, multiplexer=multiplexer, oracle=oracle, settings=settings, tracker=tracker)
