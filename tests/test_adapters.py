"""Unit tests for the external-tool adapters (no real wezterm/zoxide needed)."""

from __future__ import annotations

import json
import sys

import pytest
from conftest import FakeRunner

from waypoint.adapters.multiplexer import Multiplexer
from waypoint.adapters.oracle import DirectoryOracle, ZoxideOracle
from waypoint.adapters.process import ProcessRunner, SubprocessRunner
from waypoint.adapters.wezterm import WeztermCli
from waypoint.errors import MultiplexerError, PaneListingError, ToolNotConfiguredError
from waypoint.models.results import ProcessResult

LIST_ARGS = ("cli", "list", "--format", "json")

PANES = [
    {"window_id": 0, "tab_id": 0, "pane_id": 0, "workspace": "default", "size": {"rows": 24}, "cwd": "file:///"},
    {"window_id": 1, "tab_id": 1, "pane_id": 1, "workspace": "~/x", "title": "zsh"},
    {"window_id": 1, "tab_id": 2, "pane_id": 2, "workspace": "~/x"},
    {"window_id": 2, "tab_id": 3, "pane_id": 3, "workspace": "~/y"},
]


def _listing(panes: list[dict] = PANES) -> dict[tuple[str, ...], ProcessResult]:
    return {LIST_ARGS: ProcessResult(success=True, stdout=json.dumps(panes))}


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(_listing())


@pytest.fixture
def wezterm(runner: FakeRunner) -> WeztermCli:
    return WeztermCli("/usr/bin/wezterm", runner, pane_id=2)


# ---------------------------------------------------------------------------
# Process runner
# ---------------------------------------------------------------------------


def test_subprocess_runner_captures_output() -> None:
    runner = SubprocessRunner()
    assert isinstance(runner, ProcessRunner)

    result = runner.run(sys.executable, ["-c", "print('hello')"])

    assert result.success is True
    assert result.stdout.strip() == "hello"


def test_subprocess_runner_reports_exit_status() -> None:
    result = SubprocessRunner().run(sys.executable, ["-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"])
    assert result.success is False
    assert result.stderr == "bad"


def test_subprocess_runner_missing_binary() -> None:
    result = SubprocessRunner().run("/nonexistent/waypoint-test-binary", [])
    assert result.success is False
    assert result.stderr


# ---------------------------------------------------------------------------
# zoxide
# ---------------------------------------------------------------------------


def test_zoxide_query_list() -> None:
    runner = FakeRunner({("query", "-l"): ProcessResult(success=True, stdout="/home/user/a\n\n/srv/b\n")})
    oracle = ZoxideOracle("zoxide", runner)

    assert isinstance(oracle, DirectoryOracle)
    assert oracle.query_list() == ["/home/user/a", "/srv/b"]
    assert runner.calls == [("zoxide", ("query", "-l"))]


def test_zoxide_query_failure_is_empty() -> None:
    runner = FakeRunner({("query", "-l"): ProcessResult(success=False, stderr="no database")})
    assert ZoxideOracle("zoxide", runner).query_list() == []


def test_zoxide_add_visit() -> None:
    runner = FakeRunner()
    result = ZoxideOracle("zoxide", runner).add_visit("-weird-dir")

    assert result.success is True
    assert runner.calls == [("zoxide", ("add", "--", "-weird-dir"))]


def test_zoxide_unconfigured() -> None:
    runner = FakeRunner()
    oracle = ZoxideOracle(None, runner)

    assert oracle.query_list() == []
    assert oracle.add_visit("/tmp").success is False
    assert runner.calls == []


# ---------------------------------------------------------------------------
# wezterm cli
# ---------------------------------------------------------------------------


def test_wezterm_satisfies_protocol(wezterm: WeztermCli) -> None:
    assert isinstance(wezterm, Multiplexer)


def test_wezterm_listing(wezterm: WeztermCli) -> None:
    assert wezterm.list_workspace_names() == ["default", "~/x", "~/y"]
    assert [(w.window_id, w.workspace) for w in wezterm.list_windows()] == [(0, "default"), (1, "~/x"), (2, "~/y")]
    assert [p.pane_id for p in wezterm.list_panes()] == [0, 1, 2, 3]


def test_wezterm_active_workspace_from_pane(wezterm: WeztermCli) -> None:
    assert wezterm.active_workspace() == "~/x"


def test_wezterm_active_workspace_from_env(runner: FakeRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEZTERM_PANE", "3")
    assert WeztermCli("wezterm", runner).active_workspace() == "~/y"


def test_wezterm_active_workspace_unknown_pane(runner: FakeRunner) -> None:
    assert WeztermCli("wezterm", runner, pane_id=99).active_workspace() == "default"


def test_wezterm_listing_failure() -> None:
    runner = FakeRunner({LIST_ARGS: ProcessResult(success=False, stderr="no running wezterm")})
    with pytest.raises(PaneListingError, match="no running wezterm"):
        WeztermCli("wezterm", runner).list_panes()


def test_wezterm_listing_garbage() -> None:
    runner = FakeRunner({LIST_ARGS: ProcessResult(success=True, stdout="not json")})
    with pytest.raises(PaneListingError):
        WeztermCli("wezterm", runner).list_panes()


def test_wezterm_unconfigured() -> None:
    with pytest.raises(ToolNotConfiguredError):
        WeztermCli(None, FakeRunner()).list_panes()


def test_activate_existing_workspace(wezterm: WeztermCli, runner: FakeRunner) -> None:
    wezterm.activate_workspace("~/y")
    assert runner.calls[-1] == ("/usr/bin/wezterm", ("cli", "activate-pane", "--pane-id", "3"))


def test_activate_new_workspace_spawns(wezterm: WeztermCli, runner: FakeRunner) -> None:
    wezterm.activate_workspace("~/new", spawn_directory="/home/user/new")
    assert runner.calls[-1][1] == (
        "cli", "spawn", "--new-window", "--workspace", "~/new", "--cwd", "/home/user/new",
    )


def test_activate_failure_raises(runner: FakeRunner) -> None:
    runner.responses[("cli", "spawn", "--new-window", "--workspace", "w")] = ProcessResult(
        success=False, stderr="boom"
    )
    with pytest.raises(MultiplexerError, match="spawn"):
        WeztermCli("wezterm", runner).activate_workspace("w")


def test_set_window_workspace_moves_each_pane(wezterm: WeztermCli, runner: FakeRunner) -> None:
    wezterm.set_window_workspace(1, "~/y")
    moves = [args for _, args in runner.calls if args[1] == "move-pane-to-new-tab"]
    assert moves == [
        ("cli", "move-pane-to-new-tab", "--pane-id", "1", "--new-window", "--workspace", "~/y"),
        ("cli", "move-pane-to-new-tab", "--pane-id", "2", "--new-window", "--workspace", "~/y"),
    ]


def test_rename_workspace(wezterm: WeztermCli, runner: FakeRunner) -> None:
    wezterm.rename_workspace("~/x", "~/z")
    assert runner.calls[-1][1] == ("cli", "rename-workspace", "--workspace", "~/x", "~/z")


def test_kill_pane_failure_is_returned(runner: FakeRunner) -> None:
    runner.responses[("cli", "kill-pane", "--pane-id", "7")] = ProcessResult(success=False, stderr="gone")
    result = WeztermCli("wezterm", runner).kill_pane(7)
    assert result.success is False


def test_focus_callbacks(wezterm: WeztermCli) -> None:
    seen: list[str] = []
    wezterm.on_focus_change(seen.append)
    wezterm.emit_focus_change("~/y")
    assert seen == ["~/y"]
