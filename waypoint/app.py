"""Wiring: build a WorkspaceManager from settings.

Hosts call :func:`create_manager` once and keep the result for the lifetime
of the process, so the history store is loaded only once.
"""

from __future__ import annotations

from loguru import logger

from waypoint.adapters.oracle import ZoxideOracle
from waypoint.adapters.process import ProcessRunner, SubprocessRunner
from waypoint.adapters.wezterm import WeztermCli
from waypoint.managers.workspaces import WorkspaceManager
from waypoint.registry import FocusTracker
from waypoint.settings import WaypointSettings
from waypoint.store.local import JsonHistoryStore


def create_manager(
    settings: WaypointSettings,
    *,
    runner: ProcessRunner | None = None,
    tracker: FocusTracker | None = None,
) -> WorkspaceManager:
    runner = runner or SubprocessRunner()
    if not settings.wezterm_path:
        logger.warning("WAYPOINT_WEZTERM_PATH is not set; workspace commands will fail")

    store = JsonHistoryStore(settings.history_path)
    logger.debug("History file: {}", store.path)
    return WorkspaceManager(
        store=store,
        multiplexer=WeztermCli(settings.wezterm_path, runner),
        oracle=ZoxideOracle(settings.zoxide_path, runner),
        settings=settings,
        tracker=tracker or FocusTracker(),
    )
