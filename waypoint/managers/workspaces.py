"""Workspace manager -- coordinates the history store and the multiplexer.

Every lifecycle operation follows the same shape: ask the multiplexer for
current state, act on it, then update recency in the history store.  The
store, the multiplexer, the oracle and the focus tracker are all passed in;
nothing here reaches for process-wide state.

Fire-and-forget calls (oracle visits, pane kills) return a ``ProcessResult``
that is logged and otherwise ignored: the operation proceeds regardless.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from waypoint.errors import ActiveWorkspaceError
from waypoint.managers.choices import gather_close_prompt, gather_switcher
from waypoint.managers.cycling import cycle_workspace
from waypoint.models.enums import ChoiceKind
from waypoint.models.workspace import CloseResult, RenameResult
from waypoint.paths import WorkspaceName, display_name, normalize_workspace_name

if TYPE_CHECKING:
    from waypoint.adapters.multiplexer import Multiplexer
    from waypoint.adapters.oracle import DirectoryOracle
    from waypoint.models.choice import Choice, SwitcherPrompt
    from waypoint.registry import FocusTracker
    from waypoint.settings import WaypointSettings
    from waypoint.store.base import HistoryStore


class WorkspaceManager:
    """Open, switch, rename, close and cycle workspaces.

    Instantiated once per host process.  Stateless beyond its references to
    the collaborators; the focus tracker is optional and only needed for
    :meth:`toggle_previous`.
    """

    def __init__(
        self,
        *,
        store: HistoryStore,
        multiplexer: Multiplexer,
        oracle: DirectoryOracle,
        settings: WaypointSettings,
        tracker: FocusTracker | None = None,
    ) -> None:
        self._store = store
        self._multiplexer = multiplexer
        self._oracle = oracle
        self._settings = settings
        self._tracker = tracker
        if tracker is not None:
            multiplexer.on_focus_change(tracker.notify)

    @property
    def store(self) -> HistoryStore:
        return self._store

    # -- Prompts ---------------------------------------------------------------

    def switcher(self) -> SwitcherPrompt:
        return gather_switcher(self._multiplexer, self._oracle, self._store, self._settings)

    def close_prompt(self) -> SwitcherPrompt:
        return gather_close_prompt(self._multiplexer, self._settings)

    # -- Switch ----------------------------------------------------------------

    def select(self, choice: Choice) -> str:
        """Act on a switcher selection.  Returns the display name switched to."""
        match choice.kind:
            case ChoiceKind.WORKSPACE:
                return self.switch_to_existing(choice.id)
            case ChoiceKind.SUGGESTION:
                return self.switch_to_new(choice.id).display

    def switch_to_existing(self, name: str) -> str:
        self._multiplexer.activate_workspace(name)
        self._store.record_access(name)
        logger.info("Switched to workspace {}", name)
        return display_name(name)

    def switch_to_new(self, path: str) -> WorkspaceName:
        """Open a workspace for *path* and tell the oracle about the visit."""
        target = self._open_at(path)
        self._oracle.add_visit(path)
        return target

    def create_named(self, name: str) -> str | None:
        """Open (or switch to) a workspace called *name*, no directory attached."""
        if not name:
            return None
        self._multiplexer.activate_workspace(name)
        self._store.record_access(name)
        logger.info("Created workspace {}", name)
        return display_name(name)

    def create_at_path(self, path: str) -> WorkspaceName | None:
        """Open a workspace rooted at *path*, named after its display form."""
        if not path:
            return None
        return self._open_at(path)

    def _open_at(self, path: str) -> WorkspaceName:
        target = normalize_workspace_name(path)
        self._multiplexer.activate_workspace(target.display, spawn_directory=target.expanded)
        self._store.record_access(target.display)
        logger.info("Opened workspace {} at {}", target.display, target.expanded)
        return target

    # -- Close -----------------------------------------------------------------

    def close(self, name: str) -> CloseResult:
        """Terminate every pane of workspace *name* and forget its history.

        Panes are matched by display form, so ``~/x`` also closes a live
        workspace reported as ``/home/user/x``.  Raises
        ``ActiveWorkspaceError`` for the active workspace and
        ``PaneListingError`` if the panes cannot be listed; neither touches
        the store.  A workspace with no panes is a silent no-op.
        """
        identity = display_name(name)
        current = self._multiplexer.active_workspace()
        if name == current or identity == display_name(current):
            raise ActiveWorkspaceError(name)

        matched = [p for p in self._multiplexer.list_panes() if display_name(p.workspace) == identity]
        pane_ids = [p.pane_id for p in matched]
        if not pane_ids:
            logger.info("No panes found in workspace {}, nothing to close", name)
            return CloseResult(workspace=name)

        logger.info("Closing {} pane(s) in workspace {}", len(pane_ids), name)
        for pane_id in pane_ids:
            self._multiplexer.kill_pane(pane_id)

        self._store.remove(name)
        if self._tracker is not None:
            for workspace in {name, *(p.workspace for p in matched)}:
                self._tracker.forget(workspace)
        return CloseResult(workspace=name, pane_ids=pane_ids)

    # -- Rename ----------------------------------------------------------------

    def rename(self, old_name: str, new_name: str) -> RenameResult | None:
        """Rename *old_name*, merging into an existing workspace on collision.

        Both names are compared by display form.  Returns ``None`` (and does
        nothing) for an empty or unchanged name.
        """
        if not new_name or display_name(new_name) == display_name(old_name):
            return None

        target = display_name(new_name)
        identity = display_name(old_name)
        live = self._multiplexer.list_workspace_names()
        sources = [ws for ws in live if display_name(ws) == identity] or [old_name]
        existing = {display_name(ws) for ws in live if display_name(ws) != identity}
        merged = target in existing

        if merged:
            logger.info('Merging "{}" into existing "{}"', old_name, target)
            for window in self._multiplexer.list_windows():
                if display_name(window.workspace) == identity:
                    self._multiplexer.set_window_workspace(window.window_id, target)
        else:
            for source in sources:
                self._multiplexer.rename_workspace(source, target)
            logger.info('Renamed "{}" to "{}"', old_name, target)

        self._store.migrate(old_name, target)
        if self._tracker is not None:
            for source in {old_name, *sources}:
                self._tracker.rename(source, target)
        return RenameResult(old_name=old_name, new_name=target, merged=merged)

    def rename_current(self, new_name: str) -> RenameResult | None:
        return self.rename(self._multiplexer.active_workspace(), new_name)

    # -- Navigation ------------------------------------------------------------

    def toggle_previous(self) -> str | None:
        """Switch back to the most recently left workspace, if any."""
        if self._tracker is None:
            return None
        target = self._tracker.toggle(self._multiplexer.active_workspace())
        if target is None:
            return None
        return self.switch_to_existing(target)

    def cycle(self, step: int) -> str | None:
        """Step through live workspaces alphabetically (``+1`` next, ``-1`` previous)."""
        current = self._multiplexer.active_workspace()
        target = cycle_workspace(self._multiplexer.list_workspace_names(), current, step)
        if target is None or target == current:
            return None
        return self.switch_to_existing(target)
