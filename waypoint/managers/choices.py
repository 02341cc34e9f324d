"""Switcher choice aggregation.

Merges the live workspaces reported by the multiplexer with directory
suggestions from the history oracle:

1. Live workspaces are normalized and annotated with their last access time.
2. They are sorted by recency (newest first, ties alphabetical) or purely
   alphabetically, depending on configuration.
3. Oracle paths that normalize to a live workspace are dropped.
4. Live workspaces come first, then the remaining suggestions in the
   oracle's own order.

``build_choices`` is pure; ``gather_switcher`` and ``gather_close_prompt``
query the collaborators fresh on every call.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from waypoint.models.choice import Choice, SwitcherPrompt
from waypoint.models.enums import ChoiceKind, SortOrder
from waypoint.paths import display_name, short_name

if TYPE_CHECKING:
    from waypoint.adapters.multiplexer import Multiplexer
    from waypoint.adapters.oracle import DirectoryOracle
    from waypoint.settings import WaypointSettings
    from waypoint.store.base import HistoryStore

SWITCH_TITLE = "Switch Workspace"
CLOSE_TITLE = "Close Workspace"


def build_choices(
    live_names: Iterable[str],
    history: Mapping[str, int],
    suggestions: Iterable[str],
    current: str | None,
    *,
    sort_order: SortOrder = SortOrder.RECENCY,
    show_current: bool = True,
    use_basename: bool = False,
) -> list[Choice]:
    """Return the ordered switcher choices.

    *history* maps display names to access times; *suggestions* is the raw
    oracle output.  With ``show_current=False`` the current workspace is left
    out of the list (it is still never offered again as a suggestion).
    """
    current_identity = display_name(current)

    workspaces: list[Choice] = []
    for name in live_names:
        identity = display_name(name)
        workspaces.append(
            Choice(
                id=name,
                identity=identity,
                label=identity,
                kind=ChoiceKind.WORKSPACE,
                access_time=history.get(identity, 0),
                is_current=identity == current_identity,
            )
        )
    workspaces.sort(key=_sort_key(sort_order))

    seen = {c.identity for c in workspaces}
    suggested: list[Choice] = []
    for path in suggestions:
        if not path:
            continue
        identity = display_name(path)
        if identity in seen:
            continue
        seen.add(identity)
        suggested.append(Choice(id=path, identity=identity, label=identity, kind=ChoiceKind.SUGGESTION))

    if not show_current:
        workspaces = [c for c in workspaces if not c.is_current]

    choices = workspaces + suggested
    if use_basename:
        choices = _basename_labels(choices)
    return choices


def gather_switcher(
    multiplexer: Multiplexer,
    oracle: DirectoryOracle,
    store: HistoryStore,
    settings: WaypointSettings,
) -> SwitcherPrompt:
    """Build the "switch workspace" prompt from live collaborator state."""
    current = multiplexer.active_workspace()
    choices = build_choices(
        multiplexer.list_workspace_names(),
        store.snapshot(),
        oracle.query_list(),
        current,
        sort_order=settings.sort_order,
        show_current=settings.show_current_in_switcher,
        use_basename=settings.use_basename,
    )
    description, fuzzy_description = _describe(
        "Enter=switch | /=filter | Esc=cancel",
        "Switch to: ",
        display_name(current) if settings.show_current_workspace_hint else None,
    )
    return SwitcherPrompt(
        title=SWITCH_TITLE,
        description=description,
        fuzzy_description=fuzzy_description,
        fuzzy=settings.start_in_fuzzy_mode,
        choices=choices,
    )


def gather_close_prompt(multiplexer: Multiplexer, settings: WaypointSettings) -> SwitcherPrompt:
    """Build the "close workspace" prompt: every live workspace except the current one.

    An empty ``choices`` list means there is nothing that may be closed.
    """
    current = multiplexer.active_workspace()
    choices = []
    for name in multiplexer.list_workspace_names():
        identity = display_name(name)
        if identity == display_name(current):
            continue
        choices.append(Choice(id=name, identity=identity, label=identity, kind=ChoiceKind.WORKSPACE))
    if settings.use_basename:
        choices = _basename_labels(choices)

    description, fuzzy_description = _describe(
        "Enter=close | /=filter | Esc=cancel",
        "Select workspace to close: ",
        display_name(current) if settings.show_current_workspace_hint else None,
    )
    return SwitcherPrompt(
        title=CLOSE_TITLE,
        description=description,
        fuzzy_description=fuzzy_description,
        fuzzy=settings.start_in_fuzzy_mode,
        choices=choices,
    )


# -- Helpers -------------------------------------------------------------------


def _sort_key(sort_order: SortOrder):
    if sort_order == SortOrder.ALPHABETICAL:
        return lambda c: c.identity.lower()
    # Unrecorded workspaces (time 0) sink below every recorded one.
    return lambda c: (-(c.access_time or 0), c.identity.lower())


def _basename_labels(choices: list[Choice]) -> list[Choice]:
    """Label by basename; colliding basenames keep the full display form."""
    counts = Counter(short_name(c.identity) for c in choices)
    return [
        c.model_copy(update={"label": short_name(c.identity)}) if counts[short_name(c.identity)] == 1 else c
        for c in choices
    ]


def _describe(keys_hint: str, fuzzy_hint: str, current: str | None) -> tuple[str, str]:
    if current is None:
        return keys_hint, fuzzy_hint
    return f"Current: {current} | {keys_hint}", f"Current: {current} | {fuzzy_hint}"
