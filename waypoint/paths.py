"""Workspace name normalization.

A workspace is usually named after a directory.  Every name has two forms:

- **display**: the home directory collapsed to ``~`` (``~/projects/foo``).
  This is the form stored in history and shown to the user.
- **expanded**: the absolute path (``/home/user/projects/foo``), used as the
  working directory when a new workspace is spawned.

Normalizing either form yields the same pair, so ``~/p`` and ``/home/user/p``
never show up as two different workspaces.  Names that are not paths under the
home directory pass through unchanged in both fields.
"""

from __future__ import annotations

import os
from typing import NamedTuple

HOME_ALIAS = "~"


class WorkspaceName(NamedTuple):
    display: str
    expanded: str


def normalize_workspace_name(name: str | None, home: str | None = None) -> WorkspaceName | None:
    """Return the ``(display, expanded)`` pair for *name*.

    ``None`` passes through.  *home* defaults to the current user's home
    directory and is only overridden in tests.
    """
    if name is None:
        return None
    home_dir = _home_dir(home)
    expanded = _strip_trailing_separator(_expand(name, home_dir))
    return WorkspaceName(display=_collapse(expanded, home_dir), expanded=expanded)


def display_name(name: str | None, home: str | None = None) -> str | None:
    """Shortcut for the display form of *name*."""
    normalized = normalize_workspace_name(name, home)
    return normalized.display if normalized else None


def short_name(display: str) -> str:
    """Last path component of a display name (``~/work/api`` -> ``api``)."""
    stripped = display.rstrip("/")
    if not stripped:
        return display
    return stripped.rsplit("/", 1)[-1]


# -- Helpers -------------------------------------------------------------------


def _home_dir(home: str | None) -> str:
    home_dir = home if home is not None else os.path.expanduser(HOME_ALIAS)
    return home_dir.rstrip("/") or "/"


def _expand(name: str, home_dir: str) -> str:
    if name == HOME_ALIAS:
        return home_dir
    if name.startswith(HOME_ALIAS + "/"):
        return home_dir + name[len(HOME_ALIAS) :]
    return name


def _strip_trailing_separator(path: str) -> str:
    # Path-like names only; "/" itself stays the root.
    if not path.startswith(("/", HOME_ALIAS)):
        return path
    return path.rstrip("/") or "/"


def _collapse(path: str, home_dir: str) -> str:
    # Only whole path components match: /home/userx is not under /home/user.
    if path == home_dir:
        return HOME_ALIAS
    if path.startswith(home_dir + "/"):
        return HOME_ALIAS + path[len(home_dir) :]
    return path
