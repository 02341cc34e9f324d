"""Registry configuration loaded from WAYPOINT_* environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from waypoint.models.enums import SortOrder

DEFAULT_DATA_ROOT = "~/.local/share/wezterm"


class WaypointSettings(BaseSettings):
    """Waypoint settings.

    All fields are read from environment variables with the ``WAYPOINT_``
    prefix.  For example, ``WAYPOINT_SORT_ORDER=alphabetical`` maps to
    ``sort_order``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WAYPOINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- External tools --------------------------------------------------------
    zoxide_path: str | None = "zoxide"
    """Directory-history oracle.  Unset disables suggestions."""

    wezterm_path: str | None = None
    """WezTerm executable used for ``wezterm cli``.  Required: there is no
    reliable default location across platforms."""

    # -- Switcher --------------------------------------------------------------
    show_current_in_switcher: bool = True
    show_current_workspace_hint: bool = False
    start_in_fuzzy_mode: bool = True
    sort_order: SortOrder = SortOrder.RECENCY
    use_basename: bool = False
    """Label workspaces by their last path component, falling back to the full
    display form when two labels would collide."""

    # -- History ---------------------------------------------------------------
    data_root: str | None = None
    """Directory holding the history file.  Defaults to ``~/.local/share/wezterm``."""

    history_filename: str = "workspace_history.json"

    # -- Helpers ---------------------------------------------------------------

    @property
    def history_path(self) -> Path:
        root = Path(self.data_root or DEFAULT_DATA_ROOT).expanduser()
        return root / self.history_filename


def get_settings() -> WaypointSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.
    """
    return _get_settings_cached()


def _get_settings_cached() -> WaypointSettings:
    """Inner function wrapped by lru_cache (allows type-safe cache_clear)."""
    return WaypointSettings()


# Apply lru_cache at runtime so the function is only called once.
from functools import lru_cache  # noqa: E402

_get_settings_cached = lru_cache(maxsize=1)(_get_settings_cached)
