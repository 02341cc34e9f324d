"""Workspace operations.

Each module provides the logic for one concern: ``choices`` builds switcher
prompts, ``cycling`` steps through workspaces, ``workspaces`` holds the
lifecycle manager.  Managers raise domain exceptions from ``waypoint.errors``,
never user-facing messages -- that translation is the host's responsibility.
"""
