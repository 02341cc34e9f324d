"""History store implementations for workspace recency."""

from waypoint.store.base import HistoryStore
from waypoint.store.local import JsonHistoryStore

__all__ = ["HistoryStore", "JsonHistoryStore"]
