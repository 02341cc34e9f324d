"""Waypoint - recency-ranked workspace registry for WezTerm."""

__version__ = "0.1.0"
