"""Chesser: a standard-chess rules engine and match session."""

__version__ = "0.1.0"
