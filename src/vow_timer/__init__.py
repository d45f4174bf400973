"""Vow Timer - a terminal focus-session timer."""

__version__ = "0.3.0"
