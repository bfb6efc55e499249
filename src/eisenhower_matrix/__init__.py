"""Eisenhower matrix task tracker: task store, snapshot persistence and console front-end."""

__version__ = "0.1.0"
