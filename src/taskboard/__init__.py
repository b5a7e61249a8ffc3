"""Taskboard: a small in-memory to-do manager with a terminal front-end."""

__version__ = "0.1.0"
