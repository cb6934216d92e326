"""taskpad: a personal task-tracking command processor."""

__version__ = "0.1.0"
