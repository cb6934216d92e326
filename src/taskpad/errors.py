# src/taskpad/errors.py

"""
Typed errors surfaced to the command layer.

Every error carries a user-facing message; the command registry turns them
into replies instead of letting them reach the console loop.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task-processing failures."""


class DateFormatError(TaskError):
    """Date text does not match the accepted grammar."""


class InvalidIndexError(TaskError):
    """Non-numeric or out-of-range task number on delete / done."""


class IndexOutOfRange(TaskError, IndexError):
    """Direct positional access outside the current task list."""


class CommandFormatError(TaskError):
    """Command text is missing a clause or a description."""
