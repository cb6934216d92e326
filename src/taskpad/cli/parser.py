# src/taskpad/cli/parser.py

"""
Command adapter: splits raw command lines into description fragments.

Two clause shapes:
- keyword clause ("todo", "done", "delete"): the command word itself;
  everything after it is the "after" fragment.
- marker clause ("/by", "/at"): splits "<cmd> <description> /by <date>" into
  the description (from `description_start`) and the trailing parameter.
"""

from __future__ import annotations

from typing import Final

from ..errors import CommandFormatError
from ..tasks.task_models import Fragments

DEADLINE_CLAUSE: Final = "/by"
EVENT_CLAUSE: Final = "/at"

# len("deadline ") / len("event ")
DEADLINE_DESCRIPTION_IDX: Final = 9
EVENT_DESCRIPTION_IDX: Final = 6


def split_by_clause(line: str, clause: str, description_start: int = 0) -> Fragments:
    text = line.strip()

    if not clause.startswith("/"):
        head, _, rest = text.partition(" ")
        if head.lower() != clause.lower():
            raise CommandFormatError(f"Expected a '{clause}' command.")
        after = rest.strip()
        if not after:
            raise CommandFormatError(f"Please provide a description after '{clause}'.")
        return Fragments(before="", after=after)

    marker = text.find(f" {clause}", max(description_start - 1, 0))
    if marker < 0:
        raise CommandFormatError(f"Missing '{clause}' clause. Usage: <description> {clause} <date>")

    before = text[description_start:marker].strip()
    after = text[marker + len(clause) + 1 :].strip()
    if not before:
        raise CommandFormatError(f"Please provide a description before '{clause}'.")
    if not after:
        raise CommandFormatError(f"Please provide a date after '{clause}'.")
    return Fragments(before=before, after=after)

