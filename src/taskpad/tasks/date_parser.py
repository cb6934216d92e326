# src/taskpad/tasks/date_parser.py

"""
Date parsing for dated tasks (deadlines / events).

Accepted input:
- "d/m/yyyy HHMM"   e.g. "2/12/2019 1800"
- "d/m/yyyy HH:MM"  e.g. "2/12/2019 18:00"
- "d/m/yyyy"        midnight
- the canonical form produced by format_date(), so stored dates re-parse

Canonical form: "DD Mon YYYY, HH:MM" ("02 Dec 2019, 18:00").
Month names are fixed English abbreviations, independent of the process locale.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final

from ..errors import DateFormatError

MONTHS: Final = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_INPUT_FORMATS: Final = ("%d/%m/%Y %H%M", "%d/%m/%Y %H:%M", "%d/%m/%Y")
_INPUT_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}(?: \d{2}:?\d{2})?$")
_CANONICAL_RE = re.compile(r"^(\d{1,2}) ([A-Za-z]{3}) (\d{4}), (\d{2}):(\d{2})$")


def _parse_canonical(text: str) -> datetime | None:
    m = _CANONICAL_RE.match(text)
    if not m:
        return None
    day, mon, year, hour, minute = m.groups()
    try:
        month = MONTHS.index(mon.title()) + 1
        return datetime(int(year), month, int(day), int(hour), int(minute))
    except ValueError:
        return None


def parse_date(text: str | None) -> datetime:
    """Parse user or canonical date text into a naive local datetime."""
    if text is None:
        raise DateFormatError("Missing date. Use d/m/yyyy HHMM, e.g. 2/12/2019 1800.")

    s = " ".join(text.split())
    if _INPUT_RE.match(s):
        for fmt in _INPUT_FORMATS:
            try:
                return datetime.strptime(s, fmt)
            except ValueError:
                continue

    dt = _parse_canonical(s)
    if dt is not None:
        return dt

    raise DateFormatError(f"Invalid date '{text}'. Use d/m/yyyy HHMM, e.g. 2/12/2019 1800.")


def render_date(dt: datetime) -> str:
    return f"{dt.day:02d} {MONTHS[dt.month - 1]} {dt.year:04d}, {dt.hour:02d}:{dt.minute:02d}"


def format_date(text: str | None) -> str:
    """Normalize date text into the canonical stored representation."""
    return render_date(parse_date(text))
