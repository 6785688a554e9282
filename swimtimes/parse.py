"""
Parsing (raw timetable rows -> upcoming entries).

- Combines each row's separate 'Date' and 'Time' strings into absolute
  local start/end datetimes
- Drops rows that do not match the requested activity
- Drops rows that have already started

Important rules:
- 1 row = at most 1 entry
- Input order is kept; nothing is re-sorted
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Tuple

from swimtimes.errors import InvalidTimeRangeError
from swimtimes.model import NormalizedEntry, RawEntry, activity_name


logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%d/%m/%Y %H:%M"
RANGE_SEPARATOR = " - "


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_time(date_str: str, time_str: str) -> datetime:
    """
    Parse 'DD/MM/YYYY' + 'HH:MM' into a naive local datetime.
    """
    try:
        return datetime.strptime(f"{date_str} {time_str}", DATETIME_FORMAT)
    except ValueError as exc:
        raise InvalidTimeRangeError(f"Invalid date/time {date_str!r} {time_str!r}") from exc


def split_times(date_str: str, time_range: str) -> Tuple[datetime, datetime]:
    """
    Split 'HH:MM - HH:MM' and return (start, end) on the given date.
    """
    parts = time_range.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        raise InvalidTimeRangeError(f"Invalid time range {time_range!r}")
    return parse_time(date_str, parts[0]), parse_time(date_str, parts[1])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_and_filter(
    entries: Iterable[RawEntry],
    filter_name: str | None,
    now: datetime,
) -> List[NormalizedEntry]:
    """
    Return the upcoming entries matching `filter_name`, in input order.

    An unknown or empty filter keyword matches everything.
    """
    target = activity_name(filter_name)
    out: List[NormalizedEntry] = []

    for entry in entries:
        start, end = split_times(entry.date, entry.time_range)

        if target and entry.name != target:
            continue

        # already started (or over)
        if start <= now:
            logger.debug("Skipping %s at %s (already started)", entry.name, start)
            continue

        out.append(NormalizedEntry(name=entry.name, start=start, end=end))

    return out
