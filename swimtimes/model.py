"""
Central data model definitions used across the project.

This module defines the canonical structure of the timetable objects so that:
- the client, the normalizer and both front ends share the same field names
- the wire format of the upstream API lives in one place
- nothing here holds state beyond a single request
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List


SWIMMING_TIMETABLE = "Swimming Timetable"

# keyword -> exact activity name used by the upstream API
ACTIVITY_FILTERS: Dict[str, str] = {
    "lane": "Lane Swim",
}


def activity_name(keyword: str | None) -> str:
    """
    Map a filter keyword to the upstream activity name.

    Unknown or empty keywords return "" which means "no filtering".
    """
    key = (keyword or "").strip().lower()
    return ACTIVITY_FILTERS.get(key, "")


@dataclass(frozen=True)
class DateWindow:
    """
    The [start, end) range for which the timetable is requested.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Window end {self.end} must be after start {self.start}")

    @property
    def days(self) -> int:
        # ceiling of the window length in days (always 1 for resolved windows)
        return max(1, math.ceil((self.end - self.start) / timedelta(days=1)))


def _utc_iso(moment: datetime) -> str:
    """
    Format a datetime as RFC 3339 UTC ('2025-12-25T08:00:00Z').

    Naive datetimes are interpreted as local time.
    """
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class TimetableRequest:
    """
    Body of the POST sent to the timetable API.
    """

    venue_name: str
    from_date: datetime
    day_count: int = 1
    categories: List[str] = field(default_factory=lambda: [SWIMMING_TIMETABLE])

    def to_payload(self) -> Dict[str, Any]:
        return {
            "Name": self.venue_name,
            "TimetableNames": list(self.categories),
            "FromDate": _utc_iso(self.from_date),
            "Days": self.day_count,
        }


@dataclass(frozen=True)
class RawEntry:
    """
    One timetable row exactly as the API returns it.

    date and time_range are separate strings ('25/12/2025', '09:00 - 10:00')
    and only become timestamps in swimtimes.parse.
    """

    name: str
    date: str
    time_range: str
    description: str = ""
    duration: str = ""

    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "RawEntry":
        def text(key: str) -> str:
            value = row.get(key)
            return "" if value is None else str(value)

        return cls(
            name=text("Name"),
            date=text("Date"),
            time_range=text("Time"),
            description=text("Description"),
            duration=text("Duration"),
        )


@dataclass(frozen=True)
class NormalizedEntry:
    """
    An upcoming activity with absolute local start/end times.
    """

    name: str
    start: datetime
    end: datetime

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }
