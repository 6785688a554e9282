"""
The full lookup: phrase -> window -> API call -> upcoming entries.

Both front ends call find_swims(); it uses a single `now` for the whole
request so the window and the "already started" cut-off agree.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

import requests

from swimtimes.client import API_URL, fetch_timetable
from swimtimes.dates import local_naive, resolve
from swimtimes.model import DateWindow, NormalizedEntry
from swimtimes.parse import normalize_and_filter


def find_swims(
    phrase: str | None,
    filter_name: str | None,
    *,
    venue_name: str,
    api_url: str = API_URL,
    now: datetime | None = None,
    session: requests.Session | None = None,
) -> Tuple[DateWindow, List[NormalizedEntry]]:
    now = local_naive(now) if now is not None else datetime.now()
    window = resolve(phrase, now)
    raw = fetch_timetable(window, venue_name, api_url=api_url, session=session)
    return window, normalize_and_filter(raw, filter_name, now)
