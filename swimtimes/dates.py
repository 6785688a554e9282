"""
Date window resolution (free text -> DateWindow).

Phrases like "today", "tomorrow" or "friday" are resolved with dateparser,
always preferring the nearest future occurrence. The resolved instant is then
pushed forward by one hour and one second, and the window always spans exactly
one day from there.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

import dateparser

from swimtimes.errors import InvalidDurationError
from swimtimes.model import DateWindow


logger = logging.getLogger(__name__)

DEFAULT_PHRASE = "today"

# Skips sessions that have only just started. Keep as is.
START_OFFSET = timedelta(hours=1, seconds=1)
WINDOW_LENGTH = timedelta(days=1)

# "next friday" -> "friday"; future preference already picks the next one
_WEEKDAY_PREFIX = re.compile(
    r"^(?:next|this|on)\s+(monday|tuesday|wednesday|thursday|friday|saturday|sunday)$",
    re.IGNORECASE,
)


def local_naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def resolve(phrase: str | None, now: datetime | None = None) -> DateWindow:
    """
    Turn a natural-language phrase into a one-day DateWindow anchored at `now`.

    Raises InvalidDurationError if the phrase is not a date expression.
    """
    text = (phrase or "").strip() or DEFAULT_PHRASE
    weekday = _WEEKDAY_PREFIX.match(text)
    query = weekday.group(1) if weekday else text
    base = local_naive(now) if now is not None else datetime.now()

    parsed = dateparser.parse(
        query,
        languages=["en"],
        settings={
            "PREFER_DATES_FROM": "future",
            "RELATIVE_BASE": base,
            "RETURN_AS_TIMEZONE_AWARE": False,
        },
    )
    if parsed is None:
        raise InvalidDurationError(text)

    start = parsed + START_OFFSET
    window = DateWindow(start=start, end=start + WINDOW_LENGTH)
    logger.debug("Resolved %r to %s .. %s", text, window.start, window.end)
    return window
