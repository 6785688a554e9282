"""
Timetable API client.

One POST per call, no retries, no caching. Failures are translated into the
errors from swimtimes.errors so that callers never see requests exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, List

import requests

from swimtimes.errors import DecodeError, NetworkError, UpstreamError
from swimtimes.model import SWIMMING_TIMETABLE, DateWindow, RawEntry, TimetableRequest


logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

API_URL = "https://www.oneleisure.net/umbraco/api/activeintime/TimetableHelperApi"


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def build_request(window: DateWindow, venue_name: str) -> TimetableRequest:
    return TimetableRequest(
        venue_name=venue_name,
        from_date=window.start,
        day_count=window.days,
        categories=[SWIMMING_TIMETABLE],
    )


def _decode_entries(payload: Any) -> List[RawEntry]:
    if not isinstance(payload, dict):
        raise DecodeError("Timetable response is not a JSON object")

    rows = payload.get(SWIMMING_TIMETABLE)
    if not isinstance(rows, list):
        raise DecodeError(f"Timetable response has no {SWIMMING_TIMETABLE!r} list")

    entries: List[RawEntry] = []
    for row in rows:
        if not isinstance(row, dict):
            raise DecodeError(f"Unexpected timetable row: {row!r}")
        entries.append(RawEntry.from_api(row))
    return entries


def fetch_timetable(
    window: DateWindow,
    venue_name: str,
    *,
    api_url: str = API_URL,
    session: requests.Session | None = None,
) -> List[RawEntry]:
    """
    POST the timetable request for `window` and return the raw rows.

    Raises NetworkError, UpstreamError or DecodeError.
    """
    body = build_request(window, venue_name).to_payload()
    post = session.post if session is not None else requests.post

    logger.info("Requesting %s timetable from %s (%d day(s))", venue_name, body["FromDate"], body["Days"])
    try:
        resp = post(api_url, json=body, headers={"Content-Type": "application/json"})
    except requests.RequestException as exc:
        raise NetworkError(f"Could not reach timetable API: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        logger.error("Timetable API returned %s: %s", resp.status_code, resp.text)
        raise UpstreamError(resp.status_code, resp.text)

    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError(f"Timetable response is not valid JSON: {exc}") from exc

    entries = _decode_entries(payload)
    logger.debug("Received %d timetable rows", len(entries))
    return entries
