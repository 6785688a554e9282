"""
Error taxonomy.

Every failure aborts the current request. Each error carries the HTTP status
the web front end answers with: 400 for bad user input, 500 otherwise.
"""

from __future__ import annotations


class SwimTimesError(Exception):
    http_status = 500


class InvalidDurationError(SwimTimesError):
    """The duration phrase is not a recognisable date expression."""

    http_status = 400

    def __init__(self, phrase: str) -> None:
        super().__init__(f"Could not understand the date {phrase!r}")
        self.phrase = phrase


class NetworkError(SwimTimesError):
    """The timetable API could not be reached."""


class UpstreamError(SwimTimesError):
    """The timetable API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Timetable request failed with status {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(SwimTimesError):
    """The timetable API answered with something that is not a timetable."""


class InvalidTimeRangeError(SwimTimesError):
    """A timetable row has a date or time range we cannot parse."""


class ConfigError(SwimTimesError):
    pass
