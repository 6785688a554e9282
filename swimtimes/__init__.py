"""
Swim Times – upcoming swimming sessions from the One Leisure timetable.
"""

from pathlib import Path


def _read_version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _read_version()
