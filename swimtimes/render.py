"""
Presentation of upcoming entries.

- render_table: bordered text table (CLI and the plain-text web response)
- render_json: JSON list for scripting
HTML pages are Jinja2 templates rendered by swimtimes.web.
"""

from __future__ import annotations

import io
import json
from datetime import datetime
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from swimtimes.model import NormalizedEntry


TABLE_WIDTH = 54
TIME_FORMAT = "%H:%M"
CAPTION_DATE_FORMAT = "%A %B %d"


def caption(window_start: datetime) -> str:
    return f"Swimming times for {window_start.strftime(CAPTION_DATE_FORMAT)}"


def build_table(entries: Sequence[NormalizedEntry]) -> Table:
    table = Table(box=box.SQUARE, width=TABLE_WIDTH, show_lines=False)
    table.add_column("Type")
    table.add_column("Starts")
    table.add_column("Ends")

    for e in entries:
        table.add_row(e.name, e.start.strftime(TIME_FORMAT), e.end.strftime(TIME_FORMAT))
    return table


def render_table(window_start: datetime, entries: Sequence[NormalizedEntry], *, color: bool = False) -> str:
    """
    Render the bold caption and the entry table as one string.

    With color=False the output is plain text (no ANSI escapes).
    """
    buf = io.StringIO()
    console = Console(
        file=buf,
        width=TABLE_WIDTH + 2,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
    )
    console.print(Text(" " + caption(window_start), style="bold"))
    console.print(build_table(entries))
    return buf.getvalue()


def render_json(entries: Sequence[NormalizedEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)
