"""
Unit tests for the presenters.

Contract:
- caption "Swimming times for <Weekday Month DD>" then a bordered 54-column table
- rows in input order, times as 24-hour HH:MM
- plain text unless color is requested
"""

import json
import unittest
from datetime import datetime

from swimtimes.model import NormalizedEntry
from swimtimes.render import render_json, render_table


ENTRIES = [
    NormalizedEntry("Lane Swim", datetime(2025, 12, 25, 9, 0), datetime(2025, 12, 25, 10, 0)),
    NormalizedEntry("Aqua Aerobics", datetime(2025, 12, 25, 18, 30), datetime(2025, 12, 25, 19, 15)),
]


class TestRenderTable(unittest.TestCase):
    def test_caption_and_rows(self) -> None:
        out = render_table(datetime(2025, 12, 25, 9, 0, 1), ENTRIES)
        lines = out.splitlines()
        self.assertEqual(lines[0].strip(), "Swimming times for Thursday December 25")
        for word in ("Type", "Starts", "Ends", "Lane Swim", "09:00", "10:00", "Aqua Aerobics", "18:30", "19:15"):
            self.assertIn(word, out)
        # rows in input order
        self.assertLess(out.index("Lane Swim"), out.index("Aqua Aerobics"))

    def test_plain_text_has_no_escape_codes(self) -> None:
        out = render_table(datetime(2025, 12, 25), ENTRIES)
        self.assertNotIn("\x1b[", out)

    def test_table_is_bordered_and_fixed_width(self) -> None:
        out = render_table(datetime(2025, 12, 25), ENTRIES)
        table_lines = out.splitlines()[1:]
        self.assertTrue(table_lines[0].startswith("┌"))
        self.assertEqual({len(line.rstrip()) for line in table_lines}, {54})

    def test_empty_table(self) -> None:
        out = render_table(datetime(2025, 12, 25), [])
        self.assertIn("Type", out)
        self.assertNotIn("Lane Swim", out)

    def test_color_keeps_bold_caption(self) -> None:
        out = render_table(datetime(2025, 12, 25), ENTRIES, color=True)
        self.assertIn("\x1b[1m", out)


class TestRenderJson(unittest.TestCase):
    def test_entries_as_json(self) -> None:
        data = json.loads(render_json(ENTRIES))
        self.assertEqual(
            data[0],
            {"name": "Lane Swim", "start": "2025-12-25T09:00:00", "end": "2025-12-25T10:00:00"},
        )
        self.assertEqual(len(data), 2)


if __name__ == "__main__":
    unittest.main()
