"""Terminal split tests for hex/ASCII pane widths and visible rows."""

from __future__ import annotations

import unittest

from hexviewer.runtime.layout import compute_pane_geometry, split_pane_widths


class PaneGeometryTests(unittest.TestCase):
    def test_default_split_is_seventy_thirty(self) -> None:
        self.assertEqual(split_pane_widths(100, 70.0), (70, 30))
        self.assertEqual(split_pane_widths(81, 70.0), (56, 25))

    def test_hex_pane_keeps_at_least_one_column(self) -> None:
        self.assertEqual(split_pane_widths(1, 70.0), (1, 0))
        self.assertEqual(split_pane_widths(0, 70.0), (1, 0))

    def test_visible_rows_reserve_status_and_border_rows(self) -> None:
        geometry = compute_pane_geometry(120, 40, 70.0)

        self.assertEqual(geometry.visible_rows, 37)
        self.assertEqual(geometry.hex_width + geometry.ascii_width, 120)

    def test_short_terminal_still_shows_one_row(self) -> None:
        self.assertEqual(compute_pane_geometry(80, 2, 70.0).visible_rows, 1)
        self.assertEqual(compute_pane_geometry(80, 0, 70.0).visible_rows, 1)


if __name__ == "__main__":
    unittest.main()
