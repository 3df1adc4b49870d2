"""Tests for HOTO date helpers and the developer date override."""

from __future__ import annotations

import unittest
from datetime import date
from unittest.mock import patch

from stationhub.dates import default_hoto_date, dev_override_date, format_ddmmyyyy, parse_iso_date


class DateFormattingTests(unittest.TestCase):
    def test_day_first_with_padding(self) -> None:
        self.assertEqual(format_ddmmyyyy(date(2025, 2, 1)), "01/02/2025")

    def test_parse_iso_date(self) -> None:
        self.assertEqual(parse_iso_date("2025-02-11"), date(2025, 2, 11))
        self.assertEqual(parse_iso_date(" 2025-02-11 "), date(2025, 2, 11))

    def test_parse_rejects_other_shapes(self) -> None:
        for raw in ("", None, "11/02/2025", "2025-02-30", "yesterday"):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_iso_date(raw))


class DevOverrideTests(unittest.TestCase):
    def test_override_wins(self) -> None:
        with patch.dict("os.environ", {"STATIONHUB_DEV_DATE": "2025-02-11"}):
            self.assertEqual(dev_override_date(), date(2025, 2, 11))
            self.assertEqual(default_hoto_date(), date(2025, 2, 11))

    def test_bad_override_falls_back_to_today(self) -> None:
        with patch.dict("os.environ", {"STATIONHUB_DEV_DATE": "not-a-date"}):
            self.assertIsNone(dev_override_date())
            self.assertEqual(default_hoto_date(), date.today())


if __name__ == "__main__":
    unittest.main()
