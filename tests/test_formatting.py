"""Tests for ipsbench.formatting — magnitude tiers and table cells."""

from __future__ import annotations

import unittest

from ipsbench.formatting import (
    format_duration,
    format_magnitude,
    format_rsd,
    format_slowdown,
    ratio_width,
    scale_mean,
)


class TestScaleMean(unittest.TestCase):
    """Tests for scale_mean() tier selection."""

    def test_units_tier(self) -> None:
        value, suffix, per_op, unit = scale_mean(0.5)
        self.assertEqual((value, suffix, unit), (0.5, "", "s"))
        self.assertAlmostEqual(per_op, 2.0)

    def test_kilo_tier(self) -> None:
        value, suffix, per_op, unit = scale_mean(1500.0)
        self.assertEqual((suffix, unit), ("k", "ms"))
        self.assertAlmostEqual(value, 1.5)
        self.assertAlmostEqual(per_op, 1e3 / 1500.0)

    def test_mega_tier(self) -> None:
        value, suffix, per_op, unit = scale_mean(2.5e6)
        self.assertEqual((suffix, unit), ("M", "us"))
        self.assertAlmostEqual(value, 2.5)
        self.assertAlmostEqual(per_op, 0.4)

    def test_giga_tier(self) -> None:
        value, suffix, per_op, unit = scale_mean(4e9)
        self.assertEqual((suffix, unit), ("G", "ns"))
        self.assertAlmostEqual(value, 4.0)
        self.assertAlmostEqual(per_op, 0.25)

    def test_thresholds_are_exclusive(self) -> None:
        self.assertEqual(scale_mean(999.0)[1], "")
        self.assertEqual(scale_mean(1e3)[1], "k")
        self.assertEqual(scale_mean(1e6)[1], "M")
        self.assertEqual(scale_mean(1e9)[1], "G")

    def test_zero_mean(self) -> None:
        value, suffix, per_op, unit = scale_mean(0.0)
        self.assertEqual(value, 0.0)
        self.assertEqual(per_op, float("inf"))


class TestCells(unittest.TestCase):
    """Tests for the per-row cell formatters."""

    def test_format_magnitude_units(self) -> None:
        self.assertEqual(format_magnitude(0.5), "  0.50  (  2.00s )")

    def test_format_magnitude_kilo(self) -> None:
        self.assertEqual(format_magnitude(1500.0), "  1.50k (  0.67ms)")

    def test_format_magnitude_mega(self) -> None:
        self.assertEqual(format_magnitude(2.5e6), "  2.50M (  0.40us)")

    def test_format_magnitude_giga(self) -> None:
        self.assertEqual(format_magnitude(4e9), "  4.00G (  0.25ns)")

    def test_format_rsd(self) -> None:
        self.assertEqual(format_rsd(1.25), "(± 1.25%)")
        self.assertEqual(format_rsd(12.5), "(±12.50%)")

    def test_ratio_width(self) -> None:
        self.assertEqual(ratio_width(100, 25), 4)
        self.assertEqual(ratio_width(1000, 1), 7)

    def test_ratio_width_without_samples(self) -> None:
        self.assertEqual(ratio_width(0, 0), 4)

    def test_format_slowdown_fastest(self) -> None:
        self.assertEqual(format_slowdown(100, 100, 4), "     fastest")

    def test_format_slowdown_slower(self) -> None:
        self.assertEqual(format_slowdown(100, 50, 4), "2.00× slower")
        self.assertEqual(format_slowdown(100, 50, 6), "  2.00× slower")


class TestFormatDuration(unittest.TestCase):
    """Tests for format_duration()."""

    def test_microseconds(self) -> None:
        self.assertEqual(format_duration(0.000012), "12us")

    def test_milliseconds(self) -> None:
        self.assertEqual(format_duration(0.25), "250.00ms")

    def test_seconds(self) -> None:
        self.assertEqual(format_duration(1.5), "1.50s")

    def test_minutes(self) -> None:
        self.assertEqual(format_duration(90), "1m30s")


if __name__ == "__main__":
    unittest.main()
