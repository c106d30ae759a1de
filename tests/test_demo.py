"""Tests for ipsbench.demo — the sorting comparison suite."""

from __future__ import annotations

import io
import unittest

from ipsbench.demo import SortDemo, make_demo_suite


class TestSortDemo(unittest.TestCase):
    """Tests for the SortDemo tasks."""

    def test_reshuffle_keeps_elements(self) -> None:
        demo = SortDemo(50, seed=1)
        demo.reshuffle()
        self.assertEqual(sorted(demo.data), list(range(50)))
        self.assertNotEqual(demo.data, list(range(50)))

    def test_selection_sort(self) -> None:
        demo = SortDemo(40, seed=2)
        demo.reshuffle()
        demo.selection_sort()
        self.assertEqual(demo.data, list(range(40)))

    def test_builtin_sort(self) -> None:
        demo = SortDemo(40, seed=3)
        demo.reshuffle()
        demo.builtin_sort()
        self.assertEqual(demo.data, list(range(40)))

    def test_sorts_in_place(self) -> None:
        demo = SortDemo(10, seed=4)
        data = demo.data
        demo.reshuffle()
        demo.selection_sort()
        self.assertIs(demo.data, data)


class TestMakeDemoSuite(unittest.TestCase):
    """Tests for make_demo_suite()."""

    def test_suite_layout(self) -> None:
        suite = make_demo_suite(10, seed=0)
        self.assertEqual(list(suite.names), ["selection sort", "builtin sort"])

    def test_runs(self) -> None:
        out = io.StringIO()
        suite = make_demo_suite(20, seed=0, stream=out)
        suite.run(0.01, 0.01, is_tty=False)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("selection sort", lines[1])
        self.assertIn("builtin sort", lines[2])
        self.assertTrue(all(t.sample_count >= 1 for t in suite.tasks))


if __name__ == "__main__":
    unittest.main()
