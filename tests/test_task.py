"""Tests for ipsbench.task — task descriptors and their lifecycle."""

from __future__ import annotations

import unittest

from bench_test_helpers import make_task, noop

from ipsbench.stats import RunningStats
from ipsbench.task import Task, TaskState


class TestTask(unittest.TestCase):
    """Tests for the Task dataclass."""

    def test_defaults(self) -> None:
        t = Task("noop", noop)
        self.assertEqual(t.cycles, 0)
        self.assertEqual(t.sample_count, 0)
        self.assertIs(t.state, TaskState.IDLE)

    def test_statistics_not_shared(self) -> None:
        a = Task("a", noop)
        b = Task("b", noop)
        a.stats.add(1.0)
        self.assertEqual(b.sample_count, 0)
        self.assertIsNot(a.stats, b.stats)

    def test_reset(self) -> None:
        t = make_task("done", 12, mean=0.2)
        t.reset()
        self.assertEqual(t.cycles, 0)
        self.assertEqual(t.stats, RunningStats())
        self.assertIs(t.state, TaskState.IDLE)

    def test_advance_through_lifecycle(self) -> None:
        t = Task("noop", noop)
        t.advance(TaskState.CALIBRATING)
        t.advance(TaskState.MEASURING)
        t.advance(TaskState.REPORTED)
        self.assertIs(t.state, TaskState.REPORTED)

    def test_advance_cannot_skip(self) -> None:
        t = Task("noop", noop)
        with self.assertRaises(RuntimeError):
            t.advance(TaskState.MEASURING)

    def test_advance_cannot_reenter(self) -> None:
        t = Task("noop", noop)
        t.advance(TaskState.CALIBRATING)
        with self.assertRaises(RuntimeError):
            t.advance(TaskState.CALIBRATING)

    def test_reported_is_final(self) -> None:
        t = make_task("done", 3)
        with self.assertRaises(RuntimeError):
            t.advance(TaskState.CALIBRATING)


if __name__ == "__main__":
    unittest.main()
