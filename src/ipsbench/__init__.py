"""ipsbench — compare competing implementations by iterations per second.

Quick use::

    from ipsbench import Suite

    Suite(reshuffle, [("sorted", sort_a), ("heapsort", sort_b)]).run(2, 5)
"""

from __future__ import annotations

__version__ = "0.1.0"

from ipsbench.suite import Suite, dummy_init  # noqa: E402
from ipsbench.task import Task, TaskState  # noqa: E402

__all__ = ["Suite", "Task", "TaskState", "dummy_init", "__version__"]
