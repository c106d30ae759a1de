"""Suite orchestration.

A :class:`Suite` owns an ordered list of tasks and one init hook shared
by all of them.  Tasks run strictly one after another: each is reset,
calibrated, measured and then the whole table of completed tasks is
redrawn before the next task starts.
"""

from __future__ import annotations

from typing import IO, Callable, Iterable, Sequence, Tuple, Union

from ipsbench.calibrate import calibrate
from ipsbench.clock import Clock
from ipsbench.formatting import format_duration
from ipsbench.logging import get_logger
from ipsbench.report import Reporter
from ipsbench.sampler import sample
from ipsbench.task import Operation, Task, TaskState

log = get_logger("suite")

TaskLike = Union[Task, Tuple[str, Operation]]


def dummy_init() -> None:
    """Init hook that does nothing."""


def _as_task(item: TaskLike) -> Task:
    if isinstance(item, Task):
        return item
    name, operation = item
    return Task(name=name, operation=operation)


class Suite:
    """An ordered group of competing tasks.

    Usage::

        suite = Suite(reshuffle, [("sorted", sort_a), ("insertion", sort_b)])
        suite.run(2.0, 5.0)

    Args:
        init: Hook called before every single operation call, during both
            warm-up and measurement.
        tasks: ``(name, operation)`` pairs or :class:`Task` objects.  Their
            order is the execution order and the report row order.
        clock: Timestamp source in seconds (default ``time.perf_counter``).
        stream: Where the table is printed (default ``sys.stdout``).
    """

    def __init__(
        self,
        init: Callable[[], object] | None,
        tasks: Iterable[TaskLike],
        *,
        clock: Clock | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.init = init or dummy_init
        self.tasks: list[Task] = [_as_task(t) for t in tasks]
        self.clock = clock
        self.stream = stream

    def __len__(self) -> int:
        return len(self.tasks)

    @property
    def names(self) -> Sequence[str]:
        return [t.name for t in self.tasks]

    def run(self, warmup: float, measure: float, is_tty: bool = True) -> None:
        """Benchmark every task and print the comparison table.

        Args:
            warmup: Warm-up budget per task, in seconds.
            measure: Measurement budget per task, in seconds.  Shared by
                all tasks, which is what makes sample counts comparable.
            is_tty: Redraw the table in place (True) or append (False).
        """
        reporter = Reporter(interactive=is_tty, stream=self.stream)
        log.debug(
            "Running %d task(s): warm-up %s, measure %s",
            len(self.tasks),
            format_duration(warmup),
            format_duration(measure),
        )
        for index, task in enumerate(self.tasks):
            self._run_task(task, warmup, measure)
            reporter.redraw(self.tasks, index)
            task.advance(TaskState.REPORTED)

    def _run_task(self, task: Task, warmup: float, measure: float) -> None:
        log.debug("Task '%s': calibrating", task.name)
        task.reset()
        task.advance(TaskState.CALIBRATING)
        calibrate(task, warmup, self.init, clock=self.clock)
        task.advance(TaskState.MEASURING)
        sample(task, measure, self.init, clock=self.clock)
