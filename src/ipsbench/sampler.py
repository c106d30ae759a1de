"""Batch measurement loop.

Times whole batches of ``task.cycles`` calls and feeds each batch's wall
time, in seconds, into the task's running statistics until the
measurement budget is spent.  The budget is checked after each batch, so
at least one batch is always measured.
"""

from __future__ import annotations

from typing import Callable

from ipsbench.clock import Clock, default_clock, timed_call
from ipsbench.logging import get_logger
from ipsbench.stats import RunningStats
from ipsbench.task import Task

log = get_logger("sampler")


def measure_batch(
    task: Task,
    init: Callable[[], object],
    clock: Clock,
) -> float:
    """Run one batch and return the summed operation time in seconds.

    The init hook runs before every call but is excluded from the timing.
    """
    subtotal = 0.0
    for _ in range(max(task.cycles, 1)):
        init()
        subtotal += timed_call(task.operation, clock)
    return subtotal


def sample(
    task: Task,
    measure: float,
    init: Callable[[], object],
    *,
    clock: Clock | None = None,
) -> RunningStats:
    """Measure batches of *task* for *measure* seconds.

    Args:
        task: A calibrated task.  Its statistics are accumulated in place.
        measure: Measurement budget in seconds.
        init: Hook invoked before every operation call.
        clock: Timestamp source in seconds (default ``time.perf_counter``).

    Returns:
        The task's finalized statistics.
    """
    clock = clock or default_clock
    stats = task.stats
    stats.reset()
    remaining = measure

    while True:
        batch_time = measure_batch(task, init, clock)
        remaining -= batch_time
        stats.add(batch_time)
        if remaining <= 0:
            break

    stats.finalize()
    log.debug(
        "Measured '%s': %d batches, mean %.6fs, stddev %.6fs (±%.2f%%)",
        task.name,
        stats.size,
        stats.mean,
        stats.stddev,
        stats.relative_stddev,
    )
    return stats
