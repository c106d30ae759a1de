"""Warm-up and batch-size calibration.

Each task is called one operation at a time until the warm-up budget is
spent.  The observed rate then decides how many calls make up one
measured batch so that a batch lasts roughly one tenth of a second, which
keeps clock resolution and scheduling noise small relative to the
interval being measured.
"""

from __future__ import annotations

from typing import Callable

from ipsbench.clock import DECISECOND, Clock, default_clock, timed_call
from ipsbench.logging import get_logger
from ipsbench.task import Task

log = get_logger("calibrate")


def calibrate(
    task: Task,
    warmup: float,
    init: Callable[[], object],
    *,
    clock: Clock | None = None,
) -> int:
    """Warm *task* up for *warmup* seconds and set its batch size.

    Args:
        task: The task to calibrate.  Its ``cycles`` field is overwritten.
        warmup: Warm-up budget in seconds.  A non-positive budget skips the
            warm-up and yields single-call batches.
        init: Hook invoked before every operation call.  Not timed.
        clock: Timestamp source in seconds (default ``time.perf_counter``).

    Returns:
        The number of operation calls per measured batch, always >= 1.
    """
    clock = clock or default_clock
    count = 0
    total = 0.0
    remaining = warmup

    while remaining > 0:
        init()
        elapsed = timed_call(task.operation, clock)
        total += elapsed
        remaining -= elapsed
        count += 1

    if total > 0:
        cycles = max(1, int(count / (total / DECISECOND)))
    else:
        cycles = 1

    task.cycles = cycles
    log.debug(
        "Calibrated '%s': %d warm-up calls in %.6fs -> %d cycles per batch",
        task.name,
        count,
        total,
        cycles,
    )
    return cycles
