"""Clock sources for the measurement engine.

The engine only needs a monotonic timestamp in seconds.  The default is
``time.perf_counter``, which has sub-microsecond resolution on every
supported platform.  Anything with the same call signature can be passed
instead, which is how the tests drive the engine deterministically.
"""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]

default_clock: Clock = time.perf_counter

# One tenth of a second: the target duration of a single measured batch.
DECISECOND = 0.1


def timed_call(operation: Callable[[], object], clock: Clock) -> float:
    """Call *operation* once and return the elapsed time in seconds."""
    before = clock()
    operation()
    after = clock()
    return after - before
