"""Running statistics over a stream of batch timings.

Uses Welford's single-pass algorithm so that an unbounded number of
samples can be summarized without storing them.  The accumulator keeps
the raw sum of squared-deviation products while samples arrive and turns
it into a population variance once, in :meth:`RunningStats.finalize`.

References:
    Welford, B. P. (1962). "Note on a method for calculating corrected
        sums of squares and products." Technometrics 4(3): 419-420.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass
class RunningStats:
    """Online mean/variance accumulator for one task.

    ``variance`` holds the running sum of ``delta * delta2`` products until
    :meth:`finalize` divides it by ``size``.
    """

    size: int = 0
    mean: float = 0.0
    variance: float = 0.0
    stddev: float = 0.0
    relative_stddev: float = 0.0

    def reset(self) -> None:
        """Zero every field before a new run."""
        self.size = 0
        self.mean = 0.0
        self.variance = 0.0
        self.stddev = 0.0
        self.relative_stddev = 0.0

    def add(self, x: float) -> None:
        """Fold one observation into the running mean and variance."""
        self.size += 1
        if self.size > 1:
            delta = x - self.mean
            self.mean += delta / self.size
            delta2 = x - self.mean
            self.variance += delta * delta2
        else:
            self.mean = x

    def finalize(self) -> None:
        """Derive population variance, stddev and relative stddev.

        Relative stddev is a percentage.  It is left as NaN when the mean
        is zero.
        """
        if self.size == 0:
            return
        self.variance /= self.size
        self.stddev = math.sqrt(self.variance)
        if self.mean != 0:
            self.relative_stddev = 100.0 * (self.stddev / self.mean)
        else:
            self.relative_stddev = float("nan")


def describe(values: Iterable[float]) -> RunningStats:
    """Accumulate and finalize statistics for a finite sequence."""
    stats = RunningStats()
    for v in values:
        stats.add(v)
    stats.finalize()
    return stats
