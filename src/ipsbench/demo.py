"""Demo suite: selection sort against the builtin sort.

Both tasks sort the same list in place.  The shared init hook refills the
list with ``0..size-1`` and shuffles it, so every call starts from fresh
unsorted data.
"""

from __future__ import annotations

import random
from typing import IO

from ipsbench.clock import Clock
from ipsbench.suite import Suite

DEFAULT_SIZE = 2000


class SortDemo:
    """Holds the list shared by the demo tasks."""

    def __init__(self, size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
        self.size = size
        self.data: list[int] = list(range(size))
        self.rng = random.Random(seed)

    def reshuffle(self) -> None:
        self.data[:] = range(self.size)
        self.rng.shuffle(self.data)

    def selection_sort(self) -> None:
        data = self.data
        n = len(data)
        for i in range(n):
            smallest = min(range(i, n), key=data.__getitem__)
            data[i], data[smallest] = data[smallest], data[i]

    def builtin_sort(self) -> None:
        self.data.sort()


def make_demo_suite(
    size: int = DEFAULT_SIZE,
    *,
    seed: int | None = None,
    clock: Clock | None = None,
    stream: IO[str] | None = None,
) -> Suite:
    """Build the two-task sorting suite."""
    demo = SortDemo(size, seed)
    return Suite(
        demo.reshuffle,
        [
            ("selection sort", demo.selection_sort),
            ("builtin sort", demo.builtin_sort),
        ],
        clock=clock,
        stream=stream,
    )


# Module-level instance so profiles can reference ``ipsbench.demo:reshuffle``.
_default = SortDemo()
reshuffle = _default.reshuffle
selection_sort = _default.selection_sort
builtin_sort = _default.builtin_sort
