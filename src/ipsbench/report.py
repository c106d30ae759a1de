"""Comparison table for the tasks measured so far.

Formatting is pure: :func:`format_report` turns the completed tasks into
lines.  How those lines reach the terminal is a redraw strategy chosen
by the interactivity flag:

- :class:`InPlaceRedraw` moves the cursor up over the previously printed
  rows so the table is overwritten and grows in place.
- :class:`AppendRedraw` simply prints the table again below the old one,
  which is what logs and pipes want.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Sequence

import click

from ipsbench.formatting import format_magnitude, format_rsd, format_slowdown, ratio_width
from ipsbench.task import Task


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


@dataclass
class Ranking:
    """Spread of sample counts across the completed tasks.

    A task that fits more batches into the shared measurement budget is
    faster, so sample count stands in for throughput.
    """

    fastest: int
    slowest: int
    name_width: int

    @property
    def ratio_width(self) -> int:
        return ratio_width(self.fastest, self.slowest)


def rank(tasks: Sequence[Task], last: int) -> Ranking:
    """Compute the ranking over ``tasks[0..last]`` inclusive."""
    completed = tasks[: last + 1]
    if not completed:
        return Ranking(fastest=0, slowest=0, name_width=0)
    counts = [t.sample_count for t in completed]
    return Ranking(
        fastest=max(counts),
        slowest=min(counts),
        name_width=max(len(t.name) for t in completed),
    )


# ---------------------------------------------------------------------------
# Row formatting
# ---------------------------------------------------------------------------


def format_row(task: Task, ranking: Ranking) -> str:
    """Format one table row for *task*."""
    stats = task.stats
    return (
        f"{task.name:>{ranking.name_width}s} "
        f"{format_magnitude(stats.mean)} "
        f"{format_rsd(stats.relative_stddev)} "
        f"{format_slowdown(ranking.fastest, task.sample_count, ranking.ratio_width)}"
    )


def format_report(tasks: Sequence[Task], last: int) -> list[str]:
    """Format every completed row, ``tasks[0]`` through ``tasks[last]``.

    The ranking and column widths are recomputed from scratch on each call.
    """
    ranking = rank(tasks, last)
    return [format_row(t, ranking) for t in tasks[: last + 1]]


# ---------------------------------------------------------------------------
# Redraw strategies
# ---------------------------------------------------------------------------


def cursor_up(rows: int) -> str:
    """ANSI escape that moves the cursor up *rows* lines."""
    return f"\x1b[{rows}A"


class AppendRedraw:
    """Print each table below the previous one."""

    def prefix(self, previous_rows: int) -> str:
        return ""


class InPlaceRedraw:
    """Overwrite the previously printed rows."""

    def prefix(self, previous_rows: int) -> str:
        if previous_rows <= 0:
            return ""
        return cursor_up(previous_rows)


class Reporter:
    """Writes the comparison table after each task completes.

    Args:
        interactive: Select in-place redraw (True) or appending (False).
        stream: Output stream (default ``sys.stdout``).
    """

    def __init__(self, *, interactive: bool = True, stream: IO[str] | None = None) -> None:
        self.interactive = interactive
        self.strategy: AppendRedraw | InPlaceRedraw = (
            InPlaceRedraw() if interactive else AppendRedraw()
        )
        self.stream = stream

    def redraw(self, tasks: Sequence[Task], last: int) -> list[str]:
        """Print the table for ``tasks[0..last]`` and return its lines.

        *last* is also the number of rows printed by the previous redraw,
        which is how far the in-place strategy moves the cursor up.
        """
        lines = format_report(tasks, last)
        out = self.stream if self.stream is not None else sys.stdout
        # color=True keeps the cursor escape when the stream is not a real terminal.
        click.echo(self.strategy.prefix(last), file=out, nl=False, color=True)
        for line in lines:
            click.echo(line, file=out)
        return lines
