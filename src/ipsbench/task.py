"""Task descriptors: one named candidate implementation and its statistics."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from ipsbench.stats import RunningStats

Operation = Callable[[], object]


class TaskState(enum.Enum):
    """Where a task is in its run.  Transitions are strictly forward."""

    IDLE = "idle"
    CALIBRATING = "calibrating"
    MEASURING = "measuring"
    REPORTED = "reported"


_NEXT_STATE = {
    TaskState.IDLE: TaskState.CALIBRATING,
    TaskState.CALIBRATING: TaskState.MEASURING,
    TaskState.MEASURING: TaskState.REPORTED,
}


@dataclass
class Task:
    """A named operation under comparison.

    ``cycles`` is the number of operation calls per measured batch, set by
    calibration.  ``stats`` belongs to this task alone.
    """

    name: str
    operation: Operation
    cycles: int = 0
    stats: RunningStats = field(default_factory=RunningStats)
    state: TaskState = TaskState.IDLE

    @property
    def sample_count(self) -> int:
        """Number of batches measured in the current run."""
        return self.stats.size

    def reset(self) -> None:
        """Zero calibration and statistics before a fresh run."""
        self.cycles = 0
        self.stats.reset()
        self.state = TaskState.IDLE

    def advance(self, state: TaskState) -> None:
        """Move to *state*, which must be the next state in the lifecycle.

        Raises:
            RuntimeError: If the transition would skip or repeat a state.
        """
        expected = _NEXT_STATE.get(self.state)
        if state is not expected:
            raise RuntimeError(
                f"Task '{self.name}' cannot move from {self.state.value} to {state.value}"
            )
        self.state = state
