"""Delivery tasks whose value decays over time."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field


@dataclass
class Task:
    """A task at a fixed position, worth less the later it is served."""

    id: int
    pos_x: float
    pos_y: float
    deadline: float
    initial_value: float
    decay_rate: float
    weight: float = 0.0
    completed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError("Task ID must be positive")
        if self.deadline <= 0:
            raise ValueError("Deadline must be positive")
        if self.initial_value <= 0:
            raise ValueError("Initial value must be positive")
        if not 0 <= self.decay_rate <= 1:
            raise ValueError("Decay rate must be between 0 and 1")
        if self.weight < 0:
            raise ValueError("Weight cannot be negative")

    def current_value(self, current_time: float) -> float:
        """Value of the task at ``current_time``; zero once done or past the deadline."""
        if self.completed or current_time >= self.deadline:
            return 0.0
        return self.initial_value * math.exp(-self.decay_rate * current_time)

    def calculate_priority(self, current_time: float, distance: float) -> float:
        """Current value scaled down by the distance to travel."""
        distance_factor = 1.0 / (1.0 + distance + sys.float_info.epsilon)
        return self.current_value(current_time) * distance_factor

    def mark_completed(self) -> None:
        """Mark the task as done."""
        self.completed = True

    def update(self, time_step: float) -> None:
        """Advance the task by ``time_step``.

        A task's value is derived from the time it is asked for, so no stored
        state changes here.
        """
        if time_step < 0:
            raise ValueError("Time step cannot be negative")

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from the task to the point (x, y)."""
        return math.hypot(self.pos_x - x, self.pos_y - y)