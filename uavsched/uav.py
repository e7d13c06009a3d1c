"""Unmanned aerial vehicles with energy and payload limits."""

from __future__ import annotations

import math

from uavsched.task import Task

_SAFETY_MARGIN = 0.05


def _check_coordinates(x: float, y: float, message: str) -> None:
    if math.isnan(x) or math.isnan(y):
        raise ValueError(message)


class UAV:
    """A vehicle that flies between points, spending one energy unit per distance unit."""

    def __init__(
        self,
        id: int,
        weight_capacity: float,
        energy_capacity: float,
        pos_x: float,
        pos_y: float,
    ) -> None:
        if id <= 0:
            raise ValueError("UAV ID must be positive")
        if weight_capacity <= 0 or energy_capacity <= 0:
            raise ValueError("Capacities must be positive")
        _check_coordinates(pos_x, pos_y, "Position coordinates must be valid numbers")
        self._id = id
        self._weight_capacity = weight_capacity
        self._energy_capacity = energy_capacity
        self._current_energy = energy_capacity
        self._pos_x = pos_x
        self._pos_y = pos_y
        self._has_task = False
        self._current_task_weight = 0.0

    @property
    def id(self) -> int:
        return self._id

    @property
    def weight_capacity(self) -> float:
        return self._weight_capacity

    @property
    def energy_capacity(self) -> float:
        return self._energy_capacity

    @property
    def current_energy(self) -> float:
        return self._current_energy

    @property
    def pos_x(self) -> float:
        return self._pos_x

    @property
    def pos_y(self) -> float:
        return self._pos_y

    @property
    def has_task(self) -> bool:
        return self._has_task

    @property
    def current_task_weight(self) -> float:
        return self._current_task_weight

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from the vehicle to (x, y)."""
        _check_coordinates(x, y, "Invalid coordinates provided")
        return math.hypot(self._pos_x - x, self._pos_y - y)

    def update_energy(self, energy_cost: float) -> None:
        """Spend ``energy_cost``; raises RuntimeError if the battery runs dry."""
        if math.isnan(energy_cost):
            raise ValueError("Energy cost must be a valid number")
        if energy_cost < 0:
            raise ValueError("Energy cost cannot be negative")
        self._current_energy -= energy_cost
        if self._current_energy < 0:
            self._current_energy = 0
            raise RuntimeError(f"UAV {self._id} energy depleted!")

    def refuel(self) -> None:
        """Restore energy to full capacity."""
        self._current_energy = self._energy_capacity
        print(
            f"UAV {self._id} refueled to full capacity "
            f"({self._energy_capacity:g} units)"
        )

    def set_position(self, x: float, y: float) -> None:
        _check_coordinates(x, y, "Invalid coordinates provided")
        self._pos_x = x
        self._pos_y = y

    def can_carry(self, weight: float) -> bool:
        """True if the vehicle is free and ``weight`` is within its capacity."""
        if weight < 0:
            raise ValueError("Weight cannot be negative")
        return not self._has_task and weight <= self._weight_capacity

    def can_reach(self, x: float, y: float, return_energy: float = 0) -> bool:
        """True if (x, y) plus ``return_energy`` and a 5% reserve fit the energy left."""
        _check_coordinates(x, y, "Invalid coordinates provided")
        if return_energy < 0:
            raise ValueError("Return energy cannot be negative")
        margin = self._energy_capacity * _SAFETY_MARGIN
        return self._current_energy >= self.distance_to(x, y) + return_energy + margin

    def needs_refuel(self, threshold: float) -> bool:
        if threshold < 0 or threshold > self._energy_capacity:
            raise ValueError("Invalid refuel threshold")
        return self._current_energy < threshold

    def assign_task(self, task: Task) -> None:
        """Take on ``task`` as the payload being carried."""
        if self._has_task:
            raise RuntimeError("UAV already has a task")
        if not self.can_carry(task.weight):
            raise RuntimeError("Task weight exceeds UAV capacity")
        self._has_task = True
        self._current_task_weight = task.weight

    def complete_current_task(self) -> None:
        if not self._has_task:
            raise RuntimeError("No active task to complete")
        self._has_task = False
        self._current_task_weight = 0.0

    def emergency_land(self) -> None:
        """Drop the payload and drain the battery."""
        self._current_energy = 0
        self._has_task = False
        self._current_task_weight = 0.0

    def status(self) -> str:
        """One-line summary of position, energy and load."""
        state = "Carrying task" if self._has_task else "Available"
        return (
            f"UAV {self._id} | Position: ({self._pos_x:g}, {self._pos_y:g})"
            f" | Energy: {self._current_energy:g}/{self._energy_capacity:g}"
            f" | {state}"
        )