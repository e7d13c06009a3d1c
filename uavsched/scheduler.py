"""Greedy allocation of tasks to a UAV fleet with a shared refuel station."""

from __future__ import annotations

from uavsched.task import Task
from uavsched.uav import UAV


class Scheduler:
    """Assigns tasks to UAVs and sends them back to the refuel station."""

    def __init__(
        self,
        refuel_threshold: float,
        refuel_station_x: float,
        refuel_station_y: float,
    ) -> None:
        if refuel_threshold <= 0:
            raise ValueError("Refuel threshold must be positive")
        self._refuel_threshold = refuel_threshold
        self._station_x = refuel_station_x
        self._station_y = refuel_station_y
        self._uavs: list[UAV] = []
        self._tasks: list[Task] = []
        self._tasks_assigned = 0

    @property
    def refuel_threshold(self) -> float:
        return self._refuel_threshold

    @property
    def refuel_station(self) -> tuple[float, float]:
        return (self._station_x, self._station_y)

    @property
    def uavs(self) -> tuple[UAV, ...]:
        return tuple(self._uavs)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def tasks_assigned(self) -> int:
        """Number of tasks assigned by the last call to :meth:`allocate_tasks`."""
        return self._tasks_assigned

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)

    def clear_tasks(self) -> None:
        self._tasks.clear()

    def add_uav(self, uav: UAV) -> None:
        self._uavs.append(uav)

    def clear_uavs(self) -> None:
        self._uavs.clear()

    def set_refuel_station(self, x: float, y: float) -> None:
        self._station_x = x
        self._station_y = y

    def assign_tasks(self) -> None:
        """Give each task to the first UAV that can carry and reach it."""
        for task in self._tasks:
            uav = next(
                (
                    candidate
                    for candidate in self._uavs
                    if candidate.can_carry(task.weight)
                    and candidate.can_reach(task.pos_x, task.pos_y)
                ),
                None,
            )
            if uav is None:
                print(f"No UAV available for Task {task.id}")
                continue
            uav.assign_task(task)
            print(f"Assigned Task {task.id} to UAV {uav.id}")

    def _priority(self, uav: UAV, task: Task) -> float:
        distance = uav.distance_to(task.pos_x, task.pos_y)
        urgency = 1.0 / (task.deadline + 1.0)
        return task.current_value(0) * urgency / (distance + 1.0)

    def _can_reach_with_return(self, uav: UAV, task: Task) -> bool:
        to_task = uav.distance_to(task.pos_x, task.pos_y)
        back = task.distance_to(self._station_x, self._station_y)
        return uav.current_energy >= to_task + back

    def _fly_to_task(self, uav: UAV, task: Task) -> None:
        cost = uav.distance_to(task.pos_x, task.pos_y)
        uav.update_energy(cost)
        uav.set_position(task.pos_x, task.pos_y)
        task.mark_completed()
        print(
            f"ASSIGN: UAV {uav.id} → Task {task.id} "
            f"(Cost: {cost:g}, Remaining Energy: {uav.current_energy:g})"
        )
        self._tasks_assigned += 1

    def _return_to_base(self, uav: UAV) -> None:
        cost = uav.distance_to(self._station_x, self._station_y)
        uav.update_energy(cost)
        uav.set_position(self._station_x, self._station_y)
        print(
            f"RETURN: UAV {uav.id} to base "
            f"(Cost: {cost:g}, Remaining Energy: {uav.current_energy:g})"
        )

    def allocate_tasks(self) -> int:
        """Fly each UAV to its best open task until none fit, then home.

        Returns the number of tasks completed.
        """
        self._tasks_assigned = 0
        for uav in self._uavs:
            while uav.current_energy > self._refuel_threshold:
                best = max(
                    self._tasks,
                    key=lambda t: (not t.completed, self._priority(uav, t)),
                    default=None,
                )
                if (
                    best is not None
                    and not best.completed
                    and self._can_reach_with_return(uav, best)
                ):
                    self._fly_to_task(uav, best)
                    continue
                if uav.distance_to(self._station_x, self._station_y) > 0:
                    self._return_to_base(uav)
                break
        print(f"Task allocation complete. Assigned {self._tasks_assigned} tasks.")
        return self._tasks_assigned

    def check_refuel(self) -> None:
        """Send every UAV below the threshold home and refuel it."""
        for uav in self._uavs:
            if uav.current_energy >= self._refuel_threshold:
                continue
            print(
                f"REFUEL: UAV {uav.id} (Energy: {uav.current_energy:g} "
                f"< {self._refuel_threshold:g})"
            )
            if (uav.pos_x, uav.pos_y) != (self._station_x, self._station_y):
                self._return_to_base(uav)
            uav.refuel()

    def print_status(self) -> None:
        """Print the refuel station, every UAV and every task."""
        print(
            f"Refuel station: ({self._station_x:g}, {self._station_y:g}) "
            f"| Threshold: {self._refuel_threshold:g}"
        )
        for uav in self._uavs:
            print(uav.status())
        for task in self._tasks:
            state = "Completed" if task.completed else "Pending"
            print(
                f"Task {task.id} | Position: ({task.pos_x:g}, {task.pos_y:g})"
                f" | Deadline: {task.deadline:g} | {state}"
            )