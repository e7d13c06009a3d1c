"""Interactive set-up of a scheduler, followed by allocation and refuelling."""

from __future__ import annotations

import argparse
import sys

from uavsched.scheduler import Scheduler
from uavsched.task import Task
from uavsched.uav import UAV

_MAX = sys.float_info.max


def read_number(
    prompt: str, min_value: float = -_MAX, max_value: float = _MAX
) -> float:
    """Prompt until a number within [min_value, max_value] is entered.

    Raises EOFError when input runs out.
    """
    while True:
        reply = input(prompt)
        try:
            value = float(reply.strip())
        except ValueError:
            print("Error: Please enter a valid number")
            continue
        if min_value <= value <= max_value:
            return value
        print(f"Error: Value must be between {min_value:g} and {max_value:g}")


def initialize_scheduler() -> Scheduler:
    print("=== Scheduler Initialization ===")
    threshold = read_number("Enter refuel threshold (energy units): ", 0.0)
    station_x = read_number("Enter refuel station X position: ")
    station_y = read_number("Enter refuel station Y position: ")
    return Scheduler(threshold, station_x, station_y)


def create_uav_fleet(scheduler: Scheduler) -> None:
    print("\n=== UAV Fleet Creation ===")
    count = int(read_number("Enter number of UAVs: ", 1))
    for number in range(1, count + 1):
        print(f"\nUAV #{number}:")
        uav_id = int(read_number("  Enter UAV ID: ", 0))
        weight_capacity = read_number("  Enter weight capacity: ", 0.1)
        energy_capacity = read_number("  Enter energy capacity: ", 0.1)
        start_x = read_number("  Enter starting X position: ")
        start_y = read_number("  Enter starting Y position: ")
        scheduler.add_uav(
            UAV(uav_id, weight_capacity, energy_capacity, start_x, start_y)
        )


def create_tasks(scheduler: Scheduler) -> None:
    print("\n=== Task Creation ===")
    count = int(read_number("Enter number of tasks: ", 1))
    for number in range(1, count + 1):
        print(f"\nTask #{number}:")
        task_id = int(read_number("  Enter task ID: ", 0))
        pos_x = read_number("  Enter X position: ")
        pos_y = read_number("  Enter Y position: ")
        deadline = read_number("  Enter deadline: ", 0.1)
        initial_value = read_number("  Enter initial value: ", 0.1)
        decay_rate = read_number("  Enter decay rate: ", 0.0, 1.0)
        scheduler.add_task(
            Task(task_id, pos_x, pos_y, deadline, initial_value, decay_rate)
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="uavsched",
        description="Set up a UAV fleet and tasks interactively, then allocate and refuel.",
    )
    parser.parse_args(argv)
    try:
        scheduler = initialize_scheduler()
        create_uav_fleet(scheduler)
        create_tasks(scheduler)
        scheduler.allocate_tasks()
        scheduler.check_refuel()
    except EOFError:
        print("Error: unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())