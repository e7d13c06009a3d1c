# uavsched

uavsched assigns delivery tasks to a fleet of UAVs and keeps track of their
energy. Each task has a position, a deadline, a weight and a value that decays
over time. Each UAV has a weight capacity, an energy capacity and a position.
Flying one unit of distance costs one unit of energy. A scheduler decides
which UAV serves which task, and when a UAV flies back to the refuel station.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
uavsched
```

The command reads everything from standard input, one number per prompt:

1. The refuel threshold (at least 0) and the X and Y position of the refuel
   station.
2. The number of UAVs (at least 1). For each UAV it asks for the ID, the
   weight capacity, the energy capacity and the starting X and Y position.
   Every UAV starts with a full battery.
3. The number of tasks (at least 1). For each task it asks for the ID, the X
   and Y position, the deadline, the initial value and the decay rate (0 to
   1). Tasks created this way have weight 0.

If an entry is not a number, or is outside its range, the prompt is shown
again. Once all entries are in, the command runs `Scheduler.allocate_tasks()`
and then `Scheduler.check_refuel()`, and prints what each step does.

The exit status is 0 on success. It is 1 when input ends early, or when a
value is rejected by the classes below. This happens, for example, when an ID
of 0 or a refuel threshold of 0 is entered: the prompts accept these values,
but `UAV`, `Task` and `Scheduler` reject them. The error is printed to
standard error.

## Library use

```python
from uavsched.scheduler import Scheduler
from uavsched.task import Task
from uavsched.uav import UAV

scheduler = Scheduler(refuel_threshold=10.0, refuel_station_x=0.0, refuel_station_y=0.0)
scheduler.add_uav(UAV(1, weight_capacity=5.0, energy_capacity=100.0, pos_x=0.0, pos_y=0.0))
scheduler.add_task(Task(1, pos_x=3.0, pos_y=4.0, deadline=10.0,
                        initial_value=50.0, decay_rate=0.1, weight=2.0))

completed = scheduler.allocate_tasks()   # returns the number of tasks completed
scheduler.check_refuel()
scheduler.print_status()
```

### `uavsched.task.Task`

`Task` is a dataclass with the fields `id`, `pos_x`, `pos_y`, `deadline`,
`initial_value`, `decay_rate`, `weight` (default 0) and `completed`.

- `current_value(t)` returns `initial_value * exp(-decay_rate * t)`. It
  returns 0 once the task is completed or `t` has reached the deadline.
- `calculate_priority(t, distance)` returns the current value divided by
  `1 + distance`.
- `distance_to(x, y)` returns the distance from the task to a point.
- `mark_completed()` marks the task as done.
- `update(time_step)` rejects a negative step and changes nothing else.

### `uavsched.uav.UAV`

A UAV has read-only properties `id`, `weight_capacity`, `energy_capacity`,
`current_energy`, `pos_x`, `pos_y`, `has_task` and `current_task_weight`.

- `distance_to`, `set_position`: distance to a point, and moving to a point.
- `update_energy(cost)` spends energy. If the cost is more than the energy
  left, the energy is set to 0 and `RuntimeError` is raised.
- `refuel()` restores full energy.
- `emergency_land()` drops the payload and sets the energy to 0.
- `can_carry(weight)` is true when the UAV holds no task and the weight fits
  its capacity.
- `can_reach(x, y, return_energy=0)` is true when the energy left covers the
  distance, plus `return_energy`, plus a reserve of 5% of capacity.
- `needs_refuel(threshold)` compares the energy left with a threshold between
  0 and the UAV's capacity.
- `assign_task(task)` and `complete_current_task()` take on a payload and
  release it. A UAV holds at most one task at a time.
- `status()` returns a one-line summary of the UAV.

### `uavsched.scheduler.Scheduler`

- `add_uav`, `clear_uavs`, `add_task`, `clear_tasks` and
  `set_refuel_station(x, y)` set up the scheduler. The properties `uavs`,
  `tasks`, `refuel_station`, `refuel_threshold` and `tasks_assigned` read
  back its state.
- `allocate_tasks()` works through the UAVs in the order they were added.
  While a UAV's energy is above the refuel threshold, it picks the open task
  with the highest priority. Priority is the task's value at time 0, times
  `1 / (deadline + 1)`, divided by `1 + distance`.
  - If the UAV has enough energy to fly to that task and then from the task to
    the station, it flies there and the task is marked completed.
  - Otherwise, or when no open task is left, the UAV flies back to the station
    (if it is not there already) and the next UAV takes its turn. Only the
    highest-priority task is considered, so the UAV stops even if a
    lower-priority task could have been reached.
  - A UAV whose energy falls to the threshold stops where it is.
- `assign_tasks()` gives each task to the first UAV that can carry and reach
  it. The UAV is marked as carrying the task; the task itself is not marked
  completed.
- `check_refuel()` sends every UAV whose energy is below the threshold back
  to the station, then refuels it. If the flight back costs more energy than
  the UAV has left, `RuntimeError` is raised.
- `print_status()` prints the station, every UAV and every task.

Invalid parameters raise `ValueError`. Examples are a non-positive ID,
deadline, initial value, capacity or refuel threshold, a decay rate outside
`[0, 1]`, a negative weight, or a NaN coordinate.

## What it does not do

uavsched works only in memory. It does not read fleets or tasks from files and
does not save results. Time does not advance during allocation: task values
are always taken at time 0.