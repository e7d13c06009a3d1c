import math

import pytest

from uavsched.task import Task


def make_task(**overrides):
    params = dict(
        id=1,
        pos_x=2.0,
        pos_y=3.0,
        deadline=10.0,
        initial_value=50.0,
        decay_rate=0.1,
        weight=4.0,
    )
    params.update(overrides)
    return Task(**params)


def test_fields_are_kept():
    task = make_task()
    assert (task.id, task.pos_x, task.pos_y, task.weight) == (1, 2.0, 3.0, 4.0)
    assert task.completed is False


def test_weight_defaults_to_zero():
    task = Task(3, 0.0, 0.0, 5.0, 10.0, 0.5)
    assert task.weight == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": 0},
        {"id": -4},
        {"deadline": 0.0},
        {"initial_value": 0.0},
        {"decay_rate": -0.1},
        {"decay_rate": 1.5},
        {"weight": -1.0},
    ],
)
def test_invalid_parameters_raise(overrides):
    with pytest.raises(ValueError):
        make_task(**overrides)


def test_decay_rate_bounds_are_inclusive():
    assert make_task(decay_rate=0.0).decay_rate == 0.0
    assert make_task(decay_rate=1.0).decay_rate == 1.0


def test_value_at_start_is_initial_value():
    task = make_task()
    assert task.current_value(0.0) == pytest.approx(task.initial_value)


def test_value_without_decay_is_constant():
    task = make_task(decay_rate=0.0)
    assert task.current_value(7.5) == pytest.approx(task.initial_value)


def test_value_decreases_over_time():
    task = make_task()
    values = [task.current_value(t) for t in (0.0, 1.0, 2.0, 5.0)]
    assert values == sorted(values, reverse=True)
    assert values[0] > values[-1]


def test_value_after_deadline_is_zero():
    task = make_task()
    assert task.current_value(task.deadline) == 0.0
    assert task.current_value(task.deadline + 1) == 0.0


def test_completed_task_has_no_value():
    task = make_task()
    task.mark_completed()
    assert task.completed is True
    assert task.current_value(0.0) == 0.0


def test_priority_at_zero_distance_is_value():
    task = make_task()
    assert task.calculate_priority(0.0, 0.0) == pytest.approx(task.current_value(0.0))


def test_priority_falls_with_distance():
    task = make_task()
    near = task.calculate_priority(1.0, 1.0)
    far = task.calculate_priority(1.0, 20.0)
    assert near > far > 0


def test_priority_of_completed_task_is_zero():
    task = make_task()
    task.mark_completed()
    assert task.calculate_priority(0.0, 3.0) == 0.0


def test_update_leaves_value_unchanged():
    task = make_task()
    before = task.current_value(2.0)
    task.update(1.0)
    assert task.current_value(2.0) == before
    assert task.completed is False


def test_update_rejects_negative_step():
    with pytest.raises(ValueError):
        make_task().update(-1.0)


def test_distance_to_own_position_is_zero():
    task = make_task()
    assert task.distance_to(task.pos_x, task.pos_y) == 0.0


def test_distance_is_pythagorean():
    task = make_task(pos_x=0.0, pos_y=0.0)
    assert task.distance_to(3.0, 4.0) == pytest.approx(5.0)


def test_distance_is_non_negative_and_symmetric_in_offset():
    task = make_task(pos_x=1.0, pos_y=1.0)
    a = task.distance_to(4.0, -2.0)
    b = task.distance_to(-2.0, 4.0)
    assert a == pytest.approx(b)
    assert a > 0 and not math.isnan(a)