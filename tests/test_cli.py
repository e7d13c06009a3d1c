import io

import pytest

from uavsched.cli import (
    create_tasks,
    create_uav_fleet,
    initialize_scheduler,
    main,
    read_number,
)
from uavsched.scheduler import Scheduler


def feed(monkeypatch, *lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))


def test_read_number_accepts_value(monkeypatch):
    feed(monkeypatch, "2.5")
    assert read_number("x: ") == 2.5


def test_read_number_retries_on_garbage(monkeypatch, capsys):
    feed(monkeypatch, "abc", "5")
    assert read_number("x: ", 0) == 5.0
    assert "Error: Please enter a valid number" in capsys.readouterr().out


def test_read_number_retries_out_of_range(monkeypatch, capsys):
    feed(monkeypatch, "2", "0.5")
    assert read_number("rate: ", 0.0, 1.0) == 0.5
    assert "Error: Value must be between 0 and 1" in capsys.readouterr().out


def test_read_number_end_of_input(monkeypatch):
    feed(monkeypatch)
    with pytest.raises(EOFError):
        read_number("x: ")


def test_initialize_scheduler(monkeypatch):
    feed(monkeypatch, "5", "1", "2")
    scheduler = initialize_scheduler()
    assert scheduler.refuel_threshold == 5.0
    assert scheduler.refuel_station == (1.0, 2.0)


def test_initialize_scheduler_zero_threshold(monkeypatch):
    feed(monkeypatch, "0", "1", "2")
    with pytest.raises(ValueError, match="Refuel threshold must be positive"):
        initialize_scheduler()


def test_create_uav_fleet(monkeypatch):
    feed(monkeypatch, "1", "3", "5", "100", "1", "2")
    scheduler = Scheduler(10, 0, 0)
    create_uav_fleet(scheduler)
    (uav,) = scheduler.uavs
    assert uav.id == 3
    assert uav.weight_capacity == 5.0
    assert uav.energy_capacity == 100.0
    assert (uav.pos_x, uav.pos_y) == (1.0, 2.0)


def test_create_tasks(monkeypatch):
    feed(monkeypatch, "1", "7", "1", "2", "3", "4", "0.5")
    scheduler = Scheduler(10, 0, 0)
    create_tasks(scheduler)
    (task,) = scheduler.tasks
    assert task.id == 7
    assert (task.pos_x, task.pos_y) == (1.0, 2.0)
    assert task.deadline == 3.0
    assert task.initial_value == 4.0
    assert task.decay_rate == 0.5


def test_main_full_run(monkeypatch, capsys):
    feed(
        monkeypatch,
        "10", "0", "0",
        "1", "1", "5", "100", "0", "0",
        "1", "1", "3", "4", "10", "5", "0.1",
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ASSIGN: UAV 1 → Task 1" in out
    assert "Task allocation complete. Assigned 1 tasks." in out


def test_main_rejects_zero_uav_id(monkeypatch, capsys):
    feed(monkeypatch, "10", "0", "0", "1", "0", "5", "100", "0", "0")
    assert main([]) == 1
    assert "Error: UAV ID must be positive" in capsys.readouterr().err


def test_main_end_of_input(monkeypatch, capsys):
    feed(monkeypatch, "10")
    assert main([]) == 1
    assert "Error" in capsys.readouterr().err