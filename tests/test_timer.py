import pytest

from gameframe.structs import EngineError
from gameframe.timer import Timer, TimerManager


def _clock(readings):
    values = iter(readings)
    return lambda: next(values)


def test_timer_starts_at_zero_delta():
    assert Timer(_clock([1.0])).time_delta == 0.0


def test_timer_deltas_sum_to_elapsed_time():
    readings = [1.0, 1.5, 3.0, 3.25]
    timer = Timer(_clock(readings))
    deltas = [timer.update() for _ in readings[1:]]
    assert sum(deltas) == pytest.approx(readings[-1] - readings[0])
    assert timer.time_delta == deltas[-1]


def test_manager_rejects_duplicate_tags():
    manager = TimerManager(_clock([0.0, 0.0]))
    manager.add_timer("Timer_Default")
    with pytest.raises(EngineError):
        manager.add_timer("Timer_Default")


def test_manager_reports_zero_for_unknown_tag():
    manager = TimerManager(_clock([]))
    manager.compute_time_delta("missing")
    assert manager.get_time_delta("missing") == 0.0


def test_manager_computes_named_delta():
    manager = TimerManager(_clock([2.0, 2.5]))
    timer = manager.add_timer("Timer_60")
    manager.compute_time_delta("Timer_60")
    assert manager.get_time_delta("Timer_60") == timer.time_delta
    assert manager.get_time_delta("Timer_60") == pytest.approx(2.5 - 2.0)