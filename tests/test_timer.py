import time

import pytest

from hpclab.timer import Timer, task_order_demo


def test_duration_is_non_negative():
    timer = Timer()
    timer.start()
    timer.stop()
    assert timer.duration() >= 0.0


def test_duration_measures_sleep():
    with Timer() as timer:
        time.sleep(0.01)
    assert timer.duration() >= 9.5


def test_stop_before_start_raises():
    with pytest.raises(RuntimeError):
        Timer().stop()


def test_duration_before_stop_raises():
    timer = Timer()
    timer.start()
    with pytest.raises(RuntimeError):
        timer.duration()


def test_restart_clears_stop():
    timer = Timer()
    timer.start()
    timer.stop()
    timer.start()
    with pytest.raises(RuntimeError):
        timer.duration()


def test_task_order_demo_records_all_events(capsys):
    events = task_order_demo()
    assert events[0] == (0, "A")
    assert sorted(label for _, label in events) == ["A", "B", "C", "D"]
    labels = [label for _, label in events]
    assert labels.index("B") < labels.index("C")
    assert dict((label, thread) for thread, label in events)["D"] == 0
    out = capsys.readouterr().out
    assert "0A " in out