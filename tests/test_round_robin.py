from collections import Counter

import pytest

from estruturas.round_robin import RoundRobin, main


def _scheduler(time_slice, times):
    scheduler = RoundRobin(time_slice)
    for t in times:
        scheduler.add(t)
    return scheduler


def test_source_example():
    scheduler = _scheduler(3, [12, 8, 15, 5])
    assert len(scheduler) == 4
    trace = scheduler.run()
    assert trace == "AAABBBCCCDDDAAABBBCCCDDAAABBCCCAAACCCCCC"
    assert len(scheduler) == 0


@pytest.mark.parametrize("time_slice", [1, 2, 4, 100])
def test_each_process_gets_its_time(time_slice):
    times = [7, 1, 4, 9]
    trace = _scheduler(time_slice, times).run()
    assert len(trace) == sum(times)
    counts = Counter(trace)
    assert [counts[c] for c in "ABCD"] == times


def test_first_slice_order():
    trace = _scheduler(2, [5, 5, 5]).run()
    assert trace[:6] == "AABBCC"


def test_str_format():
    scheduler = _scheduler(3, [5])
    assert str(scheduler) == "readyQueue -->  ||A|5||"
    assert str(RoundRobin()) == ""


def test_ids_restart_after_run():
    scheduler = _scheduler(1, [1, 1])
    scheduler.run()
    scheduler.add(2)
    assert scheduler.run() == "AA"


def test_clear():
    scheduler = _scheduler(2, [3, 4])
    scheduler.clear()
    assert len(scheduler) == 0
    assert scheduler.run() == ""


def test_invalid_arguments():
    with pytest.raises(ValueError):
        RoundRobin(0)
    with pytest.raises(ValueError):
        RoundRobin(2).add(-1)


def test_main_prints_queue_and_trace(capsys):
    assert main(["--slice", "2", "3", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("readyQueue -->")
    assert Counter(lines[1]) == Counter({"A": 3, "B": 1})