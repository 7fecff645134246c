import pytest

from engine.timing.scheduler import Scheduler


def test_call_later_fires_once():
    s = Scheduler()
    hits = []
    task = s.call_later(500, lambda: hits.append(s.now_ms))
    s.advance(499)
    assert hits == []
    assert task.active
    s.advance(1)
    assert hits == [500]
    assert not task.active
    s.advance(5000)
    assert hits == [500]
    assert s.pending == 0


def test_call_every_repeats_each_period():
    s = Scheduler()
    hits = []
    s.call_every(1000, lambda: hits.append(s.now_ms))
    for _ in range(3):
        s.advance(1000)
    assert hits == [1000, 2000, 3000]


def test_repeating_task_catches_up_after_long_frame():
    s = Scheduler()
    hits = []
    s.call_every(1000, lambda: hits.append(s.now_ms))
    assert s.advance(3500) == 3
    assert hits == [1000, 2000, 3000]
    s.advance(500)
    assert hits == [1000, 2000, 3000, 4000]


def test_cancel_is_idempotent():
    s = Scheduler()
    hits = []
    task = s.call_every(100, lambda: hits.append(1))
    task.cancel()
    task.cancel()
    s.advance(1000)
    assert hits == []
    assert not task.active
    # cancelling a one-shot that already ran is also fine
    done = s.call_later(10, lambda: None)
    s.advance(10)
    done.cancel()
    assert not done.active


def test_callback_can_cancel_itself():
    s = Scheduler()
    hits = []

    def once_then_stop():
        hits.append(s.now_ms)
        if len(hits) == 2:
            task.cancel()

    task = s.call_every(100, once_then_stop)
    s.advance(1000)
    assert hits == [100, 200]


def test_callback_can_schedule_more_work():
    s = Scheduler()
    hits = []
    s.call_later(100, lambda: s.call_later(50, lambda: hits.append(s.now_ms)))
    s.advance(200)
    assert hits == [150]


def test_due_order_and_ties():
    s = Scheduler()
    order = []
    s.call_later(300, lambda: order.append("c"))
    s.call_later(100, lambda: order.append("a"))
    s.call_later(100, lambda: order.append("b"))
    s.advance(1000)
    assert order == ["a", "b", "c"]


def test_cancel_all_and_pending():
    s = Scheduler()
    s.call_later(100, lambda: None)
    s.call_every(100, lambda: None)
    assert s.pending == 2
    s.cancel_all()
    assert s.pending == 0
    assert s.advance(1000) == 0


@pytest.mark.parametrize("period", [0, -5])
def test_call_every_rejects_non_positive_period(period):
    with pytest.raises(ValueError):
        Scheduler().call_every(period, lambda: None)
