from __future__ import annotations
import itertools
from typing import Callable, List, Optional


class ScheduledTask:
    """
    Handle for a callback registered with a Scheduler.
    cancel() may be called any number of times, before or after the task ran.
    """

    def __init__(self, due_ms: float, callback: Callable[[], None],
                 period_ms: Optional[float], seq: int):
        self.due_ms = due_ms
        self.callback = callback
        self.period_ms = period_ms
        self.seq = seq
        self.cancelled = False
        self.finished = False

    @property
    def repeating(self) -> bool:
        return self.period_ms is not None

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.finished)

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        kind = f"every {self.period_ms}ms" if self.repeating else "once"
        state = "active" if self.active else "done"
        return f"<ScheduledTask {kind} due={self.due_ms} {state}>"


class Scheduler:
    """
    Frame-driven timer wheel. The loop calls advance(dt_ms) once per frame;
    due callbacks run synchronously, earliest first (ties in scheduling order).
    A repeating task that fell several periods behind fires once per period.
    """

    def __init__(self, now_ms: float = 0.0):
        self.now_ms = now_ms
        self._tasks: List[ScheduledTask] = []
        self._seq = itertools.count()

    def _add(self, delay_ms: float, callback, period_ms: Optional[float]) -> ScheduledTask:
        task = ScheduledTask(self.now_ms + max(0.0, delay_ms),
                             callback, period_ms, next(self._seq))
        self._tasks.append(task)
        return task

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        return self._add(delay_ms, callback, None)

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        return self._add(period_ms, callback, period_ms)

    @property
    def pending(self) -> int:
        return sum(1 for t in self._tasks if t.active)

    def cancel_all(self) -> None:
        for t in self._tasks:
            t.cancel()
        self._tasks = []

    def _next_due(self, until_ms: float) -> Optional[ScheduledTask]:
        due = [t for t in self._tasks if t.active and t.due_ms <= until_ms]
        if not due:
            return None
        return min(due, key=lambda t: (t.due_ms, t.seq))

    def advance(self, dt_ms: float) -> int:
        """Move the clock forward by dt_ms and run everything that came due. Returns the number of callbacks run."""
        target = self.now_ms + max(0.0, dt_ms)
        fired = 0
        while True:
            task = self._next_due(target)
            if task is None:
                break
            self.now_ms = task.due_ms
            if task.repeating:
                task.due_ms += task.period_ms
            else:
                task.finished = True
            task.callback()
            fired += 1
        self.now_ms = target
        self._tasks = [t for t in self._tasks if t.active]
        return fired
