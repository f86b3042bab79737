import itertools
import time


class TaskHandle:
    """Cancellation handle for a repeating task owned by a Scheduler."""

    def __init__(self, task_id: int, name: str, interval: float, callback, next_run: float):
        self.task_id = task_id
        self.name = name
        self.interval = interval
        self.callback = callback
        self.next_run = next_run
        self.cancelled = False
        self.runs = 0

    def __repr__(self):
        state = "cancelled" if self.cancelled else f"next={self.next_run:.1f}"
        return f"<TaskHandle {self.name}#{self.task_id} every {self.interval}s {state}>"


class Scheduler:
    """
    Cooperative timer registry for a single logical thread.

    Nothing runs in the background: the owner calls run_pending() (on every
    Streamlit rerun) and due callbacks execute inline on that call.
    """

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self._tasks: dict[int, TaskHandle] = {}
        self._ids = itertools.count(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel_all()
        return False

    def schedule(self, name: str, interval: float, callback, run_immediately: bool = False) -> TaskHandle:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        now = self.clock()
        next_run = now if run_immediately else now + interval
        handle = TaskHandle(next(self._ids), name, interval, callback, next_run)
        self._tasks[handle.task_id] = handle
        return handle

    def cancel(self, handle: TaskHandle | None) -> None:
        if handle is None or handle.cancelled:
            return
        handle.cancelled = True
        self._tasks.pop(handle.task_id, None)

    def cancel_all(self) -> None:
        for handle in list(self._tasks.values()):
            self.cancel(handle)

    def active(self) -> list[TaskHandle]:
        return list(self._tasks.values())

    def run_pending(self, now: float | None = None) -> int:
        """Run every due task once; returns how many callbacks fired."""
        now = self.clock() if now is None else now
        due = sorted(
            (h for h in self._tasks.values() if h.next_run <= now),
            key=lambda h: (h.next_run, h.task_id),
        )
        fired = 0
        for handle in due:
            # an earlier callback in this pass may have cancelled it
            if handle.cancelled:
                continue
            handle.next_run += handle.interval
            if handle.next_run <= now:
                # missed cycles are dropped, not replayed
                handle.next_run = now + handle.interval
            handle.runs += 1
            fired += 1
            handle.callback()
        return fired
