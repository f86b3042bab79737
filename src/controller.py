import os
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass

from src.applog import log
from src.clock import local_now
from src.insight import INSIGHT_PLACEHOLDER_TEXT, InsightResult, request_insight
from src.locations import Location, default_location
from src.poller import EnvironmentSnapshot, PollResult, refresh
from src.scheduler import Scheduler, TaskHandle

DASHBOARD_REFRESH_SECONDS = int(os.getenv("DASHBOARD_REFRESH_SECONDS", "60"))


@dataclass
class _Job:
    kind: str
    token: int
    seq: int
    location: Location
    future: Future


class RefreshController:
    """
    Owns the poll cycle for the selected location and the advisory text.

    Poll and completion calls run on an executor; their results are only
    applied inside pump(), on the caller's thread. Every submission carries
    a token so results for a location that is no longer selected, or for an
    advisory request that has been superseded, are dropped.
    """

    def __init__(
        self,
        location: Location | None = None,
        poll=refresh,
        complete=None,
        executor: Executor | None = None,
        insight_executor: Executor | None = None,
        scheduler: Scheduler | None = None,
        interval: float = DASHBOARD_REFRESH_SECONDS,
    ):
        self.poll = poll
        self.complete = complete
        self.interval = interval
        self.scheduler = scheduler or Scheduler()
        # polls get their own workers so a stalled completion cannot starve them
        self._owned_executors = []
        if executor is None:
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dashboard-poll")
            self._owned_executors.append(executor)
        if insight_executor is None and self._owned_executors:
            insight_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="dashboard-insight")
            self._owned_executors.append(insight_executor)
        self.executor = executor
        self.insight_executor = insight_executor or executor
        self.location = location or default_location()
        self.snapshot: EnvironmentSnapshot | None = None
        self.insight = INSIGHT_PLACEHOLDER_TEXT
        self.updated_at = None
        self.last_error: str | None = None
        self._refresh_handle: TaskHandle | None = None
        self._pending: list[_Job] = []
        self._location_token = 0
        self._insight_token = 0
        self._seq = 0
        self._applied_poll_seq = 0
        self._closed = False
        self.select_location(self.location)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    def select_location(self, location: Location) -> None:
        if self._closed:
            raise RuntimeError("controller is shut down")
        self.scheduler.cancel(self._refresh_handle)
        self.location = location
        self._location_token += 1
        self._insight_token += 1
        self._submit_poll()
        self._refresh_handle = self.scheduler.schedule(
            f"refresh:{location.id}", self.interval, self._submit_poll
        )

    def pump(self, now: float | None = None) -> bool:
        """Fire due timers and apply finished results. Returns True if display state changed."""
        if self._closed:
            return False
        self.scheduler.run_pending(now)
        changed = False
        while True:
            done = [job for job in self._pending if job.future.done()]
            if not done:
                return changed
            for job in done:
                self._pending.remove(job)
                changed = self._apply(job) or changed

    def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.scheduler.cancel_all()
        self._refresh_handle = None
        for job in self._pending:
            job.future.cancel()
        self._pending.clear()
        for executor in self._owned_executors:
            executor.shutdown(wait=False, cancel_futures=True)

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def _submit_poll(self) -> None:
        location = self.location
        future = self.executor.submit(self.poll, location)
        self._pending.append(_Job("poll", self._location_token, self._next_seq(), location, future))

    def _submit_insight(self, location: Location, snapshot: EnvironmentSnapshot) -> None:
        self._insight_token += 1
        future = self.insight_executor.submit(request_insight, location, snapshot, self.complete)
        self._pending.append(_Job("insight", self._insight_token, self._next_seq(), location, future))

    def _result(self, job: _Job):
        if job.future.cancelled():
            return None
        exc = job.future.exception()
        if exc is not None:
            log(f"{job.kind} job for {job.location.id} raised: {exc!r}")
            return None
        return job.future.result()

    def _apply(self, job: _Job) -> bool:
        result = self._result(job)
        if job.kind == "poll":
            return self._apply_poll(job, result)
        return self._apply_insight(job, result)

    def _apply_poll(self, job: _Job, result: PollResult | None) -> bool:
        if job.token != self._location_token:
            log(f"discarding poll for {job.location.id}; location is now {self.location.id}")
            return False
        if job.seq < self._applied_poll_seq:
            return False
        if result is None or not result.ok:
            self.last_error = result.error if result is not None else "poll job failed"
            return False
        self._applied_poll_seq = job.seq
        self.snapshot = result.snapshot
        self.updated_at = local_now()
        self.last_error = None
        self._submit_insight(job.location, result.snapshot)
        return True

    def _apply_insight(self, job: _Job, result: InsightResult | None) -> bool:
        if job.token != self._insight_token or job.location != self.location:
            log(f"discarding superseded insight #{job.token} for {job.location.id}")
            return False
        if result is None:
            return False
        self.insight = result.text
        return True
