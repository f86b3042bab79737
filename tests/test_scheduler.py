import unittest

from src.scheduler import Scheduler


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class SchedulerTest(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.scheduler = Scheduler(clock=self.clock)
        self.calls = []

    def test_runs_on_interval(self):
        self.scheduler.schedule("tick", 60, lambda: self.calls.append(self.clock.now))
        self.assertEqual(self.scheduler.run_pending(), 0)
        for t in (59, 60, 61, 119, 120):
            self.clock.now = t
            self.scheduler.run_pending()
        self.assertEqual(self.calls, [60, 120])

    def test_run_immediately(self):
        self.scheduler.schedule("tick", 60, lambda: self.calls.append("x"), run_immediately=True)
        self.assertEqual(self.scheduler.run_pending(), 1)
        self.assertEqual(self.scheduler.run_pending(), 0)

    def test_missed_cycles_fire_once(self):
        self.scheduler.schedule("tick", 10, lambda: self.calls.append(self.clock.now))
        self.clock.now = 55
        self.scheduler.run_pending()
        self.scheduler.run_pending()
        self.assertEqual(self.calls, [55])
        self.clock.now = 64
        self.scheduler.run_pending()
        self.clock.now = 65
        self.scheduler.run_pending()
        self.assertEqual(self.calls, [55, 65])

    def test_cancelled_handle_never_fires(self):
        handle = self.scheduler.schedule("tick", 5, lambda: self.calls.append("x"))
        self.scheduler.cancel(handle)
        self.scheduler.cancel(handle)
        self.clock.now = 100
        self.assertEqual(self.scheduler.run_pending(), 0)
        self.assertTrue(handle.cancelled)
        self.assertEqual(self.scheduler.active(), [])

    def test_callback_can_cancel_another_due_task(self):
        second = None

        def first():
            self.calls.append("first")
            self.scheduler.cancel(second)

        self.scheduler.schedule("first", 5, first)
        second = self.scheduler.schedule("second", 5, lambda: self.calls.append("second"))
        self.clock.now = 5
        self.scheduler.run_pending()
        self.assertEqual(self.calls, ["first"])

    def test_context_exit_cancels_everything(self):
        with Scheduler(clock=self.clock) as scheduler:
            handles = [scheduler.schedule(f"t{i}", 1, lambda: None) for i in range(3)]
        self.assertTrue(all(h.cancelled for h in handles))
        self.assertEqual(scheduler.active(), [])

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            self.scheduler.schedule("bad", 0, lambda: None)


if __name__ == "__main__":
    unittest.main()
