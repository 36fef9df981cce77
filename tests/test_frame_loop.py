import unittest

from frame_loop import FrameLoop
from state import AppState


class TestFrameLoop(unittest.TestCase):
    def setUp(self):
        self.steps = 0
        self.ready = False

    def _step(self):
        self.steps += 1

    def _loop(self, **overrides):
        return FrameLoop(self._step, lambda: self.ready, AppState(**overrides))

    def test_missing_surface_skips_and_retries(self):
        loop = self._loop()
        for _ in range(50):
            self.assertFalse(loop.run_frame())
        self.assertEqual(self.steps, 0)
        self.assertTrue(loop.active)

        self.ready = True
        self.assertTrue(loop.run_frame())
        self.assertEqual(self.steps, 1)
        self.assertEqual(loop.skipped, 0)

    def test_retry_limit_stops_loop(self):
        loop = self._loop(surface_retry_limit=3)
        for _ in range(3):
            loop.run_frame()
        self.assertFalse(loop.active)
        self.ready = True
        self.assertFalse(loop.run_frame())
        self.assertEqual(self.steps, 0)

    def test_backoff_waits_between_attempts(self):
        checks = []

        def surface_ready():
            checks.append(True)
            return False

        loop = FrameLoop(self._step, surface_ready, AppState(surface_backoff_frames=2))
        for _ in range(7):
            loop.run_frame()
        # attempt, wait, wait, attempt, wait, wait, attempt
        self.assertEqual(len(checks), 3)

    def test_cancel_stops_scheduling(self):
        self.ready = True
        loop = self._loop()
        loop.run_frame()
        loop.cancel()
        self.assertFalse(loop.run_frame())
        self.assertEqual(self.steps, 1)


if __name__ == "__main__":
    unittest.main()
