# frame_loop.py
from logging_utils import log_event
from state import AppState


class FrameLoop:
    """Runs one step per display frame, skipping frames without a surface.

    A skipped frame does nothing and the next frame tries again. With
    `surface_backoff_frames` the loop waits that many frames between
    attempts; with `surface_retry_limit` it gives up after that many
    consecutive skips.
    """

    def __init__(self, step, surface_ready, config: AppState):
        self.step = step
        self.surface_ready = surface_ready
        self.retry_limit = config.surface_retry_limit
        self.backoff_frames = config.surface_backoff_frames

        self.active = True
        self.skipped = 0
        self.frames = 0
        self._wait = 0

    def run_frame(self) -> bool:
        """Process one frame. Returns False if the frame was skipped."""
        if not self.active:
            return False

        if self._wait > 0:
            self._wait -= 1
            return False

        if not self.surface_ready():
            self.skipped += 1
            if self.skipped == 1:
                log_event("DEBUG", "Frame", "Surface not ready, skipping frame")
            if self.retry_limit is not None and self.skipped >= self.retry_limit:
                log_event("WARNING", "Frame", "Surface never became ready, stopping", skipped=self.skipped)
                self.active = False
            self._wait = self.backoff_frames
            return False

        self.skipped = 0
        self.step()
        self.frames += 1
        return True

    def cancel(self):
        self.active = False
