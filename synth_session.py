# synth_session.py
from logging_utils import log_event


class SynthSession:
    """Owns the one synth engine of the app.

    The engine is only built on start() (first grab), so nothing touches the
    audio device before the user interacts. Setters are no-ops until then.
    """

    def __init__(self, factory):
        self._factory = factory
        self._engine = None
        self._started = False
        self._closed = False

    @property
    def started(self):
        return self._started

    @property
    def closed(self):
        return self._closed

    @property
    def engine(self):
        return self._engine

    def start(self) -> bool:
        """Create and start the engine once. Returns True if audio is live."""
        if self._started or self._closed:
            return self._started
        engine = self._factory()
        try:
            engine.start()
        except Exception as exc:
            # No output device is not fatal, the toy keeps running silently
            log_event("ERROR", "Audio", "Audio start failed", error=exc)
            engine.close()
            self._closed = True
            return False
        self._engine = engine
        self._started = True
        log_event("INFO", "Audio", "Synth session started")
        return True

    # --- CAPABILITY ---
    def set_oscillator_frequency(self, hz, ramp_seconds=0.0):
        if self._started:
            self._engine.set_oscillator_frequency(hz, ramp_seconds)

    def set_modulation_rate(self, hz, ramp_seconds=0.0):
        if self._started:
            self._engine.set_modulation_rate(hz, ramp_seconds)

    def set_modulation_depth(self, value, ramp_seconds=0.0):
        if self._started:
            self._engine.set_modulation_depth(value, ramp_seconds)

    def set_filter_cutoff(self, hz, ramp_seconds=0.0):
        if self._started:
            self._engine.set_filter_cutoff(hz, ramp_seconds)

    def set_gain(self, value, ramp_seconds=0.0):
        if self._started:
            self._engine.set_gain(value, ramp_seconds)

    def teardown(self):
        """Stop and close the engine. Safe to call any number of times."""
        if self._closed:
            return
        self._closed = True
        if not self._started:
            return
        self._started = False
        self._engine.stop()
        self._engine.close()
        log_event("INFO", "Audio", "Synth session closed")
