class RecordingSynth:
    """Stands in for the audio engine, remembering every call."""

    def __init__(self, fail_start=False):
        self.calls = []
        self.fail_start = fail_start
        self.start_calls = 0
        self.stop_calls = 0
        self.close_calls = 0

    def start(self):
        self.start_calls += 1
        if self.fail_start:
            raise OSError("no output device")

    def stop(self):
        self.stop_calls += 1

    def close(self):
        self.close_calls += 1

    def _record(self, name, value, ramp_seconds):
        self.calls.append((name, value, ramp_seconds))

    def set_oscillator_frequency(self, hz, ramp_seconds=0.0):
        self._record("frequency", hz, ramp_seconds)

    def set_modulation_rate(self, hz, ramp_seconds=0.0):
        self._record("mod_rate", hz, ramp_seconds)

    def set_modulation_depth(self, value, ramp_seconds=0.0):
        self._record("mod_depth", value, ramp_seconds)

    def set_filter_cutoff(self, hz, ramp_seconds=0.0):
        self._record("cutoff", hz, ramp_seconds)

    def set_gain(self, value, ramp_seconds=0.0):
        self._record("gain", value, ramp_seconds)

    def last(self, name):
        for call in reversed(self.calls):
            if call[0] == name:
                return call[1]
        return None
