import math

import numpy as np
import pyaudio
from scipy.signal import lfilter

from state import AppState

TWO_PI = 2.0 * math.pi


class SmoothedParam:
    """A parameter that approaches its target exponentially, per sample."""

    def __init__(self, value):
        self.value = float(value)
        self.target = float(value)
        self.tau = 0.0

    def set(self, target, ramp_seconds=0.0):
        self.target = float(target)
        self.tau = max(0.0, float(ramp_seconds))
        if self.tau == 0.0:
            self.value = self.target

    def advance(self, frame_count, sample_rate):
        if self.tau == 0.0:
            self.value = self.target
            return np.full(frame_count, self.target)
        k = np.arange(1, frame_count + 1)
        values = self.target + (self.value - self.target) * np.exp(-k / (self.tau * sample_rate))
        self.value = float(values[-1])
        return values


class AudioEngine:
    def __init__(self, config: AppState):
        self.sample_rate = config.sample_rate
        self.buffer_size = config.buffer_size
        self.p = None
        self.stream = None
        self._closed = False

        self.phase = 0.0
        self.lfo_phase = 0.0
        self._zi = np.zeros(1)

        # --- STATE ---
        self.freq = SmoothedParam(config.min_pitch)
        self.mod_rate = SmoothedParam(config.min_mod_rate)
        self.mod_depth = SmoothedParam(config.min_mod_depth)
        self.cutoff = SmoothedParam(config.min_cutoff)
        self.gain = SmoothedParam(0.0)

        self.last_samples = np.zeros(self.buffer_size, dtype=np.float32)

    # --- PARAMETERS ---
    def set_oscillator_frequency(self, hz, ramp_seconds=0.0):
        self.freq.set(hz, ramp_seconds)

    def set_modulation_rate(self, hz, ramp_seconds=0.0):
        self.mod_rate.set(hz, ramp_seconds)

    def set_modulation_depth(self, value, ramp_seconds=0.0):
        self.mod_depth.set(value, ramp_seconds)

    def set_filter_cutoff(self, hz, ramp_seconds=0.0):
        # Keep the one-pole stable below Nyquist
        self.cutoff.set(min(hz, self.sample_rate * 0.45), ramp_seconds)

    def set_gain(self, value, ramp_seconds=0.0):
        self.gain.set(value, ramp_seconds)

    # --- SYNTHESIS ---
    def render(self, frame_count):
        sr = self.sample_rate
        freq = self.freq.advance(frame_count, sr)
        rate = self.mod_rate.advance(frame_count, sr)
        depth = self.mod_depth.advance(frame_count, sr)
        cutoff = self.cutoff.advance(frame_count, sr)
        gain = self.gain.advance(frame_count, sr)

        # LFO wobbles the carrier around its target
        lfo_phases = self.lfo_phase + np.cumsum(TWO_PI * rate / sr)
        self.lfo_phase = lfo_phases[-1] % TWO_PI
        inst_freq = freq + depth * np.sin(lfo_phases)

        phases = self.phase + np.cumsum(TWO_PI * inst_freq / sr)
        self.phase = phases[-1] % TWO_PI

        # Carrier plus a couple of partials so the filter has something to cut
        wave = np.sin(phases) + 0.5 * np.sin(2 * phases) + 0.25 * np.sin(3 * phases)

        # One-pole low-pass, coefficient taken from the buffer's mean cutoff
        rc = 1.0 / (TWO_PI * float(np.mean(cutoff)))
        dt = 1.0 / sr
        alpha = dt / (rc + dt)
        filtered, self._zi = lfilter([alpha], [1.0, -(1.0 - alpha)], wave, zi=self._zi)

        mono = np.tanh(filtered * gain).astype(np.float32)

        # Save for Visuals
        self.last_samples = mono
        return mono

    def callback(self, in_data, frame_count, time_info, status):
        return (self.render(frame_count).tobytes(), pyaudio.paContinue)

    # --- LIFECYCLE ---
    def start(self):
        if self.stream is not None:
            return
        self.p = pyaudio.PyAudio()
        self.stream = self.p.open(
            format=pyaudio.paFloat32,
            channels=1,
            rate=self.sample_rate,
            output=True,
            frames_per_buffer=self.buffer_size,
            stream_callback=self.callback
        )
        self.stream.start_stream()

    def stop(self):
        if self.stream is not None and self.stream.is_active():
            self.stream.stop_stream()

    def close(self):
        if self._closed:
            return
        self._closed = True
        if self.stream is not None:
            self.stream.close()
            self.stream = None
        if self.p is not None:
            self.p.terminate()
            self.p = None
