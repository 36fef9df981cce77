# synth_mapper.py
import math
from typing import NamedTuple

from geometry import RopeGeometry, lerp, normalize
from scale import PENTATONIC_SCALE, snap_to_scale
from state import AppState


class SynthTargets(NamedTuple):
    frequency: float
    mod_rate: float
    mod_depth: float
    cutoff: float
    gain: float


class SynthesisMapper:
    """Turns rope length/angle into synth parameter targets every tick.

    Nothing is remembered between ticks; smoothing is left to the synth's
    own ramps.
    """

    def __init__(self, synth, config: AppState, scale=PENTATONIC_SCALE):
        self.synth = synth
        self.config = config
        self.scale = scale

    def update(self, geometry: RopeGeometry, sounding=True) -> SynthTargets:
        c = self.config
        tau = c.ramp_seconds
        amount = normalize(geometry.length, c.min_length, c.max_length)

        # 1. Modulation depth (sent first, it feeds the carrier target below)
        depth = lerp(c.min_mod_depth, c.max_mod_depth, amount)

        # 2. Pitch from angle, snapped to the scale. The live depth value is
        #    added on top of the snapped note.
        turn = (geometry.angle + math.pi) / (2 * math.pi)
        pitch = snap_to_scale(lerp(c.min_pitch, c.max_pitch, turn), self.scale)
        frequency = pitch + depth

        # 3./4. Longer rope: faster wobble, brighter filter
        rate = lerp(c.min_mod_rate, c.max_mod_rate, amount)
        cutoff = lerp(c.min_cutoff, c.max_cutoff, amount)

        # 5. Gain
        if not sounding or geometry.length < c.gain_length_threshold:
            gain = 0.0
        else:
            gain = c.max_gain * amount

        self.synth.set_modulation_depth(depth, tau)
        self.synth.set_oscillator_frequency(frequency, tau)
        self.synth.set_modulation_rate(rate, tau)
        self.synth.set_filter_cutoff(cutoff, tau)
        self.synth.set_gain(gain, tau)
        return SynthTargets(frequency, rate, depth, cutoff, gain)

    def release(self):
        # Fade out regardless of where the rope is
        self.synth.set_gain(0.0, self.config.ramp_seconds)
