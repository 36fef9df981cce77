import math
import unittest

from geometry import RopeGeometry
from state import AppState
from synth_mapper import SynthesisMapper
from tests.fakes import RecordingSynth


class TestSynthesisMapper(unittest.TestCase):
    def setUp(self):
        self.config = AppState()
        self.synth = RecordingSynth()
        self.mapper = SynthesisMapper(self.synth, self.config)

    def test_every_parameter_sent_with_ramp(self):
        self.mapper.update(RopeGeometry(300.0, 0.0))
        names = [name for name, _, _ in self.synth.calls]
        self.assertCountEqual(names, ["frequency", "mod_rate", "mod_depth", "cutoff", "gain"])
        for _, _, ramp in self.synth.calls:
            self.assertEqual(ramp, 0.1)

    def test_pitch_is_snapped_note_plus_depth(self):
        targets = self.mapper.update(RopeGeometry(200.0, math.pi / 2))
        # angle pi/2 -> 0.75 of the range -> 687.5 Hz -> E5
        amount = 50.0 / 350.0
        depth = 2.0 + 18.0 * amount
        self.assertAlmostEqual(targets.mod_depth, depth)
        self.assertAlmostEqual(targets.frequency, 659.25 + depth)
        self.assertAlmostEqual(self.synth.last("frequency"), 659.25 + depth)

    def test_short_rope_is_silent_and_slow(self):
        targets = self.mapper.update(RopeGeometry(100.0, 0.0))
        self.assertEqual(targets.gain, 0.0)
        self.assertEqual(targets.mod_rate, self.config.min_mod_rate)
        self.assertEqual(targets.cutoff, self.config.min_cutoff)
        self.assertEqual(targets.mod_depth, self.config.min_mod_depth)

    def test_long_rope_saturates_below_full_scale(self):
        targets = self.mapper.update(RopeGeometry(2000.0, 0.0))
        self.assertEqual(targets.gain, self.config.max_gain)
        self.assertLess(targets.gain, 1.0)
        self.assertEqual(targets.mod_rate, self.config.max_mod_rate)
        self.assertEqual(targets.cutoff, self.config.max_cutoff)

    def test_longer_rope_modulates_faster(self):
        short = self.mapper.update(RopeGeometry(200.0, 0.0))
        long = self.mapper.update(RopeGeometry(400.0, 0.0))
        self.assertGreater(long.mod_rate, short.mod_rate)
        self.assertGreater(long.cutoff, short.cutoff)
        self.assertGreater(long.gain, short.gain)

    def test_not_sounding_holds_gain_at_zero(self):
        targets = self.mapper.update(RopeGeometry(400.0, 0.0), sounding=False)
        self.assertEqual(targets.gain, 0.0)
        self.assertGreater(targets.cutoff, self.config.min_cutoff)

    def test_release_fades_gain(self):
        self.mapper.update(RopeGeometry(400.0, 0.0))
        self.mapper.release()
        self.assertEqual(self.synth.calls[-1], ("gain", 0.0, 0.1))

    def test_extreme_angles_stay_in_pitch_range(self):
        low = self.mapper.update(RopeGeometry(150.0, -math.pi + 1e-9))
        high = self.mapper.update(RopeGeometry(150.0, math.pi))
        self.assertAlmostEqual(low.frequency, 110.0 + self.config.min_mod_depth)
        self.assertAlmostEqual(high.frequency, 880.0 + self.config.min_mod_depth)


if __name__ == "__main__":
    unittest.main()
