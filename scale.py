"""Pitch table and nearest-note snapping."""

# A minor pentatonic, A2 to A5
PENTATONIC_SCALE = (
    110.00, 130.81, 146.83, 164.81, 196.00,
    220.00, 261.63, 293.66, 329.63, 392.00,
    440.00, 523.25, 587.33, 659.25, 783.99,
    880.00,
)

MINOR_PENTATONIC = (0, 3, 5, 7, 10)


def midi_to_hz(midi: float) -> float:
    """Convert MIDI note number to frequency in Hz."""
    return 440.0 * (2.0 ** ((midi - 69.0) / 12.0))


def scale_pitches(root_midi: int, intervals: tuple[int, ...], octaves: int = 3) -> list[float]:
    """Build Hz pitches over the given number of octaves, closed by the top root."""
    pitches = []
    for octave in range(octaves):
        for interval in intervals:
            pitches.append(midi_to_hz(root_midi + interval + 12 * octave))
    pitches.append(midi_to_hz(root_midi + 12 * octaves))
    return pitches


def snap_to_scale(freq: float, scale=PENTATONIC_SCALE) -> float:
    """Return the scale member closest to freq.

    Ties go to the first candidate in scale order, i.e. the lower note.
    """
    best = scale[0]
    best_diff = abs(freq - best)
    for candidate in scale[1:]:
        diff = abs(freq - candidate)
        if diff < best_diff:
            best, best_diff = candidate, diff
    return best
