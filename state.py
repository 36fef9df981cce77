# state.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class AppState:
    # --- Kinematics ---
    rest_radius: float = 120.0       # Where the rope settles after release
    grab_radius: float = 18.0        # Handle hit area
    drag_smoothing: float = 0.2      # Fast tracking while dragging
    settle_smoothing: float = 0.01   # Slow drift back to rest

    # --- Length normalization ---
    min_length: float = 150.0
    max_length: float = 500.0

    # --- Audio Synthesis ---
    min_pitch: float = 110.0         # A2
    max_pitch: float = 880.0         # A5
    min_mod_rate: float = 0.5        # LFO Hz
    max_mod_rate: float = 8.0
    min_mod_depth: float = 2.0       # LFO depth in Hz
    max_mod_depth: float = 20.0
    min_cutoff: float = 400.0
    max_cutoff: float = 4000.0
    gain_length_threshold: float = 150.0  # Silent below this length
    max_gain: float = 0.5            # Never full scale
    ramp_seconds: float = 0.1        # Time constant for every parameter ramp

    # --- Visuals ---
    handle_radius: float = 10.0
    min_window_size: float = 160.0
    max_window_size: float = 320.0

    # --- Frame scheduling ---
    surface_retry_limit: Optional[int] = None  # None = retry forever
    surface_backoff_frames: int = 0

    # --- Stream ---
    sample_rate: int = 44100
    buffer_size: int = 256

    log_level: str = "INFO"
