# rope_toy.py
from typing import NamedTuple, Optional

from geometry import Point2D, RopeGeometry, lerp, normalize
from kinematics import KinematicsController
from logging_utils import log_event
from state import AppState
from synth_mapper import SynthesisMapper, SynthTargets
from synth_session import SynthSession


class FrameState(NamedTuple):
    geometry: RopeGeometry
    rope_end: Point2D
    window_center: Point2D
    amount: float          # normalized length, 0..1
    window_size: float     # drawn window diameter
    targets: SynthTargets


class RopeToy:
    """Wires pointer input, rope kinematics and the synth together.

    The UI shell feeds in layout facts and pointer events and calls tick()
    once per frame.
    """

    def __init__(self, config: AppState, synth_factory):
        self.config = config
        self.session = SynthSession(synth_factory)
        self.mapper = SynthesisMapper(self.session, config)
        self.controller: Optional[KinematicsController] = None
        self._torn_down = False

    def update_layout(self, window_center: Point2D):
        """Resize/scroll entry point: recenter on the reference window."""
        if self.controller is None:
            self.controller = KinematicsController(window_center, self.config)
            log_event("DEBUG", "Rope", "Layout ready", center=window_center)
        else:
            self.controller.set_window_center(window_center)

    @property
    def dragging(self):
        return self.controller is not None and self.controller.dragging

    # --- POINTER ---
    def pointer_down(self, p: Point2D) -> bool:
        if self.controller is None or self._torn_down:
            return False
        grabbed = self.controller.on_pointer_down(p)
        if grabbed and not self.session.started:
            # First grab is the user gesture that unlocks audio
            self.session.start()
        return grabbed

    def pointer_move(self, p: Point2D):
        if self.controller is not None:
            self.controller.on_pointer_move(p)

    def pointer_up(self):
        if self.controller is None or not self.controller.dragging:
            return
        self.controller.on_pointer_up()
        self.mapper.release()
        log_event("DEBUG", "Rope", "Released", rest=self.controller.rest_position)

    # --- FRAME ---
    def tick(self) -> Optional[FrameState]:
        """Advance one frame. None means there is no layout to work with yet."""
        if self.controller is None or self._torn_down:
            return None
        geometry = self.controller.tick()
        targets = self.mapper.update(geometry, sounding=self.controller.dragging)

        c = self.config
        amount = normalize(geometry.length, c.min_length, c.max_length)
        return FrameState(
            geometry=geometry,
            rope_end=self.controller.rope_end,
            window_center=self.controller.window_center,
            amount=amount,
            window_size=lerp(c.min_window_size, c.max_window_size, amount),
            targets=targets,
        )

    def teardown(self):
        if self._torn_down:
            return
        self._torn_down = True
        self.session.teardown()
