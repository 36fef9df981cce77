# kinematics.py
from geometry import (
    FALLBACK_DIRECTION,
    Point2D,
    RopeGeometry,
    calculate_rope_length,
    lerp_point,
    project_to_circle,
    rope_geometry,
)
from state import AppState


class KinematicsController:
    def __init__(self, window_center: Point2D, config: AppState):
        self.config = config
        self.window_center = window_center

        # --- STATE ---
        # Rope starts hanging at rest below the window
        r = config.rest_radius
        self.rest_position = Point2D(
            window_center.x + FALLBACK_DIRECTION.x * r,
            window_center.y + FALLBACK_DIRECTION.y * r,
        )
        self.rope_end = self.rest_position
        self.pointer_pos = self.rest_position
        self.dragging = False

    def on_pointer_down(self, p: Point2D) -> bool:
        """Grab the rope end if p is on the handle. Returns True on a grab."""
        if calculate_rope_length(self.rope_end, p) > self.config.grab_radius:
            return False
        self.dragging = True
        self.pointer_pos = p
        return True

    def on_pointer_move(self, p: Point2D):
        if self.dragging:
            self.pointer_pos = p

    def on_pointer_up(self):
        self.dragging = False
        self.rest_position = project_to_circle(
            self.window_center, self.pointer_pos, self.config.rest_radius
        )

    def set_window_center(self, center: Point2D):
        # Rope end and rest stay in screen coordinates, only the anchor moves
        self.window_center = center

    def tick(self) -> RopeGeometry:
        if self.dragging:
            target, alpha = self.pointer_pos, self.config.drag_smoothing
        else:
            target, alpha = self.rest_position, self.config.settle_smoothing

        self.rope_end = lerp_point(self.rope_end, target, alpha)
        return self.geometry()

    def geometry(self) -> RopeGeometry:
        return rope_geometry(self.window_center, self.rope_end)
