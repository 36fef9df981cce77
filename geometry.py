# geometry.py
import math
from typing import NamedTuple


class Point2D(NamedTuple):
    x: float
    y: float


class RopeGeometry(NamedTuple):
    length: float
    angle: float


# Used when the pointer sits exactly on the center: hang straight down
FALLBACK_DIRECTION = Point2D(0.0, 1.0)


def lerp(a, b, t):
    return a + (b - a) * t


def lerp_point(a: Point2D, b: Point2D, t: float) -> Point2D:
    return Point2D(lerp(a.x, b.x, t), lerp(a.y, b.y, t))


def normalize(value, lo, hi):
    """Map value from [lo, hi] onto [0, 1], clamped at both ends."""
    if hi <= lo:
        return 0.0 if value < hi else 1.0
    return max(0.0, min(1.0, (value - lo) / (hi - lo)))


def calculate_rope_length(center: Point2D, p: Point2D) -> float:
    return math.hypot(p.x - center.x, p.y - center.y)


def calculate_angle(center: Point2D, p: Point2D) -> float:
    """Signed angle of p around center, measured from the downward vertical.

    Range is (-pi, pi]; atan2 can return -pi for a negative-zero dx, which is
    folded onto pi.
    """
    angle = math.atan2(p.x - center.x, p.y - center.y)
    if angle <= -math.pi:
        angle = math.pi
    return angle


def rope_geometry(center: Point2D, p: Point2D) -> RopeGeometry:
    return RopeGeometry(calculate_rope_length(center, p), calculate_angle(center, p))


def project_to_circle(center: Point2D, p: Point2D, radius: float) -> Point2D:
    dx = p.x - center.x
    dy = p.y - center.y
    dist = math.hypot(dx, dy)
    if dist == 0.0:
        ux, uy = FALLBACK_DIRECTION
    else:
        ux, uy = dx / dist, dy / dist
    return Point2D(center.x + ux * radius, center.y + uy * radius)
