"""2D vector arithmetic and degree-valued angle helpers.

All functions are pure and operate on :class:`~stickpose.models.pose.Vec2`.
Angles are in degrees unless a name says otherwise.
"""

from __future__ import annotations

import math

from stickpose.models.pose import Vec2

UNIT_X = Vec2(x=1.0, y=0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(x=a.x + b.x, y=a.y + b.y)


def subtract(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(x=a.x - b.x, y=a.y - b.y)


def scale(vector: Vec2, scalar: float) -> Vec2:
    return Vec2(x=vector.x * scalar, y=vector.y * scalar)


def magnitude(vector: Vec2) -> float:
    return math.hypot(vector.x, vector.y)


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize(vector: Vec2) -> Vec2:
    """Return *vector* scaled to unit length.

    The zero vector normalizes to ``(1, 0)`` so that a joint dragged exactly
    onto its parent still has a usable direction.
    """
    length = magnitude(vector)
    if length == 0:
        return UNIT_X
    return scale(vector, 1 / length)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180


def rad_to_deg(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_angle(degrees: float) -> float:
    """Reduce *degrees* to the half-open range (-180, 180]."""
    angle = degrees % 360.0
    if angle > 180:
        angle -= 360.0
    return angle


def clamp_angle(degrees: float, low: float, high: float) -> float:
    """Clamp an angle into the circular range ``[low, high]``.

    When the normalized ``low`` is greater than ``high`` the range wraps
    through the +/-180 seam (e.g. ``150..-150`` covers the left-pointing arc).
    Angles outside a wrapping range snap to the nearer bound by circular
    distance, preferring ``low`` on a tie.
    """
    angle = normalize_angle(degrees)
    low = normalize_angle(low)
    high = normalize_angle(high)

    if low <= high:
        return clamp(angle, low, high)

    if angle >= low or angle <= high:
        return angle

    to_low = abs(normalize_angle(angle - low))
    to_high = abs(normalize_angle(high - angle))
    return low if to_low <= to_high else high


def angle_of(vector: Vec2) -> float:
    """Absolute direction of *vector* in degrees, in (-180, 180]."""
    return normalize_angle(rad_to_deg(math.atan2(vector.y, vector.x)))


def from_polar(angle: float, length: float) -> Vec2:
    radians = deg_to_rad(angle)
    return Vec2(x=math.cos(radians) * length, y=math.sin(radians) * length)


def angle_in_range(degrees: float, low: float, high: float, *, tolerance: float = 1e-9) -> bool:
    """Return True if *degrees* lies in the (possibly wrapping) range."""
    angle = normalize_angle(degrees)
    low = normalize_angle(low)
    high = normalize_angle(high)
    if low <= high:
        return low - tolerance <= angle <= high + tolerance
    return angle >= low - tolerance or angle <= high + tolerance
