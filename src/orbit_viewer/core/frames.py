from __future__ import annotations

import math
from typing import Tuple

from orbit_viewer.core.constants import R_EARTH_KM

Vector3 = Tuple[float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def to_units(km: float) -> float:
    """km -> render units (1 unit = 1 Earth radius)."""
    return km / R_EARTH_KM


def to_km(units: float) -> float:
    return units * R_EARTH_KM


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """
    Per-coordinate linear interpolation: t=0 -> a, t=1 -> b.
    """
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def ease_out_quad(p: float) -> float:
    """Ease-out quadratic on [0, 1]; input is clamped."""
    p = min(max(p, 0.0), 1.0)
    return 1.0 - (1.0 - p) * (1.0 - p)


def planar_position(angle_rad: float, radius_units: float) -> Vector3:
    """
    Point on a circle of the given radius in the X-Z plane (y = 0).
    """
    return (math.cos(angle_rad) * radius_units, 0.0, math.sin(angle_rad) * radius_units)


def is_finite_number(value) -> bool:
    """Real, finite number that converts to float. bools and strings are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False
