# Two-body, circular orbits only

from __future__ import annotations

import math

from orbit_viewer.core.constants import MU_EARTH_KM3_S2


def wrap_to_2pi(angle_rad: float) -> float:
    """Wrap angle to [0, 2π)."""
    two_pi = 2.0 * math.pi
    return angle_rad % two_pi


def circular_speed_km_s(r_km: float, mu_km3_s2: float = MU_EARTH_KM3_S2) -> float:
    """v = sqrt(mu / r)."""
    if r_km <= 0:
        raise ValueError(f"Orbital radius must be positive. Got: {r_km}")
    return math.sqrt(mu_km3_s2 / r_km)


def circular_period_s(r_km: float, mu_km3_s2: float = MU_EARTH_KM3_S2) -> float:
    """T = 2π sqrt(r^3 / mu)."""
    if r_km <= 0:
        raise ValueError(f"Orbital radius must be positive. Got: {r_km}")
    return 2.0 * math.pi * math.sqrt(r_km ** 3 / mu_km3_s2)
