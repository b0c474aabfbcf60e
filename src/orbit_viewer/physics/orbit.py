from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.core.constants import MU_EARTH_KM3_S2, R_EARTH_KM
from orbit_viewer.core.frames import is_finite_number
from orbit_viewer.physics.gravity import circular_period_s, circular_speed_km_s


def is_valid_altitude(altitude_km) -> bool:
    """Finite, non-negative real number (bools are not altitudes)."""
    return is_finite_number(altitude_km) and altitude_km >= 0.0


@dataclass(frozen=True)
class OrbitKinematics:
    """
    Circular-orbit kinematics for one altitude.

    Units:
        radius_km: orbital radius from Earth's center in km
        speed_km_s: orbital speed in km/s
        angular_rate_rad_s: angular rate in rad/s
        period_min: orbital period in minutes
    """
    radius_km: float
    speed_km_s: float
    angular_rate_rad_s: float
    period_min: float


def compute_kinematics(
    altitude_km: float,
    mu_km3_s2: float = MU_EARTH_KM3_S2,
    r_ref_km: float = R_EARTH_KM,
) -> OrbitKinematics:
    """
    Closed-form circular orbit at a given altitude above the reference radius:
        r = R + h
        v = sqrt(mu / r)
        w = v / r
        T = 2π sqrt(r^3 / mu) / 60   (minutes)
    """
    if not is_valid_altitude(altitude_km):
        raise ValueError(f"Altitude must be a finite, non-negative number. Got: {altitude_km!r}")

    r = r_ref_km + altitude_km
    v = circular_speed_km_s(r, mu_km3_s2)
    return OrbitKinematics(
        radius_km=r,
        speed_km_s=v,
        angular_rate_rad_s=v / r,
        period_min=circular_period_s(r, mu_km3_s2) / 60.0,
    )
