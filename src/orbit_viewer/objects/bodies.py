from __future__ import annotations

import math
from dataclasses import dataclass

from orbit_viewer.core.constants import EARTH_SPIN_RAD_S, MOON_DISTANCE_KM, MOON_RADIUS_KM, R_EARTH_KM
from orbit_viewer.core.frames import ORIGIN, Vector3, to_units
from orbit_viewer.physics.gravity import wrap_to_2pi


@dataclass(frozen=True)
class Moon:
    """Fixed on the +X axis at the mean Earth-Moon distance."""
    distance_km: float = MOON_DISTANCE_KM
    radius_km: float = MOON_RADIUS_KM

    def __post_init__(self):
        if not (math.isfinite(self.distance_km) and self.distance_km > 0):
            raise ValueError(f"Moon distance must be positive. Got: {self.distance_km}")
        if not (math.isfinite(self.radius_km) and self.radius_km > 0):
            raise ValueError(f"Moon radius must be positive. Got: {self.radius_km}")

    @property
    def position(self) -> Vector3:
        return (to_units(self.distance_km), 0.0, 0.0)

    @property
    def radius_units(self) -> float:
        return to_units(self.radius_km)


@dataclass
class Earth:
    """
    Central body at the origin. rotation_rad is visual only: it has no effect
    on the satellite.
    """
    spin_rate_rad_s: float = EARTH_SPIN_RAD_S
    rotation_rad: float = 0.0

    position: Vector3 = ORIGIN
    radius_units: float = to_units(R_EARTH_KM)

    def spin(self, elapsed_s: float, time_scale: float = 1.0) -> None:
        self.rotation_rad = wrap_to_2pi(self.rotation_rad + self.spin_rate_rad_s * elapsed_s * time_scale)
