from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from orbit_viewer.core.constants import DEFAULT_ALTITUDE_KM
from orbit_viewer.core.frames import Vector3, is_finite_number, planar_position, to_units
from orbit_viewer.physics.gravity import wrap_to_2pi
from orbit_viewer.physics.orbit import OrbitKinematics, compute_kinematics, is_valid_altitude
from orbit_viewer.physics.zones import DEFAULT_ZONE_BANDS, OrbitZone, ZoneBands, classify_zone

logger = logging.getLogger(__name__)


@dataclass
class OrbitalSimulator:
    """
    A satellite on a circular, equatorial orbit.

    The phase angle moves only through advance(); altitude changes only through
    set_altitude(), which recomputes the kinematics on every accepted value.
    """
    altitude_km: float = DEFAULT_ALTITUDE_KM
    phase_rad: float = 0.0
    bands: ZoneBands = DEFAULT_ZONE_BANDS
    kinematics: OrbitKinematics = field(init=False)

    def __post_init__(self):
        if not is_valid_altitude(self.altitude_km):
            raise ValueError(f"Altitude must be a finite, non-negative number. Got: {self.altitude_km!r}")
        if not math.isfinite(self.phase_rad):
            raise ValueError(f"Phase angle must be finite. Got: {self.phase_rad}")
        self.altitude_km = float(self.altitude_km)
        self.phase_rad = wrap_to_2pi(self.phase_rad)
        self.kinematics = compute_kinematics(self.altitude_km)

    @property
    def angular_rate_rad_s(self) -> float:
        return self.kinematics.angular_rate_rad_s

    @property
    def speed_km_s(self) -> float:
        return self.kinematics.speed_km_s

    @property
    def period_min(self) -> float:
        return self.kinematics.period_min

    @property
    def zone(self) -> OrbitZone:
        return classify_zone(self.altitude_km, self.bands)

    def set_altitude(self, altitude_km) -> bool:
        """
        Returns False (state untouched) for NaN, infinite, negative or non-numeric input.
        """
        if not is_valid_altitude(altitude_km):
            logger.warning("Rejected altitude %r; keeping %.3f km", altitude_km, self.altitude_km)
            return False

        self.altitude_km = float(altitude_km)
        self.kinematics = compute_kinematics(self.altitude_km)
        logger.info(
            "Altitude set to %.3f km (v=%.3f km/s, T=%.1f min, %s)",
            self.altitude_km, self.speed_km_s, self.period_min, self.zone.label,
        )
        return True

    def advance(self, elapsed_s: float, time_scale: float = 1.0) -> bool:
        """
        phase += w * elapsed_s * time_scale, wrapped to [0, 2π).
        time_scale may be zero (frozen) or negative (reversed).
        """
        if not is_finite_number(elapsed_s) or elapsed_s < 0:
            logger.warning("Rejected elapsed time %r s", elapsed_s)
            return False
        if not is_finite_number(time_scale):
            logger.warning("Rejected time scale %r", time_scale)
            return False

        self.phase_rad = wrap_to_2pi(self.phase_rad + self.angular_rate_rad_s * elapsed_s * time_scale)
        return True

    def radius_units(self) -> float:
        return to_units(self.kinematics.radius_km)

    def current_position(self) -> Vector3:
        """Render-unit position in the X-Z plane (y = 0)."""
        return planar_position(self.phase_rad, self.radius_units())
