from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from orbit_viewer.core.constants import (
    GEO_ALTITUDE_KM,
    GEO_MAX_KM,
    KARMAN_LINE_KM,
    LEO_MAX_KM,
)


class OrbitZone(Enum):
    """Altitude bands; the value is the display label."""
    SUB_ORBITAL = "Sub-Orbital"
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"
    DEEP_SPACE = "Deep Space"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class ZoneBands:
    """
    Band edges in km. Comparisons used by classify_zone:
        h <  sub_orbital_below_km -> SUB_ORBITAL
        h <= leo_max_km           -> LEO
        h <  geo_altitude_km      -> MEO
        h <= geo_max_km           -> GEO
        otherwise                 -> DEEP_SPACE
    """
    sub_orbital_below_km: float = KARMAN_LINE_KM
    leo_max_km: float = LEO_MAX_KM
    geo_altitude_km: float = GEO_ALTITUDE_KM
    geo_max_km: float = GEO_MAX_KM

    def __post_init__(self):
        edges = (self.sub_orbital_below_km, self.leo_max_km, self.geo_altitude_km, self.geo_max_km)
        if not all(math.isfinite(e) for e in edges):
            raise ValueError(f"Zone band edges must be finite. Got: {edges}")
        if self.sub_orbital_below_km < 0:
            raise ValueError(f"Sub-orbital edge must be non-negative. Got: {self.sub_orbital_below_km}")
        if not (self.sub_orbital_below_km <= self.leo_max_km < self.geo_altitude_km <= self.geo_max_km):
            raise ValueError(f"Zone band edges must be ascending. Got: {edges}")


DEFAULT_ZONE_BANDS = ZoneBands()


def classify_zone(altitude_km: float, bands: ZoneBands = DEFAULT_ZONE_BANDS) -> OrbitZone:
    if math.isnan(altitude_km):
        raise ValueError("Cannot classify a NaN altitude.")

    if altitude_km < bands.sub_orbital_below_km:
        return OrbitZone.SUB_ORBITAL
    if altitude_km <= bands.leo_max_km:
        return OrbitZone.LEO
    if altitude_km < bands.geo_altitude_km:
        return OrbitZone.MEO
    if altitude_km <= bands.geo_max_km:
        return OrbitZone.GEO
    return OrbitZone.DEEP_SPACE
