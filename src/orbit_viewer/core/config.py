from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping

from orbit_viewer.core.constants import (
    DEFAULT_ALTITUDE_KM,
    DEFAULT_FOCUS_DURATION_MS,
    DEFAULT_TIME_SCALE,
    EARTH_SPIN_RAD_S,
    MAX_FRAME_DT_S,
)
from orbit_viewer.physics.orbit import is_valid_altitude
from orbit_viewer.physics.zones import ZoneBands

CAMERA_PRESETS = ("iso", "top")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Startup settings for a viewer session.

    Units:
        initial_altitude_km: satellite altitude at startup in km
        time_scale: initial time multiplier (any finite value; 0 freezes)
        focus_duration_ms: length of a camera focus transition in ms
        earth_spin_rad_s: visual Earth rotation rate at time_scale 1
        max_frame_dt_s: upper bound on the elapsed time of one frame
    """
    initial_altitude_km: float = DEFAULT_ALTITUDE_KM
    time_scale: float = DEFAULT_TIME_SCALE
    focus_duration_ms: float = DEFAULT_FOCUS_DURATION_MS
    zone_bands: ZoneBands = field(default_factory=ZoneBands)
    earth_spin_rad_s: float = EARTH_SPIN_RAD_S
    max_frame_dt_s: float = MAX_FRAME_DT_S
    camera_preset: str = "iso"

    def __post_init__(self):
        if not is_valid_altitude(self.initial_altitude_km):
            raise ValueError(f"Initial altitude must be a finite, non-negative number. Got: {self.initial_altitude_km}")
        if not math.isfinite(self.time_scale):
            raise ValueError(f"Time scale must be finite. Got: {self.time_scale}")
        if not (math.isfinite(self.focus_duration_ms) and self.focus_duration_ms > 0):
            raise ValueError(f"Focus duration must be positive. Got: {self.focus_duration_ms}")
        if not math.isfinite(self.earth_spin_rad_s):
            raise ValueError(f"Earth spin rate must be finite. Got: {self.earth_spin_rad_s}")
        if not (math.isfinite(self.max_frame_dt_s) and self.max_frame_dt_s > 0):
            raise ValueError(f"Max frame dt must be positive. Got: {self.max_frame_dt_s}")
        if self.camera_preset not in CAMERA_PRESETS:
            raise ValueError(f"Camera preset must be one of {CAMERA_PRESETS}. Got: {self.camera_preset!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """
        Build from plain data, e.g.
            {"initial_altitude_km": 400, "zone_bands": {"leo_max_km": 2000}}
        Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")

        kwargs: Dict[str, Any] = dict(data)
        bands = kwargs.get("zone_bands")
        if isinstance(bands, Mapping):
            band_keys = {f.name for f in fields(ZoneBands)}
            bad = sorted(set(bands) - band_keys)
            if bad:
                raise ValueError(f"Unknown zone_bands keys: {bad}")
            kwargs["zone_bands"] = ZoneBands(**bands)
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path: str) -> "SimulationConfig":
        with open(Path(path), "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must hold a JSON object: {path}")
        return cls.from_dict(data)
