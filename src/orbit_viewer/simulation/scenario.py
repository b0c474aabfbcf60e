from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from orbit_viewer.core.config import SimulationConfig
from orbit_viewer.core.constants import DEFAULT_TIME_SCALE
from orbit_viewer.core.frames import ORIGIN, Vector3, is_finite_number
from orbit_viewer.objects.bodies import Earth, Moon
from orbit_viewer.objects.satellite import OrbitalSimulator
from orbit_viewer.simulation.camera import Camera
from orbit_viewer.simulation.focus import FocusController, FocusTarget
from orbit_viewer.simulation.telemetry import Telemetry

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """
    Owns every piece of mutable viewer state. Touched only from the frame
    loop and from commands dispatched between frames.
    """
    name: str
    simulator: OrbitalSimulator = field(default_factory=OrbitalSimulator)
    moon: Moon = field(default_factory=Moon)
    earth: Earth = field(default_factory=Earth)
    camera: Camera = field(default_factory=Camera)
    time_scale: float = DEFAULT_TIME_SCALE
    focus: Optional[FocusController] = None
    t_s: float = 0.0

    def __post_init__(self):
        if not math.isfinite(self.time_scale):
            raise ValueError(f"Time scale must be finite. Got: {self.time_scale}")
        if self.focus is None:
            self.focus = FocusController(self.position_of)

    @classmethod
    def from_config(cls, config: SimulationConfig, name: str = "Orbit Viewer") -> "Scenario":
        scenario = cls(
            name=name,
            simulator=OrbitalSimulator(altitude_km=config.initial_altitude_km, bands=config.zone_bands),
            earth=Earth(spin_rate_rad_s=config.earth_spin_rad_s),
            time_scale=config.time_scale,
        )
        scenario.focus = FocusController(scenario.position_of, duration_ms=config.focus_duration_ms)
        scenario.camera.apply_preset(config.camera_preset)
        return scenario

    def position_of(self, target: FocusTarget) -> Vector3:
        if target is FocusTarget.NONE:
            return ORIGIN
        if target is FocusTarget.SATELLITE:
            return self.simulator.current_position()
        if target is FocusTarget.MOON:
            return self.moon.position
        raise KeyError(target)

    def set_time_scale(self, value) -> bool:
        """Any finite number; 0 freezes, negative runs backward."""
        if not is_finite_number(value):
            logger.warning("Rejected time scale %r; keeping %g", value, self.time_scale)
            return False
        self.time_scale = float(value)
        logger.info("Time scale %gx", self.time_scale)
        return True

    def telemetry(self) -> Telemetry:
        return Telemetry.from_simulator(self.simulator, self.time_scale)

    def dispatch(self, command) -> bool:
        return command.apply(self)
