from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.engine import SimulationLog


@dataclass
class EarthSpinSystem:
    name: str = "earth_spin"

    def on_step(self, t_s: float, dt_s: float, scenario: Scenario, log: SimulationLog) -> None:
        scenario.earth.spin(dt_s, scenario.time_scale)
