from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.engine import SimulationLog


@dataclass
class FocusSystem:
    """Ticks the focus controller on real elapsed time and aims the camera."""
    name: str = "focus"

    def on_step(self, t_s: float, dt_s: float, scenario: Scenario, log: SimulationLog) -> None:
        scenario.camera.look_at = scenario.focus.tick(dt_s * 1000.0)
