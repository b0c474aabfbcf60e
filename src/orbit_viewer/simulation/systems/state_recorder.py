from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.engine import FrameSample, SimulationLog


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"

    def on_step(self, t_s: float, dt_s: float, scenario: Scenario, log: SimulationLog) -> None:
        log.record_frame(FrameSample(
            t_s=t_s,
            satellite=scenario.simulator.current_position(),
            look_at=scenario.camera.look_at,
            earth_rotation_rad=scenario.earth.rotation_rad,
            telemetry=scenario.telemetry(),
        ))
