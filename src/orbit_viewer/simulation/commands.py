from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from orbit_viewer.simulation.scenario import Scenario


@dataclass(frozen=True)
class SetAltitude:
    altitude_km: Any

    def apply(self, scenario: Scenario) -> bool:
        return scenario.simulator.set_altitude(self.altitude_km)


@dataclass(frozen=True)
class RequestFocus:
    selection: Any

    def apply(self, scenario: Scenario) -> bool:
        return scenario.focus.request_focus(self.selection)


@dataclass(frozen=True)
class SetTimeScale:
    time_scale: Any

    def apply(self, scenario: Scenario) -> bool:
        return scenario.set_time_scale(self.time_scale)


@dataclass(frozen=True)
class ApplyCameraPreset:
    preset: str

    def apply(self, scenario: Scenario) -> bool:
        return scenario.camera.apply_preset(self.preset)


Command = Union[SetAltitude, RequestFocus, SetTimeScale, ApplyCameraPreset]
