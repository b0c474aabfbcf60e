from __future__ import annotations

from typing import List

from orbit_viewer.simulation.engine import System
from orbit_viewer.simulation.systems.earth_spin_system import EarthSpinSystem
from orbit_viewer.simulation.systems.focus_system import FocusSystem
from orbit_viewer.simulation.systems.orbit_system import OrbitSystem
from orbit_viewer.simulation.systems.state_recorder import StateRecorderSystem


def default_systems(record: bool = True) -> List[System]:
    """Per-frame order: orbit, earth spin, focus, then recording."""
    systems: List[System] = [OrbitSystem(), EarthSpinSystem(), FocusSystem()]
    if record:
        systems.append(StateRecorderSystem())
    return systems


__all__ = ["EarthSpinSystem", "FocusSystem", "OrbitSystem", "StateRecorderSystem", "default_systems"]
