from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from orbit_viewer.simulation.engine import SimulationLog
from orbit_viewer.simulation.scenario import Scenario


def export_playback_bundle(
    scenario: Scenario,
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
) -> str:
    """
    Export a recorded run for a browser viewer. All per-frame arrays are
    aligned with times_s; positions are in render units (1 = Earth radius).

    JSON shape:
    {
      "scenario": "...",
      "times_s": [0.016, 0.033, ...],
      "satellite_xyz": [[x,y,z], ...],
      "look_at_xyz": [[x,y,z], ...],
      "earth_rotation_rad": [...],
      "telemetry": [{"zone": "GEO", "velocity": "3.075", "period": "1436.1", "time_scale": "1x"}, ...],
      "moon": {"position": [x,y,z], "radius": r},
      "events": [{"t": ..., "command": "...", "accepted": true}, ...]
    }
    """
    if not log.frames:
        raise ValueError("No frames found in log.")

    data: Dict[str, Any] = {
        "scenario": scenario.name,
        "times_s": log.times(),
        "satellite_xyz": [list(f.satellite) for f in log.frames],
        "look_at_xyz": [list(f.look_at) for f in log.frames],
        "earth_rotation_rad": [f.earth_rotation_rad for f in log.frames],
        "telemetry": [asdict(f.telemetry) for f in log.frames],
        "moon": {
            "position": list(scenario.moon.position),
            "radius": scenario.moon.radius_units,
        },
        "events": log.events,
    }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
