from __future__ import annotations

from dataclasses import dataclass

from orbit_viewer.objects.satellite import OrbitalSimulator


def format_velocity(speed_km_s: float) -> str:
    return f"{speed_km_s:.3f}"


def format_period(period_min: float) -> str:
    return f"{period_min:.1f}"


def format_time_scale(time_scale: float) -> str:
    return f"{time_scale:g}x"


@dataclass(frozen=True)
class Telemetry:
    """Display strings for the telemetry panel."""
    zone: str
    velocity: str
    period: str
    time_scale: str

    @classmethod
    def from_simulator(cls, sim: OrbitalSimulator, time_scale: float = 1.0) -> "Telemetry":
        return cls(
            zone=sim.zone.label,
            velocity=format_velocity(sim.speed_km_s),
            period=format_period(sim.period_min),
            time_scale=format_time_scale(time_scale),
        )
