from orbit_viewer.objects.satellite import OrbitalSimulator
from orbit_viewer.simulation.telemetry import (
    Telemetry,
    format_period,
    format_time_scale,
    format_velocity,
)


def test_geostationary_panel():
    t = Telemetry.from_simulator(OrbitalSimulator(altitude_km=35786.0))
    assert t.zone == "GEO"
    assert t.velocity == "3.075"
    assert t.period == "1436.1"
    assert t.time_scale == "1x"


def test_leo_panel():
    t = Telemetry.from_simulator(OrbitalSimulator(altitude_km=400.0), time_scale=250.0)
    assert t.zone == "LEO"
    assert t.velocity == "7.669"
    assert t.time_scale == "250x"


def test_karman_line_is_leo():
    assert Telemetry.from_simulator(OrbitalSimulator(altitude_km=100.0)).zone == "LEO"
    assert Telemetry.from_simulator(OrbitalSimulator(altitude_km=0.0)).zone == "Sub-Orbital"


def test_deep_space_label():
    assert Telemetry.from_simulator(OrbitalSimulator(altitude_km=35901.0)).zone == "Deep Space"


def test_formatters():
    assert format_velocity(7.0) == "7.000"
    assert format_period(92.64) == "92.6"
    assert format_time_scale(0.5) == "0.5x"
    assert format_time_scale(0.0) == "0x"
    assert format_time_scale(-3.0) == "-3x"
