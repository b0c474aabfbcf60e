"""
Tests for the frame engine and scenario components.
"""
import math
import pytest

from orbit_viewer.core.frames import ORIGIN
from orbit_viewer.objects.satellite import OrbitalSimulator
from orbit_viewer.simulation.commands import RequestFocus, SetAltitude, SetTimeScale
from orbit_viewer.simulation.engine import Engine, SimulationLog
from orbit_viewer.simulation.focus import FocusTarget
from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.systems import default_systems


@pytest.fixture
def scenario():
    return Scenario(name="Test", simulator=OrbitalSimulator(altitude_km=400.0))


def fake_clock(step_s):
    state = {"t": 0.0}

    def clock():
        value = state["t"]
        state["t"] += step_s
        return value
    return clock


class TestScenario:
    def test_scenario_creation(self):
        scenario = Scenario(name="Test Scenario")
        assert scenario.name == "Test Scenario"
        assert scenario.time_scale == 1.0
        assert scenario.t_s == 0.0
        assert scenario.focus.selection is FocusTarget.NONE

    def test_position_lookup(self, scenario):
        assert scenario.position_of(FocusTarget.NONE) == ORIGIN
        assert scenario.position_of(FocusTarget.SATELLITE) == scenario.simulator.current_position()
        assert scenario.position_of(FocusTarget.MOON) == scenario.moon.position

    def test_position_lookup_unknown(self, scenario):
        with pytest.raises(KeyError):
            scenario.position_of("sun")


class TestSimulationLog:
    def test_log_creation(self):
        log = SimulationLog()
        assert len(log.frames) == 0
        assert len(log.events) == 0

    def test_record_event(self):
        log = SimulationLog()
        log.record_event(1.5, SetAltitude(400.0), True)
        assert log.events == [{"t": 1.5, "command": "SetAltitude(altitude_km=400.0)", "accepted": True}]


class TestEngine:
    def test_engine_creation(self):
        engine = Engine()
        assert len(engine.systems) == 0
        assert not engine.running

    def test_engine_validation_non_positive_dt(self, scenario):
        engine = Engine()
        with pytest.raises(ValueError, match="dt_s must be positive"):
            engine.run(scenario, dt_s=0.0, n_frames=10)

    def test_engine_validation_negative_frames(self, scenario):
        engine = Engine()
        with pytest.raises(ValueError, match="n_frames must be >= 0"):
            engine.run(scenario, dt_s=0.1, n_frames=-1)

    def test_engine_run_empty_systems(self, scenario):
        log = Engine().run(scenario, dt_s=0.05, n_frames=5)
        assert isinstance(log, SimulationLog)
        assert log.frames == []
        assert math.isclose(scenario.t_s, 0.25)

    def test_engine_with_mock_system(self, scenario):
        """Engine calls on_step once per frame with the frame dt."""
        from dataclasses import dataclass, field
        from typing import List

        @dataclass
        class MockSystem:
            name: str = "mock"
            calls: List[tuple] = field(default_factory=list)

            def on_step(self, t_s, dt_s, scenario, log):
                self.calls.append((t_s, dt_s))

        mock_system = MockSystem()
        Engine(systems=[mock_system]).run(scenario, dt_s=0.05, n_frames=4)

        assert len(mock_system.calls) == 4
        assert all(dt == 0.05 for (_t, dt) in mock_system.calls)
        assert [round(t, 9) for (t, _dt) in mock_system.calls] == [0.05, 0.1, 0.15, 0.2]

    def test_records_one_sample_per_frame(self, scenario):
        log = Engine(systems=default_systems()).run(scenario, dt_s=0.1, n_frames=10)
        assert len(log.frames) == 10
        assert math.isclose(log.frames[-1].t_s, 1.0)
        assert log.frames[0].telemetry.zone == "LEO"

    def test_step_takes_full_dt(self, scenario):
        engine = Engine(systems=default_systems(), max_frame_dt_s=0.1)
        engine.step(scenario, 5.0, SimulationLog())
        assert scenario.t_s == 5.0

    def test_run_keeps_large_fixed_step(self, scenario):
        engine = Engine(systems=default_systems(), max_frame_dt_s=0.1)
        log = engine.run(scenario, dt_s=1.0, n_frames=10)
        assert scenario.t_s == 10.0
        assert [f.t_s for f in log.frames] == [float(i) for i in range(1, 11)]
        expected = scenario.simulator.angular_rate_rad_s * 10.0
        assert math.isclose(scenario.simulator.phase_rad, expected, rel_tol=1e-9)

    @pytest.mark.parametrize("bad", [None, "0.1", float("nan")])
    def test_run_rejects_non_numeric_dt(self, scenario, bad):
        with pytest.raises(ValueError, match="dt_s must be positive"):
            Engine().run(scenario, dt_s=bad, n_frames=1)

    @pytest.mark.parametrize("bad", [-0.5, float("nan"), None, "0.5"])
    def test_step_ignores_bad_dt(self, scenario, bad):
        engine = Engine(systems=default_systems())
        phase = scenario.simulator.phase_rad
        engine.step(scenario, bad, SimulationLog())
        assert scenario.t_s == 0.0
        assert scenario.simulator.phase_rad == phase

    def test_commands_dispatched_before_frame(self, scenario):
        engine = Engine(systems=default_systems())
        log = engine.run(
            scenario,
            dt_s=0.1,
            n_frames=5,
            commands={0: [SetAltitude(35786.0)], 3: [SetAltitude(-1.0), SetTimeScale(0.0)]},
        )
        assert [e["accepted"] for e in log.events] == [True, False, True]
        assert log.frames[0].telemetry.zone == "GEO"
        assert scenario.simulator.altitude_km == 35786.0
        assert scenario.time_scale == 0.0

    def test_zero_time_scale_freezes_satellite(self, scenario):
        scenario.set_time_scale(0.0)
        log = Engine(systems=default_systems()).run(scenario, dt_s=0.1, n_frames=20)
        assert len({f.satellite for f in log.frames}) == 1

    def test_deterministic_replay(self):
        commands = {0: [SetTimeScale(100.0)], 5: [RequestFocus("satellite")], 9: [RequestFocus("moon")]}
        logs = []
        for _ in range(2):
            s = Scenario(name="Replay", simulator=OrbitalSimulator(altitude_km=400.0))
            logs.append(Engine(systems=default_systems()).run(s, dt_s=1.0 / 60.0, n_frames=90, commands=commands))
        assert logs[0].frames == logs[1].frames

    def test_focus_switch_never_snaps_to_origin(self, scenario):
        scenario.set_time_scale(0.0)
        engine = Engine(systems=default_systems())
        log = engine.run(
            scenario,
            dt_s=0.1,
            n_frames=30,
            commands={0: [RequestFocus("satellite")], 5: [RequestFocus("moon")]},
        )
        assert all(f.look_at != ORIGIN for f in log.frames)
        xs = [f.look_at[0] for f in log.frames]
        assert all(b >= a for a, b in zip(xs, xs[1:]))
        assert log.frames[-1].look_at == scenario.moon.position
        assert scenario.camera.look_at == scenario.moon.position

    def test_camera_tracks_moving_satellite(self, scenario):
        scenario.set_time_scale(50.0)
        log = Engine(systems=default_systems()).run(
            scenario, dt_s=0.1, n_frames=20, commands={0: [RequestFocus(FocusTarget.SATELLITE)]},
        )
        last = log.frames[-1]
        assert last.look_at == last.satellite
        assert log.frames[-2].look_at == log.frames[-2].satellite


class TestRealtime:
    def test_runs_max_frames_on_measured_dt(self, scenario):
        engine = Engine(systems=default_systems())
        log = engine.run_realtime(
            scenario, max_frames=3, clock=fake_clock(0.02), sleep=lambda s: None,
        )
        assert len(log.frames) == 3
        assert math.isclose(scenario.t_s, 0.06)
        assert not engine.running

    def test_stop_from_frame_callback(self, scenario):
        engine = Engine(systems=default_systems())

        def on_frame(scn, log):
            if len(log.frames) == 2:
                engine.stop()

        log = engine.run_realtime(
            scenario, clock=fake_clock(0.016), sleep=lambda s: None, on_frame=on_frame,
        )
        assert len(log.frames) == 2
        assert not engine.running

    def test_stalled_frame_is_clamped(self, scenario):
        engine = Engine(systems=default_systems(), max_frame_dt_s=0.1)
        engine.run_realtime(scenario, max_frames=2, clock=fake_clock(30.0), sleep=lambda s: None)
        assert math.isclose(scenario.t_s, 0.2)
