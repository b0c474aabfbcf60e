from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Protocol, Sequence

from orbit_viewer.core.constants import MAX_FRAME_DT_S
from orbit_viewer.core.frames import Vector3, is_finite_number
from orbit_viewer.simulation.commands import Command
from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.telemetry import Telemetry

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs once per frame, in list order, and can write to the log.
    """
    name: str

    def on_step(self, t_s: float, dt_s: float, scenario: Scenario, log: "SimulationLog") -> None:
        ...


@dataclass(frozen=True)
class FrameSample:
    """What the rendering boundary needs for one frame."""
    t_s: float
    satellite: Vector3
    look_at: Vector3
    earth_rotation_rad: float
    telemetry: Telemetry


@dataclass
class SimulationLog:
    """
    Stores outputs from a run.
    Keep it simple and serializable.
    """
    frames: List[FrameSample] = field(default_factory=list)

    # Command outcomes: {"t": ..., "command": ..., "accepted": ...}
    events: List[Dict[str, object]] = field(default_factory=list)

    def record_frame(self, sample: FrameSample) -> None:
        self.frames.append(sample)

    def record_event(self, t_s: float, command: object, accepted: bool) -> None:
        self.events.append({"t": t_s, "command": repr(command), "accepted": accepted})

    def times(self) -> List[float]:
        return [f.t_s for f in self.frames]

    def satellite_track(self) -> List[Vector3]:
        return [f.satellite for f in self.frames]


@dataclass
class Engine:
    """
    Frame driver. step() runs every system once; run() replays a fixed-step
    session deterministically; run_realtime() steps on wall-clock deltas until
    stop() is called.
    """
    systems: List[System] = field(default_factory=list)
    max_frame_dt_s: float = MAX_FRAME_DT_S
    _running: bool = field(default=False, init=False, repr=False)

    def _usable_dt(self, dt_s: float) -> float:
        if not is_finite_number(dt_s) or dt_s < 0:
            logger.warning("Frame dt %r s is not usable; stepping with 0", dt_s)
            return 0.0
        return dt_s

    def step(self, scenario: Scenario, dt_s: float, log: SimulationLog) -> None:
        dt_s = self._usable_dt(dt_s)
        scenario.t_s += dt_s
        for sys in self.systems:
            sys.on_step(scenario.t_s, dt_s, scenario, log)

    def dispatch(self, scenario: Scenario, commands: Sequence[Command], log: SimulationLog) -> None:
        for cmd in commands:
            log.record_event(scenario.t_s, cmd, scenario.dispatch(cmd))

    def run(
        self,
        scenario: Scenario,
        dt_s: float,
        n_frames: int,
        commands: Optional[Mapping[int, Sequence[Command]]] = None,
    ) -> SimulationLog:
        """
        commands: frame index -> commands dispatched just before that frame.
        """
        if not (is_finite_number(dt_s) and dt_s > 0):
            raise ValueError("dt_s must be positive.")
        if n_frames < 0:
            raise ValueError("n_frames must be >= 0.")

        commands = commands or {}
        log = SimulationLog()

        for i in range(n_frames):
            self.dispatch(scenario, commands.get(i, ()), log)
            self.step(scenario, dt_s, log)

        return log

    def run_realtime(
        self,
        scenario: Scenario,
        log: Optional[SimulationLog] = None,
        frame_interval_s: float = 1.0 / 60.0,
        max_frames: Optional[int] = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
        on_frame: Optional[Callable[[Scenario, SimulationLog], None]] = None,
    ) -> SimulationLog:
        """
        Steps with the measured elapsed time of each frame, capped at
        max_frame_dt_s so a stalled loop resumes without a jump. on_frame runs
        after each step (UI polling, rendering); it may call stop().
        """
        log = log if log is not None else SimulationLog()
        self._running = True
        frames = 0
        last = clock()

        while self._running and (max_frames is None or frames < max_frames):
            sleep(frame_interval_s)
            now = clock()
            dt_s = now - last
            if dt_s > self.max_frame_dt_s:
                logger.debug("Frame dt %.4f s clamped to %.4f s", dt_s, self.max_frame_dt_s)
                dt_s = self.max_frame_dt_s
            self.step(scenario, dt_s, log)
            last = now
            frames += 1
            if on_frame is not None:
                on_frame(scenario, log)

        self._running = False
        return log

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running
