from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from orbit_viewer.core.constants import DEFAULT_FOCUS_DURATION_MS
from orbit_viewer.core.frames import ORIGIN, Vector3, ease_out_quad, is_finite_number, lerp

logger = logging.getLogger(__name__)


class FocusTarget(Enum):
    """What the camera looks at. NONE is Earth's center (the origin)."""
    NONE = "none"
    SATELLITE = "satellite"
    MOON = "moon"

    @classmethod
    def parse(cls, value) -> Optional["FocusTarget"]:
        """
        Accepts a FocusTarget, its value string (any case) or "earth" for NONE.
        Returns None when the key is not recognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        if key == "earth":
            return cls.NONE
        for member in cls:
            if member.value == key:
                return member
        return None


PositionLookup = Callable[[FocusTarget], Vector3]


@dataclass
class FocusTransition:
    """One eased move of the look-at target from start to end."""
    start: Vector3
    end: Vector3
    duration_ms: float
    elapsed_ms: float = 0.0

    @property
    def progress(self) -> float:
        return min(self.elapsed_ms / self.duration_ms, 1.0)

    @property
    def done(self) -> bool:
        return self.elapsed_ms >= self.duration_ms

    def sample(self) -> Vector3:
        if self.done:
            return self.end
        return lerp(self.start, self.end, ease_out_quad(self.progress))


class FocusController:
    """
    Holds the focus selection and moves the camera look-at target toward it.

    request_focus() starts a transition from wherever the target currently is
    (mid-flight included) to the selected body's position at request time.
    Once the transition finishes, tick() follows the body's live position.
    Body positions come from the caller through ``position_of``.
    """

    def __init__(self, position_of: PositionLookup, duration_ms: float = DEFAULT_FOCUS_DURATION_MS):
        if not (is_finite_number(duration_ms) and duration_ms > 0):
            raise ValueError(f"Focus duration must be positive. Got: {duration_ms}")
        self._position_of = position_of
        self.duration_ms = float(duration_ms)
        self._selection = FocusTarget.NONE
        self._transition: Optional[FocusTransition] = None
        self._target: Vector3 = ORIGIN

    @property
    def selection(self) -> FocusTarget:
        return self._selection

    @property
    def current_target(self) -> Vector3:
        return self._target

    @property
    def transition(self) -> Optional[FocusTransition]:
        return self._transition

    @property
    def in_transition(self) -> bool:
        return self._transition is not None

    def _lookup(self, selection: FocusTarget) -> Vector3:
        if selection is FocusTarget.NONE:
            return ORIGIN
        return self._position_of(selection)

    def request_focus(self, selection) -> bool:
        target = FocusTarget.parse(selection)
        if target is None:
            logger.warning("Rejected focus key %r; keeping %s", selection, self._selection.value)
            return False

        try:
            end = self._lookup(target)
        except KeyError:
            logger.warning("No position for focus %s; keeping %s", target.value, self._selection.value)
            return False

        self._selection = target
        self._transition = FocusTransition(start=self._target, end=end, duration_ms=self.duration_ms)
        logger.info("Focus -> %s over %.0f ms", target.value, self.duration_ms)
        return True

    def tick(self, elapsed_ms: float) -> Vector3:
        if not is_finite_number(elapsed_ms) or elapsed_ms < 0:
            logger.warning("Focus tick got elapsed %r ms; using 0", elapsed_ms)
            elapsed_ms = 0.0

        if self._transition is not None:
            self._transition.elapsed_ms += elapsed_ms
            self._target = self._transition.sample()
            if self._transition.done:
                self._transition = None
            return self._target

        if self._selection is FocusTarget.NONE:
            self._target = ORIGIN
            return self._target

        try:
            self._target = self._lookup(self._selection)
        except KeyError:
            logger.warning("Lost position for focus %s; holding target", self._selection.value)
        return self._target
