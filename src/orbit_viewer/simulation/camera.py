from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from orbit_viewer.core.frames import ORIGIN, Vector3

logger = logging.getLogger(__name__)

# Eye positions in render units
CAMERA_PRESET_POSITIONS: Dict[str, Vector3] = {
    "iso": (15.0, 12.0, 15.0),
    "top": (0.0, 80.0, 0.0),
}


@dataclass
class Camera:
    """
    Perspective camera. The frame loop writes look_at from the focus
    controller; presets only move the eye.
    """
    position: Vector3 = CAMERA_PRESET_POSITIONS["iso"]
    look_at: Vector3 = ORIGIN
    fov_deg: float = 45.0
    near: float = 0.1
    far: float = 2000.0

    def apply_preset(self, name: str) -> bool:
        pos = CAMERA_PRESET_POSITIONS.get(name)
        if pos is None:
            logger.warning("Unknown camera preset %r", name)
            return False
        self.position = pos
        logger.info("Camera preset %s", name)
        return True
