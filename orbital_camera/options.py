from __future__ import annotations
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _f(name: str, default: float) -> float:
    v = os.environ.get(name, "")
    if not v:
        return float(default)
    try:
        return float(v)
    except ValueError:
        logger.warning("ignoring %s=%r, not a number; using %s", name, v, default)
        return float(default)


@dataclass(frozen=True)
class OrbitalCameraControllerOptions:
    minimum_direction_length: float = 0.001
    move_ratio: float = 0.0025
    rotation_ratio: float = 0.01
    rotation_epsilon: float = 0.001
    zoom_ratio: float = 0.005
    minimum_zoom: float = 0.9
    maximum_zoom: float = 1.2

    def __post_init__(self):
        if self.minimum_direction_length < 0.0:
            raise ValueError(f"minimum_direction_length must be >= 0, got {self.minimum_direction_length}")
        if self.rotation_epsilon < 0.0:
            raise ValueError(f"rotation_epsilon must be >= 0, got {self.rotation_epsilon}")
        if self.minimum_zoom > self.maximum_zoom:
            raise ValueError(
                f"minimum_zoom ({self.minimum_zoom}) must not exceed maximum_zoom ({self.maximum_zoom})"
            )


DEFAULT_OPTIONS = OrbitalCameraControllerOptions()


def load_options() -> OrbitalCameraControllerOptions:
    d = DEFAULT_OPTIONS
    opts = OrbitalCameraControllerOptions(
        minimum_direction_length=_f("ORBITAL_CAMERA_MIN_DIRECTION_LENGTH", d.minimum_direction_length),
        move_ratio=_f("ORBITAL_CAMERA_MOVE_RATIO", d.move_ratio),
        rotation_ratio=_f("ORBITAL_CAMERA_ROTATION_RATIO", d.rotation_ratio),
        rotation_epsilon=_f("ORBITAL_CAMERA_ROTATION_EPSILON", d.rotation_epsilon),
        zoom_ratio=_f("ORBITAL_CAMERA_ZOOM_RATIO", d.zoom_ratio),
        minimum_zoom=_f("ORBITAL_CAMERA_MIN_ZOOM", d.minimum_zoom),
        maximum_zoom=_f("ORBITAL_CAMERA_MAX_ZOOM", d.maximum_zoom),
    )
    logger.debug("controller options: %s", opts)
    return opts
