from __future__ import annotations
from dataclasses import dataclass
import logging
import os

from orbital_camera.options import OrbitalCameraControllerOptions, load_options

logger = logging.getLogger(__name__)

SHAPES = ("cube", "pyramid")


def _f(name: str, default: float) -> float:
    v = os.environ.get(name, "")
    if not v:
        return float(default)
    try:
        return float(v)
    except ValueError:
        logger.warning("ignoring %s=%r, not a number; using %s", name, v, default)
        return float(default)


def _s(name: str, default: str) -> str:
    v = os.environ.get(name, "")
    return v if v else default


def _i(name: str, default: int) -> int:
    v = os.environ.get(name, "")
    if not v:
        return int(default)
    try:
        return int(v)
    except ValueError:
        logger.warning("ignoring %s=%r, not an integer; using %s", name, v, default)
        return int(default)


@dataclass(frozen=True)
class DemoConfig:
    window_w: int
    window_h: int
    camera_x: float
    camera_y: float
    camera_z: float
    initial_shape: str
    fov_deg: float
    log_level: str
    options: OrbitalCameraControllerOptions


def load_config() -> DemoConfig:
    shape = _s("INITIAL_SHAPE", "cube").strip().lower()
    if shape not in SHAPES:
        logger.warning("unknown INITIAL_SHAPE %r; using cube", shape)
        shape = "cube"

    return DemoConfig(
        window_w=_i("WINDOW_W", 1024),
        window_h=_i("WINDOW_H", 768),
        camera_x=_f("CAMERA_X", 5.0),
        camera_y=_f("CAMERA_Y", 3.0),
        camera_z=_f("CAMERA_Z", 5.0),
        initial_shape=shape,
        fov_deg=_f("FOV_DEG", 45.0),
        log_level=_s("ORBITAL_CAMERA_LOG_LEVEL", "INFO").upper(),
        options=load_options(),
    )


def resolve_log_level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        logger.warning("unknown log level %r; using INFO", name)
        return logging.INFO
    return level
