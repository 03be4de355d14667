from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from orbital_camera.basis import WORLD_UP, axis_angle_matrix, normalize, recompute, vec3
from orbital_camera.options import DEFAULT_OPTIONS, OrbitalCameraControllerOptions
from orbital_camera.pointer import PointerButton, PointerButtonTracker, PointerEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CameraState:
    position: np.ndarray
    target: np.ndarray
    up: np.ndarray
    view_vector: np.ndarray
    right_vector: np.ndarray
    up_vector: np.ndarray
    view_direction_length: float

    @classmethod
    def create(cls, position: Sequence[float], target: Sequence[float], up: Sequence[float]) -> "CameraState":
        p = vec3(position)
        t = vec3(target)
        u = vec3(up)
        b = recompute(p, t, u)
        return cls(
            position=p,
            target=t,
            up=u,
            view_vector=b.view_vector,
            right_vector=b.right_vector,
            up_vector=b.up_vector,
            view_direction_length=b.view_direction_length,
        )


@dataclass(frozen=True, eq=False)
class CameraPose:
    """What a renderer camera needs: where it is, where it looks, which way is up."""

    position: np.ndarray
    look_direction: np.ndarray
    up_direction: np.ndarray

    def __eq__(self, other):
        if not isinstance(other, CameraPose):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.look_direction, other.look_direction)
            and np.array_equal(self.up_direction, other.up_direction)
        )

    __hash__ = None


class OrbitalCameraController:
    """Orbit/pan/dolly controller around a target point.

    Every operation replaces the whole ``CameraState`` and publishes a new
    ``CameraPose``. Not thread safe; keep it on the thread that owns the
    event loop.

    The distance floor (``minimum_direction_length``) is only enforced by
    ``zoom``. Setting ``position`` equal to ``target`` leaves a zero-length
    view vector and a NaN basis.
    """

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 10.0),
        target: Sequence[float] = (0.0, 0.0, 0.0),
        up: Sequence[float] = WORLD_UP,
        options: OrbitalCameraControllerOptions = DEFAULT_OPTIONS,
        on_camera_changed: Optional[Callable[[CameraPose], None]] = None,
    ):
        self._options = options
        self._on_camera_changed = on_camera_changed
        self._buttons = PointerButtonTracker()
        self._state = CameraState.create(position, target, up)
        self._camera = self._publish()

    @property
    def options(self) -> OrbitalCameraControllerOptions:
        return self._options

    @property
    def state(self) -> CameraState:
        return self._state

    @property
    def camera(self) -> CameraPose:
        return self._camera

    @property
    def position(self) -> np.ndarray:
        return self._state.position

    @position.setter
    def position(self, value: Sequence[float]):
        self._replace(value, self._state.target, self._state.up)

    @property
    def target(self) -> np.ndarray:
        return self._state.target

    @target.setter
    def target(self, value: Sequence[float]):
        self._replace(self._state.position, value, self._state.up)

    @property
    def up(self) -> np.ndarray:
        return self._state.up

    @up.setter
    def up(self, value: Sequence[float]):
        self._replace(self._state.position, self._state.target, value)

    @property
    def view_vector(self) -> np.ndarray:
        return self._state.view_vector

    @property
    def right_vector(self) -> np.ndarray:
        return self._state.right_vector

    @property
    def up_vector(self) -> np.ndarray:
        return self._state.up_vector

    @property
    def view_direction_length(self) -> float:
        return self._state.view_direction_length

    def move(self, direction: Sequence[float]):
        d = np.asarray(direction, dtype=np.float64)
        s = self._state
        self._replace(s.position + d, s.target + d, s.up)

    def rotate(self, yaw: float, pitch: float):
        """Orbit around the target. ``yaw`` turns about ``up``, ``pitch`` about the right vector (radians).

        Pitch is clamped so the view vector stays at least ``rotation_epsilon``
        away from ``up`` on either side.
        """
        s = self._state
        eps = self._options.rotation_epsilon
        f = math.acos(float(np.clip(np.dot(s.view_vector, s.up), -1.0, 1.0)))

        if pitch > 0.0:
            clamped = min(pitch, f - eps)
        else:
            clamped = max(pitch, f - math.pi + eps)
        if clamped != pitch:
            logger.debug("pitch %.6f clamped to %.6f near pole", pitch, clamped)

        rot = axis_angle_matrix(s.right_vector, clamped) @ axis_angle_matrix(s.up, yaw)
        view = rot @ s.view_vector
        self._replace(s.target - view * s.view_direction_length, s.target, s.up)

    def zoom(self, factor: float):
        s = self._state
        length = max(self._options.minimum_direction_length, s.view_direction_length * factor)
        self._replace(s.target - normalize(s.view_vector) * length, s.target, s.up)

    def update(self, event: Optional[PointerEvent]):
        if event is None:
            return
        if not (math.isfinite(event.x) and math.isfinite(event.y)):
            return

        opts = self._options
        pos = self._buttons.sync(event)
        dx, dy = self._buttons.delta(pos)

        if event.is_pressed(PointerButton.PRIMARY):
            self.rotate(-opts.rotation_ratio * dx, -opts.rotation_ratio * dy)

        if event.is_pressed(PointerButton.MIDDLE):
            s = self._state
            vec = s.right_vector * -dx + s.up_vector * dy
            self.move(vec * s.view_direction_length * opts.move_ratio)

        if event.is_pressed(PointerButton.SECONDARY):
            z = 1.0 + dy * opts.zoom_ratio
            z = max(opts.minimum_zoom, min(z, opts.maximum_zoom))
            self.zoom(z)

        self._buttons.commit(pos)

    def _replace(self, position, target, up):
        self._state = CameraState.create(position, target, up)
        self._camera = self._publish()

    def _publish(self) -> CameraPose:
        s = self._state
        pose = CameraPose(position=s.position, look_direction=s.view_vector, up_direction=s.up)
        if self._on_camera_changed is not None:
            self._on_camera_changed(pose)
        return pose
