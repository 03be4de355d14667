from __future__ import annotations
import math
import numpy as np

from orbital_camera.controller import CameraPose


def view_matrix(pose: CameraPose) -> np.ndarray:
    eye = np.asarray(pose.position, dtype=np.float32)
    up = np.asarray(pose.up_direction, dtype=np.float32)

    f = np.asarray(pose.look_direction, dtype=np.float32)
    fn = np.linalg.norm(f)
    if fn < 1e-6:
        f = np.array([0.0, 0.0, -1.0], dtype=np.float32)
        fn = 1.0
    f = f / fn

    s = np.cross(f, up)
    sn = np.linalg.norm(s)
    if sn < 1e-6:
        s = np.array([1.0, 0.0, 0.0], dtype=np.float32)
        sn = 1.0
    s = s / sn

    u = np.cross(s, f)

    m = np.eye(4, dtype=np.float32)
    m[0, 0:3] = s
    m[1, 0:3] = u
    m[2, 0:3] = -f
    m[0, 3] = -float(np.dot(s, eye))
    m[1, 3] = -float(np.dot(u, eye))
    m[2, 3] = float(np.dot(f, eye))
    return m


def projection_matrix(aspect: float, fov_deg: float = 45.0, near: float = 0.125, far: float = 1000.0) -> np.ndarray:
    f = 1.0 / math.tan(math.radians(fov_deg) * 0.5)
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = f / float(aspect)
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = (2.0 * far * near) / (near - far)
    m[3, 2] = -1.0
    return m
