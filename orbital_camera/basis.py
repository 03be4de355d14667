from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

WORLD_UP = (0.0, 1.0, 0.0)


def vec3(v: Sequence[float]) -> np.ndarray:
    a = np.array(v, dtype=np.float64).reshape(3)
    a.flags.writeable = False
    return a


def normalize(v: np.ndarray) -> np.ndarray:
    # No zero guard: a zero-length input gives NaN components.
    return vec3(np.asarray(v, dtype=np.float64) / np.linalg.norm(v))


@dataclass(frozen=True, eq=False)
class CameraBasis:
    view_vector: np.ndarray
    right_vector: np.ndarray
    up_vector: np.ndarray
    view_direction_length: float


def recompute(position: Sequence[float], target: Sequence[float], up: Sequence[float]) -> CameraBasis:
    """Derive the orthonormal view basis for a camera at ``position`` looking at ``target``.

    ``up`` must not be parallel to the view direction, otherwise the right
    vector has zero length and the basis is NaN.
    """
    raw = np.asarray(target, dtype=np.float64) - np.asarray(position, dtype=np.float64)
    length = float(np.linalg.norm(raw))
    view = normalize(raw)
    right = normalize(np.cross(view, np.asarray(up, dtype=np.float64)))
    upv = normalize(np.cross(right, view))
    return CameraBasis(view_vector=view, right_vector=right, up_vector=upv, view_direction_length=length)


def axis_angle_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    a = np.asarray(axis, dtype=np.float64)
    x, y, z = a / np.linalg.norm(a)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ],
        dtype=np.float64,
    )
