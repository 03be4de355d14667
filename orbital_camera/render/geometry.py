from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

Point = Tuple[float, float, float]
Triangle = Tuple[Point, Point, Point]

CUBE_POINTS: Tuple[Point, ...] = (
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (1.0, -1.0, 1.0),
    (-1.0, -1.0, 1.0),
    (-1.0, 1.0, -1.0),
    (1.0, 1.0, -1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
)

# front, right, back, left, top, bottom; two triangles each
CUBE_FACES: Tuple[Tuple[int, int, int], ...] = (
    (3, 2, 6), (3, 6, 7),
    (2, 1, 5), (2, 5, 6),
    (1, 0, 4), (1, 4, 5),
    (0, 3, 7), (0, 7, 4),
    (7, 6, 5), (7, 5, 4),
    (2, 3, 0), (2, 0, 1),
)

PYRAMID_POINTS: Tuple[Point, ...] = (
    (2.0, -1.0, 0.0),
    (-1.0, -1.0, -1.732),
    (-1.0, -1.0, 1.732),
    (0.0, 1.732, 0.0),
)

PYRAMID_FACES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 1, 3),
    (0, 2, 3),
    (1, 2, 3),
)


@dataclass(frozen=True)
class TriangleMesh:
    vertices: np.ndarray
    normals: np.ndarray

    @property
    def triangle_count(self) -> int:
        return int(self.vertices.shape[0] // 3)


@dataclass(frozen=True)
class GroundTiles:
    quads: np.ndarray
    dark: np.ndarray


def compute_normal(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]) -> np.ndarray:
    a = np.asarray(p0, dtype=np.float64)
    b = np.asarray(p1, dtype=np.float64)
    c = np.asarray(p2, dtype=np.float64)
    return np.cross(b - a, c - b)


def triangle_mesh(triangles: Sequence[Triangle]) -> TriangleMesh:
    verts: List[Point] = []
    norms: List[np.ndarray] = []
    for p0, p1, p2 in triangles:
        n = compute_normal(p0, p1, p2)
        ln = float(np.linalg.norm(n))
        if ln > 0.0:
            n = n / ln
        verts.extend([p0, p1, p2])
        norms.extend([n, n, n])
    return TriangleMesh(
        vertices=np.asarray(verts, dtype=np.float32).reshape(-1, 3),
        normals=np.asarray(norms, dtype=np.float32).reshape(-1, 3),
    )


def _from_faces(points: Sequence[Point], faces: Sequence[Tuple[int, int, int]]) -> List[Triangle]:
    return [(points[a], points[b], points[c]) for a, b, c in faces]


def make_cube_triangles() -> List[Triangle]:
    return _from_faces(CUBE_POINTS, CUBE_FACES)


def make_pyramid_triangles() -> List[Triangle]:
    return _from_faces(PYRAMID_POINTS, PYRAMID_FACES)


def make_ground_tiles(half_extent: float = 100.0, y: float = -1.1, tile: float = 5.0) -> GroundTiles:
    """Checkerboard quads on the plane ``y`` covering [-half_extent, half_extent] in x and z."""
    he = float(half_extent)
    st = float(tile)
    n = int(max(1, round((2.0 * he) / st)))

    quads = np.zeros((n * n, 4, 3), dtype=np.float32)
    dark = np.zeros((n * n,), dtype=bool)
    k = 0
    for i in range(n):
        x0 = -he + i * st
        x1 = x0 + st
        for j in range(n):
            z0 = -he + j * st
            z1 = z0 + st
            quads[k] = ((x0, y, z0), (x0, y, z1), (x1, y, z1), (x1, y, z0))
            dark[k] = (i + j) % 2 == 0
            k += 1
    return GroundTiles(quads=quads, dark=dark)
