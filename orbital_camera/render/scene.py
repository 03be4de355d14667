from __future__ import annotations

import logging
import time

import pyglet
from pyglet.gl import GL_COLOR_BUFFER_BIT, GL_DEPTH_BUFFER_BIT, glClear

from orbital_camera.config import SHAPES, DemoConfig
from orbital_camera.controller import CameraPose
from orbital_camera.render.camera import projection_matrix, view_matrix
from orbital_camera.render.geometry import (
    make_cube_triangles,
    make_ground_tiles,
    make_pyramid_triangles,
    triangle_mesh,
)
from orbital_camera.render.glutil import init_gl, set_lights, set_matrices, set_viewport
from orbital_camera.render.primitives import draw_tiled_ground, draw_triangle_mesh

logger = logging.getLogger(__name__)

LIGHT_DIRECTIONS = (
    (-2.0, -3.0, -1.0),
    (4.0, 3.0, 4.0),
)


class SceneRenderer:
    def __init__(self, cfg: DemoConfig):
        self.cfg = cfg
        init_gl()

        self._meshes = {
            "cube": triangle_mesh(make_cube_triangles()),
            "pyramid": triangle_mesh(make_pyramid_triangles()),
        }
        self._ground = make_ground_tiles()
        self.shape = cfg.initial_shape

        self._w = int(cfg.window_w)
        self._h = int(cfg.window_h)
        self._fov = float(cfg.fov_deg)

        self._col_shape = (0.0, 119.0 / 255.0, 170.0 / 255.0, 1.0)
        self._col_tile_light = (0.827, 0.827, 0.827, 1.0)
        self._col_tile_dark = (0.663, 0.663, 0.663, 1.0)

        self._last_cap_t = 0.0
        self._last_cap_s = ""

    def set_shape(self, name: str):
        if name not in SHAPES:
            raise ValueError(f"unknown shape {name!r}, expected one of {SHAPES}")
        if name != self.shape:
            logger.info("showing %s", name)
        self.shape = name

    def resize(self, w: int, h: int):
        self._w = int(max(1, w))
        self._h = int(max(1, h))
        set_viewport(self._w, self._h)

    def draw(self, window: pyglet.window.Window, pose: CameraPose):
        w = int(max(1, window.width))
        h = int(max(1, window.height))
        if w != self._w or h != self._h:
            self.resize(w, h)

        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        aspect = float(w) / float(h)
        set_matrices(projection_matrix(aspect, fov_deg=self._fov), view_matrix(pose))
        set_lights(LIGHT_DIRECTIONS)

        draw_triangle_mesh(self._meshes[self.shape], self._col_shape)
        draw_tiled_ground(self._ground, self._col_tile_light, self._col_tile_dark)

        self._update_caption(window, pose)

    def _update_caption(self, window: pyglet.window.Window, pose: CameraPose):
        now = time.monotonic()
        if now - self._last_cap_t < 0.30:
            return

        px, py, pz = (float(c) for c in pose.position)
        cap = f"Orbital Camera - {self.shape} - eye=({px:.2f}, {py:.2f}, {pz:.2f})"

        if cap != self._last_cap_s:
            window.set_caption(cap)
            self._last_cap_s = cap
        self._last_cap_t = now
