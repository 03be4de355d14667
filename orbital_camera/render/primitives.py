from __future__ import annotations

import ctypes
from typing import Dict, Tuple

import numpy as np
from pyglet.gl import (
    GL_COMPILE,
    GL_FLOAT,
    GL_NORMAL_ARRAY,
    GL_QUADS,
    GL_TRIANGLES,
    GL_VERTEX_ARRAY,
    glBegin,
    glCallList,
    glColor4f,
    glDisableClientState,
    glDrawArrays,
    glEnableClientState,
    glEnd,
    glEndList,
    glGenLists,
    glNewList,
    glNormal3f,
    glNormalPointer,
    glVertex3f,
    glVertexPointer,
)

from orbital_camera.render.geometry import GroundTiles, TriangleMesh

RGBA = Tuple[float, float, float, float]

_LAST_COLOR = (None, None, None, None)
_MESH_CACHE: Dict[int, int] = {}
_GROUND_CACHE: Dict[Tuple[int, RGBA, RGBA], int] = {}


def _set_color(rgba: RGBA):
    global _LAST_COLOR
    r, g, b, a = rgba
    if _LAST_COLOR != (r, g, b, a):
        glColor4f(float(r), float(g), float(b), float(a))
        _LAST_COLOR = (r, g, b, a)


def _emit_mesh(mesh: TriangleMesh):
    v = np.ascontiguousarray(mesh.vertices, dtype=np.float32)
    n = np.ascontiguousarray(mesh.normals, dtype=np.float32)
    glEnableClientState(GL_VERTEX_ARRAY)
    glEnableClientState(GL_NORMAL_ARRAY)
    glVertexPointer(3, GL_FLOAT, 0, v.ctypes.data_as(ctypes.POINTER(ctypes.c_float)))
    glNormalPointer(GL_FLOAT, 0, n.ctypes.data_as(ctypes.POINTER(ctypes.c_float)))
    glDrawArrays(GL_TRIANGLES, 0, int(v.shape[0]))
    glDisableClientState(GL_NORMAL_ARRAY)
    glDisableClientState(GL_VERTEX_ARRAY)


def draw_triangle_mesh(mesh: TriangleMesh, rgba: RGBA):
    _set_color(tuple(map(float, rgba)))

    key = id(mesh)
    dl = _MESH_CACHE.get(key, 0)
    if not dl:
        dl = int(glGenLists(1))
        if dl:
            glNewList(dl, GL_COMPILE)
            _emit_mesh(mesh)
            glEndList()
            _MESH_CACHE[key] = dl

    if dl:
        glCallList(dl)
        return

    _emit_mesh(mesh)


def _emit_ground(tiles: GroundTiles, light: RGBA, dark: RGBA):
    glBegin(GL_QUADS)
    glNormal3f(0.0, 1.0, 0.0)
    for quad, is_dark in zip(tiles.quads, tiles.dark):
        glColor4f(*(dark if is_dark else light))
        for x, y, z in quad:
            glVertex3f(float(x), float(y), float(z))
    glEnd()


def draw_tiled_ground(tiles: GroundTiles, light: RGBA, dark: RGBA):
    global _LAST_COLOR
    key = (id(tiles), tuple(map(float, light)), tuple(map(float, dark)))
    dl = _GROUND_CACHE.get(key, 0)

    if not dl:
        dl = int(glGenLists(1))
        if dl:
            glNewList(dl, GL_COMPILE)
            _emit_ground(tiles, light, dark)
            glEndList()
            _GROUND_CACHE[key] = dl

    # the ground changes the current color behind _set_color's back
    _LAST_COLOR = (None, None, None, None)

    if dl:
        glCallList(dl)
        return

    _emit_ground(tiles, light, dark)
