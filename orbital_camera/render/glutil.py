from __future__ import annotations
import ctypes
from typing import Sequence, Tuple

import numpy as np
from pyglet.gl import (
    glMatrixMode, glLoadIdentity, glLoadMatrixf,
    glEnable, glLightfv, glLightModeli,
    glClearColor, glDepthFunc, glViewport,
    glColorMaterial, glShadeModel,
    GL_PROJECTION, GL_MODELVIEW,
    GL_DEPTH_TEST, GL_LEQUAL,
    GL_LIGHTING, GL_LIGHT0, GL_POSITION, GL_DIFFUSE, GL_AMBIENT,
    GL_LIGHT_MODEL_TWO_SIDE, GL_TRUE,
    GL_COLOR_MATERIAL, GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE,
    GL_NORMALIZE, GL_FLAT,
)

Direction = Tuple[float, float, float]


def init_gl():
    glClearColor(1.0, 1.0, 1.0, 1.0)
    glEnable(GL_DEPTH_TEST)
    glDepthFunc(GL_LEQUAL)
    glEnable(GL_NORMALIZE)
    glShadeModel(GL_FLAT)
    glEnable(GL_COLOR_MATERIAL)
    glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)
    glLightModeli(GL_LIGHT_MODEL_TWO_SIDE, GL_TRUE)


def _vec4(*v: float):
    return (ctypes.c_float * 4)(*map(float, v))


def set_lights(directions: Sequence[Direction]):
    """One white directional light per entry, given as the direction the light travels.

    Must run after the view matrix is loaded so the lights stay fixed in world space.
    """
    glEnable(GL_LIGHTING)
    for i, (dx, dy, dz) in enumerate(directions):
        light = GL_LIGHT0 + i
        # w=0 makes it directional; GL wants the vector pointing towards the light.
        glLightfv(light, GL_POSITION, _vec4(-dx, -dy, -dz, 0.0))
        glLightfv(light, GL_DIFFUSE, _vec4(1.0, 1.0, 1.0, 1.0))
        glLightfv(light, GL_AMBIENT, _vec4(0.0, 0.0, 0.0, 1.0))
        glEnable(light)


def _as_gl_mat4(m: np.ndarray):
    a = np.asarray(m, dtype=np.float32)
    if a.shape != (4, 4):
        a = a.reshape((4, 4))
    a = a.T.copy()
    return (ctypes.c_float * 16)(*a.ravel(order="C"))


def set_matrices(proj: np.ndarray, view: np.ndarray):
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    glLoadMatrixf(_as_gl_mat4(proj))

    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()
    glLoadMatrixf(_as_gl_mat4(view))


def set_viewport(w: int, h: int):
    glViewport(0, 0, int(max(1, w)), int(max(1, h)))
