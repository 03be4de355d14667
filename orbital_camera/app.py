from __future__ import annotations

import logging

import pyglet
from pyglet.window import key, mouse

from orbital_camera.config import DemoConfig
from orbital_camera.controller import CameraPose, OrbitalCameraController
from orbital_camera.pointer import PointerButton, PointerEvent
from orbital_camera.render.scene import SceneRenderer

logger = logging.getLogger(__name__)

_BUTTON_MAP = (
    (mouse.LEFT, PointerButton.PRIMARY),
    (mouse.MIDDLE, PointerButton.MIDDLE),
    (mouse.RIGHT, PointerButton.SECONDARY),
)


def pointer_event(x: int, y: int, buttons: int, height: int) -> PointerEvent:
    """Convert a pyglet mouse sample (origin bottom-left) to a top-left client-space PointerEvent."""
    pressed = frozenset(pb for mb, pb in _BUTTON_MAP if buttons & mb)
    return PointerEvent(x=float(x), y=float(height - y), pressed=pressed)


class OrbitalCameraApp:
    def __init__(self, cfg: DemoConfig):
        self.cfg = cfg

        self.window = pyglet.window.Window(
            width=cfg.window_w,
            height=cfg.window_h,
            caption="Orbital Camera",
            resizable=True,
        )
        self.window.push_handlers(self)

        self._start = (cfg.camera_x, cfg.camera_y, cfg.camera_z)
        self.controller = OrbitalCameraController(
            position=self._start,
            options=cfg.options,
            on_camera_changed=self._on_camera_changed,
        )
        self.renderer = SceneRenderer(cfg)
        logger.info("camera at %s looking at %s", self._start, tuple(self.controller.target))

    def run(self):
        pyglet.app.run()

    def _on_camera_changed(self, pose: CameraPose):
        self.window.invalid = True

    def on_draw(self):
        self.window.clear()
        self.renderer.draw(self.window, self.controller.camera)

    def on_resize(self, width: int, height: int):
        self.renderer.resize(width, height)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.controller.update(pointer_event(x, y, 0, self.window.height))

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        self.controller.update(pointer_event(x, y, buttons, self.window.height))

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.C:
            self.renderer.set_shape("cube")
        elif symbol == key.P:
            self.renderer.set_shape("pyramid")
        elif symbol == key.R:
            self.controller.target = (0.0, 0.0, 0.0)
            self.controller.position = self._start
            logger.info("camera reset")
        elif symbol == key.ESCAPE:
            self.window.close()
            return
        self.window.invalid = True
