from __future__ import annotations

import unittest

import numpy as np

from orbital_camera.controller import OrbitalCameraController
from orbital_camera.pointer import BUTTON_ORDER, PointerButton, PointerButtonTracker, PointerEvent

PRIMARY = frozenset({PointerButton.PRIMARY})
MIDDLE = frozenset({PointerButton.MIDDLE})
SECONDARY = frozenset({PointerButton.SECONDARY})


class _Recorder(OrbitalCameraController):
    def __init__(self, *args, **kwargs):
        self.calls = []
        super().__init__(*args, **kwargs)

    def rotate(self, yaw, pitch):
        self.calls.append(("rotate", yaw, pitch))
        super().rotate(yaw, pitch)

    def move(self, direction):
        self.calls.append(("move", np.asarray(direction, dtype=np.float64).copy()))
        super().move(direction)

    def zoom(self, factor):
        self.calls.append(("zoom", factor))
        super().zoom(factor)


class TestPointerButtonTracker(unittest.TestCase):
    def test_button_order_is_fixed(self):
        self.assertEqual(BUTTON_ORDER, (PointerButton.PRIMARY, PointerButton.MIDDLE, PointerButton.SECONDARY))

    def test_press_resets_previous_position(self):
        t = PointerButtonTracker()
        t.commit((10.0, 10.0))
        pos = t.sync(PointerEvent(100.0, 100.0, PRIMARY))
        self.assertEqual(pos, (100.0, 100.0))
        self.assertEqual(t.delta(pos), (0.0, 0.0))
        self.assertTrue(t.is_down(PointerButton.PRIMARY))

    def test_held_button_does_not_reset(self):
        t = PointerButtonTracker()
        t.commit(t.sync(PointerEvent(100.0, 100.0, PRIMARY)))
        pos = t.sync(PointerEvent(110.0, 95.0, PRIMARY))
        self.assertEqual(t.delta(pos), (10.0, -5.0))

    def test_release_clears_flag_only(self):
        t = PointerButtonTracker()
        t.commit(t.sync(PointerEvent(5.0, 5.0, MIDDLE)))
        t.sync(PointerEvent(8.0, 9.0))
        self.assertFalse(t.is_down(PointerButton.MIDDLE))
        self.assertEqual(t.previous_position, (5.0, 5.0))

    def test_second_button_press_resyncs_shared_position(self):
        t = PointerButtonTracker()
        t.commit(t.sync(PointerEvent(0.0, 0.0, PRIMARY)))
        pos = t.sync(PointerEvent(30.0, 40.0, PRIMARY | SECONDARY))
        self.assertEqual(t.delta(pos), (0.0, 0.0))


class TestUpdate(unittest.TestCase):
    def test_none_event_is_noop(self):
        c = _Recorder()
        before = c.state
        c.update(None)
        self.assertIs(c.state, before)
        self.assertEqual(c.calls, [])

    def test_non_finite_sample_is_ignored(self):
        c = _Recorder()
        c.update(PointerEvent(0.0, 0.0, PRIMARY))
        before = c.state
        calls = len(c.calls)

        c.update(PointerEvent(float("nan"), 0.0, PRIMARY))
        c.update(PointerEvent(0.0, float("inf"), PRIMARY))
        self.assertIs(c.state, before)
        self.assertEqual(len(c.calls), calls)

        c.update(PointerEvent(5.0, 0.0, PRIMARY))
        _, yaw, pitch = c.calls[-1]
        self.assertAlmostEqual(yaw, -0.05)
        self.assertAlmostEqual(pitch, 0.0)
        self.assertTrue(np.all(np.isfinite(c.position)))

    def test_no_buttons_only_tracks_position(self):
        c = _Recorder()
        c.update(PointerEvent(10.0, 10.0))
        c.update(PointerEvent(50.0, 70.0))
        self.assertEqual(c.calls, [])
        np.testing.assert_allclose(c.position, [0.0, 0.0, 10.0])

    def test_first_sample_after_press_is_baseline(self):
        c = _Recorder()
        c.update(PointerEvent(0.0, 0.0))
        c.update(PointerEvent(100.0, 100.0, PRIMARY))
        self.assertEqual(c.calls, [("rotate", -0.0, -0.0)])

        c.update(PointerEvent(110.0, 100.0, PRIMARY))
        _, yaw, pitch = c.calls[-1]
        self.assertAlmostEqual(yaw, -0.01 * 10.0)
        self.assertAlmostEqual(pitch, 0.0)

    def test_primary_drag_rotates(self):
        c = _Recorder()
        c.update(PointerEvent(0.0, 0.0, PRIMARY))
        c.update(PointerEvent(-20.0, -30.0, PRIMARY))
        _, yaw, pitch = c.calls[-1]
        self.assertAlmostEqual(yaw, 0.2)
        self.assertAlmostEqual(pitch, 0.3)
        np.testing.assert_allclose(c.target, [0.0, 0.0, 0.0])

    def test_middle_drag_pans(self):
        c = _Recorder()
        c.update(PointerEvent(0.0, 0.0, MIDDLE))
        c.update(PointerEvent(4.0, 8.0, MIDDLE))
        _, vec = c.calls[-1]
        # right=(1,0,0), up=(0,1,0), distance 10, move ratio 0.0025
        np.testing.assert_allclose(vec, [-4.0 * 10.0 * 0.0025, 8.0 * 10.0 * 0.0025, 0.0], atol=1e-12)
        np.testing.assert_allclose(c.target, vec, atol=1e-12)
        self.assertAlmostEqual(c.view_direction_length, 10.0)

    def test_secondary_drag_zooms_with_clamp(self):
        c = _Recorder()
        c.update(PointerEvent(0.0, 0.0, SECONDARY))
        c.update(PointerEvent(0.0, 10.0, SECONDARY))
        self.assertAlmostEqual(c.calls[-1][1], 1.05)
        self.assertAlmostEqual(c.view_direction_length, 10.5)

        c.update(PointerEvent(0.0, 1000.0, SECONDARY))
        self.assertAlmostEqual(c.calls[-1][1], 1.2)
        c.update(PointerEvent(0.0, -1000.0, SECONDARY))
        self.assertAlmostEqual(c.calls[-1][1], 0.9)
        np.testing.assert_allclose(c.target, [0.0, 0.0, 0.0])

    def test_all_buttons_apply_rotate_then_pan_then_zoom(self):
        c = _Recorder()
        every = PRIMARY | MIDDLE | SECONDARY
        c.update(PointerEvent(0.0, 0.0, every))
        c.calls.clear()

        c.update(PointerEvent(15.0, 5.0, every))
        self.assertEqual([call[0] for call in c.calls], ["rotate", "move", "zoom"])

    def test_pan_uses_basis_after_rotate(self):
        c = _Recorder()
        both = PRIMARY | MIDDLE
        c.update(PointerEvent(0.0, 0.0, both))
        c.update(PointerEvent(157.07963267948966, 0.0, both))

        # a yaw of -pi/2 turns the right vector from +x to +z
        move = c.calls[-1][1]
        self.assertAlmostEqual(float(move[0]), 0.0, delta=1e-9)
        self.assertLess(float(move[2]), 0.0)


if __name__ == "__main__":
    unittest.main()
