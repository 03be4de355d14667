from __future__ import annotations

import math
import unittest

import numpy as np

from orbital_camera.basis import axis_angle_matrix, normalize, recompute, vec3


def _assert_orthonormal(tc: unittest.TestCase, b):
    for v in (b.view_vector, b.right_vector, b.up_vector):
        tc.assertAlmostEqual(float(np.linalg.norm(v)), 1.0, delta=1e-6)
    tc.assertAlmostEqual(float(np.dot(b.view_vector, b.right_vector)), 0.0, delta=1e-6)
    tc.assertAlmostEqual(float(np.dot(b.view_vector, b.up_vector)), 0.0, delta=1e-6)
    tc.assertAlmostEqual(float(np.dot(b.right_vector, b.up_vector)), 0.0, delta=1e-6)


class TestBasis(unittest.TestCase):
    def test_recompute_looking_down_negative_z(self):
        b = recompute((0.0, 0.0, 10.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        np.testing.assert_allclose(b.view_vector, [0.0, 0.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(b.right_vector, [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(b.up_vector, [0.0, 1.0, 0.0], atol=1e-12)
        self.assertAlmostEqual(b.view_direction_length, 10.0)

    def test_recompute_is_orthonormal_and_right_handed_for_skewed_up(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            p = rng.normal(size=3) * 5.0
            t = rng.normal(size=3) * 5.0
            up = rng.normal(size=3)
            b = recompute(p, t, up)
            _assert_orthonormal(self, b)
            np.testing.assert_allclose(np.cross(b.right_vector, b.up_vector), -b.view_vector, atol=1e-9)
            np.testing.assert_allclose(p + b.view_vector * b.view_direction_length, t, atol=1e-9)

    def test_vec3_is_read_only(self):
        v = vec3([1, 2, 3])
        self.assertEqual(v.dtype, np.float64)
        with self.assertRaises(ValueError):
            v[0] = 5.0

    def test_normalize_zero_vector_gives_nan(self):
        with np.errstate(invalid="ignore", divide="ignore"):
            n = normalize(np.zeros(3))
        self.assertTrue(np.all(np.isnan(n)))

    def test_axis_angle_quarter_turn_about_y(self):
        r = axis_angle_matrix((0.0, 2.0, 0.0), math.pi / 2.0)
        np.testing.assert_allclose(r @ np.array([1.0, 0.0, 0.0]), [0.0, 0.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        self.assertAlmostEqual(float(np.linalg.det(r)), 1.0)

    def test_axis_angle_positive_pitch_tilts_view_towards_up(self):
        view = np.array([0.0, 0.0, -1.0])
        right = np.cross(view, [0.0, 1.0, 0.0])
        rotated = axis_angle_matrix(right, 0.1) @ view
        self.assertGreater(rotated[1], 0.0)


if __name__ == "__main__":
    unittest.main()
