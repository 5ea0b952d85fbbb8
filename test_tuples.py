import unittest
import numpy as np
from tuples import Tuple, point, vector, origin
from colors import Color, black


class TestTuple(unittest.TestCase):

    def test_point_and_vector(self):
        a = Tuple(4.3, -4.2, 3.1, 1)
        self.assertAlmostEqual(a.x, 4.3)
        self.assertAlmostEqual(a.y, -4.2)
        self.assertAlmostEqual(a.z, 3.1)
        self.assertTrue(a.is_point())
        self.assertFalse(a.is_vector())
        b = Tuple(4.3, -4.2, 3.1, 0)
        self.assertTrue(b.is_vector())
        self.assertFalse(b.is_point())
        self.assertEqual(point(4, -4, 3), Tuple(4, -4, 3, 1))
        self.assertEqual(vector(4, -4, 3), Tuple(4, -4, 3, 0))
        self.assertEqual(origin(), point(0, 0, 0))

    def test_equality_is_approximate_but_w_is_exact(self):
        self.assertEqual(point(1, 2, 3), point(1.000001, 2, 3))
        self.assertNotEqual(point(1, 2, 3), point(1.001, 2, 3))
        self.assertNotEqual(point(1, 2, 3), vector(1, 2, 3))

    def test_arithmetic_keeps_w_meaning(self):
        self.assertEqual(point(3, -2, 5) + vector(-2, 3, 1), point(1, 1, 6))
        self.assertEqual(point(3, 2, 1) - point(5, 6, 7), vector(-2, -4, -6))
        self.assertEqual(point(3, 2, 1) - vector(5, 6, 7), point(-2, -4, -6))
        self.assertEqual(vector(3, 2, 1) - vector(5, 6, 7), vector(-2, -4, -6))
        self.assertEqual(vector(1, 0, 0) + vector(0, 1, 0), vector(1, 1, 0))
        # unchecked: two points add up to w=2
        self.assertEqual((point(1, 0, 0) + point(0, 1, 0)).w, 2)

    def test_negate_scale_divide(self):
        self.assertEqual(-Tuple(1, -2, 3, -4), Tuple(-1, 2, -3, 4))
        self.assertEqual(Tuple(1, -2, 3, -4) * 3.5, Tuple(3.5, -7, 10.5, -14))
        self.assertEqual(0.5 * Tuple(1, -2, 3, -4), Tuple(0.5, -1, 1.5, -2))
        self.assertEqual(Tuple(1, -2, 3, -4) / 2, Tuple(0.5, -1, 1.5, -2))

    def test_magnitude_and_normalize(self):
        self.assertAlmostEqual(vector(1, 0, 0).magnitude(), 1)
        self.assertAlmostEqual(vector(1, 2, 3).magnitude(), np.sqrt(14))
        self.assertAlmostEqual(vector(-1, -2, -3).magnitude(), np.sqrt(14))
        self.assertEqual(vector(4, 0, 0).normalize(), vector(1, 0, 0))
        n = vector(1, 2, 3).normalize()
        self.assertEqual(n, vector(1 / np.sqrt(14), 2 / np.sqrt(14), 3 / np.sqrt(14)))
        self.assertAlmostEqual(n.magnitude(), 1)
        with self.assertRaises(ValueError):
            vector(0, 0, 0).normalize()
        # w takes no part in the length
        self.assertAlmostEqual(point(3, 4, 0).magnitude(), 5)
        self.assertEqual(point(3, 4, 0).normalize(), point(0.6, 0.8, 0))

    def test_dot_and_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        self.assertAlmostEqual(a.dot(b), 20)
        self.assertEqual(a.cross(b), vector(-1, 2, -1))
        self.assertEqual(b.cross(a), vector(1, -2, 1))

    def test_reflect(self):
        self.assertEqual(vector(1, -1, 0).reflect(vector(0, 1, 0)), vector(1, 1, 0))
        s = np.sqrt(2) / 2
        self.assertEqual(vector(0, -1, 0).reflect(vector(s, s, 0)), vector(1, 0, 0))


class TestColor(unittest.TestCase):

    def test_channels(self):
        c = Color(-0.5, 0.4, 1.7)
        self.assertAlmostEqual(c.red, -0.5)
        self.assertAlmostEqual(c.green, 0.4)
        self.assertAlmostEqual(c.blue, 1.7)

    def test_arithmetic(self):
        self.assertEqual(Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25), Color(1.6, 0.7, 1.0))
        self.assertEqual(Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25), Color(0.2, 0.5, 0.5))
        self.assertEqual(Color(0.2, 0.3, 0.4) * 2, Color(0.4, 0.6, 0.8))
        self.assertEqual(2 * Color(0.2, 0.3, 0.4), Color(0.4, 0.6, 0.8))
        self.assertEqual(Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1), Color(0.9, 0.2, 0.04))

    def test_to_rgb8_clamps(self):
        self.assertEqual(Color(1.5, 0.5, -0.5).to_rgb8(), (255, 128, 0))
        self.assertEqual(black().to_rgb8(), (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
