import unittest
import numpy as np
from matrix import Matrix
from transformations import translation, scaling, rotation_x, rotation_y, rotation_z, shearing, chain
from tuples import point, vector

s2 = np.sqrt(2) / 2


class TestTransformations(unittest.TestCase):

    def test_translation(self):
        t = translation(5, -3, 2)
        self.assertEqual(t * point(-3, 4, 5), point(2, 1, 7))
        self.assertEqual(t.inverse() * point(-3, 4, 5), point(-8, 7, 3))
        # vectors have no position
        self.assertEqual(t * vector(-3, 4, 5), vector(-3, 4, 5))

    def test_translation_round_trip(self):
        t = translation(-2.5, 7, 0.25)
        p = point(1.5, -3, 9)
        self.assertEqual(t.inverse() * (t * p), p)

    def test_scaling(self):
        s = scaling(2, 3, 4)
        self.assertEqual(s * point(-4, 6, 8), point(-8, 18, 32))
        self.assertEqual(s * vector(-4, 6, 8), vector(-8, 18, 32))
        self.assertEqual(s.inverse() * vector(-4, 6, 8), vector(-2, 2, 2))
        # reflection is scaling by a negative value
        self.assertEqual(scaling(-1, 1, 1) * point(2, 3, 4), point(-2, 3, 4))

    def test_scaling_round_trip(self):
        s = scaling(0.5, -3, 7)
        v = vector(1, 2, 3)
        self.assertEqual(s.inverse() * (s * v), v)

    def test_rotation_x(self):
        p = point(0, 1, 0)
        self.assertEqual(rotation_x(np.pi / 4) * p, point(0, s2, s2))
        self.assertEqual(rotation_x(np.pi / 2) * p, point(0, 0, 1))
        self.assertEqual(rotation_x(np.pi / 4).inverse() * p, point(0, s2, -s2))

    def test_rotation_x_twice(self):
        quarter = rotation_x(np.pi / 2)
        self.assertEqual(quarter * quarter, rotation_x(np.pi))
        p = point(1, 2, 3)
        self.assertEqual(quarter * (quarter * p), rotation_x(np.pi) * p)

    def test_rotation_y(self):
        p = point(0, 0, 1)
        self.assertEqual(rotation_y(np.pi / 4) * p, point(s2, 0, s2))
        self.assertEqual(rotation_y(np.pi / 2) * p, point(1, 0, 0))

    def test_rotation_z(self):
        p = point(0, 1, 0)
        self.assertEqual(rotation_z(np.pi / 4) * p, point(-s2, s2, 0))
        self.assertEqual(rotation_z(np.pi / 2) * p, point(-1, 0, 0))

    def test_shearing(self):
        p = point(2, 3, 4)
        self.assertEqual(shearing(1, 0, 0, 0, 0, 0) * p, point(5, 3, 4))
        self.assertEqual(shearing(0, 1, 0, 0, 0, 0) * p, point(6, 3, 4))
        self.assertEqual(shearing(0, 0, 1, 0, 0, 0) * p, point(2, 5, 4))
        self.assertEqual(shearing(0, 0, 0, 1, 0, 0) * p, point(2, 7, 4))
        self.assertEqual(shearing(0, 0, 0, 0, 1, 0) * p, point(2, 3, 6))
        self.assertEqual(shearing(0, 0, 0, 0, 0, 1) * p, point(2, 3, 7))

    def test_sequence_applied_one_at_a_time(self):
        p = point(1, 0, 1)
        a = rotation_x(np.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        p2 = a * p
        self.assertEqual(p2, point(1, -1, 0))
        p3 = b * p2
        self.assertEqual(p3, point(5, -5, 0))
        self.assertEqual(c * p3, point(15, 0, 7))

    def test_composition_is_right_to_left(self):
        p = point(1, 0, 1)
        a = rotation_x(np.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        self.assertEqual(c * b * a * p, point(15, 0, 7))
        self.assertEqual(chain(a, b, c), c * b * a)
        self.assertEqual(chain(a, b, c) * p, point(15, 0, 7))
        self.assertEqual(chain(), Matrix.identity(4))


if __name__ == '__main__':
    unittest.main()
