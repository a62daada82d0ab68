import math
import unittest

import numpy as np

from navvector.algebra.vec2 import Vector2
from navvector.algebra.vec3 import Vector3


class Vector2MathOpsTests(unittest.TestCase):
    def test_add_sub_mul_div(self) -> None:
        a = Vector2(3.0, -4.0)
        b = Vector2(1.5, 2.0)
        self.assertEqual(a + b, Vector2(4.5, -2.0))
        self.assertEqual(a - b, Vector2(1.5, -6.0))
        self.assertEqual(a * 2.0, Vector2(6.0, -8.0))
        self.assertEqual(2.0 * a, Vector2(6.0, -8.0))
        self.assertEqual(a / 2.0, Vector2(1.5, -2.0))
        self.assertEqual(-a, Vector2(-3.0, 4.0))
        self.assertEqual(+a, a)

    def test_dot_and_magnitude(self) -> None:
        a = Vector2(3.0, 4.0)
        b = Vector2(-2.0, 5.0)
        self.assertEqual(a.dot(b), 14.0)
        self.assertEqual(a * b, 14.0)
        self.assertEqual(b * a, a * b)
        self.assertAlmostEqual(a.magnitude(), 5.0)
        self.assertAlmostEqual(abs(a), 5.0)

    def test_unit(self) -> None:
        normalized = Vector2(3.0, 4.0).unit()
        self.assertAlmostEqual(normalized.u, 0.6)
        self.assertAlmostEqual(normalized.v, 0.8)
        self.assertAlmostEqual(normalized.magnitude(), 1.0)

    def test_unit_of_zero_vector_is_itself(self) -> None:
        zero = Vector2(0.0, 0.0)
        self.assertEqual(zero.unit(), zero)

    def test_conjugate_and_quarter_turns(self) -> None:
        a = Vector2(2.0, 5.0)
        self.assertEqual(a.conjugate(), Vector2(2.0, -5.0))
        self.assertEqual(~a, Vector2(2.0, -5.0))
        self.assertEqual(a.rotate_left(), Vector2(-5.0, 2.0))
        self.assertEqual(a.rotate_right(), Vector2(5.0, -2.0))

    def test_heading(self) -> None:
        self.assertAlmostEqual(Vector2(0.0, 2.0).heading(), math.pi / 2)
        self.assertAlmostEqual(Vector2(-1.0, 0.0).heading(), math.pi)

    def test_divide_by_zero(self) -> None:
        with self.assertRaises(ValueError):
            Vector2(1.0, 2.0) / 0.0

    def test_no_mixing_with_vector3(self) -> None:
        with self.assertRaises(TypeError):
            Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)
        with self.assertRaises(TypeError):
            Vector2(1.0, 2.0) * Vector3(1.0, 2.0, 3.0)

    def test_equality_is_exact_and_hashable(self) -> None:
        self.assertNotEqual(Vector2(0.1 + 0.2, 0.0), Vector2(0.3, 0.0))
        self.assertEqual(len({Vector2(1.0, 2.0), Vector2(1.0, 2.0)}), 1)

    def test_numpy_round_trip(self) -> None:
        a = Vector2(1.5, -2.5)
        np.testing.assert_array_equal(a.to_numpy(), np.array([1.5, -2.5]))
        self.assertEqual(Vector2.from_numpy(np.array([1.5, -2.5])), a)
        with self.assertRaises(ValueError):
            Vector2.from_numpy(np.zeros(3))

    def test_str(self) -> None:
        self.assertEqual(str(Vector2(1.0, -0.25)), "(1.000, -0.250)")


if __name__ == "__main__":
    unittest.main()
