import math
import unittest
from fractions import Fraction

from chembalance.errors import DivisionByZeroError
from chembalance.fraction import (
    ONE,
    ZERO,
    denominator_lcm,
    divide,
    integer_gcd,
    is_zero,
    make_fraction,
)


class TestFraction(unittest.TestCase):
    def test_reduced_with_positive_denominator(self):
        for n, d in [(6, -4), (-6, 4), (10, 5), (0, 7), (-3, -9), (17, 51)]:
            value = make_fraction(n, d)
            self.assertGreater(value.denominator, 0)
            self.assertEqual(math.gcd(abs(value.numerator), value.denominator), 1)
        self.assertEqual(make_fraction(6, -4), Fraction(-3, 2))

    def test_zero_is_zero_over_one(self):
        value = make_fraction(0, -5)
        self.assertEqual((value.numerator, value.denominator), (0, 1))
        self.assertTrue(is_zero(value))

    def test_zero_denominator(self):
        with self.assertRaises(DivisionByZeroError):
            make_fraction(1, 0)
        # Also catchable as the builtin error.
        with self.assertRaises(ZeroDivisionError):
            make_fraction(3, 0)

    def test_rejects_floats(self):
        with self.assertRaises(TypeError):
            make_fraction(1.5)
        with self.assertRaises(TypeError):
            make_fraction(1, 2.0)

    def test_arithmetic_stays_reduced(self):
        a = make_fraction(1, 6)
        b = make_fraction(1, 3)
        self.assertEqual(a + b, Fraction(1, 2))
        self.assertEqual(a - b, Fraction(-1, 6))
        self.assertEqual(a * b, Fraction(1, 18))
        self.assertEqual(divide(a, b), Fraction(1, 2))
        self.assertEqual(-a, Fraction(-1, 6))

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            divide(ONE, ZERO)

    def test_lcm_and_gcd_helpers(self):
        self.assertEqual(denominator_lcm([Fraction(1, 2), Fraction(2, 3), ONE]), 6)
        self.assertEqual(denominator_lcm([]), 1)
        self.assertEqual(integer_gcd([4, -6, 8]), 2)
        self.assertEqual(integer_gcd([0, 0]), 1)


if __name__ == '__main__':
    unittest.main()
