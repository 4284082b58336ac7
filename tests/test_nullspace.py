import unittest
from fractions import Fraction

import numpy as np

from chembalance.elimination import rref
from chembalance.errors import NoNontrivialSolutionError
from chembalance.nullspace import normalize, solve_homogeneous


class TestSolveHomogeneous(unittest.TestCase):
    def test_back_substitution(self):
        reduced = rref(np.array([[1, 0, -2], [0, 2, -3]]))
        self.assertEqual(solve_homogeneous(reduced), [2, Fraction(3, 2), 1])

    def test_first_free_column_wins(self):
        # H2 + O2 -> H2O + H2O2 has a two-dimensional nullspace.
        reduced = rref(np.array([[2, 0, -2, -2], [0, 2, -1, -2]]))
        self.assertEqual(reduced.free_columns(), (2, 3))
        self.assertEqual(solve_homogeneous(reduced), [1, Fraction(1, 2), 1, 0])

    def test_logs_free_columns_and_vector(self):
        reduced = rref(np.array([[1, 0, -2], [0, 2, -3]]))
        with self.assertLogs("chembalance.nullspace", level="DEBUG") as logs:
            solve_homogeneous(reduced)
        output = "\n".join(logs.output)
        self.assertIn("Free columns (2,)", output)
        self.assertIn("3/2", output)

    def test_trivial_solution_only(self):
        reduced = rref(np.array([[0, -1], [1, 0]]))
        with self.assertRaises(NoNontrivialSolutionError):
            solve_homogeneous(reduced)


class TestNormalize(unittest.TestCase):
    def test_clears_denominators(self):
        solution = normalize([Fraction(2), Fraction(3, 2), Fraction(1)])
        self.assertEqual(solution.coefficients, (4, 3, 2))
        self.assertFalse(solution.sign_ambiguous)

    def test_logs_raw_and_normalized_vectors(self):
        with self.assertLogs("chembalance.nullspace", level="DEBUG") as logs:
            normalize([Fraction(2), Fraction(3, 2), Fraction(1)])
        output = "\n".join(logs.output)
        self.assertIn("factor 2: [4, 3, 2]", output)
        self.assertIn("Normalized coefficients [4, 3, 2]", output)

    def test_divides_common_factor(self):
        self.assertEqual(normalize([Fraction(4), Fraction(6)]).coefficients, (2, 3))

    def test_all_negative_is_negated(self):
        solution = normalize([Fraction(-1, 2), Fraction(-1, 3)])
        self.assertEqual(solution.coefficients, (3, 2))
        self.assertTrue(solution.all_positive)

    def test_negative_majority_is_negated(self):
        solution = normalize([Fraction(1), Fraction(-2), Fraction(-3)])
        self.assertEqual(solution.coefficients, (-1, 2, 3))
        self.assertTrue(solution.sign_ambiguous)

    def test_balanced_mixed_signs_kept(self):
        solution = normalize([Fraction(2), Fraction(-1)])
        self.assertEqual(solution.coefficients, (2, -1))
        self.assertTrue(solution.sign_ambiguous)

    def test_zero_vector(self):
        solution = normalize([Fraction(0), Fraction(0)])
        self.assertEqual(solution.coefficients, (0, 0))
        self.assertTrue(solution.sign_ambiguous)


if __name__ == '__main__':
    unittest.main()
