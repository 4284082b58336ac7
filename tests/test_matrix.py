import unittest

import numpy as np

from chembalance.errors import NoAtomsRecognizedError
from chembalance.matrix import build_conservation_matrix
from chembalance.parser import split_equation


class TestConservationMatrix(unittest.TestCase):
    def test_signed_element_rows(self):
        equation = split_equation("Fe + O2 -> Fe2O3")
        matrix = build_conservation_matrix(equation.species)

        self.assertEqual(matrix.elements, ("Fe", "O"))
        self.assertFalse(matrix.charge_row)
        np.testing.assert_array_equal(matrix.values, [[1, 0, -2], [0, 2, -3]])

    def test_rows_sorted_lexicographically(self):
        equation = split_equation("C3H8 + O2 -> CO2 + H2O")
        matrix = build_conservation_matrix(equation.species)
        self.assertEqual(matrix.elements, ("C", "H", "O"))
        self.assertEqual(matrix.shape, (3, 4))

    def test_charge_row_added_for_ions(self):
        equation = split_equation("Zn + Cu2+ -> Zn2+ + Cu")
        matrix = build_conservation_matrix(equation.species)

        self.assertTrue(matrix.charge_row)
        self.assertEqual(matrix.row_labels, ("Cu", "Zn", "charge"))
        np.testing.assert_array_equal(matrix.values[-1], [0, 2, -2, 0])

    def test_charge_row_can_be_suppressed(self):
        equation = split_equation("Zn + Cu2+ -> Zn2+ + Cu")
        matrix = build_conservation_matrix(equation.species, include_charge=False)
        self.assertFalse(matrix.charge_row)
        self.assertEqual(matrix.shape, (2, 4))

    def test_residual(self):
        equation = split_equation("Fe + O2 -> Fe2O3")
        matrix = build_conservation_matrix(equation.species)
        np.testing.assert_array_equal(matrix.residual([4, 3, 2]), [0, 0])
        self.assertTrue(np.any(matrix.residual([1, 1, 1])))

    def test_no_atoms(self):
        equation = split_equation("xyz -> abc")
        with self.assertRaises(NoAtomsRecognizedError):
            build_conservation_matrix(equation.species)


if __name__ == '__main__':
    unittest.main()
