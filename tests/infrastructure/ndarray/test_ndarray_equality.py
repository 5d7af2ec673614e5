from unittest import TestCase
import unittest

import numpy as np

from ndstride.infrastructure.ndarray._ndarray import NDArray


class TestMatrixEquals(TestCase):
    def setUp(self):
        self.a = NDArray.from_source([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], kind="float64")

    def test_identity_and_clone(self):
        self.assertTrue(self.a.matrix_equals(self.a))
        self.assertTrue(self.a.matrix_equals(self.a.clone()))

    def test_different_layouts_same_values(self):
        t = NDArray.from_source(np.array([[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])).transpose()
        self.assertFalse(t.is_packed())
        self.assertTrue(self.a.matrix_equals(t))
        self.assertTrue(t.matrix_equals(self.a))

    def test_shape_mismatch_is_false_not_error(self):
        self.assertFalse(self.a.matrix_equals(self.a.transpose()))
        self.assertFalse(self.a.matrix_equals(NDArray.zeroed((6,), "float64")))
        self.assertFalse(self.a.matrix_equals([1.0, 2.0]))

    def test_single_difference(self):
        b = self.a.set_nd((1, 2), 6.5)
        self.assertFalse(self.a.matrix_equals(b))

    def test_cross_kind_value_equality(self):
        i = NDArray.from_source([[1, 2, 3], [4, 5, 6]], kind="int64")
        self.assertTrue(self.a.matrix_equals(i))
        self.assertTrue(i.matrix_equals(self.a))

    def test_foreign_values_are_coerced(self):
        self.assertTrue(self.a.matrix_equals([[1, 2, 3], [4, 5, 6]]))
        self.assertTrue(self.a.matrix_equals(np.array([[1, 2, 3], [4, 5, 6]])))
        self.assertFalse(self.a.matrix_equals([[1, 2, 3], [4, 5, 7]]))

    def test_foreign_values_keep_their_precision(self):
        i = NDArray.from_source([[1, 2]], kind="int64")
        self.assertFalse(i.matrix_equals([[1.5, 2.0]]))
        self.assertFalse(i.matrix_equals(np.array([[1.9, 2.0]])))
        self.assertTrue(i.matrix_equals([[1.0, 2.0]]))
        self.assertTrue(i.matrix_equals(np.array([[1.0, 2.0]])))

    def test_unreadable_values_are_not_equal(self):
        self.assertFalse(self.a.matrix_equals([[1.0, 2.0, 3.0], [4.0, 5.0]]))
        self.assertFalse(self.a.matrix_equals("text"))
        self.assertFalse(self.a.matrix_equals(object()))

    def test_rank0_and_empty(self):
        s = NDArray.from_source(3.0, kind="float64")
        self.assertTrue(s.matrix_equals(3))
        self.assertTrue(NDArray.zeroed((0, 2)).matrix_equals(NDArray.zeroed((0, 2))))

    def test_eq_operator_keeps_identity_semantics(self):
        self.assertFalse(self.a == self.a.clone())
        self.assertTrue(self.a == self.a)


if __name__ == "__main__":
    unittest.main()
