from unittest import TestCase
import unittest

import numpy as np

from ndstride.domain._errors import (
    DimensionMismatchError,
    InvalidShapeError,
    OutOfRangeError,
    ShapeMismatchError,
)
from ndstride.infrastructure.ndarray._ndarray import NDArray


def _arange(*shape) -> NDArray:
    return NDArray.from_source(np.arange(np.prod(shape), dtype=np.float64).reshape(shape))


class TestSlicing(TestCase):
    def test_slice_along_matches_numpy(self):
        a = _arange(2, 3, 4)
        ref = np.arange(24.0).reshape(2, 3, 4)
        s = a.slice_along(1, 2)
        self.assertEqual(s.shape, (2, 4))
        self.assertEqual(s.strides, (12, 1))
        self.assertEqual(s.offset, 8)
        self.assertIs(s.data, a.data)
        self.assertTrue(np.array_equal(s.to_numpy(), ref[:, 2, :]))

    def test_slice_along_errors(self):
        a = _arange(2, 3)
        with self.assertRaises(OutOfRangeError):
            a.slice_along(2, 0)
        with self.assertRaises(OutOfRangeError):
            a.slice_along(1, 3)
        with self.assertRaises(OutOfRangeError):
            a.slice_along(0, -1)
        with self.assertRaises(OutOfRangeError):
            NDArray.zeroed((), "float64").slice_along(0, 0)
        with self.assertRaises(TypeError):
            a.slice_along(0, 1.5)
        with self.assertRaises(TypeError):
            a.slice_along(0.0, 1)

    def test_row_major_slice_aliases(self):
        m = _arange(3, 3)
        row = m.row_major_slice(1)
        row.fill(7.0)
        ref = np.arange(9.0).reshape(3, 3)
        ref[1] = 7.0
        self.assertTrue(np.array_equal(m.to_numpy(), ref))
        self.assertEqual(m.get_major_slice(1).to_nested(), [7.0, 7.0, 7.0])
        self.assertEqual(m.get_slice(1, 0).to_nested(), [0.0, 7.0, 6.0])

    def test_major_slices(self):
        m = _arange(3, 2)
        self.assertEqual(
            [s.to_nested() for s in m.major_slices()],
            [[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]],
        )

    def test_rows_and_columns_require_matrix(self):
        v = _arange(4)
        with self.assertRaises(DimensionMismatchError):
            v.get_row(0)
        with self.assertRaises(DimensionMismatchError):
            v.get_column(0)

    def test_fill_on_strided_view_writes_only_its_elements(self):
        m = _arange(3, 3)
        m.get_column(0).fill(-1.0)
        ref = np.arange(9.0).reshape(3, 3)
        ref[:, 0] = -1.0
        self.assertTrue(np.array_equal(m.to_numpy(), ref))

    def test_fill_on_packed_sub_slice(self):
        a = _arange(2, 2, 2)
        a.slice_along(0, 1).fill(0.0)
        self.assertEqual(a.to_nested(), [[[0.0, 1.0], [2.0, 3.0]], [[0.0, 0.0], [0.0, 0.0]]])


class TestRestriding(TestCase):
    def test_transpose_reverses_header(self):
        a = _arange(2, 3, 4)
        t = a.transpose()
        self.assertEqual(t.shape, (4, 3, 2))
        self.assertEqual(t.strides, (1, 4, 12))
        self.assertTrue(np.array_equal(t.to_numpy(), np.arange(24.0).reshape(2, 3, 4).T))
        self.assertEqual(a.T.shape, (4, 3, 2))

    def test_double_transpose_is_identity(self):
        a = _arange(3, 4).slice_along(0, 1).reshape((2, 2))
        tt = a.transpose().transpose()
        self.assertEqual((tt.shape, tt.strides, tt.offset), (a.shape, a.strides, a.offset))
        self.assertTrue(tt.matrix_equals(a))

    def test_main_diagonal(self):
        self.assertEqual(NDArray.identity(3).main_diagonal().to_nested(), [1.0, 1.0, 1.0])
        m = _arange(4, 4)
        sub = m.reshape_restride((2, 2), (4, 1), 5)
        self.assertEqual(sub.to_nested(), [[5.0, 6.0], [9.0, 10.0]])
        d = sub.main_diagonal()
        self.assertEqual(d.strides, (5,))
        self.assertEqual(d.to_nested(), [5.0, 10.0])
        self.assertEqual(m.T.main_diagonal().to_nested(), [0.0, 5.0, 10.0, 15.0])

    def test_main_diagonal_requires_square_matrix(self):
        with self.assertRaises(DimensionMismatchError):
            _arange(2, 3).main_diagonal()
        with self.assertRaises(DimensionMismatchError):
            _arange(3).main_diagonal()

    def test_subvector(self):
        v = _arange(6)
        sv = v.subvector(2, 3)
        self.assertEqual(sv.to_nested(), [2.0, 3.0, 4.0])
        sv.set_nd_((0,), 9.0)
        self.assertEqual(v.get(2), 9.0)
        col = _arange(3, 3).get_column(1).subvector(1, 2)
        self.assertEqual(col.to_nested(), [4.0, 7.0])

    def test_subvector_errors(self):
        v = _arange(6)
        with self.assertRaises(OutOfRangeError):
            v.subvector(4, 3)
        with self.assertRaises(OutOfRangeError):
            v.subvector(-1, 2)
        with self.assertRaises(DimensionMismatchError):
            _arange(2, 2).subvector(0, 1)
        with self.assertRaises(TypeError):
            v.subvector(1.5, 2)
        with self.assertRaises(TypeError):
            v.subvector(0, 2.0)

    def test_reshape_restride_validates_span(self):
        a = _arange(2, 3)
        with self.assertRaises(InvalidShapeError):
            a.reshape_restride((3, 3), (3, 1), 0)

    def test_clone_through_view_chain(self):
        m = _arange(3, 4)
        v = m.T.slice_along(0, 2).subvector(1, 2)
        c = v.clone()
        self.assertTrue(c.is_packed())
        self.assertIsNot(c.data, m.data)
        self.assertEqual(c.shape, v.shape)
        self.assertEqual(c.to_nested(), [6.0, 10.0])
        m.fill(0.0)
        self.assertEqual(c.to_nested(), [6.0, 10.0])


class TestReshapeAndBroadcast(TestCase):
    def test_reshape_packed_is_a_view(self):
        a = _arange(2, 3)
        r = a.reshape((3, 2))
        self.assertIs(r.data, a.data)
        self.assertEqual(r.to_nested(), [[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])

    def test_reshape_strided_copies(self):
        a = _arange(2, 3)
        r = a.T.reshape((6,))
        self.assertIsNot(r.data, a.data)
        self.assertEqual(r.to_nested(), [0.0, 3.0, 1.0, 4.0, 2.0, 5.0])

    def test_reshape_count_mismatch(self):
        with self.assertRaises(InvalidShapeError):
            _arange(2, 3).reshape((4,))

    def test_reshape_to_scalar(self):
        s = _arange(1).reshape(())
        self.assertEqual(s.rank, 0)
        self.assertEqual(s.get_0d(), 0.0)

    def test_broadcast_to(self):
        v = NDArray.from_source([1.0, 2.0, 3.0])
        b = v.broadcast_to((2, 3))
        self.assertEqual(b.strides, (0, 1))
        self.assertTrue(np.array_equal(b.to_numpy(), np.broadcast_to([1.0, 2.0, 3.0], (2, 3))))

        c = NDArray.from_source([[1.0], [2.0]]).broadcast_to((2, 4))
        self.assertEqual(c.strides, (1, 0))
        self.assertEqual(c.to_nested(), [[1.0] * 4, [2.0] * 4])

    def test_broadcast_to_incompatible(self):
        v = NDArray.from_source([1.0, 2.0, 3.0])
        with self.assertRaises(ShapeMismatchError):
            v.broadcast_to((2, 4))
        with self.assertRaises(ShapeMismatchError):
            _arange(2, 3).broadcast_to((3,))


if __name__ == "__main__":
    unittest.main()
