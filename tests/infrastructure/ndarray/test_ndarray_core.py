from unittest import TestCase
import unittest

import numpy as np

from ndstride import (
    DimensionMismatchError,
    ElementKind,
    InvalidShapeError,
    NDArray,
    OutOfRangeError,
)


class TestNDArrayHeader(TestCase):
    def test_raw_constructor_shares_buffer(self):
        buf = np.arange(6, dtype=np.float64)
        a = NDArray(buf, (2, 3), (3, 1))
        self.assertIs(a.data, buf)
        self.assertEqual(a.shape, (2, 3))
        self.assertEqual(a.strides, (3, 1))
        self.assertEqual(a.offset, 0)
        self.assertEqual(a.rank, 2)
        self.assertEqual(a.ndim, 2)
        self.assertIs(a.kind, ElementKind.FLOAT64)
        self.assertEqual(a.dtype, np.dtype(np.float64))
        buf[4] = 40.0
        self.assertEqual(a.get(1, 1), 40.0)

    def test_kind_is_inferred_from_buffer(self):
        a = NDArray(np.zeros(4, dtype=np.int64), (4,), (1,))
        self.assertIs(a.kind, ElementKind.INT64)

    def test_kind_must_match_buffer_dtype(self):
        with self.assertRaises(TypeError):
            NDArray(np.zeros(4), (4,), (1,), 0, ElementKind.INT64)

    def test_buffer_must_be_flat_ndarray(self):
        with self.assertRaises(TypeError):
            NDArray(np.zeros((2, 3)), (2, 3), (3, 1))
        with self.assertRaises(TypeError):
            NDArray([0.0, 1.0], (2,), (1,))  # type: ignore[arg-type]

    def test_strides_length_must_match_rank(self):
        with self.assertRaises(InvalidShapeError):
            NDArray(np.zeros(6), (2, 3), (3,))

    def test_header_outside_buffer_raises(self):
        with self.assertRaises(InvalidShapeError):
            NDArray(np.zeros(6), (2, 3), (3, 1), 1)
        with self.assertRaises(InvalidShapeError):
            NDArray(np.zeros(6), (2, 3), (-3, 1), 0)

    def test_empty_header_skips_span_check(self):
        a = NDArray(np.zeros(0), (0, 5), (5, 1))
        self.assertEqual(a.element_count(), 0)

    def test_is_packed(self):
        a = NDArray.zeroed((2, 3), "float64")
        self.assertTrue(a.is_packed())
        self.assertFalse(a.transpose().is_packed())
        self.assertTrue(NDArray.zeroed((), "float64").is_packed())


class TestConstructors(TestCase):
    def test_empty_has_row_major_strides(self):
        a = NDArray.empty((4, 3, 2), "float64")
        self.assertEqual(a.strides, (6, 2, 1))
        self.assertEqual(len(a.data), 24)

    def test_zeroed_per_kind(self):
        for kind in ElementKind:
            a = NDArray.zeroed((2, 3), kind)
            self.assertIs(a.kind, kind)
            self.assertTrue(all(a.get(i, j) == 0 for i in range(2) for j in range(3)))

    def test_scalar_array(self):
        a = NDArray.zeroed((), "float64")
        self.assertEqual(a.rank, 0)
        self.assertEqual(a.strides, ())
        self.assertEqual(a.element_count(), 1)
        a.set_0d_(2.5)
        self.assertEqual(a.get_0d(), 2.5)
        self.assertEqual(a.get(), 2.5)

    def test_negative_extent_raises(self):
        with self.assertRaises(InvalidShapeError):
            NDArray.zeroed((2, -1))

    def test_from_source_nested(self):
        a = NDArray.from_source([[1, 2, 3], [4, 5, 6]], kind="float64")
        self.assertEqual(a.shape, (2, 3))
        self.assertTrue(np.array_equal(a.to_numpy(), [[1, 2, 3], [4, 5, 6]]))

    def test_from_source_ragged_raises(self):
        with self.assertRaises(InvalidShapeError):
            NDArray.from_source([[1, 2], [3]])
        with self.assertRaises(InvalidShapeError):
            NDArray.from_source([[1, 2], 3])

    def test_from_source_scalar_and_empty(self):
        s = NDArray.from_source(5.0, kind="float64")
        self.assertEqual(s.shape, ())
        self.assertEqual(s.get_0d(), 5.0)

        e = NDArray.from_source([], kind="float64")
        self.assertEqual(e.shape, (0,))
        self.assertEqual(e.to_nested(), [])

    def test_from_source_numpy_infers_kind(self):
        a = NDArray.from_source(np.arange(6).reshape(2, 3))
        self.assertIs(a.kind, ElementKind.INT64)
        self.assertTrue(np.array_equal(a.to_numpy(), np.arange(6).reshape(2, 3)))

    def test_from_source_array_copies_any_layout(self):
        m = NDArray.from_source([[1.0, 2.0], [3.0, 4.0]])
        t = NDArray.from_source(m.transpose())
        self.assertTrue(t.is_packed())
        self.assertIsNot(t.data, m.data)
        self.assertIs(t.kind, m.kind)
        self.assertEqual(t.to_nested(), [[1.0, 3.0], [2.0, 4.0]])

    def test_from_source_converts_kind(self):
        m = NDArray.from_source([[1.5, 2.5]], kind="float64")
        i = NDArray.from_source(m, kind="int64")
        self.assertIs(i.kind, ElementKind.INT64)
        self.assertEqual(i.to_nested(), [[1, 2]])

    def test_from_numpy(self):
        a = NDArray.from_numpy(np.array([1.5, 2.5], dtype=np.float32))
        self.assertIs(a.kind, ElementKind.FLOAT32)
        self.assertTrue(np.array_equal(a.to_numpy(), np.array([1.5, 2.5], np.float32)))

    def test_identity_and_diagonal(self):
        self.assertTrue(np.array_equal(NDArray.identity(3).to_numpy(), np.eye(3)))
        d = NDArray.diagonal_matrix([1.0, 2.0, 3.0], kind="float64")
        self.assertTrue(np.array_equal(d.to_numpy(), np.diag([1.0, 2.0, 3.0])))
        i = NDArray.identity(2, kind="int64")
        self.assertIs(i.kind, ElementKind.INT64)

    def test_new_vector_and_matrix_keep_kind(self):
        a = NDArray.zeroed((2,), "float32")
        v = a.new_vector(4)
        m = a.new_matrix(2, 5)
        self.assertEqual((v.shape, m.shape), ((4,), (2, 5)))
        self.assertIs(v.kind, ElementKind.FLOAT32)
        self.assertIs(m.kind, ElementKind.FLOAT32)


class TestElementAccess(TestCase):
    def setUp(self):
        self.a = NDArray.from_source([[1.0, 2.0], [3.0, 4.0]], kind="float64")

    def test_get_forms(self):
        self.assertEqual(self.a.get(1, 0), 3.0)
        self.assertEqual(self.a.get((1, 0)), 3.0)
        self.assertEqual(self.a.get_nd([0, 1]), 2.0)

    def test_get_errors(self):
        with self.assertRaises(OutOfRangeError):
            self.a.get(2, 0)
        with self.assertRaises(OutOfRangeError):
            self.a.get(0, -1)
        with self.assertRaises(DimensionMismatchError):
            self.a.get(1)
        with self.assertRaises(DimensionMismatchError):
            self.a.get_0d()

    def test_non_integer_indices_are_rejected(self):
        with self.assertRaises(TypeError):
            self.a.get(1.5, 0)
        with self.assertRaises(TypeError):
            self.a.get_nd([0, "1"])
        with self.assertRaises(TypeError):
            self.a.set_nd_((0.0, 1), 9.0)
        self.assertEqual(self.a.get(np.int64(1), 0), 3.0)

    def test_set_nd_writes_through_views(self):
        row = self.a.get_row(1)
        row.set_nd_((0,), 30.0)
        self.assertEqual(self.a.get(1, 0), 30.0)

    def test_set_nd_returns_updated_clone(self):
        b = self.a.set_nd((0, 0), 9.0)
        self.assertEqual(b.get(0, 0), 9.0)
        self.assertEqual(self.a.get(0, 0), 1.0)

    def test_getitem_and_setitem(self):
        self.assertEqual(self.a[1, 0], 3.0)
        self.assertEqual(self.a[1].to_nested(), [3.0, 4.0])
        self.a[0] = [7.0, 8.0]
        self.a[1] = 0.0
        self.a[1, 1] = 5.0
        self.assertEqual(self.a.to_nested(), [[7.0, 8.0], [0.0, 5.0]])
        with self.assertRaises(DimensionMismatchError):
            self.a[0, 0, 0]


class TestPythonProtocol(TestCase):
    def test_len_and_iter(self):
        m = NDArray.from_source([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        self.assertEqual(len(m), 3)
        rows = [r.to_nested() for r in m]
        self.assertEqual(rows, [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        self.assertEqual(list(m.get_column(1)), [2.0, 4.0, 6.0])

    def test_rank0_is_not_iterable(self):
        s = NDArray.from_source(1.0)
        with self.assertRaises(TypeError):
            len(s)
        with self.assertRaises(TypeError):
            iter(s).__next__()

    def test_repr_and_str(self):
        m = NDArray.from_source([[1.0, 2.0], [3.0, 4.0]], kind="float64")
        r = repr(m)
        self.assertIn("NDArray(shape=(2, 2)", r)
        self.assertIn("strides=(2, 1)", r)
        self.assertIn("kind=float64", r)
        self.assertEqual(str(m), "[[1.0, 2.0], [3.0, 4.0]]")


class TestNumpyInterop(TestCase):
    def test_to_numpy_never_aliases(self):
        a = NDArray.from_source([1.0, 2.0], kind="float64")
        arr = a.to_numpy()
        arr[0] = 100.0
        self.assertEqual(a.get(0), 1.0)

    def test_copy_from_numpy_into_view(self):
        m = NDArray.zeroed((2, 3), "float64")
        m.get_column(2).copy_from_numpy(np.array([5.0, 6.0]))
        self.assertTrue(np.array_equal(m.to_numpy(), [[0, 0, 5], [0, 0, 6]]))

    def test_copy_from_numpy_shape_mismatch(self):
        m = NDArray.zeroed((2, 3), "float64")
        with self.assertRaises(ValueError):
            m.copy_from_numpy(np.zeros((3, 2)))

    def test_copy_from(self):
        src = NDArray.from_source([[1.0, 2.0], [3.0, 4.0]])
        dst = NDArray.zeroed((2, 2), "float64")
        dst.copy_from(src.transpose())
        self.assertEqual(dst.to_nested(), [[1.0, 3.0], [2.0, 4.0]])
        src.fill(0.0)
        self.assertEqual(dst.get(0, 1), 3.0)
        with self.assertRaises(ValueError):
            dst.copy_from(NDArray.zeroed((3,), "float64"))


if __name__ == "__main__":
    unittest.main()
