"""
Dense matrix-multiply and fused-product kernels.

All products share one accumulation kernel, `accumulate_product`, which adds
`factor * a @ b` into a destination matrix using the loop order

    for i in rows(a):
        for k in inner:
            t = factor * a[i, k]
            for j in cols(b):
                c[i, j] += t * b[k, j]

`a[i, k]` is read once per `(i, k)` and reused across the `j` sweep, which
walks `b` and `c` along their rows. Packed (row-major) operands therefore
get unit-stride inner loops; strided views still work but `clone()` them
first when speed matters.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from .....domain._errors import (
    DimensionMismatchError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from ..._capabilities import is_scalar

P = TypeVar("P", bound="NDArrayMixinProducts")


def accumulate_product(c: Any, a: Any, b: Any, factor: Optional[Any] = None) -> None:
    """
    Add `factor * (a @ b)` into `c` in place (all rank 2, shapes pre-checked).

    Each row of `c` is summed in Python numbers and written back once, so an
    integer destination truncates the finished sum rather than every partial
    product.
    """
    rows, inner = a.shape
    cols = b.shape[1]
    a_data, b_data, c_data = a.data, b.data, c.data
    a_s0, a_s1 = a.strides
    b_s0, b_s1 = b.strides
    c_s0, c_s1 = c.strides

    for i in range(rows):
        a_row = a.offset + i * a_s0
        c_row = c.offset + i * c_s0
        acc = [c_data[c_row + j * c_s1] for j in range(cols)]
        for k in range(inner):
            t = a_data[a_row + k * a_s1]
            if factor is not None:
                t = factor * t
            b_pos = b.offset + k * b_s0
            for j in range(cols):
                acc[j] += t * b_data[b_pos]
                b_pos += b_s1
        c_pos = c_row
        for v in acc:
            c_data[c_pos] = v
            c_pos += c_s1


class NDArrayMixinProducts:
    """
    Matrix multiplication and the add-product family.

    Notes
    -----
    The host class provides `_as_operand`, `scale`, `clone`, `zeroed`,
    `reshape_restride`, `get_0d` and the header properties.
    """

    def matrix_multiply(self: P, other: Any) -> P:
        """
        Matrix product `self @ other`.

        - a plain number, or a rank-0 `other`, scales `self`;
        - rank 1 @ rank 2 treats `self` as a `1 x n` row and returns rank 1;
        - rank 2 @ rank 1 treats `other` as an `n x 1` column and returns
          rank 1;
        - rank 2 @ rank 2 is the dense product.

        Raises
        ------
        DimensionMismatchError
            If the inner dimensions differ.
        UnsupportedOperationError
            For any other rank combination.
        """
        if is_scalar(other):
            return self.scale(other)
        b = self._as_operand(other)
        a_rank, b_rank = self.rank, b.rank

        if b_rank == 0:
            return self.scale(b.get_0d())

        if a_rank == 1 and b_rank == 2:
            n, s = self.shape[0], self.strides[0]
            row = self.reshape_restride((1, n), (n * s, s), self.offset)
            c = row.matrix_multiply(b)
            return c.reshape_restride((c.shape[1],), (c.strides[1],), c.offset)

        if a_rank == 2 and b_rank == 1:
            n, s = b.shape[0], b.strides[0]
            col = b.reshape_restride((n, 1), (s, 1), b.offset)
            c = self.matrix_multiply(col)
            return c.reshape_restride((c.shape[0],), (c.strides[0],), c.offset)

        if a_rank == 2 and b_rank == 2:
            a_rows, a_cols = self.shape
            b_rows, b_cols = b.shape
            if a_cols != b_rows:
                raise DimensionMismatchError(
                    "matrix_multiply", f"{self.shape} x {b.shape}"
                )
            c = type(self).zeroed((a_rows, b_cols), self.kind)
            accumulate_product(c, self, b)
            return c

        raise UnsupportedOperationError(
            "matrix_multiply", f"rank {a_rank} x rank {b_rank} operands"
        )

    def __matmul__(self: P, other: Any) -> P:
        return self.matrix_multiply(other)

    # ------------------------------------------------------------------
    # Fused products
    # ------------------------------------------------------------------
    def _product_operands(self, a: Any, b: Any, op: str):
        a = self._as_operand(a)
        b = self._as_operand(b)
        if not (self.shape == a.shape == b.shape):
            raise ShapeMismatchError(op, self.shape, a.shape, b.shape)
        if self.rank != 2:
            raise DimensionMismatchError(op, f"expected rank 2, got {self.rank}")
        if a.shape[1] != b.shape[0]:
            raise DimensionMismatchError(op, f"{a.shape} x {b.shape}")
        return a, b

    def add_product(self: P, a: Any, b: Any) -> P:
        """
        Return `self + a @ b`; `self` is left unchanged.

        Raises
        ------
        ShapeMismatchError
            If `self`, `a` and `b` do not share one shape.
        DimensionMismatchError
            If that shape is not a square rank-2 shape.
        """
        a, b = self._product_operands(a, b, "add_product")
        out = self.clone()
        accumulate_product(out, a, b)
        return out

    def add_product_(self: P, a: Any, b: Any) -> P:
        """In-place `self += a @ b`."""
        a, b = self._product_operands(a, b, "add_product_")
        accumulate_product(self, a, b)
        return self

    def add_scaled_product(self: P, a: Any, b: Any, factor: Any) -> P:
        """Return `self + factor * (a @ b)`; `self` is left unchanged."""
        a, b = self._product_operands(a, b, "add_scaled_product")
        out = self.clone()
        accumulate_product(out, a, b, factor)
        return out

    def add_scaled_product_(self: P, a: Any, b: Any, factor: Any) -> P:
        """In-place `self += factor * (a @ b)`."""
        a, b = self._product_operands(a, b, "add_scaled_product_")
        accumulate_product(self, a, b, factor)
        return self
