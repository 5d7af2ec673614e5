"""
LU decomposition and LU solve for FLOAT64 arrays.

Both routines follow the GNU Scientific Library's `gsl_linalg_LU_decomp` /
`gsl_linalg_LU_solve` contract: Doolittle elimination with partial (row)
pivoting, the unit-lower factor stored below the diagonal, and a solver that
applies the row permutation to the right-hand side itself.
"""

from typing import Any, List, Tuple

from ..._ndarray_builder import ndarray_control_path_manager

from .....domain._errors import DimensionMismatchError, SingularMatrixError
from .....domain.types._element_kind import ElementKind

from ._base import NDArrayMixinLinalg as NML, require_square_matrix


@ndarray_control_path_manager(NML, NML.lu_decompose_in_place, ElementKind.FLOAT64)
def lu_decompose_in_place_float64(self) -> Tuple[int, List[int]]:
    """
    In-place LU decomposition with partial pivoting (FLOAT64).

    For every pivot column `j < n - 1` the row with the largest magnitude in
    that column is swapped into row `j`; the multipliers `m[i][j] / pivot`
    replace the eliminated entries. The last diagonal entry is checked as
    well so that a rank-deficient matrix is always reported.
    """
    n = require_square_matrix(self, "lu_decompose_in_place")
    d = self.data
    off = self.offset
    s0, s1 = self.strides

    permutation = list(range(n))
    sign = 1

    for j in range(n - 1):
        col = off + j * s1
        i_pivot = j
        best = abs(d[col + j * s0])
        for i in range(j + 1, n):
            cur = abs(d[col + i * s0])
            if best < cur:
                i_pivot, best = i, cur
        if best == 0:
            raise SingularMatrixError(j)

        if i_pivot != j:
            row_p = off + i_pivot * s0
            row_j = off + j * s0
            for k in range(n):
                p, q = row_p + k * s1, row_j + k * s1
                d[p], d[q] = d[q], d[p]
            permutation[i_pivot], permutation[j] = permutation[j], permutation[i_pivot]
            sign = -sign

        row_j = off + j * s0
        pivot = d[row_j + j * s1]
        for i in range(j + 1, n):
            row_i = off + i * s0
            scaled = d[row_i + j * s1] / pivot
            d[row_i + j * s1] = scaled
            for k in range(j + 1, n):
                d[row_i + k * s1] -= d[row_j + k * s1] * scaled

    if n > 0 and d[off + (n - 1) * (s0 + s1)] == 0:
        raise SingularMatrixError(n - 1)

    return sign, permutation


@ndarray_control_path_manager(NML, NML.lu_solve_in_place, ElementKind.FLOAT64)
def lu_solve_in_place_float64(self, permutation: List[int], x: Any) -> None:
    """
    Forward then backward substitution against a packed LU factorisation.

    `x` holds `b` on entry; it is permuted into `P b`, `L y = P b` is solved
    with the implicit unit diagonal, then `U x = y`, and the result is
    written back through `x`'s buffer.
    """
    n = require_square_matrix(self, "lu_solve_in_place")
    if len(permutation) != n:
        raise DimensionMismatchError(
            "lu_solve_in_place",
            f"permutation of length {len(permutation)} for a {n}x{n} factorisation",
        )
    if not isinstance(x, NML):
        raise TypeError(
            f"lu_solve_in_place expects an array right-hand side, got {type(x).__name__}"
        )
    if x.rank != 1 or x.shape[0] != n:
        raise DimensionMismatchError(
            "lu_solve_in_place", f"right-hand side of shape {x.shape} for n={n}"
        )

    d = self.data
    off = self.offset
    s0, s1 = self.strides
    x_data, x_off, x_step = x.data, x.offset, x.strides[0]

    y = [x_data[x_off + permutation[r] * x_step] for r in range(n)]

    # L y = P b
    for i in range(n):
        row_i = off + i * s0
        s = y[i]
        for j in range(i):
            s -= d[row_i + j * s1] * y[j]
        y[i] = s

    # U x = y
    for i in range(n - 1, -1, -1):
        row_i = off + i * s0
        s = y[i]
        for j in range(i + 1, n):
            s -= d[row_i + j * s1] * y[j]
        y[i] = s / d[row_i + i * s1]

    for r in range(n):
        x_data[x_off + r * x_step] = y[r]
