"""
Inversion and linear solves built on the FLOAT64 LU kernels.
"""

from typing import Any

from ..._ndarray_builder import ndarray_control_path_manager

from .....domain._errors import DimensionMismatchError
from .....domain.types._element_kind import ElementKind

from ._base import NDArrayMixinLinalg as NML, require_square_matrix


@ndarray_control_path_manager(NML, NML.invert, ElementKind.FLOAT64)
def invert_float64(self) -> Any:
    """
    Column-by-column inversion: factor a clone once, then solve
    ``A x = e_i`` for each unit vector and store `x` as column `i`.
    """
    n = require_square_matrix(self, "invert")
    lu = self.clone()
    _, permutation = lu.lu_decompose_in_place()

    out = type(self).zeroed((n, n), ElementKind.FLOAT64)
    x = out.new_vector(n)
    for i in range(n):
        x.fill(0.0)
        x.set_nd_((i,), 1.0)
        lu.lu_solve_in_place(permutation, x)
        out.get_column(i).copy_from(x)
    return out


@ndarray_control_path_manager(NML, NML.solve, ElementKind.FLOAT64)
def solve_float64(self, b: Any) -> Any:
    n = require_square_matrix(self, "solve")
    if isinstance(b, NML) and b.kind is ElementKind.FLOAT64:
        rhs = b
    else:
        rhs = type(self).from_source(b, kind=ElementKind.FLOAT64)
    if rhs.rank != 1 or rhs.shape[0] != n:
        raise DimensionMismatchError("solve", f"right-hand side of shape {rhs.shape} for n={n}")

    lu = self.clone()
    _, permutation = lu.lu_decompose_in_place()
    x = rhs.clone()
    lu.lu_solve_in_place(permutation, x)
    return x
