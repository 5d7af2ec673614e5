"""
Determinant and trace for FLOAT64 matrices.
"""

from ..._ndarray_builder import ndarray_control_path_manager

from .....domain._errors import SingularMatrixError
from .....domain.types._element_kind import ElementKind

from ._base import NDArrayMixinLinalg as NML, require_square_matrix


@ndarray_control_path_manager(NML, NML.determinant, ElementKind.FLOAT64)
def determinant_float64(self) -> float:
    n = require_square_matrix(self, "determinant")
    if n == 0:
        return 1.0

    lu = self.clone()
    try:
        sign, _ = lu.lu_decompose_in_place()
    except SingularMatrixError:
        return 0.0

    det = float(sign)
    diag = lu.main_diagonal()
    for i in range(n):
        det *= diag.get((i,))
    return float(det)


@ndarray_control_path_manager(NML, NML.trace, ElementKind.FLOAT64)
def trace_float64(self) -> float:
    require_square_matrix(self, "trace")
    return float(self.main_diagonal().element_sum())
