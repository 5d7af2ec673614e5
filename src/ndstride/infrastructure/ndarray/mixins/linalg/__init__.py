"""
LU-based linear algebra for NDArray.

This package aggregates the linear-algebra mixin and its element-kind
specific control-path implementations:

- ``lu_decompose_in_place`` / ``lu_solve_in_place``
- ``invert`` / ``solve``
- ``determinant`` / ``trace``

Design notes
------------
- Implementation modules are imported for their *side effects*: registering
  control paths with `ndarray_control_path_manager`.
- Only FLOAT64 paths are registered. Any other element kind raises
  `UnsupportedOperationError` at call time.

Public API
----------
- ``NDArrayMixinLinalg``
"""

from ._lu import *
from ._inverse import *
from ._determinant import *
from ._base import NDArrayMixinLinalg, require_square_matrix

__all__ = [
    NDArrayMixinLinalg.__name__,
    require_square_matrix.__name__,
]
