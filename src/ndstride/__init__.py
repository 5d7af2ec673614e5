"""
ndstride: a dense strided N-dimensional array engine on NumPy buffers.

Arrays are `(shape, strides, offset)` headers over a shared linear buffer.
Slices, transposes, diagonals and broadcasts are zero-copy views; elementwise
kernels walk any layout; FLOAT64 matrices get LU-based linear algebra.

    >>> from ndstride import NDArray
    >>> a = NDArray.from_source([[4.0, 3.0], [6.0, 3.0]])
    >>> a.determinant()
    -6.0
"""

from .domain import (
    DimensionMismatchError,
    ElementKind,
    IShapeQuery,
    InvalidShapeError,
    OutOfRangeError,
    ShapeMismatchError,
    SingularMatrixError,
    UnsupportedOperationError,
)
from .infrastructure.ndarray import (
    NDArray,
    element_count,
    register_broadcast_resolver,
    register_coercer,
    register_maths_function,
    reset_capabilities,
    row_major_strides,
)

__version__ = "1.0.0"

__all__ = [
    "DimensionMismatchError",
    "ElementKind",
    "IShapeQuery",
    "InvalidShapeError",
    "NDArray",
    "OutOfRangeError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "UnsupportedOperationError",
    "element_count",
    "register_broadcast_resolver",
    "register_coercer",
    "register_maths_function",
    "reset_capabilities",
    "row_major_strides",
]
