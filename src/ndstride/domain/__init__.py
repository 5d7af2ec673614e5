"""
Domain layer for ndstride: error taxonomy, element kinds and the structural
contracts (`INDArray`, `IShapeQuery`, capability callables) that the
infrastructure layer implements or consumes. Nothing here imports NumPy.
"""

from ._errors import (
    DimensionMismatchError,
    InvalidShapeError,
    OutOfRangeError,
    ShapeMismatchError,
    SingularMatrixError,
    UnsupportedOperationError,
)
from ._ndarray import INDArray, IShapeQuery
from ._capabilities import BroadcastResolver, Coercer, MathsFunction
from .types import ElementKind

__all__ = [
    "BroadcastResolver",
    "Coercer",
    "DimensionMismatchError",
    "ElementKind",
    "INDArray",
    "IShapeQuery",
    "InvalidShapeError",
    "MathsFunction",
    "OutOfRangeError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "UnsupportedOperationError",
]
