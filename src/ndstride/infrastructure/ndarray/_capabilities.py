"""
Default implementations of the capabilities the array engine consumes.

The engine is meant to sit under an array-operations façade that owns
broadcasting rules and cross-representation coercion. To keep the engine
usable on its own, this module provides defaults and registration hooks:

- `broadcast_compatible(a, b)` : NumPy shape rules realised as zero-stride
  views (`NDArray.broadcast_to`).
- `coerce(like, value)`        : reads `value` through the Shape-Query
  capability into a new array of `like`'s class, keeping the element
  kind the value carries (`natural_kind`).
- `as_shape_query(value)`      : adapts NumPy arrays, nested sequences and
  scalars to `IShapeQuery`.

A façade replaces the defaults with `register_broadcast_resolver` /
`register_coercer`; `reset_capabilities` restores them.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ...domain._capabilities import BroadcastResolver, Coercer
from ...domain._errors import (
    InvalidShapeError,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from ...domain._ndarray import INDArray, IShapeQuery
from ...domain.types._element_kind import ElementKind
from ._element_kinds import kind_from_dtype


class NumpySource:
    """`IShapeQuery` adapter over a `numpy.ndarray`."""

    def __init__(self, arr: np.ndarray) -> None:
        self._arr = arr

    @property
    def dtype(self) -> np.dtype:
        return self._arr.dtype

    def get_shape(self) -> Tuple[int, ...]:
        return tuple(int(d) for d in self._arr.shape)

    def dimensionality(self) -> int:
        return int(self._arr.ndim)

    def get(self, indices: Sequence[int]) -> Any:
        return self._arr[tuple(indices)]


class ScalarSource:
    """`IShapeQuery` adapter presenting a single value as a rank-0 source."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def get_shape(self) -> Tuple[int, ...]:
        return ()

    def dimensionality(self) -> int:
        return 0

    def get(self, indices: Sequence[int]) -> Any:
        return self._value


def is_scalar(value: Any) -> bool:
    """True for plain numbers (Python or NumPy scalars)."""
    return isinstance(value, (numbers.Number, np.generic))


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class NestedSequenceSource:
    """
    `IShapeQuery` adapter over nested Python lists/tuples.

    The shape is discovered by descending the first element of each level,
    then every level is checked for regularity.

    Raises
    ------
    InvalidShapeError
        If the nesting is ragged.
    """

    def __init__(self, data: Sequence[Any]) -> None:
        self._data = data
        shape = []
        level: Any = data
        while _is_nested(level):
            shape.append(len(level))
            if len(level) == 0:
                break
            level = level[0]
        self._shape = tuple(shape)
        self._check(data, 0)

    def _check(self, node: Any, depth: int) -> None:
        if depth == len(self._shape):
            if _is_nested(node):
                raise InvalidShapeError(self._shape, "ragged nested sequence")
            return
        if not _is_nested(node) or len(node) != self._shape[depth]:
            raise InvalidShapeError(self._shape, "ragged nested sequence")
        for child in node:
            self._check(child, depth + 1)

    def get_shape(self) -> Tuple[int, ...]:
        return self._shape

    def dimensionality(self) -> int:
        return len(self._shape)

    def get(self, indices: Sequence[int]) -> Any:
        node = self._data
        for i in indices:
            node = node[i]
        return node


def as_shape_query(value: Any) -> IShapeQuery:
    """
    Adapt `value` to the Shape-Query capability.

    Objects already satisfying `IShapeQuery` (including this engine's
    arrays) are returned unchanged.

    Raises
    ------
    UnsupportedOperationError
        If `value` has no known array-like interpretation.
    """
    if isinstance(value, IShapeQuery):
        return value
    if isinstance(value, np.ndarray):
        return NumpySource(value)
    if is_scalar(value):
        return ScalarSource(value)
    if _is_nested(value):
        return NestedSequenceSource(value)
    raise UnsupportedOperationError("shape query", f"type {type(value).__name__}")


def default_broadcast_compatible(a: INDArray, b: INDArray) -> Tuple[INDArray, INDArray]:
    """
    Broadcast two arrays to their common shape using NumPy's rules.

    Both results are zero-copy views; broadcast axes have stride 0.

    Raises
    ------
    ShapeMismatchError
        If the shapes are not broadcast-compatible.
    """
    try:
        target = np.broadcast_shapes(tuple(a.shape), tuple(b.shape))
    except ValueError:
        raise ShapeMismatchError("broadcast", a.shape, b.shape) from None
    return a.broadcast_to(target), b.broadcast_to(target)


def natural_kind(value: Any) -> Optional[ElementKind]:
    """
    Return the element kind `value` carries on its own.

    Arrays report their kind and NumPy values their dtype. Nested sequences
    and Python scalars are classified by their leaves. Integers alone give
    INT64; once a float appears the result is FLOAT64. Any other leaf type
    gives OBJECT.

    Returns `None` for empty sequences and foreign Shape-Query sources, so
    the default kind applies.
    """
    kind = getattr(value, "kind", None)
    if isinstance(kind, ElementKind):
        return kind
    if isinstance(value, (np.ndarray, np.generic)):
        return kind_from_dtype(value.dtype)
    if isinstance(value, IShapeQuery):
        return None

    integral = real = True
    seen = False
    stack = [value]
    while stack:
        node = stack.pop()
        if _is_nested(node):
            stack.extend(node)
            continue
        seen = True
        if isinstance(node, np.generic):
            node_kind = kind_from_dtype(node.dtype)
            integral = integral and node_kind is ElementKind.INT64
            real = real and node_kind is not ElementKind.OBJECT
        else:
            integral = integral and isinstance(node, numbers.Integral)
            real = real and isinstance(node, (numbers.Integral, float))
    if not seen:
        return None
    if integral:
        return ElementKind.INT64
    if real:
        return ElementKind.FLOAT64
    return ElementKind.OBJECT


def default_coerce(like: INDArray, value: Any) -> INDArray:
    """
    Read `value` into a new array of `like`'s class.

    The result keeps the natural kind of `value`; kernels cast to the
    destination kind only when they write results.
    """
    return type(like).from_source(value, kind=natural_kind(value))


_broadcast_resolver: BroadcastResolver = default_broadcast_compatible
_coercer: Coercer = default_coerce


def broadcast_compatible(a: INDArray, b: INDArray) -> Tuple[INDArray, INDArray]:
    """Invoke the registered Broadcast-Resolution capability."""
    return _broadcast_resolver(a, b)


def coerce(like: INDArray, value: Any) -> INDArray:
    """Invoke the registered Coercion capability."""
    return _coercer(like, value)


def register_broadcast_resolver(fn: Optional[BroadcastResolver]) -> None:
    """Install `fn` as the broadcast resolver (`None` restores the default)."""
    global _broadcast_resolver
    if fn is not None and not callable(fn):
        raise TypeError(f"broadcast resolver must be callable, got {fn!r}")
    _broadcast_resolver = fn or default_broadcast_compatible


def register_coercer(fn: Optional[Coercer]) -> None:
    """Install `fn` as the coercer (`None` restores the default)."""
    global _coercer
    if fn is not None and not callable(fn):
        raise TypeError(f"coercer must be callable, got {fn!r}")
    _coercer = fn or default_coerce


def reset_capabilities() -> None:
    """Restore the default broadcast resolver and coercer."""
    register_broadcast_resolver(None)
    register_coercer(None)
