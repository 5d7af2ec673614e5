"""
Concrete strided NDArray (NumPy buffer backend).

This module provides `NDArray`, the runtime class satisfying the domain-level
`INDArray` and `IShapeQuery` protocols. An `NDArray` is an immutable header
`(shape, strides, offset, kind)` over a one-dimensional NumPy buffer; views
produced by slicing, transposing or broadcasting share that buffer.

Design notes
------------
- This file sits in the infrastructure layer: it imports NumPy and the
  concrete error types, and assembles the behaviour from focused mixins
  (memory, views, arithmetic, unary, reduction, comparison, products,
  linalg).
- The header is validated once, here. Every method that builds a new header
  goes through this constructor, so no header can address memory outside
  its buffer.
- `==` keeps Python's identity semantics; structural equality is
  `matrix_equals`.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Optional, Sequence, Union

import numpy as np

from ...domain._errors import DimensionMismatchError, InvalidShapeError, OutOfRangeError
from ...domain.types._element_kind import ElementKind
from ._capabilities import coerce
from ._element_kinds import ElementTraits, kind_from_dtype, traits_for
from ._strides import element_count, is_packed_layout, normalize_shape, reachable_span

from .mixins.memory import NDArrayMixinMemory
from .mixins.views import NDArrayMixinViews
from .mixins.arithmetic import NDArrayMixinArithmetic
from .mixins.unary import NDArrayMixinUnary
from .mixins.reduction import NDArrayMixinReduction
from .mixins.comparison import NDArrayMixinComparison
from .mixins.products import NDArrayMixinProducts
from .mixins.linalg import NDArrayMixinLinalg


class NDArray(
    NDArrayMixinMemory,
    NDArrayMixinViews,
    NDArrayMixinArithmetic,
    NDArrayMixinUnary,
    NDArrayMixinReduction,
    NDArrayMixinComparison,
    NDArrayMixinProducts,
    NDArrayMixinLinalg,
):
    """
    Dense strided N-dimensional array.

    Parameters
    ----------
    buffer : numpy.ndarray
        One-dimensional buffer holding the elements. It is stored by
        reference, never copied.
    shape : Sequence[int]
        Per-axis extents.
    strides : Sequence[int]
        Per-axis steps through `buffer`, in elements. Must have the same
        length as `shape`.
    offset : int, optional
        Flat position of the element at the all-zero index. Defaults to 0.
    kind : ElementKind or str, optional
        Element kind. Inferred from `buffer.dtype` when omitted; when given it
        must match the buffer's dtype.

    Raises
    ------
    TypeError
        If `buffer` is not a one-dimensional NumPy array.
    InvalidShapeError
        If `shape` and `strides` differ in length, an extent is negative, or
        the header reaches outside the buffer.

    Notes
    -----
    Most users build arrays with the factories (`empty`, `zeroed`,
    `from_source`, `identity`, ...) rather than this constructor.
    """

    def __init__(
        self,
        buffer: np.ndarray,
        shape: Sequence[int],
        strides: Sequence[int],
        offset: int = 0,
        kind: Optional[Union[ElementKind, str]] = None,
    ) -> None:
        if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
            raise TypeError(
                f"NDArray buffer must be a one-dimensional numpy.ndarray, got {buffer!r}"
            )
        shape = normalize_shape(shape)
        strides = tuple(int(s) for s in strides)
        offset = int(offset)
        if len(shape) != len(strides):
            raise InvalidShapeError(
                shape, f"{len(strides)} strides given for rank {len(shape)}"
            )

        inferred = kind_from_dtype(buffer.dtype)
        kind = inferred if kind is None else ElementKind.parse(kind)
        if traits_for(kind).dtype != buffer.dtype:
            raise TypeError(
                f"element kind '{kind}' does not match buffer dtype {buffer.dtype}"
            )

        if element_count(shape) > 0:
            lo, hi = reachable_span(shape, strides, offset)
            if lo < 0 or hi >= len(buffer):
                raise InvalidShapeError(
                    shape,
                    f"strides {strides} at offset {offset} reach [{lo}, {hi}] "
                    f"outside a buffer of {len(buffer)} elements",
                )

        self._data = buffer
        self._shape = shape
        self._strides = strides
        self._offset = offset
        self._kind = kind

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------
    @property
    def data(self) -> np.ndarray:
        """
        Return the shared linear buffer.

        Notes
        -----
        Writing into the returned array writes through every view of it.
        """
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        """Per-axis steps in elements (empty for rank 0)."""
        return self._strides

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def _traits(self) -> ElementTraits:
        return traits_for(self._kind)

    def _as_operand(self, value: Any) -> "NDArray":
        if isinstance(value, NDArray):
            return value
        return coerce(self, value)

    def element_count(self) -> int:
        return element_count(self._shape)

    def is_packed(self) -> bool:
        """Return True if the strides are the row-major strides of the shape."""
        return is_packed_layout(self._shape, self._strides)

    # ------------------------------------------------------------------
    # Shape-Query capability
    # ------------------------------------------------------------------
    def get_shape(self) -> tuple[int, ...]:
        return self._shape

    def dimensionality(self) -> int:
        return self.rank

    def _flat_index(self, indices: Sequence[int], op: str) -> int:
        if len(indices) != self.rank:
            raise DimensionMismatchError(
                op, f"{len(indices)} indices for rank {self.rank}"
            )
        pos = self._offset
        for i, d, s in zip(indices, self._shape, self._strides):
            i = operator.index(i)
            if not 0 <= i < d:
                raise OutOfRangeError(op, tuple(indices), self._shape)
            pos += i * s
        return pos

    @staticmethod
    def _unpack_indices(indices: tuple) -> tuple:
        if len(indices) == 1 and isinstance(indices[0], (tuple, list)):
            return tuple(indices[0])
        return indices

    def get(self, *indices: Any) -> Any:
        """
        Return the element at a multi-index.

        Accepts either separate integers (``a.get(1, 2)``) or one sequence
        (``a.get((1, 2))``).

        Raises
        ------
        DimensionMismatchError
            If the number of indices differs from the rank.
        OutOfRangeError
            If an index lies outside its axis.
        TypeError
            If an index is not an integer (`1.5`, `"1"`).
        """
        indices = self._unpack_indices(indices)
        return self._data[self._flat_index(indices, "get")]

    def get_nd(self, indices: Sequence[int]) -> Any:
        return self._data[self._flat_index(tuple(indices), "get_nd")]

    def get_0d(self) -> Any:
        """Return the single element of a rank-0 array."""
        return self._data[self._flat_index((), "get_0d")]

    def set_nd_(self, indices: Sequence[int], value: Any) -> None:
        """Write `value` at `indices` (in place, visible through aliases)."""
        self._data[self._flat_index(tuple(indices), "set_nd_")] = value

    def set_0d_(self, value: Any) -> None:
        self._data[self._flat_index((), "set_0d_")] = value

    def set_nd(self, indices: Sequence[int], value: Any) -> "NDArray":
        """Return a clone with `value` written at `indices`."""
        out = self.clone()
        out.set_nd_(indices, value)
        return out

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __getitem__(self, key: Any) -> Any:
        """
        ``a[i]`` is the major slice `i`; ``a[i, j, ...]`` with one index per
        axis is an element, fewer indices give the corresponding sub-view.
        """
        if not isinstance(key, tuple):
            key = (key,)
        if len(key) > self.rank:
            raise DimensionMismatchError(
                "__getitem__", f"{len(key)} indices for rank {self.rank}"
            )
        if len(key) == self.rank:
            return self.get(key)
        view = self
        for i in key:
            view = view.slice_along(0, i)
        return view

    def __setitem__(self, key: Any, value: Any) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        if len(key) == self.rank:
            self.set_nd_(key, value)
            return
        view = self[key]
        if isinstance(value, (NDArray, np.ndarray, list, tuple)):
            view.copy_from(value)
        else:
            view.fill(value)

    def __len__(self) -> int:
        if self.rank == 0:
            raise TypeError("len() of a 0-dimensional NDArray")
        return self._shape[0]

    def __iter__(self) -> Iterator[Any]:
        if self.rank == 0:
            raise TypeError("iteration over a 0-dimensional NDArray")
        if self.rank == 1:
            data, pos, step = self._data, self._offset, self._strides[0]
            for _ in range(self._shape[0]):
                yield data[pos]
                pos += step
            return
        for i in range(self._shape[0]):
            yield self.slice_along(0, i)

    def __repr__(self) -> str:
        return (
            f"NDArray(shape={self._shape}, strides={self._strides}, "
            f"offset={self._offset}, kind={self._kind})"
        )

    def __str__(self) -> str:
        return str(self.to_nested())
