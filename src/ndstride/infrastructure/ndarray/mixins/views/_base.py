"""
NDArray view / slice mixin.

This module defines `NDArrayMixinViews`, which derives new headers over the
*same* buffer without copying data: slices, transpose, diagonal, subvector,
reshape of packed arrays and zero-stride broadcasting.

Design notes
------------
- Every method returns a new header built through `reshape_restride`; writes
  through any view are visible through every alias.
- Offsets and strides are in elements. A view's layout may be far from
  row-major; `clone()` packs it again when a kernel benefits from it.
"""

from __future__ import annotations

import operator
from typing import List, Sequence, TypeVar

from .....domain._errors import (
    DimensionMismatchError,
    InvalidShapeError,
    OutOfRangeError,
    ShapeMismatchError,
)
from ..._strides import element_count, normalize_shape, row_major_strides

V = TypeVar("V", bound="NDArrayMixinViews")


class NDArrayMixinViews:
    """
    Zero-copy view operations for the concrete NDArray implementation.

    Notes
    -----
    Methods assume the host class provides the header properties and a
    constructor `cls(buffer, shape, strides, offset, kind)`.
    """

    def reshape_restride(
        self: V,
        new_shape: Sequence[int],
        new_strides: Sequence[int],
        new_offset: int,
    ) -> V:
        """
        Build a raw header over this array's buffer.

        The rank is taken from `new_shape`. Whether the header addresses the
        intended elements is the caller's responsibility; the constructor
        only rejects headers that reach outside the buffer.
        """
        return type(self)(
            self.data,
            tuple(new_shape),
            tuple(int(s) for s in new_strides),
            int(new_offset),
            self.kind,
        )

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------
    def slice_along(self: V, dim: int, idx: int) -> V:
        """
        Return the rank-(n-1) view at position `idx` along axis `dim`.

        Raises
        ------
        OutOfRangeError
            If the array is rank 0, `dim` is not an axis, `idx` is outside
            the axis extent, or the resulting offset leaves the buffer.
        """
        if self.rank == 0:
            raise OutOfRangeError("slice_along", dim, "a 0-dimensional array")
        dim, idx = operator.index(dim), operator.index(idx)
        if not 0 <= dim < self.rank:
            raise OutOfRangeError("slice_along", dim, f"rank {self.rank}")
        if not 0 <= idx < self.shape[dim]:
            raise OutOfRangeError("slice_along", idx, self.shape)

        new_shape = self.shape[:dim] + self.shape[dim + 1 :]
        new_strides = self.strides[:dim] + self.strides[dim + 1 :]
        new_offset = self.offset + idx * self.strides[dim]
        if element_count(new_shape) > 0 and new_offset >= len(self.data):
            raise OutOfRangeError("slice_along", new_offset, len(self.data))
        return self.reshape_restride(new_shape, new_strides, new_offset)

    def row_major_slice(self: V, idx: int) -> V:
        """Slice along the first axis."""
        return self.slice_along(0, idx)

    def get_major_slice(self: V, i: int) -> V:
        return self.slice_along(0, i)

    def get_slice(self: V, dimension: int, i: int) -> V:
        return self.slice_along(dimension, i)

    def major_slices(self: V) -> List[V]:
        """All slices along the first axis, in order."""
        if self.rank == 0:
            raise OutOfRangeError("major_slices", 0, "a 0-dimensional array")
        return [self.slice_along(0, i) for i in range(self.shape[0])]

    def get_row(self: V, i: int) -> V:
        """Row `i` of a matrix, as a rank-1 view."""
        if self.rank != 2:
            raise DimensionMismatchError("get_row", f"expected rank 2, got {self.rank}")
        return self.slice_along(0, i)

    def get_column(self: V, i: int) -> V:
        """Column `i` of a matrix, as a rank-1 view."""
        if self.rank != 2:
            raise DimensionMismatchError(
                "get_column", f"expected rank 2, got {self.rank}"
            )
        return self.slice_along(1, i)

    # ------------------------------------------------------------------
    # Restriding
    # ------------------------------------------------------------------
    def transpose(self: V) -> V:
        """Reverse the order of the axes. No data is moved."""
        return self.reshape_restride(self.shape[::-1], self.strides[::-1], self.offset)

    @property
    def T(self: V) -> V:
        return self.transpose()

    def main_diagonal(self: V) -> V:
        """
        Return the main diagonal of a square matrix as a rank-1 view.

        Raises
        ------
        DimensionMismatchError
            If the array is not a square rank-2 array.
        """
        if self.rank != 2 or self.shape[0] != self.shape[1]:
            raise DimensionMismatchError(
                "main_diagonal", f"expected a square matrix, got shape {self.shape}"
            )
        return self.reshape_restride(
            (self.shape[0],), (self.strides[0] + self.strides[1],), self.offset
        )

    def subvector(self: V, start: int, length: int) -> V:
        """
        Return `length` consecutive elements of a vector starting at `start`.

        Raises
        ------
        DimensionMismatchError
            If the array is not rank 1.
        OutOfRangeError
            If `[start, start + length)` does not fit in the vector.
        """
        if self.rank != 1:
            raise DimensionMismatchError("subvector", f"expected rank 1, got {self.rank}")
        start, length = operator.index(start), operator.index(length)
        if start < 0 or length < 0 or start + length > self.shape[0]:
            raise OutOfRangeError("subvector", (start, length), self.shape)
        return self.reshape_restride(
            (length,), self.strides, self.offset + start * self.strides[0]
        )

    def reshape(self: V, shape: Sequence[int]) -> V:
        """
        Return an array of `shape` with the same elements in row-major order.

        A packed array is reshaped as a view; any other layout is first
        cloned, so the result then no longer aliases `self`.

        Raises
        ------
        InvalidShapeError
            If the element counts differ.
        """
        new_shape = normalize_shape(shape)
        if element_count(new_shape) != self.element_count():
            raise InvalidShapeError(
                new_shape, f"cannot reshape {self.element_count()} elements"
            )
        src = self if self.is_packed() else self.clone()
        new_strides = row_major_strides(new_shape) if new_shape else ()
        return src.reshape_restride(new_shape, new_strides, src.offset)

    def broadcast_to(self: V, shape: Sequence[int]) -> V:
        """
        Return a view of this array expanded to `shape`.

        Axes are aligned from the right; missing leading axes and axes of
        extent 1 are repeated with stride 0.

        Raises
        ------
        ShapeMismatchError
            If the shapes are not broadcast-compatible.
        """
        target = normalize_shape(shape)
        lead = len(target) - self.rank
        if lead < 0:
            raise ShapeMismatchError("broadcast_to", self.shape, target)
        new_strides = [0] * lead
        for d in range(self.rank):
            src, dst = self.shape[d], target[lead + d]
            if src == dst:
                new_strides.append(self.strides[d])
            elif src == 1:
                new_strides.append(0)
            else:
                raise ShapeMismatchError("broadcast_to", self.shape, target)
        return self.reshape_restride(target, new_strides, self.offset)
