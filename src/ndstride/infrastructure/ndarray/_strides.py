"""
Stride calculation for row-major (C-order) layouts.

With shape `(d_1, ..., d_N)` the row-major strides `(s_1, ..., s_N)` are

    s_j = d_{j+1} * d_{j+2} * ... * d_N

so the last axis is contiguous. Strides are measured in elements, not bytes;
`numpy.empty((4, 3, 2)).strides` in bytes divided by the item size gives the
same `(6, 2, 1)`.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ...domain._errors import InvalidShapeError


def normalize_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Validate `shape` and return it as a tuple of Python ints.

    Raises
    ------
    InvalidShapeError
        If any extent is negative or not an integer.
    """
    try:
        out = tuple(int(d) for d in shape)
    except (TypeError, ValueError):
        raise InvalidShapeError(tuple(shape), "extents must be integers") from None
    for d, orig in zip(out, shape):
        if d < 0 or d != orig:
            raise InvalidShapeError(out, "extents must be non-negative integers")
    return out


def row_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute row-major strides for `shape`.

    A rank-0 shape yields the scalar sentinel `(1,)`.

    Examples
    --------
    >>> row_major_strides((2, 3))
    (3, 1)
    >>> row_major_strides((4, 3, 2))
    (6, 2, 1)
    """
    shape = normalize_shape(shape)
    n = len(shape)
    if n == 0:
        return (1,)
    strides = [0] * n
    strides[n - 1] = 1
    for i in range(n - 2, -1, -1):
        strides[i] = strides[i + 1] * shape[i + 1]
    return tuple(strides)


def element_count(shape: Sequence[int]) -> int:
    """Product of the extents (1 for rank 0)."""
    count = 1
    for d in shape:
        count *= int(d)
    return count


def is_packed_layout(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """Return True if `strides` are exactly the row-major strides of `shape`."""
    if len(shape) == 0:
        return len(strides) == 0
    return tuple(strides) == row_major_strides(shape)


def reachable_span(
    shape: Sequence[int], strides: Sequence[int], offset: int
) -> Tuple[int, int]:
    """
    Return the lowest and highest flat positions a header can address.

    Only meaningful for shapes with no zero extent.
    """
    lo = hi = int(offset)
    for d, s in zip(shape, strides):
        step = (int(d) - 1) * int(s)
        if step < 0:
            lo += step
        else:
            hi += step
    return lo, hi
