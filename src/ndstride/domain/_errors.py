"""
Array-engine exceptions for ndstride.

This module defines the error taxonomy raised by the NDArray core. Each error
is raised synchronously at the point of detection and carries the offending
values as attributes so callers (and the array-operations façade above this
engine) can report them without parsing messages.

Taxonomy
--------
- `InvalidShapeError`          : inconsistent construction / reshape dimensions
- `DimensionMismatchError`     : rank or axis mismatch (multiply, diagonal, ...)
- `OutOfRangeError`            : index beyond the bounds of a shape
- `SingularMatrixError`        : zero pivot during LU decomposition
- `UnsupportedOperationError`  : unimplemented rank combination or element kind
- `ShapeMismatchError`         : operation requiring identical shapes

Each class also derives from the closest builtin exception so that generic
handlers (`except ValueError`, `except IndexError`) keep working.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class InvalidShapeError(ValueError):
    """
    Raised when a shape (or a shape/strides/offset header) is not valid.

    Attributes
    ----------
    shape : tuple
        The rejected shape.
    reason : str
        Human-readable explanation.
    """

    def __init__(self, shape: Sequence[Any], reason: str) -> None:
        super().__init__(f"Invalid shape {tuple(shape)!r}: {reason}")
        self.shape = tuple(shape)
        self.reason = reason


class DimensionMismatchError(ValueError):
    """
    Raised when the rank or an axis extent of an operand is incompatible with
    the requested operation (e.g., inner dimensions of a matrix product).

    Attributes
    ----------
    op : str
        The operation that was attempted.
    detail : str
        Description of the mismatch.
    """

    def __init__(self, op: str, detail: str) -> None:
        super().__init__(f"{op}: dimension mismatch ({detail}).")
        self.op = op
        self.detail = detail


class OutOfRangeError(IndexError):
    """
    Raised when an index (or an index-derived offset) lies outside the
    bounds of an array.
    """

    def __init__(self, op: str, index: Any, bound: Any) -> None:
        super().__init__(f"{op}: index {index!r} is out of range for {bound!r}.")
        self.op = op
        self.index = index
        self.bound = bound


class SingularMatrixError(ArithmeticError):
    """
    Raised when LU decomposition meets a pivot column whose largest magnitude
    is exactly zero.

    Attributes
    ----------
    column : int
        Pivot column at which the zero pivot was found.
    """

    def __init__(self, column: int) -> None:
        super().__init__(
            f"Matrix is singular: zero pivot encountered in column {column}."
        )
        self.column = column


class UnsupportedOperationError(NotImplementedError):
    """
    Raised when an operation is requested for a rank combination or an
    element kind that has no implementation.
    """

    def __init__(self, op: str, detail: Optional[str] = None) -> None:
        msg = f"{op} is not supported"
        if detail:
            msg += f" for {detail}"
        super().__init__(msg + ".")
        self.op = op
        self.detail = detail


class ShapeMismatchError(ValueError):
    """
    Raised when an operation requires operands of identical shape and they
    differ (or cannot be broadcast to a common shape).
    """

    def __init__(self, op: str, *shapes: Sequence[int]) -> None:
        rendered = " vs ".join(repr(tuple(s)) for s in shapes)
        super().__init__(f"{op}: shape mismatch {rendered}.")
        self.op = op
        self.shapes = tuple(tuple(s) for s in shapes)
