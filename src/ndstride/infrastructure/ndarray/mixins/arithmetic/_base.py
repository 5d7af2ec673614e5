"""
Elementwise arithmetic mixin.

This module defines `NDArrayMixinArithmetic`, which implements scalar and
binary elementwise operations on top of the traversal engine.

Binary operations follow one protocol:

1. plain numbers take a scalar path,
2. foreign operands are coerced through the Coercion capability,
3. identical shapes are combined directly,
4. otherwise the Broadcast-Resolution capability is invoked once and the
   operation retried; a pair that still disagrees raises
   `ShapeMismatchError`.

Non-mutating methods write into a clone; methods with a trailing underscore
write through this array's buffer (and therefore through every alias).
The result keeps the element kind of the left operand.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional, Tuple, TypeVar

import numpy as np

from .....domain._errors import ShapeMismatchError
from ..._capabilities import broadcast_compatible, is_scalar
from ..._traversal import map_into

R = TypeVar("R", bound="NDArrayMixinArithmetic")


class NDArrayMixinArithmetic:
    """
    Scalar and elementwise binary operations.

    Notes
    -----
    The host class provides `_as_operand(value)` (coercion of foreign
    values), `clone()`, `broadcast_to(...)` and the header properties.
    """

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _map_clone(self: R, fn: Callable[[Any], Any]) -> R:
        out = self.clone()
        map_into(out, fn)
        return out

    def _map_self(self: R, fn: Callable[[Any], Any]) -> R:
        map_into(self, fn)
        return self

    def _aligned(self: R, other: Any, op: str) -> Tuple[R, R]:
        other = self._as_operand(other)
        if other.shape == self.shape:
            return self, other
        a, b = broadcast_compatible(self, other)
        if a.shape != b.shape:
            raise ShapeMismatchError(op, a.shape, b.shape)
        return a, b

    def _binary(self: R, other: Any, fn: Callable[[Any, Any], Any], op: str) -> R:
        if is_scalar(other):
            return self._map_clone(lambda x: fn(x, other))
        a, b = self._aligned(other, op)
        out = a.clone()
        map_into(out, fn, b)
        return out

    def _binary_(self: R, other: Any, fn: Callable[[Any, Any], Any], op: str) -> R:
        if is_scalar(other):
            return self._map_self(lambda x: fn(x, other))
        a, b = self._aligned(other, op)
        if a.shape != self.shape:
            raise ShapeMismatchError(op, self.shape, b.shape)
        map_into(self, fn, b)
        return self

    # ------------------------------------------------------------------
    # Binary elementwise
    # ------------------------------------------------------------------
    def add(self: R, other: Any) -> R:
        """Elementwise `self + other` (scalar, same shape or broadcastable)."""
        return self._binary(other, operator.add, "add")

    def sub(self: R, other: Any) -> R:
        """Elementwise `self - other`."""
        return self._binary(other, operator.sub, "sub")

    def element_multiply(self: R, other: Any) -> R:
        """Elementwise product; a plain number scales the array."""
        if is_scalar(other):
            return self.scale(other)
        return self._binary(other, operator.mul, "element_multiply")

    def add_(self: R, other: Any) -> R:
        """In-place `self += other`. Broadcasting may not change `self`'s shape."""
        return self._binary_(other, operator.add, "add_")

    def sub_(self: R, other: Any) -> R:
        """In-place `self -= other`."""
        return self._binary_(other, operator.sub, "sub_")

    def add_scaled(self: R, other: Any, factor: Any) -> R:
        """
        Return `self + factor * other`.

        Raises
        ------
        ShapeMismatchError
            If the shapes are not identical (no broadcasting).
        """
        other = self._as_operand(other)
        if other.shape != self.shape:
            raise ShapeMismatchError("add_scaled", self.shape, other.shape)
        out = self.clone()
        map_into(out, lambda x, y: x + factor * y, other)
        return out

    def add_scaled_(self: R, other: Any, factor: Any) -> R:
        """In-place `self += factor * other`; identical shapes required."""
        other = self._as_operand(other)
        if other.shape != self.shape:
            raise ShapeMismatchError("add_scaled_", self.shape, other.shape)
        map_into(self, lambda x, y: x + factor * y, other)
        return self

    # ------------------------------------------------------------------
    # Scalar maps
    # ------------------------------------------------------------------
    def scale(self: R, factor: Any) -> R:
        return self._map_clone(lambda x: x * factor)

    def pre_scale(self: R, factor: Any) -> R:
        return self._map_clone(lambda x: factor * x)

    def scale_(self: R, factor: Any) -> R:
        return self._map_self(lambda x: x * factor)

    def pre_scale_(self: R, factor: Any) -> R:
        return self._map_self(lambda x: factor * x)

    def element_divide(self: R, divisor: Optional[Any] = None) -> R:
        """
        Divide every element by `divisor`, or take reciprocals if omitted.

        Integer arrays keep their kind: quotients are truncated on write.
        """
        if divisor is None:
            return self._map_clone(lambda x: 1 / x)
        return self._map_clone(lambda x: x / divisor)

    def negate(self: R) -> R:
        return self._map_clone(operator.neg)

    def square(self: R) -> R:
        return self._map_clone(lambda x: x * x)

    def element_pow(self: R, exponent: Any) -> R:
        """Raise every element to `exponent`, computed in float64."""
        return self._map_clone(lambda x: np.power(np.float64(x), exponent))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __add__(self: R, other: Any) -> R:
        return self.add(other)

    def __radd__(self: R, other: Any) -> R:
        return self.add(other)

    def __sub__(self: R, other: Any) -> R:
        return self.sub(other)

    def __rsub__(self: R, other: Any) -> R:
        return self.negate().add(other)

    def __mul__(self: R, other: Any) -> R:
        return self.element_multiply(other)

    def __rmul__(self: R, other: Any) -> R:
        if is_scalar(other):
            return self.pre_scale(other)
        return self.element_multiply(other)

    def __truediv__(self: R, other: Any) -> R:
        if not is_scalar(other):
            return NotImplemented
        return self.element_divide(other)

    def __neg__(self: R) -> R:
        return self.negate()
