"""
Equality kernel.

`matrix_equals` compares two arrays structurally: same shape and equal
elements at every index, whatever their individual layouts. It never raises
on a shape mismatch; it returns False.
"""

from __future__ import annotations

from typing import Any

from .....domain._errors import InvalidShapeError, UnsupportedOperationError
from ..._traversal import walk


class NDArrayMixinComparison:
    """Structural comparison over strided layouts."""

    def matrix_equals(self, other: Any) -> bool:
        """
        Return True if `other` has this array's shape and equal elements.

        Foreign values are read into an array of their own element kind
        first; a value that cannot be read as an array (ragged nesting or a
        string, for example) is simply not equal.
        Elements of different kinds compare by value (`1 == 1.0`). The walk
        stops at the first unequal pair.
        """
        if other is self:
            return True
        if not isinstance(other, NDArrayMixinComparison):
            try:
                other = self._as_operand(other)
            except (InvalidShapeError, UnsupportedOperationError):
                return False
        if self.shape != other.shape:
            return False
        a_data, b_data = self.data, other.data
        for ia, ib in walk(self.shape, self, other):
            if a_data[ia] != b_data[ib]:
                return False
        return True
