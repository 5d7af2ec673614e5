"""
Reduction mixin: folds over every logical element.
"""

from __future__ import annotations

import operator
from typing import Any

from ..._traversal import fold_over


class NDArrayMixinReduction:
    """Whole-array reductions."""

    def element_sum(self) -> Any:
        """
        Sum of all elements, seeded with the additive identity of the kind.

        An array with no elements sums to that identity.
        """
        return fold_over(self, self._traits().zero, operator.add)

    def element_product(self) -> Any:
        """Product of all elements, seeded with the multiplicative identity."""
        return fold_over(self, self._traits().one, operator.mul)
