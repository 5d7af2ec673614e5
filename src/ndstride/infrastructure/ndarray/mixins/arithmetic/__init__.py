"""
Elementwise arithmetic for NDArray.

This package aggregates the scalar maps (`scale`, `pre_scale`, `negate`,
`square`, `element_pow`, `element_divide`), the binary elementwise family
(`add`, `sub`, `element_multiply`, `add_scaled` and their in-place forms)
and the Python operator overloads built on them.

Public API
----------
- ``NDArrayMixinArithmetic``
"""

from ._base import NDArrayMixinArithmetic

__all__ = [
    NDArrayMixinArithmetic.__name__,
]
