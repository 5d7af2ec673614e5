"""
Construction and memory-movement operations for NDArray.

This package provides `NDArrayMixinMemory`, which groups the factory
constructors and buffer-level helpers:

- `empty`, `zeroed`, `from_source`, `from_numpy` : packed constructors
- `identity`, `diagonal_matrix`                   : square-matrix factories
- `new_vector`, `new_matrix`                      : same-kind zeroed arrays
- `clone`, `fill`, `copy_from`                    : buffer movement
- `to_numpy`, `copy_from_numpy`, `to_nested`      : host interop

Public API
----------
Only `NDArrayMixinMemory` is re-exported.
"""

from ._base import NDArrayMixinMemory

__all__ = [
    NDArrayMixinMemory.__name__,
]
