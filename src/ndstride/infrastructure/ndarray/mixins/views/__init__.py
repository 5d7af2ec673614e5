"""
Zero-copy view operations for NDArray.

Slicing (`slice_along`, `row_major_slice`, `get_row`, `get_column`, ...),
restriding (`transpose`, `main_diagonal`, `subvector`, `reshape_restride`),
`reshape` and zero-stride `broadcast_to`. Every result shares the source
buffer.

Public API
----------
- ``NDArrayMixinViews``
"""

from ._base import NDArrayMixinViews

__all__ = [
    NDArrayMixinViews.__name__,
]
