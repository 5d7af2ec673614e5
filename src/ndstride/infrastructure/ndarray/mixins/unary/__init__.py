"""
Named unary maths functions for NDArray.

Importing this package installs a cloning method ``name()`` and an in-place
method ``name_()`` on `NDArrayMixinUnary` for every entry of the maths
function registry. `register_maths_function` adds entries at runtime.

Public API
----------
- ``NDArrayMixinUnary``
- ``register_maths_function``
"""

from ._base import NDArrayMixinUnary, register_maths_function

__all__ = [
    NDArrayMixinUnary.__name__,
    register_maths_function.__name__,
]
