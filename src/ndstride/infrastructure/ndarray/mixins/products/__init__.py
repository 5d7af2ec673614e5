"""
Matrix multiplication and fused-product kernels for NDArray.

Public API
----------
- ``NDArrayMixinProducts``
- ``accumulate_product`` : the shared `c += f * a @ b` kernel
"""

from ._base import NDArrayMixinProducts, accumulate_product

__all__ = [
    NDArrayMixinProducts.__name__,
    accumulate_product.__name__,
]
