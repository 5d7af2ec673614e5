from ._base import NDArrayMixinReduction

__all__ = [
    NDArrayMixinReduction.__name__,
]
