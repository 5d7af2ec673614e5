from ._base import NDArrayMixinComparison

__all__ = [
    NDArrayMixinComparison.__name__,
]
