from ._element_kind import ElementKind

__all__ = [ElementKind.__name__]
