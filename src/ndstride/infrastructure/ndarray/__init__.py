"""
NumPy-buffer-backed strided array engine.

Public API
----------
- ``NDArray``                     : the concrete strided array
- ``row_major_strides``, ``element_count``, ``is_packed_layout``
- ``walk``, ``map_into``, ``fold_over`` : traversal engine
- capability hooks: ``register_broadcast_resolver``, ``register_coercer``,
  ``register_maths_function``, ``reset_capabilities``
"""

from ._ndarray import NDArray
from ._strides import element_count, is_packed_layout, row_major_strides
from ._traversal import fold_over, map_into, walk, walk_indices
from ._element_kinds import DEFAULT_KIND_ENV, default_element_kind
from ._capabilities import (
    broadcast_compatible,
    coerce,
    register_broadcast_resolver,
    register_coercer,
    reset_capabilities,
)
from .mixins.unary import register_maths_function

__all__ = [
    "DEFAULT_KIND_ENV",
    NDArray.__name__,
    broadcast_compatible.__name__,
    coerce.__name__,
    default_element_kind.__name__,
    element_count.__name__,
    fold_over.__name__,
    is_packed_layout.__name__,
    map_into.__name__,
    register_broadcast_resolver.__name__,
    register_coercer.__name__,
    register_maths_function.__name__,
    reset_capabilities.__name__,
    row_major_strides.__name__,
    walk.__name__,
    walk_indices.__name__,
]
