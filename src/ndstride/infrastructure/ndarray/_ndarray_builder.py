"""
NDArray control-path manager for element-kind dispatch.

This module specialises the generic `create_path_builder` utility with the
state attribute ``"kind"``: method dispatch is performed on the runtime value
of ``self.kind`` of NDArray objects.

Typical usage
-------------
Kind-specific implementations register themselves with this manager:

    @ndarray_control_path_manager(NDArrayMixin, NDArrayMixin.op, ElementKind.FLOAT64)
    def op_float64(self, ...): ...

Calling ``NDArray.op(...)`` on an array whose kind has no registered path
raises `UnsupportedOperationError`.
"""

from typing import Any, Callable

from ...domain._errors import UnsupportedOperationError
from ...domain.utils._control_path import create_path_builder


def _unsupported_kind(method: Callable[..., Any], kind: Any) -> UnsupportedOperationError:
    return UnsupportedOperationError(method.__name__, f"element kind '{kind}'")


# Control-path manager that dispatches NDArray methods based on `self.kind`
ndarray_control_path_manager = create_path_builder(
    "kind", trap_exception=_unsupported_kind
)
