"""
Capability contracts consumed by the array engine.

The NDArray core plugs into a larger array-operations façade. The façade owns
three capabilities that the core only *calls*:

- broadcast resolution for binary elementwise ops on mismatched shapes,
- coercion of foreign representations into this engine's arrays,
- a registry of named unary maths functions.

They are described here as callable protocols so the infrastructure layer can
accept any conforming callable at registration time.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable

from ._ndarray import INDArray


@runtime_checkable
class BroadcastResolver(Protocol):
    """
    Broadcast-Resolution capability.

    Given two arrays of differing shapes, return a pair of arrays (typically
    views) sharing a common shape.
    """

    def __call__(self, a: INDArray, b: INDArray) -> Tuple[INDArray, INDArray]: ...


@runtime_checkable
class Coercer(Protocol):
    """
    Coercion capability.

    Convert `value` (a foreign representation) into an array of the same
    representation and element kind as `like`.
    """

    def __call__(self, like: INDArray, value: Any) -> INDArray: ...


@runtime_checkable
class MathsFunction(Protocol):
    """A named unary numeric function applied elementwise."""

    def __call__(self, x: Any) -> Any: ...
