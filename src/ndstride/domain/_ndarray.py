"""
NDArray interface definitions.

This module defines the domain-level contracts for strided arrays using
structural typing:

- `IShapeQuery` is the minimal capability a *foreign* array-like object must
  expose to be read by the engine (constructors, coercion fallbacks).
- `INDArray` is the surface of the concrete strided array: the
  `(buffer, shape, strides, offset)` header plus its element kind.

Notes
-----
Both protocols are `runtime_checkable` so infrastructure code can test for
the capability instead of a concrete class (`isinstance(x, IShapeQuery)`).
Runtime checks only verify member presence, not signatures.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Union, runtime_checkable

from .types._element_kind import ElementKind

Number = Union[int, float]


@runtime_checkable
class IShapeQuery(Protocol):
    """
    Shape-Query capability.

    Any source array that should be readable by the engine exposes its shape,
    its rank, and element access by multi-index.
    """

    def get_shape(self) -> Sequence[int]:
        """
        Return the ordered extents of the source.

        Returns
        -------
        Sequence[int]
            One non-negative extent per axis.
        """
        ...

    def dimensionality(self) -> int:
        """Return the number of axes (rank) of the source."""
        ...

    def get(self, indices: Sequence[int]) -> Any:
        """
        Return the element stored at `indices`.

        Parameters
        ----------
        indices : Sequence[int]
            One index per axis; an empty sequence addresses a rank-0 source.
        """
        ...


@runtime_checkable
class INDArray(IShapeQuery, Protocol):
    """
    Strided N-dimensional array interface.

    An `INDArray` is a header `(shape, strides, offset)` over a linear buffer
    holding elements of a single `ElementKind`. Several headers (views) may
    share one buffer.
    """

    @property
    def data(self) -> Any:
        """The linear buffer shared by every view of this array."""
        ...

    @property
    def shape(self) -> tuple[int, ...]:
        """Per-axis extents."""
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """Per-axis element steps through the buffer."""
        ...

    @property
    def offset(self) -> int:
        """Flat buffer position of the element at the all-zero index."""
        ...

    @property
    def rank(self) -> int:
        """Number of axes."""
        ...

    @property
    def kind(self) -> ElementKind:
        """Element kind of the underlying buffer."""
        ...

    def clone(self) -> "INDArray":
        """Return an independent, packed copy of this array."""
        ...

    def element_count(self) -> int:
        """Return the number of logical elements."""
        ...

    def is_packed(self) -> bool:
        """Return True if the strides equal the row-major strides of the shape."""
        ...
