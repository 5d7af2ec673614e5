"""
NDArray memory / construction mixin.

This module defines `NDArrayMixinMemory`, a focused mixin that provides the
factory constructors (empty/zeroed/from_source/identity/...) and the
memory-movement helpers (clone, fill, NumPy interop) for the concrete
`NDArray`.

Design intent
-------------
- Keep buffer allocation in one place: every constructor allocates a packed
  row-major buffer through the element-kind trait table.
- New arrays are built through `cls` / `type(self)` so the mixin never
  imports the concrete class.

Notes
-----
- The mixin assumes the concrete class provides the header properties
  (`data`, `shape`, `strides`, `offset`, `kind`, `rank`), `_traits()`,
  `_as_operand(...)` and `element_count()`.
- `clone()` always packs, whatever the layout of the source view.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Type, TypeVar, Union

import numpy as np

from .....domain._errors import InvalidShapeError, ShapeMismatchError
from .....domain.types._element_kind import ElementKind
from ..._capabilities import as_shape_query
from ..._element_kinds import kind_from_dtype, resolve_kind, traits_for
from ..._strides import element_count, normalize_shape, row_major_strides
from ..._traversal import map_into, walk, walk_indices

A = TypeVar("A", bound="NDArrayMixinMemory")

KindLike = Optional[Union[ElementKind, str]]


def _header_strides(shape: Sequence[int]) -> tuple:
    # rank 0 keeps empty strides; the (1,) sentinel only describes the buffer
    return row_major_strides(shape) if len(shape) else ()


class NDArrayMixinMemory:
    """
    Mixin implementing array construction and memory-management helpers.

    Provides:

    - Factory constructors: `empty`, `zeroed`, `from_source`, `from_numpy`,
      `identity`, `diagonal_matrix`
    - Same-kind constructors: `new_vector`, `new_matrix`
    - Memory utilities: `clone`, `fill`, `copy_from`, `copy_from_numpy`,
      `to_numpy`
    """

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def _allocate(cls: Type[A], shape: Sequence[int], kind: KindLike, zeroed: bool) -> A:
        shape = normalize_shape(shape)
        traits = traits_for(resolve_kind(kind))
        buf = traits.allocate(element_count(shape), zeroed)
        return cls(buf, shape, _header_strides(shape), 0, traits.kind)

    @classmethod
    def empty(cls: Type[A], shape: Sequence[int], kind: KindLike = None) -> A:
        """
        Create a packed array of `shape` with uninitialized contents.

        Parameters
        ----------
        shape : Sequence[int]
            Non-negative extents.
        kind : ElementKind or str, optional
            Element kind; defaults to the configured default kind.

        Raises
        ------
        InvalidShapeError
            If an extent is negative or not an integer.
        """
        return cls._allocate(shape, kind, zeroed=False)

    @classmethod
    def zeroed(cls: Type[A], shape: Sequence[int], kind: KindLike = None) -> A:
        """Create a packed array of `shape` whose elements equal the kind's zero."""
        return cls._allocate(shape, kind, zeroed=True)

    @classmethod
    def from_source(cls: Type[A], data: Any, kind: KindLike = None) -> A:
        """
        Create a packed array holding a copy of `data`.

        `data` is read through the Shape-Query capability: another array, any
        `IShapeQuery` implementation, a NumPy array, nested lists/tuples or a
        scalar.

        Parameters
        ----------
        data : Any
            The source.
        kind : ElementKind or str, optional
            Element kind of the result. Defaults to the source's kind when it
            has one (arrays, NumPy arrays), otherwise to the configured
            default kind.

        Raises
        ------
        InvalidShapeError
            If the source reports an inconsistent or ragged shape.
        """
        src = as_shape_query(data)
        if kind is None:
            if isinstance(data, NDArrayMixinMemory):
                kind = data.kind
            elif isinstance(data, np.ndarray):
                kind = kind_from_dtype(data.dtype)

        shape = normalize_shape(src.get_shape())
        if src.dimensionality() != len(shape):
            raise InvalidShapeError(
                shape,
                f"source reports dimensionality {src.dimensionality()} "
                f"for a rank-{len(shape)} shape",
            )

        out = cls.empty(shape, kind)
        if isinstance(src, NDArrayMixinMemory):
            map_into(out, lambda _, v: v, src)
            return out

        data_out = out.data
        for idx, (pos,) in zip(walk_indices(shape), walk(shape, out)):
            data_out[pos] = src.get(idx)
        return out

    @classmethod
    def from_numpy(cls: Type[A], arr: Any) -> A:
        """Create an array from a NumPy array, inferring the kind from its dtype."""
        arr = np.asarray(arr)
        return cls.from_source(arr, kind=kind_from_dtype(arr.dtype))

    @classmethod
    def identity(cls: Type[A], n: int, kind: KindLike = None) -> A:
        """Create an `n x n` identity matrix."""
        out = cls.zeroed((n, n), kind)
        one = out._traits().one
        for i in range(int(n)):
            out.data[i * n + i] = one
        return out

    @classmethod
    def diagonal_matrix(cls: Type[A], values: Iterable[Any], kind: KindLike = None) -> A:
        """Create a square matrix with `values` on the main diagonal."""
        diag = list(values)
        n = len(diag)
        out = cls.zeroed((n, n), kind)
        for i, v in enumerate(diag):
            out.data[i * n + i] = v
        return out

    def new_vector(self: A, length: int) -> A:
        """Zeroed rank-1 array of the same kind as `self`."""
        return type(self).zeroed((length,), self.kind)

    def new_matrix(self: A, rows: int, columns: int) -> A:
        """Zeroed rank-2 array of the same kind as `self`."""
        return type(self).zeroed((rows, columns), self.kind)

    # ------------------------------------------------------------------
    # Memory movement
    # ------------------------------------------------------------------
    def clone(self: A) -> A:
        """
        Return an independent, packed copy of this array.

        The copy walks every logical element, so it is correct for any view
        (sliced, transposed, broadcast) and never aliases the source buffer.
        """
        out = type(self).empty(self.shape, self.kind)
        map_into(out, lambda _, v: v, self)
        return out

    def fill(self, value: Any) -> None:
        """
        Set every logical element to `value` (in place).

        Packed arrays are filled as one contiguous buffer range; any other
        layout is filled by a strided walk so that only the elements of this
        view are written.
        """
        data = self.data
        if self.rank == 0:
            data[self.offset] = value
        elif self.is_packed():
            data[self.offset : self.offset + self.element_count()] = value
        else:
            map_into(self, lambda _: value)

    def copy_from(self, other: Any) -> None:
        """
        Copy the elements of `other` into this array (in place).

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._as_operand(other)
        if other.shape != self.shape:
            raise ShapeMismatchError("copy_from", self.shape, other.shape)
        map_into(self, lambda _, v: v, other)

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy an equally shaped NumPy array (or array-like) into this array.

        Works on views: only the logical elements of `self` are written.

        Raises
        ------
        ShapeMismatchError
            If `arr.shape` differs from `self.shape`.
        """
        arr = np.asarray(arr)
        if tuple(arr.shape) != self.shape:
            raise ShapeMismatchError("copy_from_numpy", self.shape, arr.shape)
        flat = np.ravel(arr, order="C")
        data = self.data
        for k, (pos,) in enumerate(walk(self.shape, self)):
            data[pos] = flat[k]

    def to_numpy(self) -> np.ndarray:
        """
        Materialize the logical contents as a new packed `numpy.ndarray`.

        The result never aliases this array's buffer.
        """
        out = np.empty(self.shape, dtype=self._traits().dtype)
        flat = out.reshape(-1)
        data = self.data
        for k, (pos,) in enumerate(walk(self.shape, self)):
            flat[k] = data[pos]
        return out

    def to_nested(self) -> Any:
        """Return the contents as nested Python lists (a scalar for rank 0)."""
        return self.to_numpy().tolist()
