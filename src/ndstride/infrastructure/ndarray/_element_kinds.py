"""
Static element-kind trait table.

Each `ElementKind` maps to the NumPy dtype of its buffer and to the values
the generic kernels need (zero, one, cast). The table is built once at import
and never mutated.

Configuration
-------------
`NDSTRIDE_DEFAULT_KIND` selects the kind used by constructors when no kind is
given (`int64`, `float32`, `float64`, `object`; default `float64`).
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

import numpy as np

from ...domain.types._element_kind import ElementKind

DEFAULT_KIND_ENV = "NDSTRIDE_DEFAULT_KIND"
FALLBACK_KIND = ElementKind.FLOAT64


@dataclass(frozen=True)
class ElementTraits:
    """
    Per-kind constants used by constructors and kernels.

    Attributes
    ----------
    kind : ElementKind
        The kind these traits describe.
    dtype : np.dtype
        Dtype of the backing NumPy buffer.
    zero, one : Any
        Additive and multiplicative identities.
    cast : Callable[[Any], Any]
        Converts an arbitrary scalar to the kind's representation.
    """

    kind: ElementKind
    dtype: np.dtype
    zero: Any
    one: Any
    cast: Callable[[Any], Any]

    def allocate(self, length: int, zeroed: bool) -> np.ndarray:
        """Allocate a flat buffer of `length` elements."""
        if zeroed:
            if self.kind is ElementKind.OBJECT:
                return np.full(length, self.zero, dtype=self.dtype)
            return np.zeros(length, dtype=self.dtype)
        return np.empty(length, dtype=self.dtype)


def _identity(x: Any) -> Any:
    return x


ELEMENT_TRAITS: Mapping[ElementKind, ElementTraits] = MappingProxyType(
    {
        ElementKind.INT64: ElementTraits(
            ElementKind.INT64, np.dtype(np.int64), np.int64(0), np.int64(1), np.int64
        ),
        ElementKind.FLOAT32: ElementTraits(
            ElementKind.FLOAT32,
            np.dtype(np.float32),
            np.float32(0.0),
            np.float32(1.0),
            np.float32,
        ),
        ElementKind.FLOAT64: ElementTraits(
            ElementKind.FLOAT64,
            np.dtype(np.float64),
            np.float64(0.0),
            np.float64(1.0),
            np.float64,
        ),
        ElementKind.OBJECT: ElementTraits(
            ElementKind.OBJECT, np.dtype(object), 0.0, 1.0, _identity
        ),
    }
)


def traits_for(kind: ElementKind) -> ElementTraits:
    return ELEMENT_TRAITS[kind]


def kind_from_dtype(dtype: Any) -> ElementKind:
    """
    Map a NumPy dtype onto the closest element kind.

    Booleans and narrower integers widen to INT64, float16 widens to FLOAT32,
    anything non-numeric becomes OBJECT.
    """
    dtype = np.dtype(dtype)
    if dtype == np.float64:
        return ElementKind.FLOAT64
    if dtype.kind == "f":
        return ElementKind.FLOAT32 if dtype.itemsize <= 4 else ElementKind.FLOAT64
    if dtype.kind in "biu":
        return ElementKind.INT64
    return ElementKind.OBJECT


def default_element_kind() -> ElementKind:
    """
    Return the configured default element kind.

    Reads `NDSTRIDE_DEFAULT_KIND`; an unrecognised value is reported with a
    `RuntimeWarning` and FLOAT64 is used instead.
    """
    raw = os.environ.get(DEFAULT_KIND_ENV, "")
    if not raw:
        return FALLBACK_KIND
    try:
        return ElementKind.parse(raw)
    except ValueError as e:
        warnings.warn(
            f"Ignoring {DEFAULT_KIND_ENV}={raw!r}; "
            f"falling back to {FALLBACK_KIND.value}. Reason: {e}",
            RuntimeWarning,
            stacklevel=2,
        )
        return FALLBACK_KIND


def resolve_kind(kind: Optional[Union[ElementKind, str]]) -> ElementKind:
    """Resolve an optional kind argument, applying the configured default."""
    if kind is None:
        return default_element_kind()
    return ElementKind.parse(kind)
