"""
Element-kind enumeration for ndstride arrays.

Every NDArray stores elements of exactly one kind, fixed at construction.
The enumeration lives in the domain layer so that protocols and dispatch
keys can refer to it without importing NumPy; the concrete trait table
(dtype, zero, one, cast) is defined in the infrastructure layer.
"""

from __future__ import annotations

from enum import Enum


class ElementKind(Enum):
    """
    Enumerated element kinds supported by the array engine.

    Members
    -------
    INT64   : 64-bit signed integer
    FLOAT32 : 32-bit IEEE float
    FLOAT64 : 64-bit IEEE float (the only kind supported by linear algebra)
    OBJECT  : arbitrary boxed Python value
    """

    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    OBJECT = "object"

    @classmethod
    def parse(cls, value: "ElementKind | str") -> "ElementKind":
        """
        Resolve an `ElementKind` from an enum member or its string tag.

        Raises
        ------
        ValueError
            If `value` names no known kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise ValueError(
                f"Unknown element kind {value!r}; expected one of: {known}"
            ) from None

    def is_floating(self) -> bool:
        return self in (ElementKind.FLOAT32, ElementKind.FLOAT64)

    def __str__(self) -> str:
        return self.value
