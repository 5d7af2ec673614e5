"""
Unary maths-function mixin.

`NDArrayMixinUnary` carries one pair of methods per entry of the maths
function registry (`_maths_functions.MATHS_FUNCTIONS`):

- ``name()``  : cloning map, e.g. ``a.exp()``
- ``name_()`` : in-place map, e.g. ``a.exp_()``

The methods are generated when this module is imported and whenever a new
function is added with `register_maths_function`.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from ..._maths_functions import MATHS_FUNCTIONS
from ..._traversal import map_into


class NDArrayMixinUnary:
    """Container for the generated elementwise maths methods."""


def _cloning_map(name: str, fn: Callable[[Any], Any]) -> Callable:
    def method(self):
        out = self.clone()
        map_into(out, lambda x: fn(np.float64(x)))
        return out

    method.__name__ = name
    method.__qualname__ = f"{NDArrayMixinUnary.__name__}.{name}"
    method.__doc__ = f"Return a new array with `{name}` applied to every element."
    return method


def _in_place_map(name: str, fn: Callable[[Any], Any]) -> Callable:
    def method(self):
        map_into(self, lambda x: fn(np.float64(x)))
        return self

    method.__name__ = name + "_"
    method.__qualname__ = f"{NDArrayMixinUnary.__name__}.{name}_"
    method.__doc__ = f"Apply `{name}` to every element in place; returns `self`."
    return method


def _install(name: str, fn: Callable[[Any], Any]) -> None:
    setattr(NDArrayMixinUnary, name, _cloning_map(name, fn))
    setattr(NDArrayMixinUnary, name + "_", _in_place_map(name, fn))


def register_maths_function(name: str, fn: Callable[[Any], Any]) -> None:
    """
    Add (or replace) a named unary function and install its methods.

    Raises
    ------
    ValueError
        If `name` is not a valid identifier.
    TypeError
        If `fn` is not callable.
    """
    if not name.isidentifier() or name.startswith("_"):
        raise ValueError(f"maths function name must be a public identifier, got {name!r}")
    if not callable(fn):
        raise TypeError(f"maths function {name!r} must be callable, got {fn!r}")
    MATHS_FUNCTIONS[name] = fn
    _install(name, fn)


for _name, _fn in MATHS_FUNCTIONS.items():
    _install(_name, _fn)
