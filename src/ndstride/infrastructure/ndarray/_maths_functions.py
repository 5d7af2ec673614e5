"""
Registry of named unary maths functions applied elementwise.

Every entry produces two NDArray methods (see `mixins.unary`):

- `name()`  : returns a new array with the function applied to each element,
- `name_()` : applies the function in place through the shared buffer.

Functions receive each element as a float64 scalar; the result is cast back
to the array's element kind when written. NumPy ufuncs are used so that
domain errors produce NaN/inf with a NumPy `RuntimeWarning` instead of
raising.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

import numpy as np


def _round_half_up(x: Any) -> Any:
    return np.floor(x + 0.5)


DEFAULT_MATHS_FUNCTIONS: Dict[str, Callable[[Any], Any]] = {
    "abs": np.abs,
    "acos": np.arccos,
    "asin": np.arcsin,
    "atan": np.arctan,
    "cbrt": np.cbrt,
    "ceil": np.ceil,
    "cos": np.cos,
    "cosh": np.cosh,
    "exp": np.exp,
    "floor": np.floor,
    "log": np.log,
    "log10": np.log10,
    "round": _round_half_up,
    "signum": np.sign,
    "sin": np.sin,
    "sinh": np.sinh,
    "sqrt": np.sqrt,
    "tan": np.tan,
    "tanh": np.tanh,
    "to_degrees": np.degrees,
    "to_radians": np.radians,
}

MATHS_FUNCTIONS: Dict[str, Callable[[Any], Any]] = dict(DEFAULT_MATHS_FUNCTIONS)
"""Live registry; extended through `register_maths_function`."""
