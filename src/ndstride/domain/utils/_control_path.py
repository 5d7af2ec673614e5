"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on a runtime attribute of the
receiver (its *state*), e.g. the element kind of an array.

Core idea
---------
- A class declares a *base* method; its name and docstring become canonical.
- Implementations are registered per `(ClassName, MethodName, StateVal)`.
- The first registration replaces the base method with a dispatcher that
  reads `getattr(self, state_attr)` and calls the matching implementation as
  an ordinary bound method (`impl(self, *args, **kwargs)`).

Important notes
---------------
- Each builder owns its own registry; different builders never share paths.
- When no implementation is registered for the current state, the
  dispatcher raises `NotImplementedError`, or the exception produced by the
  builder's `trap_exception` factory.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Optional, Type
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])
"""Identifies one control path: owning class, base method and state value."""

TrapFactory = Callable[[Callable[..., Any], Any], BaseException]
"""Builds the exception raised when no control path matches the state."""


def create_path_builder(
    state_attr: str = "_state",
    trap_exception: Optional[TrapFactory] = None,
) -> Callable[
    [Type, Callable[P, R], Hashable],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a "path builder" used to register stateful control paths.

    The returned function is used like this:

        manager = create_path_builder("kind")

        class MyArray:
            def determinant(self): ...

        @manager(MyArray, MyArray.determinant, ElementKind.FLOAT64)
        def determinant_float64(self): ...

    Parameters
    ----------
    state_attr : str
        Name of the attribute read on the receiver to select a path.
    trap_exception : Optional[TrapFactory]
        Called as `trap_exception(method, state)` when no path matches; the
        returned exception is raised. Defaults to `NotImplementedError`.

    Returns
    -------
    Callable
        `(cls, method, state) -> decorator`.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    installed: Dict[tuple, Callable] = {}

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator registering a control path for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The control-path state must be hashable. Got {state!r}"
            ) from None

        name = method.__name__
        # A previously installed dispatcher wraps the original base method.
        base = getattr(method, "__wrapped__", method)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[MethodKey(cls.__name__, name, state)] = sub_method

            if (cls, name) in installed:
                return sub_method

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                try:
                    cur = getattr(self, state_attr)
                except AttributeError:
                    raise NotImplementedError(
                        f"{type(self)!r} is missing attribute {state_attr!r}"
                    ) from None
                sm = methods_map.get(MethodKey(cls.__name__, name, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if trap_exception is not None:
                    raise trap_exception(base, cur)
                raise NotImplementedError(
                    f"Missing control path (state={cur!r}) for {base!r}"
                )

            installed[(cls, name)] = wrapper
            setattr(cls, name, wrapper)
            return sub_method

        return decorator

    return templator
