from __future__ import annotations

from functools import partial
from inspect import Parameter, Signature
from typing import Any, Callable, Tuple

_compiled: bool = not __file__.endswith(".py")

# parameter kinds the injector will try to fill, in the order python binds them
INJECTABLE_KINDS = (
    Parameter.POSITIONAL_ONLY,
    Parameter.POSITIONAL_OR_KEYWORD,
    Parameter.KEYWORD_ONLY,
)


def injectable_parameters(func: Callable) -> Tuple[Parameter, ...]:
    """Return the parameters of `func` that can be filled by name.

    This is a thin wrapper around :meth:`inspect.Signature.from_callable` that drops
    variadic parameters (``*args`` and ``**kwargs``), which have no single name that
    a source could provide.  Bound methods, classes, `functools.partial` objects and
    decorated functions (via ``__wrapped__``) are all supported, exactly as
    `inspect` supports them.

    Parameters
    ----------
    func : Callable
        Any callable object.

    Returns
    -------
    Tuple[Parameter, ...]
        The injectable parameters, in declaration order.

    Raises
    ------
    TypeError
        If `func` is not callable.
    ValueError
        If no signature can be determined for `func` (some builtins).
    """
    sig = Signature.from_callable(func)
    return tuple(p for p in sig.parameters.values() if p.kind in INJECTABLE_KINDS)


def callable_name(func: Any) -> str:
    """Best-effort readable name for `func`, used in log messages."""
    while isinstance(func, partial):
        func = func.func
    return getattr(func, "__qualname__", None) or repr(func)
