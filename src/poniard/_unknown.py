from __future__ import annotations

from typing import Any, NoReturn

from ._exceptions import UnknownParameterError

# operators that would otherwise fall back to `object` defaults (or TypeErrors)
# without ever reaching __getattr__
_INTERCEPTED = (
    "__call__",
    "__getitem__",
    "__setitem__",
    "__delitem__",
    "__iter__",
    "__next__",
    "__len__",
    "__contains__",
    "__enter__",
    "__exit__",
    "__await__",
    "__lt__",
    "__le__",
    "__gt__",
    "__ge__",
    "__add__",
    "__radd__",
    "__sub__",
    "__rsub__",
    "__mul__",
    "__rmul__",
    "__matmul__",
    "__truediv__",
    "__rtruediv__",
    "__floordiv__",
    "__mod__",
    "__pow__",
    "__neg__",
    "__pos__",
    "__abs__",
    "__invert__",
    "__and__",
    "__or__",
    "__xor__",
    "__int__",
    "__float__",
    "__index__",
    "__str__",
    "__bool__",
)


class UnknownInjectable:
    """Stand-in for a parameter that no source could provide.

    :meth:`Injector.dispatch` passes one of these instead of failing, so a function
    only needs the parameters that it actually uses.  This is particularly useful in
    tests: inject just what the code path under test touches, and anything else
    will raise :class:`UnknownParameterError` the moment it is used.

    Examples
    --------
    >>> def handler(user, mailer):
    ...     return user
    >>> Injector([{"user": "bob"}]).dispatch(handler)  # mailer is never touched
    'bob'
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        object.__setattr__(self, "_name", name)

    def __repr__(self) -> str:
        return f"<UnknownInjectable {object.__getattribute__(self, '_name')!r}>"

    def _fail(self, *_: Any, **__: Any) -> NoReturn:
        name = object.__getattribute__(self, "_name")
        raise UnknownParameterError(
            f"Tried to call capability on an uninjected parameter: {name}", name
        )

    def __getattr__(self, _: str) -> NoReturn:
        self._fail()

    def __setattr__(self, _: str, __: Any) -> NoReturn:
        self._fail()

    def __delattr__(self, _: str) -> NoReturn:
        self._fail()


for _dunder in _INTERCEPTED:
    setattr(UnknownInjectable, _dunder, UnknownInjectable._fail)
del _dunder


def is_unknown(obj: Any) -> bool:
    """Return True if `obj` is an :class:`UnknownInjectable` placeholder."""
    return type(obj) is UnknownInjectable
