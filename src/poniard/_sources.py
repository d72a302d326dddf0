from __future__ import annotations

from inspect import getattr_static, isroutine
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ._injector import Injector

Overrides = Mapping[str, Any]

_MISSING = object()


@runtime_checkable
class Source(Protocol):
    """Anything that can supply values for parameter names.

    Objects implementing this protocol may be passed directly to
    :class:`Injector`; they are used as is rather than being wrapped.
    """

    def provides(self, name: str) -> bool:
        """Return True if this source can supply a value for `name`."""

    def resolve(self, name: str, overrides: Overrides) -> Any:
        """Return the value for `name`.

        `overrides` are the per-call overrides of the dispatch that triggered this
        resolution.  Sources that call back into an injector should pass them on.
        """


class MappingSource:
    """A source backed by a fixed snapshot of a name -> value mapping.

    A key mapped to `None` is provided (and resolves to `None`); only missing keys
    are unknown.
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self._mapping = MappingProxyType(dict(mapping))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._mapping)!r})"

    def provides(self, name: str) -> bool:
        return name in self._mapping

    def resolve(self, name: str, overrides: Overrides) -> Any:
        return self._mapping[name]


class OverrideSource(MappingSource):
    """Per-call overrides, consulted ahead of every other source."""

    __slots__ = ()


class ObjectSource:
    """A source backed by the public attributes of an object.

    Methods (and any other routine found on the object) are not returned, they
    are *dispatched* through `injector`, so their own parameters are resolved from
    the full source chain.  Any other attribute value is returned as is.

    Parameters
    ----------
    injector : Injector
        The injector used to dispatch methods found on `obj`.
    obj : Any
        Any object (an instance, a module, a class...).
    """

    __slots__ = ("_injector", "_obj")

    def __init__(self, injector: Injector, obj: Any) -> None:
        self._injector = injector
        self._obj = obj

    def __repr__(self) -> str:
        return f"ObjectSource({self._obj!r})"

    @property
    def obj(self) -> Any:
        """The wrapped object."""
        return self._obj

    def provides(self, name: str) -> bool:
        # static lookup, so properties are only evaluated once, by `resolve`
        if name.startswith("_"):
            return False
        return getattr_static(self._obj, name, _MISSING) is not _MISSING

    def resolve(self, name: str, overrides: Overrides) -> Any:
        capability = getattr(self._obj, name)
        if isroutine(capability):
            return self._injector.dispatch(capability, overrides)
        return capability


def as_source(injector: Injector, obj: Any) -> Source:
    """Adapt `obj` to the :class:`Source` protocol for use by `injector`."""
    if isinstance(obj, Mapping):
        return MappingSource(obj)
    if isinstance(obj, Source) and not isinstance(obj, type):
        return obj
    return ObjectSource(injector, obj)
