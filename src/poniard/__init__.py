"""Parameter name based dependency injection.

Functions declare what they need simply by naming their parameters::

    def show(user, renderer):
        return renderer(user)

and an :class:`Injector` calls them with values looked up, by name, in an ordered
list of *sources*:

- `Mapping`: a fixed table of ``{name: value}`` pairs.
- any other object: its public attributes.  Methods are dispatched through the
  same injector, so they can ask for parameters of their own.
- anything implementing the :class:`Source` protocol (`provides` / `resolve`).

`Injector.dispatch` passes an :class:`UnknownInjectable` for names nobody
provides (failing only if it is actually used), while `Injector.eager_dispatch`
raises :class:`UnknownParameterError` straight away.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("poniard")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "uninstalled"

from ._exceptions import CyclicDependencyError, UnknownParameterError
from ._injector import INJECTOR_NAME, Injector
from ._sources import MappingSource, ObjectSource, OverrideSource, Source
from ._unknown import UnknownInjectable, is_unknown
from ._util import _compiled, injectable_parameters

__all__ = [
    "INJECTOR_NAME",
    "CyclicDependencyError",
    "Injector",
    "MappingSource",
    "ObjectSource",
    "OverrideSource",
    "Source",
    "UnknownInjectable",
    "UnknownParameterError",
    "_compiled",
    "injectable_parameters",
    "is_unknown",
]
