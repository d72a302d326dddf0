from __future__ import annotations

from typing import Iterable, Tuple


class UnknownParameterError(NameError):
    """Raised when a parameter name is not provided by any source.

    This happens either eagerly, from :meth:`Injector.eager_dispatch` (in which case
    the message is just the missing name), or lazily, when something is done with the
    :class:`UnknownInjectable` that :meth:`Injector.dispatch` injected in its place.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = message if name is None else name


class CyclicDependencyError(RuntimeError):
    """Raised when resolving a name requires resolving that same name again."""

    def __init__(self, path: Iterable[str]) -> None:
        self.path: Tuple[str, ...] = tuple(path)
        super().__init__(f"Cyclic dependency detected: {' -> '.join(self.path)}")
