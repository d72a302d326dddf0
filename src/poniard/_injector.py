from __future__ import annotations

from contextvars import ContextVar
from functools import wraps
from inspect import Parameter, Signature, isgeneratorfunction
from logging import getLogger
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterable,
    Literal,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    overload,
)

from ._exceptions import CyclicDependencyError, UnknownParameterError
from ._sources import MappingSource, OverrideSource, Source, as_source
from ._uncompiled import _wrap_generator
from ._unknown import UnknownInjectable
from ._util import callable_name, injectable_parameters

if TYPE_CHECKING:
    from typing_extensions import ParamSpec

    P = ParamSpec("P")

logger = getLogger("poniard")

R = TypeVar("R")

#: Every injector provides itself under this name.
INJECTOR_NAME = "injector"

_VARIADIC = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)

# (injector, name) pairs currently being resolved in this context, outermost first
_RESOLVING: ContextVar[Tuple[Tuple[Injector, str], ...]] = ContextVar(
    "poniard_resolving", default=()
)


class Injector:
    """A parameter name based dependency injector.

    Figures out which arguments to call a function with based on the *names* of
    its parameters.  Values are looked up in an ordered list of sources; the
    first source that provides a name wins.

    A source may be:

    - a mapping of ``{name: value}`` pairs.  A value of `None` is a valid value.
    - any object implementing the :class:`Source` protocol (`provides` and
      `resolve`), used as is.
    - any other object, whose public attributes become the provided names.  Methods
      on such an object are themselves dispatched through this injector, so they
      may declare parameters of their own.

    The injector is always available to dispatched functions via a parameter named
    ``injector``.

    Parameters
    ----------
    sources : Iterable[Any]
        Sources to look up parameter values in, highest priority first.

    Examples
    --------
    >>> def greet(printer, name):
    ...     printer(f"hello {name}!")
    >>> Injector([{"printer": print, "name": "bob"}]).dispatch(greet)
    hello bob!
    """

    __slots__ = ("_sources",)

    def __init__(self, sources: Iterable[Any] = ()) -> None:
        chain = [as_source(self, source) for source in sources]
        chain.append(MappingSource({INJECTOR_NAME: self}))
        self._sources: Tuple[Source, ...] = tuple(chain)

    def __repr__(self) -> str:
        return f"Injector({list(self._sources[:-1])!r})"

    @property
    def sources(self) -> Tuple[Source, ...]:
        """Return the (immutable) source chain, including the reflexive source."""
        return self._sources

    # ------------------------- Dispatch -------------------------------------

    def dispatch(
        self, func: Callable[..., R], overrides: Mapping[str, Any] | None = None
    ) -> R:
        """Call `func` with arguments looked up by parameter name.

        If a parameter is not provided by any source, an :class:`UnknownInjectable`
        is passed in its place, even if the parameter declares a default.  Using it
        in any way raises :class:`UnknownParameterError`.

        Parameters
        ----------
        func : Callable
            The function (or method, class, partial...) to call.
        overrides : Optional[Mapping[str, Any]]
            Values that take precedence over every source, for this call and for
            every nested resolution it triggers.

        Returns
        -------
        Any
            Whatever `func` returns.

        Raises
        ------
        CyclicDependencyError
            If resolving a name requires resolving that same name again.
        """
        return self._dispatch(func, injectable_parameters(func), overrides, False)

    def eager_dispatch(
        self, func: Callable[..., R], overrides: Mapping[str, Any] | None = None
    ) -> R:
        """Same as :meth:`dispatch`, but fail fast on unknown parameters.

        Raises
        ------
        UnknownParameterError
            Immediately, for the first parameter that no source provides.  `func`
            is not called.
        CyclicDependencyError
            If resolving a name requires resolving that same name again.
        """
        return self._dispatch(func, injectable_parameters(func), overrides, True)

    # ------------------------- Decorator -------------------------------------

    @overload
    def inject(self, func: Callable[P, R], *, eager: bool = False) -> Callable[..., R]:
        ...

    @overload
    def inject(
        self, func: Literal[None] | None = None, *, eager: bool = False
    ) -> Callable[[Callable[P, R]], Callable[..., R]]:
        ...

    def inject(
        self, func: Callable[P, R] | None = None, *, eager: bool = False
    ) -> Callable[..., R] | Callable[[Callable[P, R]], Callable[..., R]]:
        """Decorate `func` so that calling it dispatches it through this injector.

        Any arguments passed explicitly when calling the decorated function are
        used as overrides for that call, so they also reach nested resolutions.
        Variadic parameters (``*args``, ``**kwargs``) cannot be injected, so passing
        values to them raises a `TypeError`.

        Parameters
        ----------
        func : Callable
            A function to decorate. If not provided, a decorator is returned.
        eager : bool
            Use :meth:`eager_dispatch` semantics instead of :meth:`dispatch`, by
            default False.

        Returns
        -------
        Callable
            A function with dependencies injected.

        Examples
        --------
        >>> injector = Injector([{"name": "bob"}])
        >>> @injector.inject
        ... def greet(name):
        ...     return f"hello {name}"
        >>> greet()
        'hello bob'
        >>> greet(name="alice")
        'hello alice'
        """

        def _deco(func: Callable[P, R]) -> Callable[..., R]:
            sig = Signature.from_callable(func)
            params = injectable_parameters(func)
            variadic = [p.name for p in sig.parameters.values() if p.kind in _VARIADIC]

            @wraps(func)
            def _exec(*args: Any, **kwargs: Any) -> R:
                bound = sig.bind_partial(*args, **kwargs)
                for name in variadic:
                    if bound.arguments.get(name):
                        raise TypeError(
                            f"{callable_name(func)}() got arguments for variadic "
                            f"parameter {name!r}, which cannot be injected"
                        )
                return self._dispatch(func, params, bound.arguments, eager)

            # if it came in as a generatorfunction, it needs to go out as one.
            if isgeneratorfunction(func):
                return _wrap_generator(func, _exec)  # type: ignore [arg-type]
            return _exec

        return _deco(func) if func is not None else _deco

    # ----------------------  Private methods ----------------------- #

    def _dispatch(
        self,
        func: Callable[..., R],
        params: Tuple[Parameter, ...],
        overrides: Optional[Mapping[str, Any]],
        eager: bool,
    ) -> R:
        _fname = callable_name(func)
        overrides = dict(overrides or {})
        logger.debug("Dispatching %s with overrides %r", _fname, overrides)
        sources = (OverrideSource(overrides), *self._sources)

        args: list = []
        kwargs: dict = {}
        for param in params:
            name = param.name
            source = next((s for s in sources if s.provides(name)), None)
            if source is not None:
                value = self._resolve(source, name, overrides)
                logger.debug("  injecting %s from %r = %r", name, source, value)
            elif eager:
                logger.debug("  %s not provided by any source", name)
                raise UnknownParameterError(name)
            else:
                logger.debug("  %s not provided by any source", name)
                value = UnknownInjectable(name)

            if param.kind is Parameter.KEYWORD_ONLY:
                kwargs[name] = value
            else:
                args.append(value)

        logger.debug("  Calling %s with %r, %r", _fname, args, kwargs)
        return func(*args, **kwargs)

    def _resolve(self, source: Source, name: str, overrides: Mapping[str, Any]) -> Any:
        # mappings only look up stored values and can never recurse
        if isinstance(source, MappingSource):
            return source.resolve(name, overrides)

        resolving = _RESOLVING.get()
        for n, (injector, _name) in enumerate(resolving):
            if injector is self and _name == name:
                path = [_name for _, _name in resolving[n:]]
                raise CyclicDependencyError([*path, name])

        token = _RESOLVING.set((*resolving, (self, name)))
        try:
            return source.resolve(name, overrides)
        finally:
            _RESOLVING.reset(token)
