from __future__ import annotations

from collections.abc import Callable, KeysView
from typing import Any, Generic, ParamSpec, TypeVar, overload

from dency.defaults import DEFAULT_LIFETIME
from dency.types import Lifetime
from dency.validators import DefinitionValidator

P = ParamSpec("P")
T = TypeVar("T")

_VALIDATOR = DefinitionValidator()


class Injectable(Generic[P, T]):
    """Pair a factory with its lifetime and the dependencies it was seen resolving.

    Identity is the object itself: caches are keyed by the ``Injectable``
    instance, never by its factory or name. ``deps`` only grows, and only the
    resolution engine adds to it, while this injectable's factory is running.
    """

    __slots__ = ("_deps", "_factory", "_lifetime", "name")

    def __init__(
        self,
        factory: Callable[P, T],
        *,
        lifetime: Lifetime | str = DEFAULT_LIFETIME,
        name: str | None = None,
    ) -> None:
        self._factory = factory
        self._lifetime = Lifetime.from_value(lifetime)
        self._deps: dict[Injectable[..., Any], None] = {}
        self.name = name if name is not None else _factory_name(factory)

    @property
    def factory(self) -> Callable[P, T]:
        """Callable producing the instance."""
        return self._factory

    @property
    def lifetime(self) -> Lifetime:
        """Cache policy applied by ``inject``."""
        return self._lifetime

    @property
    def deps(self) -> KeysView[Injectable[..., Any]]:
        """Injectables resolved while this factory ran, in first-seen order."""
        return self._deps.keys()

    def _record_dependency(self, dependency: Injectable[..., Any]) -> None:
        self._deps.setdefault(dependency, None)

    def __repr__(self) -> str:
        return f"Injectable({self.name!r}, lifetime={self._lifetime.value})"


def _factory_name(factory: Callable[..., Any]) -> str:
    return getattr(factory, "__qualname__", None) or repr(factory)


@overload
def define_injectable(
    factory: Callable[P, T],
    *,
    lifetime: Lifetime | str = ...,
    name: str | None = ...,
) -> Injectable[P, T]: ...


@overload
def define_injectable(
    factory: None = None,
    *,
    lifetime: Lifetime | str = ...,
    name: str | None = ...,
) -> Callable[[Callable[P, T]], Injectable[P, T]]: ...


def define_injectable(
    factory: Callable[P, T] | None = None,
    *,
    lifetime: Lifetime | str = DEFAULT_LIFETIME,
    name: str | None = None,
) -> Injectable[P, T] | Callable[[Callable[P, T]], Injectable[P, T]]:
    """Define an injectable from a factory, directly or as a decorator.

    Examples:
        .. code-block:: python

            create_config = define_injectable(lambda: {"debug": True})

            @define_injectable(lifetime=Lifetime.SCOPED)
            def create_session(config=None):
                return Session(config or inject(create_config))

    Args:
        factory: Callable producing the instance. It receives the explicit
            arguments passed to ``inject``, or nothing when none are passed.
            Omit it to use ``define_injectable`` as a decorator.
        lifetime: Cache policy, a ``Lifetime`` or its string value.
            Defaults to ``Lifetime.SINGLETON``.
        name: Label used in ``repr`` and log messages. Defaults to the
            factory's qualified name.

    Raises:
        DencyInvalidDefinitionError: If ``factory`` is not callable or
            ``lifetime`` is unknown.

    """
    resolved_lifetime = Lifetime.from_value(lifetime)

    def decorator(decorated_factory: Callable[P, T]) -> Injectable[P, T]:
        _VALIDATOR.validate_factory(decorated_factory)
        return Injectable(decorated_factory, lifetime=resolved_lifetime, name=name)

    if factory is None:
        return decorator
    return decorator(factory)
