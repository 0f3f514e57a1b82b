from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ParamSpec, TypeVar, cast

from dency._internal.context import ContextCell
from dency._internal.injectable import Injectable
from dency.defaults import ROOT_SCOPE_LABEL
from dency.types import Lifetime

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

_MISSING: Any = object()


class Scope:
    """Cache instances of injectables, keyed by injectable identity.

    ``SCOPED`` injectables resolved while this scope is active are cached
    here; ``SINGLETON`` injectables always go to ``root_scope`` and
    ``TRANSIENT`` ones are never cached. The label is for debugging only.

    Examples:
        .. code-block:: python

            request_scope = create_scope("request")
            session = request_scope.inject(create_session)

    """

    __slots__ = ("_instances", "label")

    def __init__(self, label: str | None = None) -> None:
        self.label = label
        self._instances: dict[Injectable[..., Any], Any] = {}

    @property
    def instances(self) -> Mapping[Injectable[..., Any], Any]:
        """Read-only view of the cached instances."""
        return MappingProxyType(self._instances)

    def get(self, injectable: Injectable[..., T], default: Any = None) -> T | Any:
        """Return the cached instance of ``injectable`` or ``default``."""
        return self._instances.get(injectable, default)

    def has(self, injectable: Injectable[..., Any]) -> bool:
        """Return whether an instance of ``injectable`` is cached."""
        return injectable in self._instances

    def set(self, injectable: Injectable[..., T], instance: T) -> None:
        """Cache ``instance`` for ``injectable``, replacing any previous one."""
        self._instances[injectable] = instance

    def discard(self, injectable: Injectable[..., Any]) -> None:
        """Drop the cached instance of ``injectable``, if any."""
        self._instances.pop(injectable, None)

    def reset(self) -> None:
        """Drop every cached instance. Instances are not disposed."""
        logger.debug("Resetting %r (%d cached instances)", self, len(self._instances))
        self._instances.clear()

    def inject(self, injectable: Injectable[P, T], *args: P.args, **kwargs: P.kwargs) -> T:
        """Resolve ``injectable`` with this scope as the active scope.

        At an entry point ``injectable`` becomes the resolving parent; inside
        another factory the current parent is kept so the edge lands on it.
        """
        parent = _ambient.get().parent
        context = ResolutionContext(
            scope=self,
            parent=parent if parent is not None else injectable,
        )
        return _ambient.run(context, lambda: inject(injectable, *args, **kwargs))

    def use(self, injectable: Injectable[..., T]) -> T | None:
        """Return the cached instance visible from this scope, if any."""
        return _ambient.run(ResolutionContext(scope=self), lambda: use(injectable))

    def __contains__(self, injectable: object) -> bool:
        return injectable in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __repr__(self) -> str:
        if self.label is None:
            return f"Scope(at {id(self):#x})"
        return f"Scope({self.label!r})"


def create_scope(label: str | None = None) -> Scope:
    """Create a new scope with an empty cache."""
    return Scope(label)


root_scope = Scope(ROOT_SCOPE_LABEL)
"""Process-wide scope holding every ``SINGLETON`` instance."""


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Ambient binding consulted by ``inject`` and ``use``.

    ``scope`` is where ``SCOPED`` instances are cached and ``parent`` is the
    injectable whose factory is currently running, if any.
    """

    scope: Scope
    parent: Injectable[..., Any] | None = None


_ambient: ContextCell[ResolutionContext] = ContextCell(
    "dency_resolution_context",
    default=ResolutionContext(scope=root_scope),
)


def get_current_context() -> ResolutionContext:
    """Return the ambient resolution context."""
    return _ambient.get()


def _target_scope(injectable: Injectable[..., Any], scope: Scope) -> Scope:
    if injectable.lifetime is Lifetime.SINGLETON:
        return root_scope
    return scope


def inject(injectable: Injectable[P, T], *args: P.args, **kwargs: P.kwargs) -> T:
    """Return an instance of ``injectable``, producing it if needed.

    Called inside another injectable's factory, the call is recorded in that
    injectable's ``deps`` whether or not the instance comes from a cache.
    Explicit arguments are forwarded to the factory; on a cache hit for a
    ``SINGLETON`` or ``SCOPED`` injectable they are ignored and the first
    produced instance is returned.

    Examples:
        .. code-block:: python

            create_engine = define_injectable(Engine, lifetime=Lifetime.SCOPED)

            @define_injectable(lifetime=Lifetime.TRANSIENT)
            def create_car():
                return Car(engine=inject(create_engine))

            car = inject(create_car)

    Raises:
        Exception: Whatever the factory raises, unchanged. Nothing is cached
            and the ambient context is restored.

    """
    context = _ambient.get()
    scope = context.scope
    if context.parent is not None:
        context.parent._record_dependency(injectable)  # noqa: SLF001

    child_context = ResolutionContext(scope=scope, parent=injectable)

    def produce() -> T:
        return injectable.factory(*args, **kwargs)

    if injectable.lifetime is Lifetime.TRANSIENT:
        return _ambient.run(child_context, produce)

    target = _target_scope(injectable, scope)
    instance = target.get(injectable, _MISSING)
    if instance is not _MISSING:
        return cast("T", instance)

    instance = _ambient.run(child_context, produce)
    target.set(injectable, instance)
    logger.debug("Cached %r instance in %r", injectable, target)
    return instance


def use(injectable: Injectable[..., T]) -> T | None:
    """Return the cached instance of ``injectable`` or ``None``.

    Never runs the factory, never caches and never records a dependency.
    ``TRANSIENT`` injectables are never cached, so this always returns
    ``None`` for them.
    """
    if injectable.lifetime is Lifetime.TRANSIENT:
        return None
    target = _target_scope(injectable, _ambient.get().scope)
    return cast("T | None", target.get(injectable))
