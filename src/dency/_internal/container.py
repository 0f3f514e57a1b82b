from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, cast

from dency._internal.injectable import Injectable
from dency._internal.resolution import Scope, inject, root_scope
from dency.defaults import DEFAULT_LIFETIME
from dency.exceptions import DencyNotFoundError
from dency.types import Lifetime
from dency.validators import DefinitionValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DencyId(Generic[T]):
    """Identifier for a class binding.

    Compared by identity; ``name`` only appears in messages.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"DencyId({self.name!r})"


class DencyContainer:
    """Bind classes to identifiers and resolve them with their dependencies.

    Every binding is backed by an ``Injectable``, so bindings follow the same
    lifetime rules as ``inject``: singletons live in the root scope, scoped
    bindings in the active scope, and transient ones are never cached.
    """

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._bindings: dict[DencyId[Any], Injectable[[], Any]] = {}
        self._validator = DefinitionValidator()

    def create(self, name: str) -> DencyId[T]:
        """Return a new identifier. Names are not required to be unique."""
        if name in self._names:
            logger.warning(
                "Identifier name %r is already in use; names are only used for debugging",
                name,
            )
        self._names.add(name)
        return DencyId(name)

    def bind_class(
        self,
        dency_id: DencyId[T],
        cls: type[T],
        deps: Sequence[DencyId[Any]] = (),
        lifetime: Lifetime | str = DEFAULT_LIFETIME,
    ) -> None:
        """Bind ``cls`` to ``dency_id``.

        ``cls`` is constructed with the instances of ``deps`` as positional
        arguments, resolved at construction time. Binding an identifier
        again replaces the previous binding and drops its singleton instance
        from ``root_scope``. Instances of a scoped binding stay in their
        scopes until those scopes are reset.

        Raises:
            DencyInvalidDefinitionError: If ``cls`` is not a concrete class or
                ``lifetime`` is unknown.

        """
        self._validator.validate_concrete_type(cls)
        resolved_lifetime = Lifetime.from_value(lifetime)
        dep_ids = tuple(deps)

        def construct() -> T:
            return cls(*(self.use(dep_id) for dep_id in dep_ids))

        previous = self._bindings.get(dency_id)
        if previous is not None:
            logger.debug("Replacing binding for %r with %s", dency_id, cls.__qualname__)
            root_scope.discard(previous)

        self._bindings[dency_id] = Injectable(
            construct,
            lifetime=resolved_lifetime,
            name=dency_id.name,
        )

    def is_bound(self, dency_id: DencyId[Any]) -> bool:
        """Return whether ``dency_id`` has a binding."""
        return dency_id in self._bindings

    def get_injectable(self, dency_id: DencyId[T]) -> Injectable[[], T]:
        """Return the injectable backing the binding of ``dency_id``.

        Raises:
            DencyNotFoundError: If ``dency_id`` has no binding.

        """
        injectable = self._bindings.get(dency_id)
        if injectable is None:
            msg = f"{dency_id.name!r} dency not found"
            raise DencyNotFoundError(msg)
        return cast("Injectable[[], T]", injectable)

    def use(self, dency_id: DencyId[T], *, scope: Scope | None = None) -> T:
        """Resolve the instance bound to ``dency_id``.

        Args:
            dency_id: Identifier to resolve.
            scope: Scope to resolve in. Defaults to the active scope.

        Raises:
            DencyNotFoundError: If ``dency_id`` or one of its dependencies
                has no binding.

        """
        injectable = self.get_injectable(dency_id)
        if scope is None:
            return inject(injectable)
        return scope.inject(injectable)


dency = DencyContainer()
"""Process-wide container used by the module-level helpers."""

create_dency_id = dency.create
bind_dency_class = dency.bind_class
use_dency = dency.use
