from __future__ import annotations

import inspect

from dency.exceptions import DencyInvalidDefinitionError


class DefinitionValidator:
    """Validates factories and classes before they become injectables."""

    def validate_factory(self, factory: object) -> None:
        """Validate that a factory can be invoked."""
        if not callable(factory):
            msg = f"Injectable factory must be callable, got {factory!r}."
            raise DencyInvalidDefinitionError(msg)

    def validate_concrete_type(self, concrete_type: object) -> None:
        """Validate that a bound class is instantiable."""
        if not inspect.isclass(concrete_type):
            msg = f"Bound class must be a class, got {concrete_type!r}."
            raise DencyInvalidDefinitionError(msg)

        if inspect.isabstract(concrete_type):
            msg = f"Bound class '{concrete_type.__qualname__}' cannot be an abstract class."
            raise DencyInvalidDefinitionError(msg)
