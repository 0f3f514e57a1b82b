from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeAlias

from typing_extensions import Self

from dency.exceptions import DencyInvalidDefinitionError


class Lifetime(str, Enum):
    """Defines how long a produced instance is reused."""

    SINGLETON = "singleton"
    """A single instance is cached in the root scope, whichever scope is active."""

    SCOPED = "scoped"
    """Instance is cached in the active scope, different instances across scopes."""

    TRANSIENT = "transient"
    """A new instance is produced every time and never cached."""

    @classmethod
    def from_value(cls, value: Lifetime | str) -> Self:
        """Return the member for ``value``, accepting case-insensitive strings.

        Raises:
            DencyInvalidDefinitionError: If ``value`` names no lifetime.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(repr(member.value) for member in cls)
        msg = f"Unknown lifetime {value!r}, expected a Lifetime or one of {valid}."
        raise DencyInvalidDefinitionError(msg)


Factory: TypeAlias = Callable[..., Any]
"""A type alias for callables that produce injectable instances."""
