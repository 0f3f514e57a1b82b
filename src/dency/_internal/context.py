from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from typing import Any, Generic, TypeVar

from dency.exceptions import DencyOutOfContextError

T = TypeVar("T")
R = TypeVar("R")

_MISSING: Any = object()


class ContextCell(Generic[T]):
    """Hold one ambient value with scoped save/run/restore.

    The value lives in a ``ContextVar`` that starts at ``default``. Within one
    call stack, ``run`` swaps the value for the duration of a callable and
    always puts the previous value back.
    """

    __slots__ = ("_var",)

    def __init__(self, name: str, default: T = _MISSING) -> None:
        if default is _MISSING:
            self._var: ContextVar[T] = ContextVar(name)
        else:
            self._var = ContextVar(name, default=default)

    @property
    def name(self) -> str:
        """Name of the underlying context variable."""
        return self._var.name

    def get(self) -> T:
        """Return the current value.

        Raises:
            DencyOutOfContextError: If no value was ever bound and the cell
                has no default.

        """
        try:
            return self._var.get()
        except LookupError:
            msg = f"Out of context: '{self.name}' has no bound value."
            raise DencyOutOfContextError(msg) from None

    def run(self, value: T, fn: Callable[[], R]) -> R:
        """Call ``fn`` with ``value`` bound and restore the previous binding.

        The previous binding is restored when ``fn`` returns and when it
        raises; the exception propagates unchanged.
        """
        token = self._var.set(value)
        try:
            return fn()
        finally:
            self._var.reset(token)
