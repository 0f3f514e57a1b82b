"""Tests for failure propagation and context restoration."""

import pytest

from dency import (
    DencyInvalidDefinitionError,
    Lifetime,
    ResolutionContext,
    Scope,
    create_scope,
    define_injectable,
    get_current_context,
    inject,
    root_scope,
)


class _BoomError(Exception):
    pass


def _explode() -> object:
    raise _BoomError("boom")


class TestFactoryFailures:
    @pytest.mark.parametrize("lifetime", list(Lifetime))
    def test_factory_error_propagates_unchanged(self, lifetime: Lifetime) -> None:
        dep = define_injectable(_explode, lifetime=lifetime)

        with pytest.raises(_BoomError, match="boom"):
            inject(dep)

        assert get_current_context() == ResolutionContext(scope=root_scope)

    def test_failed_resolution_is_not_cached(self, scope: Scope) -> None:
        attempts: list[int] = []

        def flaky() -> int:
            attempts.append(1)
            if len(attempts) == 1:
                raise _BoomError("first attempt")
            return len(attempts)

        dep = define_injectable(flaky, lifetime=Lifetime.SCOPED)

        with pytest.raises(_BoomError):
            scope.inject(dep)
        assert dep not in scope

        assert scope.inject(dep) == 2
        assert len(attempts) == 2

    def test_nested_failure_restores_every_level(self) -> None:
        scope = create_scope("outer")
        seen: list[ResolutionContext] = []
        failing = define_injectable(_explode, lifetime=Lifetime.TRANSIENT)

        def parent_factory() -> object:
            seen.append(get_current_context())
            with pytest.raises(_BoomError):
                inject(failing)
            seen.append(get_current_context())
            return object()

        parent = define_injectable(parent_factory, lifetime=Lifetime.SCOPED)

        scope.inject(parent)

        assert seen[0] == seen[1] == ResolutionContext(scope=scope, parent=parent)
        assert parent.deps == {parent, failing}
        assert get_current_context() == ResolutionContext(scope=root_scope)


class TestCycles:
    def test_cycle_raises_recursion_error(self) -> None:
        """Cyclic graphs are not detected; the interpreter's limit stops them."""
        holder: dict[str, object] = {}
        first = define_injectable(lambda: inject(holder["second"]), lifetime=Lifetime.TRANSIENT)
        second = define_injectable(lambda: inject(first), lifetime=Lifetime.TRANSIENT)
        holder["second"] = second

        with pytest.raises(RecursionError):
            inject(first)

        assert get_current_context() == ResolutionContext(scope=root_scope)
        assert first.deps == {second}
        assert second.deps == {first}


class TestDefinitionValidation:
    def test_non_callable_factory_is_rejected(self) -> None:
        with pytest.raises(DencyInvalidDefinitionError, match="callable"):
            define_injectable(42)  # type: ignore[call-overload]

    def test_unknown_lifetime_is_rejected(self) -> None:
        with pytest.raises(DencyInvalidDefinitionError, match="Unknown lifetime"):
            define_injectable(dict, lifetime="forever")
