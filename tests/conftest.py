"""Shared pytest fixtures for dency tests."""

from collections.abc import Iterator

import pytest

from dency import Scope, create_scope, root_scope


@pytest.fixture(autouse=True)
def _reset_root_scope() -> Iterator[None]:
    """Every test starts and ends with an empty root scope."""
    root_scope.reset()
    yield
    root_scope.reset()


@pytest.fixture()
def scope() -> Scope:
    """A fresh, unlabelled scope."""
    return create_scope()
