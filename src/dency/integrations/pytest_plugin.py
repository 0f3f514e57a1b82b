"""Pytest fixtures that isolate dency scopes between tests.

Enable with ``pytest_plugins = ["dency.integrations.pytest_plugin"]``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from dency._internal.resolution import Scope, root_scope


@pytest.fixture()
def dency_root_scope() -> Iterator[Scope]:
    """Yield the root scope, empty at the start and reset after the test."""
    root_scope.reset()
    yield root_scope
    root_scope.reset()


@pytest.fixture()
def dency_scope(request: pytest.FixtureRequest) -> Iterator[Scope]:
    """Yield a fresh scope labelled with the requesting test's node name."""
    scope = Scope(request.node.name)
    yield scope
    scope.reset()
