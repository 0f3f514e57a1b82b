from dency.types import Lifetime

DEFAULT_LIFETIME = Lifetime.SINGLETON
"""Lifetime used by ``define_injectable`` and ``bind_class`` when none is given."""

ROOT_SCOPE_LABEL = "root"
"""Label of the process-wide root scope."""
