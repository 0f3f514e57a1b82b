from dency._internal.container import (
    DencyContainer,
    DencyId,
    bind_dency_class,
    create_dency_id,
    dency,
    use_dency,
)
from dency._internal.context import ContextCell
from dency._internal.injectable import Injectable, define_injectable
from dency._internal.resolution import (
    ResolutionContext,
    Scope,
    create_scope,
    get_current_context,
    inject,
    root_scope,
    use,
)
from dency.exceptions import (
    DencyError,
    DencyInvalidDefinitionError,
    DencyNotFoundError,
    DencyOutOfContextError,
)
from dency.types import Lifetime

__all__ = [
    "ContextCell",
    "DencyContainer",
    "DencyError",
    "DencyId",
    "DencyInvalidDefinitionError",
    "DencyNotFoundError",
    "DencyOutOfContextError",
    "Injectable",
    "Lifetime",
    "ResolutionContext",
    "Scope",
    "bind_dency_class",
    "create_dency_id",
    "create_scope",
    "define_injectable",
    "dency",
    "get_current_context",
    "inject",
    "root_scope",
    "use",
    "use_dency",
]
