class DencyError(Exception):
    """Represent a base class for all dency-specific failures.

    Catch this type when you want to handle any dency error path without
    matching each concrete exception class individually. Errors raised by
    factories are never wrapped in a ``DencyError``; they propagate unchanged.
    """


class DencyOutOfContextError(DencyError):
    """Signal a read of the ambient resolution context when none is bound.

    Raised by ``ContextCell.get`` for cells created without a default value.
    The resolution engine seeds its cell with the root scope at import time,
    so normal use of ``inject``/``use`` never raises it.

    Typical fix is running the reading code inside ``ContextCell.run``.
    """


class DencyNotFoundError(DencyError, LookupError):
    """Signal that an identifier has no binding in a ``DencyContainer``.

    Raised by ``DencyContainer.use`` (and ``use_dency``) when the requested
    identifier, or one of the identifiers a bound class depends on, was never
    bound. The message names the missing identifier.

    Typical fix is calling ``bind_class`` for the identifier before use.
    """


class DencyInvalidDefinitionError(DencyError):
    """Signal invalid injectable definition or class binding input.

    Raised by ``define_injectable`` when the factory is not callable, by
    ``DencyContainer.bind_class`` when the bound object is not a class, and by
    both when the lifetime is not a known ``Lifetime`` value.
    """
