"""Lifetimes: ``SINGLETON``, ``SCOPED`` and ``TRANSIENT``.

Singletons live in the root scope, scoped instances in the active scope, and
transients are never cached. Explicit arguments only matter on a cache miss.
"""

from __future__ import annotations

from dataclasses import dataclass

from dency import Lifetime, create_scope, define_injectable, inject, root_scope


@dataclass
class Model:
    name: str


class Session:
    pass


class Request:
    pass


create_model = define_injectable(Model, lifetime=Lifetime.SINGLETON)
create_session = define_injectable(Session, lifetime=Lifetime.SCOPED)
create_request = define_injectable(Request, lifetime=Lifetime.TRANSIENT)


def main() -> None:
    first_model = inject(create_model, "model x")
    second_model = inject(create_model, "model y")
    print(f"singleton_same={first_model is second_model}")  # => singleton_same=True
    print(f"first_args_win={second_model.name}")  # => first_args_win=model x

    scope_a = create_scope("a")
    scope_b = create_scope("b")
    session_a = scope_a.inject(create_session)
    print(f"scoped_same_within={scope_a.inject(create_session) is session_a}")  # => scoped_same_within=True
    print(f"scoped_diff_across={scope_b.inject(create_session) is not session_a}")  # => scoped_diff_across=True

    print(f"transient_new={inject(create_request) is not inject(create_request)}")  # => transient_new=True
    print(f"root_cached={len(root_scope)}")  # => root_cached=1


if __name__ == "__main__":
    main()
