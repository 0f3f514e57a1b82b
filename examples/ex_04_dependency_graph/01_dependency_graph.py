"""Dependency graph: edges observed while factories run.

Each injectable records which injectables its factory resolved, cached or not.
"""

from __future__ import annotations

from dency import Injectable, define_injectable, inject

create_database = define_injectable(dict, name="database")
create_cache = define_injectable(dict, name="cache")
create_repository = define_injectable(
    lambda: (inject(create_database), inject(create_cache)),
    name="repository",
)
create_service = define_injectable(lambda: inject(create_repository), name="service")


def _describe(injectable: Injectable[..., object]) -> str:
    deps = ", ".join(dep.name for dep in injectable.deps) or "-"
    return f"{injectable.name} -> {deps}"


def main() -> None:
    inject(create_service)

    print(_describe(create_service))  # => service -> repository
    print(_describe(create_repository))  # => repository -> database, cache
    print(_describe(create_database))  # => database -> -


if __name__ == "__main__":
    main()
