"""Scopes: per-scope caches, ``use`` lookups and ``reset``.

A transient car resolved in two scopes shares one scoped engine per scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from dency import Lifetime, create_scope, define_injectable, inject


@dataclass
class Engine:
    fuel: int = 100


@dataclass
class Car:
    engine: Engine


create_engine = define_injectable(Engine, lifetime=Lifetime.SCOPED)
create_car = define_injectable(lambda: Car(inject(create_engine)), lifetime=Lifetime.TRANSIENT)


def main() -> None:
    s1 = create_scope("S1")
    s2 = create_scope("S2")

    cars = [s1.inject(create_car), s1.inject(create_car), s2.inject(create_car)]
    print(f"cars={len({id(car) for car in cars})}")  # => cars=3
    print(f"engines={len({id(car.engine) for car in cars})}")  # => engines=2
    print(f"cached={len(s1)},{len(s2)}")  # => cached=1,1

    print(f"use_hit={s1.use(create_engine) is cars[0].engine}")  # => use_hit=True
    s1.reset()
    print(f"use_after_reset={s1.use(create_engine)}")  # => use_after_reset=None
    print(f"other_scope_kept={len(s2)}")  # => other_scope_kept=1


if __name__ == "__main__":
    main()
