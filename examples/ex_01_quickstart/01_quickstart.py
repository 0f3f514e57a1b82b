"""Quickstart: define injectables and resolve them with ``inject``.

Factories call ``inject`` for their own dependencies; nothing is threaded
through call sites.
"""

from __future__ import annotations

from dataclasses import dataclass

from dency import define_injectable, inject


@dataclass
class Config:
    greeting: str


@dataclass
class Greeter:
    config: Config

    def greet(self, name: str) -> str:
        return f"{self.config.greeting}, {name}!"


create_config = define_injectable(lambda: Config(greeting="Hello"))


@define_injectable
def create_greeter() -> Greeter:
    return Greeter(config=inject(create_config))


def main() -> None:
    greeter = inject(create_greeter)
    print(greeter.greet("World"))  # => Hello, World!
    print(f"same_greeter={inject(create_greeter) is greeter}")  # => same_greeter=True


if __name__ == "__main__":
    main()
