"""Class container: bind classes to identifiers and resolve them.

Constructor dependencies are listed as identifiers and resolved positionally.
"""

from __future__ import annotations

from dency import DencyContainer, DencyNotFoundError, Lifetime


class Wheel:
    pass


class Car:
    def __init__(self, wheel: Wheel) -> None:
        self.wheel = wheel


def main() -> None:
    container = DencyContainer()
    wheel_id = container.create("wheel")
    car_id = container.create("car")

    container.bind_class(wheel_id, Wheel)
    container.bind_class(car_id, Car, [wheel_id], Lifetime.TRANSIENT)

    first = container.use(car_id)
    second = container.use(car_id)
    print(f"cars_differ={first is not second}")  # => cars_differ=True
    print(f"wheel_shared={first.wheel is second.wheel}")  # => wheel_shared=True

    try:
        container.use(container.create("trailer"))
    except DencyNotFoundError as error:
        print(f"error={error}")  # => error='trailer' dency not found


if __name__ == "__main__":
    main()
