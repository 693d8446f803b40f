"""
Abstract Factory pattern: furniture families.

A furniture factory creates a matching chair and sofa. Client code only
depends on the abstract factory and product interfaces, so swapping the
factory swaps the whole family.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.registry import PatternCategory, demo


class Chair(ABC):
    @abstractmethod
    def sit_on(self) -> str:
        pass


class Sofa(ABC):
    @abstractmethod
    def lie_on(self) -> str:
        pass


class ModernChair(Chair):
    def sit_on(self) -> str:
        message = "Sitting on a modern chair"
        print(message)
        return message


class ModernSofa(Sofa):
    def lie_on(self) -> str:
        message = "Lying on a modern sofa"
        print(message)
        return message


class VictorianChair(Chair):
    def sit_on(self) -> str:
        message = "Sitting on a Victorian chair"
        print(message)
        return message


class VictorianSofa(Sofa):
    def lie_on(self) -> str:
        message = "Lying on a Victorian sofa"
        print(message)
        return message


class FurnitureFactory(ABC):
    """Creates one family of matching furniture."""

    @abstractmethod
    def create_chair(self) -> Chair:
        pass

    @abstractmethod
    def create_sofa(self) -> Sofa:
        pass


class ModernFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return ModernChair()

    def create_sofa(self) -> Sofa:
        return ModernSofa()


class VictorianFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_sofa(self) -> Sofa:
        return VictorianSofa()


FACTORIES: Dict[str, Type[FurnitureFactory]] = {
    "modern": ModernFurnitureFactory,
    "victorian": VictorianFurnitureFactory,
}


def get_furniture_factory(style: str) -> FurnitureFactory:
    """Pick the factory for a furniture style (case-insensitive).

    Raises:
        ValueError: If the style is unknown
    """
    factory_cls = FACTORIES.get(style.lower())
    if factory_cls is None:
        raise ValueError(
            f"Unknown furniture style: {style!r} (expected one of {sorted(FACTORIES)})"
        )
    return factory_cls()


def furnish(factory: FurnitureFactory) -> None:
    """Client code: uses whatever family the factory produces."""
    chair = factory.create_chair()
    sofa = factory.create_sofa()

    chair.sit_on()
    sofa.lie_on()


@demo(
    name="abstract_factory",
    category=PatternCategory.CREATIONAL,
    description="Factories create matching modern or Victorian furniture.",
)
def main() -> None:
    """Furnish a room in each style."""
    furnish(ModernFurnitureFactory())

    print()

    furnish(VictorianFurnitureFactory())


if __name__ == "__main__":
    main()
