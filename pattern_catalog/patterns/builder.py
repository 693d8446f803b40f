"""
Builder pattern: houses built step by step.

The director knows the order of construction steps; each builder knows how
to carry them out for its kind of house. The same director can therefore
produce a standard house or a villa.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pattern_catalog.registry import PatternCategory, demo


@dataclass
class House:
    foundation: Optional[str] = None
    structure: Optional[str] = None
    roof: Optional[str] = None
    interior: Optional[str] = None
    has_garage: bool = False
    has_swimming_pool: bool = False
    has_garden: bool = False


class HouseBuilder(ABC):
    """Builds the parts of a house; ``get_house`` hands over the result."""

    def __init__(self) -> None:
        self._house = House()

    def reset(self) -> None:
        """Start over with an empty house."""
        self._house = House()

    def get_house(self) -> House:
        return self._house

    @abstractmethod
    def build_foundation(self) -> None:
        pass

    @abstractmethod
    def build_structure(self) -> None:
        pass

    @abstractmethod
    def build_roof(self) -> None:
        pass

    @abstractmethod
    def build_interior(self) -> None:
        pass

    @abstractmethod
    def build_garage(self) -> None:
        pass

    @abstractmethod
    def build_swimming_pool(self) -> None:
        pass

    @abstractmethod
    def build_garden(self) -> None:
        pass


class ConcreteHouseBuilder(HouseBuilder):
    def build_foundation(self) -> None:
        self._house.foundation = "Concrete foundation"

    def build_structure(self) -> None:
        self._house.structure = "Concrete and brick structure"

    def build_roof(self) -> None:
        self._house.roof = "Concrete roof"

    def build_interior(self) -> None:
        self._house.interior = "Standard interior"

    def build_garage(self) -> None:
        self._house.has_garage = True

    def build_swimming_pool(self) -> None:
        # Standard houses never get a pool
        self._house.has_swimming_pool = False

    def build_garden(self) -> None:
        self._house.has_garden = True


class VillaBuilder(HouseBuilder):
    def build_foundation(self) -> None:
        self._house.foundation = "Reinforced concrete foundation"

    def build_structure(self) -> None:
        self._house.structure = "Premium structure with marble"

    def build_roof(self) -> None:
        self._house.roof = "Spanish tile roof"

    def build_interior(self) -> None:
        self._house.interior = "Luxury interior"

    def build_garage(self) -> None:
        self._house.has_garage = True

    def build_swimming_pool(self) -> None:
        self._house.has_swimming_pool = True

    def build_garden(self) -> None:
        self._house.has_garden = True


class ConstructionDirector:
    """Knows the order in which a house goes up."""

    def __init__(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def construct_house(self) -> House:
        self.builder.build_foundation()
        self.builder.build_structure()
        self.builder.build_roof()
        self.builder.build_interior()
        return self.builder.get_house()

    def construct_full_featured_house(self) -> House:
        self.construct_house()
        self.builder.build_garage()
        self.builder.build_swimming_pool()
        self.builder.build_garden()
        return self.builder.get_house()


@demo(
    name="builder",
    category=PatternCategory.CREATIONAL,
    description="A director drives builders to produce a house and a villa.",
)
def main() -> None:
    """Build a standard house and a fully featured villa."""
    concrete_builder = ConcreteHouseBuilder()
    director = ConstructionDirector(concrete_builder)
    director.construct_house()
    print(f"Standard house: {concrete_builder.get_house()}")

    print()

    villa_builder = VillaBuilder()
    director = ConstructionDirector(villa_builder)
    director.construct_full_featured_house()
    print(f"Luxury villa: {villa_builder.get_house()}")


if __name__ == "__main__":
    main()
