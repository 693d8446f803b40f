"""
Decorator pattern: coffee with add-ons.

Each decorator wraps a coffee and adds its own price and description
suffix, so add-ons stack in the order they are applied.
"""

from abc import ABC, abstractmethod

from pattern_catalog.registry import PatternCategory, demo


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def cost(self) -> float:
        return 1.0

    def description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator(Coffee):
    """Adds ``extra_cost`` and ``suffix`` to the wrapped coffee."""

    extra_cost = 0.0
    suffix = ""

    def __init__(self, coffee: Coffee) -> None:
        self._coffee = coffee

    def cost(self) -> float:
        return self._coffee.cost() + self.extra_cost

    def description(self) -> str:
        return self._coffee.description() + self.suffix


class MilkDecorator(CoffeeDecorator):
    extra_cost = 0.5
    suffix = ", Milk"


class ChocolateDecorator(CoffeeDecorator):
    extra_cost = 0.7
    suffix = ", Chocolate"


def print_coffee(coffee: Coffee) -> None:
    print(f"Cost: {coffee.cost()}, Description: {coffee.description()}")


@demo(
    name="decorator",
    category=PatternCategory.STRUCTURAL,
    description="Milk and chocolate decorators add cost and description.",
)
def main() -> Coffee:
    """Print a plain coffee, then with milk, then with milk and chocolate."""
    coffee: Coffee = SimpleCoffee()
    print_coffee(coffee)

    milk_coffee = MilkDecorator(coffee)
    print_coffee(milk_coffee)

    chocolate_milk_coffee = ChocolateDecorator(milk_coffee)
    print_coffee(chocolate_milk_coffee)
    return chocolate_milk_coffee


if __name__ == "__main__":
    main()
