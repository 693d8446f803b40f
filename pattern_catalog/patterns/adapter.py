"""
Adapter pattern: a third-party calculator behind our own interface.
"""

import math
from abc import ABC, abstractmethod

from pattern_catalog.registry import PatternCategory, demo


class SquareRootCalculator(ABC):
    """Interface client code expects."""

    @abstractmethod
    def calculate_square_root(self, number: float) -> float:
        pass


class ThirdPartyCalculator:
    """Existing class with an incompatible method name."""

    def calculate_root(self, number: float) -> float:
        """Square root of ``number``, or NaN when it is negative."""
        if number < 0:
            return math.nan
        return math.sqrt(number)


class CalculatorAdapter(SquareRootCalculator):
    def __init__(self, calculator: ThirdPartyCalculator) -> None:
        self.calculator = calculator

    def calculate_square_root(self, number: float) -> float:
        return self.calculator.calculate_root(number)


@demo(
    name="adapter",
    category=PatternCategory.STRUCTURAL,
    description="An adapter exposes a third-party calculator through our interface.",
)
def main(number: float = 16) -> float:
    """Compute a square root through the adapter."""
    adapter: SquareRootCalculator = CalculatorAdapter(ThirdPartyCalculator())

    result = adapter.calculate_square_root(number)
    print(f"Square root: {'NaN' if math.isnan(result) else result}")
    return result


if __name__ == "__main__":
    main()
