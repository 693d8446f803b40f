"""
Factory pattern: shapes created from a name.

Client code asks the factory for a shape by name and never references the
concrete classes. New shapes can be registered at runtime.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Type

from pattern_catalog.observability.logging import get_logger
from pattern_catalog.registry import PatternCategory, demo

logger = get_logger("patterns.factory")


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def draw(self) -> str:
        message = "Drawing a Circle"
        print(message)
        return message


class Square(Shape):
    def draw(self) -> str:
        message = "Drawing a Square"
        print(message)
        return message


class ShapeFactory:
    """Creates shapes by case-insensitive name."""

    def __init__(self) -> None:
        self._shapes: Dict[str, Type[Shape]] = {
            "circle": Circle,
            "square": Square,
        }

    def register_shape(self, name: str, shape_cls: Type[Shape]) -> None:
        """Make ``shape_cls`` available under ``name``.

        Args:
            name: Shape name, matched case-insensitively
            shape_cls: Class to instantiate for that name
        """
        self._shapes[name.lower()] = shape_cls

    def list_shapes(self) -> List[str]:
        return list(self._shapes)

    def create_shape(self, shape_type: str) -> Optional[Shape]:
        """Create a shape.

        Args:
            shape_type: Shape name, e.g. ``"Circle"``

        Returns:
            A new shape, or None if the name is unknown
        """
        shape_cls = self._shapes.get(shape_type.lower())
        if shape_cls is None:
            logger.warning(
                f"Unknown shape type: {shape_type}",
                data={"known": self.list_shapes()},
            )
            return None
        return shape_cls()


@demo(
    name="factory",
    category=PatternCategory.CREATIONAL,
    description="A factory turns shape names into shape objects.",
)
def main(shape_types: Sequence[str] = ("Circle", "Square")) -> None:
    """Create and draw one shape per name."""
    factory = ShapeFactory()

    for shape_type in shape_types:
        shape = factory.create_shape(shape_type)
        if shape is None:
            print(f"Unknown shape: {shape_type}")
            continue
        shape.draw()


if __name__ == "__main__":
    main()
