"""
Flyweight pattern: a forest sharing tree types.

Intrinsic state (name, color, texture) lives in shared ``TreeType``
objects handed out by a ``TreeFactory``; each ``Tree`` only stores its
position. The factory is passed to the forest explicitly so separate
forests can share or keep their own pools.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pattern_catalog.registry import PatternCategory, demo


class TreeType:
    def __init__(self, name: str, color: str, texture: str) -> None:
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, x: int, y: int) -> None:
        print(
            f"Drawing tree '{self.name}' of color '{self.color}' "
            f"with texture '{self.texture}' at position ({x}, {y})"
        )


class TreeFactory:
    """Pool of tree types keyed by ``<name>_<color>_<texture>``."""

    def __init__(self) -> None:
        self._tree_types: Dict[str, TreeType] = {}

    @staticmethod
    def make_key(name: str, color: str, texture: str) -> str:
        return f"{name}_{color}_{texture}"

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = self.make_key(name, color, texture)
        tree_type = self._tree_types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            self._tree_types[key] = tree_type
            print(f"Creating new TreeType: {key}")
        else:
            print(f"Reusing existing TreeType: {key}")
        return tree_type

    @property
    def tree_type_count(self) -> int:
        return len(self._tree_types)


@dataclass
class Tree:
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> None:
        self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: Optional[TreeFactory] = None) -> None:
        self.factory = factory or TreeFactory()
        self._trees: List[Tree] = []

    @property
    def trees(self) -> List[Tree]:
        return list(self._trees)

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree_type = self.factory.get_tree_type(name, color, texture)
        tree = Tree(x, y, tree_type)
        self._trees.append(tree)
        return tree

    def draw(self) -> None:
        print(f"\nDrawing forest with {len(self._trees)} trees:")
        for tree in self._trees:
            tree.draw()


@demo(
    name="flyweight",
    category=PatternCategory.STRUCTURAL,
    description="Six trees share two tree types.",
)
def main() -> int:
    """Plant a forest and report how many tree types were created."""
    factory = TreeFactory()
    forest = Forest(factory)

    forest.plant_tree(10, 20, "Oak", "Green", "Rough")
    forest.plant_tree(50, 60, "Oak", "Green", "Rough")
    forest.plant_tree(100, 120, "Oak", "Green", "Rough")

    forest.plant_tree(30, 40, "Pine", "Dark Green", "Smooth")
    forest.plant_tree(70, 80, "Pine", "Dark Green", "Smooth")

    forest.plant_tree(150, 160, "Oak", "Green", "Rough")

    forest.draw()

    print(f"\nTotal tree types created: {factory.tree_type_count}")
    print("Memory saved by using Flyweight pattern!")
    return factory.tree_type_count


if __name__ == "__main__":
    main()
