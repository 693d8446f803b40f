"""
Prototype pattern: new objects copied from existing ones.

Clones are deep copies, so changing a clone never affects its prototype.
A small registry keeps named prototypes to stamp copies from.
"""

import copy
from abc import ABC
from typing import Any, Dict, List, TypeVar

from pattern_catalog.registry import PatternCategory, demo

P = TypeVar("P", bound="Prototype")


class Prototype(ABC):
    """An object that knows how to copy itself."""

    def clone(self: P) -> P:
        return copy.deepcopy(self)


class ConcretePrototype(Prototype):
    def __init__(self, field: int) -> None:
        self.field = field

    def __repr__(self) -> str:
        return f"ConcretePrototype(field={self.field})"


class PrototypeRegistry:
    """Named prototypes to clone from."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, name: str, prototype: Prototype) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        del self._prototypes[name]

    def names(self) -> List[str]:
        return list(self._prototypes)

    def clone(self, name: str, **attrs: Any) -> Prototype:
        """Clone the prototype registered as ``name``.

        Args:
            name: Registered prototype name
            **attrs: Attributes to overwrite on the clone

        Returns:
            An independent copy

        Raises:
            KeyError: If nothing is registered under ``name``
        """
        obj = self._prototypes[name].clone()
        for attr, value in attrs.items():
            setattr(obj, attr, value)
        return obj


@demo(
    name="prototype",
    category=PatternCategory.CREATIONAL,
    description="A clone is changed without touching its prototype.",
)
def main(field: int = 10, new_value: int = 20) -> None:
    """Clone a prototype, then change the clone only."""
    prototype = ConcretePrototype(field)

    clone = prototype.clone()

    print(f"Original field value: {prototype.field}")
    print(f"Cloned field value: {clone.field}")

    clone.field = new_value

    print(f"Original field value after cloning: {prototype.field}")
    print(f"Cloned field value after cloning: {clone.field}")


if __name__ == "__main__":
    main()
