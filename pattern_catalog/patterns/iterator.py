"""
Iterator pattern: walking an array without exposing it.

The explicit ``has_next``/``next`` protocol is kept alongside Python's own
iteration protocol, so the same iterator works in a ``while`` loop and in
a ``for`` loop.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from pattern_catalog.registry import PatternCategory, demo


class Iterator(ABC):
    """Traverses a collection one element at a time."""

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether another element is available."""

    @abstractmethod
    def next(self) -> Any:
        """Return the next element.

        Raises:
            StopIteration: If the collection is exhausted
        """

    def __iter__(self) -> "Iterator":
        return self

    def __next__(self) -> Any:
        return self.next()


class Collection(ABC):
    @abstractmethod
    def create_iterator(self) -> Iterator:
        """Create a fresh iterator positioned at the first element."""

    def __iter__(self) -> Iterator:
        return self.create_iterator()


class ArrayIterator(Iterator):
    """Iterator over a fixed sequence."""

    def __init__(self, items: Sequence[Any]) -> None:
        self._items = items
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self) -> Any:
        if not self.has_next():
            raise StopIteration(
                f"Iterator exhausted at position {self._position} of {len(self._items)}"
            )
        item = self._items[self._position]
        self._position += 1
        return item


class ArrayCollection(Collection):
    def __init__(self, items: Sequence[Any]) -> None:
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def create_iterator(self) -> ArrayIterator:
        return ArrayIterator(self._items)


@demo(
    name="iterator",
    category=PatternCategory.BEHAVIORAL,
    description="An iterator walks a collection without exposing its storage.",
)
def main(items: Sequence[Any] = (1, 2, 3, 4, 5)) -> None:
    """Print every element of an array collection."""
    collection = ArrayCollection(items)
    iterator = collection.create_iterator()

    while iterator.has_next():
        print(iterator.next())


if __name__ == "__main__":
    main()
