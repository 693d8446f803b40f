"""
Proxy pattern: lazily loaded images.

``ProxyImage`` looks like an image but only loads the real one from disk
the first time it is displayed.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.observability.logging import get_logger
from pattern_catalog.registry import PatternCategory, demo

logger = get_logger("patterns.proxy")


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"Loading image from disk: {self.file_name}")

    def display(self) -> None:
        print(f"Displaying image: {self.file_name}")


class ProxyImage(Image):
    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            logger.debug(f"Loading {self.file_name} on first display")
            self._real_image = RealImage(self.file_name)
        self._real_image.display()


@demo(
    name="proxy",
    category=PatternCategory.STRUCTURAL,
    description="An image proxy loads from disk only on first display.",
)
def main(file_name: str = "test.jpg") -> None:
    """Display the same proxied image twice."""
    image: Image = ProxyImage(file_name)

    print("First call to display():")
    image.display()

    print("\nSecond call to display():")
    image.display()


if __name__ == "__main__":
    main()
