"""
Composite pattern: files and folders treated uniformly.

Folders contain files and other folders. Sizes and detail listings are
computed recursively, with each nesting level indented two more spaces.
"""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.registry import PatternCategory, demo

INDENT = "  "


class FileSystemComponent(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def show_details(self, depth: int = 0) -> None:
        pass

    @abstractmethod
    def get_size(self) -> int:
        pass


class File(FileSystemComponent):
    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        self.size = size

    def show_details(self, depth: int = 0) -> None:
        print(f"{INDENT * depth}File: {self.name} (Size: {self.size} KB)")

    def get_size(self) -> int:
        return self.size


class Folder(FileSystemComponent):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: List[FileSystemComponent] = []

    @property
    def children(self) -> List[FileSystemComponent]:
        return list(self._children)

    def add(self, component: FileSystemComponent) -> None:
        self._children.append(component)

    def remove(self, component: FileSystemComponent) -> None:
        """Remove ``component`` if present; otherwise do nothing."""
        if component in self._children:
            self._children.remove(component)

    def show_details(self, depth: int = 0) -> None:
        print(f"{INDENT * depth}Folder: {self.name} (Total Size: {self.get_size()} KB)")
        for child in self._children:
            child.show_details(depth + 1)

    def get_size(self) -> int:
        return sum(child.get_size() for child in self._children)


@demo(
    name="composite",
    category=PatternCategory.STRUCTURAL,
    description="A folder tree reports sizes recursively.",
)
def main() -> Folder:
    """Build a small file system and print it."""
    document = File("Document.txt", 10)
    image = File("Image.jpg", 500)
    video = File("Video.mp4", 2000)

    documents = Folder("My Documents")
    media = Folder("Media")
    root = Folder("Root")

    documents.add(document)
    media.add(image)
    media.add(video)

    root.add(documents)
    root.add(media)
    root.add(File("README.md", 5))

    print("File System Structure:")
    root.show_details()

    print("\n--- Individual Folder ---")
    media.show_details()
    return root


if __name__ == "__main__":
    main()
