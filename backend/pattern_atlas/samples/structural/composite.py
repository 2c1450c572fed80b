"""
Composite

Files and folders answer the same questions. A folder's size is the sum of
whatever it contains, however deep the tree goes.
"""

from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def render(self, indent: int = 0) -> List[str]:
        ...


class Leaf(Component):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size

    def render(self, indent: int = 0) -> List[str]:
        return [f"{'  ' * indent}{self.name} ({self._size} KB)"]


class Composite(Component):
    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, child: Component) -> "Composite":
        self._children.append(child)
        return self

    def remove(self, child: Component) -> None:
        self._children.remove(child)

    def size(self) -> int:
        return sum(child.size() for child in self._children)

    def render(self, indent: int = 0) -> List[str]:
        lines = [f"{'  ' * indent}{self.name}/ ({self.size()} KB)"]
        for child in self._children:
            lines.extend(child.render(indent + 1))
        return lines


def demo(emit=print):
    photos = Composite("photos").add(Leaf("beach.jpg", 300)).add(Leaf("dog.jpg", 200))
    home = Composite("home").add(Leaf("notes.txt", 4)).add(photos)
    for line in home.render():
        emit(line)
