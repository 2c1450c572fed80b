"""
Prototype

New objects are copied from a configured prototype instead of being built
from scratch. Mutable fields are deep-copied so clones never share them.
"""

import copy
from typing import Dict, List, Optional


class Sheep:
    def __init__(self, name: str, color: str = "white", tags: Optional[List[str]] = None):
        self.name = name
        self.color = color
        self.tags = tags or []

    def clone(self, **changes) -> "Sheep":
        duplicate = copy.deepcopy(self)
        for attr, value in changes.items():
            setattr(duplicate, attr, value)
        return duplicate

    def __repr__(self):
        return f"Sheep(name={self.name!r}, color={self.color!r}, tags={self.tags!r})"


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Sheep] = {}

    def add(self, key: str, prototype: Sheep) -> None:
        self._prototypes[key] = prototype

    def clone(self, key: str, **changes) -> Sheep:
        return self._prototypes[key].clone(**changes)


def demo(emit=print):
    dolly = Sheep("Dolly", tags=["famous"])
    registry = PrototypeRegistry()
    registry.add("dolly", dolly)

    twin = registry.clone("dolly", name="Polly")
    twin.tags.append("clone")
    emit(f"Original: {dolly!r}")
    emit(f"Clone: {twin!r}")
