"""
Factory

A factory hides which concrete class gets instantiated. Callers ask for
"a cat" or "a dog" and receive an ``Animal``; only the factory knows the
classes behind the names.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from pattern_atlas.errors import UnknownProductError


class Animal(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def speak(self) -> str:
        ...

    def introduce(self) -> str:
        return f"{self.name} says {self.speak()}"


class Cat(Animal):
    def speak(self) -> str:
        return "Meow"


class Dog(Animal):
    def speak(self) -> str:
        return "Woof"


class AnimalFactory:
    _products: Dict[str, Type[Animal]] = {
        "cat": Cat,
        "dog": Dog,
    }

    @classmethod
    def kinds(cls) -> List[str]:
        return sorted(cls._products)

    @classmethod
    def create(cls, kind: str, name: str) -> Animal:
        product = cls._products.get(kind.lower())
        if product is None:
            raise UnknownProductError(kind, cls.kinds())
        return product(name)


def demo(emit=print):
    for kind, name in [("cat", "Tom"), ("dog", "Rex")]:
        animal = AnimalFactory.create(kind, name)
        emit(f"{type(animal).__name__}: {animal.introduce()}")
