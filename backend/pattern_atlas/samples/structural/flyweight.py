"""
Flyweight

Thousands of dogs share a handful of breeds. Breed data (``DogDNA``) is
stored once in the ``DNATable``; each ``Dog`` only keeps its own name.
Looking up a breed nobody registered is a misuse and raises.
"""

from dataclasses import dataclass
from typing import Dict

from pattern_atlas.errors import BreedNotRegisteredError


@dataclass(frozen=True)
class DogDNA:
    breed: str
    size: str
    coat: str


class Dog:
    def __init__(self, name: str, dna: DogDNA):
        self.name = name
        self.dna = dna

    def describe(self) -> str:
        return f"{self.name} the {self.dna.size} {self.dna.breed} with a {self.dna.coat} coat"


class DNATable:
    def __init__(self):
        self._entries: Dict[str, DogDNA] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, breed: str, size: str, coat: str) -> DogDNA:
        if breed not in self._entries:
            self._entries[breed] = DogDNA(breed, size, coat)
        return self._entries[breed]

    def lookup(self, breed: str) -> DogDNA:
        try:
            return self._entries[breed]
        except KeyError:
            raise BreedNotRegisteredError(breed) from None

    def make_dog(self, name: str, breed: str) -> Dog:
        return Dog(name, self.lookup(breed))


def demo(emit=print):
    table = DNATable()
    table.register("Beagle", "small", "tricolor")
    table.register("Husky", "large", "double")

    dogs = [
        table.make_dog("Snoopy", "Beagle"),
        table.make_dog("Copper", "Beagle"),
        table.make_dog("Balto", "Husky"),
    ]
    for dog in dogs:
        emit(dog.describe())
    emit(f"Dogs: {len(dogs)}, shared DNA entries: {len(table)}")
    emit(f"Beagles share DNA: {dogs[0].dna is dogs[1].dna}")

    try:
        table.make_dog("Lassie", "Collie")
    except BreedNotRegisteredError as exc:
        emit(f"Error: {exc}")
