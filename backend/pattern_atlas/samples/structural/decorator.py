"""
Decorator

Condiments wrap a coffee and add to its cost and description. Wrappers
share the ``Coffee`` interface, so they stack in any order and depth.
"""

from abc import ABC, abstractmethod


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> float:
        ...

    @abstractmethod
    def description(self) -> str:
        ...


class SimpleCoffee(Coffee):
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "Coffee"


class CoffeeDecorator(Coffee):
    extra_cost = 0.0
    label = ""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def cost(self) -> float:
        return self._coffee.cost() + self.extra_cost

    def description(self) -> str:
        return f"{self._coffee.description()}, {self.label}"


class Milk(CoffeeDecorator):
    extra_cost = 0.5
    label = "milk"


class Sugar(CoffeeDecorator):
    extra_cost = 0.2
    label = "sugar"


def demo(emit=print):
    order = SimpleCoffee()
    emit(f"{order.description()}: {order.cost():.2f}")
    order = Milk(order)
    emit(f"{order.description()}: {order.cost():.2f}")
    order = Sugar(order)
    emit(f"{order.description()}: {order.cost():.2f}")
