"""
Strategy

The navigator delegates travel-time estimates to a strategy object that can
be swapped at runtime without touching the navigator.
"""

from abc import ABC, abstractmethod


class RouteStrategy(ABC):
    speed_kmh: float

    @property
    def name(self) -> str:
        return type(self).__name__

    def estimate(self, distance_km: float) -> float:
        """Minutes needed to cover the distance"""
        return distance_km / self.speed_kmh * 60

    @abstractmethod
    def advice(self) -> str:
        ...


class Walking(RouteStrategy):
    speed_kmh = 5

    def advice(self) -> str:
        return "take the footpath"


class Cycling(RouteStrategy):
    speed_kmh = 15

    def advice(self) -> str:
        return "use the bike lane"


class Driving(RouteStrategy):
    speed_kmh = 50

    def advice(self) -> str:
        return "follow the main road"


class Navigator:
    def __init__(self, strategy: RouteStrategy):
        self.strategy = strategy

    def plan(self, distance_km: float) -> str:
        minutes = self.strategy.estimate(distance_km)
        return f"{self.strategy.name}: {minutes:.0f} min, {self.strategy.advice()}"


def demo(emit=print):
    navigator = Navigator(Walking())
    for strategy in (Walking(), Cycling(), Driving()):
        navigator.strategy = strategy
        emit(navigator.plan(10))
