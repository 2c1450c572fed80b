"""
Builder

The builder assembles a complex object step by step and validates it once,
in ``build()``. A director knows the recipes for common configurations.
"""

from dataclasses import dataclass
from typing import Optional

from pattern_atlas.errors import IncompleteBuildError


@dataclass(frozen=True)
class Vehicle:
    wheels: int
    seats: int
    color: str
    engine: Optional[str] = None

    def describe(self) -> str:
        motor = f"{self.engine} engine" if self.engine else "no engine"
        return f"{self.color} vehicle with {self.wheels} wheels, {self.seats} seats and {motor}"


class VehicleBuilder:
    def __init__(self):
        self._wheels = None
        self._seats = 1
        self._color = "unpainted"
        self._engine = None

    def with_wheels(self, count: int) -> "VehicleBuilder":
        self._wheels = count
        return self

    def with_seats(self, count: int) -> "VehicleBuilder":
        self._seats = count
        return self

    def painted(self, color: str) -> "VehicleBuilder":
        self._color = color
        return self

    def with_engine(self, engine: str) -> "VehicleBuilder":
        self._engine = engine
        return self

    def build(self) -> Vehicle:
        if not self._wheels:
            raise IncompleteBuildError("A vehicle needs wheels")
        return Vehicle(
            wheels=self._wheels,
            seats=self._seats,
            color=self._color,
            engine=self._engine,
        )


class VehicleDirector:
    @staticmethod
    def make_car(color: str = "red") -> Vehicle:
        return (
            VehicleBuilder()
            .with_wheels(4)
            .with_seats(5)
            .painted(color)
            .with_engine("petrol")
            .build()
        )

    @staticmethod
    def make_bicycle(color: str = "blue") -> Vehicle:
        return VehicleBuilder().with_wheels(2).painted(color).build()


def demo(emit=print):
    emit(f"Car: {VehicleDirector.make_car().describe()}")
    emit(f"Bicycle: {VehicleDirector.make_bicycle().describe()}")
    trike = VehicleBuilder().with_wheels(3).with_seats(2).painted("green").build()
    emit(f"Custom: {trike.describe()}")
