"""
State

A traffic light delegates ``change()`` to its current state object, and
each state decides which state comes next. Green leads to red and red back
to green; the light never stops.
"""

from abc import ABC, abstractmethod


class LightState(ABC):
    color: str

    @abstractmethod
    def change(self, light: "TrafficLight") -> None:
        ...


class GreenState(LightState):
    color = "green"

    def change(self, light: "TrafficLight") -> None:
        light.state = RedState()


class RedState(LightState):
    color = "red"

    def change(self, light: "TrafficLight") -> None:
        light.state = GreenState()


class TrafficLight:
    def __init__(self):
        self.state: LightState = GreenState()

    @property
    def color(self) -> str:
        return self.state.color

    def change(self) -> None:
        self.state.change(self)


def demo(emit=print):
    light = TrafficLight()
    emit(f"Light is {light.color}")
    light.change()
    emit(f"Light is {light.color}")
    light.change()
    emit(f"Light is {light.color}")
