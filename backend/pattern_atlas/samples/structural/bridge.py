"""
Bridge

Buttons (the abstraction) and devices (the implementation) vary
independently: any button can drive any device.
"""

from abc import ABC, abstractmethod


class Device(ABC):
    def __init__(self):
        self.on = False
        self.level = 50

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    def toggle(self) -> None:
        self.on = not self.on

    def set_level(self, level: int) -> None:
        self.level = max(0, min(100, level))

    def status(self) -> str:
        return f"{self.name} is {'on' if self.on else 'off'} at {self.level}%"


class Light(Device):
    name = "Light"


class Fan(Device):
    name = "Fan"


class Button:
    def __init__(self, device: Device):
        self.device = device

    def press(self) -> str:
        self.device.toggle()
        return self.device.status()


class DimmerButton(Button):
    step = 25

    def press_long(self) -> str:
        level = self.device.level + self.step
        if level > 100:
            level = 0
        self.device.set_level(level)
        return self.device.status()


def demo(emit=print):
    emit(Button(Fan()).press())
    dimmer = DimmerButton(Light())
    emit(dimmer.press())
    emit(dimmer.press_long())
