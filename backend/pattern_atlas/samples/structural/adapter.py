"""
Adapter

A legacy sensor reports Fahrenheit; the rest of the code expects a
``TemperatureSensor`` reporting Celsius. The adapter wraps the old object
and translates the call.
"""

from abc import ABC, abstractmethod


class TemperatureSensor(ABC):
    @abstractmethod
    def celsius(self) -> float:
        ...


class FahrenheitSensor:
    """Third-party sensor we cannot change"""

    def __init__(self, reading: float):
        self._reading = reading

    def read_fahrenheit(self) -> float:
        return self._reading


class FahrenheitSensorAdapter(TemperatureSensor):
    def __init__(self, sensor: FahrenheitSensor):
        self._sensor = sensor

    def celsius(self) -> float:
        return (self._sensor.read_fahrenheit() - 32) * 5 / 9


def report(sensor: TemperatureSensor) -> str:
    return f"{sensor.celsius():.1f} C"


def demo(emit=print):
    legacy = FahrenheitSensor(98.6)
    emit(f"Legacy reading: {legacy.read_fahrenheit()} F")
    emit(f"Adapted reading: {report(FahrenheitSensorAdapter(legacy))}")
