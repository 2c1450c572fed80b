"""
Behavioral pattern samples: strategy and state
Run with: pytest test_behavioral.py
"""

import pytest

from pattern_atlas.samples.behavioral import state, strategy


def test_strategy_can_be_swapped():
    navigator = strategy.Navigator(strategy.Walking())
    assert navigator.strategy.estimate(5) == pytest.approx(60)

    navigator.strategy = strategy.Driving()
    assert navigator.plan(25) == "Driving: 30 min, follow the main road"


def test_strategy_demo():
    lines = []
    strategy.demo(emit=lines.append)
    assert lines == [
        "Walking: 120 min, take the footpath",
        "Cycling: 40 min, use the bike lane",
        "Driving: 12 min, follow the main road",
    ]


def test_traffic_light_starts_green():
    assert state.TrafficLight().color == "green"


def test_traffic_light_toggles_forever():
    light = state.TrafficLight()
    seen = []
    for _ in range(5):
        light.change()
        seen.append(light.color)
    assert seen == ["red", "green", "red", "green", "red"]
    assert isinstance(light.state, state.RedState)


def test_state_demo():
    lines = []
    state.demo(emit=lines.append)
    assert lines == ["Light is green", "Light is red", "Light is green"]
