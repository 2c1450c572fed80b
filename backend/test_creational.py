"""
Creational pattern samples: factory, builder, singleton, prototype
Run with: pytest test_creational.py
"""

import pytest

from pattern_atlas.errors import IncompleteBuildError, UnknownProductError
from pattern_atlas.samples.creational import builder, factory, prototype, singleton


def capture(module):
    lines = []
    module.demo(emit=lines.append)
    return lines


# ============================================================
# FACTORY
# ============================================================

def test_factory_creates_by_kind_case_insensitive():
    cat = factory.AnimalFactory.create("CAT", "Tom")
    assert isinstance(cat, factory.Cat)
    assert cat.introduce() == "Tom says Meow"
    assert factory.AnimalFactory.create("dog", "Rex").speak() == "Woof"


def test_factory_rejects_unknown_kind():
    with pytest.raises(UnknownProductError) as exc_info:
        factory.AnimalFactory.create("parrot", "Polly")
    assert exc_info.value.kind == "parrot"
    assert exc_info.value.known == ["cat", "dog"]


def test_factory_demo():
    assert capture(factory) == ["Cat: Tom says Meow", "Dog: Rex says Woof"]


# ============================================================
# BUILDER
# ============================================================

def test_builder_fluent_chain():
    vehicle = builder.VehicleBuilder().with_wheels(6).with_seats(3).painted("black").with_engine("diesel").build()
    assert vehicle == builder.Vehicle(wheels=6, seats=3, color="black", engine="diesel")


def test_builder_requires_wheels():
    with pytest.raises(IncompleteBuildError):
        builder.VehicleBuilder().painted("red").build()


def test_director_recipes():
    assert builder.VehicleDirector.make_car().engine == "petrol"
    bicycle = builder.VehicleDirector.make_bicycle()
    assert bicycle.wheels == 2
    assert bicycle.engine is None


def test_builder_demo():
    assert capture(builder) == [
        "Car: red vehicle with 4 wheels, 5 seats and petrol engine",
        "Bicycle: blue vehicle with 2 wheels, 1 seats and no engine",
        "Custom: green vehicle with 3 wheels, 2 seats and no engine",
    ]


# ============================================================
# SINGLETON
# ============================================================

@pytest.fixture
def fresh_settings():
    singleton.AppSettings.reset()
    yield
    singleton.AppSettings.reset()


def test_singleton_shares_one_instance(fresh_settings):
    first = singleton.AppSettings()
    first.set("language", "en")
    second = singleton.AppSettings()
    assert first is second
    assert second.get("language") == "en"


def test_singleton_reset_drops_instance(fresh_settings):
    first = singleton.AppSettings()
    singleton.AppSettings.reset()
    assert singleton.AppSettings() is not first


def test_singleton_demo(fresh_settings):
    assert capture(singleton) == [
        "Same instance: True",
        "Theme seen through second reference: dark",
    ]


# ============================================================
# PROTOTYPE
# ============================================================

def test_clone_is_independent():
    original = prototype.Sheep("Dolly", tags=["famous"])
    twin = original.clone(name="Polly")
    twin.tags.append("clone")

    assert twin is not original
    assert twin.name == "Polly"
    assert twin.color == original.color
    assert original.tags == ["famous"]


def test_prototype_registry_clones():
    registry = prototype.PrototypeRegistry()
    registry.add("black", prototype.Sheep("Shaun", color="black"))
    assert registry.clone("black").color == "black"
    with pytest.raises(KeyError):
        registry.clone("missing")


def test_prototype_demo():
    assert capture(prototype) == [
        "Original: Sheep(name='Dolly', color='white', tags=['famous'])",
        "Clone: Sheep(name='Polly', color='white', tags=['famous', 'clone'])",
    ]
