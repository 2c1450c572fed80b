# backend/pattern_atlas/patterns/catalog.py
"""
Pattern Catalog - The design patterns covered by the atlas

Entries are listed in document order: creational, structural, behavioral.
"""

import logging

from pattern_atlas.patterns.registry import (
    Pattern,
    PatternCategory,
    PatternRegistry,
)
from pattern_atlas.samples.behavioral import state, strategy
from pattern_atlas.samples.creational import builder, factory, prototype, singleton
from pattern_atlas.samples.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

logger = logging.getLogger(__name__)


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

FACTORY_PATTERN = Pattern(
    id="factory",
    name="Factory",
    category=PatternCategory.CREATIONAL,
    summary="Create objects without naming their concrete class.",
    description=(
        "A factory centralises the decision of which class to instantiate. "
        "Client code asks for a kind of product by name and works with the "
        "common interface it gets back, so adding a new product means "
        "touching the factory only."
    ),
    module=factory,
    participants=["Animal", "Cat", "Dog", "AnimalFactory"],
    tags=["creation", "instantiation", "polymorphism"],
    applicable_when=["create objects", "concrete class", "decide at runtime", "by name"],
    trade_offs={
        "pros": "Single place to add products, callers depend on an interface",
        "cons": "Extra indirection, factory grows with every product",
    },
)


BUILDER_PATTERN = Pattern(
    id="builder",
    name="Builder",
    category=PatternCategory.CREATIONAL,
    summary="Assemble a complex object step by step.",
    description=(
        "A builder collects configuration through small chained calls and "
        "produces the finished object in one validated step. A director "
        "packages the recipes used most often."
    ),
    module=builder,
    participants=["Vehicle", "VehicleBuilder", "VehicleDirector"],
    tags=["creation", "fluent", "construction"],
    applicable_when=["many parameters", "step by step", "optional parts", "complex object"],
    trade_offs={
        "pros": "Readable construction, validation in one place, immutable result",
        "cons": "More classes for simple objects",
    },
)


SINGLETON_PATTERN = Pattern(
    id="singleton",
    name="Singleton",
    category=PatternCategory.CREATIONAL,
    summary="Guarantee one shared instance of a class.",
    description=(
        "A singleton class hands out the same instance on every "
        "construction, giving the whole program one shared point of access "
        "to a resource such as application settings."
    ),
    module=singleton,
    participants=["AppSettings"],
    tags=["creation", "global", "shared"],
    applicable_when=["one instance", "shared settings", "global access", "single instance"],
    trade_offs={
        "pros": "One source of truth, lazy creation",
        "cons": "Hidden global state, harder to test in isolation",
    },
)


PROTOTYPE_PATTERN = Pattern(
    id="prototype",
    name="Prototype",
    category=PatternCategory.CREATIONAL,
    summary="Create objects by copying a configured original.",
    description=(
        "Instead of building a new object from scratch, clone an existing "
        "prototype and tweak the copy. Deep copies keep mutable state of "
        "the clone independent from the original."
    ),
    module=prototype,
    participants=["Sheep", "PrototypeRegistry"],
    tags=["creation", "clone", "copy"],
    applicable_when=["clone", "copy an existing", "expensive to configure"],
    trade_offs={
        "pros": "Cheap creation of preconfigured objects, no subclass per variant",
        "cons": "Deep copies of object graphs can surprise",
    },
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER_PATTERN = Pattern(
    id="adapter",
    name="Adapter",
    category=PatternCategory.STRUCTURAL,
    summary="Make an incompatible interface fit the one clients expect.",
    description=(
        "An adapter wraps an object whose interface cannot change, such as "
        "a third-party or legacy class, and translates calls into the "
        "interface the rest of the code already uses."
    ),
    module=adapter,
    participants=["TemperatureSensor", "FahrenheitSensor", "FahrenheitSensorAdapter"],
    tags=["wrapper", "legacy", "integration"],
    applicable_when=["incompatible interface", "legacy", "third-party", "convert"],
    trade_offs={
        "pros": "Reuse existing classes unchanged",
        "cons": "One more layer per integration",
    },
)


PROXY_PATTERN = Pattern(
    id="proxy",
    name="Proxy",
    category=PatternCategory.STRUCTURAL,
    summary="Stand in for another object to control access to it.",
    description=(
        "A proxy exposes the same interface as the real subject and decides "
        "when and whether to forward calls. This virtual proxy delays an "
        "expensive load until the object is first used."
    ),
    module=proxy,
    participants=["Image", "RealImage", "LazyImageProxy"],
    tags=["wrapper", "lazy", "access-control"],
    applicable_when=["lazy", "expensive to create", "control access", "defer loading"],
    trade_offs={
        "pros": "Transparent laziness or access checks",
        "cons": "Delayed cost can surprise the first caller",
    },
)


FACADE_PATTERN = Pattern(
    id="facade",
    name="Facade",
    category=PatternCategory.STRUCTURAL,
    summary="Offer one simple entry point to a complex subsystem.",
    description=(
        "A facade knows how the parts of a subsystem cooperate and exposes "
        "a single high-level operation, so clients no longer need to "
        "orchestrate the parts themselves."
    ),
    module=facade,
    participants=["CPU", "Memory", "HardDrive", "ComputerFacade"],
    tags=["simplify", "subsystem"],
    applicable_when=["complex subsystem", "simplify", "single entry point", "many steps"],
    trade_offs={
        "pros": "Smaller client code, subsystem can change behind it",
        "cons": "Can grow into a god object",
    },
)


DECORATOR_PATTERN = Pattern(
    id="decorator",
    name="Decorator",
    category=PatternCategory.STRUCTURAL,
    summary="Add behaviour to an object by wrapping it.",
    description=(
        "Decorators share the interface of the object they wrap and add "
        "their own contribution before or after delegating. They can be "
        "stacked to combine features without a subclass per combination."
    ),
    module=decorator,
    participants=["Coffee", "SimpleCoffee", "CoffeeDecorator", "Milk", "Sugar"],
    tags=["wrapper", "composition", "extension"],
    applicable_when=["add behaviour", "combine features", "at runtime", "extend without subclass"],
    trade_offs={
        "pros": "Features combine freely at runtime",
        "cons": "Many small objects, order of wrapping can matter",
    },
)


BRIDGE_PATTERN = Pattern(
    id="bridge",
    name="Bridge",
    category=PatternCategory.STRUCTURAL,
    summary="Split an abstraction from its implementation so both can vary.",
    description=(
        "The abstraction holds a reference to an implementor and talks to "
        "it only through the implementor interface. New buttons and new "
        "devices can then be added independently of each other."
    ),
    module=bridge,
    participants=["Button", "DimmerButton", "Device", "Light", "Fan"],
    tags=["decoupling", "composition"],
    applicable_when=["vary independently", "two dimensions", "abstraction and implementation"],
    trade_offs={
        "pros": "Avoids a class per combination",
        "cons": "More up-front design",
    },
)


FLYWEIGHT_PATTERN = Pattern(
    id="flyweight",
    name="Flyweight",
    category=PatternCategory.STRUCTURAL,
    summary="Share common state between many fine-grained objects.",
    description=(
        "Intrinsic state that many objects have in common lives once in a "
        "shared table; each object keeps only its extrinsic state. Asking "
        "the table for an entry that was never registered is a misuse and "
        "fails loudly."
    ),
    module=flyweight,
    participants=["DogDNA", "Dog", "DNATable"],
    tags=["memory", "sharing", "cache"],
    applicable_when=["many objects", "memory", "shared state", "duplicate data"],
    trade_offs={
        "pros": "Large memory savings for big populations",
        "cons": "Shared state must stay immutable",
    },
)


COMPOSITE_PATTERN = Pattern(
    id="composite",
    name="Composite",
    category=PatternCategory.STRUCTURAL,
    summary="Treat single objects and groups of objects uniformly.",
    description=(
        "Leaves and composites implement one interface. A composite forwards "
        "each request to its children and combines their answers, so "
        "clients walk whole trees without special cases."
    ),
    module=composite,
    participants=["Component", "Leaf", "Composite"],
    tags=["tree", "hierarchy", "recursion"],
    applicable_when=["tree", "hierarchy", "part-whole", "nested"],
    trade_offs={
        "pros": "Uniform client code for any tree shape",
        "cons": "Hard to restrict which children a composite accepts",
    },
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

STRATEGY_PATTERN = Pattern(
    id="strategy",
    name="Strategy",
    category=PatternCategory.BEHAVIORAL,
    summary="Swap interchangeable algorithms behind one interface.",
    description=(
        "The context delegates a computation to a strategy object. Each "
        "strategy implements the same interface, so the algorithm can be "
        "chosen or replaced at runtime."
    ),
    module=strategy,
    participants=["RouteStrategy", "Walking", "Cycling", "Driving", "Navigator"],
    tags=["algorithm", "polymorphism", "runtime"],
    applicable_when=["interchangeable", "algorithm", "swap behaviour", "choose at runtime"],
    trade_offs={
        "pros": "No conditionals on algorithm choice, easy to add strategies",
        "cons": "Clients must know which strategy to pick",
    },
)


STATE_PATTERN = Pattern(
    id="state",
    name="State",
    category=PatternCategory.BEHAVIORAL,
    summary="Let an object change behaviour when its internal state changes.",
    description=(
        "Each state is an object that handles requests for the context and "
        "chooses the next state. The traffic light toggles between green "
        "and red on every manual change and has no terminal state."
    ),
    module=state,
    participants=["TrafficLight", "LightState", "GreenState", "RedState"],
    tags=["state-machine", "transitions"],
    applicable_when=["state machine", "transition", "behaviour depends on state", "traffic light"],
    trade_offs={
        "pros": "Transitions live with the states, no large switch",
        "cons": "One class per state",
    },
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

PATTERN_CATALOG = [
    # Creational
    FACTORY_PATTERN,
    BUILDER_PATTERN,
    SINGLETON_PATTERN,
    PROTOTYPE_PATTERN,
    # Structural
    ADAPTER_PATTERN,
    PROXY_PATTERN,
    FACADE_PATTERN,
    DECORATOR_PATTERN,
    BRIDGE_PATTERN,
    FLYWEIGHT_PATTERN,
    COMPOSITE_PATTERN,
    # Behavioral
    STRATEGY_PATTERN,
    STATE_PATTERN,
]


def register_all_patterns(registry: PatternRegistry) -> None:
    """Register all patterns from the catalog"""
    for pattern in PATTERN_CATALOG:
        registry.register(pattern)
    logger.info("Registered %d patterns", len(registry))
