"""
Pattern catalog and registry verification
Run with: pytest test_patterns.py
"""

import threading

import pytest

from pattern_atlas.errors import DuplicatePatternError, PatternNotFoundError
from pattern_atlas.patterns import (
    PATTERN_CATALOG,
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
    get_registry,
    register_all_patterns,
)
from pattern_atlas.patterns.catalog import (
    ADAPTER_PATTERN,
    DECORATOR_PATTERN,
    FACTORY_PATTERN,
    PROXY_PATTERN,
)
from pattern_atlas.runner import run_all, run_demo


@pytest.fixture
def registry():
    reg = PatternRegistry()
    register_all_patterns(reg)
    return reg


def test_catalog_covers_thirteen_patterns_in_document_order():
    assert [p.id for p in PATTERN_CATALOG] == [
        "factory", "builder", "singleton", "prototype",
        "adapter", "proxy", "facade", "decorator", "bridge", "flyweight", "composite",
        "strategy", "state",
    ]


def test_category_counts(registry):
    summary = registry.get_pattern_summary()
    assert summary["total"] == 13
    assert summary["by_category"] == {"creational": 4, "structural": 7, "behavioral": 2}


def test_every_entry_names_real_participants():
    for pattern in PATTERN_CATALOG:
        for name in pattern.participants:
            assert hasattr(pattern.module, name), f"{pattern.id} lacks {name}"
        assert callable(pattern.demo)
        assert "def demo" in pattern.source


def test_get_and_require(registry):
    assert registry.get("state").name == "State"
    assert registry.get("visitor") is None
    with pytest.raises(PatternNotFoundError):
        registry.require("visitor")


def test_duplicate_registration_rejected():
    reg = PatternRegistry()
    reg.register(FACTORY_PATTERN)
    with pytest.raises(DuplicatePatternError):
        reg.register(FACTORY_PATTERN)
    assert len(reg) == 1


def test_lookup_by_category_and_tag(registry):
    behavioral = registry.get_by_category(PatternCategory.BEHAVIORAL)
    assert [p.id for p in behavioral] == ["strategy", "state"]
    assert {p.id for p in registry.get_by_tag("wrapper")} == {"adapter", "proxy", "decorator"}
    assert registry.get_by_tag("no-such-tag") == []


@pytest.mark.parametrize(
    "context, expected",
    [
        ("I need a state machine for a traffic light", "state"),
        ("Lazy loading of images that are expensive to create", "proxy"),
        ("wrap a legacy third-party sensor with an incompatible interface", "adapter"),
        ("nested folders form a part-whole hierarchy", "composite"),
    ],
)
def test_find_applicable_ranks_best_match_first(registry, context, expected):
    matches = registry.find_applicable(context, max_results=3)
    assert matches[0].id == expected


def test_find_applicable_without_match(registry):
    assert registry.find_applicable("quantum banana") == []
    assert registry.suggest_patterns("quantum banana") == []


def test_find_applicable_respects_max_results(registry):
    assert len(registry.find_applicable("tree wrapper algorithm creation", max_results=2)) == 2


def test_global_registry_is_shared():
    assert get_pattern_registry() is get_registry()
    assert len(get_pattern_registry()) == len(PATTERN_CATALOG)


def test_run_demo_captures_lines(registry):
    run = run_demo(registry.require("state"))
    assert run.pattern_id == "state"
    assert run.text == "Light is green\nLight is red\nLight is green"


def test_run_all_runs_every_sample(registry):
    runs = run_all(registry.list_all())
    assert [r.pattern_id for r in runs] == [p.id for p in PATTERN_CATALOG]
    assert all(r.lines for r in runs)


def test_find_applicable_ties_keep_registration_order():
    # "wrapper" is a tag of all three, each scores 1
    forward = PatternRegistry()
    for pattern in (ADAPTER_PATTERN, PROXY_PATTERN, DECORATOR_PATTERN):
        forward.register(pattern)
    assert [p.id for p in forward.find_applicable("wrapper")] == ["adapter", "proxy", "decorator"]

    backward = PatternRegistry()
    for pattern in (DECORATOR_PATTERN, PROXY_PATTERN, ADAPTER_PATTERN):
        backward.register(pattern)
    assert [p.id for p in backward.find_applicable("wrapper")] == ["decorator", "proxy", "adapter"]


def test_concurrent_demo_runs_keep_singleton_trace(registry):
    singleton = registry.require("singleton")
    expected = ["Same instance: True", "Theme seen through second reference: dark"]
    bad_runs = []

    def worker():
        for _ in range(200):
            lines = run_demo(singleton).lines
            if lines != expected:
                bad_runs.append(lines)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert bad_runs == []


def test_concurrent_demo_runs_keep_proxy_trace(registry):
    proxy = registry.require("proxy")
    bad_runs = []

    def worker():
        for _ in range(100):
            lines = run_demo(proxy).lines
            if lines[-1] != "Loads after two displays: 1":
                bad_runs.append(lines)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert bad_runs == []
