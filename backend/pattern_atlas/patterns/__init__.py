# backend/pattern_atlas/patterns/__init__.py
"""
Design Pattern Library

Provides the catalogued design patterns so they can be:
- Looked up by id, category or tag
- Suggested from a free-text problem description
- Run and rendered into the markdown document
"""

from pattern_atlas.patterns.registry import (
    Pattern,
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
    get_registry,
)
from pattern_atlas.patterns.catalog import (
    PATTERN_CATALOG,
    register_all_patterns,
)

__all__ = [
    "Pattern",
    "PatternCategory",
    "PatternRegistry",
    "get_pattern_registry",
    "get_registry",
    "PATTERN_CATALOG",
    "register_all_patterns",
]
