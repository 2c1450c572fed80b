# backend/pattern_atlas/patterns/registry.py
"""
Pattern Registry - Central store for design patterns
"""

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import Callable, Dict, List, Optional

from pattern_atlas.errors import DuplicatePatternError, PatternNotFoundError

logger = logging.getLogger(__name__)


class PatternCategory(Enum):
    """Taxonomic families of object-oriented design patterns"""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass
class Pattern:
    """
    A design pattern entry

    Each entry points at the sample module that illustrates it. The module
    must expose a ``demo(emit=print)`` function running the usage trace.
    """
    id: str
    name: str
    category: PatternCategory
    summary: str
    description: str
    module: ModuleType

    # Classes that take part in the sample
    participants: List[str] = field(default_factory=list)

    # Metadata
    tags: List[str] = field(default_factory=list)
    applicable_when: List[str] = field(default_factory=list)  # Trigger keywords
    trade_offs: Dict[str, str] = field(default_factory=dict)  # pros/cons

    @property
    def demo(self) -> Callable:
        return self.module.demo

    @property
    def source(self) -> str:
        return inspect.getsource(self.module)


class PatternRegistry:
    """
    Central registry for design patterns

    Provides pattern lookup, filtering, and matching capabilities.
    """

    def __init__(self):
        self.patterns: Dict[str, Pattern] = {}
        self._category_index: Dict[PatternCategory, List[str]] = {cat: [] for cat in PatternCategory}
        self._tag_index: Dict[str, List[str]] = {}

    def __len__(self) -> int:
        return len(self.patterns)

    def __contains__(self, pattern_id: str) -> bool:
        return pattern_id in self.patterns

    def register(self, pattern: Pattern) -> None:
        """Register a pattern in the registry"""
        if pattern.id in self.patterns:
            raise DuplicatePatternError(pattern.id)
        self.patterns[pattern.id] = pattern

        # Update category index
        self._category_index[pattern.category].append(pattern.id)

        # Update tag index
        for tag in pattern.tags:
            self._tag_index.setdefault(tag, []).append(pattern.id)

        logger.debug("Registered pattern %s (%s)", pattern.id, pattern.category.value)

    def get(self, pattern_id: str) -> Optional[Pattern]:
        """Get a pattern by ID"""
        return self.patterns.get(pattern_id)

    def require(self, pattern_id: str) -> Pattern:
        """Get a pattern by ID or raise PatternNotFoundError"""
        pattern = self.get(pattern_id)
        if pattern is None:
            logger.debug("Lookup miss for pattern %s", pattern_id)
            raise PatternNotFoundError(pattern_id)
        return pattern

    def find_applicable(self, context: str, max_results: int = 5) -> List[Pattern]:
        """Find patterns applicable to a given problem description"""
        context_lower = context.lower()
        scored_patterns = []

        for pattern in self.patterns.values():
            score = 0

            for keyword in pattern.applicable_when:
                if keyword.lower() in context_lower:
                    score += 2

            for tag in pattern.tags:
                if tag.lower() in context_lower:
                    score += 1

            if pattern.name.lower() in context_lower:
                score += 3

            if score > 0:
                scored_patterns.append((score, pattern))

        # sort() is stable, ties keep registration order
        scored_patterns.sort(key=lambda x: x[0], reverse=True)
        results = [p for _, p in scored_patterns[:max_results]]

        logger.debug("find_applicable(%r) -> %s", context[:50], [p.id for p in results])
        return results

    def suggest_patterns(self, context: str, max_results: int = 5) -> List[Pattern]:
        """Suggest patterns based on context - alias for find_applicable"""
        return self.find_applicable(context, max_results)

    def get_by_category(self, category: PatternCategory) -> List[Pattern]:
        """Get all patterns in a category"""
        pattern_ids = self._category_index.get(category, [])
        return [self.patterns[pid] for pid in pattern_ids]

    def get_by_tag(self, tag: str) -> List[Pattern]:
        """Get all patterns with a specific tag"""
        pattern_ids = self._tag_index.get(tag, [])
        return [self.patterns[pid] for pid in pattern_ids]

    def list_all(self) -> List[Pattern]:
        """List all registered patterns"""
        return list(self.patterns.values())

    def get_pattern_summary(self) -> dict:
        return {
            "total": len(self.patterns),
            "by_category": {
                cat.value: len(ids) for cat, ids in self._category_index.items()
            },
            "patterns": [
                {
                    "id": p.id,
                    "name": p.name,
                    "category": p.category.value,
                    "summary": p.summary,
                }
                for p in self.patterns.values()
            ],
        }


# Global registry instance
_global_registry: Optional[PatternRegistry] = None


def get_pattern_registry() -> PatternRegistry:
    """Get or create the global pattern registry"""
    global _global_registry
    if _global_registry is None:
        registry = PatternRegistry()
        # Import late, the catalog imports this module
        from pattern_atlas.patterns.catalog import register_all_patterns
        register_all_patterns(registry)
        _global_registry = registry
    return _global_registry


# Short alias
get_registry = get_pattern_registry
