# backend/pattern_atlas/runner.py
"""
Runs pattern samples and captures their usage trace
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pattern_atlas.patterns.registry import Pattern, get_pattern_registry

logger = logging.getLogger(__name__)

# Samples keep class-level state (singleton instance, proxy load counter),
# so only one demo runs at a time
_run_lock = threading.Lock()


@dataclass
class DemoRun:
    """Lines a sample printed while running its usage trace"""
    pattern_id: str
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def run_demo(pattern: Pattern) -> DemoRun:
    run = DemoRun(pattern_id=pattern.id)
    with _run_lock:
        pattern.demo(emit=lambda line: run.lines.append(str(line)))
    logger.debug("Ran %s demo, %d lines", pattern.id, len(run.lines))
    return run


def run_all(patterns: Optional[Iterable[Pattern]] = None) -> List[DemoRun]:
    if patterns is None:
        patterns = get_pattern_registry().list_all()
    return [run_demo(p) for p in patterns]
