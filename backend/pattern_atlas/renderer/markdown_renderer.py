# backend/pattern_atlas/renderer/markdown_renderer.py
"""
Markdown Renderer - Builds the pattern document from live code

Every section pairs the prose from the catalog with the sample's real
source and the output captured from running it, so the document can not
drift from the code.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pattern_atlas import config
from pattern_atlas.patterns.registry import (
    Pattern,
    PatternCategory,
    get_pattern_registry,
)
from pattern_atlas.runner import run_demo

logger = logging.getLogger(__name__)


INTRO = (
    "Each pattern below comes with a short explanation, a self-contained "
    "Python sample and the output printed by its usage trace. Samples do not "
    "depend on each other."
)


def _anchor(text: str) -> str:
    return text.lower().replace(" ", "-")


def render_pattern(pattern: Pattern) -> str:
    run = run_demo(pattern)

    lines = [
        f"### {pattern.name}",
        "",
        f"*{pattern.summary}*",
        "",
        pattern.description,
        "",
    ]

    if pattern.participants:
        lines.append("Participants: " + ", ".join(f"`{p}`" for p in pattern.participants))
        lines.append("")

    # -------------------------
    # Sample source
    # -------------------------
    lines.append("```python")
    lines.append(pattern.source.rstrip())
    lines.append("```")
    lines.append("")

    # -------------------------
    # Usage trace
    # -------------------------
    lines.append("Output:")
    lines.append("")
    lines.append("```text")
    lines.extend(run.lines)
    lines.append("```")

    if pattern.trade_offs:
        lines.append("")
        for key in ("pros", "cons"):
            if key in pattern.trade_offs:
                lines.append(f"- **{key.capitalize()}:** {pattern.trade_offs[key]}")

    return "\n".join(lines)


def render_catalog(
    patterns: Optional[Iterable[Pattern]] = None,
    title: Optional[str] = None,
) -> str:
    if patterns is None:
        patterns = get_pattern_registry().list_all()
    patterns = list(patterns)

    grouped = {
        category: [p for p in patterns if p.category is category]
        for category in PatternCategory
    }

    lines: List[str] = [f"# {title or config.CATALOG_TITLE}", "", INTRO, ""]

    # -------------------------
    # Table of contents
    # -------------------------
    for category, members in grouped.items():
        if not members:
            continue
        lines.append(f"- [{category.title}](#{_anchor(category.title)})")
        for pattern in members:
            lines.append(f"  - [{pattern.name}](#{_anchor(pattern.name)})")
    lines.append("")

    # -------------------------
    # Sections
    # -------------------------
    for category, members in grouped.items():
        if not members:
            continue
        lines.append(f"## {category.title}")
        lines.append("")
        for pattern in members:
            lines.append(render_pattern(pattern))
            lines.append("")

    logger.debug("Rendered catalog with %d patterns", len(patterns))
    return "\n".join(lines).rstrip() + "\n"


def write_catalog(path: Union[str, Path], title: Optional[str] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_catalog(title=title), encoding="utf-8")
    logger.info("Wrote pattern catalog to %s", path)
    return path
