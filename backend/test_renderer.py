"""
Markdown document rendering
Run with: pytest test_renderer.py
"""

from pattern_atlas.patterns import PATTERN_CATALOG, get_pattern_registry
from pattern_atlas.renderer import render_catalog, render_pattern, write_catalog


def test_sections_follow_taxonomy_order():
    document = render_catalog(title="Patterns")
    assert document.startswith("# Patterns\n")

    positions = [document.index(f"\n## {heading}\n") for heading in ("Creational", "Structural", "Behavioral")]
    assert positions == sorted(positions)

    headings = [document.index(f"\n### {p.name}\n") for p in PATTERN_CATALOG]
    assert headings == sorted(headings)


def test_table_of_contents_links_every_pattern():
    document = render_catalog()
    assert "- [Creational](#creational)" in document
    for pattern in PATTERN_CATALOG:
        assert f"[{pattern.name}](#{pattern.name.lower()})" in document


def test_pattern_section_has_source_and_output():
    section = render_pattern(get_pattern_registry().require("flyweight"))
    assert section.startswith("### Flyweight\n")
    assert "```python\n" in section
    assert "class DNATable:" in section
    assert "Output:" in section
    assert "Error: Breed 'Collie' is not registered in the DNA table" in section
    assert "- **Pros:**" in section


def test_render_subset_skips_empty_categories():
    document = render_catalog([get_pattern_registry().require("state")])
    assert "## Behavioral" in document
    assert "## Creational" not in document
    assert "### Factory" not in document


def test_write_catalog(tmp_path):
    target = tmp_path / "docs" / "PATTERNS.md"
    path = write_catalog(target, title="Atlas")
    assert path == target
    assert target.read_text(encoding="utf-8").startswith("# Atlas\n")
