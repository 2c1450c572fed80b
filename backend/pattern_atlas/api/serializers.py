from pattern_atlas.patterns.registry import Pattern
from pattern_atlas.schemas import PatternDetail, PatternSummary


EXCERPT_LENGTH = 200


def serialize_summary(pattern: Pattern) -> PatternSummary:
    return PatternSummary(
        id=pattern.id,
        name=pattern.name,
        category=pattern.category.value,
        summary=pattern.summary,
    )


def serialize_pattern(pattern: Pattern) -> PatternDetail:
    """Full, JSON-ready view of a pattern; the sample module is left out"""
    return PatternDetail(
        id=pattern.id,
        name=pattern.name,
        category=pattern.category.value,
        summary=pattern.summary,
        description=pattern.description,
        participants=list(pattern.participants),
        tags=list(pattern.tags),
        applicable_when=list(pattern.applicable_when),
        trade_offs=dict(pattern.trade_offs),
    )


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return text[:length] + "..." if len(text) > length else text
