from pydantic import BaseModel, Field
from typing import Dict, List


class SuggestRequest(BaseModel):
    """Free-text description of a design problem"""
    requirements: str
    max_results: int = Field(default=5, ge=1, le=13)


class PatternSummary(BaseModel):
    id: str
    name: str
    category: str
    summary: str


class PatternCatalogResponse(BaseModel):
    total: int
    by_category: Dict[str, int]
    patterns: List[PatternSummary]


class PatternDetail(PatternSummary):
    description: str
    participants: List[str] = []
    tags: List[str] = []
    applicable_when: List[str] = []
    trade_offs: Dict[str, str] = {}


class SuggestResponse(BaseModel):
    requirements_excerpt: str
    suggestions: List[PatternSummary]


class DemoResponse(BaseModel):
    pattern_id: str
    output: List[str]
