from typing import Optional

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from pattern_atlas.api.serializers import excerpt, serialize_pattern, serialize_summary
from pattern_atlas.patterns.registry import PatternCategory, get_pattern_registry
from pattern_atlas.renderer.markdown_renderer import render_catalog
from pattern_atlas.runner import run_demo
from pattern_atlas.schemas import (
    DemoResponse,
    PatternCatalogResponse,
    PatternDetail,
    SuggestRequest,
    SuggestResponse,
)

router = APIRouter(
    prefix="",
    tags=["patterns"],
)


@router.get("/health")
def health():
    return {"status": "ok", "patterns": len(get_pattern_registry())}


# ============================================================
# PATTERN ENDPOINTS
# ============================================================

@router.get("/patterns", response_model=PatternCatalogResponse)
def list_patterns(category: Optional[PatternCategory] = None):
    """List all catalogued patterns, optionally for one category"""
    registry = get_pattern_registry()
    summary = registry.get_pattern_summary()
    if category is not None:
        summary["patterns"] = [
            serialize_summary(p) for p in registry.get_by_category(category)
        ]
        summary["total"] = len(summary["patterns"])
    return summary


@router.post("/patterns/suggest", response_model=SuggestResponse)
def suggest_patterns(request: SuggestRequest):
    """Suggest patterns for a described design problem"""
    registry = get_pattern_registry()
    suggestions = registry.suggest_patterns(request.requirements, request.max_results)

    return SuggestResponse(
        requirements_excerpt=excerpt(request.requirements),
        suggestions=[serialize_summary(p) for p in suggestions],
    )


@router.get("/patterns/{pattern_id}", response_model=PatternDetail)
def get_pattern(pattern_id: str):
    """Get details of a specific pattern"""
    return serialize_pattern(get_pattern_registry().require(pattern_id))


@router.get("/patterns/{pattern_id}/source", response_class=PlainTextResponse)
def get_pattern_source(pattern_id: str):
    return get_pattern_registry().require(pattern_id).source


@router.post("/patterns/{pattern_id}/run", response_model=DemoResponse)
def run_pattern(pattern_id: str):
    """Run the sample's usage trace and return what it printed"""
    run = run_demo(get_pattern_registry().require(pattern_id))
    return DemoResponse(pattern_id=run.pattern_id, output=run.lines)


# ============================================================
# DOCUMENT
# ============================================================

@router.get("/catalog.md")
def get_catalog_markdown():
    return Response(content=render_catalog(), media_type="text/markdown")
