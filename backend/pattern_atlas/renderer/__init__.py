from pattern_atlas.renderer.markdown_renderer import (
    render_catalog,
    render_pattern,
    write_catalog,
)

__all__ = ["render_catalog", "render_pattern", "write_catalog"]
