from __future__ import annotations

from .render_pillow import compose, draw_text, load_font, rasterize_text, text_origin

__all__ = ["compose", "draw_text", "load_font", "rasterize_text", "text_origin"]
