"""
Output subsystem.

Modules:
    csource: C array source rendering
    preview: Terminal and image previews of packed glyphs
"""
from .csource import OutputOptions, render
from .preview import glyph_rows, preview_text, render_sheet

__all__ = ["OutputOptions", "render", "glyph_rows", "preview_text", "render_sheet"]
