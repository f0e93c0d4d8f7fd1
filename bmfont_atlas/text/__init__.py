"""
Text module - Glyph lookup and text layout for parsed BMFont fonts.
"""

from .font import BitmapFont, FontConfig, load_font
from .layout import Alignment, GlyphPlacement, TextLayout, layout_text, measure_text

__all__ = [
    "BitmapFont",
    "FontConfig",
    "load_font",
    "Alignment",
    "GlyphPlacement",
    "TextLayout",
    "layout_text",
    "measure_text",
]
