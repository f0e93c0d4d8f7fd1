"""
Core module - BMFont descriptor parsing, writing, and export/import functionality.
"""

from .errors import (
    BMFontParseError,
    UnexpectedEndOfInput,
    BadEndOfLine,
    WrongType,
    ExpectedCharacter,
    EndOfLineInString,
    ConversionFailed,
)
from .parser import (
    FontMetadata,
    FontInfo,
    FontCommon,
    Page,
    CharGlyph,
    KerningPair,
    ChannelPacking,
    Channel,
    parse_bmfont,
    parse_bmfont_text,
)
from .writer import format_bmfont, save_bmfont
from .exporter import export_metadata, load_export_metadata

__all__ = [
    "BMFontParseError",
    "UnexpectedEndOfInput",
    "BadEndOfLine",
    "WrongType",
    "ExpectedCharacter",
    "EndOfLineInString",
    "ConversionFailed",
    "FontMetadata",
    "FontInfo",
    "FontCommon",
    "Page",
    "CharGlyph",
    "KerningPair",
    "ChannelPacking",
    "Channel",
    "parse_bmfont",
    "parse_bmfont_text",
    "format_bmfont",
    "save_bmfont",
    "export_metadata",
    "load_export_metadata",
]
