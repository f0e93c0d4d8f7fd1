"""
Text Layout - Positions glyphs for a string of text.

Works purely in metrics: the result says where each glyph rectangle goes,
drawing it is up to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ..core.parser import CharGlyph
from .font import BitmapFont


class Alignment(Enum):
    """Horizontal alignment of lines against the widest line."""
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


@dataclass
class GlyphPlacement:
    """Where one character's glyph image goes, in scaled units."""
    character: str
    glyph: CharGlyph
    x: float
    y: float
    width: float
    height: float


@dataclass
class TextLayout:
    """Laid out text."""
    placements: List[GlyphPlacement] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0
    line_widths: List[float] = field(default_factory=list)


def layout_text(font: BitmapFont, text: str, alignment: Alignment = Alignment.LEADING,
                kerning: bool = True) -> TextLayout:
    """
    Lay out text line by line.

    Args:
        font: Font to take glyphs from
        text: Text to lay out; '\\n' starts a new line, blank lines are skipped
        alignment: How lines shorter than the widest one are shifted
        kerning: Apply kerning pairs between neighbouring characters

    Returns:
        Glyph placements and overall size

    Raises:
        KeyError: if a character and all fallbacks are missing from the font
    """
    # Blank lines take no space
    text_lines = [line for line in text.split('\n') if line]
    if not text_lines:
        return TextLayout()

    scale = font.config.scale
    line_height = font.line_height * scale

    lines: List[List[GlyphPlacement]] = []
    line_widths: List[float] = []

    for line_number, line in enumerate(text_lines):
        y = line_number * line_height
        pen_x = 0.0
        placements = []
        previous = None

        for char in line:
            glyph = font.get(char)
            if kerning and previous is not None:
                pen_x += font.kerning(previous, char) * scale

            placements.append(GlyphPlacement(
                character=char,
                glyph=glyph,
                x=pen_x + glyph.xoffset * scale,
                y=y + glyph.yoffset * scale,
                width=glyph.width * scale,
                height=glyph.height * scale,
            ))
            pen_x += glyph.xadvance * scale
            previous = char

        lines.append(placements)
        line_widths.append(pen_x)

    width = max(line_widths)

    result = TextLayout(width=width, height=len(lines) * line_height, line_widths=line_widths)
    for placements, line_width in zip(lines, line_widths):
        if alignment == Alignment.CENTER:
            shift = (width - line_width) / 2
        elif alignment == Alignment.TRAILING:
            shift = width - line_width
        else:
            shift = 0.0

        for placement in placements:
            placement.x += shift
            result.placements.append(placement)

    return result


def measure_text(font: BitmapFont, text: str, kerning: bool = True) -> Tuple[float, float]:
    """Return the (width, height) text would take up."""
    layout = layout_text(font, text, kerning=kerning)
    return layout.width, layout.height
