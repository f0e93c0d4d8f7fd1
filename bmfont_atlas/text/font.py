"""
Bitmap Font - Character lookup over parsed BMFont metadata.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.parser import BMFontParser, CharGlyph, FontMetadata

logger = logging.getLogger('BMFont.font')

PLACEHOLDER_CHAR = '▯'  # White vertical rectangle


@dataclass
class FontConfig:
    """Settings for looking up and laying out glyphs."""
    scale: float = 2.0  # Multiplier applied to every metric
    fallback_chars: Tuple[str, ...] = (PLACEHOLDER_CHAR, '?')  # Tried in order for missing glyphs


class BitmapFont:
    """A parsed BMFont with a character -> glyph table."""

    def __init__(self, metadata: FontMetadata, base_dir: Optional[str] = None,
                 config: Optional[FontConfig] = None):
        self.meta = metadata
        self.base_dir = base_dir
        self.config = config or FontConfig()

        self.characters: Dict[str, CharGlyph] = {}
        for glyph in metadata.chars:
            # Surrogates and ids past U+10FFFF have no character
            if glyph.id > 0x10FFFF or 0xD800 <= glyph.id <= 0xDFFF:
                logger.debug(f"Skipping glyph with invalid code point {glyph.id}")
                continue
            self.characters[chr(glyph.id)] = glyph

        self.kernings: Dict[Tuple[int, int], int] = {
            (pair.first, pair.second): pair.amount for pair in metadata.kernings
        }

    def __contains__(self, char: str) -> bool:
        return char in self.characters

    def __len__(self) -> int:
        return len(self.characters)

    def get(self, char: str) -> CharGlyph:
        """
        Get the glyph for a character.

        Missing characters fall back to each of config.fallback_chars in turn.

        Raises:
            KeyError: if neither the character nor any fallback has a glyph
        """
        glyph = self.characters.get(char)
        if glyph is not None:
            return glyph

        for fallback in self.config.fallback_chars:
            glyph = self.characters.get(fallback)
            if glyph is not None:
                return glyph

        raise KeyError(char)

    def kerning(self, first: str, second: str) -> int:
        """Kerning amount between two characters, 0 if there is no pair."""
        return self.kernings.get((ord(first), ord(second)), 0)

    @property
    def line_height(self) -> int:
        return self.meta.common.line_height

    def texture_path(self, page_index: int = 0) -> str:
        """
        Path of a texture page file, resolved against base_dir.

        Raises:
            IndexError: if the font has no such page
        """
        page = self.meta.pages[page_index]
        if self.base_dir is None:
            return page.file
        return os.path.join(self.base_dir, page.file)


def load_font(file_path: str, config: Optional[FontConfig] = None) -> BitmapFont:
    """Parse a .fnt file and wrap it in a BitmapFont."""
    metadata = BMFontParser().parse(file_path)
    base_dir = os.path.dirname(os.path.abspath(file_path))
    logger.info(f"Loaded font {metadata.info.face!r} with {len(metadata.chars)} glyphs")
    return BitmapFont(metadata, base_dir=base_dir, config=config)
