"""
BMFont Parser - AngelCode BMFont text descriptor parser

Parses .fnt text descriptors into font information, texture pages,
glyph metrics and kerning pairs.

Format reference: https://www.angelcode.com/products/bmfont/doc/file_format.html
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Callable, Dict, List, Optional, Tuple

from .attributes import INT16, INT64, UINT8, UINT16, UINT32, Attribute
from .reader import BMFontReader, Entry

logger = logging.getLogger('BMFont.parser')


class ChannelPacking(IntEnum):
    """What a texture channel holds when glyphs are packed into channels."""
    GLYPH = 0
    OUTLINE = 1
    GLYPH_OUTLINE = 2
    ZERO = 3
    ONE = 4

    @classmethod
    def from_string(cls, text: str) -> 'ChannelPacking':
        """Parse a packing code. Raises ValueError for anything but 0-4."""
        return cls(UINT8(text))


class Channel(IntFlag):
    """Texture channels a glyph image is stored in."""
    BLUE = 1
    GREEN = 2
    RED = 4
    ALPHA = 8
    ALL = 15

    @classmethod
    def from_string(cls, text: str) -> 'Channel':
        # High bits are kept as-is
        return cls(UINT8(text))


# Dispatch table entries: BMFont attribute name -> (field name, decoder)
FieldTable = Dict[str, Tuple[str, Callable[[Attribute], object]]]


def _number(factory) -> Callable[[Attribute], int]:
    return lambda attr: attr.parsed(factory)


def _numbers(factory) -> Callable[[Attribute], Tuple[int, ...]]:
    return lambda attr: tuple(attr.array(factory))


def _flag(attr: Attribute) -> bool:
    return attr.bool()


def _text(attr: Attribute) -> str:
    return attr.string()


def _decode_fields(entry: Entry, table: FieldTable) -> dict:
    """Decode every recognized attribute of entry. Unknown names are skipped."""
    values = {}
    for name, attr in entry:
        target = table.get(name)
        if target is None:
            continue
        field_name, decode = target
        values[field_name] = decode(attr)
    return values


@dataclass(frozen=True)
class FontInfo:
    """Font info block (the 'info' line)."""
    face: str = ""
    size: int = 0
    bold: bool = False
    italic: bool = False
    charset: str = ""
    stretch_h: int = 0
    smooth: bool = False
    aa: int = 0
    padding: Tuple[int, ...] = (0, 0, 0, 0)
    spacing: Tuple[int, ...] = (0, 0)
    outline: int = 0

    FIELDS = {
        'face': ('face', _text),
        'size': ('size', _number(INT16)),
        'bold': ('bold', _flag),
        'italic': ('italic', _flag),
        'charset': ('charset', _text),
        'stretchH': ('stretch_h', _number(UINT16)),
        'smooth': ('smooth', _flag),
        'aa': ('aa', _number(UINT8)),
        'padding': ('padding', _numbers(UINT8)),
        'spacing': ('spacing', _numbers(UINT8)),
        'outline': ('outline', _number(UINT8)),
    }

    @classmethod
    def from_entry(cls, entry: Entry) -> 'FontInfo':
        return cls(**_decode_fields(entry, cls.FIELDS))


@dataclass(frozen=True)
class FontCommon:
    """Information common to all glyphs (the 'common' line)."""
    line_height: int = 0
    base: int = 0
    scale_w: int = 0
    scale_h: int = 0
    pages: int = 0
    packed: bool = False
    alpha_chnl: ChannelPacking = ChannelPacking.GLYPH
    red_chnl: ChannelPacking = ChannelPacking.GLYPH
    green_chnl: ChannelPacking = ChannelPacking.GLYPH
    blue_chnl: ChannelPacking = ChannelPacking.GLYPH

    FIELDS = {
        'lineHeight': ('line_height', _number(UINT16)),
        'base': ('base', _number(UINT16)),
        'scaleW': ('scale_w', _number(UINT16)),
        'scaleH': ('scale_h', _number(UINT16)),
        'pages': ('pages', _number(UINT8)),
        'packed': ('packed', _flag),
        'alphaChnl': ('alpha_chnl', _number(ChannelPacking.from_string)),
        'redChnl': ('red_chnl', _number(ChannelPacking.from_string)),
        'greenChnl': ('green_chnl', _number(ChannelPacking.from_string)),
        'blueChnl': ('blue_chnl', _number(ChannelPacking.from_string)),
    }

    @classmethod
    def from_entry(cls, entry: Entry) -> 'FontCommon':
        return cls(**_decode_fields(entry, cls.FIELDS))


@dataclass(frozen=True)
class Page:
    """A texture page (the 'page' line)."""
    id: int = 0
    file: str = ""

    FIELDS = {
        'id': ('id', _number(UINT16)),
        'file': ('file', _text),
    }

    @classmethod
    def from_entry(cls, entry: Entry) -> 'Page':
        return cls(**_decode_fields(entry, cls.FIELDS))


@dataclass(frozen=True)
class CharGlyph:
    """Metrics and texture location of one character (the 'char' line)."""
    id: int = 0  # Unicode code point
    x: int = 0  # Left edge of the glyph image in the texture
    y: int = 0  # Top edge of the glyph image in the texture
    width: int = 0
    height: int = 0
    xoffset: int = 0  # Offset from the pen position when drawing
    yoffset: int = 0
    xadvance: int = 0  # Pen advance after drawing
    page: int = 0  # Texture page index
    chnl: Channel = Channel.ALL

    FIELDS = {
        'id': ('id', _number(UINT32)),
        'x': ('x', _number(UINT16)),
        'y': ('y', _number(UINT16)),
        'width': ('width', _number(UINT16)),
        'height': ('height', _number(UINT16)),
        'xoffset': ('xoffset', _number(INT16)),
        'yoffset': ('yoffset', _number(INT16)),
        'xadvance': ('xadvance', _number(INT16)),
        'page': ('page', _number(UINT8)),
        'chnl': ('chnl', _number(Channel.from_string)),
    }

    @classmethod
    def from_entry(cls, entry: Entry) -> 'CharGlyph':
        return cls(**_decode_fields(entry, cls.FIELDS))


@dataclass(frozen=True)
class KerningPair:
    """Horizontal adjustment for 'second' drawn right after 'first'."""
    first: int = 0
    second: int = 0
    amount: int = 0

    FIELDS = {
        'first': ('first', _number(UINT32)),
        'second': ('second', _number(UINT32)),
        'amount': ('amount', _number(INT16)),
    }

    @classmethod
    def from_entry(cls, entry: Entry) -> 'KerningPair':
        return cls(**_decode_fields(entry, cls.FIELDS))


@dataclass(frozen=True)
class FontMetadata:
    """Complete BMFont descriptor contents."""
    info: FontInfo = field(default_factory=FontInfo)
    common: FontCommon = field(default_factory=FontCommon)
    pages: Tuple[Page, ...] = ()
    chars: Tuple[CharGlyph, ...] = ()
    kernings: Tuple[KerningPair, ...] = ()

    @classmethod
    def parse(cls, text: str) -> 'FontMetadata':
        """Parse descriptor text. See BMFontParser."""
        return BMFontParser().parse_text(text)


def _count_hint(entry: Entry) -> Optional[int]:
    """Read the 'count' attribute of a chars/kernings line, if it is numeric."""
    count = entry.attributes.get('count')
    if count is None:
        return None
    try:
        return INT64(count)
    except ValueError:
        return None


class BMFontParser:
    """Parser for BMFont text descriptors."""

    def __init__(self):
        self.reader: Optional[BMFontReader] = None

    def parse(self, file_path: str) -> FontMetadata:
        """Parse a .fnt file and return its metadata."""
        # utf-8-sig drops a leading BOM that some exporters write
        with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
            text = f.read()
        logger.debug(f"Read {len(text)} characters from {file_path}")
        return self.parse_text(text)

    def parse_text(self, text: str) -> FontMetadata:
        """
        Parse descriptor text.

        The first error aborts the whole parse; nothing partial is returned.

        Args:
            text: Complete descriptor contents

        Returns:
            Parsed font metadata
        """
        self.reader = BMFontReader(text)

        info = FontInfo()
        common = FontCommon()
        pages: List[Page] = []
        chars: List[CharGlyph] = []
        kernings: List[KerningPair] = []
        # Python lists can't reserve capacity; hints are only compared afterwards
        chars_hint: Optional[int] = None
        kernings_hint: Optional[int] = None

        for entry in self.reader.entries():
            tag = entry.tag
            if tag == 'info':
                info = FontInfo.from_entry(entry)
            elif tag == 'common':
                common = FontCommon.from_entry(entry)
            elif tag == 'page':
                pages.append(Page.from_entry(entry))
            elif tag == 'chars':
                chars_hint = _count_hint(entry)
            elif tag == 'char':
                chars.append(CharGlyph.from_entry(entry))
            elif tag == 'kernings':
                kernings_hint = _count_hint(entry)
            elif tag == 'kerning':
                kernings.append(KerningPair.from_entry(entry))
            else:
                logger.debug(f"Ignoring unknown tag {tag!r} on line {self.reader.line + 1}")

        if chars_hint is not None and chars_hint != len(chars):
            logger.debug(f"chars count={chars_hint} but {len(chars)} char lines found")
        if kernings_hint is not None and kernings_hint != len(kernings):
            logger.debug(f"kernings count={kernings_hint} but {len(kernings)} kerning lines found")

        logger.debug(
            f"Parsed {info.face!r}: {len(pages)} pages, {len(chars)} chars, "
            f"{len(kernings)} kernings over {self.reader.line} lines"
        )

        return FontMetadata(
            info=info,
            common=common,
            pages=tuple(pages),
            chars=tuple(chars),
            kernings=tuple(kernings),
        )


def parse_bmfont(file_path: str) -> FontMetadata:
    """Convenience function to parse a BMFont .fnt file."""
    parser = BMFontParser()
    return parser.parse(file_path)


def parse_bmfont_text(text: str) -> FontMetadata:
    """Convenience function to parse BMFont descriptor text."""
    return BMFontParser().parse_text(text)
