import os

import pytest

from bmfont_atlas.core.parser import parse_bmfont_text
from bmfont_atlas.text.font import BitmapFont, FontConfig, load_font


@pytest.fixture
def font(sample_text):
    return BitmapFont(parse_bmfont_text(sample_text), config=FontConfig(scale=1.0))


def test_lookup(font):
    assert font.get("A").id == 65
    assert "A" in font
    assert "B" not in font
    assert len(font) == 4


def test_missing_char_falls_back_to_question_mark(font):
    assert font.get("Z").id == ord("?")


def test_placeholder_is_preferred_fallback():
    meta = parse_bmfont_text("char id=63 x=1\nchar id=9647 x=2\n")
    assert BitmapFont(meta).get("Z").id == 0x25AF


def test_no_fallback_raises_key_error():
    font = BitmapFont(parse_bmfont_text("char id=65\n"))
    with pytest.raises(KeyError):
        font.get("Z")


def test_custom_fallback_chain(font):
    font.config = FontConfig(fallback_chars=(" ",))
    assert font.get("Z").id == 32


def test_duplicate_ids_last_wins():
    font = BitmapFont(parse_bmfont_text("char id=65 x=1\nchar id=65 x=2\n"))
    assert font.get("A").x == 2


def test_invalid_code_points_are_skipped():
    meta = parse_bmfont_text("char id=55296\nchar id=1114112\nchar id=66\n")
    font = BitmapFont(meta)
    assert len(font) == 1
    assert "B" in font


def test_kerning(font):
    assert font.kerning("A", "V") == -2
    assert font.kerning("V", "A") == 0


def test_line_height(font):
    assert font.line_height == 40


def test_texture_path_without_base_dir(font):
    assert font.texture_path() == "test.png"
    with pytest.raises(IndexError):
        font.texture_path(1)


def test_load_font(font_path):
    font = load_font(str(font_path))
    assert font.meta.info.face == "Test"
    assert font.config.scale == 2.0
    assert font.texture_path(0) == os.path.join(str(font_path.parent), "test.png")
