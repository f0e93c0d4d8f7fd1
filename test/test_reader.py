import pytest

from bmfont_atlas.core.errors import (
    BadEndOfLine,
    EndOfLineInString,
    ExpectedCharacter,
    UnexpectedEndOfInput,
)
from bmfont_atlas.core.reader import BMFontReader, Entry


def read_all(text):
    reader = BMFontReader(text)
    return list(reader.entries()), reader


# ---------------------------------------------------------------------------
# words and strings
# ---------------------------------------------------------------------------

def test_next_word_stops_at_whitespace():
    reader = BMFontReader("  hello world")
    assert reader.next_word() == "hello"
    assert reader.cursor.current() == " "
    assert reader.next_word() == "world"
    assert reader.next_word() is None


def test_next_word_stop_on_equals():
    reader = BMFontReader("size=32")
    assert reader.next_word(stop_on_equals=True) == "size"
    assert reader.cursor.current() == "="


def test_next_word_keeps_equals_by_default():
    reader = BMFontReader("a=b c")
    assert reader.next_word() == "a=b"


def test_next_word_stops_at_nul_and_end_of_line():
    assert BMFontReader("ab\0cd").next_word() == "ab"
    assert BMFontReader("ab\r\ncd").next_word() == "ab"


def test_quoted_string_keeps_spaces():
    reader = BMFontReader('"Foo Bar" rest')
    assert reader.next_quoted_string() == "Foo Bar"
    assert reader.cursor.current() == " "


def test_quoted_string_empty():
    assert BMFontReader('""').next_quoted_string() == ""


def test_quoted_string_requires_opening_quote():
    with pytest.raises(ExpectedCharacter) as excinfo:
        BMFontReader("Foo").next_quoted_string()
    assert excinfo.value.expected == '"'


def test_quoted_string_line_break_inside():
    with pytest.raises(EndOfLineInString):
        BMFontReader('"Foo\n"').next_quoted_string()


def test_quoted_string_end_of_input_inside():
    with pytest.raises(UnexpectedEndOfInput):
        BMFontReader('"Foo').next_quoted_string()


def test_quoted_string_opening_quote_at_end():
    assert BMFontReader('"').next_quoted_string() is None


# ---------------------------------------------------------------------------
# entries
# ---------------------------------------------------------------------------

def test_entry_with_mixed_values():
    entries, _ = read_all('info face="Foo Bar" size=32 padding=1,2,3,4\n')
    assert entries == [
        Entry("info", {"face": "Foo Bar", "size": "32", "padding": "1,2,3,4"})
    ]


def test_entry_without_attributes():
    entries, _ = read_all("common\n")
    assert entries == [Entry("common", {})]


def test_blank_lines_and_indentation_are_skipped():
    entries, reader = read_all("\n\n  \t\ninfo size=1\n\n   page id=0\n\n")
    assert [e.tag for e in entries] == ["info", "page"]
    assert reader.line == 7


def test_trailing_whitespace_before_line_end():
    entries, _ = read_all("kerning first=32  second=65  amount=-1 \n")
    assert entries[0].attributes == {"first": "32", "second": "65", "amount": "-1"}


def test_last_duplicate_attribute_wins():
    entries, _ = read_all("info size=1 size=2\n")
    assert entries[0].attributes == {"size": "2"}


def test_empty_document():
    entries, reader = read_all("")
    assert entries == []
    assert reader.line == 0


def test_no_trailing_newline():
    entries, reader = read_all("info size=1")
    assert entries[0].attributes == {"size": "1"}
    assert reader.line == 0


def test_missing_value_at_end_of_input():
    with pytest.raises(UnexpectedEndOfInput):
        read_all("info size=")


def test_missing_value_before_line_end_is_empty():
    entries, _ = read_all("info face=\n")
    assert entries[0].attributes == {"face": ""}


def test_attribute_without_equals():
    with pytest.raises(ExpectedCharacter) as excinfo:
        read_all("info bold\n")
    assert excinfo.value.expected == "="


def test_unterminated_quote_before_line_end():
    with pytest.raises(EndOfLineInString):
        read_all('info face="Foo\ncommon lineHeight=1\n')


def test_unterminated_quote_at_end_of_input():
    with pytest.raises(UnexpectedEndOfInput):
        read_all('info face="Foo')


def test_lone_carriage_return():
    with pytest.raises(BadEndOfLine):
        read_all("info size=1\rcommon base=2\n")


@pytest.mark.parametrize("text, expected_lines", [
    ("info size=1\n", 1),
    ("info size=1\r\n", 1),
    ("info size=1\r\ncommon base=2\npage id=0\r\n", 3),
    ("\r\n\n\r\ninfo\n\r\n", 5),
    ("info\ncommon", 1),
])
def test_line_counter_matches_line_endings(text, expected_lines):
    _, reader = read_all(text)
    assert reader.line == expected_lines


def test_error_reports_line_number():
    with pytest.raises(EndOfLineInString) as excinfo:
        read_all('info size=1\ncommon base=2\npage file="x\n')
    assert excinfo.value.line == 2
    assert "line 3" in str(excinfo.value)


def test_entry_get():
    entry = Entry("chars", {"count": "3"})
    assert entry.get("count").string() == "3"
    assert entry.get("missing") is None
