"""
BMFont Reader - Splits descriptor text into tagged attribute entries.

Each logical line of a BMFont text descriptor has the form

    tag name=value name="quoted value" ...

The reader pulls one line at a time from a SourceCursor and hands back an
Entry holding the tag and the raw attribute strings.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

from .attributes import Attribute
from .cursor import END_OF_LINE, WHITESPACE, SourceCursor
from .errors import EndOfLineInString, ExpectedCharacter, UnexpectedEndOfInput


@dataclass
class Entry:
    """One descriptor line: a tag and its raw attribute values."""
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Tuple[str, Attribute]]:
        for name, value in self.attributes.items():
            yield name, Attribute(value)

    def get(self, name: str) -> Optional[Attribute]:
        """Get an attribute by name, or None if the line doesn't have it."""
        value = self.attributes.get(name)
        if value is None:
            return None
        return Attribute(value)


class BMFontReader:
    """Token reader for BMFont text descriptors."""

    def __init__(self, text: str):
        self.cursor = SourceCursor(text)

    @property
    def line(self) -> int:
        """Number of line endings consumed so far."""
        return self.cursor.line

    def expect(self, char: str) -> None:
        """Consume char, or raise ExpectedCharacter if it isn't under the cursor."""
        if self.cursor.current() != char:
            raise ExpectedCharacter(char, line=self.cursor.line)
        self.cursor.advance_one()

    def next_word(self, stop_on_equals: bool = False) -> Optional[str]:
        """
        Read a bare word.

        Leading spaces and tabs are skipped. The word ends before the next
        whitespace, line ending, NUL, or (with stop_on_equals) '='. The
        terminator is not consumed.

        Returns:
            The word (possibly empty), or None at end of input
        """
        cursor = self.cursor
        cursor.advance_whitespace()
        start = cursor.position
        if start is None:
            return None

        while True:
            char = cursor.current()
            if char is None or char in WHITESPACE or char in END_OF_LINE or char == '\0':
                break
            if stop_on_equals and char == '=':
                break
            cursor.advance_one()

        return cursor.slice(start, cursor.position)

    def next_quoted_string(self) -> Optional[str]:
        """
        Read a double-quoted string. Escapes are not supported.

        Returns:
            The string between the quotes, or None if input ends right
            after the opening quote

        Raises:
            EndOfLineInString: if a line ending comes before the closing quote
            UnexpectedEndOfInput: if input ends before the closing quote
        """
        cursor = self.cursor
        self.expect('"')

        start = cursor.position
        if start is None:
            return None

        while True:
            char = cursor.current()
            if char is None:
                raise UnexpectedEndOfInput(line=cursor.line)
            if char in END_OF_LINE:
                raise EndOfLineInString(line=cursor.line)
            if char == '"':
                break
            cursor.advance_one()

        value = cursor.slice(start, cursor.position)
        self.expect('"')
        return value

    def next_entry(self) -> Optional[Entry]:
        """
        Read the next non-blank line.

        Returns:
            The entry, or None when there is nothing left but whitespace
            and blank lines
        """
        cursor = self.cursor
        cursor.advance_whitespace()
        while cursor.current() in END_OF_LINE:
            cursor.advance_end_of_line()
            cursor.advance_whitespace()

        if cursor.at_end:
            return None

        tag = self.next_word()
        attributes: Dict[str, str] = {}

        cursor.advance_whitespace()
        while not cursor.at_end and cursor.current() not in END_OF_LINE:
            name = self.next_word(stop_on_equals=True)
            self.expect('=')

            if cursor.current() == '"':
                value = self.next_quoted_string()
            else:
                value = self.next_word()
            if value is None:
                raise UnexpectedEndOfInput(line=cursor.line)

            attributes[name] = value
            cursor.advance_whitespace()

        return Entry(tag=tag, attributes=attributes)

    def entries(self) -> Iterator[Entry]:
        """Iterate over the remaining entries."""
        while True:
            entry = self.next_entry()
            if entry is None:
                return
            yield entry
