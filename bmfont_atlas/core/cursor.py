"""
Source Cursor - Walks BMFont descriptor text one character at a time.

The cursor position is an index into the source string, or None once the
end of input has been reached. Line endings are either "\\n" or "\\r\\n";
a lone "\\r" is rejected.
"""

from typing import Optional

from .errors import BadEndOfLine


WHITESPACE = (' ', '\t')
END_OF_LINE = ('\r', '\n')


class SourceCursor:
    """Character cursor over an immutable source string."""

    def __init__(self, text: str):
        self._text = text
        self._position: Optional[int] = 0 if text else None
        self.line = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> Optional[int]:
        """Index of the current character, or None at end of input."""
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position is None

    def current(self) -> Optional[str]:
        """Return the character under the cursor, or None at end of input."""
        if self._position is None:
            return None
        return self._text[self._position]

    def slice(self, start: int, end: Optional[int]) -> str:
        """Return source text from start up to end (None meaning end of input)."""
        if end is None:
            return self._text[start:]
        return self._text[start:end]

    def advance_one(self) -> None:
        if self._position is None:
            return
        new_position = self._position + 1
        self._position = new_position if new_position < len(self._text) else None

    def advance_whitespace(self) -> None:
        """Skip spaces and tabs. Other whitespace is left alone."""
        while self.current() in WHITESPACE:
            self.advance_one()

    def advance_end_of_line(self) -> None:
        """
        Consume one end-of-line sequence if the cursor is on one.

        Raises:
            BadEndOfLine: if a carriage return is not followed by a line feed
        """
        char = self.current()
        if char not in END_OF_LINE:
            return

        if char == '\r':
            self.advance_one()

        if self.current() != '\n':
            raise BadEndOfLine(line=self.line)

        self.line += 1
        self.advance_one()
