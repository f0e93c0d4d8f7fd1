"""
Parse errors raised while reading BMFont descriptors.

Every error is fatal to the parse that raised it. Reading errors carry the
0-based line the cursor was on when the problem was found.
"""

from typing import Optional


class BMFontParseError(ValueError):
    """Base class for all BMFont parse errors."""

    description = "BMFont parse error"

    def __init__(self, message: Optional[str] = None, line: Optional[int] = None):
        self.line = line
        text = message or self.description
        if line is not None:
            text = f"line {line + 1}: {text}"
        super().__init__(text)


class UnexpectedEndOfInput(BMFontParseError):
    """Input ended where a token or attribute value was required."""

    description = "unexpected end of input"


class BadEndOfLine(BMFontParseError):
    """A carriage return was not followed by a line feed."""

    description = "carriage return not followed by line feed"


class WrongType(BMFontParseError):
    """A value had the wrong type for its field."""

    description = "wrong type"


class ExpectedCharacter(BMFontParseError):
    """A required literal character was not found at the cursor."""

    def __init__(self, expected: str, line: Optional[int] = None):
        self.expected = expected
        super().__init__(f"expected {expected!r}", line)


class EndOfLineInString(BMFontParseError):
    """A quoted string was not closed before the end of the line."""

    description = "end of line inside quoted string"


class ConversionFailed(BMFontParseError):
    """A raw attribute value could not be converted to its target type."""

    def __init__(self, value: str, target: Optional[str] = None):
        self.value = value
        self.target = target
        if target:
            message = f"cannot convert {value!r} to {target}"
        else:
            message = f"cannot convert {value!r}"
        super().__init__(message)
