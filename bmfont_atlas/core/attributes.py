"""
Attribute Decoder - Typed views over raw BMFont attribute values.

Factories passed to Attribute.parsed() and Attribute.array() take the raw
string and either return the converted value or raise ValueError.
"""

import re
from typing import Callable, List, TypeVar

from .errors import ConversionFailed

T = TypeVar('T')

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


class IntegerType:
    """Fixed-width integer factory with strict decimal parsing."""

    def __init__(self, name: str, bits: int, signed: bool):
        self.name = name
        self.bits = bits
        self.signed = signed
        if signed:
            self.minimum = -(1 << (bits - 1))
            self.maximum = (1 << (bits - 1)) - 1
        else:
            self.minimum = 0
            self.maximum = (1 << bits) - 1

    def __call__(self, text: str) -> int:
        # int() alone would also accept whitespace and underscores
        if not _INTEGER_RE.fullmatch(text):
            raise ValueError(f"not an integer: {text!r}")
        value = int(text)
        if not self.minimum <= value <= self.maximum:
            raise ValueError(f"{value} out of range for {self.name}")
        return value

    def __repr__(self) -> str:
        return f"IntegerType({self.name!r})"


UINT8 = IntegerType('UInt8', 8, signed=False)
UINT16 = IntegerType('UInt16', 16, signed=False)
UINT32 = IntegerType('UInt32', 32, signed=False)
INT16 = IntegerType('Int16', 16, signed=True)
INT64 = IntegerType('Int64', 64, signed=True)


def _factory_name(factory: Callable) -> str:
    return getattr(factory, 'name', None) or getattr(factory, '__name__', repr(factory))


class Attribute:
    """A single raw attribute value."""

    __slots__ = ('value',)

    def __init__(self, value: str):
        self.value = value

    def string(self) -> str:
        return self.value

    def parsed(self, factory: Callable[[str], T]) -> T:
        """
        Convert the value with factory.

        Raises:
            ConversionFailed: if factory rejects the value
        """
        try:
            return factory(self.value)
        except (ValueError, TypeError) as e:
            raise ConversionFailed(self.value, _factory_name(factory)) from e

    def bool(self) -> bool:
        """Integer flag: any nonzero value is True."""
        return self.parsed(INT64) != 0

    def array(self, factory: Callable[[str], T]) -> List[T]:
        """
        Convert a comma-separated list, element by element.

        Empty elements are dropped. Surrounding whitespace is not trimmed,
        so "1, 2" fails.

        Raises:
            ConversionFailed: if any element is rejected
        """
        result = []
        for item in self.value.split(','):
            if not item:
                continue
            try:
                result.append(factory(item))
            except (ValueError, TypeError) as e:
                raise ConversionFailed(self.value, _factory_name(factory)) from e
        return result

    def __repr__(self) -> str:
        return f"Attribute({self.value!r})"
