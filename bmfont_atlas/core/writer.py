"""
BMFont Writer - Writes FontMetadata back out as a BMFont text descriptor.

Output re-parses to the same FontMetadata.
"""

from typing import List

from .parser import FontMetadata

_BARE_WORD_STOPS = (' ', '\t', '\r', '\n', '\0')


class BMFontWriter:
    """Writer for BMFont text descriptors."""

    def __init__(self, metadata: FontMetadata):
        self.metadata = metadata

    @staticmethod
    def _format_value(value) -> str:
        """Convert a field value to its descriptor text."""
        if isinstance(value, str):
            if '"' not in value and '\r' not in value and '\n' not in value:
                return f'"{value}"'
            # Quotes can only appear in bare words
            if value and not value.startswith('"') and not any(c in value for c in _BARE_WORD_STOPS):
                return value
            raise ValueError(f"Cannot write {value!r}: not representable as a quoted string or bare word")
        if isinstance(value, (list, tuple)):
            if not value:
                # A bare empty value would swallow the next attribute
                return '""'
            return ','.join(str(int(item)) for item in value)
        return str(int(value))

    def _format_line(self, tag: str, record) -> str:
        """Format one record using its attribute dispatch table."""
        parts = [tag]
        for name, (field_name, _) in record.FIELDS.items():
            value = getattr(record, field_name)
            parts.append(f"{name}={self._format_value(value)}")
        return ' '.join(parts)

    def lines(self) -> List[str]:
        meta = self.metadata
        lines = [
            self._format_line('info', meta.info),
            self._format_line('common', meta.common),
        ]
        for page in meta.pages:
            lines.append(self._format_line('page', page))

        lines.append(f"chars count={len(meta.chars)}")
        for char in meta.chars:
            lines.append(self._format_line('char', char))

        if meta.kernings:
            lines.append(f"kernings count={len(meta.kernings)}")
            for kerning in meta.kernings:
                lines.append(self._format_line('kerning', kerning))

        return lines

    def write_text(self) -> str:
        """Return the complete descriptor text."""
        return '\n'.join(self.lines()) + '\n'

    def write(self, output_path: str) -> None:
        """
        Write the descriptor to disk.

        Args:
            output_path: Path to save the .fnt file
        """
        text = self.write_text()
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)


def format_bmfont(metadata: FontMetadata) -> str:
    """Convenience function to format metadata as descriptor text."""
    return BMFontWriter(metadata).write_text()


def save_bmfont(metadata: FontMetadata, output_path: str) -> None:
    """Convenience function to write metadata to a .fnt file."""
    BMFontWriter(metadata).write(output_path)
