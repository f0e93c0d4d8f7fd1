"""
Export/Import - Saves parsed BMFont metadata as JSON and loads it back.

The JSON document holds every record of the descriptor plus a char_map
convenience table (char code -> glyph index).
"""

import json
import os
from dataclasses import asdict, fields
from typing import Any, Dict

from .attributes import Attribute
from .errors import WrongType
from .parser import CharGlyph, FontCommon, FontInfo, FontMetadata, KerningPair, Page

EXPORT_FORMAT = "bmfont-atlas"
EXPORT_VERSION = 1


def _plain(value: Any) -> Any:
    """Turn enums and tuples into JSON-friendly values."""
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, bool) or isinstance(value, str):
        return value
    if isinstance(value, int):
        return int(value)
    return value


def metadata_to_dict(metadata: FontMetadata) -> Dict[str, Any]:
    """Convert metadata to a JSON-serializable dict."""
    data = _plain(asdict(metadata))

    # Last declared glyph wins when a char code repeats, as in BitmapFont
    char_map = {}
    for index, char in enumerate(metadata.chars):
        char_map[str(char.id)] = index

    return {
        "format": EXPORT_FORMAT,
        "version": EXPORT_VERSION,
        **data,
        "char_map": char_map,
    }


def _record_from_dict(cls, data: Any, where: str):
    """
    Build a record from its exported dict.

    Values are type-checked against the record's defaults, then run through
    the same attribute decoders the descriptor parser uses.
    """
    if not isinstance(data, dict):
        raise WrongType(f"{where}: expected object, got {type(data).__name__}")

    decoders = {field_name: decode for field_name, decode in cls.FIELDS.values()}
    values = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        default = f.default
        name = f"{where}.{f.name}"

        if isinstance(default, str):
            if not isinstance(value, str):
                raise WrongType(f"{name}: expected string, got {type(value).__name__}")
            raw = value
        elif isinstance(default, bool):
            if not isinstance(value, bool):
                raise WrongType(f"{name}: expected boolean, got {type(value).__name__}")
            raw = str(int(value))
        elif isinstance(default, tuple):
            if not isinstance(value, list) or not all(
                isinstance(v, int) and not isinstance(v, bool) for v in value
            ):
                raise WrongType(f"{name}: expected list of integers")
            raw = ','.join(str(v) for v in value)
        else:
            if not isinstance(value, int) or isinstance(value, bool):
                raise WrongType(f"{name}: expected integer, got {type(value).__name__}")
            raw = str(value)

        values[f.name] = decoders[f.name](Attribute(raw))

    return cls(**values)


def _records_from_list(cls, data: Any, where: str) -> tuple:
    if not isinstance(data, list):
        raise WrongType(f"{where}: expected array, got {type(data).__name__}")
    return tuple(_record_from_dict(cls, item, f"{where}[{i}]") for i, item in enumerate(data))


def metadata_from_dict(data: Dict[str, Any]) -> FontMetadata:
    """
    Rebuild metadata from a dict produced by metadata_to_dict().

    Raises:
        WrongType: if a value has the wrong JSON type
        ConversionFailed: if a number is out of range or an enum code is unknown
    """
    if not isinstance(data, dict):
        raise WrongType(f"expected object, got {type(data).__name__}")

    return FontMetadata(
        info=_record_from_dict(FontInfo, data.get("info", {}), "info"),
        common=_record_from_dict(FontCommon, data.get("common", {}), "common"),
        pages=_records_from_list(Page, data.get("pages", []), "pages"),
        chars=_records_from_list(CharGlyph, data.get("chars", []), "chars"),
        kernings=_records_from_list(KerningPair, data.get("kernings", []), "kernings"),
    )


def export_metadata(metadata: FontMetadata, output_dir: str) -> str:
    """
    Export font metadata as JSON.

    Args:
        metadata: Parsed font metadata
        output_dir: Directory to save exported files

    Returns:
        Path to the metadata JSON file
    """
    os.makedirs(output_dir, exist_ok=True)

    metadata_path = os.path.join(output_dir, "metadata.json")
    with open(metadata_path, 'w', encoding='utf-8') as f:
        json.dump(metadata_to_dict(metadata), f, indent=2, ensure_ascii=False)

    return metadata_path


def load_export_metadata(metadata_path: str) -> FontMetadata:
    """
    Load font metadata from an exported JSON file.

    Args:
        metadata_path: Path to metadata.json

    Returns:
        FontMetadata object
    """
    with open(metadata_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    return metadata_from_dict(data)
