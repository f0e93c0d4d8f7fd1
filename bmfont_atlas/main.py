"""
BMFont Atlas v1.0 - Command line entry point.

Usage:
    bmfont-atlas info font.fnt
    bmfont-atlas export font.fnt -o out_dir
    bmfont-atlas verify font.fnt
    bmfont-atlas measure font.fnt "Some text"
    bmfont-atlas format font.fnt -o normalized.fnt
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .core.errors import BMFontParseError
from .core.exporter import export_metadata
from .core.parser import parse_bmfont
from .core.writer import format_bmfont
from .text.font import FontConfig, load_font
from .text.layout import measure_text
from .texture.pages import ERROR, verify_pages

logger = logging.getLogger('BMFont')


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Attach console (and optionally file) handlers to the BMFont logger."""
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'))
        logger.addHandler(file_handler)


def _cmd_info(args) -> int:
    meta = parse_bmfont(args.font)
    info, common = meta.info, meta.common

    print(f"Face:        {info.face} ({info.size}pt)")
    print(f"Charset:     {info.charset or '-'}")
    print(f"Line height: {common.line_height}")
    print(f"Base:        {common.base}")
    print(f"Texture:     {common.scale_w}x{common.scale_h}")
    print(f"Pages:       {len(meta.pages)}")
    for page in meta.pages:
        print(f"  {page.id}: {page.file}")
    print(f"Glyphs:      {len(meta.chars)}")
    print(f"Kernings:    {len(meta.kernings)}")
    return 0


def _cmd_export(args) -> int:
    meta = parse_bmfont(args.font)
    path = export_metadata(meta, args.output)
    logger.info(f"Exported metadata to {path}")
    print(path)
    return 0


def _cmd_verify(args) -> int:
    meta = parse_bmfont(args.font)
    base_dir = os.path.dirname(os.path.abspath(args.font))
    issues = verify_pages(meta, base_dir)

    for issue in issues:
        print(issue)

    errors = sum(1 for issue in issues if issue.severity == ERROR)
    if not issues:
        print("OK")
    logger.info(f"Verify finished: {errors} errors, {len(issues) - errors} warnings")
    return 1 if errors else 0


def _cmd_measure(args) -> int:
    font = load_font(args.font, FontConfig(scale=args.scale))
    try:
        width, height = measure_text(font, args.text, kerning=not args.no_kerning)
    except KeyError as e:
        logger.error(f"No glyph or fallback glyph for {e}")
        return 1
    print(f"{width:g} x {height:g}")
    return 0


def _cmd_format(args) -> int:
    text = format_bmfont(parse_bmfont(args.font))
    if args.output:
        with open(args.output, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bmfont-atlas',
        description="Inspect and convert AngelCode BMFont text descriptors.",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-v', '--verbose', action='store_true', help="show debug logging")
    parser.add_argument('--log-file', help="also write a detailed log to this file")

    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help="print a summary of a font")
    info.add_argument('font')
    info.set_defaults(func=_cmd_info)

    export = subparsers.add_parser('export', help="export metadata as JSON")
    export.add_argument('font')
    export.add_argument('-o', '--output', required=True, help="output directory")
    export.set_defaults(func=_cmd_export)

    verify = subparsers.add_parser('verify', help="check texture pages and glyph rectangles")
    verify.add_argument('font')
    verify.set_defaults(func=_cmd_verify)

    measure = subparsers.add_parser('measure', help="measure laid out text")
    measure.add_argument('font')
    measure.add_argument('text')
    measure.add_argument('--scale', type=float, default=1.0)
    measure.add_argument('--no-kerning', action='store_true')
    measure.set_defaults(func=_cmd_measure)

    fmt = subparsers.add_parser('format', help="rewrite a descriptor in normalized form")
    fmt.add_argument('font')
    fmt.add_argument('-o', '--output', help="output file (default: stdout)")
    fmt.set_defaults(func=_cmd_format)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    if not os.path.exists(args.font):
        logger.error(f"File not found: {args.font}")
        return 1

    try:
        return args.func(args)
    except BMFontParseError as e:
        logger.error(f"Failed to parse {args.font}: {e}")
        return 1
    except OSError as e:
        logger.error(f"{e}")
        return 1
    except ValueError as e:
        logger.error(f"Cannot write {args.font}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
