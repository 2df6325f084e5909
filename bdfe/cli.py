#!/usr/bin/env python3
"""
BDF Exporter
============
Converts 8-pixel wide BDF fonts to C arrays for embedded displays.

Features:
- Codepoint subsetting (printable ASCII by default)
- Height padding to 8-pixel display pages, extra ascender rows
- Rotation to column (page) layout, bit order flip, trailing byte drop
- Preview rendered glyphs in the terminal or as a PNG sheet

Usage:
    # Printable ASCII as a C array with header
    bdfe --header font.bdf > font.h

    # SSD1306 page layout, one glyph per line
    bdfe --rotate --flip --line --header font.bdf

    # Preview some characters, no C output
    bdfe --preview "Hello" font.bdf -o /dev/null
"""

import argparse
import sys
from pathlib import Path

from .convert import CodepointRange
from .engine import ConvertOptions, convert_file
from .errors import BdfError
from .output import OutputOptions, preview_text, render, render_sheet


def _subset(text: str) -> CodepointRange:
    try:
        return CodepointRange.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _unsigned(text: str) -> int:
    if not text.isdigit():
        raise argparse.ArgumentTypeError(f"expected a number >= 0, got {text!r}")
    return int(text)


def _positive(text: str) -> int:
    if not text.isdigit() or int(text) < 1:
        raise argparse.ArgumentTypeError(f"expected a number >= 1, got {text!r}")
    return int(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bdfe",
        description="Convert BDF fonts to packed C arrays for embedded displays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Printable ASCII with a header comment
  bdfe --header font.bdf

  # Glyphs 48 to 57 only, one glyph per line
  bdfe --subset 48-57 --line font.bdf

  # Column layout for SSD1306 displays, drop always-zero last byte
  bdfe --rotate --flip --droplast font.bdf

  # Write to a file and save a preview sheet
  bdfe --header -o font.h --png font.png --scale 4 font.bdf
        """
    )

    parser.add_argument('input', type=Path, help='BDF font file')

    parser.add_argument('--header', '-H', action='store_true',
                       help='Print file header and array definition')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Add extra info to the header')
    parser.add_argument('--line', '-l', action='store_true',
                       help='One line per glyph')
    parser.add_argument('--name',
                       help='C array name (default: from font name)')

    parser.add_argument('--subset', '-s', type=_subset,
                       default=CodepointRange.DEFAULT,
                       help='Subset of glyphs to convert, a-b (default 32-126)')
    parser.add_argument('--all', '-a', dest='subset', action='store_const',
                       const=CodepointRange.ALL,
                       help='Convert all glyphs, not just 32-126')

    parser.add_argument('--native', '-n', action='store_true',
                       help='Do not adjust font height to 8 pixels')
    parser.add_argument('--ascender', type=_unsigned, default=0,
                       help='Add extra ascender of N pixels per glyph')
    parser.add_argument('--limit', type=_positive,
                       help='Cut glyphs to at most N rows (from the bottom)')
    parser.add_argument('--rotate', '-r', action='store_true',
                       help="Rotate glyphs' bitmaps CCW")
    parser.add_argument('--flip', '-f', action='store_true',
                       help='Reverse bit order (used with --rotate)')
    parser.add_argument('--droplast', '-d', action='store_true',
                       help='Leave off last byte (for fonts where it is always 0x00)')

    parser.add_argument('--output', '-o', type=Path,
                       help='Write C source to file instead of stdout')
    parser.add_argument('--preview', type=str,
                       help='Preview specific characters after conversion')
    parser.add_argument('--png', type=Path,
                       help='Save all converted glyphs as a PNG sheet')
    parser.add_argument('--scale', type=_unsigned, default=1,
                       help='Zoom factor for --png (default: 1)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    options = ConvertOptions(
        subset=args.subset,
        ascender=args.ascender,
        native=args.native,
        rotate=args.rotate,
        flip=args.flip,
        droplast=args.droplast,
        limit=args.limit,
    )

    # ==========================================================================
    # Convert
    # ==========================================================================

    try:
        conv = convert_file(args.input, options)
    except (OSError, BdfError) as e:
        print(f"Unable to convert '{args.input}': {e}", file=sys.stderr)
        return 1

    for err in conv.dropped:
        print(f"Warning: dropped {err}", file=sys.stderr)

    font = conv.font
    print(f"Converted {font.count} glyphs, {font.width}x{font.height}, "
          f"{font.bytes_per_glyph} bytes per glyph", file=sys.stderr)

    # ==========================================================================
    # Output
    # ==========================================================================

    text = render(conv, OutputOptions(
        header=args.header or args.verbose,
        verbose=args.verbose,
        line=args.line,
        name=args.name or "",
    ))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text)
        print(f"Created: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text)

    if args.png:
        render_sheet(font, scale=max(1, args.scale)).save(args.png)
        print(f"Created: {args.png}", file=sys.stderr)

    if args.preview:
        preview_text(font, args.preview, file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
