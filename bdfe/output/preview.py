"""
Glyph Preview
=============
Shows packed glyphs as they are stored, after all transforms.

- glyph_rows() / preview_text(): terminal art, one string per pixel row
- render_sheet(): Pillow image laid out like a 128-pixel wide display,
  one glyph cell next to the other, wrapping to the next text line

Packed glyphs are read row-major with the post-transform width, so a
rotated font shows up rotated. Rows cut short by droplast read as blank.
"""

import sys

from PIL import Image

from ..convert.bitmap import row_bytes

DISPLAY_WIDTH = 128

_PIXEL_ON = "█"
_PIXEL_OFF = "·"


def glyph_pixels(font, codepoint: int) -> list:
    """
    Decode one packed glyph into rows of 0/1 pixel values.

    Raises:
        KeyError: If the codepoint is not in the font
    """
    data = font.glyph(codepoint)
    nbytes = row_bytes(font.width)
    rows = []
    for y in range(font.height):
        line = data[y * nbytes:(y + 1) * nbytes].ljust(nbytes, b"\x00")
        rows.append([(line[x // 8] >> (7 - x % 8)) & 1
                     for x in range(font.width)])
    return rows


def glyph_rows(font, codepoint: int) -> list:
    """Terminal art for one glyph, one string per row."""
    return ["".join(_PIXEL_ON if p else _PIXEL_OFF for p in row)
            for row in glyph_pixels(font, codepoint)]


def preview_text(font, text: str, file=None):
    """Print ASCII art preview of the glyphs for each character of text."""
    out = file or sys.stdout
    print(f"\nPreview ({font.width}x{font.height}):", file=out)
    print("-" * 40, file=out)

    for char in text:
        cp = ord(char)
        if cp not in font.codepoints:
            print(f"'{char}' ({cp}): NOT FOUND", file=out)
            continue
        print(f"'{char}' ({cp}):", file=out)
        for line in glyph_rows(font, cp):
            print(f"  {line}", file=out)
        print(file=out)


def render_sheet(font, columns: int | None = None, scale: int = 1) -> Image.Image:
    """
    Draw every glyph of the font onto one monochrome image.

    Args:
        font: PackedFont
        columns: Glyphs per line (default: as many as fit in 128 pixels)
        scale: Integer zoom factor

    Returns:
        PIL Image in mode "1"
    """
    if columns is None:
        columns = max(1, DISPLAY_WIDTH // max(1, font.width))
    lines = -(-font.count // columns)
    cell_w, cell_h = font.width, font.height

    sheet = Image.new("1", (max(1, columns * cell_w), max(1, lines * cell_h)), 0)
    for i, cp in enumerate(font.codepoints):
        ox = (i % columns) * cell_w
        oy = (i // columns) * cell_h
        for y, row in enumerate(glyph_pixels(font, cp)):
            for x, on in enumerate(row):
                if on:
                    sheet.putpixel((ox + x, oy + y), 255)

    if scale > 1:
        sheet = sheet.resize((sheet.width * scale, sheet.height * scale),
                             Image.Resampling.NEAREST)
    return sheet
