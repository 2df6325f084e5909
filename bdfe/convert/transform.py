"""
Glyph Geometry Transforms
=========================
Bit-level transforms applied to one glyph, in this order:

    rotate    Column j becomes row j, read bottom-to-top (W x H -> H x W).
              For 8-row glyphs this is the SSD1306 page layout: one byte
              per column, top pixel in bit 0.
    flip      Reverse the bit order of every packed byte.
    droplast  Remove the final packed byte (always-zero trailing byte).

Each step is a pure function, so properties like rotate^4 == identity
and flip^2 == identity hold independently of the others.
"""

from ..errors import InvalidGlyphLayout
from .bitmap import Bitmap

# Byte with bits reversed, indexed by byte value
_REVERSED = bytes(int(f"{i:08b}"[::-1], 2) for i in range(256))


def rotate(bitmap: Bitmap) -> Bitmap:
    """
    Turn columns into rows.

    New row j holds original column j; its most significant bit is the
    original bottom pixel.
    """
    w, h = bitmap.width, bitmap.height
    rows = []
    for j in range(w):
        shift = w - 1 - j
        v = 0
        for y in range(h - 1, -1, -1):
            v = (v << 1) | ((bitmap.rows[y] >> shift) & 1)
        rows.append(v)
    return Bitmap(h, w, rows)


def flip(data: bytes) -> bytes:
    """Reverse bit order within each byte (bit 0 <-> bit 7, ...)."""
    return bytes(data).translate(_REVERSED)


def drop_last(data: bytes) -> bytes:
    """
    Remove the last byte.

    Raises:
        InvalidGlyphLayout: If there is no byte to drop
    """
    if not data:
        raise InvalidGlyphLayout("cannot drop last byte of an empty glyph")
    return bytes(data[:-1])


class TransformedGlyph:
    """
    Glyph ready for packing.

    Attributes:
        codepoint: Glyph encoding
        width: Pixel width after rotation
        height: Pixel height after rotation
        data: Packed bytes after all transforms
    """

    def __init__(self, codepoint: int, width: int, height: int, data: bytes):
        self.codepoint = codepoint
        self.width = width
        self.height = height
        self.data = bytes(data)

    def __repr__(self) -> str:
        return (f"TransformedGlyph({self.codepoint}, {self.width}x{self.height}, "
                f"{len(self.data)} bytes)")


def transform(codepoint: int, bitmap: Bitmap, rotate_ccw: bool = False,
              flip_bits: bool = False, droplast: bool = False) -> TransformedGlyph:
    """
    Apply the requested transforms to one glyph.

    Raises:
        InvalidGlyphLayout: If droplast is requested on an empty glyph, or
            the glyph packs to no bytes at all
    """
    if rotate_ccw:
        bitmap = rotate(bitmap)
    data = bitmap.pack()
    if flip_bits:
        data = flip(data)
    if droplast:
        try:
            data = drop_last(data)
        except InvalidGlyphLayout as e:
            raise InvalidGlyphLayout(e.reason, codepoint) from None
    if not data:
        raise InvalidGlyphLayout("glyph packs to no bytes", codepoint)
    return TransformedGlyph(codepoint, bitmap.width, bitmap.height, data)
