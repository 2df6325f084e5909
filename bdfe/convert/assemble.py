"""
Font Assembly
=============
Packs transformed glyphs into one contiguous buffer.

Layout:
    [glyph 0][glyph 1]...[glyph n-1]

Glyphs are stored in ascending codepoint order, bytes_per_glyph bytes
each. Consumers index the buffer with (codepoint - first).
"""

from ..errors import EmptyFont, InvalidGlyphLayout


class PackedFont:
    """
    Immutable packed font.

    Attributes:
        width: Glyph pixel width (after rotation)
        height: Glyph pixel height (after rotation)
        bytes_per_glyph: Size of one glyph in the buffer
        count: Number of glyphs
        first: Lowest codepoint (index offset)
        codepoints: Codepoints in buffer order
        data: Concatenated glyph bytes
        name: Font name
    """

    __slots__ = ("_width", "_height", "_bpg", "_codepoints", "_data", "_name")

    def __init__(self, width: int, height: int, bytes_per_glyph: int,
                 codepoints, data: bytes, name: str = ""):
        self._width = width
        self._height = height
        self._bpg = bytes_per_glyph
        self._codepoints = tuple(codepoints)
        self._data = bytes(data)
        self._name = name

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bytes_per_glyph(self) -> int:
        return self._bpg

    @property
    def count(self) -> int:
        return len(self._codepoints)

    @property
    def first(self) -> int:
        return self._codepoints[0]

    @property
    def codepoints(self) -> tuple:
        return self._codepoints

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def name(self) -> str:
        return self._name

    @property
    def contiguous(self) -> bool:
        """True if codepoints run from first with no gaps."""
        return self._codepoints[-1] - self._codepoints[0] + 1 == self.count

    def glyph(self, codepoint: int) -> bytes:
        """
        Packed bytes of one glyph.

        Raises:
            KeyError: If the codepoint is not in the font
        """
        try:
            i = self._codepoints.index(codepoint)
        except ValueError:
            raise KeyError(codepoint) from None
        return self._data[i * self._bpg:(i + 1) * self._bpg]

    def __iter__(self):
        """Yield (codepoint, bytes) pairs in buffer order."""
        bpg = self._bpg
        for i, cp in enumerate(self._codepoints):
            yield cp, self._data[i * bpg:(i + 1) * bpg]

    def __len__(self) -> int:
        return len(self._codepoints)

    def __repr__(self) -> str:
        return (
            f"PackedFont({self._name!r}, {self._width}x{self._height}, "
            f"{self._bpg} bytes/glyph, {self.count} glyphs from {self.first})"
        )


def assemble(glyphs, name: str = "") -> PackedFont:
    """
    Concatenate transformed glyphs.

    Args:
        glyphs: Iterable of TransformedGlyph with distinct codepoints
        name: Font name carried into the PackedFont

    Returns:
        PackedFont in ascending codepoint order

    Raises:
        EmptyFont: If there are no glyphs
        InvalidGlyphLayout: If glyph sizes differ or a glyph has no bytes
    """
    ordered = sorted(glyphs, key=lambda g: g.codepoint)
    if not ordered:
        raise EmptyFont("no glyphs to convert")

    ref = ordered[0]
    if not ref.data:
        raise InvalidGlyphLayout("glyph packs to no bytes", ref.codepoint)
    shape = (ref.width, ref.height, len(ref.data))
    buf = bytearray()
    for g in ordered:
        if (g.width, g.height, len(g.data)) != shape:
            raise InvalidGlyphLayout(
                f"{g.width}x{g.height} ({len(g.data)} bytes) does not match "
                f"{shape[0]}x{shape[1]} ({shape[2]} bytes)", g.codepoint)
        buf.extend(g.data)

    return PackedFont(ref.width, ref.height, len(ref.data),
                      [g.codepoint for g in ordered], buf, name)
