"""
Conversion Engine
=================
Runs the full BDF -> PackedFont pipeline for one font:

    BdfTextScanner -> GlyphCollector -> (per glyph) subset -> place ->
    normalize -> transform -> assemble

Glyph-level problems drop the glyph and are reported in
Conversion.dropped; font-level problems raise.
"""

from collections import Counter

from .bdf import collect
from .convert import CodepointRange, assemble, normalize, place, transform
from .errors import InvalidGlyphLayout


class ConvertOptions:
    """
    Conversion settings.

    Attributes:
        subset: CodepointRange of glyphs to keep (default 32..126)
        ascender: Blank rows added above every glyph
        native: Keep authored height (no rounding to 8 rows)
        rotate: Rotate glyphs into column (page) layout
        flip: Reverse bit order in every byte
        droplast: Drop the final byte of every glyph
        limit: Maximum glyph height in rows (>= 1), extra rows cut at the bottom
    """

    def __init__(
        self,
        subset: CodepointRange = CodepointRange.DEFAULT,
        ascender: int = 0,
        native: bool = False,
        rotate: bool = False,
        flip: bool = False,
        droplast: bool = False,
        limit: int | None = None,
    ):
        if ascender < 0:
            raise ValueError("ascender must be >= 0")
        if limit is not None and limit < 1:
            raise ValueError("limit must be >= 1")
        self.subset = subset
        self.ascender = ascender
        self.native = native
        self.rotate = rotate
        self.flip = flip
        self.droplast = droplast
        self.limit = limit

    def __repr__(self) -> str:
        flags = [n for n in ("native", "rotate", "flip", "droplast")
                 if getattr(self, n)]
        return (
            f"ConvertOptions(subset={self.subset!r}, "
            f"ascender={self.ascender}, flags={flags}, limit={self.limit})"
        )


class Conversion:
    """
    Result of a successful conversion.

    Attributes:
        font: PackedFont
        header: FontHeader of the source
        dropped: Per-glyph errors (MalformedGlyph / InvalidGlyphLayout)
        options: ConvertOptions used
    """

    def __init__(self, font, header, dropped: list, options: ConvertOptions):
        self.font = font
        self.header = header
        self.dropped = dropped
        self.options = options


def _keep_common_shape(glyphs: list, dropped: list) -> list:
    """Drop glyphs whose size differs from the most common one."""
    shapes = Counter((g.width, g.height, len(g.data)) for g in glyphs)
    if len(shapes) <= 1:
        return glyphs
    common = shapes.most_common(1)[0][0]
    kept = []
    for g in glyphs:
        if (g.width, g.height, len(g.data)) == common:
            kept.append(g)
        else:
            dropped.append(InvalidGlyphLayout(
                f"{g.width}x{g.height} differs from font cell "
                f"{common[0]}x{common[1]}", g.codepoint))
    return kept


def convert(source: bytes | str, options: ConvertOptions | None = None) -> Conversion:
    """
    Convert BDF text to a packed font.

    Args:
        source: BDF file content
        options: ConvertOptions (defaults: printable ASCII, no transforms)

    Returns:
        Conversion

    Raises:
        MalformedInput: If the text is undecodable or truncated
        EmptyFont: If no glyph survives filtering
    """
    opts = options or ConvertOptions()
    collection = collect(source)
    header = collection.header

    dropped = [e for e in collection.dropped
               if e.codepoint is None or e.codepoint in opts.subset]
    glyphs = []
    for record in collection.glyphs:
        if record.codepoint not in opts.subset:
            continue
        bitmap = normalize(place(record, header), opts.ascender,
                           opts.native, limit=opts.limit)
        try:
            glyphs.append(transform(record.codepoint, bitmap, opts.rotate,
                                    opts.flip, opts.droplast))
        except InvalidGlyphLayout as e:
            dropped.append(e)

    glyphs = _keep_common_shape(glyphs, dropped)
    font = assemble(glyphs, header.name)
    return Conversion(font, header, dropped, opts)


def convert_file(path, options: ConvertOptions | None = None) -> Conversion:
    """
    Read and convert a BDF file.

    Raises:
        OSError: If the file cannot be read
        MalformedInput, EmptyFont: See convert()
    """
    with open(path, "rb") as f:
        return convert(f.read(), options)
