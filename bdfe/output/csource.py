"""
C Source Output
===============
Renders a Conversion as C array initializers for embedding in firmware.

Modes:
    default   One byte per line with a bit-pattern comment, glyphs
              separated by a label comment
    line      One glyph per line, label comment at the end
    header    Wraps the data in a commented C array definition
    verbose   Adds font properties and diagnostics to the header comment
"""

import re

_PIXEL_ON = "#"
_PIXEL_OFF = "."


class OutputOptions:
    """
    Text rendering settings.

    Attributes:
        header: Emit the header comment and array definition
        verbose: Extra font information in the header
        line: One glyph per line
        name: C identifier for the array (derived from the font if empty)
    """

    def __init__(self, header: bool = False, verbose: bool = False,
                 line: bool = False, name: str = ""):
        self.header = header
        self.verbose = verbose
        self.line = line
        self.name = name


def c_identifier(text: str) -> str:
    """Turn a font name into a valid C identifier."""
    # XLFD names: -foundry-family-weight-... -> family_weight...
    ident = re.sub(r"[^0-9A-Za-z_]+", "_", text).strip("_").lower()
    if not ident:
        return "font"
    if ident[0].isdigit():
        ident = "font_" + ident
    return ident


def glyph_label(codepoint: int) -> str:
    """Comment label for a glyph: quoted character if printable ASCII."""
    if 32 <= codepoint < 127:
        ch = chr(codepoint)
        if ch in "'\\":
            ch = "\\" + ch
        return f"'{ch}' {codepoint}"
    return str(codepoint)


def bit_pattern(byte: int) -> str:
    return "".join(_PIXEL_ON if byte & (0x80 >> i) else _PIXEL_OFF
                   for i in range(8))


def _flag_names(options) -> list:
    names = [n for n in ("native", "rotate", "flip", "droplast")
             if getattr(options, n)]
    if options.ascender:
        names.append(f"ascender {options.ascender}")
    if options.limit is not None:
        names.append(f"limit {options.limit}")
    return names


def _header_lines(conv, ident: str, verbose: bool) -> list:
    font = conv.font
    hdr = conv.header
    lines = [f"// Font: {hdr.name or ident}"]
    if hdr.bbox:
        w, h, dx, dy = hdr.bbox
        lines.append(f"// Bounding box: {w}x{h}{dx:+d}{dy:+d}")
    last = font.codepoints[-1]
    lines.append(f"// Glyphs: {font.count} ({font.first}-{last}), "
                 f"{font.width}x{font.height} pixels, "
                 f"{font.bytes_per_glyph} bytes per glyph")

    if verbose:
        if hdr.size:
            pt, xdpi, ydpi = hdr.size
            lines.append(f"// Size: {pt} pt, {xdpi}x{ydpi} dpi")
        if hdr.chars is not None:
            lines.append(f"// Declared glyphs: {hdr.chars}")
        flags = _flag_names(conv.options)
        lines.append(f"// Conversion: {' '.join(flags) if flags else 'none'}")
        if not font.contiguous:
            lines.append("// Warning: codepoints are not contiguous")
        if conv.dropped:
            lines.append(f"// Dropped glyphs: {len(conv.dropped)}")
        for key, value in hdr.properties.items():
            lines.append(f"// {key}: {value}")

    lines.append("")
    lines.append("#include <stdint.h>")
    lines.append("")
    lines.append(f"static const uint8_t {ident}[{len(font.data)}] = {{")
    return lines


def _glyph_lines(codepoint: int, data: bytes, line: bool) -> list:
    if line:
        hexes = "".join(f"0x{b:02X}," for b in data)
        return [f"{hexes} // {glyph_label(codepoint)}"]
    lines = [f"// {glyph_label(codepoint)}"]
    lines.extend(f"0x{b:02X}, // {bit_pattern(b)}" for b in data)
    return lines


def render(conv, options: OutputOptions | None = None) -> str:
    """
    Render a Conversion as C source text.

    Args:
        conv: engine.Conversion
        options: OutputOptions

    Returns:
        Text ending with a newline
    """
    opts = options or OutputOptions()
    ident = opts.name or c_identifier(conv.header.name)

    lines = []
    if opts.header:
        lines.extend(_header_lines(conv, ident, opts.verbose))
    for codepoint, data in conv.font:
        lines.extend(_glyph_lines(codepoint, data, opts.line))
    if opts.header:
        lines.append("};")
    return "\n".join(lines) + "\n"
