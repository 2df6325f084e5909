"""Shared BDF builders."""

import pytest

FONT_NAME = "-test-fixed-medium-r-normal--8-80-75-75-c-80-iso10646-1"

# 8x8 'A': a single bar on row 3
A_ROWS = [0x00, 0x00, 0x00, 0x7E, 0x00, 0x00, 0x00, 0x00]


def bdf_glyph(code, rows, bbx=(8, 8, 0, 0), name=None, dwidth=None):
    """One STARTCHAR..ENDCHAR block; int rows become 2-digit hex."""
    lines = [
        f"STARTCHAR {name or f'char{code}'}",
        f"ENCODING {code}",
        "SWIDTH 500 0",
        f"DWIDTH {bbx[0] if dwidth is None else dwidth} 0",
        "BBX {} {} {} {}".format(*bbx),
        "BITMAP",
    ]
    lines += [r if isinstance(r, str) else f"{r:02X}" for r in rows]
    lines.append("ENDCHAR")
    return "\n".join(lines)


def bdf_font(glyphs, bbox=(8, 8, 0, 0), name=FONT_NAME, properties=None):
    """Complete BDF text around the given glyph blocks."""
    if properties is None:
        properties = {"FONT_ASCENT": "8", "FONT_DESCENT": "0"}
    lines = ["STARTFONT 2.1", f"FONT {name}", "SIZE 8 75 75"]
    if bbox is not None:
        lines.append("FONTBOUNDINGBOX {} {} {} {}".format(*bbox))
    lines.append(f"STARTPROPERTIES {len(properties)}")
    lines += [f"{k} {v}" for k, v in properties.items()]
    lines += ["ENDPROPERTIES", f"CHARS {len(glyphs)}"]
    lines += glyphs
    lines.append("ENDFONT")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_glyph():
    return bdf_glyph


@pytest.fixture
def make_font():
    return bdf_font


@pytest.fixture
def font_a():
    """Font with only the 8x8 'A'."""
    return bdf_font([bdf_glyph(65, A_ROWS, name="A")])


@pytest.fixture
def font_abc():
    """Font with 'A', 'B', 'C', defined out of order."""
    return bdf_font([
        bdf_glyph(67, [0x3C] * 8, name="C"),
        bdf_glyph(65, A_ROWS, name="A"),
        bdf_glyph(66, [0x42] * 8, name="B"),
    ])
