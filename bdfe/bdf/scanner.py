"""
BDF Text Scanner
================
Splits BDF font text into keyword records, one per logical line.

The scanner only knows the line grammar, not the glyph structure:
- Blank lines and unknown keywords (COMMENT, SWIDTH, ...) are skipped
- Lines inside STARTPROPERTIES/ENDPROPERTIES become PROPERTY records
- Lines starting with a hex token become hex records (bitmap scanlines)

Usage:
    for rec in BdfTextScanner(text):
        print(rec.lineno, rec.keyword, rec.args)
"""

import re
from typing import Iterator, NamedTuple

from ..errors import MalformedInput

PROPERTY = "PROPERTY"

KEYWORDS = frozenset((
    "STARTFONT",
    "FONT",
    "SIZE",
    "FONTBOUNDINGBOX",
    "STARTPROPERTIES",
    "ENDPROPERTIES",
    "CHARS",
    "STARTCHAR",
    "ENCODING",
    "DWIDTH",
    "BBX",
    "BITMAP",
    "ENDCHAR",
    "ENDFONT",
))

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Only CR, LF and CRLF end a line (not FF, NEL or other Unicode breaks)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Record(NamedTuple):
    """
    One logical line of BDF text.

    Attributes:
        keyword: First token (or PROPERTY for property lines)
        args: Remaining whitespace-separated tokens
        text: Raw text after the keyword, stripped
        lineno: 1-based source line number
    """
    keyword: str
    args: tuple
    text: str
    lineno: int

    @property
    def is_hex(self) -> bool:
        return bool(self.keyword) and set(self.keyword) <= _HEX_DIGITS


def decode(data: bytes | str) -> str:
    """
    Decode raw font data to text.

    BDF is ASCII, but property strings (COPYRIGHT, FAMILY_NAME) are
    frequently Latin-1, so UTF-8 is tried first and Latin-1 second.

    Raises:
        MalformedInput: If the data is binary (contains NUL bytes)
    """
    if isinstance(data, str):
        return data
    if b"\x00" in data:
        raise MalformedInput("binary data, not a BDF text file")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


class BdfTextScanner:
    """
    Restartable record iterator over BDF text.

    Decoding happens once at construction; each iteration walks the text
    again from the first line.

    Args:
        source: Font file content as str or bytes

    Raises:
        MalformedInput: If bytes cannot be decoded as text
    """

    def __init__(self, source: bytes | str):
        self._text = decode(source)

    def __iter__(self) -> Iterator[Record]:
        in_props = False
        for lineno, line in enumerate(_LINE_BREAK.split(self._text), 1):
            parts = line.strip().split(None, 1)
            if not parts:
                continue
            keyword = parts[0]
            rest = parts[1].strip() if len(parts) > 1 else ""

            if in_props:
                if keyword == "ENDPROPERTIES":
                    in_props = False
                    yield Record(keyword, (), "", lineno)
                elif keyword != "COMMENT":
                    yield Record(PROPERTY, (keyword,) + tuple(rest.split()),
                                 rest, lineno)
                continue

            if keyword == "STARTPROPERTIES":
                in_props = True

            if keyword in KEYWORDS or set(keyword) <= _HEX_DIGITS:
                yield Record(keyword, tuple(rest.split()), rest, lineno)
