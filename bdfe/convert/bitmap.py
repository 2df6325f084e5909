"""
Bitmap - 1-bit Pixel Matrix
===========================
Glyph pixels as a list of row integers.

Each row is an int of `width` bits with the leftmost pixel in the most
significant bit, so rows carry no byte padding and width/height are
exact pixel counts. Packing to bytes pads every row on the right to a
whole number of bytes, which is also the BDF scanline layout.
"""

_BITS_PER_BYTE = 8


def row_bytes(width: int) -> int:
    """Bytes needed for one row of `width` pixels."""
    return (width + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE


class Bitmap:
    """
    Fixed-size monochrome pixel matrix.

    Attributes:
        width: Pixels per row
        height: Number of rows
        rows: Row integers, top to bottom
    """

    def __init__(self, width: int, height: int, rows=None):
        self.width = width
        self.height = height
        if rows is None:
            rows = [0] * height
        elif len(rows) != height:
            raise ValueError(f"{len(rows)} rows for height {height}")
        self.rows = list(rows)

    @classmethod
    def from_scanlines(cls, width: int, scanlines) -> "Bitmap":
        """
        Build from byte-padded scanlines (BDF / packed layout).

        Bits in the right-hand padding of each scanline are discarded.
        """
        pad = row_bytes(width) * _BITS_PER_BYTE - width
        rows = [int.from_bytes(line, "big") >> pad for line in scanlines]
        return cls(width, len(rows), rows)

    def pack(self) -> bytes:
        """Rows as byte-padded scanlines, MSB first."""
        nbytes = row_bytes(self.width)
        pad = nbytes * _BITS_PER_BYTE - self.width
        return b"".join((r << pad).to_bytes(nbytes, "big") for r in self.rows)

    def pixel(self, x: int, y: int) -> int:
        return (self.rows[y] >> (self.width - 1 - x)) & 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (self.width, self.height, self.rows) == (
            other.width, other.height, other.rows)

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"
