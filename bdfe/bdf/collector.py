"""
GlyphCollector - BDF Record State Machine
=========================================
Turns scanner records into a FontHeader and a list of GlyphRecords.

State Diagram:
    HEADER --STARTCHAR--> IN_GLYPH
    IN_GLYPH --BITMAP--> READING_ROWS
    READING_ROWS --ENDCHAR--> HEADER
    HEADER --ENDFONT / end of input--> done

Error policy:
- A glyph that is incomplete or inconsistent is dropped; the reason is
  kept as a MalformedGlyph in Collection.dropped and collection goes on.
- Input that ends (or hits ENDFONT) inside a glyph is truncated or
  corrupt and raises MalformedInput.
"""

from ..errors import MalformedGlyph, MalformedInput
from .scanner import PROPERTY, BdfTextScanner, Record


class CollectorState:
    """Collector state enumeration."""
    HEADER = 0        # Between glyphs, reading global keywords
    IN_GLYPH = 1      # After STARTCHAR, reading glyph metrics
    READING_ROWS = 2  # After BITMAP, reading hex scanlines

    _names = {
        0: "HEADER",
        1: "IN_GLYPH",
        2: "READING_ROWS",
    }

    @classmethod
    def name(cls, state: int) -> str:
        """Get human-readable state name."""
        return cls._names.get(state, f"UNKNOWN({state})")


class FontHeader:
    """
    Global font metadata.

    Attributes:
        version: STARTFONT version string
        name: FONT name
        size: (point_size, xdpi, ydpi) or None
        bbox: FONTBOUNDINGBOX (width, height, dx, dy) or None
        chars: Declared CHARS count (advisory only)
        properties: Property name -> value string (quotes stripped)
    """

    def __init__(self):
        self.version = ""
        self.name = ""
        self.size = None
        self.bbox = None
        self.chars = None
        self.properties = {}

    def __repr__(self) -> str:
        return (
            f"FontHeader(name={self.name!r}, bbox={self.bbox}, "
            f"chars={self.chars}, properties={len(self.properties)})"
        )


class GlyphRecord:
    """
    One parsed glyph.

    Attributes:
        codepoint: Glyph encoding
        name: STARTCHAR name
        width: BBX width in pixels
        height: BBX height in pixels (== len(rows))
        dx: BBX x offset from the origin
        dy: BBX y offset from the baseline
        advance: DWIDTH x, defaults to width
        rows: Scanlines top to bottom, ceil(width / 8) bytes each, MSB first
    """

    def __init__(self, codepoint: int, width: int, height: int,
                 dx: int = 0, dy: int = 0, rows=None,
                 name: str = "", advance: int | None = None):
        self.codepoint = codepoint
        self.name = name
        self.width = width
        self.height = height
        self.dx = dx
        self.dy = dy
        self.advance = width if advance is None else advance
        self.rows = list(rows) if rows is not None else [bytes(self.byte_width)] * height

    @property
    def byte_width(self) -> int:
        return (self.width + 7) // 8

    def __repr__(self) -> str:
        return (
            f"GlyphRecord({self.codepoint}, {self.name!r}, "
            f"{self.width}x{self.height}{self.dx:+d}{self.dy:+d})"
        )


class Collection:
    """
    Collector result.

    Attributes:
        header: FontHeader
        glyphs: Complete glyphs in file order
        dropped: MalformedGlyph for every glyph that was skipped
    """

    def __init__(self, header: FontHeader, glyphs: list, dropped: list):
        self.header = header
        self.glyphs = glyphs
        self.dropped = dropped


def _ints(rec: Record, count: int) -> tuple:
    """Parse the first `count` arguments of a record as integers."""
    if len(rec.args) < count:
        raise ValueError(f"{rec.keyword} needs {count} values")
    return tuple(int(a) for a in rec.args[:count])


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1].replace('""', '"')
    return text


class _PendingGlyph:
    """Glyph under construction between STARTCHAR and ENDCHAR."""

    def __init__(self, rec: Record):
        self.name = rec.text
        self.lineno = rec.lineno
        self.codepoint = None
        self.advance = None
        self.bbx = None
        self.rows = None
        self.error = None

    def fail(self, reason: str):
        # First problem wins; later ones are usually consequences
        if self.error is None:
            self.error = reason

    def finish(self) -> GlyphRecord:
        if self.error is not None:
            raise self._malformed(self.error)
        if self.codepoint is None:
            raise self._malformed("missing ENCODING")
        if self.bbx is None:
            raise self._malformed("missing BBX")
        if self.rows is None:
            raise self._malformed("missing BITMAP")

        width, height, dx, dy = self.bbx
        byte_width = (width + 7) // 8
        for row in self.rows:
            if len(row) != byte_width:
                raise self._malformed(
                    f"scanline has {len(row)} bytes, expected {byte_width}")
        if len(self.rows) != height:
            raise self._malformed(
                f"{len(self.rows)} scanlines, BBX height is {height}")

        return GlyphRecord(self.codepoint, width, height, dx, dy,
                           self.rows, self.name, self.advance)

    def _malformed(self, reason: str) -> MalformedGlyph:
        return MalformedGlyph(reason, self.codepoint, self.name, self.lineno)


class GlyphCollector:
    """
    State machine over scanner records.

    Args:
        records: Iterable of Record (usually a BdfTextScanner)
    """

    def __init__(self, records):
        self._records = records
        self.state = CollectorState.HEADER
        self.header = FontHeader()
        self.glyphs = []
        self.dropped = []
        self._glyph = None
        self._seen = set()

    def run(self) -> Collection:
        """
        Consume all records.

        Returns:
            Collection with the header, good glyphs and dropped glyphs

        Raises:
            MalformedInput: On truncated input or corrupt font header
        """
        handlers = {
            CollectorState.HEADER: self._on_header,
            CollectorState.IN_GLYPH: self._on_glyph,
            CollectorState.READING_ROWS: self._on_row,
        }
        for rec in self._records:
            if handlers[self.state](rec):
                break

        if self.state != CollectorState.HEADER:
            raise MalformedInput(
                f"input ends inside glyph {self._glyph.name!r} "
                f"started at line {self._glyph.lineno}")
        return Collection(self.header, self.glyphs, self.dropped)

    # =========================================================================
    # State handlers (return True to stop)
    # =========================================================================

    def _on_header(self, rec: Record) -> bool:
        kw = rec.keyword
        hdr = self.header
        try:
            if kw == "STARTCHAR":
                self._start(rec)
            elif kw == "ENDFONT":
                return True
            elif kw == "STARTFONT":
                hdr.version = rec.text
            elif kw == "FONT":
                hdr.name = rec.text
            elif kw == "SIZE":
                hdr.size = _ints(rec, 3)
            elif kw == "FONTBOUNDINGBOX":
                hdr.bbox = _ints(rec, 4)
            elif kw == "CHARS":
                hdr.chars = _ints(rec, 1)[0]
            elif kw == PROPERTY:
                hdr.properties[rec.args[0]] = _unquote(rec.text)
        except ValueError as e:
            raise MalformedInput(f"bad {kw}: {rec.text!r} ({e})", rec.lineno)
        return False

    def _on_glyph(self, rec: Record) -> bool:
        kw = rec.keyword
        g = self._glyph
        if kw == "STARTCHAR" or kw == "ENDCHAR":
            if kw == "STARTCHAR":
                g.fail("STARTCHAR before ENDCHAR")
            return self._end(rec)
        if kw == "ENDFONT":
            self._truncated(rec)
        try:
            if kw == "ENCODING":
                code = _ints(rec, 1)[0]
                if code < 0 and len(rec.args) > 1:
                    code = int(rec.args[1])
                if code >= 0:
                    g.codepoint = code
            elif kw == "DWIDTH":
                # Advance is informational; a bad value leaves it unset
                try:
                    g.advance = _ints(rec, 1)[0]
                except ValueError:
                    g.advance = None
            elif kw == "BBX":
                bbx = _ints(rec, 4)
                if bbx[0] < 0 or bbx[1] < 0:
                    raise ValueError("negative size")
                g.bbx = bbx
            elif kw == "BITMAP":
                g.rows = []
                self.state = CollectorState.READING_ROWS
            else:
                g.fail(f"unexpected {kw}")
        except ValueError as e:
            g.fail(f"bad {kw} {rec.text!r} ({e})")
        return False

    def _on_row(self, rec: Record) -> bool:
        kw = rec.keyword
        g = self._glyph
        if kw == "ENDCHAR":
            return self._end(rec)
        if kw == "STARTCHAR":
            g.fail("STARTCHAR before ENDCHAR")
            return self._end(rec)
        if kw == "ENDFONT":
            self._truncated(rec)
        if not rec.is_hex:
            g.fail(f"unexpected {kw} in BITMAP")
        elif len(kw) % 2:
            g.fail(f"odd-length scanline {kw!r}")
        else:
            g.rows.append(bytes.fromhex(kw))
        return False

    # =========================================================================
    # Transitions
    # =========================================================================

    def _start(self, rec: Record):
        self._glyph = _PendingGlyph(rec)
        self.state = CollectorState.IN_GLYPH

    def _end(self, rec: Record) -> bool:
        """Finish the pending glyph; a STARTCHAR record opens the next one."""
        pending = self._glyph
        self._glyph = None
        self.state = CollectorState.HEADER
        try:
            glyph = pending.finish()
            if glyph.codepoint in self._seen:
                raise MalformedGlyph("duplicate codepoint", glyph.codepoint,
                                     glyph.name, pending.lineno)
            self._seen.add(glyph.codepoint)
            self.glyphs.append(glyph)
        except MalformedGlyph as e:
            self.dropped.append(e)
        if rec.keyword == "STARTCHAR":
            self._start(rec)
        return False

    def _truncated(self, rec: Record):
        raise MalformedInput(
            f"ENDFONT inside glyph {self._glyph.name!r} "
            f"started at line {self._glyph.lineno}", rec.lineno)


def collect(source) -> Collection:
    """
    Parse BDF text (str or bytes) into a Collection.

    Raises:
        MalformedInput: If the text is undecodable or truncated
    """
    return GlyphCollector(BdfTextScanner(source)).run()
