"""
Conversion Errors
=================
Exception types raised (or collected) during BDF conversion.

Font-level errors abort a conversion:
    MalformedInput      Undecodable, truncated or corrupt font text
    EmptyFont           No glyph survived to assembly

Glyph-level errors only drop the affected glyph and are returned to the
caller as diagnostics:
    MalformedGlyph      Glyph missing required fields or with bad bitmap
    InvalidGlyphLayout  Transform or packing impossible for this glyph
"""


class BdfError(ValueError):
    """Base class for all conversion errors."""


class MalformedInput(BdfError):
    """Font text cannot be decoded, or ends in the middle of a glyph."""

    def __init__(self, message: str, lineno: int | None = None):
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


class EmptyFont(BdfError):
    """No glyphs left after parsing and filtering."""


class GlyphError(BdfError):
    """
    Error tied to a single glyph.

    Attributes:
        codepoint: Glyph codepoint, or None if not yet known
        name: Glyph name from STARTCHAR
        lineno: Line where the glyph started
    """

    def __init__(self, message: str, codepoint: int | None = None,
                 name: str = "", lineno: int | None = None):
        super().__init__(message)
        self.reason = message
        self.codepoint = codepoint
        self.name = name
        self.lineno = lineno

    def __str__(self) -> str:
        where = self.name or "?"
        if self.codepoint is not None:
            where = f"{where} ({self.codepoint})"
        if self.lineno is not None:
            where = f"{where} at line {self.lineno}"
        return f"glyph {where}: {self.reason}"


class MalformedGlyph(GlyphError):
    """Glyph definition is incomplete or inconsistent."""


class InvalidGlyphLayout(GlyphError):
    """Glyph bitmap cannot support the requested transform."""
