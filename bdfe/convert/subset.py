"""
Codepoint subset selection.
"""

_MAX_CODEPOINT = 0xFFFFFFFF


def retain(codepoint: int, lo: int, hi: int) -> bool:
    """True if lo <= codepoint <= hi."""
    return lo <= codepoint <= hi


class CodepointRange:
    """
    Inclusive codepoint range, always normalized to first <= last.

    Attributes:
        first: Lowest codepoint kept
        last: Highest codepoint kept
    """

    def __init__(self, first: int, last: int):
        if first > last:
            first, last = last, first
        self.first = first
        self.last = last

    @classmethod
    def parse(cls, text: str) -> "CodepointRange":
        """
        Parse "a-b" or a single "a" (decimal).

        Raises:
            ValueError: If the text is not one or two unsigned integers
        """
        lo, sep, hi = text.strip().partition("-")
        if not lo.isdigit() or (sep and not hi.isdigit()):
            raise ValueError(f"invalid subset {text!r}, expected a-b")
        first = int(lo)
        last = int(hi) if sep else first
        if max(first, last) > _MAX_CODEPOINT:
            raise ValueError(f"subset {text!r} out of range")
        return cls(first, last)

    @property
    def is_all(self) -> bool:
        return self.first == 0 and self.last == _MAX_CODEPOINT

    def __contains__(self, codepoint: int) -> bool:
        return retain(codepoint, self.first, self.last)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodepointRange):
            return NotImplemented
        return (self.first, self.last) == (other.first, other.last)

    def __hash__(self) -> int:
        return hash((self.first, self.last))

    def __repr__(self) -> str:
        if self.is_all:
            return "CodepointRange.ALL"
        return f"CodepointRange({self.first}, {self.last})"


# Printable ASCII
CodepointRange.DEFAULT = CodepointRange(32, 126)
CodepointRange.ALL = CodepointRange(0, _MAX_CODEPOINT)
