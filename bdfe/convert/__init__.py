"""
Glyph conversion pipeline.

Modules:
    subset: Codepoint range selection
    bitmap: 1-bit pixel matrix
    normalize: Cell placement and row-group height padding
    transform: Rotate / flip / droplast
    assemble: PackedFont builder
"""
from .subset import CodepointRange, retain
from .bitmap import Bitmap
from .normalize import ROW_GROUP, normalize, place
from .transform import TransformedGlyph, drop_last, flip, rotate, transform
from .assemble import PackedFont, assemble

__all__ = [
    "CodepointRange",
    "retain",
    "Bitmap",
    "ROW_GROUP",
    "normalize",
    "place",
    "TransformedGlyph",
    "drop_last",
    "flip",
    "rotate",
    "transform",
    "PackedFont",
    "assemble",
]
