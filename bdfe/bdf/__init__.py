"""
BDF parsing subsystem.

Modules:
    scanner: Line tokenizer producing keyword records
    collector: State machine building FontHeader and GlyphRecords
"""
from .scanner import BdfTextScanner, Record
from .collector import (
    Collection,
    CollectorState,
    FontHeader,
    GlyphCollector,
    GlyphRecord,
    collect,
)

__all__ = [
    "BdfTextScanner",
    "Record",
    "Collection",
    "CollectorState",
    "FontHeader",
    "GlyphCollector",
    "GlyphRecord",
    "collect",
]
