"""
BDF Exporter
============
Converts BDF bitmap fonts into packed byte arrays for firmware and
monochrome pixel displays (SSD1306 and similar OLED controllers).

Architecture
------------
The conversion runs as a pipeline:

    convert()           Orchestration, per-glyph error isolation
       │
       ├── BdfTextScanner   Line tokenizer
       │      │
       │      └── GlyphCollector   State machine -> FontHeader, GlyphRecords
       │
       ├── CodepointRange   Subset selection
       ├── place/normalize  Cell placement, row-group height padding
       ├── transform        Rotate / flip / droplast
       └── assemble         PackedFont

    render()            C source output
    render_sheet()      Preview image

Quick Start
-----------
    from bdfe import ConvertOptions, convert_file, render

    conv = convert_file("font.bdf", ConvertOptions(rotate=True, flip=True))
    print(conv.font)
    print(render(conv))

Module Structure
----------------
    bdfe/
    ├── engine.py           convert(), ConvertOptions, Conversion
    ├── errors.py           Exception types
    ├── cli.py              Command line interface
    ├── bdf/
    │   ├── scanner.py      BdfTextScanner
    │   └── collector.py    GlyphCollector, FontHeader, GlyphRecord
    ├── convert/
    │   ├── subset.py       CodepointRange
    │   ├── bitmap.py       Bitmap pixel matrix
    │   ├── normalize.py    Cell placement and height padding
    │   ├── transform.py    Geometry transforms
    │   └── assemble.py     PackedFont
    └── output/
        ├── csource.py      C array rendering
        └── preview.py      Terminal and PNG previews
"""

from .errors import (
    BdfError,
    EmptyFont,
    InvalidGlyphLayout,
    MalformedGlyph,
    MalformedInput,
)
from .bdf import BdfTextScanner, FontHeader, GlyphCollector, GlyphRecord
from .convert import CodepointRange, PackedFont
from .engine import Conversion, ConvertOptions, convert, convert_file
from .output import OutputOptions, render, render_sheet

__all__ = [
    # Engine
    "convert",
    "convert_file",
    "Conversion",
    "ConvertOptions",
    # Parsing
    "BdfTextScanner",
    "GlyphCollector",
    "FontHeader",
    "GlyphRecord",
    # Conversion
    "CodepointRange",
    "PackedFont",
    # Output
    "OutputOptions",
    "render",
    "render_sheet",
    # Errors
    "BdfError",
    "MalformedInput",
    "MalformedGlyph",
    "InvalidGlyphLayout",
    "EmptyFont",
]

__version__ = "1.0.0"
