"""
Glyph Height Normalization
==========================
Brings every glyph of a font to one cell size and pads its height to the
display's row-group (page) size.

Steps:
1. place(): position the glyph inside the FONTBOUNDINGBOX cell using its
   BBX offsets, so proportional bounding boxes become one fixed cell
2. normalize(): add ascender rows on top, round the height up to a
   multiple of the row-group with blank rows at the bottom, optionally
   cut rows beyond a limit (from the bottom)

Only row count and row content change here; horizontal pixels stay put.
"""

from .bitmap import Bitmap

ROW_GROUP = 8  # Vertical pixels per display page


def place(record, header=None) -> Bitmap:
    """
    Position a glyph inside the font bounding-box cell.

    The cell's top edge sits at bbox_dy + bbox_height above the baseline
    and its left edge at bbox_dx. Pixels outside the cell are clipped.

    Args:
        record: GlyphRecord
        header: FontHeader; without a FONTBOUNDINGBOX the glyph is
            returned at its own size

    Returns:
        Bitmap of the cell size (or the glyph's BBX size)
    """
    glyph = Bitmap.from_scanlines(record.width, record.rows)
    if header is None or header.bbox is None:
        return glyph

    cell_w, cell_h, cell_dx, cell_dy = header.bbox
    if (record.width, record.height, record.dx, record.dy) == header.bbox:
        return glyph

    top = (cell_dy + cell_h) - (record.dy + record.height)
    shift = cell_w - (record.dx - cell_dx) - record.width
    mask = (1 << cell_w) - 1

    cell = Bitmap(cell_w, cell_h)
    for i, row in enumerate(glyph.rows):
        y = top + i
        if 0 <= y < cell_h:
            row = row << shift if shift >= 0 else row >> -shift
            cell.rows[y] = row & mask
    return cell


def normalize(bitmap: Bitmap, ascender: int = 0, native: bool = False,
              group: int = ROW_GROUP, limit: int | None = None) -> Bitmap:
    """
    Pad (and optionally truncate) a glyph vertically.

    Args:
        bitmap: Glyph pixels
        ascender: Blank rows added above the glyph
        native: Keep the authored height instead of rounding up to `group`
        group: Row-group size for rounding
        limit: Maximum height; extra rows are dropped from the bottom

    Returns:
        New Bitmap with the same width

    Raises:
        ValueError: If ascender, group or limit is negative / zero
    """
    if ascender < 0:
        raise ValueError("ascender must be >= 0")
    if group < 1:
        raise ValueError("group must be >= 1")
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")

    rows = [0] * ascender + bitmap.rows
    if not native:
        target = -(-len(rows) // group) * group
        rows.extend([0] * (target - len(rows)))
    if limit is not None:
        del rows[limit:]
    return Bitmap(bitmap.width, len(rows), rows)
