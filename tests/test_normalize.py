import pytest

from bdfe.bdf import FontHeader, GlyphRecord
from bdfe.convert.bitmap import Bitmap
from bdfe.convert.normalize import normalize, place

from conftest import A_ROWS


def glyph_a():
    return Bitmap(8, 8, A_ROWS)


def header(bbox):
    hdr = FontHeader()
    hdr.bbox = bbox
    return hdr


def test_multiple_of_eight_is_noop():
    for height in (8, 16):
        bm = Bitmap(8, height, [(i * 37) & 0xFF for i in range(height)])
        out = normalize(bm)
        assert out == bm
        assert out.pack() == bm.pack()


def test_rounds_up_with_blank_rows_at_bottom():
    out = normalize(Bitmap(8, 5, [1, 2, 3, 4, 5]))
    assert out.height == 8
    assert out.rows == [1, 2, 3, 4, 5, 0, 0, 0]


def test_ascender_then_round_up():
    out = normalize(glyph_a(), ascender=2)
    assert out.height == 16
    assert out.rows[:2] == [0, 0]
    assert out.rows[2:10] == A_ROWS
    assert out.rows[10:] == [0] * 6


def test_native_keeps_height():
    bm = Bitmap(8, 5, [1, 2, 3, 4, 5])
    assert normalize(bm, native=True) == bm
    out = normalize(bm, ascender=2, native=True)
    assert out.height == 7
    assert out.rows == [0, 0, 1, 2, 3, 4, 5]


def test_limit_truncates_bottom():
    out = normalize(Bitmap(8, 10, list(range(1, 11))), ascender=1, limit=8)
    assert out.rows == [0, 1, 2, 3, 4, 5, 6, 7]


def test_width_untouched():
    out = normalize(Bitmap(5, 3, [0x1F, 0x11, 0x1F]), ascender=1)
    assert out.width == 5
    assert out.height == 8


def test_negative_ascender():
    with pytest.raises(ValueError):
        normalize(glyph_a(), ascender=-1)


def test_place_full_cell_is_identity():
    rec = GlyphRecord(65, 8, 8, rows=[bytes([r]) for r in A_ROWS])
    assert place(rec, header((8, 8, 0, 0))).rows == A_ROWS


def test_place_without_bounding_box():
    rec = GlyphRecord(46, 2, 2, 3, 0, [b"\xc0", b"\xc0"])
    bm = place(rec, FontHeader())
    assert (bm.width, bm.height, bm.rows) == (2, 2, [3, 3])


def test_place_small_glyph_in_cell():
    # 2x2 dot sitting on the baseline, 3 pixels from the left edge
    rec = GlyphRecord(46, 2, 2, 3, 0, [b"\xc0", b"\xc0"])
    bm = place(rec, header((8, 8, 0, -2)))
    assert (bm.width, bm.height) == (8, 8)
    assert bm.pack() == bytes([0, 0, 0, 0, 0x18, 0x18, 0, 0])


def test_place_clips_outside_cell():
    # Negative dx pushes the left half out; descender below the cell
    rec = GlyphRecord(1, 4, 2, -2, -1, [b"\xf0", b"\xf0"])
    bm = place(rec, header((8, 1, 0, 0)))
    assert bm.height == 1
    assert bm.rows == [0xC0]
