import pytest

from bdfe.convert.bitmap import Bitmap
from bdfe.convert.transform import drop_last, flip, rotate, transform
from bdfe.errors import InvalidGlyphLayout

from conftest import A_ROWS


def test_rotate_reads_columns_bottom_to_top():
    bm = Bitmap(3, 2, [0b100, 0b011])
    out = rotate(bm)
    assert (out.width, out.height) == (2, 3)
    assert out.rows == [0b01, 0b10, 0b10]
    for j in range(3):
        for k in range(2):
            assert out.pixel(k, j) == bm.pixel(j, 1 - k)


def test_rotate_glyph_a_gives_page_layout():
    out = rotate(Bitmap(8, 8, A_ROWS))
    # Row 3 of the glyph lands in bit 3 of columns 1..6
    assert out.pack() == bytes([0x00] + [0x08] * 6 + [0x00])


@pytest.mark.parametrize("bm", [
    Bitmap(8, 8, A_ROWS),
    Bitmap(3, 2, [0b100, 0b011]),
    Bitmap(5, 13, [(i * 7) & 0x1F for i in range(13)]),
    Bitmap(0, 0),
])
def test_rotate_four_times_is_identity(bm):
    out = bm
    for _ in range(4):
        out = rotate(out)
    assert out == bm


def test_flip_reverses_bits():
    assert flip(bytes([0x01, 0x80, 0x7E, 0x0F, 0xA0])) == bytes(
        [0x80, 0x01, 0x7E, 0xF0, 0x05])


def test_flip_is_self_inverse():
    data = bytes(range(256))
    assert flip(flip(data)) == data


def test_drop_last():
    assert drop_last(b"\x01\x02\x03") == b"\x01\x02"
    with pytest.raises(InvalidGlyphLayout):
        drop_last(b"")


def test_transform_no_flags():
    g = transform(65, Bitmap(8, 8, A_ROWS))
    assert g.data == bytes.fromhex("000000 7E 00000000")
    assert (g.codepoint, g.width, g.height) == (65, 8, 8)


def test_transform_rotate_flip_droplast_order():
    g = transform(65, Bitmap(8, 8, A_ROWS), rotate_ccw=True,
                  flip_bits=True, droplast=True)
    assert g.data == bytes([0x00] + [0x10] * 6)


def test_transform_rotated_tall_glyph_size():
    g = transform(65, Bitmap(8, 16, A_ROWS + [0] * 8), rotate_ccw=True)
    assert (g.width, g.height) == (16, 8)
    assert len(g.data) == 16


def test_droplast_reduces_by_one_byte():
    bm = Bitmap(8, 16, list(range(16)))
    plain = transform(1, bm)
    dropped = transform(1, bm, droplast=True)
    assert len(dropped.data) == len(plain.data) - 1
    assert dropped.data == plain.data[:-1]


def test_droplast_on_empty_glyph_names_codepoint():
    with pytest.raises(InvalidGlyphLayout) as exc:
        transform(32, Bitmap(0, 0), droplast=True)
    assert exc.value.codepoint == 32


def test_transform_is_deterministic():
    bm = Bitmap(8, 8, A_ROWS)
    assert transform(65, bm, True, True).data == transform(65, bm, True, True).data


def test_zero_byte_glyph_is_invalid():
    with pytest.raises(InvalidGlyphLayout) as exc:
        transform(32, Bitmap(0, 8))
    assert exc.value.codepoint == 32


def test_droplast_of_single_byte_leaves_nothing():
    with pytest.raises(InvalidGlyphLayout, match="no bytes"):
        transform(46, Bitmap(8, 1, [0x18]), droplast=True)
