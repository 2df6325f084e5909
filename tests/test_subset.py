import pytest

from bdfe.convert.subset import CodepointRange, retain


def test_retain_inclusive():
    assert retain(32, 32, 126)
    assert retain(126, 32, 126)
    assert not retain(31, 32, 126)
    assert not retain(127, 32, 126)


def test_range_swaps_reversed_bounds():
    r = CodepointRange(66, 65)
    assert (r.first, r.last) == (65, 66)
    assert 65 in r and 66 in r and 67 not in r


@pytest.mark.parametrize("text, bounds", [
    ("65-66", (65, 66)),
    ("90-48", (48, 90)),
    ("65", (65, 65)),
    (" 0-255 ", (0, 255)),
])
def test_parse(text, bounds):
    r = CodepointRange.parse(text)
    assert (r.first, r.last) == bounds


@pytest.mark.parametrize("text", ["", "a-b", "65-", "-65", "1-2-3", "99999999999"])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        CodepointRange.parse(text)


def test_default_and_all():
    assert CodepointRange.DEFAULT == CodepointRange(32, 126)
    assert not CodepointRange.DEFAULT.is_all
    assert CodepointRange.ALL.is_all
    assert 0 in CodepointRange.ALL
    assert 0xFFFFFFFF in CodepointRange.ALL
    assert repr(CodepointRange.ALL) == "CodepointRange.ALL"
