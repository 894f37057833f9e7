import pytest

from stormcastle.font import (
    FIRST_CODE,
    GLYPH_WIDTH,
    LAST_CODE,
    MAX_X,
    MAX_Y,
    glyph,
)


def test_space_is_blank():
    assert glyph(" ") == bytes(5)


def test_letter_a_matches_table():
    assert glyph("A") == bytes((0x7E, 0x11, 0x11, 0x11, 0x7E))


def test_digit_zero_matches_table():
    assert glyph("0") == bytes((0x3E, 0x51, 0x49, 0x45, 0x3E))


def test_last_code_is_ut_sign():
    assert glyph(0x7F) == bytes((0x1F, 0x24, 0x7C, 0x24, 0x1F))


def test_int_and_str_agree():
    for code in range(FIRST_CODE, 0x7F):
        assert glyph(code) == glyph(chr(code))


def test_every_glyph_has_width_and_fits_eight_rows():
    for code in range(FIRST_CODE, LAST_CODE + 1):
        columns = glyph(code)
        assert len(columns) == GLYPH_WIDTH
        assert all(column < 0x80 for column in columns)


def test_only_space_is_blank():
    blank = [code for code in range(FIRST_CODE, LAST_CODE + 1) if not any(glyph(code))]
    assert blank == [FIRST_CODE]


def test_twelve_padded_characters_fill_a_row():
    padded_width = len(glyph("W")) + 2
    assert padded_width * 12 == MAX_X
    assert MAX_Y // 8 == 6


@pytest.mark.parametrize("bad", [0x1F, 0x80, -1, "\n", "\u00e9"])
def test_out_of_range_raises(bad):
    with pytest.raises(ValueError):
        glyph(bad)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_not_single_character_raises(bad):
    with pytest.raises(ValueError):
        glyph(bad)


@pytest.mark.parametrize("bad", [None, 3.5, b"A", True])
def test_wrong_type_raises(bad):
    with pytest.raises(TypeError):
        glyph(bad)