import pytest

from fractol.mlx.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    good_color,
    parse_xpm_data,
    parse_xpm_text,
    split_words,
    str_str,
    str_str_quoted,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #FF0000",
"X c blue",
/* pixels */
"  .",
"X. "
};
"""

SAMPLE_LINES = ["3 2 3 1", "  c None", ". c #FF0000", "X c blue", "  .", "X. "]


def test_str_str_finds_position():
    assert str_str("hello world", "wor", 11) == 6


def test_str_str_needle_longer_than_length():
    assert str_str("hello world", "wor", 2) is None


def test_str_str_stops_at_nul():
    assert str_str("ab\0cd", "cd", 5) is None


def test_str_str_quoted_skips_quoted_text():
    assert str_str_quoted('"/*" /*', "/*", 7) == 5


def test_str_str_quoted_not_found():
    assert str_str_quoted('"/*"', "/*", 4) is None


def test_split_words():
    assert split_words("  3 2\t1  4 ") == ["3", "2", "1", "4"]


def test_strip_block_comment():
    assert strip_comments("a/*x*/b") == "a     b"


def test_strip_line_comment():
    assert strip_comments("a//c\nb") == "a    b"


def test_strip_keeps_quoted_comment_markers():
    text = '"a /* b */"'
    assert strip_comments(text) == text


def test_strip_preserves_length():
    assert len(strip_comments(SAMPLE)) == len(SAMPLE)


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00") == 0x00FF00


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_is_transparent_marker():
    assert text_to_rgb("None") == -1


def test_text_to_rgb_unknown_name():
    assert text_to_rgb("nosuchcolor") == 0


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x123456])
def test_good_color_true_color_unchanged(color):
    assert good_color(color, 24, (16, 8, 8, 8, 0, 8)) == color


def test_good_color_rgb565_white():
    assert good_color(0xFFFFFF, 16, (11, 5, 5, 6, 0, 5)) == 0xFFFF


def test_good_color_rgb565_black():
    assert good_color(0x000000, 16, (11, 5, 5, 6, 0, 5)) == 0


def test_parse_text_sample():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.rows == (
        (TRANSPARENT, TRANSPARENT, 0xFF0000),
        (0xFF, 0xFF0000, TRANSPARENT),
    )


def test_text_and_data_agree():
    assert parse_xpm_text(SAMPLE) == parse_xpm_data(SAMPLE_LINES)


def test_data_returns_image():
    image = parse_xpm_data(SAMPLE_LINES)
    assert image == XpmImage(3, 2, image.rows)
    assert all(len(row) == 3 for row in image.rows)


def test_single_char_keys_later_definition_wins():
    image = parse_xpm_data(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.rows == ((0xFF,),)


def test_long_keys_first_definition_wins():
    image = parse_xpm_data(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.rows == ((0xFF0000,),)


def test_two_char_keys():
    image = parse_xpm_data(["2 1 2 2", "aa c red", "bb c blue", "bbaa"])
    assert image.rows == ((0xFF, 0xFF0000),)


def test_unknown_key_gives_zero():
    image = parse_xpm_data(["1 1 1 1", "a c red", "b"])
    assert image.rows == ((0,),)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c red"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_data(lines)


def test_text_without_strings_raises():
    with pytest.raises(XpmError):
        parse_xpm_text("/* nothing here */")