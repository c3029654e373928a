import pytest

from fractol.libft.text import (
    find_char,
    iteri,
    join,
    lcat,
    lcpy,
    mapi,
    ncmp,
    nstr,
    rfind_char,
    split,
    substr,
    trim,
)


def test_lcpy_truncates_and_reports_full_length():
    copied, total = lcpy("hello", 3)
    assert total == len("hello")
    assert len(copied) == 2
    assert "hello".startswith(copied)


def test_lcpy_large_size_copies_everything():
    assert lcpy("hello", 100) == ("hello", 5)


def test_lcpy_zero_size_copies_nothing():
    copied, total = lcpy("hello", 0)
    assert copied == ""
    assert total == 5


def test_lcpy_negative_size_rejected():
    with pytest.raises(ValueError):
        lcpy("x", -1)


def test_lcat_with_room_fills_to_size_minus_one():
    result, total = lcat("abc", "defgh", 6)
    assert total == len("abc") + len("defgh")
    assert len(result) == 5
    assert result.startswith("abc")
    assert "defgh".startswith(result[3:])


def test_lcat_without_room_keeps_dest():
    result, total = lcat("abcdef", "xyz", 4)
    assert result == "abcdef"
    assert total == len("xyz") + 4


def test_lcat_ample_size_appends_all():
    result, total = lcat("ab", "cd", 50)
    assert result == join("ab", "cd")
    assert total == len(result)


def test_ncmp_equal_strings():
    assert ncmp("fractal", "fractal", 7) == 0


def test_ncmp_difference_of_first_mismatch():
    assert ncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert ncmp("abd", "abc", 3) > 0


def test_ncmp_limited_by_n():
    assert ncmp("abc", "abd", 2) == 0
    assert ncmp("x", "y", 0) == 0


def test_ncmp_shorter_string_compares_as_nul():
    assert ncmp("ab", "abc", 3) == -ord("c")
    assert ncmp("mandelbrot", "mandelbrot", 11) == 0
    assert ncmp("mandelbrotx", "mandelbrot", 11) == ord("x")


def test_substr_within_bounds():
    result = substr("hello", 1, 3)
    assert len(result) == 3
    assert "hello".find(result) == 1


def test_substr_clamped_and_out_of_range():
    assert substr("hello", 2, 100) == "hello"[2:]
    assert substr("hello", 9, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_join_concatenates():
    joined = join("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == 6


def test_trim_both_ends():
    assert trim("xxhixx", "x") == "hi"


def test_trim_everything_and_nothing():
    assert trim("aaaa", "a") == ""
    assert trim("  keep  ", "") == "  keep  "


def test_trim_result_has_no_charset_at_ends():
    result = trim(" \t-value-\t ", " \t-")
    assert result[0] not in " \t-"
    assert result[-1] not in " \t-"
    assert result in " \t-value-\t "


def test_mapi_applies_func():
    assert mapi("abc", lambda i, c: c.upper()) == "abc".upper()


def test_mapi_passes_indices():
    assert mapi("aaa", lambda i, c: str(i)) == "012"


def test_iteri_replaces_selected_characters():
    result = iteri("abcd", lambda i, c: "_" if i % 2 else None)
    assert result[0::2] == "ac"
    assert set(result[1::2]) == {"_"}
    assert len(result) == 4


def test_split_drops_empty_words():
    words = split("  hello  world ", " ")
    assert words == ["hello", "world"]


def test_split_round_trip_without_repeats():
    text = "one,two,three"
    assert ",".join(split(text, ",")) == text


def test_split_edge_cases():
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("solo", ",") == ["solo"]


def test_split_requires_single_character():
    with pytest.raises(ValueError):
        split("a b", "ab")
    with pytest.raises(ValueError):
        split("a b", "")


def test_find_char():
    assert find_char("banana", "n") == 2
    assert find_char("banana", "z") is None
    assert find_char("banana", "\0") == len("banana")


def test_rfind_char():
    assert rfind_char("banana", "n") == 4
    assert rfind_char("banana", "z") is None
    assert rfind_char("banana", "\0") == len("banana")
    assert rfind_char("banana", "b") == 0


def test_find_char_rejects_multi_character():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_nstr_found_within_length():
    index = nstr("lorem ipsum", "ipsum", 11)
    assert index == "lorem ipsum".find("ipsum")


def test_nstr_needle_beyond_length():
    assert nstr("lorem ipsum", "ipsum", 10) is None
    assert nstr("abc", "d", 3) is None


def test_nstr_empty_needle():
    assert nstr("anything", "", 0) == 0
    assert nstr("", "", 5) == 0
    assert nstr("abc", "abc", 100) == 0