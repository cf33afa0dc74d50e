import pytest

from minishell.textutil import (
    atoi,
    is_word_char,
    itoa,
    split,
    strcmp,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [(" -42", -42), ("+7abc", 7), ("\t\n 123", 123), ("", 0), ("abc", 0), ("--5", 0)],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_overflow_positive_gives_minus_one():
    assert atoi("99999999999999999999") == -1


def test_atoi_overflow_negative_gives_zero():
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("number", [0, 1, -1, 42, -2147483648, 2147483647, 1000])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_negative():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_pieces():
    assert split("  a  b c ", " ") == ["a", "b", "c"]


def test_split_empty_text():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_empty_separator_keeps_whole_text():
    assert split("a b", "") == ["a b"]


def test_split_pieces_never_contain_separator():
    pieces = split("x,,y,z,", ",")
    assert all("," not in piece and piece for piece in pieces)
    assert ",".join(pieces) == "x,y,z"


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("abba", "ab") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" text ", "") == " text "


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


@pytest.mark.parametrize("start, length", [(0, 0), (0, 100), (2, 1), (5, 3)])
def test_substr_length_is_bounded(start, length):
    result = substr("hello", start, length)
    assert len(result) <= length
    assert "hello".startswith(result, start)


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_inside_limit():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:].startswith("world")


def test_strnstr_match_must_end_inside_limit():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_orders():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_length():
    assert strncmp("x", "y", 0) == 0


def test_strcmp_equal_and_prefix():
    assert strcmp("echo", "echo") == 0
    assert strcmp("a", "") > 0
    assert strcmp("", "a") < 0


def test_strcmp_is_antisymmetric():
    assert strcmp("cd", "pwd") == -strcmp("pwd", "cd")


@pytest.mark.parametrize("char, expected", [("_", True), ("a", True), ("Z", True), ("9", True), ("-", False), ("é", False), ("", False)])
def test_is_word_char(char, expected):
    assert is_word_char(char) is expected