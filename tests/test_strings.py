import pytest
from hypothesis import given
from hypothesis import strategies as st

from miniformat.strings import (
    atoi,
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))


@given(ascii_text)
def test_strlen_counts_characters(s):
    assert strlen(s) == len(s)


@given(ascii_text, st.integers(min_value=1, max_value=50))
def test_strlcpy_truncates_and_reports_source_length(src, size):
    result = strlcpy(src, size)
    assert result.text == src[: size - 1]
    assert result.length == len(src)
    assert len(result.text) <= size - 1


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)


def test_strlcat_appends_within_size():
    result = strlcat("ab", "cdef", 5)
    assert result.text == ("ab" + "cdef")[:4]
    assert result.length == len("ab") + len("cdef")


def test_strlcat_fits_completely():
    result = strlcat("ab", "cd", 10)
    assert result.text == "abcd"
    assert result.length == len("abcd")


def test_strlcat_dest_larger_than_size_is_unchanged():
    result = strlcat("abcdef", "xy", 3)
    assert result.text == "abcdef"
    assert result.length == 3 + len("xy")


def test_strlcat_dest_exactly_fills_buffer():
    result = strlcat("abcd", "xy", 5)
    assert result.text == "abcd"
    assert result.length == len("abcd") + len("xy")


@given(ascii_text, st.sampled_from("abcxyz "))
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[:index]
    else:
        assert index is None


@given(ascii_text, st.sampled_from("abcxyz "))
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[index + 1 :]
    else:
        assert index is None


def test_strchr_and_strrchr_nul_matches_end():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_accepts_code_point():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strncmp_limits_comparison():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")


@given(ascii_text, st.integers(min_value=0, max_value=20))
def test_strncmp_equal_strings_compare_zero(s, n):
    assert strncmp(s, s, n) == 0


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=20))
def test_strncmp_is_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strnstr_requires_match_within_length():
    big = "lorem ipsum dolor"
    index = strnstr(big, "ipsum", len("lorem ipsum"))
    assert big[index : index + len("ipsum")] == "ipsum"
    assert strnstr(big, "ipsum", len("lorem ipsu")) is None


def test_strnstr_empty_needle_matches_start():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length_finds_nothing():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_negative_length_rejected():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


@given(
    st.text(alphabet=" \t\n\v\f\r", max_size=5),
    st.integers(min_value=-(2**31), max_value=2**31 - 1),
    st.text(alphabet="abc -+", max_size=5),
)
def test_atoi_parses_leading_number(prefix, n, suffix):
    assert atoi(prefix + str(n) + suffix) == n


def test_atoi_without_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("+-5") == 0


def test_atoi_explicit_plus():
    assert atoi("  +42x") == int("42")


@given(ascii_text, st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
def test_substr_matches_slice(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    if start < len(s):
        assert s.startswith(result, start)
    else:
        assert result == ""


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(ascii_text, ascii_text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined[len(a) :] == b


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  a b  ", "") == "  a b  "


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []


@given(st.text(alphabet="ab,", max_size=30))
def test_split_invariants(s):
    words = split(s, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == s.replace(",", "")


def test_split_rejects_multi_character_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def _shift_by_index(index, ch):
    return chr(ord(ch) + index)


def test_strmapi_shifts_by_index():
    assert strmapi("ab", _shift_by_index) == "ac"


@given(ascii_text)
def test_strmapi_identity(s):
    assert strmapi(s, lambda _i, ch: ch) == s


def test_striteri_modifies_in_place():
    chars = list("ab")
    assert striteri(chars, _shift_by_index) is None
    assert chars == ["a", "c"]


def test_striteri_none_leaves_element():
    chars = list("xyz")
    seen = []
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert chars == list("xyz")
    assert seen == list(enumerate("xyz"))