import pytest

from ftkit.chars import to_upper
from ftkit.strbuild import (
    split,
    str_quotes,
    strdup,
    striteri,
    strjoin,
    strmapi,
    strndup,
    strtrim,
    substr,
)


def test_strdup_copies_equal_text():
    assert strdup("hello world") == "hello world"


def test_strdup_none():
    assert strdup(None) is None


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clips_to_end():
    text = "abcdef"
    assert substr(text, 2, 1000) == text[2:]


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_none():
    assert substr(None, 0, 3) is None


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@pytest.mark.parametrize("a,b", [("foo", "bar"), ("", "x"), ("x", ""), ("", "")])
def test_strjoin_length_and_parts(a, b):
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a)
    assert joined.endswith(b)


def test_strjoin_none_counts_as_empty():
    assert strjoin(None, "x") == "x"
    assert strjoin("y", None) == "y"
    assert strjoin(None, None) == ""


def test_strtrim_both_ends():
    assert strtrim("xyhixyx", "xy") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  ab  ", "") == "  ab  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xaxbx", "x") == "axb"


@pytest.mark.parametrize("text", ["a,,b,", ",,,", "", "single", ",lead,trail,"])
def test_split_invariants(text):
    words = split(text, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == text.replace(",", "")


def test_split_runs_of_separators():
    assert split("a,,b,", ",") == ["a", "b"]


def test_split_only_separators_is_empty():
    assert split("    ", " ") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_uses_function():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"


def test_strmapi_passes_indices():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: to_upper(c) if i == 1 else None)
    assert chars == ["a", "B", "c"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == ["x", "y", "z"]


def test_strndup_prefix():
    assert strndup("hello", 3) == "hel"


def test_strndup_size_beyond_length():
    assert strndup("hi", 50) == "hi"


@pytest.mark.parametrize("size", [0, -3])
def test_strndup_small_size_gives_none(size):
    assert strndup("hello", size) is None


def test_str_quotes_wraps():
    assert str_quotes("abc", "[", "]") == "[abc]"


def test_str_quotes_none():
    assert str_quotes(None, "'", "'") is None


def test_str_quotes_rejects_long_delimiter():
    with pytest.raises(ValueError):
        str_quotes("abc", "<<", ">")