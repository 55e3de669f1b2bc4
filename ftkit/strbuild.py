"""Building new strings: copies, slices, joins, trims, splits and maps."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single(c: str, what: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"{what} must be a one-character string")
    if len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {len(c)} characters")
    return c


def strdup(s: str | None) -> str | None:
    """Return a copy of s; None stays None."""
    if s is None:
        return None
    return str(s)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most length characters of s from index start.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings; None counts as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on runs of sep, dropping empty words."""
    _single(sep, "separator")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, character) on each item of s, in place.

    When f returns a character it replaces the item; None leaves it as it is.
    """
    for index, ch in enumerate(s):
        result = f(index, ch)
        if result is not None:
            s[index] = result


def strndup(s: str, size: int) -> str | None:
    """Copy at most size characters of s; a size below 1 gives None."""
    if size < 1:
        return None
    return s[:size]


def str_quotes(s: str | None, start: str, end: str) -> str | None:
    """Wrap s between the characters start and end; None stays None."""
    if s is None:
        return None
    return _single(start, "start") + s + _single(end, "end")