"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

from typing import overload

CharLike = str | int


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError("expected a one-character string or an integer code")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    code = _code(c)
    return ord(" ") <= code <= ord("~")


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...
def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...
def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def absolute(n: int) -> int:
    """Return the absolute value of an integer."""
    return -n if n < 0 else n