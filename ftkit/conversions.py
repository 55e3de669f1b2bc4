"""Rendering of single values according to a parsed conversion."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ftkit.spec import (
    NULL_STRING,
    SIGNS,
    FormatSpec,
    apply_string_precision,
    hex_digits,
    pad,
    zero_fill,
)

NIL_POINTER = "(nil)"
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("expected an integer")
    return value


def _int32(value: Any) -> int:
    n = _integer(value) & _UINT32
    return n - (1 << 32) if n & 0x80000000 else n


def _uint32(value: Any) -> int:
    return _integer(value) & _UINT32


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_integer(value) & 0xFF)


def _loose_width(spec: FormatSpec) -> int | None:
    # For conversions without a precision rule, a lone precision acts as the width.
    return spec.width if spec.width is not None else spec.precision


def _has_sign(text: str) -> bool:
    return bool(text) and text[0] in SIGNS


def _format_number(spec: FormatSpec, body: str, is_zero: bool) -> str:
    if spec.precision is not None:
        if is_zero:
            body = body[0] if _has_sign(body) else ""
        body = zero_fill(body, spec.precision + (1 if _has_sign(body) else 0))
        return pad(body, spec.width, spec.left_align)
    if spec.zero_pad and not spec.left_align:
        return zero_fill(body, spec.width)
    return pad(body, spec.width, spec.left_align)


def format_char(spec: FormatSpec, value: Any) -> str:
    """Render one character; an integer is taken as a byte value."""
    return pad(_as_char(value), _loose_width(spec), spec.left_align)


def format_string(spec: FormatSpec, value: str | None) -> str:
    """Render a string; None is shown as the null marker."""
    if value is not None and not isinstance(value, str):
        raise TypeError("expected a string or None")
    is_null = value is None
    text = NULL_STRING if value is None else value
    if spec.precision is not None:
        text = apply_string_precision(spec, text, is_null)
    return pad(text, spec.width, spec.left_align)


def format_pointer(spec: FormatSpec, value: int | None) -> str:
    """Render an address as 0x-prefixed hex; None or 0 is shown as (nil)."""
    if value is None or _integer(value) & _UINT64 == 0:
        text = NIL_POINTER
    else:
        text = "0x" + hex_digits(value & _UINT64)
    return pad(text, _loose_width(spec), spec.left_align)


def format_int(spec: FormatSpec, value: Any) -> str:
    """Render a signed 32-bit decimal integer."""
    n = _int32(value)
    digits = str(n)
    if n >= 0 and spec.plus:
        digits = "+" + digits
    elif n >= 0 and spec.space:
        digits = " " + digits
    return _format_number(spec, digits, n == 0)


def format_unsigned(spec: FormatSpec, value: Any) -> str:
    """Render an unsigned 32-bit decimal integer."""
    n = _uint32(value)
    return _format_number(spec, str(n), n == 0)


def format_hex(spec: FormatSpec, value: Any, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    n = _uint32(value)
    body = hex_digits(n)
    if spec.alternate and n:
        body = "0x" + body
    if upper:
        body = body.upper()
    return _format_number(spec, body, n == 0)


_DISPATCH: dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda spec, value: format_hex(spec, value, False),
    "X": lambda spec, value: format_hex(spec, value, True),
}


def convert(spec: FormatSpec, value: Any = None) -> str:
    """Render value by the conversion of spec.

    ``%%`` gives a percent sign; an unknown conversion gives nothing.
    """
    if spec.conversion == "%":
        return "%"
    handler = _DISPATCH.get(spec.conversion or "")
    if handler is None:
        return ""
    return handler(spec, value)