"""Parsing of conversion specifications and the padding rules they drive."""

from __future__ import annotations

import re
from dataclasses import dataclass

SIGNS = "-+ "
ARGUMENT_CONVERSIONS = "cspdiuxX"
NULL_STRING = "(null)"

_SPEC_RE = re.compile(r"%([-0# +]*)(\d*)(?:\.(\d*))?(.?)", re.DOTALL)


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion such as ``%-08.3d``.

    ``length`` is the number of characters of the format the conversion
    takes up, the leading ``%`` and the conversion character included.
    A ``.`` without digits gives a precision of 0.
    """

    conversion: str | None = None
    left_align: bool = False
    zero_pad: bool = False
    alternate: bool = False
    space: bool = False
    plus: bool = False
    width: int | None = None
    precision: int | None = None
    length: int = 1

    @property
    def consumes_argument(self) -> bool:
        """True when the conversion takes a value from the argument list."""
        return self.conversion is not None and self.conversion in ARGUMENT_CONVERSIONS


def parse_spec(text: str) -> FormatSpec:
    """Parse the conversion that starts at the beginning of text."""
    match = _SPEC_RE.match(text)
    if match is None:
        raise ValueError("a conversion specification must start with '%'")
    flags, width, precision, conversion = match.groups()
    return FormatSpec(
        conversion=conversion or None,
        left_align="-" in flags,
        zero_pad="0" in flags,
        alternate="#" in flags,
        space=" " in flags,
        plus="+" in flags,
        width=int(width) if width else None,
        precision=None if precision is None else int(precision or "0"),
        length=match.end(),
    )


def pad(text: str, width: int | None, left: bool = False) -> str:
    """Pad text with spaces to width, on the right when left is true."""
    if width is None or len(text) >= width:
        return text
    return text.ljust(width) if left else text.rjust(width)


def _has_sign(text: str) -> bool:
    return bool(text) and text[0] in SIGNS


def zero_fill(text: str, width: int | None) -> str:
    """Pad text with zeros to width, keeping a leading sign character in front."""
    if width is None or len(text) >= width:
        return text
    zeros = "0" * (width - len(text))
    if _has_sign(text):
        return text[0] + zeros + text[1:]
    return zeros + text


def hex_digits(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    if n < 0:
        raise ValueError("hex_digits needs a non-negative integer")
    return format(n, "X" if upper else "x")


def apply_string_precision(spec: FormatSpec, text: str, is_null: bool = False) -> str:
    """Cut text to the precision of spec.

    A precision below 1 empties the text; the null marker is dropped
    entirely unless the precision leaves room for all of it.
    """
    precision = spec.precision
    if precision is None:
        return text
    if precision < 1 or (is_null and precision < len(NULL_STRING)):
        return ""
    return text[:precision]