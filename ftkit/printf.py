"""Formatted output built from conversion specifications."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from ftkit.conversions import convert
from ftkit.spec import parse_spec


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        spec = parse_spec(fmt[percent:])
        value = None
        if spec.consumes_argument:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion at index {percent}"
                ) from None
        yield convert(spec, value)
        pos = percent + spec.length


def format_text(fmt: str, *args: Any) -> str:
    """Return fmt with every conversion replaced by its rendered argument.

    Arguments left over after the last conversion are ignored; a
    conversion with no argument left raises TypeError.
    """
    if not isinstance(fmt, str):
        raise TypeError("the format must be a string")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    return printf_fd(sys.stdout, fmt, *args)


def printf_fd(stream: TextIO | int | None, fmt: str, *args: Any) -> int:
    """Write the formatted text to a stream or file descriptor.

    Returns the number of characters written. None means standard output.
    """
    text = format_text(fmt, *args)
    if stream is None:
        sys.stdout.write(text)
    elif isinstance(stream, bool):
        raise TypeError("expected a text stream or a file descriptor")
    elif isinstance(stream, int):
        os.write(stream, text.encode())
    else:
        stream.write(text)
    return len(text)