# ftkit

A small toolkit of character, string, linked-list, line-reading and
printf-style formatting helpers with tightly defined, C-library-like
semantics. It has no dependencies outside the standard library.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: ASCII character classification and case mapping:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`, plus `absolute`. The functions take a one-character string or
  an integer code; `to_upper` and `to_lower` return the same kind they were
  given.
- `ftkit.strbuild`: building new strings: `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri` (in place, on a mutable
  sequence of characters), `strndup`, `str_quotes`.
- `ftkit.linereader`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream in chunks of `buffer_size` and hands back one line at a time
  with its newline kept. `read_line()` returns `None` at end of input; the
  reader is also iterable.
- `ftkit.linked`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `clear(delete=None)`, `iterate` and
  `map`, plus `len()` and iteration over contents.
- `ftkit.spec`: `parse_spec` turns a conversion such as `%-08.3d` into a
  `FormatSpec` (flags `-`, `0`, `#`, space, `+`, width, precision); also
  `pad`, `zero_fill`, `hex_digits` and `apply_string_precision`.
- `ftkit.conversions`: rendering of a single value for a `FormatSpec`:
  `format_char`, `format_string`, `format_pointer`, `format_int`,
  `format_unsigned`, `format_hex`, and `convert`, which dispatches on the
  conversion character (`c s p d i u x X %`). Integers are taken as 32-bit
  values, so `-1` under `%u` gives `4294967295`; a `None` string prints as
  `(null)` and a null pointer as `(nil)`.
- `ftkit.printf`: `format_text(fmt, *args)` returns the formatted string;
  `printf(fmt, *args)` writes it to standard output and
  `printf_fd(stream, fmt, *args)` to a text stream or an integer file
  descriptor. Both return the number of characters written. A conversion
  with no argument left raises `TypeError`; extra arguments are ignored.

## Examples

```python
import io
import sys

from ftkit.linereader import LineReader
from ftkit.linked import LinkedList
from ftkit.printf import format_text, printf_fd
from ftkit.strbuild import split

format_text("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'
split("  a b  c ", " ")                      # ['a', 'b', 'c']

for line in LineReader(io.StringIO("one\ntwo\n"), 42):
    print(line, end="")

squares = LinkedList([1, 2, 3]).map(lambda n: n * n)
list(squares)                                # [1, 4, 9]

printf_fd(sys.stderr, "error: %s\n", "map not found")
```

## What it does not do

This is a library only: it installs no command-line tool. Its formatting
covers the `c s p d i u x X %` conversions and nothing beyond them (no
floating point, no length modifiers such as `l` or `h`).