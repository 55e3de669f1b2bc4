import io
import os

import pytest

from ftkit.printf import format_text, printf, printf_fd


def test_plain_text_is_unchanged():
    assert format_text("no conversions here") == "no conversions here"


def test_empty_format():
    assert format_text("") == ""


def test_error_message_layout():
    message = "Window closed successfully"
    assert format_text("cub3d: %s\n", message) == "cub3d: " + message + "\n"


def test_percent_literal():
    assert format_text("100%%") == "100%"


def test_null_string_marker():
    assert format_text("[%s]", None) == "[(null)]"


def test_nil_pointer_marker():
    assert format_text("%p", None) == "(nil)"


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", -42),
        ("%+d", 7),
        ("% d", 7),
        ("%.3d", 5),
        ("%x", 255),
        ("%X", 48879),
        ("%#x", 4096),
        ("%u", 3000000000),
        ("%8s", "abc"),
        ("%-8s|", "abc"),
        ("%.2s", "abcdef"),
        ("%c", "z"),
        ("%3c", "z"),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert format_text(fmt, value) == fmt % value


def test_several_conversions_in_order():
    assert format_text("%s=%d (%x)", "n", 10, 10) == "%s=%d (%x)" % ("n", 10, 10)


def test_extra_arguments_are_ignored():
    assert format_text("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%d and %d", 1)


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        format_text(42)


def test_printf_writes_stdout_and_returns_length(capsys):
    count = printf("value: %d\n", 99)
    out = capsys.readouterr().out
    assert out == "value: 99\n"
    assert count == len(out)


def test_printf_fd_to_stream():
    stream = io.StringIO()
    count = printf_fd(stream, "cub3d: %s\n", "Display initialization failed")
    assert stream.getvalue() == "cub3d: Display initialization failed\n"
    assert count == len(stream.getvalue())


def test_printf_fd_none_means_stdout(capsys):
    count = printf_fd(None, "%s", "abc")
    assert capsys.readouterr().out == "abc"
    assert count == 3


def test_printf_fd_to_descriptor():
    read_end, write_end = os.pipe()
    try:
        count = printf_fd(write_end, "%s-%d", "row", 3)
        os.close(write_end)
        write_end = None
        data = os.read(read_end, 100)
    finally:
        if write_end is not None:
            os.close(write_end)
        os.close(read_end)
    assert data == b"row-3"
    assert count == len(data)


def test_printf_fd_rejects_bool():
    with pytest.raises(TypeError):
        printf_fd(True, "x")