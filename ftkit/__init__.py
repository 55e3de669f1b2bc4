"""Character, string, linked-list, line-reading and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "strbuild",
    "linereader",
    "linked",
    "spec",
    "conversions",
    "printf",
]