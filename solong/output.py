"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character *c* to *stream*."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write the string *s* to *stream*."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write *s* followed by a newline to *stream*."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of the integer *n* to *stream*."""
    stream.write(str(int(n)))