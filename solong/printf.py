"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: Any) -> int:
    number = int(value) & _MASK32
    return number - (1 << 32) if number >= 1 << 31 else number


def _conv_int(value: Any) -> str:
    return str(_signed32(value))


def _conv_unsigned(value: Any) -> str:
    return str(int(value) & _MASK32)


def _conv_hex_lower(value: Any) -> str:
    return f"{int(value) & _MASK32:x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{int(value) & _MASK32:X}"


def _conv_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _MASK64
    return f"0x{address:x}"


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _conv_int,
    "i": _conv_int,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
    "p": _conv_pointer,
    "s": _conv_string,
    "c": _conv_char,
}


def format(template: str, *args: Any) -> str:
    """Expand *template* with *args*.

    Unknown conversions produce no output and consume no argument; extra
    arguments are ignored. Missing arguments raise TypeError.
    """
    pieces: list[str] = []
    remaining: Iterator[Any] = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            pieces.append(_CONVERSIONS[spec](value))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the expanded *template* to standard output and return its length."""
    text = format(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)