"""String helpers with the classic bounded-copy, search and split semantics."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Number of characters in *s*."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the difference of the code points at the first mismatch, with the
    end of a string counting as code point 0, or 0 when the prefixes match.
    """
    _non_negative("n", n)
    for position in range(n):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* inside the first *length* characters of *haystack*, or None.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a destination of *size* slots, one of them for the terminator.

    Returns the copied text and the full length of *src*, so truncation shows
    as a length not smaller than *size*.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a destination of *size* slots.

    Returns the resulting text and the length the full concatenation would
    have needed, counting *dest* as at most *size* long.
    """
    _non_negative("size", size)
    start = min(len(dest), size)
    if start < size:
        result = dest + src[: size - start - 1]
    else:
        result = dest
    return result, start + len(src)


def strdup(s: str) -> str:
    """A copy of *s*."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty when *start* is past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenation of *first* and *second*."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strtrim(s: str, charset: str) -> str:
    """*s* with every leading and trailing character found in *charset* removed."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Words of *s* separated by runs of the single character *sep*; empty words are dropped."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of the integer *n*."""
    return str(int(n))


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character of *s*."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each item of *chars* in place with ``func(index, item)``."""
    for index, char in enumerate(list(chars)):
        chars[index] = func(index, char)