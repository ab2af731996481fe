"""String helpers with C-library semantics expressed on Python strings.

Functions that would hand back a pointer into a string return the suffix
that starts there, or ``None`` where nothing is found. Functions that fill a
destination buffer return the new text instead, together with the length
the C routine would report where that length matters.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> str | None:
    """Return the suffix of ``s`` starting at the first ``c``, or None.

    Searching for the NUL character finds the terminator and gives ``""``.
    """
    _single_char(c)
    if c == NUL:
        return ""
    position = s.find(c)
    return None if position < 0 else s[position:]


def strrchr(s: str, c: str) -> str | None:
    """Return the suffix of ``s`` starting at the last ``c``, or None.

    Searching for the NUL character finds the terminator and gives ``""``.
    """
    _single_char(c)
    if c == NUL:
        return ""
    position = s.rfind(c)
    return None if position < 0 else s[position:]


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return -1, 0 or 1."""
    return _sign((s1 > s2) - (s1 < s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters; return -1, 0 or 1."""
    if n <= 0:
        return 0
    return strcmp(s1[:n], s2[:n])


def strncpy(src: str, n: int) -> str:
    """Return exactly ``n`` characters: ``src`` truncated, padded with NULs."""
    if n <= 0:
        return ""
    return src[:n].ljust(n, NUL)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the operation tried to create.
    When ``dest`` already fills the buffer, it is returned unchanged together
    with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    dest_len, src_len = len(dest), len(src)
    if dest_len >= size:
        return dest, size + src_len
    return dest + src[: size - dest_len - 1], dest_len + src_len


def strnstr(haystack: str, needle: str, n: int) -> str | None:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    Returns the suffix of ``haystack`` starting at the match, or None. An
    empty needle matches at the start.
    """
    if not needle:
        return haystack
    if n <= 0:
        return None
    position = haystack[:n].find(needle)
    return None if position < 0 else haystack[position:]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces."""
    _single_char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, MutableSequence[Any]], None]) -> None:
    """Call ``func(index, s)`` for each position so it can change ``s[index]`` in place."""
    if s is None or func is None:
        return
    for index in range(len(s)):
        func(index, s)