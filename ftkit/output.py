"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.convert import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; a None string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; a None string writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))