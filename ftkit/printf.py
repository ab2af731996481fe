"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys

from ftkit.convert import INT_MIN, itoa

_UINT_MODULUS = 1 << 32
_POINTER_MODULUS = 1 << 64


def _as_int32(value: int) -> int:
    return (value - INT_MIN) % _UINT_MODULUS + INT_MIN


def _as_uint32(value: int) -> int:
    return value % _UINT_MODULUS


def format_unsigned(value: int) -> str:
    """Return the decimal text of ``value`` taken as a 32-bit unsigned integer."""
    return str(_as_uint32(value))


def format_hex(value: int, upper: bool = False) -> str:
    """Return the hexadecimal text of ``value`` taken as a 32-bit unsigned integer."""
    text = format(_as_uint32(value), "x")
    return text.upper() if upper else text


def format_pointer(address: int | None) -> str:
    """Return ``0x`` and the lower-case hex address, or ``(nil)`` for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format(address % _POINTER_MODULUS, "x")


def _format_char(value: str | int) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _format_str(value: str | None) -> str:
    return "(null)" if value is None else str(value)


def _convert(spec: str, args: list) -> str:
    """Render one conversion, consuming an argument from ``args`` where needed."""
    if spec == "%":
        return "%"
    handlers = {
        "c": _format_char,
        "s": _format_str,
        "p": format_pointer,
        "d": lambda v: itoa(_as_int32(v)),
        "i": lambda v: itoa(_as_int32(v)),
        "u": format_unsigned,
        "x": lambda v: format_hex(v, False),
        "X": lambda v: format_hex(v, True),
    }
    handler = handlers.get(spec)
    if handler is None:
        return "0"
    if not args:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return handler(args.pop(0))


def sprintf(fmt: str, *args) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered arguments.

    An unknown conversion, and a lone ``%`` at the end, render as ``0``.
    Surplus arguments are ignored.
    """
    remaining = list(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            spec = next(chars, "")
            parts.append(_convert(spec, remaining))
            if not spec:
                break
        else:
            parts.append(char)
    return "".join(parts)


def printf(fmt: str, *args) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)