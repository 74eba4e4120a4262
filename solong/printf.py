"""A small printf supporting the conversions the game prints with."""

from __future__ import annotations

import sys
from typing import Any, Iterator

CONVERSIONS = "cspdiuxX%"
_NULL = "(null)"
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return _NULL if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _PTR_MASK
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    return str(_to_int32(int(value)))


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex(value: Any, upper: bool) -> str:
    text = f"{int(value) & _UINT_MASK:x}"
    return text.upper() if upper else text


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return _signed(value)
    if spec == "u":
        return _unsigned(value)
    return _hex(value, upper=spec == "X")


def format_printf(fmt: str | None, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions are copied through with their percent sign, and a
    lone percent sign at the end of the format is kept as is.
    """
    if fmt is None:
        return _NULL
    values = iter(args)
    parts: list[str] = []
    index = 0
    length = len(fmt)
    while index < length:
        char = fmt[index]
        if char == "%" and index + 1 < length:
            index += 1
            spec = fmt[index]
            if spec in CONVERSIONS:
                parts.append(_convert(spec, values))
            else:
                parts.append("%" + spec)
        else:
            parts.append(char)
        index += 1
    return "".join(parts)


def ft_printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)