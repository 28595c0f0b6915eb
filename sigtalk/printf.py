"""A small printf supporting the d, i, s, c, x, X, u, p and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_MAX = 2**31 - 1


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    number = _require_int(value, "d") & _UINT_MASK
    if number > _INT_MAX:
        number -= 2**32
    return str(number)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT_MASK, "X")


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return "0x" + format(address & _ULONG_MASK, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _signed,
    "i": _signed,
    "s": _string,
    "c": _char,
    "x": _hex_lower,
    "X": _hex_upper,
    "u": _unsigned,
    "p": _pointer,
}


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    An unknown conversion character is dropped together with its ``%`` and
    consumes no argument; a ``%`` at the very end of ``fmt`` is dropped.
    Raises TypeError when arguments run out or have the wrong type.
    """
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        if percent + 1 >= len(fmt):
            break
        spec = fmt[percent + 1]
        if spec == "%":
            pieces.append("%")
        else:
            convert = _CONVERSIONS.get(spec)
            if convert is not None:
                try:
                    value = next(remaining)
                except StopIteration:
                    raise TypeError("not enough arguments for format string") from None
                pieces.append(convert(value))
        pos = percent + 2
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output and return its length."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)