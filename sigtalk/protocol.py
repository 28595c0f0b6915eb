"""Bit-level encoding of messages sent as a stream of two signals.

Each byte travels as eight bits, most significant first. A 1 bit is sent as
SIGUSR1 and a 0 bit as SIGUSR2. A message ends with a zero byte.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BITS_PER_BYTE = 8


def _byte_value(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not 0 <= c <= 0xFF:
        raise ValueError(f"value {c} does not fit in one byte")
    return c


def encode_char(c: int | str) -> tuple[int, ...]:
    """Return the eight bits of one byte, most significant first."""
    value = _byte_value(c)
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(text: str | bytes) -> Iterator[int]:
    """Yield the bits of ``text`` followed by those of a terminating zero byte.

    Text is encoded as UTF-8 before it is split into bits.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    for value in data:
        yield from encode_char(value)
    yield from encode_char(0)


@dataclass
class BitDecoder:
    """Reassembles bytes from bits received one at a time."""

    _value: int = 0
    _count: int = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int | bool) -> int | None:
        """Add one bit; return the completed byte after every eighth bit, else None.

        A returned 0 marks the end of a message.
        """
        self._value = ((self._value << 1) | (1 if bit else 0)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value