"""Bit-per-signal wire protocol: each byte travels as eight signals, most significant bit first.

A set bit is carried by SIGUSR1, a clear bit by SIGUSR2.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

SIGNAL_ONE: int = int(getattr(signal, "SIGUSR1", 10))
SIGNAL_ZERO: int = int(getattr(signal, "SIGUSR2", 12))

BITS_PER_BYTE = 8


def _byte_value(c: Union[int, str, bytes]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = c.encode("utf-8")
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"character does not fit in one byte: {c!r}")
        return c[0]
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value out of range: {c}")
        return c
    raise TypeError(f"cannot encode {type(c).__name__}")


def encode_char(c: Union[int, str, bytes]) -> Tuple[int, ...]:
    """Return the eight signals that carry one byte, most significant bit first."""
    value = _byte_value(c)
    return tuple(
        SIGNAL_ONE if value & (1 << (BITS_PER_BYTE - 1 - bit)) else SIGNAL_ZERO
        for bit in range(BITS_PER_BYTE)
    )


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the signals that carry every byte of ``message`` (text is sent as UTF-8)."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        yield from encode_char(byte)


@dataclass
class BitDecoder:
    """Reassembles bytes from a stream of signals."""

    data: int = field(default=0)
    nbits: int = field(default=0)

    def feed(self, signo: int) -> Optional[int]:
        """Take one signal; return the completed byte after every eighth bit, else None.

        Signals other than the two protocol signals are ignored.
        """
        if signo == SIGNAL_ONE:
            self.data |= 1 << (BITS_PER_BYTE - 1 - self.nbits)
            self.nbits += 1
        elif signo == SIGNAL_ZERO:
            self.nbits += 1
        else:
            return None
        if self.nbits == BITS_PER_BYTE:
            byte = self.data
            self.data = 0
            self.nbits = 0
            return byte
        return None