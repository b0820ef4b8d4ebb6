"""Bit-level framing for messages carried by two user signals.

Each byte travels as eight bits, least significant first. A zero bit is
sent as ``SIGUSR1`` and a one bit as ``SIGUSR2``. A message ends with a
NUL byte, which the receiving side shows as a line break. With
acknowledgements, the receiver answers every bit with ``SIGUSR1``.
"""

from __future__ import annotations

import operator
import signal
from typing import Iterable, Optional, Union

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1

BITS_PER_BYTE = 8


class ByteAssembler:
    """Collects bits, least significant first, into whole bytes."""

    def __init__(self) -> None:
        self._index = 0
        self._value = 0

    def push(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived."""
        if bit:
            self._value |= 1 << self._index
        self._index += 1
        if self._index < BITS_PER_BYTE:
            return None
        value = self._value
        self.reset()
        return value

    def reset(self) -> None:
        """Drop any bits collected so far."""
        self._index = 0
        self._value = 0


def encode_byte(value: int) -> tuple[int, ...]:
    """The eight bits of ``value`` (cut to one byte), least significant first."""
    byte = operator.index(value) & 0xFF
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE))


def encode_message(data: Union[bytes, str]) -> list[int]:
    """The bits of a whole message followed by its terminating NUL.

    Text is sent as UTF-8. Anything after an embedded NUL is not sent.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    payload = raw.split(b"\0", 1)[0]
    return [bit for byte in payload + b"\0" for bit in encode_byte(byte)]


def decode_bits(bits: Iterable[int]) -> bytes:
    """Reassemble bits into bytes; an incomplete final byte is dropped."""
    assembler = ByteAssembler()
    out = bytearray()
    for bit in bits:
        value = assembler.push(bit)
        if value is not None:
            out.append(value)
    return bytes(out)


def render_byte(value: int) -> bytes:
    """The output for one received byte: a line break stands for NUL."""
    byte = operator.index(value) & 0xFF
    return b"\n" if byte == 0 else bytes([byte])