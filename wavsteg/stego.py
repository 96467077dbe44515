"""Hiding text in the low bits of PCM samples and recovering it."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import cycle, islice

from wavsteg.bits import iter_bits, pack_bytes
from wavsteg.prefix import period

__all__ = ["decode_message", "encode_message", "MAX_MESSAGE_BYTES"]

MAX_MESSAGE_BYTES = 10000
_SAMPLE_BITS = 16


def decode_message(samples: Sequence[int], bits: int, repeating: bool = False) -> str:
    """Read a message from the lowest ``bits`` bits (1 to 8) of every sample.

    At most ``MAX_MESSAGE_BYTES`` bytes are read. The text stops at the first
    byte sequence that is not valid UTF-8. With ``repeating`` the result is cut
    down to one period of the repeated text.
    """
    stream = iter_bits((sample & 0xFF for sample in samples), bits)
    raw = pack_bytes(islice(stream, MAX_MESSAGE_BYTES * 8))
    text = raw.decode("utf-8", errors="replace")
    text = text.split("\ufffd", 1)[0]
    if repeating:
        text = text[: period(text)]
    return text


def _set_bit(sample: int, shift: int, bit: bool) -> int:
    unsigned = sample & 0xFFFF
    unsigned = unsigned | (1 << shift) if bit else unsigned & ~(1 << shift)
    return unsigned - 0x10000 if unsigned & 0x8000 else unsigned


def encode_message(
    samples: Sequence[int], message: str, bits: int, repeating: bool = False
) -> list[int]:
    """Return a copy of ``samples`` with the UTF-8 message in their low bits.

    The lowest ``bits`` bits (1 to 16) of each sample are replaced in turn until
    the message runs out; with ``repeating`` the message is written over and
    over until the samples run out. Samples are treated as 16-bit signed values.
    """
    if not 1 <= bits <= _SAMPLE_BITS:
        raise ValueError(f"bit count must be between 1 and {_SAMPLE_BITS}, got {bits}")
    message_bits: Iterator[bool] = iter_bits(message.encode("utf-8"), 8)
    if repeating:
        message_bits = cycle(message_bits)

    result = list(samples)
    for index, sample in enumerate(result):
        for shift in range(bits):
            bit = next(message_bits, None)
            if bit is None:
                result[index] = sample
                return result
            sample = _set_bit(sample, shift, bit)
        result[index] = sample
    return result