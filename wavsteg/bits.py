"""Bit-level iteration over integer streams and packing bits back into bytes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

__all__ = ["iter_bits", "pack_bytes"]

_MAX_WIDTH = 8


def iter_bits(items: Iterable[int], width: int) -> Iterator[bool]:
    """Yield the lowest ``width`` bits of every item, least significant first.

    ``width`` must be between 1 and 8. Negative items are read in two's
    complement, so their low bits match those of the byte they truncate to.
    """
    if not 1 <= width <= _MAX_WIDTH:
        raise ValueError(f"bit width must be between 1 and {_MAX_WIDTH}, got {width}")
    for item in items:
        for shift in range(width):
            yield bool((item >> shift) & 1)


def pack_bytes(bits: Iterable[bool]) -> bytes:
    """Pack bits into bytes, least significant bit first.

    A trailing group of fewer than eight bits is discarded.
    """
    stream = iter(bits)
    packed = bytearray()
    while True:
        group = list(islice(stream, 8))
        if len(group) < 8:
            break
        packed.append(sum(1 << shift for shift, bit in enumerate(group) if bit))
    return bytes(packed)