import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wavsteg.bits import iter_bits, pack_bytes


def test_iter_bits_low_bit_first():
    assert list(iter_bits([0b101], 3)) == [True, False, True]


def test_iter_bits_ignores_high_bits():
    assert list(iter_bits([0xFF], 2)) == [True, True]


def test_pack_bytes_drops_incomplete_tail():
    assert pack_bytes([True] * 12) == b"\xff"


def test_pack_bytes_empty():
    assert pack_bytes([]) == b""


@pytest.mark.parametrize("width", [0, -1, 9])
def test_iter_bits_rejects_bad_width(width):
    with pytest.raises(ValueError):
        list(iter_bits([1, 2, 3], width))


def test_iter_bits_is_lazy_over_infinite_input():
    bits = iter_bits(itertools.repeat(0xFF), 4)
    assert [next(bits) for _ in range(10)] == [True] * 10


@given(st.binary())
def test_round_trip_full_bytes(data):
    assert pack_bytes(iter_bits(data, 8)) == data


@given(st.lists(st.integers(min_value=0, max_value=255)), st.integers(1, 8))
def test_bit_count(items, width):
    assert len(list(iter_bits(items, width))) == len(items) * width


@given(st.lists(st.integers(min_value=-32768, max_value=32767)), st.integers(1, 8))
def test_negative_items_match_truncated_byte(items, width):
    truncated = [item & 0xFF for item in items]
    assert list(iter_bits(items, width)) == list(iter_bits(truncated, width))


@given(st.lists(st.booleans()))
def test_pack_length(bits):
    assert len(pack_bytes(bits)) == len(bits) // 8