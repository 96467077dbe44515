import pytest
from hypothesis import given
from hypothesis import strategies as st

from wavsteg.stego import MAX_MESSAGE_BYTES, decode_message, encode_message

_message_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\ufffd"),
    min_size=1,
    max_size=30,
)


def _carrier(message, bits):
    needed = (len(message.encode("utf-8")) * 8 + bits - 1) // bits
    return [-1] * (needed + 16)


@pytest.mark.parametrize("bits", [1, 2, 3, 8])
def test_round_trip(bits):
    message = "hello, world"
    encoded = encode_message(_carrier(message, bits), message, bits)
    assert decode_message(encoded, bits) == message


def test_round_trip_unicode():
    message = "Дешифровка"
    encoded = encode_message(_carrier(message, 4), message, 4)
    assert decode_message(encoded, 4) == message


@given(_message_text, st.integers(min_value=1, max_value=8))
def test_round_trip_property(message, bits):
    encoded = encode_message(_carrier(message, bits), message, bits)
    assert decode_message(encoded, bits) == message


def test_repeating_round_trip_yields_one_period():
    encoded = encode_message([-1] * 500, "hello", 2, repeating=True)
    assert decode_message(encoded, 2, repeating=True) == "hello"
    assert decode_message(encoded, 2).startswith("hellohello")


def test_decode_is_capped():
    samples = [ord("a")] * (MAX_MESSAGE_BYTES * 2)
    assert decode_message(samples, 8) == "a" * MAX_MESSAGE_BYTES


def test_decode_empty_samples():
    assert decode_message([], 8) == ""
    assert decode_message([], 3, repeating=True) == ""


def test_decode_rejects_wide_bits():
    with pytest.raises(ValueError):
        decode_message([1, 2, 3], 9)


@pytest.mark.parametrize("bits", [0, 17])
def test_encode_rejects_bad_bits(bits):
    with pytest.raises(ValueError):
        encode_message([0, 0], "x", bits)


@pytest.mark.parametrize("repeating", [False, True])
def test_empty_message_leaves_samples_alone(repeating):
    samples = [5, -7, 300]
    assert encode_message(samples, "", 4, repeating) == samples


def test_encode_does_not_mutate_input():
    samples = [0] * 20
    encode_message(samples, "ab", 4)
    assert samples == [0] * 20


@given(
    st.lists(st.integers(min_value=-32768, max_value=32767), max_size=60),
    st.text(max_size=10),
    st.integers(min_value=1, max_value=16),
    st.booleans(),
)
def test_encode_preserves_upper_bits(samples, message, bits, repeating):
    encoded = encode_message(samples, message, bits, repeating)
    assert len(encoded) == len(samples)
    assert all(-32768 <= value <= 32767 for value in encoded)
    assert all(
        (new & 0xFFFF) >> bits == (old & 0xFFFF) >> bits
        for old, new in zip(samples, encoded)
    )


def test_unwritten_samples_untouched():
    samples = list(range(100, 140))
    encoded = encode_message(samples, "a", 8)
    assert encoded[1:] == samples[1:]
    assert encoded[0] & 0xFF == ord("a")