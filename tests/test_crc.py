import pytest

from algobox.crc import check, crc_remainder, encode

FRAME = [1, 1, 0, 1, 0, 1, 1, 0, 1, 1]
GENERATOR = [1, 0, 0, 1, 1]


def test_textbook_remainder():
    assert crc_remainder(FRAME, GENERATOR) == [1, 1, 1, 0]


def test_encode_appends_remainder():
    encoded = encode(FRAME, GENERATOR)
    assert encoded[: len(FRAME)] == FRAME
    assert encoded[len(FRAME) :] == crc_remainder(FRAME, GENERATOR)


@pytest.mark.parametrize(
    "frame, generator",
    [
        (FRAME, GENERATOR),
        ([1, 0, 0, 1, 0, 0], [1, 1, 0, 1]),
        ([0, 0, 0, 0], [1, 0, 1]),
        ([1, 0, 1, 1, 1, 0, 0, 1, 0], [1, 1]),
    ],
)
def test_encoded_frame_checks_clean(frame, generator):
    assert check(encode(frame, generator), generator) is True


@pytest.mark.parametrize("position", range(14))
def test_single_bit_error_detected(position):
    received = encode(FRAME, GENERATOR)
    received[position] ^= 1
    assert check(received, GENERATOR) is False


def test_remainder_length_matches_generator():
    for generator in ([1], [1, 1], [1, 0, 1], [1, 0, 0, 1, 1]):
        assert len(crc_remainder(FRAME, generator)) == len(generator) - 1


def test_zero_frame_has_zero_remainder():
    assert crc_remainder([0, 0, 0], [1, 0, 1]) == [0, 0]


def test_rejects_non_bit_values():
    with pytest.raises(ValueError):
        crc_remainder([1, 2, 0], GENERATOR)


def test_rejects_empty_generator():
    with pytest.raises(ValueError):
        encode(FRAME, [])


def test_rejects_generator_with_leading_zero():
    with pytest.raises(ValueError):
        crc_remainder(FRAME, [0, 1, 1])


def test_check_rejects_too_short_frame():
    with pytest.raises(ValueError):
        check([1, 0], GENERATOR)