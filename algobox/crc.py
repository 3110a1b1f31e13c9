"""Cyclic redundancy check over lists of bits."""

from __future__ import annotations

from typing import Sequence


def _validate_bits(bits: Sequence[int], name: str) -> None:
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"{name} must contain only 0 and 1")


def _validate_generator(generator: Sequence[int]) -> None:
    _validate_bits(generator, "generator")
    if not generator:
        raise ValueError("generator must not be empty")
    if generator[0] != 1:
        raise ValueError("generator must start with 1")


def _divide(bits: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Return the remainder of modulo-2 division of ``bits`` by ``generator``."""
    work = list(bits)
    width = len(generator)
    for i in range(len(work) - width + 1):
        if work[i]:
            work[i : i + width] = [a ^ b for a, b in zip(work[i : i + width], generator)]
    return work[len(work) - (width - 1) :]


def crc_remainder(frame: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Return the CRC bits of ``frame``: one fewer than the generator's length."""
    _validate_bits(frame, "frame")
    _validate_generator(generator)
    return _divide([*frame, *[0] * (len(generator) - 1)], generator)


def encode(frame: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Return the frame followed by its CRC bits, as transmitted."""
    return [*frame, *crc_remainder(frame, generator)]


def check(frame: Sequence[int], generator: Sequence[int]) -> bool:
    """Return whether a received frame divides by the generator with no remainder."""
    _validate_bits(frame, "frame")
    _validate_generator(generator)
    if len(frame) < len(generator) - 1:
        raise ValueError("received frame is shorter than the CRC")
    return not any(_divide(frame, generator))