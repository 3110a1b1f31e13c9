"""Counting and number-theoretic helpers."""

from __future__ import annotations

from typing import Iterator, NamedTuple

MODULUS = 10**9 + 7
_DIGITS = frozenset("0123456789")


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k); zero when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result *= n - i
        result //= i + 1
    return result


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial(2 * n, n) // (n + 1)


def primes_up_to(n: int) -> list[int]:
    """Return all primes less than or equal to ``n`` by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    p = 2
    while p * p <= n:
        if is_prime[p]:
            multiples = range(p * p, n + 1, p)
            is_prime[p * p :: p] = [False] * len(multiples)
        p += 1
    return [number for number, prime in enumerate(is_prime) if prime]


class Move(NamedTuple):
    """One Tower of Hanoi move of ``disk`` between two pegs."""

    disk: int
    source: str
    target: str


def _hanoi(n: int, source: str, spare: str, target: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _hanoi(n - 1, source, target, spare)
    yield Move(n, source, target)
    yield from _hanoi(n - 1, spare, source, target)


def hanoi_moves(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("at least one disk is required")
    return list(_hanoi(n, source, spare, target))


def count_decodings(digits: str) -> int:
    """Count the ways to read ``digits`` with A=1 ... Z=26, modulo 10**9+7.

    Any adjacent pair forming a number up to 26 counts as a two-digit letter.
    """
    if not set(digits) <= _DIGITS:
        raise ValueError("only decimal digits may be decoded")
    previous, current = 1, 1
    for first, second in zip(digits, digits[1:]):
        following = current
        if int(first) * 10 + int(second) <= 26:
            following += previous
        previous, current = current, following % MODULUS
    return current