"""String hash functions and a quick spread check for them."""

from __future__ import annotations

import random
import string
from typing import Callable, Iterator

_MASK64 = (1 << 64) - 1
_POLY_BASE = 31
_POLY_MOD = 1_000_000_009
WORD_LENGTH = 7
SAMPLE_SIZE = 100


def _signed_bytes(text: str) -> Iterator[int]:
    """Yield the UTF-8 bytes of text as signed 8-bit values."""
    for byte in text.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def hash1(text: str) -> int:
    """Polynomial rolling hash with base 31 modulo 1e9+9, in 64-bit arithmetic."""
    value = 0
    power = 1
    for c in _signed_bytes(text):
        value = ((value + c * power) & _MASK64) % _POLY_MOD
        power = (power * _POLY_BASE) % _POLY_MOD
    return value


def hash2(text: str, mod: int) -> int:
    """Jenkins one-at-a-time hash folded into the range 1..mod-1."""
    if mod < 2:
        raise ValueError(f"mod must be at least 2, got {mod}")
    value = 0
    for c in _signed_bytes(text):
        value = (value + c) & _MASK64
        value = (value + (value << 10)) & _MASK64
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK64
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK64
    return value % (mod - 1) + 1


def random_words(count: int, rng: random.Random) -> list[str]:
    """Return count distinct random seven-letter lowercase words, sorted."""
    if count < 0:
        raise ValueError("count must not be negative")
    words: set[str] = set()
    letters = string.ascii_lowercase
    while len(words) < count:
        words.add("".join(letters[rng.randrange(26)] for _ in range(WORD_LENGTH)))
    return sorted(words)


def effectiveness(hasher: Callable[[str], int], n: int, rng: random.Random) -> int:
    """Hash 100 distinct random words modulo n and return how many codes are distinct.

    With 100 words the result reads directly as a percentage.
    """
    if n < 1:
        raise ValueError("n must be positive")
    return len({hasher(word) % n for word in random_words(SAMPLE_SIZE, rng)})