from math import log2

from arcanus.entities import Entropy, Strength, TooShortError
from arcanus.pools import ENTROPY_POOL_SIZE


MIN_PASSWORD_LENGTH = 16

# Inclusive (low, high) bit ranges; anything outside falls back to VERY_WEAK.
STRENGTH_RANGES: tuple[tuple[int, int, Strength], ...] = (
    (0, 35, Strength.VERY_WEAK),
    (36, 59, Strength.WEAK),
    (60, 119, Strength.STRONG),
    (120, 512, Strength.VERY_STRONG),
)


def estimate_bits(length: int, pool_size: int = ENTROPY_POOL_SIZE) -> int:
    # Integer power is exact, so long passwords cannot overflow a float first
    return round(log2(pool_size**length))


def rate_bits(bits: int) -> Strength:
    for low, high, strength in STRENGTH_RANGES:
        if low <= bits <= high:
            return strength
    return Strength.VERY_WEAK


def check_entropy(password: str) -> Entropy:
    """
    Approximate the strength of `password` as log2(68 ** len(password)).

    Assumes every character is drawn uniformly from the combined pools, so it
    overestimates passwords built by the word generator, whose
    consonant/vowel/capitalisation pattern is fixed.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise TooShortError("Error: password should be at least 16 characters long.")

    bits = estimate_bits(len(password))
    return Entropy(bits=bits, strength=rate_bits(bits))
