from __future__ import annotations

from loguru import logger

from arcanus.entities import InvalidLengthError
from arcanus.pools import CONSONANTS, DIGITS, SYMBOLS, VOWELS
from arcanus.random_source import RandomSource, SecureRandomSource


WORD_LENGTH_RANGE: tuple[int, int] = (13, 64)
NUMBERS_LENGTH_RANGE: tuple[int, int] = (1, 4)
PASSWORD_LENGTH_RANGE: tuple[int, int] = (16, 64)
LIST_COUNT_RANGE: tuple[int, int] = (16, 255)

DEFAULT_WORD_LENGTH = 13
DEFAULT_LIST_COUNT = 16
SUFFIX_NUMBERS_LENGTH = 2
SUFFIX_LENGTH = SUFFIX_NUMBERS_LENGTH + 1

# Exclusive draw bounds one short of the pool sizes: 'z', 'u', '9' and '?' are never produced.
CONSONANT_DRAW_BOUND = len(CONSONANTS) - 1
VOWEL_DRAW_BOUND = len(VOWELS) - 1
DIGIT_DRAW_BOUND = len(DIGITS) - 1
SYMBOL_DRAW_BOUND = len(SYMBOLS) - 1


_default_source: RandomSource = SecureRandomSource()


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= value <= high


def generate_word(length: int, *, source: RandomSource | None = None) -> str:
    """
    Build a pronounceable token alternating consonants (even positions) and
    vowels (odd positions). Consonants at position 0 and every multiple of 4
    are uppercased.
    """
    if not _in_range(length, WORD_LENGTH_RANGE):
        raise InvalidLengthError(
            "Error by generating words: length parameter should be between 13 and 64."
        )
    if source is None:
        source = _default_source

    chars: list[str] = []
    for i in range(length):
        if i % 2 == 0:
            consonant = CONSONANTS[source.next_index(CONSONANT_DRAW_BOUND)]
            chars.append(consonant.upper() if i % 4 == 0 else consonant)
        else:
            chars.append(VOWELS[source.next_index(VOWEL_DRAW_BOUND)])
    return "".join(chars)


def generate_numbers(length: int, *, source: RandomSource | None = None) -> str:
    if not _in_range(length, NUMBERS_LENGTH_RANGE):
        raise InvalidLengthError(
        # "words" is the historical wording of this message
            "Error by generating words: length parameter should be between 1 and 4."
        )
    if source is None:
        source = _default_source
    return "".join(DIGITS[source.next_index(DIGIT_DRAW_BOUND)] for _ in range(length))


def generate_specials(*, source: RandomSource | None = None) -> str:
    if source is None:
        source = _default_source
    return SYMBOLS[source.next_index(SYMBOL_DRAW_BOUND)]


def generate_password(
    length: int | None = None, *, source: RandomSource | None = None
) -> str:
    """
    Compose word + two digits + one symbol.

    Without `length` the result is 16 characters long, otherwise exactly
    `length` characters (16 to 64). Sub-generator errors propagate as-is.
    """
    if length is None:
        word_length = DEFAULT_WORD_LENGTH
    elif _in_range(length, PASSWORD_LENGTH_RANGE):
        word_length = length - SUFFIX_LENGTH
    else:
        raise InvalidLengthError(
            "Error: generate password should have a length between 16 and 64."
        )
    if source is None:
        source = _default_source

    word = generate_word(word_length, source=source)
    numbers = generate_numbers(SUFFIX_NUMBERS_LENGTH, source=source)
    special = generate_specials(source=source)
    return word + numbers + special


def generate_list(
    count: int | None = None,
    *,
    length: int | None = None,
    source: RandomSource | None = None,
) -> list[str]:
    """Generate `count` independent passwords (16 when omitted). Duplicates are kept."""
    if count is None:
        count = DEFAULT_LIST_COUNT
    elif not _in_range(count, LIST_COUNT_RANGE):
        raise InvalidLengthError(
            "Error: generate list should have a count between 16 and 255."
        )
    if source is None:
        source = _default_source

    passwords = [generate_password(length, source=source) for _ in range(count)]
    logger.debug(
        "Generated {count} passwords using {source}", count=count, source=source
    )
    return passwords
