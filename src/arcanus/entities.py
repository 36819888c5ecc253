from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Strength(StrEnum):
    """Categorical rating derived from an entropy bit estimate"""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


def get_strength_label(strength: Strength) -> str:
    """Return a user-facing label for a Strength enum value."""
    match strength:
        case Strength.VERY_WEAK:
            return "Very weak"
        case Strength.WEAK:
            return "Weak"
        case Strength.STRONG:
            return "Strong"
        case Strength.VERY_STRONG:
            return "Very strong"
        case _:
            raise ValueError(f"Unknown Strength: {strength}")


class Entropy(BaseModel):
    model_config = ConfigDict(frozen=True)

    bits: int
    strength: Strength


class ErrorKind(StrEnum):
    INVALID_LENGTH = "invalid_length"
    TOO_SHORT = "too_short"
    IO_FAILURE = "io_failure"


class ArcanusError(Exception):
    "Base exception for every failure surfaced by the generators and storage."

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class InvalidLengthError(ArcanusError):
    "Length or count argument outside its inclusive bounds."

    kind = ErrorKind.INVALID_LENGTH


class TooShortError(ArcanusError):
    "Password too short for an entropy check."

    kind = ErrorKind.TOO_SHORT


class StorageError(ArcanusError):
    "Password list could not be written or read."

    kind = ErrorKind.IO_FAILURE
