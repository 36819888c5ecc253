import random
import secrets
from typing import Literal, Protocol, runtime_checkable

from loguru import logger


RandomSourceKind = Literal["secure", "fast"]


@runtime_checkable
class RandomSource(Protocol):
    def next_index(self, bound: int) -> int:
        """Return an integer drawn uniformly from [0, bound)."""
        ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")


class SecureRandomSource:
    """Draws from the OS CSPRNG through `secrets`."""

    def next_index(self, bound: int) -> int:
        _check_bound(bound)
        return secrets.randbelow(bound)

    def __repr__(self) -> str:
        return "SecureRandomSource()"


class FastRandomSource:
    """Mersenne Twister seeded from OS entropy, or from `seed` for reproducible output.

    Not suitable for real credentials. Each instance owns its state, so
    independent workers should each build their own.
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._random = random.Random(seed)

    def next_index(self, bound: int) -> int:
        _check_bound(bound)
        return self._random.randrange(bound)

    def __repr__(self) -> str:
        return f"FastRandomSource(seed={self._seed!r})"


def build_random_source(
    kind: RandomSourceKind = "secure", seed: int | None = None
) -> RandomSource:
    match kind:
        case "secure":
            if seed is not None:
                logger.warning("Ignoring seed {seed} for the secure random source", seed=seed)
            return SecureRandomSource()
        case "fast":
            return FastRandomSource(seed=seed)
        case _:
            raise ValueError(f"Unknown random source kind: {kind}")
