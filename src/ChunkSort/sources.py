"""Number sources feeding the sort pipeline."""

from __future__ import annotations

import random
from collections.abc import Sequence

from ChunkSort.errors import InsufficientData, InvalidArgument

__all__ = [
    "MIN_NUMBERS",
    "RANDOM_UPPER_BOUND",
    "generate_random_numbers",
    "make_rng",
    "require_minimum",
]

MIN_NUMBERS = 10
RANDOM_UPPER_BOUND = 1000


def make_rng(seed: int | None = None) -> random.Random:
    """Return the generator threaded through one CLI invocation."""

    return random.Random(seed)


def generate_random_numbers(count: int, rng: random.Random) -> list[int]:
    """Return ``count`` integers drawn uniformly from ``[0, RANDOM_UPPER_BOUND)``."""

    if count < MIN_NUMBERS:
        raise InvalidArgument(
            message=f"N must be >= {MIN_NUMBERS}, got {count}",
            hint=f"Pass -r with a value of at least {MIN_NUMBERS}",
        )
    return [rng.randrange(RANDOM_UPPER_BOUND) for _ in range(count)]


def require_minimum(numbers: Sequence[int], source: str) -> None:
    """Raise :class:`InsufficientData` when ``numbers`` is shorter than the minimum."""

    if len(numbers) < MIN_NUMBERS:
        raise InsufficientData(
            message=(
                f"{source} has {len(numbers)} valid integers; "
                f"at least {MIN_NUMBERS} are required"
            ),
        )
