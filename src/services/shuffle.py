"""
Deterministic shuffling for stable daily content.

The day number is the seed, so the same day always produces the same
selection without storing anything.
"""
import math
from typing import Callable, List, Sequence, TypeVar

from src.services.constants import LCG_MULTIPLIER, LCG_INCREMENT, LCG_MASK

T = TypeVar("T")

def lcg(seed: int) -> Callable[[], float]:
    """
    Create a linear congruential generator.

    Each call advances ``seed = (seed * 1103515245 + 12345) & 0x7fffffff``
    and returns the new state divided by ``0x7fffffff``.
    """
    state = seed

    def random() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return state / LCG_MASK

    return random

def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    """
    Shuffle a copy of ``items`` with a Fisher-Yates pass driven by ``lcg(seed)``.

    Args:
        items: Items to shuffle (left untouched)
        seed: Integer seed

    Returns:
        New list with the same items in a seed-determined order

    Example:
        >>> seeded_shuffle(["a", "b", "c"], 7) == seeded_shuffle(["a", "b", "c"], 7)
        True
    """
    result = list(items)
    random = lcg(seed)

    for i in range(len(result) - 1, 0, -1):
        # State can reach the mask itself, which would give j == i + 1
        j = min(i, math.floor(random() * (i + 1)))
        result[i], result[j] = result[j], result[i]

    return result
