"""
Seeded random stream for reproducible gallery layouts.

Each generation run owns one instance, so several layouts can be built in
the same process without sharing random state.
"""

import random
from typing import Optional, Sequence, TypeVar


T = TypeVar('T')

SEED_MAX = 2**31 - 1


def fresh_seed() -> int:
    """Draw a new seed from the global random module."""
    return random.randint(0, SEED_MAX - 1)


class SeededRandom:
    """Deterministic uniform stream in [0, 1) driven by a numeric seed."""

    def __init__(self, seed: Optional[float] = None):
        if seed is None:
            seed = fresh_seed()
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def choice_index(self, length: int) -> int:
        """Uniform index into a sequence of the given length."""
        if length <= 0:
            raise ValueError(f"Cannot choose from an empty sequence (length={length})")
        return min(int(self.random() * length), length - 1)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.choice_index(len(items))]

    def reset(self) -> None:
        """Rewind the stream to the start of its seed."""
        self._rng.seed(self.seed)
