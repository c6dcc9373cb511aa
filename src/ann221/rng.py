"""Random sources consumed by parameter initialisation."""
from __future__ import annotations

import random
import time
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can flip a fair coin and draw a bounded uniform integer."""

    def coin_flip(self) -> bool:
        ...

    def randint_below(self, n: int) -> int:
        ...


class PythonRandomSource:
    """:class:`RandomSource` backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def coin_flip(self) -> bool:
        return self._rng.randrange(2) == 1

    def randint_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return self._rng.randrange(n)


_default_source: PythonRandomSource | None = None


def default_random_source() -> PythonRandomSource:
    """Return the process-wide stream, seeding it from the clock on first use."""

    global _default_source
    if _default_source is None:
        _default_source = PythonRandomSource(int(time.time()))
    return _default_source


def seed_default_random_source(seed: int | None) -> PythonRandomSource:
    """Replace the process-wide stream with one seeded from ``seed``.

    ``None`` falls back to the wall clock, matching the implicit first use.
    """

    global _default_source
    _default_source = PythonRandomSource(int(time.time()) if seed is None else seed)
    return _default_source


__all__ = [
    "RandomSource",
    "PythonRandomSource",
    "default_random_source",
    "seed_default_random_source",
]
