#!/usr/bin/env python3
"""
Randomness Sources
==================
Two separate random number generators.

- SecureRandom: cryptographically secure, backed by the OS entropy pool
  through secrets.SystemRandom(). It cannot be seeded. Only generate()
  constructs one, so emitted secrets always come from it.
- SamplingRandom: fast Mersenne Twister seeded once from os.urandom().
  Its output is never revealed; estimate_entropy() only observes how
  often its draws satisfy a predicate.

Both sources fail with RngInitError when the OS entropy source is not
available. There is no fallback to a weaker source.
"""

import os
import random
import secrets
from typing import Sequence, List, Any

from entropass.errors import RngInitError


# Bytes of OS entropy used to seed a SamplingRandom
SAMPLING_SEED_BYTES = 32


def _urandom(n: int) -> bytes:
    try:
        return os.urandom(n)
    except (NotImplementedError, OSError) as e:
        raise RngInitError(f"OS entropy source unavailable: {e}") from e


class SecureRandom:
    """
    Cryptographically secure random number generator.

    Wraps secrets.SystemRandom(). Reading from the OS entropy pool is
    probed once on construction so a broken source fails early.
    """

    __slots__ = ('_rng',)

    def __init__(self):
        _urandom(1)
        self._rng = secrets.SystemRandom()

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self._rng.randrange(len(seq))]

    def choices(self, population: Sequence[Any], k: int = 1) -> List[Any]:
        """Return k elements chosen uniformly with replacement."""
        return [self.choice(population) for _ in range(k)]

    def __repr__(self) -> str:
        return "SecureRandom()"


class SamplingRandom:
    """
    Statistically uniform, non-cryptographic generator for Monte Carlo work.

    Seeded from OS entropy unless an explicit seed is given. Explicit
    seeds exist for reproducible tests.
    """

    __slots__ = ('_rng',)

    def __init__(self, seed: int = None):
        if seed is None:
            seed = int.from_bytes(_urandom(SAMPLING_SEED_BYTES), 'big')
        self._rng = random.Random(seed)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        return self._rng.choice(seq)

    def choices(self, population: Sequence[Any], k: int = 1) -> List[Any]:
        """Return k elements chosen uniformly with replacement."""
        return self._rng.choices(population, k=k)

    def __repr__(self) -> str:
        return "SamplingRandom()"


__all__ = [
    'SecureRandom',
    'SamplingRandom',
    'SAMPLING_SEED_BYTES',
]
