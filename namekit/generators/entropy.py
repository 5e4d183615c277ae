#!/usr/bin/env python3
"""
Entropy Module for Name Generation
===================================
Provides the random source used by the name builder.

A single process-wide generator is seeded once, at import, from several
entropy sources mixed together:
- os.urandom() for hardware entropy
- High-resolution time (nanoseconds)
- Process ID

Callers that need reproducible output or an independent stream (tests,
threads) create their own generator with make_rng() and pass it in.
"""

import os
import time
import random
import hashlib
from typing import Any, Optional, Sequence


# =============================================================================
# Entropy Mixing
# =============================================================================

def fresh_seed() -> int:
    """Mix hardware entropy, time and PID into a 64-bit seed."""
    # Hardware entropy (8 bytes = 64 bits)
    hw_entropy = int.from_bytes(os.urandom(8), 'big')

    # High-resolution time (nanoseconds since epoch)
    time_entropy = time.time_ns()

    # Process ID (shifted to high bits)
    pid_entropy = os.getpid() << 48

    combined = hw_entropy ^ time_entropy ^ pid_entropy

    # Hash for uniform distribution
    entropy_bytes = hashlib.sha256(combined.to_bytes(32, 'big')).digest()
    return int.from_bytes(entropy_bytes[:8], 'big')


# =============================================================================
# Random Source
# =============================================================================

class NameRandom:
    """
    Seedable random source for name generation.

    Wraps random.Random so that every draw the builder makes goes through
    the same small surface: randint, randrange and choice. Given the same
    seed, the same sequence of names comes out.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random()
        self._seed = None
        self.seed(seed)

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed the generator. Without a seed, fresh entropy is used."""
        if seed is None:
            seed = fresh_seed()
        self._seed = seed
        self._rng.seed(seed)

    @property
    def initial_seed(self) -> int:
        """The seed this generator was last seeded with."""
        return self._seed

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def randrange(self, stop: int) -> int:
        """Return random integer N such that 0 <= N < stop."""
        return self._rng.randrange(stop)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)


# Global instance, seeded once per process
_process_rng = NameRandom()


def get_rng() -> NameRandom:
    """Get the process-wide random source."""
    return _process_rng


def make_rng(seed: Optional[int] = None) -> NameRandom:
    """Create an independent random source, optionally with a fixed seed."""
    return NameRandom(seed)


__all__ = [
    'NameRandom',
    'fresh_seed',
    'get_rng',
    'make_rng',
]
