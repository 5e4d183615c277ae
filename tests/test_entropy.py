"""
Tests for the Random Source
===========================
Tests for namekit/generators/entropy.py.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators.entropy import NameRandom, fresh_seed, get_rng, make_rng


class TestNameRandom:

    def test_same_seed_same_draws(self):
        a, b = make_rng(5), make_rng(5)
        assert [a.randint(3, 8) for _ in range(20)] == [b.randint(3, 8) for _ in range(20)]

    def test_ranges(self):
        rng = make_rng(1)
        for _ in range(200):
            assert 3 <= rng.randint(3, 8) <= 8
            assert 0 <= rng.randrange(100) < 100
            assert 0.0 <= rng.random() < 1.0

    def test_choice(self):
        rng = make_rng(2)
        assert rng.choice(['x']) == 'x'
        assert rng.choice('aeiou') in 'aeiou'

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            make_rng(2).choice([])

    def test_initial_seed(self):
        assert make_rng(123).initial_seed == 123

    def test_reseed_restarts_sequence(self):
        rng = make_rng(9)
        first = [rng.randrange(1000) for _ in range(5)]
        rng.seed(9)
        assert [rng.randrange(1000) for _ in range(5)] == first

    def test_unseeded_gets_entropy(self):
        rng = NameRandom()
        assert isinstance(rng.initial_seed, int)


class TestProcessRng:

    def test_get_rng_is_shared(self):
        assert get_rng() is get_rng()

    def test_make_rng_is_independent(self):
        assert make_rng() is not get_rng()

    def test_fresh_seed_is_64_bit(self):
        seed = fresh_seed()
        assert 0 <= seed < 2 ** 64
