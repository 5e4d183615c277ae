"""
Tests for the Phoneme Inventory
===============================
Tests for namekit/generators/phonemes.py.
"""

import dataclasses
import string
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators.phonemes import (
    INVENTORY,
    MAX_LENGTH,
    MIN_LENGTH,
    LetterClass,
    PhonemeInventory,
    classify,
)


class TestInventory:
    """The hardcoded tables."""

    def test_vowels(self):
        assert INVENTORY.vowels == ('a', 'e', 'i', 'o', 'u')

    def test_consonants_are_the_other_letters(self):
        assert len(INVENTORY.consonants) == 21
        assert set(INVENTORY.vowels) | set(INVENTORY.consonants) == set(string.ascii_lowercase)

    def test_syllable_tables(self):
        assert len(INVENTORY.consonant_led_syllables) == 67
        assert INVENTORY.consonant_led_syllables[0] == 'ba'
        assert INVENTORY.consonant_led_syllables[-1] == 'mir'
        assert INVENTORY.vowel_led_syllables == ('oo', 'imp', 'um', 'ius', 'ip', 'olf', 'ali')

    def test_syllables_open_with_their_class(self):
        for syllable in INVENTORY.consonant_led_syllables:
            assert classify(syllable[0]) is LetterClass.CONSONANT
        for syllable in INVENTORY.vowel_led_syllables:
            assert classify(syllable[0]) is LetterClass.VOWEL

    def test_geminates(self):
        assert INVENTORY.geminates == frozenset('tdlhsnfg')

    def test_length_range(self):
        assert (MIN_LENGTH, MAX_LENGTH) == (3, 8)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            INVENTORY.vowels = ('a',)


class TestClassify:
    """Letter classification."""

    def test_vowel(self):
        assert classify('a') is LetterClass.VOWEL

    def test_consonant(self):
        assert classify('q') is LetterClass.CONSONANT
        assert classify('y') is LetterClass.CONSONANT

    def test_uppercase(self):
        assert classify('E') is LetterClass.VOWEL

    def test_outside_inventory(self):
        assert classify('1') is None
        assert classify('') is None
        assert classify(None) is None

    def test_letters_of(self):
        assert INVENTORY.letters_of(LetterClass.VOWEL) == INVENTORY.vowels
        assert INVENTORY.letters_of(LetterClass.CONSONANT) == INVENTORY.consonants


class TestInventoryValidation:
    """Broken tables are rejected up front."""

    def _make(self, **overrides):
        fields = dict(
            vowels=('a', 'e'),
            consonants=('b', 'c'),
            consonant_led_syllables=('ba',),
            vowel_led_syllables=('ab',),
            geminates=frozenset('b'),
        )
        fields.update(overrides)
        return PhonemeInventory(**fields)

    def test_valid(self):
        assert self._make().classify('c') is LetterClass.CONSONANT

    def test_empty_vowels(self):
        with pytest.raises(ValueError):
            self._make(vowels=())

    def test_overlapping_classes(self):
        with pytest.raises(ValueError):
            self._make(consonants=('a', 'b'))

    def test_misfiled_syllable(self):
        with pytest.raises(ValueError):
            self._make(vowel_led_syllables=('ba',))

    def test_vowel_geminate(self):
        with pytest.raises(ValueError):
            self._make(geminates=frozenset('a'))
