#!/usr/bin/env python3
"""
Phoneme Inventory
=================
The fixed letter and syllable tables names are built from.

The inventory is hardcoded and immutable: five vowels, the remaining
twenty-one letters as consonants, and two ordered lists of syllable blends,
one for blends that open with a consonant and one for blends that open with
a vowel. Every letter is classified once, up front, as a vowel or a
consonant.

Usage:
    from namekit.generators.phonemes import INVENTORY, LetterClass, classify

    classify('a')                  # LetterClass.VOWEL
    INVENTORY.consonant_led_syllables[0]   # 'ba'
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


# =============================================================================
# Length Policy
# =============================================================================

MIN_LENGTH = 3  # we don't want a name with less than 3 letters
MAX_LENGTH = 8


# =============================================================================
# Letter Classification
# =============================================================================

class LetterClass(Enum):
    """Phonological class of a single letter."""
    VOWEL = "vowel"
    CONSONANT = "consonant"


# =============================================================================
# Inventory
# =============================================================================

@dataclass(frozen=True)
class PhonemeInventory:
    """Container for the letters and blends usable in a name."""
    vowels: Tuple[str, ...]
    consonants: Tuple[str, ...]
    consonant_led_syllables: Tuple[str, ...]
    vowel_led_syllables: Tuple[str, ...]
    geminates: FrozenSet[str]
    _classes: Dict[str, LetterClass] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        if not self.vowels or not self.consonants:
            raise ValueError("inventory needs at least one vowel and one consonant")
        overlap = set(self.vowels) & set(self.consonants)
        if overlap:
            raise ValueError(f"letters classified twice: {''.join(sorted(overlap))}")

        classes = {v: LetterClass.VOWEL for v in self.vowels}
        classes.update({c: LetterClass.CONSONANT for c in self.consonants})
        object.__setattr__(self, '_classes', classes)

        for syllable in self.consonant_led_syllables:
            if classes.get(syllable[:1]) is not LetterClass.CONSONANT:
                raise ValueError(f"'{syllable}' does not open with a consonant")
        for syllable in self.vowel_led_syllables:
            if classes.get(syllable[:1]) is not LetterClass.VOWEL:
                raise ValueError(f"'{syllable}' does not open with a vowel")
        if not self.geminates <= set(self.consonants):
            raise ValueError("geminates must be consonants")

    def classify(self, letter: Optional[str]) -> Optional[LetterClass]:
        """Class of a letter, or None for anything outside the inventory."""
        if not letter:
            return None
        return self._classes.get(letter.lower())

    def letters_of(self, letter_class: LetterClass) -> Tuple[str, ...]:
        """All letters of a class, in inventory order."""
        if letter_class is LetterClass.VOWEL:
            return self.vowels
        return self.consonants

    def is_vowel(self, letter: Optional[str]) -> bool:
        return self.classify(letter) is LetterClass.VOWEL

    def is_consonant(self, letter: Optional[str]) -> bool:
        return self.classify(letter) is LetterClass.CONSONANT


INVENTORY = PhonemeInventory(
    vowels=tuple('aeiou'),
    # 'y' can act as a semivowel but is kept with the consonants
    consonants=tuple('bcdfghjklmnpqrstvwxyz'),
    # Most frequent blends that start with a consonant
    consonant_led_syllables=(
        'ba', 'be', 'bi', 'bo', 'bu', 'da', 'de', 'di', 'do', 'du',
        'la', 'le', 'li', 'lo', 'lu', 'ma', 'me', 'mi', 'mo', 'mu',
        'na', 'ne', 'ni', 'no', 'nu', 'pa', 'pe', 'pi', 'po', 'pu',
        'ra', 're', 'ri', 'ro', 'ru', 'sa', 'se', 'si', 'so', 'su',
        'ta', 'te', 'ti', 'to', 'tu', 'va', 'liy', 'man', 'mar',
        'vit', 'ye', 'tom', 'lay', 'fri', 'rom', 'mor', 'dal', 'fre',
        'fro', 'ch', 'ha', 'je', 'ja', 'ju', 'ga', 'mon', 'mir',
    ),
    # Blends that start with a vowel or vowel cluster
    vowel_led_syllables=('oo', 'imp', 'um', 'ius', 'ip', 'olf', 'ali'),
    # Consonants that may be doubled (e.g. "tt", "ll")
    geminates=frozenset('tdlhsnfg'),
)


def classify(letter: Optional[str]) -> Optional[LetterClass]:
    """Classify a letter against the shared inventory."""
    return INVENTORY.classify(letter)


__all__ = [
    'MIN_LENGTH',
    'MAX_LENGTH',
    'LetterClass',
    'PhonemeInventory',
    'INVENTORY',
    'classify',
]
