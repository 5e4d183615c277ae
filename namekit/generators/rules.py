#!/usr/bin/env python3
"""
Orthographic Rules
==================
Forbidden letter patterns for generated names.

A well-formed name:
- is between MIN_LENGTH and MAX_LENGTH letters long
- has no three identical consonants in a row
- has no "uu"
- has no "oo" right after a vowel, and does not start with "oo"
- follows every "q" with "u"

find_violations() reports every broken rule with its position, and
is_safe_placement() answers the local question the repair passes ask:
would writing this letter here complete a forbidden pattern?
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .phonemes import INVENTORY, MAX_LENGTH, MIN_LENGTH, LetterClass


class Rule(Enum):
    """A single orthographic coherence rule."""
    TRIPLE_CONSONANT = "triple_consonant"
    DOUBLE_U = "double_u"
    VOWEL_BEFORE_OO = "vowel_before_oo"
    LEADING_OO = "leading_oo"
    BARE_Q = "bare_q"
    LENGTH = "length"


RULE_DESCRIPTIONS = {
    Rule.TRIPLE_CONSONANT: "three identical consonants in a row",
    Rule.DOUBLE_U: "'uu' sequence",
    Rule.VOWEL_BEFORE_OO: "vowel directly before 'oo'",
    Rule.LEADING_OO: "name starts with 'oo'",
    Rule.BARE_Q: "'q' not followed by 'u'",
    Rule.LENGTH: f"length outside {MIN_LENGTH}-{MAX_LENGTH}",
}


@dataclass
class Violation:
    """One broken rule and the fragment that breaks it."""
    rule: Rule
    position: int
    fragment: str

    @property
    def description(self) -> str:
        return RULE_DESCRIPTIONS[self.rule]

    def spans(self, index: int) -> bool:
        """True if the offending fragment covers the given index."""
        return self.position <= index < self.position + len(self.fragment)

    def to_dict(self) -> dict:
        return {
            'rule': self.rule.value,
            'position': self.position,
            'fragment': self.fragment,
            'description': self.description,
        }


def _at(letters: Sequence[str], index: int) -> Optional[str]:
    if 0 <= index < len(letters):
        return letters[index]
    return None


def pattern_violations(letters: Sequence[str]) -> List[Violation]:
    """Scan a letter sequence for forbidden patterns (length not checked)."""
    violations = []
    for i, letter in enumerate(letters):
        following = _at(letters, i + 1)

        if (letter == following == _at(letters, i + 2)
                and INVENTORY.classify(letter) is LetterClass.CONSONANT):
            violations.append(Violation(Rule.TRIPLE_CONSONANT, i, letter * 3))

        if letter == 'u' and following == 'u':
            violations.append(Violation(Rule.DOUBLE_U, i, 'uu'))

        if letter == 'o' and following == 'o':
            if i == 0:
                violations.append(Violation(Rule.LEADING_OO, 0, 'oo'))
            elif INVENTORY.is_vowel(letters[i - 1]):
                violations.append(
                    Violation(Rule.VOWEL_BEFORE_OO, i - 1, letters[i - 1] + 'oo')
                )

        if letter == 'q' and following != 'u':
            violations.append(Violation(Rule.BARE_Q, i, 'q' + (following or '')))

    return violations


def find_violations(name: str) -> List[Violation]:
    """
    Check a complete name against every rule.

    Parameters
    ----------
    name : str
        Name to check (case-insensitive)

    Returns
    -------
    list[Violation]
        Broken rules in scan order; empty for a well-formed name
    """
    name_lower = name.lower()
    violations = pattern_violations(list(name_lower))
    if not MIN_LENGTH <= len(name_lower) <= MAX_LENGTH:
        violations.append(Violation(Rule.LENGTH, 0, name_lower))
    return violations


def is_well_formed(name: str) -> bool:
    """True if the name breaks none of the rules."""
    return not find_violations(name)


def is_safe_placement(letters: Sequence[str], index: int, letter: str) -> bool:
    """
    Check whether writing a letter at an index keeps that spot clean.

    The letter replaces whatever is at the index. Only patterns that cover
    the index count; problems elsewhere in the sequence are ignored.
    """
    candidate = list(letters)
    candidate[index] = letter
    return not any(v.spans(index) for v in pattern_violations(candidate))


__all__ = [
    'Rule',
    'RULE_DESCRIPTIONS',
    'Violation',
    'pattern_violations',
    'find_violations',
    'is_well_formed',
    'is_safe_placement',
]
