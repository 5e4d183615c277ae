#!/usr/bin/env python3
"""
Pronounceable Name Builder
==========================
Generates a single pronounceable person name without a name database.

Here's how it works:
- A target length between 3 and 8 letters is drawn.
- The name is seeded with one letter, a vowel or a consonant with even odds.
- Until the target is reached, each pass of the main loop:
    1. appends a syllable blend that fits the last letter (consonant-led
       after a vowel, vowel-led after a consonant)
    2. appends a single letter chosen by a small set of phonotactic rules
       (consonant after vowel with occasional doubling, "u" after "q",
       vowel after a consonant cluster)
    3. repairs forbidden patterns in place: "oo" after a vowel or at the
       start, "uu", three identical consonants, and "q" without "u"
- Repairs are single left-to-right scans. A bounded number of extra sweeps
  runs at the end if the finished name still breaks a rule.

Usage:
    from namekit.generators import NameBuilder, generate_name, make_rng

    name = generate_name()
    builder = NameBuilder(rng=make_rng(42))
    result = builder.build()
    print(result.name, result.target_length)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from namekit.settings import get_setting

from .entropy import NameRandom, get_rng
from .phonemes import INVENTORY, MAX_LENGTH, MIN_LENGTH, LetterClass, PhonemeInventory
from .rules import find_violations, is_safe_placement

logger = logging.getLogger(__name__)

# Percent rolls (0-99). A seed roll up to 49 starts the name with a vowel;
# a gemination roll in 70-99 doubles an eligible consonant.
VOWEL_SEED_MAX_ROLL = 49
GEMINATION_MIN_ROLL = 70
GEMINATION_MAX_ROLL = 99

DEFAULT_MAX_RESCANS = 3


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class GeneratedName:
    """A generated name with construction metadata."""
    name: str
    target_length: int
    iterations: int = 0
    repairs: int = 0
    first_class: str = ""

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'target_length': self.target_length,
            'iterations': self.iterations,
            'repairs': self.repairs,
            'first_class': self.first_class,
        }


class NameBuffer:
    """
    Growable letter sequence for a name under construction.

    Appends never write past the target length; prepend() drops whatever
    overflows from the tail.
    """

    def __init__(self, target_length: int, text: str = ""):
        if target_length < 1:
            raise ValueError(f"target_length must be positive, got {target_length}")
        if len(text) > target_length:
            raise ValueError(f"'{text}' is longer than target length {target_length}")
        self.target_length = target_length
        self._letters: List[str] = list(text)

    def __len__(self) -> int:
        return len(self._letters)

    def __getitem__(self, index: int) -> str:
        return self._letters[index]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"NameBuffer({self.text!r}, target_length={self.target_length})"

    @property
    def text(self) -> str:
        return ''.join(self._letters)

    @property
    def letters(self) -> List[str]:
        """Copy of the current letters."""
        return list(self._letters)

    @property
    def room(self) -> int:
        """Letters that still fit before the target length."""
        return max(0, self.target_length - len(self._letters))

    @property
    def is_full(self) -> bool:
        return self.room == 0

    def last(self, offset: int = 1) -> Optional[str]:
        """Letter at offset from the end (1 = last), or None."""
        if len(self._letters) < offset:
            return None
        return self._letters[-offset]

    def append(self, letter: str) -> bool:
        """Append one letter if there is room. Returns whether it was added."""
        if self.is_full:
            return False
        self._letters.append(letter)
        return True

    def extend(self, text: str) -> str:
        """Append as much of text as fits. Returns the part that was added."""
        fitted = text[:self.room]
        self._letters.extend(fitted)
        return fitted

    def replace(self, index: int, letter: str) -> None:
        self._letters[index] = letter

    def prepend(self, letter: str) -> Optional[str]:
        """Shift everything right by one. Returns the letter dropped, if any."""
        self._letters.insert(0, letter)
        if len(self._letters) > self.target_length:
            return self._letters.pop()
        return None


# =============================================================================
# Name Builder
# =============================================================================

class NameBuilder:
    """
    Builds pronounceable names from the fixed phoneme inventory.

    Parameters
    ----------
    rng : NameRandom, optional
        Random source. Defaults to the process-wide generator.
    max_rescans : int, optional
        Extra repair sweeps after the main loop. Defaults to
        generation.max_rescans from app.yaml.
    """

    def __init__(self, rng: NameRandom = None, max_rescans: int = None,
                 inventory: PhonemeInventory = INVENTORY):
        self._rng = rng or get_rng()
        if max_rescans is None:
            max_rescans = get_setting('generation.max_rescans', DEFAULT_MAX_RESCANS)
        max_rescans = int(max_rescans)
        if max_rescans < 0:
            raise ValueError(f"max_rescans must be >= 0, got {max_rescans}")
        self._max_rescans = max_rescans
        self._inv = inventory
        self._repairs = 0

    @property
    def rng(self) -> NameRandom:
        return self._rng

    @property
    def max_rescans(self) -> int:
        return self._max_rescans

    def generate(self) -> str:
        """Generate one name."""
        return self.build().name

    def build(self) -> GeneratedName:
        """Generate one name together with its construction metadata."""
        self._repairs = 0
        target_length = self._rng.randint(MIN_LENGTH, MAX_LENGTH)
        buffer = NameBuffer(target_length)
        logger.debug(f"Target length: {target_length}")

        first_class = self._seed(buffer)

        iterations = 0
        while len(buffer) < buffer.target_length:
            iterations += 1
            self._extend_syllables(buffer)
            self._refine(buffer)
            self.repair(buffer)
            logger.debug(f"Pass {iterations} finished: '{buffer}' ({len(buffer)}/{target_length})")

        self.sweep(buffer)
        logger.debug(f"Generated name: '{buffer}'")

        return GeneratedName(
            name=buffer.text,
            target_length=target_length,
            iterations=iterations,
            repairs=self._repairs,
            first_class=first_class.value,
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def _seed(self, buffer: NameBuffer) -> LetterClass:
        roll = self._rng.randrange(100)
        if roll <= VOWEL_SEED_MAX_ROLL:
            letter_class = LetterClass.VOWEL
        else:
            letter_class = LetterClass.CONSONANT
        letter = self._rng.choice(self._inv.letters_of(letter_class))
        buffer.append(letter)
        logger.debug(f"Started the name with a {letter_class.value}: {letter}")
        return letter_class

    def _extend_syllables(self, buffer: NameBuffer) -> None:
        """Append a blend after a vowel, then another after a consonant."""
        if not buffer.is_full and self._inv.is_vowel(buffer.last()):
            syllable = self._rng.choice(self._inv.consonant_led_syllables)
            added = buffer.extend(syllable)
            logger.debug(f"Added consonant syllable '{added}' (drew '{syllable}'): '{buffer}'")

        # 'q' waits for its 'u' from the refinement step
        last = buffer.last()
        if not buffer.is_full and self._inv.is_consonant(last) and last != 'q':
            syllable = self._rng.choice(self._inv.vowel_led_syllables)
            added = buffer.extend(syllable)
            logger.debug(f"Added vowel syllable '{added}' (drew '{syllable}'): '{buffer}'")

    def _refine(self, buffer: NameBuffer) -> None:
        """Append single letters according to what the name ends with."""
        if buffer.is_full:
            return

        last = buffer.last()
        if self._inv.is_vowel(last) and last != 'q' and buffer.room >= 2:
            consonant = self._rng.choice(self._inv.consonants)
            buffer.append(consonant)
            logger.debug(f"Added consonant: {consonant}")

            roll = self._rng.randrange(100)
            if (GEMINATION_MIN_ROLL <= roll <= GEMINATION_MAX_ROLL
                    and consonant in self._inv.geminates
                    and buffer.room >= 2):
                buffer.append(consonant)
                vowel = self._rng.choice(self._inv.vowels)
                buffer.append(vowel)
                logger.debug(f"Doubled '{consonant}' and added vowel '{vowel}' (roll {roll})")

        elif last == 'q':
            buffer.append('u')
            if not buffer.is_full:
                buffer.append(self._rng.choice(self._inv.vowels))
                if not buffer.is_full:
                    buffer.append(self._rng.choice(self._inv.consonants))
            logger.debug(f"Followed 'q' with 'u': '{buffer}'")

        elif self._inv.is_consonant(buffer.last(2)) and self._inv.is_consonant(last):
            vowel = self._rng.choice(self._inv.vowels)
            buffer.append(vowel)
            logger.debug(f"Broke up consonant pair with vowel: {vowel}")

        else:
            vowel = self._rng.choice(self._inv.vowels)
            buffer.append(vowel)
            logger.debug(f"Added vowel: {vowel}")

    # -------------------------------------------------------------------------
    # Repair Passes
    # -------------------------------------------------------------------------

    def repair(self, buffer: NameBuffer) -> int:
        """Run every repair pass once. Returns the number of corrections."""
        return (self.repair_double_o(buffer)
                + self.repair_double_u(buffer)
                + self.repair_triple_consonants(buffer)
                + self.repair_bare_q(buffer))

    def repair_double_o(self, buffer: NameBuffer) -> int:
        """Fix "oo" after a vowel and "oo" at the start of the name."""
        fixes = 0
        j = 0
        while j < len(buffer) - 1:
            if buffer[j] == 'o' and buffer[j + 1] == 'o':
                if j > 0 and self._inv.is_vowel(buffer[j - 1]):
                    before = buffer.text
                    consonant = self._draw_replacement(buffer.letters, j - 1, LetterClass.CONSONANT)
                    buffer.replace(j - 1, consonant)
                    fixes += 1
                    logger.debug(f"Replaced vowel before 'oo': '{before}' -> '{buffer}'")
                elif j == 0:
                    before = buffer.text
                    shifted = ([''] + buffer.letters)[:buffer.target_length]
                    consonant = self._draw_replacement(shifted, 0, LetterClass.CONSONANT)
                    dropped = buffer.prepend(consonant)
                    fixes += 1
                    logger.debug(f"Moved leading 'oo' behind '{consonant}': '{before}' -> '{buffer}'"
                                 + (f" (dropped '{dropped}')" if dropped else ""))
            j += 1
        self._repairs += fixes
        return fixes

    def repair_double_u(self, buffer: NameBuffer) -> int:
        """Replace the second 'u' of every "uu" with another vowel."""
        fixes = 0
        for t in range(len(buffer) - 1):
            if buffer[t] == 'u' and buffer[t + 1] == 'u':
                before = buffer.text
                vowel = self._draw_replacement(buffer.letters, t + 1, LetterClass.VOWEL, exclude='u')
                buffer.replace(t + 1, vowel)
                fixes += 1
                logger.debug(f"Modified 'uu': '{before}' -> '{buffer}'")
        self._repairs += fixes
        return fixes

    def repair_triple_consonants(self, buffer: NameBuffer) -> int:
        """Break up three identical consonants by replacing the first."""
        fixes = 0
        for p in range(len(buffer) - 2):
            if (buffer[p] == buffer[p + 1] == buffer[p + 2]
                    and self._inv.is_consonant(buffer[p])):
                before = buffer.text
                if self._rng.randrange(2) == 0:
                    letter_class = LetterClass.CONSONANT
                else:
                    letter_class = LetterClass.VOWEL
                replacement = self._draw_replacement(buffer.letters, p, letter_class)
                buffer.replace(p, replacement)
                fixes += 1
                logger.debug(f"Found three consecutive '{before[p]}' at {p}: '{before}' -> '{buffer}'")
        self._repairs += fixes
        return fixes

    def repair_bare_q(self, buffer: NameBuffer) -> int:
        """
        Replace every 'q' that is not followed by 'u' with a consonant.

        A trailing 'q' is left alone while the buffer still has room; the
        next refinement step follows it with 'u'.
        """
        fixes = 0
        for i in range(len(buffer)):
            if buffer[i] != 'q':
                continue
            is_last = i == len(buffer) - 1
            if is_last and not buffer.is_full:
                continue
            if is_last or buffer[i + 1] != 'u':
                before = buffer.text
                consonant = self._draw_replacement(buffer.letters, i, LetterClass.CONSONANT, exclude='q')
                buffer.replace(i, consonant)
                fixes += 1
                logger.debug(f"Replaced bare 'q': '{before}' -> '{buffer}'")
        self._repairs += fixes
        return fixes

    def sweep(self, buffer: NameBuffer) -> int:
        """
        Re-run the repair passes while the name still breaks a rule.

        Stops after max_rescans runs. Returns the number of runs made.
        """
        rescans = 0
        while rescans < self._max_rescans:
            violations = find_violations(buffer.text)
            if not violations:
                break
            rescans += 1
            logger.debug(
                f"Rescan {rescans}/{self._max_rescans} of '{buffer}': "
                + ", ".join(v.rule.value for v in violations)
            )
            self.repair(buffer)
        return rescans

    def _draw_replacement(self, letters: List[str], index: int,
                          letter_class: LetterClass, exclude: Iterable[str] = ()) -> str:
        """
        Draw a letter of a class to write at index.

        Letters that would complete a forbidden pattern at that index are
        skipped. If every letter of the class would, any letter of the class
        is drawn.
        """
        pool = [c for c in self._inv.letters_of(letter_class) if c not in exclude]
        safe = [c for c in pool if is_safe_placement(letters, index, c)]
        if not safe:
            logger.debug(f"No safe {letter_class.value} for position {index} of '{''.join(letters)}'")
            safe = pool
        return self._rng.choice(safe)


# =============================================================================
# Module-level convenience functions
# =============================================================================

def generate_name(rng: NameRandom = None) -> str:
    """Generate one pronounceable name."""
    return NameBuilder(rng=rng).generate()


def generate_names(count: int, rng: NameRandom = None) -> List[str]:
    """Generate count names. Repeats are possible and are not filtered."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    builder = NameBuilder(rng=rng)
    return [builder.generate() for _ in range(count)]


__all__ = [
    'GeneratedName',
    'NameBuffer',
    'NameBuilder',
    'generate_name',
    'generate_names',
    'VOWEL_SEED_MAX_ROLL',
    'GEMINATION_MIN_ROLL',
    'GEMINATION_MAX_ROLL',
]
