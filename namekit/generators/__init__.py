#!/usr/bin/env python3
"""
Name Generators
===============
Pronounceable person names built from a fixed phoneme inventory:
- NameBuilder: syllable-and-letter construction loop with in-place repairs
- Rules: orthographic checks for finished names
- Entropy: seedable random source
"""

from .entropy import (
    NameRandom,
    fresh_seed,
    get_rng,
    make_rng,
)
from .phonemes import (
    INVENTORY,
    MAX_LENGTH,
    MIN_LENGTH,
    LetterClass,
    PhonemeInventory,
    classify,
)
from .rules import (
    Rule,
    Violation,
    find_violations,
    is_safe_placement,
    is_well_formed,
)
from .name_builder import (
    GeneratedName,
    NameBuffer,
    NameBuilder,
    generate_name,
    generate_names,
)

__all__ = [
    # Builder
    'NameBuilder',
    'NameBuffer',
    'GeneratedName',
    'generate_name',
    'generate_names',
    # Inventory
    'INVENTORY',
    'PhonemeInventory',
    'LetterClass',
    'classify',
    'MIN_LENGTH',
    'MAX_LENGTH',
    # Rules
    'Rule',
    'Violation',
    'find_violations',
    'is_well_formed',
    'is_safe_placement',
    # Randomness
    'NameRandom',
    'fresh_seed',
    'get_rng',
    'make_rng',
]
