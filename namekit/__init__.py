#!/usr/bin/env python3
"""
namekit - Pronounceable Name Generator
======================================

Generates short, pronounceable person names (3-8 letters) for game
profiles and similar uses, without a name database. Names are built from a
fixed set of vowels, consonants and syllable blends, and patched in place
so they never contain triple consonants, "uu", a misplaced "oo", or a "q"
without its "u".

Quick Start
-----------
    from namekit import generate_name, make_rng

    name = generate_name()

    # Reproducible output
    rng = make_rng(42)
    names = [generate_name(rng) for _ in range(5)]

Modules
-------
    namekit.generators - Name construction, rules and randomness
    namekit.settings   - app.yaml settings
    namekit.repl       - Interactive session
    namekit.cli        - Command-line interface

CLI Usage
---------
    python -m namekit generate -n 10
    python -m namekit check Balia
    python -m namekit repl
"""

__version__ = "0.1.0"
__author__ = "namekit"

from . import generators
from . import settings

from .generators import (
    NameBuilder,
    NameBuffer,
    GeneratedName,
    NameRandom,
    Rule,
    Violation,
    generate_name,
    generate_names,
    find_violations,
    is_well_formed,
    get_rng,
    make_rng,
)

__all__ = [
    '__version__',
    'generators',
    'settings',
    'NameBuilder',
    'NameBuffer',
    'GeneratedName',
    'NameRandom',
    'Rule',
    'Violation',
    'generate_name',
    'generate_names',
    'find_violations',
    'is_well_formed',
    'get_rng',
    'make_rng',
]
