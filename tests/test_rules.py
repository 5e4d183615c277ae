"""
Tests for Orthographic Rules
============================
Tests for find_violations(), is_well_formed() and is_safe_placement()
in namekit/generators/rules.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.generators.rules import (
    Rule,
    Violation,
    find_violations,
    is_safe_placement,
    is_well_formed,
    pattern_violations,
)


def rules_of(name):
    return [v.rule for v in find_violations(name)]


class TestWellFormed:
    """Names that break no rule."""

    @pytest.mark.parametrize("name", ["balia", "moona", "quan", "abaqueli", "tomassa", "Ema"])
    def test_clean_names(self, name):
        assert is_well_formed(name)
        assert find_violations(name) == []


class TestViolations:
    """Each rule on its own."""

    def test_triple_consonant(self):
        violations = find_violations("bassso")
        assert [v.rule for v in violations] == [Rule.TRIPLE_CONSONANT]
        assert violations[0].position == 2
        assert violations[0].fragment == "sss"

    def test_triple_vowel_is_not_a_triple_consonant(self):
        assert Rule.TRIPLE_CONSONANT not in rules_of("baaab")

    def test_double_u(self):
        violations = find_violations("kuuma")
        assert [v.rule for v in violations] == [Rule.DOUBLE_U]
        assert violations[0].position == 1

    def test_vowel_before_oo(self):
        violations = find_violations("baoom")
        assert [v.rule for v in violations] == [Rule.VOWEL_BEFORE_OO]
        assert violations[0].position == 1
        assert violations[0].fragment == "aoo"

    def test_leading_oo(self):
        violations = find_violations("oolam")
        assert [v.rule for v in violations] == [Rule.LEADING_OO]
        assert violations[0].position == 0

    def test_bare_q_before_vowel(self):
        violations = find_violations("aqam")
        assert [v.rule for v in violations] == [Rule.BARE_Q]
        assert violations[0].fragment == "qa"

    def test_trailing_q(self):
        violations = find_violations("baq")
        assert [v.rule for v in violations] == [Rule.BARE_Q]
        assert violations[0].fragment == "q"

    def test_too_short(self):
        assert rules_of("ab") == [Rule.LENGTH]

    def test_too_long(self):
        assert rules_of("balimaranu") == [Rule.LENGTH]

    def test_case_insensitive(self):
        assert rules_of("KUUMA") == [Rule.DOUBLE_U]

    def test_multiple_violations_in_scan_order(self):
        assert rules_of("ooquu") == [Rule.LEADING_OO, Rule.DOUBLE_U]


class TestViolation:
    """Tests for the Violation record."""

    def test_spans(self):
        v = Violation(Rule.TRIPLE_CONSONANT, 2, "sss")
        assert not v.spans(1)
        assert v.spans(2)
        assert v.spans(4)
        assert not v.spans(5)

    def test_to_dict(self):
        data = Violation(Rule.DOUBLE_U, 1, "uu").to_dict()
        assert data['rule'] == 'double_u'
        assert data['position'] == 1
        assert data['fragment'] == 'uu'
        assert 'uu' in data['description']


class TestSafePlacement:
    """Local checks used by the repair passes."""

    def test_q_needs_following_u(self):
        assert not is_safe_placement(list("baxa"), 2, 'q')
        assert is_safe_placement(list("baxu"), 2, 'q')

    def test_letter_after_q_must_be_u(self):
        assert not is_safe_placement(list("qxa"), 1, 'e')
        assert is_safe_placement(list("qxa"), 1, 'u')

    def test_would_complete_triple(self):
        assert not is_safe_placement(list("rassxa"), 4, 's')
        assert not is_safe_placement(list("xssa"), 0, 's')
        assert is_safe_placement(list("xssa"), 0, 't')

    def test_would_create_double_u(self):
        assert not is_safe_placement(list("kuxa"), 2, 'u')
        assert is_safe_placement(list("kuxa"), 2, 'a')

    def test_vowel_before_oo(self):
        assert not is_safe_placement(list("xoom"), 0, 'a')
        assert is_safe_placement(list("xoom"), 0, 'm')

    def test_o_completing_oo(self):
        assert not is_safe_placement(list("axo"), 1, 'o')
        assert not is_safe_placement(list("xom"), 0, 'o')
        assert is_safe_placement(list("mxo"), 1, 'o')

    def test_problems_elsewhere_ignored(self):
        assert is_safe_placement(list("kuuxa"), 3, 'm')

    def test_does_not_modify_input(self):
        letters = list("baxa")
        is_safe_placement(letters, 2, 'q')
        assert letters == list("baxa")


class TestPatternViolations:
    """Length is not part of the pattern scan."""

    def test_short_sequence_only_patterns(self):
        assert pattern_violations(list("ab")) == []
