import pytest
from wordsieve.engine import ConstraintSet, Word, filter_candidates, is_candidate, parse_restrictions

WORDS = [Word(w) for w in [
    "crane", "trace", "zonal", "rusty", "sunny", "stare", "raise", "cared",
    "racer", "scoop", "level", "lemon", "geese", "adieu", "alone", "slate",
]]

CONSTRAINT_CASES = [
    ConstraintSet(),
    parse_restrictions("s!1unyrt", 5),
    ConstraintSet().merge_feedback("raise", "YY--G"),
    ConstraintSet().require("e").exclude_letter("z"),
    ConstraintSet().fix(0, "l"),
    parse_restrictions("xyz", 5),
]


def test_scenario_b_position_exclusion():
    c = ConstraintSet().require("s").exclude_at(0, "s")
    out = filter_candidates([Word("rusty"), Word("sunny")], c)
    assert out == [Word("rusty")]


def test_filter_checks_each_rule():
    assert not is_candidate(Word("crane"), ConstraintSet().require("s"))          # required missing
    assert not is_candidate(Word("crane"), ConstraintSet().fix(0, "t"))           # fixed mismatch
    assert not is_candidate(Word("crane"), ConstraintSet().exclude_at(0, "c"))    # excluded pair
    assert not is_candidate(Word("crane"), ConstraintSet().exclude_letter("n"))   # letter absent
    assert is_candidate(Word("crane"), ConstraintSet().require("n").exclude_at(0, "n"))


def test_fixed_position_beyond_word_length_rejects():
    assert not is_candidate(Word("abc"), ConstraintSet().fix(4, "a"))
    assert is_candidate(Word("abc"), ConstraintSet().exclude_at(4, "a"))


def test_filter_output_is_sorted():
    out = filter_candidates(list(reversed(WORDS)), ConstraintSet())
    assert out == sorted(WORDS)


@pytest.mark.parametrize("c", CONSTRAINT_CASES)
def test_filter_is_subset_and_idempotent(c):
    once = filter_candidates(WORDS, c)
    assert set(once) <= set(WORDS)
    assert filter_candidates(once, c) == once


# each extra set only adds facts that agree with the case it is paired with
TIGHTENINGS = [
    ConstraintSet().require("a").exclude_at(4, "e"),
    ConstraintSet().require("u").exclude_at(4, "y"),
    ConstraintSet().require("c").exclude_at(2, "n"),
    ConstraintSet().require("a").exclude_at(4, "e"),
    ConstraintSet().require("e").exclude_at(1, "e"),
    ConstraintSet().exclude_at(0, "x"),
]


@pytest.mark.parametrize("c, extra", list(zip(CONSTRAINT_CASES, TIGHTENINGS)))
def test_filter_is_monotonic_under_merge(c, extra):
    extra = extra.exclude_letter("q")
    tighter = filter_candidates(WORDS, c.merge(extra))
    assert set(tighter) <= set(filter_candidates(WORDS, c))


def test_raise_feedback_keeps_consistent_words():
    c = ConstraintSet().merge_feedback("raise", "YY--G")
    out = filter_candidates(WORDS, c)
    assert Word("crane") in out
    assert Word("stare") not in out and Word("scoop") not in out


def test_parallel_filter_matches_inline():
    c = ConstraintSet().require("e")
    assert filter_candidates(WORDS, c, workers=2) == filter_candidates(WORDS, c)
