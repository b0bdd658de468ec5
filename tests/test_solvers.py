import logging

import pytest
from wordsieve.engine import ConstraintSet, Word
from wordsieve.harness import SolveState, run_case
from wordsieve.solvers import (MAX_PERMUTATION_THRESHOLD, PRESETS, PartitionStrategy, Preset,
                               SolveConfig, create_solver, get_solver_ids, resolve_config)
from wordsieve.solvers.partition import best_partition_guess, partition_stats

SMALL = ["crane", "trace", "zonal"]
MEDIUM = ["crane", "trace", "zonal", "rusty", "sunny", "stare", "raise", "cared",
          "racer", "scoop", "level", "lemon", "adieu", "alone", "slate", "caret"]


def _words(ws):
    return [Word(w) for w in ws]


def _state(candidates, constraints=None):
    return {"turn": 1, "candidates": candidates,
            "constraints": constraints or ConstraintSet(), "history": [], "N": 5}


# --- config ---

def test_registry_ids():
    assert get_solver_ids() == ["random_consistent", "remaining"]
    with pytest.raises(ValueError):
        create_solver("nope")


def test_resolve_config_presets_and_fallback(caplog):
    assert resolve_config("optimal_worst") is PRESETS[Preset.OPTIMAL_WORST]
    assert resolve_config(None) is PRESETS[Preset.OPTIMAL_MEAN]
    with caplog.at_level(logging.WARNING, logger="wordsieve.solvers.config"):
        cfg = resolve_config("does-not-exist")
    assert cfg.name == "OPTIMAL_MEAN"
    assert "does-not-exist" in caplog.text


def test_permutation_threshold_is_clamped():
    assert resolve_config("SIMPLE", 5000).permutation_threshold == MAX_PERMUTATION_THRESHOLD
    assert resolve_config("SIMPLE", -3).permutation_threshold == 0
    assert resolve_config("SIMPLE", 17).permutation_threshold == 17
    assert PRESETS[Preset.SIMPLE].partition_threshold == 0
    with pytest.raises(ValueError):
        SolveConfig(partition_threshold=-1)
    with pytest.raises(ValueError):
        SolveConfig(permutation_threshold=MAX_PERMUTATION_THRESHOLD + 1)
    with pytest.raises(ValueError):
        SolveConfig(permutation_threshold=-1)


def test_resolve_config_applies_overrides():
    cfg = resolve_config("SIMPLE", partition_threshold=10, uniqueness_multiplier=2.0,
                         right_location_multiplier=None)
    assert cfg.name == "SIMPLE"
    assert cfg.partition_threshold == 10 and cfg.uniqueness_multiplier == 2.0
    assert cfg.right_location_multiplier == PRESETS[Preset.SIMPLE].right_location_multiplier
    assert PRESETS[Preset.SIMPLE].partition_threshold == 0
    assert resolve_config(None, right_location_multiplier=None) is PRESETS[Preset.OPTIMAL_MEAN]
    with pytest.raises(ValueError):
        resolve_config(None, colour="red")
    with pytest.raises(ValueError):
        resolve_config(None, partition_threshold=-5)


# --- partition scoring ---

def test_partition_stats():
    s = partition_stats(Word("crane"), _words(SMALL))
    assert (s.buckets, s.worst, s.sum_sq, s.total) == (3, 1, 3, 3)
    assert s.expected_remaining == pytest.approx(1.0)


def test_best_partition_guess_prefers_the_better_split():
    candidates = _words(["abc", "abd", "abe", "xyz"])
    pool = candidates + [Word("cde")]
    for strategy in PartitionStrategy:
        best = best_partition_guess(pool, candidates, strategy)
        assert best.guess == Word("cde")
        assert (best.buckets, best.worst, best.sum_sq) == (4, 1, 4)


def test_best_partition_guess_breaks_ties_by_word_order():
    candidates = _words(["abc", "abd", "abe", "xyz"])
    best = best_partition_guess(candidates, candidates, PartitionStrategy.WORST)
    assert best.guess == Word("abc")
    assert best_partition_guess([], candidates) is None


def test_parallel_partition_matches_inline():
    candidates = _words(MEDIUM)
    assert best_partition_guess(candidates, candidates, workers=2) == \
        best_partition_guess(candidates, candidates)


# --- remaining solver policy ---

def test_remaining_uses_partition_below_threshold():
    solver = create_solver("remaining", PRESETS[Preset.OPTIMAL_MEAN])
    candidates = _words(["abc", "abd", "abe", "xyz"])
    assert solver.next_guess(_state(candidates)) == Word("abc")


def test_remaining_falls_back_to_frequency_ranking():
    solver = create_solver("remaining", PRESETS[Preset.SIMPLE])
    candidates = _words(["geese", "crane", "trace"])
    # crane/trace tie on the heuristic; word order decides
    assert solver.next_guess(_state(candidates)) == Word("crane")


def test_remaining_respects_permutation_budget():
    # "bcde" splits the others best, but only "aaaa" fits in a budget of one
    candidates = _words(["aaaa", "bcde", "bcdf", "bcdg", "bcdh"])
    full = create_solver("remaining", PRESETS[Preset.OPTIMAL_MEAN])
    assert full.next_guess(_state(candidates)) == Word("bcde")

    cfg = PRESETS[Preset.OPTIMAL_MEAN].with_permutation_threshold(1)
    budgeted = create_solver("remaining", cfg)
    assert budgeted.next_guess(_state(candidates)) == Word("aaaa")

    solver = create_solver("remaining", PRESETS[Preset.OPTIMAL_MEAN].with_permutation_threshold(0))
    assert solver.next_guess(_state(candidates)) in candidates


def test_single_candidate_is_returned():
    solver = create_solver("remaining")
    assert solver.next_guess(_state([Word("crane")])) == Word("crane")


# --- solve loop ---

def test_scenario_a_first_guess_then_solution():
    r = run_case(create_solver("remaining"), "crane", SMALL, first_guess="trace")
    assert r["success"] is True
    assert r["status"] == SolveState.SOLVED.value
    assert r["history"] == [("trace", "-GGYG"), ("crane", "GGGGG")]
    assert r["guesses"] == 2


def test_first_guess_must_match_length():
    with pytest.raises(ValueError):
        run_case(create_solver("remaining"), "crane", SMALL, first_guess="cranes")
    with pytest.raises(ValueError):
        run_case(create_solver("remaining"), "crane", SMALL, first_guess="cr4ne")


@pytest.mark.parametrize("preset", list(Preset))
@pytest.mark.parametrize("solution", MEDIUM)
def test_solver_converges_within_dictionary_size(preset, solution):
    solver = create_solver("remaining", PRESETS[preset])
    r = run_case(solver, solution, MEDIUM, max_attempts=len(MEDIUM))
    assert r["success"] is True
    assert r["guesses"] <= len(MEDIUM)
    assert r["guess_list"][-1] == solution
    assert len(set(r["guess_list"])) == len(r["guess_list"])


def test_random_consistent_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, "crane", MEDIUM, max_attempts=len(MEDIUM), seed=42)
    assert r["success"] is True


def test_missing_solution_exhausts_with_empty_reason():
    r = run_case(create_solver("remaining"), "zzzzz", SMALL)
    assert r["success"] is False
    assert r["status"] == SolveState.EXHAUSTED.value
    assert r["reason"] == "empty"
    assert r["guesses"] == 1


def test_attempt_budget_exhausts_with_budget_reason():
    r = run_case(create_solver("remaining"), "zonal", SMALL, max_attempts=1)
    assert r["success"] is False
    assert r["reason"] == "budget"
    assert r["guess_list"] == ["crane"]
    with pytest.raises(ValueError):
        run_case(create_solver("remaining"), "zonal", SMALL, max_attempts=0)
