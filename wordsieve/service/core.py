"""
Service-level operations over the engine.

- compute_candidates: filter a dictionary partition, rank the candidates,
                      and pick "fishing" words (best probes over the whole
                      partition with the already-required letters ignored).
- solve:              play a puzzle to the end and return the guess strings,
                      raising on failure.
- WordService:        the calling layer. Resolves raw names once (restriction
                      string, dictionary, preset), owns the result cache and
                      the request counter. The functions above stay pure.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from ..datasets.dictionary import DictionaryCatalog, DictionaryId, resolve_dictionary_id
from ..engine import (ConstraintSet, ScoredWord, Word, build_frequency_model, filter_candidates,
                      parse_restrictions, rank_words)
from ..errors import BudgetExceededError, EmptyCandidateSetError
from ..harness.core import DEFAULT_MAX_ATTEMPTS, REASON_EMPTY, run_case
from ..solvers import BaseSolver, SolveConfig, create_solver, resolve_config
from .cache import ResultCache
from .metrics import RequestCounter

log = logging.getLogger(__name__)

MAX_RESULT_LIST_SIZE = 100
FISHING_WORD_SIZE = 10


@dataclass(frozen=True)
class CandidateReport:
    """Read-only result; cached instances are shared between callers."""
    ranked_words: Tuple[ScoredWord, ...] = ()
    fishing_words: Tuple[ScoredWord, ...] = ()
    total_candidates: int = 0
    letter_weights: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


def clamp_result_limit(size: int) -> int:
    return max(0, min(int(size), MAX_RESULT_LIST_SIZE))


def compute_candidates(constraints: ConstraintSet, length: int,
                       dictionary_id: DictionaryId, result_limit: int, *,
                       catalog: DictionaryCatalog,
                       config: SolveConfig | None = None,
                       workers: int = 1) -> CandidateReport:
    """
    Rank the words of `length` letters that satisfy `constraints`.

    Returns a CandidateReport with:
      - ranked_words     : best candidates, at most min(result_limit, 100)
      - fishing_words    : best FISHING_WORD_SIZE probes from the whole partition,
                           scored with required letters left out of the weights
      - total_candidates : number of words passing the filter
      - letter_weights   : distinct-letter counts over the candidates

    Zero candidates is not an error here: empty lists and zero counts come
    back without any scoring.
    """
    config = config if config is not None else resolve_config(None)
    partition = catalog.partition(dictionary_id, length)
    log.info("Searching %s dictionary for words of length %d", dictionary_id.value, length)

    candidates = filter_candidates(partition, constraints, workers=workers)
    model = build_frequency_model(candidates, constraints, workers=workers)
    log.info("Found %d viable matches.", model.total_candidates)

    if model.total_candidates == 0:
        return CandidateReport()

    ranked = rank_words(candidates, model, config, clamp_result_limit(result_limit))

    fishing_model = build_frequency_model(candidates, constraints,
                                          exclude_letters=constraints.required_letters,
                                          workers=workers)
    fishing = rank_words(partition, fishing_model, config, FISHING_WORD_SIZE)

    return CandidateReport(tuple(ranked), tuple(fishing), model.total_candidates,
                           MappingProxyType(dict(model.letter_weight)))


def solve(solver: BaseSolver, solution: Word | str, words: Sequence[Word], *,
          first_guess: Word | str | None = None,
          max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> List[str]:
    """
    Play the puzzle for `solution` over `words` and return the guesses made,
    the last one being the solution.

    Raises:
      EmptyCandidateSetError if no word fits the feedback (solution missing
        from the dictionary)
      BudgetExceededError    if max_attempts guesses were made without solving
    Both carry the guesses made so far in `.guesses`.
    """
    result = run_case(solver, solution, words, first_guess=first_guess,
                      max_attempts=max_attempts)
    if result["success"]:
        return result["guess_list"]
    if result["reason"] == REASON_EMPTY:
        raise EmptyCandidateSetError(
            f"No candidates left for {result['answer']!r} after "
            f"{result['guesses']} guess(es); is it in the dictionary?",
            result["guess_list"])
    raise BudgetExceededError(
        f"Did not find {result['answer']!r} within {max_attempts} attempt(s)",
        result["guess_list"])


class WordService:
    """
    Entry point for outer surfaces (the CLI here). Raw strings are resolved
    once; the engine only sees ConstraintSet, DictionaryId and SolveConfig.
    """

    def __init__(self, catalog: DictionaryCatalog, *,
                 cache: Optional[ResultCache] = None,
                 counter: Optional[RequestCounter] = None,
                 workers: int = 1):
        self.catalog = catalog
        self.cache = cache if cache is not None else ResultCache()
        self.counter = counter if counter is not None else RequestCounter()
        self.workers = workers

    def valid_words(self, restrictions: str, length: int = 5, dictionary: str = "simple",
                    size: int = MAX_RESULT_LIST_SIZE, config: str | None = None,
                    **tuning) -> CandidateReport:
        """
        Rank the words matching a restriction string.

        `tuning` overrides single fields of the preset (right_location_multiplier,
        uniqueness_multiplier, viable_word_preference, partition_threshold);
        None values keep the preset's value. The overrides are part of the
        resolved config and so of the cache key.
        """
        self.counter.record()
        constraints = parse_restrictions(restrictions, length)
        did = resolve_dictionary_id(dictionary)
        cfg = resolve_config(config, **tuning)
        limit = clamp_result_limit(size)
        log.debug("Using %s", cfg)
        key = (constraints, length, did, limit, cfg)
        return self.cache.get_or_compute(
            key,
            lambda: compute_candidates(constraints, length, did, limit,
                                       catalog=self.catalog, config=cfg, workers=self.workers))

    def solve_word(self, solution: str, first_word: str = "", *,
                   config: str | None = None,
                   permutation_threshold: int = 200,
                   dictionary: str = "simple",
                   solver_id: str = "remaining",
                   max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                   **tuning) -> List[str]:
        self.counter.record()
        target = Word(solution.strip().lower())
        cfg = resolve_config(config, permutation_threshold, **tuning)
        solver = create_solver(solver_id, cfg, workers=self.workers)
        words = self.catalog.partition(resolve_dictionary_id(dictionary), len(target))
        return solve(solver, target, words, first_guess=first_word or None,
                     max_attempts=max_attempts)
