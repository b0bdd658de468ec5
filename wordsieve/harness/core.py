"""
Solve-loop primitives.

- run_case:  play one puzzle (one hidden solution) with a given solver.
- run_batch: play many puzzles in sequence (optionally a seeded sample).

The loop is a small state machine:

    AWAITING_GUESS -> EVALUATING_FEEDBACK -> (SOLVED | AWAITING_GUESS) ... -> EXHAUSTED

It owns the ConstraintSet for the whole game: the solver only picks a guess,
feedback is derived here against the solution (which the solver never sees),
merged into the constraints, and the candidates are re-filtered.

EXHAUSTED carries a reason:
  - "empty"  : no dictionary word fits the feedback (solution not in the
               dictionary, or the feedback was inconsistent)
  - "budget" : the attempt budget ran out first

These functions are UI-agnostic so they can be reused by the CLI, the
service layer, or a notebook without changes.
"""

from __future__ import annotations
import logging
import random
import time
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from ..engine import ConstraintSet, Word, feedback, filter_candidates
from ..engine.words import is_clean_token

log = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 6

REASON_EMPTY = "empty"
REASON_BUDGET = "budget"


class SolveState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    EVALUATING_FEEDBACK = "evaluating_feedback"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


def _as_word(w: Word | str) -> Word:
    return w if isinstance(w, Word) else Word(w.strip().lower())


def _first_guess(first_guess: Word | str | None, N: int) -> Optional[Word]:
    if first_guess is None:
        return None
    if isinstance(first_guess, str):
        first_guess = first_guess.strip().lower()
        if not first_guess:
            return None
        if not is_clean_token(first_guess):
            raise ValueError(f"First guess must be letters only: {first_guess!r}")
        first_guess = Word(first_guess)
    if len(first_guess) != N:
        raise ValueError(f"First guess {first_guess.text!r} must have {N} letters")
    return first_guess


def run_case(
        solver,
        solution: Word | str,
        words: Iterable[Word | str],
        *,
        first_guess: Word | str | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        constraints: ConstraintSet | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver finds the solution or the loop is exhausted.

    Args:
        solver:       a BaseSolver implementing next_guess(state)
        solution:     the hidden word for this case
        words:        dictionary partition (all words of the solution's length)
        first_guess:  optional opening word, used verbatim on attempt 1
        max_attempts: attempt budget
        constraints:  optional starting knowledge (defaults to nothing known)
        seed:         RNG seed for solvers that break ties randomly

    Returns:
        dict with keys:
            success (bool), status (SolveState value), reason (str | None),
            guesses (int), guess_list (list[str]), history (list[(guess, pattern)]),
            time_ms (float), answer (str)
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")

    solution = _as_word(solution)
    N = len(solution)
    opening = _first_guess(first_guess, N)
    solver.reset(seed=seed)

    known = constraints if constraints is not None else ConstraintSet()
    partition = sorted({w for w in (_as_word(x) for x in words) if len(w) == N})
    candidates = filter_candidates(partition, known)

    history: List[Tuple[str, str]] = []
    state = SolveState.AWAITING_GUESS
    reason: Optional[str] = None
    guess: Optional[Word] = None
    attempts = 0

    t0 = time.perf_counter()
    while state not in (SolveState.SOLVED, SolveState.EXHAUSTED):
        if state is SolveState.AWAITING_GUESS:
            if not candidates:
                state, reason = SolveState.EXHAUSTED, REASON_EMPTY
                continue
            if attempts >= max_attempts:
                state, reason = SolveState.EXHAUSTED, REASON_BUDGET
                continue

            attempts += 1
            if attempts == 1 and opening is not None:
                guess = opening
            else:
                guess = _as_word(solver.next_guess({
                    "turn": attempts,
                    "candidates": candidates,
                    "constraints": known,
                    "history": list(history),
                    "N": N,
                }))
            state = SolveState.EVALUATING_FEEDBACK

        else:  # EVALUATING_FEEDBACK
            patt = feedback(guess, solution)
            history.append((guess.text, patt))
            if guess == solution:
                state = SolveState.SOLVED
                continue

            known = known.merge_feedback(guess, patt)
            candidates = filter_candidates(candidates, known)
            log.debug("attempt %d: %s -> %s, %d candidates left",
                      attempts, guess.text, patt, len(candidates))
            state = SolveState.AWAITING_GUESS

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": state is SolveState.SOLVED,
        "status": state.value,
        "reason": reason,
        "guesses": len(history),
        "guess_list": [g for g, _ in history],
        "history": history,
        "time_ms": dt,
        "answer": solution.text,
    }


def run_batch(
        solver,
        words: List[Word],
        *,
        solutions: Optional[List[Word]] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        first_guess: Word | str | None = None,
        seed: int | None = None,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back over one dictionary partition.

    `solutions` defaults to every word of the partition. If `sample` is given,
    a seeded random subset of that size is played instead.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases. `progress=True` shows a
    tqdm bar on stderr.
    """
    pool = list(solutions if solutions is not None else words)
    if sample is not None and sample < len(pool):
        random.Random(seed).shuffle(pool)
        pool = pool[:sample]

    out: List[Dict] = []
    cases = tqdm(pool, ncols=80, desc="Solving", unit="game") if progress else pool
    for idx, sol in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, sol, words, first_guess=first_guess,
                     max_attempts=max_attempts, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
