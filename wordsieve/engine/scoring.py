"""
Heuristic next-guess scoring.

For a word w, a FrequencyModel m (built over the current candidates) and a
SolveConfig c:

    base  = sum over DISTINCT letters L of w:
              m.weight(L) * c.right_location_multiplier   if L sits at a known-correct
                                                          position of w
              m.weight(L)                                 otherwise
    base *= c.uniqueness_multiplier                       if w has no repeated letters
    score = base + c.viable_word_preference * m.total_candidates
                                                          if w could itself be the answer

"Known-correct" means the letter is fixed there, or required and not excluded
there (see ConstraintSet.is_known_correct). The blend is linear and fixed by
the config; nothing is learned.

Higher is better. Ranking orders by descending score, then word text, so
equal scores always come back in the same order.
"""

from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .filtering import is_candidate
from .frequency import FrequencyModel
from .words import Word

if TYPE_CHECKING:
    from ..solvers.config import SolveConfig


@dataclass(frozen=True)
class ScoredWord:
    word: Word
    score: float

    @property
    def sort_key(self) -> Tuple[float, str]:
        return (-self.score, self.word.text)

    def __lt__(self, other: "ScoredWord") -> bool:
        return self.sort_key < other.sort_key


def score_word(word: Word, model: FrequencyModel, config: "SolveConfig") -> float:
    """Score one word as a next guess (see module docstring for the formula)."""
    constraints = model.constraints
    right = set()
    for i, ch in enumerate(word.text):
        if constraints.is_known_correct(i, ch):
            right.add(ch)

    base = 0.0
    for ch in word.letter_counts:
        w = model.weight(ch)
        base += w * config.right_location_multiplier if ch in right else w

    if not word.has_repeats:
        base *= config.uniqueness_multiplier

    if is_candidate(word, constraints):
        base += config.viable_word_preference * model.total_candidates
    return base


def rank_words(words: Iterable[Word], model: FrequencyModel, config: "SolveConfig",
               limit: Optional[int] = None) -> List[ScoredWord]:
    """
    Score `words` and return the best ones, best first.

    An empty model (no candidates) scores nothing and returns [].
    `limit=None` returns every word.
    """
    if model.total_candidates == 0:
        return []
    scored = (ScoredWord(w, score_word(w, model, config)) for w in words)
    if limit is None:
        return sorted(scored, key=lambda s: s.sort_key)
    if limit <= 0:
        return []
    return heapq.nsmallest(limit, scored, key=lambda s: s.sort_key)
