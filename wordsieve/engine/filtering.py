"""
Candidate filtering against a ConstraintSet.

Given:
  - a dictionary partition (words of one length)
  - the constraints known so far

Return:
  - the words still consistent with every fact, sorted by word order.

This is the step that turns accumulated knowledge into a shrinking
candidate set. It's a pure predicate over each word, so shards of the
partition can be filtered independently and concatenated.
"""

from __future__ import annotations
from functools import partial
from typing import Iterable, List, Sequence

from .constraints import ConstraintSet
from .parallel import map_shards
from .words import Word


def is_candidate(word: Word, constraints: ConstraintSet) -> bool:
    """
    True if `word` could still be the solution. Checks run in this order:
      1) every required letter is present
      2) every fixed position matches exactly
      3) no excluded (position, letter) pair occurs
      4) every distinct letter is in the allowed pool
    """
    letters = word.letter_counts
    text = word.text

    if not constraints.required_letters.issubset(letters.keys()):
        return False

    for pos, letter in constraints.fixed:
        if pos >= len(text) or text[pos] != letter:
            return False

    for pos, letter in constraints.excluded:
        if pos < len(text) and text[pos] == letter:
            return False

    return constraints.allowed_letters.issuperset(letters.keys())


def _filter_shard(words: Sequence[Word], constraints: ConstraintSet) -> List[Word]:
    return [w for w in words if is_candidate(w, constraints)]


def filter_candidates(words: Iterable[Word], constraints: ConstraintSet, *,
                      workers: int = 1) -> List[Word]:
    """
    Keep the words of `words` that satisfy `constraints`.

    Args:
      words       : dictionary partition (any order, no duplicates expected)
      constraints : the current ConstraintSet
      workers     : >1 filters shards in a process pool

    Returns:
      List[Word] sorted by word order (deterministic, not by score).
    """
    pool = list(words)
    parts = map_shards(partial(_filter_shard, constraints=constraints), pool, workers)
    out: List[Word] = []
    for part in parts:
        out.extend(part)
    return sorted(out)
