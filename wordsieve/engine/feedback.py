"""
Puzzle feedback for a single (guess, solution) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

The rule is duplicate-aware and two-pass:
  1) First pass marks all greens and counts the solution letters that were
     not matched exactly.
  2) Second pass walks the guess left to right and marks a yellow only while
     the letter still has unmatched copies in the solution.

With solution "abbey", the guess "kebab" scores "-YGYY": the green 'b' at
index 2 uses one 'b', the trailing 'b' takes the other one as a yellow.
"""

from __future__ import annotations
from collections import Counter
from typing import Literal, Union

from .words import Word

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

GREEN = "G"
YELLOW = "Y"
GRAY = "-"

WordLike = Union[Word, str]


def _text(w: WordLike) -> str:
    return w.text if isinstance(w, Word) else w


def feedback(guess: WordLike, solution: WordLike) -> str:
    """
    Compute the feedback pattern for `guess` against `solution`.

    Raises:
      ValueError if the two words differ in length.

    Examples:
      feedback("belle", "level") -> "-GYYY"
      feedback("trace", "crane") -> "-GGYG"
    """
    g_text = _text(guess)
    s_text = _text(solution)
    if len(g_text) != len(s_text):
        raise ValueError(f"Guess and solution must be the same length: {g_text!r} vs {s_text!r}")

    pattern = [GRAY] * len(g_text)

    # Pass 1: greens, plus leftover counts of unmatched solution letters.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(g_text, s_text)):
        if g == s:
            pattern[i] = GREEN
        else:
            remaining[s] += 1

    # Pass 2: yellows capped by the true multiplicity in the solution.
    for i, g in enumerate(g_text):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(c == GREEN for c in pattern)
