"""
Exception hierarchy for wordsieve.

The core never retries: every failure here is structural and has to be fixed
by correcting the input (constraints, dictionary, solution word).
"""

from __future__ import annotations
from typing import List, Sequence


class WordsieveError(Exception):
    """Base class for all wordsieve errors."""


class InvalidConstraintError(WordsieveError, ValueError):
    """A restriction contradicts itself or the facts already known."""


class SolveError(WordsieveError):
    """
    The solve loop ended without finding the solution.

    `guesses` holds the guesses made before the loop gave up.
    """

    def __init__(self, message: str, guesses: Sequence[str] = ()):
        super().__init__(message)
        self.guesses: List[str] = list(guesses)


class EmptyCandidateSetError(SolveError):
    """No dictionary word is consistent with the feedback (dictionary gap)."""


class BudgetExceededError(SolveError):
    """The attempt budget ran out before the solution was guessed."""
