"""
Immutable word tokens.

A Word is built once per dictionary entry (or per guess) and never mutated.
Ordering and equality use the text only, so sorted collections of words are
alphabetical and deterministic.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Dict, FrozenSet

ALPHABET = ascii_lowercase
_ALPHABET_SET = frozenset(ALPHABET)


def is_clean_token(text: str) -> bool:
    """True if `text` is a non-empty run of lowercase a–z letters."""
    return bool(text) and set(text) <= _ALPHABET_SET


@dataclass(frozen=True, order=True)
class Word:
    text: str
    letter_counts: Dict[str, int] = field(init=False, compare=False, repr=False, hash=False)

    def __post_init__(self):
        if not isinstance(self.text, str) or not is_clean_token(self.text):
            raise ValueError(f"Word must be lowercase a-z letters only: {self.text!r}")
        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "letter_counts", dict(Counter(self.text)))

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def distinct_letters(self) -> FrozenSet[str]:
        return frozenset(self.letter_counts)

    @property
    def has_repeats(self) -> bool:
        return len(self.letter_counts) < len(self.text)
