"""
Accumulated knowledge about the hidden word.

A ConstraintSet records four kinds of facts:
  - required_letters : letters known to be in the solution
  - fixed            : (position, letter) pairs confirmed exactly (greens)
  - excluded         : (position, letter) pairs known NOT to co-occur
  - allowed_letters  : pool of letters still permitted anywhere; letters
                       proven absent are removed from it

Positions are 0-based. Instances are frozen and hashable, so they can key a
result cache. Every merge returns a NEW instance and facts only ever tighten.
Contradictions are rejected when they are introduced (InvalidConstraintError),
never silently dropped.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, Tuple

from ..errors import InvalidConstraintError
from .feedback import GRAY, GREEN, YELLOW
from .words import ALPHABET, Word

Fact = Tuple[int, str]  # (position, letter)

_FULL_ALPHABET: FrozenSet[str] = frozenset(ALPHABET)


def _check_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in _FULL_ALPHABET:
        raise InvalidConstraintError(f"Not a lowercase letter: {letter!r}")
    return letter


def _check_position(position: int) -> int:
    if not isinstance(position, int) or position < 0:
        raise InvalidConstraintError(f"Position must be a non-negative int: {position!r}")
    return position


@dataclass(frozen=True)
class ConstraintSet:
    required_letters: FrozenSet[str] = frozenset()
    fixed: FrozenSet[Fact] = frozenset()
    excluded: FrozenSet[Fact] = frozenset()
    allowed_letters: FrozenSet[str] = _FULL_ALPHABET

    def __post_init__(self):
        # Accept any iterable on construction; store frozensets.
        object.__setattr__(self, "required_letters", frozenset(self.required_letters))
        object.__setattr__(self, "fixed", frozenset(self.fixed))
        object.__setattr__(self, "excluded", frozenset(self.excluded))
        object.__setattr__(self, "allowed_letters", frozenset(self.allowed_letters))
        self._validate()

    def _validate(self) -> None:
        for letter in self.required_letters | self.allowed_letters:
            _check_letter(letter)

        seen: Dict[int, str] = {}
        for pos, letter in self.fixed:
            _check_position(pos)
            _check_letter(letter)
            if pos in seen and seen[pos] != letter:
                raise InvalidConstraintError(
                    f"Position {pos + 1} fixed to both {seen[pos]!r} and {letter!r}")
            seen[pos] = letter
            if letter not in self.allowed_letters:
                raise InvalidConstraintError(
                    f"Letter {letter!r} fixed at position {pos + 1} but excluded from the word")

        for pos, letter in self.excluded:
            _check_position(pos)
            _check_letter(letter)
            if (pos, letter) in self.fixed:
                raise InvalidConstraintError(
                    f"Letter {letter!r} both fixed and excluded at position {pos + 1}")

        missing = self.required_letters - self.allowed_letters
        if missing:
            raise InvalidConstraintError(
                f"Required letter(s) {sorted(missing)} are excluded from the word")

    # ---- views ----

    @property
    def fixed_positions(self) -> Dict[int, str]:
        return dict(self.fixed)

    @property
    def position_exclusions(self) -> Dict[int, FrozenSet[str]]:
        out: Dict[int, set] = {}
        for pos, letter in self.excluded:
            out.setdefault(pos, set()).add(letter)
        return {pos: frozenset(letters) for pos, letters in out.items()}

    @property
    def absent_letters(self) -> FrozenSet[str]:
        return _FULL_ALPHABET - self.allowed_letters

    def is_known_correct(self, position: int, letter: str) -> bool:
        """
        True if `letter` at `position` is already known to be right, or could
        be: it's fixed there, or it's required and not excluded there.
        """
        if (position, letter) in self.fixed:
            return True
        return letter in self.required_letters and (position, letter) not in self.excluded

    # ---- monotonic merges (each returns a new ConstraintSet) ----

    def require(self, letter: str) -> "ConstraintSet":
        return replace(self, required_letters=self.required_letters | {_check_letter(letter)})

    def fix(self, position: int, letter: str) -> "ConstraintSet":
        """Exact match: fixes the letter and makes it required."""
        fact = (_check_position(position), _check_letter(letter))
        return replace(self,
                       fixed=self.fixed | {fact},
                       required_letters=self.required_letters | {letter})

    def exclude_at(self, position: int, letter: str) -> "ConstraintSet":
        fact = (_check_position(position), _check_letter(letter))
        return replace(self, excluded=self.excluded | {fact})

    def exclude_letter(self, letter: str) -> "ConstraintSet":
        """Global absence: the letter may not appear anywhere."""
        return replace(self, allowed_letters=self.allowed_letters - {_check_letter(letter)})

    def restrict_to(self, letters: Iterable[str]) -> "ConstraintSet":
        """Shrink the allowed pool to `letters` (intersection)."""
        return replace(self, allowed_letters=self.allowed_letters & frozenset(letters))

    def merge(self, other: "ConstraintSet") -> "ConstraintSet":
        return ConstraintSet(
            required_letters=self.required_letters | other.required_letters,
            fixed=self.fixed | other.fixed,
            excluded=self.excluded | other.excluded,
            allowed_letters=self.allowed_letters & other.allowed_letters,
        )

    def merge_feedback(self, guess: Word | str, pattern: str) -> "ConstraintSet":
        """
        Fold one (guess, pattern) observation into the constraints.

          G -> fixed position (and required)
          Y -> required, excluded at this position
          - -> if the same letter scored G/Y elsewhere in this guess the
               solution has fewer copies than guessed, so it is only excluded
               at this position; otherwise the letter is absent everywhere.
        """
        text = guess.text if isinstance(guess, Word) else guess
        if len(text) != len(pattern):
            raise InvalidConstraintError(
                f"Pattern {pattern!r} does not match guess {text!r} in length")

        present = {ch for ch, p in zip(text, pattern) if p in (GREEN, YELLOW)}
        required = set(self.required_letters)
        fixed = set(self.fixed)
        excluded = set(self.excluded)
        allowed = set(self.allowed_letters)

        for i, (ch, p) in enumerate(zip(text, pattern)):
            if p == GREEN:
                fixed.add((i, ch))
                required.add(ch)
            elif p == YELLOW:
                required.add(ch)
                excluded.add((i, ch))
            elif p == GRAY:
                if ch in present:
                    excluded.add((i, ch))
                else:
                    allowed.discard(ch)
            else:
                raise InvalidConstraintError(f"Unknown feedback mark {p!r} in {pattern!r}")

        return ConstraintSet(required_letters=required, fixed=fixed,
                             excluded=excluded, allowed_letters=allowed)

    @classmethod
    def from_history(cls, history: Iterable[Tuple[Word | str, str]]) -> "ConstraintSet":
        """Build constraints from a sequence of (guess, pattern) pairs."""
        out = cls()
        for guess, pattern in history:
            out = out.merge_feedback(guess, pattern)
        return out
