"""
Compact restriction strings -> ConstraintSet.

Grammar (case-insensitive, whitespace ignored):

    restrictions := entry*
    entry        := LETTER DIGIT* ( "!" DIGIT+ )?

  - every LETTER listed is in the allowed pool; unlisted letters are absent
  - digits right after a letter fix it at those 1-based positions
  - "!" followed by digits marks the letter present but NOT at those positions
  - a letter with any positions (fixed or excluded) is required

Examples (length 5):
    "abcde"        -> only a..e may be used, nothing required
    "s!1unyrt"     -> 's' required, not first; allowed {s,u,n,y,r,t}
    "c1r2a3n4e5"   -> "crane" fully fixed

An empty string means nothing is known yet.
"""

from __future__ import annotations
import re
from typing import Set

from ..errors import InvalidConstraintError
from .constraints import ConstraintSet

_ENTRY = re.compile(r"([a-z])(\d*)(?:!(\d+))?")


def _positions(digits: str, length: int, text: str) -> Set[int]:
    out: Set[int] = set()
    for d in digits:
        pos = int(d)
        if pos < 1 or pos > length:
            raise InvalidConstraintError(
                f"Position {pos} out of range 1..{length} in {text!r}")
        out.add(pos - 1)
    return out


def parse_restrictions(text: str, length: int) -> ConstraintSet:
    """
    Parse a restriction string for words of `length` letters.

    Raises:
      InvalidConstraintError on unknown characters, positions outside the
      word, or contradictory facts.
    """
    cleaned = "".join(text.split()).lower()
    if not cleaned:
        return ConstraintSet()

    allowed: Set[str] = set()
    required: Set[str] = set()
    fixed = set()
    excluded = set()

    idx = 0
    while idx < len(cleaned):
        m = _ENTRY.match(cleaned, idx)
        if m is None:
            raise InvalidConstraintError(
                f"Unexpected {cleaned[idx]!r} at offset {idx} in restriction {text!r}")
        letter, fixed_digits, excluded_digits = m.group(1), m.group(2), m.group(3) or ""
        allowed.add(letter)
        for pos in _positions(fixed_digits, length, text):
            fixed.add((pos, letter))
            required.add(letter)
        for pos in _positions(excluded_digits, length, text):
            excluded.add((pos, letter))
            required.add(letter)
        idx = m.end()

    return ConstraintSet(required_letters=required, fixed=fixed,
                         excluded=excluded, allowed_letters=allowed)
