"""
Word list validator for wordsieve.

What this module does:
- Validate a dictionary word list (one word per line, any mix of lengths).
- Enforce formatting rules (lowercase, a–z only, no blank lines).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Count valid words per length, optionally checking that required lengths exist.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordsieve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordlists/simple.txt", required_lengths=[5])
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from ..engine.words import is_clean_token
from .io import iter_lines, sha256_file


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    path: str                  # file path (as given)
    exists: bool               # did the file exist on disk?
    count: int                 # number of VALID lines
    unique_count: int          # unique valid words (after dedupe)
    invalid_lines: int         # number of invalid lines encountered
    sha256: str                # SHA-256 of raw file bytes (empty string if missing)
    by_length: Dict[int, int]  # unique valid words per word length
    passed: bool
    issues: List[str]          # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must already be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    for w in iter_lines(path):
        if is_clean_token(w):
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, required_lengths: Iterable[int] = ()) -> Dict:
    """
    Validate one dictionary word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    required_lengths : iterable of int
        Word lengths that must have at least one valid word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) with counts,
        SHA-256, per-length counts, a strict `passed` flag (non-empty, no
        invalid lines, no duplicates, required lengths present) and `issues`.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordlistReport(path, False, 0, 0, 0, "", {}, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)
    by_length = dict(sorted(Counter(len(w) for w in unique).items()))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    missing = [n for n in required_lengths if by_length.get(n, 0) == 0]
    if missing:
        issues.append(f"no words of length {missing}")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=sha256_file(p),
        by_length=by_length,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        simple.txt: 2315 words (uniq=2315, sha=abc123...) | lengths 5:2315 | OK
    """
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    name = Path(report["path"]).name
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    lengths = " ".join(f"{n}:{c}" for n, c in report["by_length"].items()) or "-"
    return (
        f"{name}: {report['count']} words (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths {lengths} | {status}"
    )
