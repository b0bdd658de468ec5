"""
Reporting helpers for benchmark runs.

- summarize:      aggregate counts and guess statistics for a batch.
- write_csv:      one row per solve, with the guess/pattern history spread
                  over fixed columns.
- write_manifest: JSON record of what was run (args, config, word list hash).
- timestamp_id / git_commit_or_unknown: identifiers for reproducibility.

Patterns in the CSV start with an apostrophe so spreadsheet apps keep
"-GYY-" as text instead of parsing it as a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Union

PathLike = Union[str, Path]

BASE_COLUMNS = ["solver", "config", "N", "answer", "success", "status", "reason",
                "guesses", "time_ms"]


def _as_text(patt: str) -> str:
    return "'" + patt if patt else patt


def history_columns(max_attempts: int) -> List[str]:
    cols: List[str] = []
    for i in range(1, max_attempts + 1):
        cols += [f"guess_{i}", f"patt_{i}"]
    return cols


def summarize(results: Iterable[Dict]) -> Dict:
    """
    Aggregate a batch: totals, failure reasons and the guess-count histogram
    of solved cases.
    """
    results = list(results)
    solved = [r for r in results if r["success"]]
    reasons = Counter(r.get("reason") for r in results if not r["success"])
    counts = [r["guesses"] for r in solved]
    return {
        "num_cases": len(results),
        "solved": len(solved),
        "failed_by_reason": dict(reasons),
        "mean_guesses": sum(counts) / len(counts) if counts else 0.0,
        "max_guesses": max(counts) if counts else 0,
        "histogram": dict(sorted(Counter(counts).items())),
    }


def _row(r: Dict, max_attempts: int) -> Dict:
    row = {
        "solver": r.get("solver_id", "?"),
        "config": r.get("config", ""),
        "N": len(r["answer"]),
        "answer": r["answer"],
        "success": r["success"],
        "status": r["status"],
        "reason": r.get("reason") or "",
        "guesses": r["guesses"],
        "time_ms": round(float(r["time_ms"]), 3),
    }
    hist = list(r.get("history", []))[:max_attempts]
    hist += [("", "")] * (max_attempts - len(hist))
    for i, (g, patt) in enumerate(hist, start=1):
        row[f"guess_{i}"] = g
        row[f"patt_{i}"] = _as_text(patt)
    return row


def write_csv(results: Iterable[Dict], path: PathLike, max_attempts: int) -> str:
    """Write one CSV row per solve result; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_COLUMNS + history_columns(max_attempts))
        w.writeheader()
        w.writerows(_row(r, max_attempts) for r in results)
    return str(p)


def write_manifest(manifest: Dict, path: PathLike) -> str:
    """Dump the manifest as indented JSON; non-JSON values are stringified."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
