# apps/cli/run.py
"""
CLI entry point for wordsieve.

Subcommands:
  rank RESTRICTIONS  rank the words matching a restriction string and list
                     the best fishing words
  solve SOLUTION     play the puzzle for SOLUTION and print the guesses
  bench              solve a (seeded) sample of a dictionary partition and write:
                       - CSV:  per-game results + guess/pattern history columns
                       - JSON: manifest with config, word list hash, git commit

Word lists are read from --wordlist-dir (simple.txt required; wordle.txt,
big.txt, huge.txt optional) and validated before loading.

Run from the repository root:
    python -m apps.cli.run rank "s!1unyrt" --length 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from wordsieve.datasets import (DictionaryCatalog, pretty_summary, resolve_dictionary_id,
                                validate_wordlist)
from wordsieve.errors import InvalidConstraintError, SolveError
from wordsieve.harness import run_batch, summarize, write_csv, write_manifest
from wordsieve.harness.core import DEFAULT_MAX_ATTEMPTS
from wordsieve.harness.io import git_commit_or_unknown, timestamp_id
from wordsieve.service import WordService
from wordsieve.solvers import MAX_PERMUTATION_THRESHOLD, Preset, create_solver, get_solver_ids, \
    resolve_config

TUNING_FLAGS = ("right_location_multiplier", "uniqueness_multiplier",
                "viable_word_preference", "partition_threshold")


def _load_catalog(wordlist_dir: str, length: int) -> tuple[DictionaryCatalog, dict]:
    """
    Validate every known word list in the directory (prints one line each),
    then load them into a catalog.
    """
    reports = {}
    for did, fname in DictionaryCatalog.FILENAMES.items():
        p = Path(wordlist_dir) / fname
        if p.exists():
            rep = validate_wordlist(str(p), required_lengths=[length])
            print(pretty_summary(rep))
            reports[did.value] = rep
    return DictionaryCatalog.from_directory(wordlist_dir), reports


def _tuning(args) -> dict:
    """Per-request overrides of the preset; unset flags stay None."""
    return {name: getattr(args, name) for name in TUNING_FLAGS}


def _cmd_rank(args, service: WordService, reports: dict) -> int:
    try:
        report = service.valid_words(args.restrictions, args.length, args.dictionary,
                                     args.limit, args.config, **_tuning(args))
    except InvalidConstraintError as e:
        print(f"Invalid restrictions: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    print(f"{report.total_candidates} viable word(s)")
    for sw in report.ranked_words:
        print(f"  {sw.word.text}  {sw.score:10.3f}")
    if report.fishing_words:
        print("Fishing words:")
        for sw in report.fishing_words:
            print(f"  {sw.word.text}  {sw.score:10.3f}")
    if report.letter_weights:
        weights = " ".join(f"{ch}={n}" for ch, n in sorted(report.letter_weights.items()))
        print(f"Letter weights: {weights}")
    return 0


def _cmd_solve(args, service: WordService, reports: dict) -> int:
    try:
        guesses = service.solve_word(args.solution, args.first_word,
                                     config=args.config,
                                     permutation_threshold=args.permutation_threshold,
                                     dictionary=args.dictionary,
                                     solver_id=args.solver,
                                     max_attempts=args.max_attempts,
                                     **_tuning(args))
    except SolveError as e:
        print(f"Failed: {e}", file=sys.stderr)
        if e.guesses:
            print(" -> ".join(e.guesses))
        return 1
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    print(" -> ".join(guesses))
    print(f"Solved in {len(guesses)} guess(es)")
    return 0


def _cmd_bench(args, service: WordService, reports: dict) -> int:
    config = resolve_config(args.config, args.permutation_threshold, **_tuning(args))
    solver = create_solver(args.solver, config, workers=args.workers)
    did = resolve_dictionary_id(args.dictionary)
    words = list(service.catalog.partition(did, args.length))
    if not words:
        print(f"No words of length {args.length} in {did.value}", file=sys.stderr)
        return 1

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(solver, words, max_attempts=args.max_attempts,
                        first_guess=args.first_word or None, seed=args.seed,
                        sample=args.sample, progress=progress)
    for r in results:
        r["config"] = config.name

    stats = summarize(results)
    print(f"Solved {stats['solved']}/{stats['num_cases']} | mean guesses (solved) "
          f"{stats['mean_guesses']:.3f} | worst {stats['max_guesses']}")
    if stats["failed_by_reason"]:
        print(f"Failures: {stats['failed_by_reason']}")

    # Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"bench_{run_id}.csv"
    manifest_path = outdir / f"bench_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=args.max_attempts)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {k: v for k, v in vars(args).items() if k != "func"},
        "solve_config": asdict(config),
        "wordlist": reports.get(did.value),
        "summary": stats,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())
    presets = ", ".join(p.value for p in Preset)

    ap = argparse.ArgumentParser(description="wordsieve: filter, rank and solve word puzzles")
    ap.add_argument("--wordlist-dir", default="wordlists",
                    help="directory holding simple.txt (and optionally wordle/big/huge.txt)")
    ap.add_argument("--dictionary", default="simple", help="simple, wordle, big or huge")
    ap.add_argument("--config", default=Preset.OPTIMAL_MEAN.value, help=f"preset ({presets})")
    ap.add_argument("--workers", type=int, default=1, help="processes for filtering/scoring")
    tuning = ap.add_argument_group("scoring overrides", "replace single values of the --config preset")
    tuning.add_argument("--right-location-multiplier", type=float,
                        help="weight factor for letters at a known-correct position")
    tuning.add_argument("--uniqueness-multiplier", type=float,
                        help="score factor for words without repeated letters")
    tuning.add_argument("--viable-word-preference", type=float,
                        help="bonus per candidate for words that could be the answer")
    tuning.add_argument("--partition-threshold", type=int,
                        help="largest candidate set scored by exhaustive partitioning")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = ap.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="rank words matching a restriction string")
    rank.add_argument("restrictions", help='e.g. "s!1unyrt" (letter, positions, !excluded)')
    rank.add_argument("--length", type=int, default=5, help="word length")
    rank.add_argument("--limit", type=int, default=20, help="max ranked words (capped at 100)")
    rank.set_defaults(func=_cmd_rank)

    def _solve_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--first-word", default="", help="opening guess used verbatim")
        p.add_argument("--solver", default="remaining", help=f"solver id (one of: {solver_choices})")
        p.add_argument("--permutation-threshold", type=int, default=MAX_PERMUTATION_THRESHOLD,
                       help=f"max guesses evaluated exhaustively (capped at {MAX_PERMUTATION_THRESHOLD})")
        p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)

    solve = sub.add_parser("solve", help="solve the puzzle for a known solution")
    solve.add_argument("solution")
    _solve_args(solve)
    solve.set_defaults(func=_cmd_solve)

    bench = sub.add_parser("bench", help="solve many words and write CSV + manifest")
    bench.add_argument("--length", type=int, default=5, help="word length")
    bench.add_argument("--sample", type=int, help="solve only a seeded sample of the partition")
    bench.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    bench.add_argument("--outdir", default="reports", help="directory for output files")
    bench.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                       help="tqdm progress bar on stderr (auto = only on a terminal)")
    _solve_args(bench)
    bench.set_defaults(func=_cmd_bench)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    length = getattr(args, "length", None)
    if length is None:
        length = len(args.solution.strip())
    catalog, reports = _load_catalog(args.wordlist_dir, length)
    service = WordService(catalog, workers=args.workers)

    return args.func(args, service, reports)


if __name__ == "__main__":
    sys.exit(main())
