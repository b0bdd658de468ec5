from pathlib import Path

from apps.cli.run import main


def _wordlists(tmp_path: Path) -> str:
    (tmp_path / "simple.txt").write_text("crane\ntrace\nzonal\nrusty\nsunny\n", encoding="utf-8")
    return str(tmp_path)


def test_cli_rank(tmp_path: Path, capsys):
    rc = main(["--wordlist-dir", _wordlists(tmp_path), "rank", "s!1unyrt", "--limit", "5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "1 viable word(s)" in out and "rusty" in out


def test_cli_rank_rejects_bad_restrictions(tmp_path: Path):
    assert main(["--wordlist-dir", _wordlists(tmp_path), "rank", "a9"]) == 2


def test_cli_solve(tmp_path: Path, capsys):
    rc = main(["--wordlist-dir", _wordlists(tmp_path), "solve", "crane", "--first-word", "trace"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "trace -> crane" in out


def test_cli_solve_missing_word_fails(tmp_path: Path):
    assert main(["--wordlist-dir", _wordlists(tmp_path), "solve", "zzzzz"]) == 1


def test_cli_bench_writes_reports(tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    rc = main(["--wordlist-dir", _wordlists(tmp_path), "bench", "--outdir", str(outdir),
               "--progress", "off", "--max-attempts", "5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Solved 5/5" in out
    assert len(list(outdir.glob("bench_*.csv"))) == 1
    assert len(list(outdir.glob("bench_*_manifest.json"))) == 1


def test_cli_solve_rejects_malformed_solution(tmp_path: Path, capsys):
    assert main(["--wordlist-dir", _wordlists(tmp_path), "solve", "Cr4ne"]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_cli_rank_scoring_overrides(tmp_path: Path, capsys):
    rc = main(["--wordlist-dir", _wordlists(tmp_path), "--right-location-multiplier", "1",
               "rank", "c1rane"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "crane      45.007" in out
