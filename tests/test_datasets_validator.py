import logging
from pathlib import Path

import pytest
from wordsieve.datasets import (Dictionary, DictionaryCatalog, DictionaryId, load_dictionary,
                                pretty_summary, resolve_dictionary_id, validate_wordlist)
from wordsieve.engine import Word


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "simple.txt"
    _write(p, ["crane", "raise", "stare", "letter"])

    rep = validate_wordlist(str(p), required_lengths=[5, 6])
    assert rep["passed"] is True
    assert rep["by_length"] == {5: 3, 6: 1}
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "simple.txt: 4 words" in s and "5:3 6:1" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "big.txt"
    # uppercase, symbols and blank lines are invalid; 'crane' is duplicated
    p.write_text("crane\nCrane\n???\n\ncrane\n", encoding="utf-8")

    rep = validate_wordlist(str(p), required_lengths=[6])
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("length [6]" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False


def test_dictionary_normalizes_and_partitions(tmp_path: Path):
    p = tmp_path / "simple.txt"
    _write(p, ["Trace", "crane", " crane ", "zonal", "cr4ne", "", "letter"])
    d = load_dictionary(p)
    assert d.partition(5) == (Word("crane"), Word("trace"), Word("zonal"))
    assert d.partition(6) == (Word("letter"),)
    assert d.partition(7) == ()
    assert d.lengths == [5, 6] and len(d) == 4
    assert "crane" in d and Word("zonal") in d
    assert "cranes" not in d and "Crane" not in d


def test_catalog_resolution_and_fallbacks(caplog):
    simple = Dictionary.from_words(["crane", "trace", "letter"])
    wordle = Dictionary.from_words(["crane"])
    catalog = DictionaryCatalog({DictionaryId.SIMPLE: simple, DictionaryId.WORDLE: wordle})

    assert catalog.partition(DictionaryId.WORDLE, 5) == (Word("crane"),)
    # wordle only serves 5-letter words
    assert catalog.partition(DictionaryId.WORDLE, 6) == (Word("letter"),)
    with caplog.at_level(logging.WARNING):
        assert catalog.get(DictionaryId.HUGE, 5) is simple
    assert "huge" in caplog.text

    with pytest.raises(ValueError):
        DictionaryCatalog({DictionaryId.BIG: simple})


def test_resolve_dictionary_id(caplog):
    assert resolve_dictionary_id("Wordle") is DictionaryId.WORDLE
    assert resolve_dictionary_id(None) is DictionaryId.SIMPLE
    with caplog.at_level(logging.WARNING):
        assert resolve_dictionary_id("klingon") is DictionaryId.SIMPLE
    assert "klingon" in caplog.text


def test_catalog_from_directory(tmp_path: Path):
    _write(tmp_path / "simple.txt", ["crane", "trace"])
    _write(tmp_path / "big.txt", ["crane", "trace", "zonal"])
    catalog = DictionaryCatalog.from_directory(tmp_path)
    assert DictionaryId.BIG in catalog and DictionaryId.HUGE not in catalog
    assert len(catalog.partition(DictionaryId.BIG, 5)) == 3

    with pytest.raises(FileNotFoundError):
        DictionaryCatalog.from_directory(tmp_path / "missing")
