"""
Dictionary snapshots and dictionary identifiers.

A Dictionary is an immutable, already-normalized snapshot: word length ->
sorted tuple of Word. It's loaded once and shared read-only for the lifetime
of a request or solve.

Dictionary names coming from the outside ("simple", "wordle", ...) are
resolved once at the boundary into a DictionaryId; the engine never sees raw
strings. The WORDLE list only exists for 5-letter words, other lengths fall
back to the default list.
"""

from __future__ import annotations
import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..engine.words import Word, is_clean_token
from .io import iter_lines

log = logging.getLogger(__name__)


class DictionaryId(str, Enum):
    SIMPLE = "simple"
    WORDLE = "wordle"
    BIG = "big"
    HUGE = "huge"


DEFAULT_DICTIONARY = DictionaryId.SIMPLE
WORDLE_LENGTH = 5


def resolve_dictionary_id(name: str | DictionaryId | None) -> DictionaryId:
    """Map a dictionary name to its id; unknown names fall back to SIMPLE (logged)."""
    if isinstance(name, DictionaryId):
        return name
    if name is None or not name.strip():
        return DEFAULT_DICTIONARY
    try:
        return DictionaryId(name.strip().lower())
    except ValueError:
        pass
    log.warning("Unknown dictionary %r, using %s", name, DEFAULT_DICTIONARY.value)
    return DEFAULT_DICTIONARY


@dataclass(frozen=True)
class Dictionary:
    words_by_length: Mapping[int, Tuple[Word, ...]] = field(
        default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        """
        Normalize (strip + lowercase), drop non a–z tokens, dedupe and sort.
        """
        buckets: Dict[int, set] = {}
        for raw in words:
            w = raw.strip().lower()
            if not is_clean_token(w):
                continue
            buckets.setdefault(len(w), set()).add(w)
        frozen = {n: tuple(Word(w) for w in sorted(ws)) for n, ws in sorted(buckets.items())}
        return cls(MappingProxyType(frozen))

    def partition(self, length: int) -> Tuple[Word, ...]:
        """All words of `length` letters (empty tuple if none)."""
        return self.words_by_length.get(length, ())

    @property
    def lengths(self) -> List[int]:
        return sorted(self.words_by_length)

    def __len__(self) -> int:
        return sum(len(ws) for ws in self.words_by_length.values())

    def __contains__(self, word: object) -> bool:
        if isinstance(word, str):
            if not is_clean_token(word):
                return False
            word = Word(word)
        if not isinstance(word, Word):
            return False
        ws = self.partition(len(word))
        i = bisect_left(ws, word)
        return i < len(ws) and ws[i] == word


def load_dictionary(path: Path | str) -> Dictionary:
    """Read a one-word-per-line file into a Dictionary snapshot."""
    return Dictionary.from_words(iter_lines(path))


class DictionaryCatalog:
    """
    The set of dictionaries available to the service, keyed by DictionaryId.
    The default dictionary must always be present.
    """

    FILENAMES = {
        DictionaryId.SIMPLE: "simple.txt",
        DictionaryId.WORDLE: "wordle.txt",
        DictionaryId.BIG: "big.txt",
        DictionaryId.HUGE: "huge.txt",
    }

    def __init__(self, dictionaries: Mapping[DictionaryId, Dictionary]):
        if DEFAULT_DICTIONARY not in dictionaries:
            raise ValueError(f"Catalog needs the default dictionary {DEFAULT_DICTIONARY.value!r}")
        self._dictionaries = dict(dictionaries)

    @classmethod
    def from_directory(cls, directory: Path | str) -> "DictionaryCatalog":
        """
        Load every known word list found in `directory`. Missing files are
        skipped; simple.txt is required.
        """
        d = Path(directory)
        found: Dict[DictionaryId, Dictionary] = {}
        for did, fname in cls.FILENAMES.items():
            p = d / fname
            if p.exists():
                found[did] = load_dictionary(p)
                log.info("Loaded %s dictionary: %d words from %s", did.value, len(found[did]), p)
        if DEFAULT_DICTIONARY not in found:
            raise FileNotFoundError(d / cls.FILENAMES[DEFAULT_DICTIONARY])
        return cls(found)

    def __contains__(self, did: DictionaryId) -> bool:
        return did in self._dictionaries

    def get(self, did: DictionaryId, length: int) -> Dictionary:
        """
        Pick the dictionary for (id, length). WORDLE only serves 5-letter words;
        ids that aren't loaded fall back to the default dictionary.
        """
        if did is DictionaryId.WORDLE and length != WORDLE_LENGTH:
            did = DEFAULT_DICTIONARY
        if did not in self._dictionaries:
            log.warning("Dictionary %s not loaded, using %s", did.value, DEFAULT_DICTIONARY.value)
            did = DEFAULT_DICTIONARY
        return self._dictionaries[did]

    def partition(self, did: DictionaryId, length: int) -> Tuple[Word, ...]:
        return self.get(did, length).partition(length)
