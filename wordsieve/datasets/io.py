from __future__ import annotations
import hashlib
from pathlib import Path
from typing import Iterator


def iter_lines(p: Path | str) -> Iterator[str]:
    """
    Yield the lines of a UTF-8 word list with surrounding whitespace removed.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            yield raw.strip()


def sha256_file(p: Path | str, chunk_size: int = 8192) -> str:
    """SHA-256 of the raw file bytes (for manifests)."""
    h = hashlib.sha256()
    with Path(p).open("rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()
