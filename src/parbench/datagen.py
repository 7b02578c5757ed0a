from __future__ import annotations

import os
import tempfile

import numpy as np

CORPUS_FILENAME = "plinq_big_text.txt"

# Upper bound (exclusive) of generated ints: a non-negative 32-bit random.
INT_MAX = 2**31 - 1


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")


def generate_ints(count: int, seed: int) -> np.ndarray:
    """Deterministic array of `count` ints in [0, 2**31 - 1) seeded by `seed`."""
    _check_count(count)
    rng = np.random.default_rng(seed)
    return rng.integers(0, INT_MAX, size=count, dtype=np.int64)


def generate_doubles(count: int, seed: int) -> np.ndarray:
    """Deterministic array of `count` floats in [0, 1000) seeded by `seed`."""
    _check_count(count)
    rng = np.random.default_rng(seed)
    return rng.random(count) * 1000.0


def default_corpus_path() -> str:
    return os.path.join(tempfile.gettempdir(), CORPUS_FILENAME)


def corpus_line(i: int) -> str:
    return f"This is a sample line number {i} with some random vowels aeio uAEIOU аеиоу АЕИОУ."


def ensure_text_corpus(path: str, line_count: int) -> bool:
    """Create the synthetic text corpus at `path` unless a file already exists.

    Returns True when the file was written, False when an existing file was
    left untouched. OSError from the filesystem propagates.
    """
    if line_count < 0:
        raise ValueError(f"line_count must be >= 0, got {line_count}")
    if os.path.exists(path):
        return False
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for i in range(line_count):
            f.write(corpus_line(i) + "\n")
    return True
