from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

from dotenv import load_dotenv

from .datagen import default_corpus_path

load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


MODE = os.getenv("PARBENCH_MODE", "process")
WORKERS = _optional_int(os.getenv("PARBENCH_WORKERS"))

FILTER_SORT_COUNT = int(os.getenv("PARBENCH_FILTER_SORT_COUNT", 5_000_000))
MIN_MAX_COUNT = int(os.getenv("PARBENCH_MIN_MAX_COUNT", 5_000_000))
TEXT_LINES = int(os.getenv("PARBENCH_TEXT_LINES", 100_000))
SUM_ARRAYS = int(os.getenv("PARBENCH_SUM_ARRAYS", 5))
SUM_LENGTH = int(os.getenv("PARBENCH_SUM_LENGTH", 1_000_000))
MATH_COUNT = int(os.getenv("PARBENCH_MATH_COUNT", 3_000_000))
FACTORIAL_MAX = int(os.getenv("PARBENCH_FACTORIAL_MAX", 20))

CORPUS_PATH = os.getenv("PARBENCH_CORPUS_PATH", default_corpus_path())
LOG_DIR = os.getenv("PARBENCH_LOG_DIR", "")

MODES = ("process", "thread")


@dataclass(frozen=True)
class Settings:
    """Sizes, seeds and executor options for one benchmark run."""

    mode: str = MODE
    workers: Optional[int] = WORKERS
    filter_sort_count: int = FILTER_SORT_COUNT
    filter_sort_seed: int = 1
    factorial_max: int = FACTORIAL_MAX
    min_max_count: int = MIN_MAX_COUNT
    min_max_seed: int = 2
    text_lines: int = TEXT_LINES
    corpus_path: str = CORPUS_PATH
    sum_arrays: int = SUM_ARRAYS
    sum_length: int = SUM_LENGTH
    sum_seed_base: int = 100
    math_count: int = MATH_COUNT
    math_seed: int = 5

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.min_max_count < 1:
            # Min/max has no result for an empty array.
            raise ValueError(f"min_max_count must be >= 1, got {self.min_max_count}")

    def scaled(self, factor: float) -> "Settings":
        """Return a copy with every dataset size multiplied by `factor`.

        The factorial bound and the number of arrays are left untouched. Raises
        ValueError when the min/max dataset would end up empty.
        """
        if factor <= 0:
            raise ValueError(f"scale factor must be > 0, got {factor}")

        def s(n: int) -> int:
            return int(n * factor)

        return replace(
            self,
            filter_sort_count=s(self.filter_sort_count),
            min_max_count=s(self.min_max_count),
            text_lines=s(self.text_lines),
            sum_length=s(self.sum_length),
            math_count=s(self.math_count),
        )


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment defaults plus non-None overrides."""
    fields = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**fields)
