"""The six benchmark workloads.

Each workload comes as a sequential function and a parallel function with the
same result. Parallel variants split the input into contiguous chunks (or
items) and hand them to a `concurrent.futures` pool via `parbench.parallel`;
per-chunk helpers live at module scope so process pools can pickle them.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .parallel import chunk_ranges, parallel_map, parallel_map_batched

VOWELS = "aeiouAEIOUаеёиоуыэюяАЕЁИОУЫЭЮЯ"
_VOWEL_TABLE = str.maketrans("", "", VOWELS)


def _chunks(data: np.ndarray, workers: Optional[int]) -> List[np.ndarray]:
    return [data[s:e] for s, e in chunk_ranges(len(data), workers)]


# --- 1. Filter + sort ---

def _filter_sort_chunk(data: np.ndarray) -> np.ndarray:
    # Ascending; callers reverse once at the end.
    kept = data[(data % 2 == 0) & (data > 1000)]
    return np.sort(kept, kind="stable")


def filter_sort_sequential(data: Sequence[int]) -> np.ndarray:
    """Even values greater than 1000, sorted descending."""
    arr = np.asarray(data)
    return _filter_sort_chunk(arr)[::-1]


def filter_sort_parallel(data: Sequence[int], mode: str = "process", workers: Optional[int] = None) -> np.ndarray:
    arr = np.asarray(data)
    parts = parallel_map(_filter_sort_chunk, _chunks(arr, workers), mode=mode, max_workers=workers)
    if not parts:
        return np.empty(0, dtype=arr.dtype)
    # Concatenated parts are sorted runs; timsort merges them.
    merged = np.sort(np.concatenate(parts), kind="stable")
    return merged[::-1]


# --- 2. Factorials ---

def factorial(n: int) -> int:
    """n! as an arbitrary-precision int."""
    if n < 0:
        raise ValueError(f"factorial() not defined for negative values: {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorials_sequential(nums: Iterable[int]) -> List[int]:
    return [factorial(n) for n in nums]


def factorials_parallel(nums: Iterable[int], mode: str = "process", workers: Optional[int] = None) -> List[int]:
    return parallel_map(factorial, nums, mode=mode, max_workers=workers)


# --- 3. Min / max ---

def min_max(data: Sequence[float]) -> Tuple[float, float]:
    """(min, max) of `data`; raises ValueError when there is no data."""
    arr = np.asarray(data)
    if arr.size == 0:
        raise ValueError("min_max() arg is an empty sequence")
    return arr.min().item(), arr.max().item()


def min_max_sequential(data: Sequence[float]) -> Tuple[float, float]:
    return min_max(data)


def min_max_parallel(data: Sequence[float], mode: str = "process", workers: Optional[int] = None) -> Tuple[float, float]:
    arr = np.asarray(data)
    if arr.size == 0:
        raise ValueError("min_max() arg is an empty sequence")
    parts = parallel_map(min_max, _chunks(arr, workers), mode=mode, max_workers=workers)
    return min(p[0] for p in parts), max(p[1] for p in parts)


# --- 4. Text ---

def remove_vowels(s: str) -> str:
    """Drop Latin and Cyrillic vowels, both cases."""
    return s.translate(_VOWEL_TABLE)


def read_lines(path: str) -> Iterator[str]:
    """Lazily yield the lines of `path` without their line terminators."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")


def remove_vowels_sequential(lines: Iterable[str]) -> List[str]:
    return [remove_vowels(line) for line in lines]


def remove_vowels_parallel(lines: Iterable[str], mode: str = "process", workers: Optional[int] = None) -> List[str]:
    return parallel_map_batched(remove_vowels, lines, mode=mode, max_workers=workers)


# --- 5. Sum / average ---

def sum_average(data: Sequence[int]) -> Tuple[int, float]:
    """(sum, mean) with a 64-bit accumulator; an empty array gives (0, 0.0)."""
    arr = np.asarray(data)
    if arr.size == 0:
        return 0, 0.0
    total = int(arr.sum(dtype=np.int64))
    return total, total / arr.size


def sum_average_sequential(arrays: Iterable[Sequence[int]]) -> List[Tuple[int, float]]:
    return [sum_average(arr) for arr in arrays]


def sum_average_parallel(arrays: Iterable[Sequence[int]], mode: str = "process", workers: Optional[int] = None) -> List[Tuple[int, float]]:
    return parallel_map(sum_average, arrays, mode=mode, max_workers=workers)


# --- 6. Elementwise math ---

def complex_math(x: float) -> float:
    """sqrt(x^3 + sqrt(x)); negative x raises ValueError."""
    if x < 0:
        raise ValueError(f"complex_math() domain error: {x}")
    return math.sqrt(x * x * x + math.sqrt(x))


def _complex_math_chunk(data: np.ndarray) -> np.ndarray:
    arr = np.asarray(data, dtype=np.float64)
    if (arr < 0).any():
        raise ValueError("complex_math() domain error: negative input")
    # Results must not depend on chunk boundaries, so no np.power here.
    return np.sqrt(arr * arr * arr + np.sqrt(arr))


def complex_math_sequential(data: Sequence[float]) -> np.ndarray:
    return _complex_math_chunk(data)


def complex_math_parallel(data: Sequence[float], mode: str = "process", workers: Optional[int] = None) -> np.ndarray:
    arr = np.asarray(data, dtype=np.float64)
    parts = parallel_map(_complex_math_chunk, _chunks(arr, workers), mode=mode, max_workers=workers)
    if not parts:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(parts)
