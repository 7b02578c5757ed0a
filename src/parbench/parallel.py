from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from typing import Callable, Iterable, List, Any, Optional, Tuple


def default_workers() -> int:
    return os.cpu_count() or 1


def chunk_ranges(n: int, parts: Optional[int] = None) -> List[Tuple[int, int]]:
    """Split range(n) into at most `parts` contiguous (start, end) chunks.

    Empty input gives an empty list.
    """
    parts = parts or default_workers()
    chunks: List[Tuple[int, int]] = []
    step = max(1, -(-n // parts))
    start = 0
    while start < n:
        end = min(n, start + step)
        chunks.append((start, end))
        start = end
    return chunks


def parallel_map_process(fn: Callable[[Any], Any], items: Iterable[Any], max_workers: Optional[int] = None) -> List[Any]:
    """Run CPU-bound function `fn` across `items` using processes.

    `fn` and the items must be picklable. Returns the results preserving the
    original order.
    """
    items_list = list(items)
    results: List[Any] = [None] * len(items_list)
    if not items_list:
        return results
    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        fut_to_idx = {ex.submit(fn, item): i for i, item in enumerate(items_list)}
        for fut in as_completed(fut_to_idx):
            i = fut_to_idx[fut]
            results[i] = fut.result()
    return results


def parallel_map_thread(fn: Callable[[Any], Any], items: Iterable[Any], max_workers: Optional[int] = None) -> List[Any]:
    """Run function `fn` across `items` using threads.

    Returns the results preserving the original order.
    """
    items_list = list(items)
    results: List[Any] = [None] * len(items_list)
    if not items_list:
        return results
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        fut_to_idx = {ex.submit(fn, item): i for i, item in enumerate(items_list)}
        for fut in as_completed(fut_to_idx):
            i = fut_to_idx[fut]
            results[i] = fut.result()
    return results


def parallel_map(fn: Callable[[Any], Any], items: Iterable[Any], mode: str = "process", max_workers: Optional[int] = None) -> List[Any]:
    """Dispatch to the process or thread pool depending on `mode`."""
    if mode == "thread":
        return parallel_map_thread(fn, items, max_workers=max_workers)
    if mode == "process":
        return parallel_map_process(fn, items, max_workers=max_workers)
    raise ValueError(f"unknown parallel mode: {mode!r}")


def parallel_map_batched(
    fn: Callable[[Any], Any],
    items: Iterable[Any],
    mode: str = "process",
    max_workers: Optional[int] = None,
    chunksize: Optional[int] = None,
) -> List[Any]:
    """Ordered `Executor.map` over many small items, shipped in batches.

    Suited to per-line work where submitting one future per item would cost
    more than the work itself.
    """
    items_list = list(items)
    if not items_list:
        return []
    if chunksize is None:
        chunksize = max(1, len(items_list) // ((max_workers or default_workers()) * 4))
    if mode == "thread":
        with ThreadPoolExecutor(max_workers=max_workers) as ex:
            return list(ex.map(fn, items_list))
    if mode == "process":
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            return list(ex.map(fn, items_list, chunksize=chunksize))
    raise ValueError(f"unknown parallel mode: {mode!r}")
