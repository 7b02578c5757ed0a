from __future__ import annotations

import sys
from typing import Optional, TextIO


def speedup(sequential_ms: float, parallel_ms: float) -> float:
    """sequential / parallel, or 0.0 when the parallel run took 0 ms."""
    if parallel_ms == 0:
        return 0.0
    return sequential_ms / parallel_ms


def print_header(label: str, file: Optional[TextIO] = None) -> None:
    print(label, file=file or sys.stdout)


def report(sequential_ms: int, parallel_ms: int, file: Optional[TextIO] = None) -> None:
    out = file or sys.stdout
    print(f"Sequential: {sequential_ms} ms", file=out)
    print(f"Parallel  : {parallel_ms} ms", file=out)
    print(f"Speedup   : {speedup(sequential_ms, parallel_ms):.2f}x", file=out)
