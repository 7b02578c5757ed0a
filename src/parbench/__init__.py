"""parbench: sequential vs data-parallel micro-benchmarks.

This package provides:
- Seeded data generators and a synthetic text corpus
- Six workloads, each with a sequential and a pool-backed parallel variant
- A timing harness and a plain-text reporter

Parallel runs use `concurrent.futures` process pools by default (threads on request).
"""

__all__ = [
    "BenchResult",
    "Settings",
    "load_settings",
    "measure",
    "run_suite",
]

from .benchmark import BenchResult, run_suite
from .config import Settings, load_settings
from .timing import measure
