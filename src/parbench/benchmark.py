from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from . import workloads as wl
from .config import Settings
from .datagen import ensure_text_corpus, generate_doubles, generate_ints
from .metrics import log_event, sample_system
from .report import print_header, report, speedup
from .timing import measure, time_call


@dataclass
class BenchResult:
    name: str
    label: str
    sequential_ms: int
    parallel_ms: int
    speedup: float


def run_filter_sort(settings: Settings) -> Tuple[int, int]:
    data = generate_ints(settings.filter_sort_count, seed=settings.filter_sort_seed)
    seq = measure(lambda: wl.filter_sort_sequential(data))
    par = measure(lambda: wl.filter_sort_parallel(data, mode=settings.mode, workers=settings.workers))
    return seq, par


def run_factorials(settings: Settings) -> Tuple[int, int]:
    nums = list(range(1, settings.factorial_max + 1))
    seq = measure(lambda: wl.factorials_sequential(nums))
    par = measure(lambda: wl.factorials_parallel(nums, mode=settings.mode, workers=settings.workers))
    return seq, par


def run_min_max(settings: Settings) -> Tuple[int, int]:
    data = generate_ints(settings.min_max_count, seed=settings.min_max_seed)
    seq = measure(lambda: wl.min_max_sequential(data))
    par = measure(lambda: wl.min_max_parallel(data, mode=settings.mode, workers=settings.workers))
    return seq, par


def run_text(settings: Settings) -> Tuple[int, int]:
    path = settings.corpus_path
    if ensure_text_corpus(path, settings.text_lines):
        logging.info("created text corpus %s (%d lines)", path, settings.text_lines)
    seq = measure(lambda: wl.remove_vowels_sequential(wl.read_lines(path)))
    par = measure(lambda: wl.remove_vowels_parallel(wl.read_lines(path), mode=settings.mode, workers=settings.workers))
    return seq, par


def run_sum_average(settings: Settings) -> Tuple[int, int]:
    arrays = [
        generate_ints(settings.sum_length, seed=settings.sum_seed_base + i)
        for i in range(settings.sum_arrays)
    ]
    seq = measure(lambda: wl.sum_average_sequential(arrays))
    par = measure(lambda: wl.sum_average_parallel(arrays, mode=settings.mode, workers=settings.workers))
    return seq, par


def run_complex_math(settings: Settings) -> Tuple[int, int]:
    data = generate_doubles(settings.math_count, seed=settings.math_seed)
    seq = measure(lambda: wl.complex_math_sequential(data))
    par = measure(lambda: wl.complex_math_parallel(data, mode=settings.mode, workers=settings.workers))
    return seq, par


Runner = Callable[[Settings], Tuple[int, int]]

# Fixed run order. Labels may reference Settings fields.
WORKLOADS: List[Tuple[str, str, Runner]] = [
    ("filter_sort", "Filter + sort large dataset", run_filter_sort),
    ("factorials", "Factorials 1..{factorial_max}", run_factorials),
    ("min_max", "Min/Max in large array", run_min_max),
    ("text", "Remove vowels from big text file", run_text),
    ("sum_average", "Sum + average for multiple arrays", run_sum_average),
    ("complex_math", "Complex math operations over array", run_complex_math),
]

WORKLOAD_NAMES = [name for name, _, _ in WORKLOADS]


def run_workload(index: int, name: str, label: str, runner: Runner, settings: Settings, out: TextIO) -> BenchResult:
    print_header(f"Task {index}: {label}", file=out)
    log_event("workload_start", name=name, **sample_system(settings))
    seq, par = runner(settings)
    report(seq, par, file=out)
    if name == "text":
        print(f"Text file used: {settings.corpus_path}", file=out)
    print(file=out)
    res = BenchResult(name=name, label=label, sequential_ms=seq, parallel_ms=par, speedup=speedup(seq, par))
    log_event("workload_done", **asdict(res))
    return res


@time_call("run_suite")
def run_suite(
    settings: Settings,
    only: Optional[Sequence[str]] = None,
    out_path: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> List[BenchResult]:
    """Run the selected workloads in their fixed order and print each block.

    A failing workload propagates its exception and ends the run.
    """
    out = file or sys.stdout
    selected = set(only) if only else set(WORKLOAD_NAMES)
    unknown = selected - set(WORKLOAD_NAMES)
    if unknown:
        raise ValueError(f"unknown workloads: {sorted(unknown)}")

    log_event("run_start", mode=settings.mode, workers=settings.workers, workloads=sorted(selected))
    results: List[BenchResult] = []
    for i, (name, label, runner) in enumerate(WORKLOADS, start=1):
        if name not in selected:
            continue
        logging.debug("running workload %s", name)
        results.append(run_workload(i, name, label.format(**asdict(settings)), runner, settings, out))

    if out_path:
        data = [asdict(r) for r in results]
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logging.info("results written to %s", out_path)
    log_event("run_done", count=len(results))
    return results
