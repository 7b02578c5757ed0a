import io
import json

import pytest

from parbench.benchmark import WORKLOAD_NAMES, run_suite
from parbench.config import Settings
from parbench.metrics import log_path


def tiny_settings(tmp_path, mode="thread"):
    return Settings(
        mode=mode,
        workers=2,
        filter_sort_count=2000,
        min_max_count=2000,
        text_lines=50,
        corpus_path=str(tmp_path / "plinq_big_text.txt"),
        sum_arrays=3,
        sum_length=1000,
        math_count=2000,
    )


def test_run_suite_all_workloads(tmp_path):
    buf = io.StringIO()
    out_json = tmp_path / "results.json"
    results = run_suite(tiny_settings(tmp_path), out_path=str(out_json), file=buf)

    assert [r.name for r in results] == WORKLOAD_NAMES
    for r in results:
        assert r.sequential_ms >= 0 and r.parallel_ms >= 0
        assert r.speedup >= 0

    text = buf.getvalue()
    assert text.startswith("Task 1: Filter + sort large dataset\n")
    assert "Task 2: Factorials 1..20" in text
    assert "Task 6: Complex math operations over array" in text
    assert text.count("Sequential: ") == 6
    assert text.count("Parallel  : ") == 6
    assert text.count("Speedup   : ") == 6
    assert f"Text file used: {tmp_path / 'plinq_big_text.txt'}" in text

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert [d["name"] for d in data] == WORKLOAD_NAMES
    assert set(data[0]) == {"name", "label", "sequential_ms", "parallel_ms", "speedup"}
    assert (tmp_path / "plinq_big_text.txt").exists()


def test_run_suite_subset_process_pool(tmp_path):
    buf = io.StringIO()
    results = run_suite(tiny_settings(tmp_path, mode="process"), only=["min_max", "factorials"], file=buf)
    # Fixed order regardless of selection order; task numbers keep their slot.
    assert [r.name for r in results] == ["factorials", "min_max"]
    assert "Task 3: Min/Max in large array" in buf.getvalue()


def test_run_suite_unknown_workload(tmp_path):
    with pytest.raises(ValueError):
        run_suite(tiny_settings(tmp_path), only=["nope"], file=io.StringIO())


def test_run_suite_corpus_failure_propagates(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    settings = Settings(mode="thread", text_lines=5, corpus_path=str(blocker / "sub" / "corpus.txt"))
    with pytest.raises(OSError):
        run_suite(settings, only=["text"], file=io.StringIO())


def test_run_suite_never_starts_with_empty_min_max(tmp_path):
    # Scaling down to nothing is rejected before any workload prints.
    with pytest.raises(ValueError):
        tiny_settings(tmp_path).scaled(0)
    with pytest.raises(ValueError):
        tiny_settings(tmp_path).scaled(0.0001)

    buf = io.StringIO()
    results = run_suite(tiny_settings(tmp_path).scaled(0.001), only=["min_max"], file=buf)
    assert [r.name for r in results] == ["min_max"]
    assert "Task 3: Min/Max in large array" in buf.getvalue()


def test_run_suite_logs_pool_setup(tmp_path):
    run_suite(tiny_settings(tmp_path), only=["factorials"], file=io.StringIO())
    with open(log_path(), encoding="utf-8") as f:
        events = [json.loads(line) for line in f]
    start = next(e for e in events if e["event"] == "workload_start")
    assert start["name"] == "factorials"
    assert start["mode"] == "thread" and start["workers"] == 2
    assert events[-1]["event"] == "timer" and events[-1]["name"] == "run_suite"
