import json
import os
import time

import pytest

from parbench import config
from parbench.config import Settings
from parbench.metrics import log_event, log_path, sample_system
from parbench.parallel import default_workers
from parbench.timing import Timer, measure, time_call


def test_measure_returns_whole_ms():
    ms = measure(lambda: time.sleep(0.02))
    assert isinstance(ms, int)
    assert ms >= 19


def test_measure_runs_action_once():
    calls = []
    measure(lambda: calls.append(1))
    assert calls == [1]


def test_measure_propagates_failure():
    def boom():
        raise ZeroDivisionError("workload failed")

    with pytest.raises(ZeroDivisionError, match="workload failed"):
        measure(boom)


def test_timer_ms():
    t = Timer()
    assert t.ms() >= 0


def test_time_call_logs_even_on_error():
    @time_call("failing")
    def failing():
        raise RuntimeError("x")

    with pytest.raises(RuntimeError):
        failing()
    assert os.path.dirname(log_path()) == config.LOG_DIR
    with open(log_path(), encoding="utf-8") as f:
        events = [json.loads(line) for line in f]
    assert events[-1]["event"] == "timer"
    assert events[-1]["name"] == "failing"


def test_log_event_disabled_without_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "LOG_DIR", "")
    monkeypatch.chdir(tmp_path)
    assert log_path() is None
    log_event("run_start", mode="thread")
    assert list(tmp_path.iterdir()) == []


def test_sample_system_records_pool_setup():
    info = sample_system(Settings(mode="thread", workers=3))
    assert info["mode"] == "thread"
    assert info["workers"] == 3
    assert info["cpu_count"] >= 1
    assert info["rss_bytes"] > 0

    info = sample_system(Settings(mode="process", workers=None))
    assert info["workers"] == default_workers()
