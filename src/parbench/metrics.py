"""JSON-lines event log for benchmark runs.

Events are written to `<PARBENCH_LOG_DIR>/parbench.jsonl` only when that
directory is configured; otherwise `log_event` does nothing.
"""

import json
import os
from datetime import datetime, timezone

import psutil

from . import config
from .parallel import default_workers


def log_path():
    if not config.LOG_DIR:
        return None
    return os.path.join(config.LOG_DIR, "parbench.jsonl")


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def log_event(event: str, **fields):
    path = log_path()
    if path is None:
        return
    os.makedirs(config.LOG_DIR, exist_ok=True)
    payload = {"ts": now_iso(), "event": event}
    payload.update(fields)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(payload, ensure_ascii=False) + "\n")


def sample_system(settings):
    """Pool setup the next workload will run with, plus host load and memory."""
    proc = psutil.Process(os.getpid())
    mem = proc.memory_info()
    return {
        "mode": settings.mode,
        "workers": settings.workers or default_workers(),
        "cpu_count": psutil.cpu_count(logical=True),
        "cpu_percent": psutil.cpu_percent(interval=None),
        "available_bytes": int(psutil.virtual_memory().available),
        "rss_bytes": int(mem.rss),
    }
