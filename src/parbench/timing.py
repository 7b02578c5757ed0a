from __future__ import annotations

import functools
import time
from typing import Any, Callable

from .metrics import log_event


def measure(action: Callable[[], Any]) -> int:
    """Run `action` once and return the elapsed wall-clock time in whole ms.

    Exceptions raised by `action` propagate to the caller untouched.
    """
    t = Timer()
    action()
    return int(t.ms())


class Timer:
    """Wall-clock stopwatch started on construction."""

    def __init__(self):
        self.t0 = time.perf_counter()

    def ms(self) -> float:
        return (time.perf_counter() - self.t0) * 1000.0


def time_call(name: str):
    def deco(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            t = Timer()
            try:
                return fn(*args, **kwargs)
            finally:
                log_event("timer", name=name, ms=t.ms())
        return wrapper
    return deco
