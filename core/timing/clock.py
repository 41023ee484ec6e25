from __future__ import annotations
import time
from typing import Callable

# returns an integer nanosecond timestamp; only differences are meaningful
Clock = Callable[[], int]

def now_monotonic_ns() -> int: return time.monotonic_ns()
