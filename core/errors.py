"""Error types raised by the timing components."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TimerError(Exception):
    """Base class for recoverable timer errors."""


class TimerNotRunning(TimerError):
    """``stop()`` was called without a matching ``start()``."""

    def __init__(self, name: str):
        super().__init__(f"{name}::timer is not running. Call start() first")
        self.name = name


class NoSamples(TimerError):
    """Statistics or export requested before any interval was recorded."""

    def __init__(self, name: str):
        super().__init__(f"{name}::timer has no recorded samples")
        self.name = name


class SinkOpenFailure(TimerError):
    """The output path could not be opened for writing."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        msg = f"PerfTimer output file failed to open: {path}"
        if reason:
            msg += f". Error: {reason}"
        super().__init__(msg)
        self.path = path
        self.reason = reason


__all__ = ["TimerError", "TimerNotRunning", "NoSamples", "SinkOpenFailure"]
