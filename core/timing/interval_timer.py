"""Start/stop interval timer with aggregate statistics and file export.

Usage::

    timer = IntervalTimer("solver")
    for _ in range(100):
        timer.start()
        solve()
        timer.stop()
    timer.report_stats()
    timer.save_timing_data("solver.csv")

Every start/stop pair appends one duration (nanoseconds) to ``samples``.
``save_timing_data`` overwrites the target without asking. The file holds the
two summary lines written by ``report_stats`` followed by one comma separated
line with every raw sample.

A timer is not thread-safe. Callers sharing one across threads must serialise
start/stop themselves.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import TracebackType
from typing import Optional, TextIO, Type, Union

from core.errors import NoSamples, SinkOpenFailure, TimerNotRunning

from .clock import Clock, now_monotonic_ns
from .stats import TimingStats, format_samples, parse_samples

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class IntervalTimer:
    """Accumulates durations between paired ``start()``/``stop()`` calls."""

    def __init__(self, name: str, clock: Clock = now_monotonic_ns):
        self._name = name
        self._clock = clock
        self._samples: list[float] = []
        self._running = False
        self._pending_start = 0
        self._entered: list[bool] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def running(self) -> bool:
        return self._running

    @property
    def samples(self) -> tuple[float, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"IntervalTimer(name={self._name!r}, samples={len(self._samples)}, running={self._running})"

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Start an interval. A second start while running keeps the first timestamp."""
        if self._running:
            logger.warning("%s::timer is already active. No action taken", self._name)
            return
        self._pending_start = self._clock()
        self._running = True

    def stop(self) -> float:
        """Close the current interval and return its duration in nanoseconds."""
        if not self._running:
            raise TimerNotRunning(self._name)
        diff = float(self._clock() - self._pending_start)
        self._samples.append(diff)
        self._running = False
        return diff

    def add_sample(self, duration_ns: float) -> None:
        """Record a duration measured elsewhere."""
        duration_ns = float(duration_ns)
        if duration_ns < 0:
            raise ValueError(f"duration must be non-negative, got {duration_ns}")
        self._samples.append(duration_ns)

    def reset(self) -> None:
        self._samples.clear()
        self._running = False
        self._pending_start = 0
        self._entered.clear()

    # nested ``with`` blocks on one timer measure a single interval owned by the outermost block
    def __enter__(self) -> "IntervalTimer":
        owner = not self._running
        if owner:
            self.start()
        self._entered.append(owner)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        owner = self._entered.pop() if self._entered else True
        if owner and self._running:
            self.stop()

    # ------------------------------------------------------------------
    # Statistics / export
    # ------------------------------------------------------------------
    def stats(self) -> TimingStats:
        if not self._samples:
            raise NoSamples(self._name)
        return TimingStats.from_samples(self._samples)

    def summary(self) -> str:
        return self.stats().summary(self._name)

    def report_stats(self, out: Optional[TextIO] = None) -> None:
        """Write the summary to ``out`` (standard output by default)."""
        text = self.summary()
        (out if out is not None else sys.stdout).write(text)

    def save_timing_data(self, path: PathLike, strict: bool = False) -> bool:
        """Write summary and raw samples to ``path``, overwriting it.

        Returns ``False`` when the file cannot be opened; with ``strict=True``
        that case raises :class:`SinkOpenFailure` instead. ``NoSamples`` is
        raised before the file is touched.
        """
        header = self.summary()
        path = Path(path)
        try:
            fh = path.open("w", encoding="utf-8")
        except OSError as exc:
            reason = exc.strerror or str(exc)
            if strict:
                raise SinkOpenFailure(path, reason) from exc
            logger.error("PerfTimer output file failed to open: %s. Error: %s", path, reason)
            return False

        with fh:
            fh.write(header)
            fh.write(format_samples(self._samples))
            fh.write("\n")
        logger.debug("saved %d samples for %s to %s", len(self._samples), self._name, path)
        return True


_NAME_PREFIX = "Timer name: "


def load_timing_data(path: PathLike, clock: Clock = now_monotonic_ns) -> IntervalTimer:
    """Rebuild a timer from a file written by :meth:`IntervalTimer.save_timing_data`."""
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 3 or not lines[0].startswith(_NAME_PREFIX):
        raise ValueError(f"{path} is not a timing data file")
    try:
        samples = parse_samples(lines[2])
    except ValueError as exc:
        raise ValueError(f"{path}: malformed sample line") from exc

    timer = IntervalTimer(lines[0][len(_NAME_PREFIX):], clock=clock)
    for s in samples:
        timer.add_sample(s)
    return timer


__all__ = ["IntervalTimer", "load_timing_data"]
