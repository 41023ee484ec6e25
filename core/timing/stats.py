"""Descriptive statistics over recorded timer samples."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from .units import format_duration


class TimingStats(BaseModel):
    """Aggregate statistics for one timer. All durations are in nanoseconds."""

    model_config = ConfigDict(frozen=True)

    count: int
    total: float
    mean: float
    stddev: float
    min: float
    max: float

    @classmethod
    def from_samples(cls, samples: Sequence[float]) -> "TimingStats":
        """Compute statistics for a non-empty sequence of durations.

        The standard deviation is the population deviation (divisor ``count``).
        Raises ``ValueError`` when ``samples`` is empty; callers that know the
        timer name should raise :class:`core.errors.NoSamples` first.
        """
        arr = np.asarray(samples, dtype=np.float64)
        if arr.size == 0:
            raise ValueError("cannot compute statistics of an empty sample set")
        total = float(arr.sum())
        return cls(
            count=int(arr.size),
            total=total,
            mean=total / arr.size,
            stddev=float(arr.std(ddof=0)),
            min=float(arr.min()),
            max=float(arr.max()),
        )

    def summary(self, name: str) -> str:
        """Two-line header shared by console reports and saved timing files."""
        return (
            f"Timer name: {name}\n"
            f"  Number of trials: {self.count}, "
            f"Total time: {format_duration(self.total)}, "
            f"Average Time: {format_duration(self.mean)}, "
            f"Standard Deviation: {format_duration(self.stddev)}, "
            f"Fastest Run: {format_duration(self.min)}, "
            f"Slowest Run: {format_duration(self.max)}\n"
        )


def format_samples(samples: Iterable[float]) -> str:
    # repr keeps the shortest string that parses back to the same float
    return ",".join(repr(float(s)) for s in samples)


def parse_samples(line: str) -> list[float]:
    line = line.strip()
    if not line:
        return []
    return [float(tok) for tok in line.split(",")]


__all__ = ["TimingStats", "format_samples", "parse_samples"]
