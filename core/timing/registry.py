from __future__ import annotations
import re
from pathlib import Path
from typing import Optional, TextIO

from config.settings import get_settings

from .clock import Clock, now_monotonic_ns
from .interval_timer import IntervalTimer

_UNSAFE = re.compile(r"[^\w.-]+")


def file_stem(name: str) -> str:
    """File name stem for a timer: path separators and other unsafe runs become ``_``."""
    return _UNSAFE.sub("_", name).strip(".") or "timer"


class TimerRegistry:
    """Named timers kept in creation order."""

    def __init__(self, clock: Clock = now_monotonic_ns):
        self._clock = clock
        self._map: dict[str, IntervalTimer] = {}

    def timer(self, name: str) -> IntervalTimer:
        t = self._map.get(name)
        if t is None:
            t = self._map[name] = IntervalTimer(name, clock=self._clock)
        return t

    def names(self) -> list[str]:
        return list(self._map)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __len__(self) -> int:
        return len(self._map)

    def _with_samples(self) -> list[IntervalTimer]:
        return [t for t in self._map.values() if len(t)]

    def report_all(self, out: Optional[TextIO] = None) -> None:
        for t in self._with_samples():
            t.report_stats(out)

    def save_all(self, directory: Optional[Path] = None) -> list[Path]:
        """Save every timer with samples as ``<directory>/<file_stem(name)>.csv``.

        Names that reduce to the same stem overwrite each other; the later timer wins.
        """
        directory = Path(directory) if directory is not None else get_settings().output_root
        directory.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for t in self._with_samples():
            out = directory / f"{file_stem(t.name)}.csv"
            if t.save_timing_data(out):
                written.append(out)
        return written


__all__ = ["TimerRegistry", "file_stem"]
