"""Human-readable unit selection for nanosecond durations."""

from __future__ import annotations

from typing import Tuple

# (inclusive upper bound in ns, scale factor, label); checked in order
_BRACKETS: Tuple[Tuple[float, float, str], ...] = (
    (1.0e3, 1.0, "ns"),
    (1.0e6, 1.0e-3, "µs"),
    (1.0e9, 1.0e-6, "ms"),
    (6.0e11, 1.0e-9, "s"),  # up to 10 minutes
    (1.08e13, 1.0e-9 / 60.0, "min"),  # up to 3 hours
)
_HOURS = (1.0e-9 / 3600.0, "hr")

UNITS = tuple(label for _, _, label in _BRACKETS) + (_HOURS[1],)


def convert(time_ns: float) -> Tuple[float, str]:
    """Scale ``time_ns`` to the most readable unit.

    Returns ``(scaled_value, unit_label)``. Each bracket includes its upper
    bound, e.g. exactly 1000 ns stays in nanoseconds.
    """
    for upper, factor, label in _BRACKETS:
        if time_ns <= upper:
            return time_ns * factor, label
    factor, label = _HOURS
    return time_ns * factor, label


def format_duration(time_ns: float) -> str:
    """Render a duration as ``<value><unit>`` with six significant digits."""
    value, unit = convert(time_ns)
    return f"{value:g}{unit}"


__all__ = ["UNITS", "convert", "format_duration"]
