# tests/unit/test_units.py
import pytest

from core.timing.units import UNITS, convert, format_duration


@pytest.mark.parametrize(
    "ns, expected_value, expected_unit",
    [
        (0, 0.0, "ns"),
        (899, 899.0, "ns"),
        (1_000, 1_000.0, "ns"),
        (1_001, 1.001, "µs"),
        (999_999, 999.999, "µs"),
        (1_000_000, 1_000.0, "µs"),
        (1_000_001, 1.000001, "ms"),
        (1.0e9, 1_000.0, "ms"),
        (1.0e9 + 1, 1.000000001, "s"),
        (6.0e11, 600.0, "s"),
        (6.0e11 + 1, 10.0, "min"),
        (1.08e13, 180.0, "min"),
        (1.08e13 + 1, 3.0, "hr"),
        (7.2e13, 20.0, "hr"),
    ],
)
def test_bracket_selection_is_inclusive_on_upper_bound(ns, expected_value, expected_unit):
    value, unit = convert(ns)
    assert unit == expected_unit
    assert value == pytest.approx(expected_value)


def test_units_are_ordered_smallest_first():
    assert UNITS == ("ns", "µs", "ms", "s", "min", "hr")


def test_format_duration_uses_six_significant_digits():
    assert format_duration(600) == "600ns"
    assert format_duration(4_500) == "4.5µs"
    assert format_duration(1_234_567_890) == "1.23457s"
    assert format_duration(90 * 60 * 1e9) == "90min"
