"""Tests for the fixed unit ladder."""

from elapsed.util import ABBREVIATIONS, DAY, HOUR, MINUTE, MONTH, UNITS, WEEK, YEAR


def test_constants_are_fixed_ratios():
    """Test the approximations the label relies on."""
    assert MINUTE == 60
    assert HOUR == 60 * MINUTE
    assert DAY == 24 * HOUR
    assert WEEK == 7 * DAY
    assert MONTH == 30 * DAY
    assert YEAR == 365 * DAY


def test_units_ordered_coarsest_first():
    """Test that the ladder is strictly decreasing and fully abbreviated."""
    scales = [scale for _, scale in UNITS]

    assert scales == sorted(scales, reverse=True)
    assert len(set(scales)) == len(scales)
    assert [unit for unit, _ in UNITS] == list(ABBREVIATIONS)
