from datetime import date, timedelta

import pytest

from tasktracker.utils.active_days import (
    InvalidActiveDayError,
    count_active_days_in_range,
    format_active_days,
    is_active_on,
    parse_active_days,
)
from tasktracker.utils.date_helpers import DateHelpers


def brute_force_count(active_days, start, end):
    return sum(
        1 for day in DateHelpers.days_in_range(start, end)
        if DateHelpers.day_of_week(day) in set(active_days)
    )


def test_parse_active_days_from_string_and_list():
    assert parse_active_days("1,3,5") == {1, 3, 5}
    assert parse_active_days(" 0, 6 ") == {0, 6}
    assert parse_active_days([2, 2, 4]) == {2, 4}


@pytest.mark.parametrize("value", ["1,7", "-1", "mon", [8], [1, "2"], [True]])
def test_parse_active_days_rejects_invalid_days(value):
    with pytest.raises(InvalidActiveDayError):
        parse_active_days(value)


def test_format_active_days_sorts_and_dedupes():
    assert format_active_days([5, 1, 3, 1]) == "1,3,5"


def test_format_active_days_requires_a_day():
    with pytest.raises(InvalidActiveDayError):
        format_active_days([])


def test_mon_wed_fri_in_first_week_of_december():
    # Mon Dec 1 .. Sun Dec 7 2025
    assert count_active_days_in_range({1, 3, 5}, "2025-12-01", "2025-12-07") == 3


def test_empty_range_counts_zero():
    assert count_active_days_in_range({0, 1, 2, 3, 4, 5, 6}, "2025-12-08", "2025-12-07") == 0


def test_duplicates_do_not_double_count():
    assert count_active_days_in_range([1, 1, 3], "2025-12-01", "2025-12-31") == (
        count_active_days_in_range({1, 3}, "2025-12-01", "2025-12-31")
    )


def test_invalid_day_in_count_raises():
    with pytest.raises(InvalidActiveDayError):
        count_active_days_in_range([1, 9], "2025-12-01", "2025-12-07")


def test_is_active_on():
    assert is_active_on("1,3,5", "2025-12-03")
    assert not is_active_on("1,3,5", "2025-12-04")


@pytest.mark.parametrize(
    "active_days",
    [{0}, {6}, {1, 3, 5}, {0, 6}, {2, 3, 4}, {0, 1, 2, 3, 4, 5, 6}],
)
def test_count_matches_brute_force_across_leap_year(active_days):
    origin = date(2023, 12, 20)
    last = origin + timedelta(days=450)  # spans Feb 29 2024 into 2025

    # Every start in the first two weeks against a spread of lengths
    for start_offset in range(14):
        start = origin + timedelta(days=start_offset)
        for length in list(range(0, 16)) + [27, 28, 29, 30, 31, 60, 366, 420]:
            end = start + timedelta(days=length)
            if end > last:
                continue
            assert count_active_days_in_range(active_days, start, end) == (
                brute_force_count(active_days, start, end)
            ), (active_days, start, end)


def test_full_span_matches_brute_force():
    start, end = date(2023, 12, 20), date(2025, 3, 14)
    assert (end - start).days >= 400
    for active_days in ({1, 3, 5}, {0, 2, 4, 6}):
        assert count_active_days_in_range(active_days, start, end) == (
            brute_force_count(active_days, start, end)
        )
