from typing import FrozenSet, Iterable, Union
from .date_helpers import DateHelpers, DateLike

ActiveDaysInput = Union[str, Iterable[int]]


class InvalidActiveDayError(ValueError):
    """Weekday outside 0 (Sunday) .. 6 (Saturday)"""

    pass


def parse_active_days(active_days: ActiveDaysInput) -> FrozenSet[int]:
    """Normalize "1,3,5" or an iterable of ints into a set of weekdays.

    Duplicates collapse; any value outside 0-6 is rejected.
    """
    if isinstance(active_days, str):
        parts = [part.strip() for part in active_days.split(",") if part.strip()]
        try:
            values = [int(part) for part in parts]
        except ValueError:
            raise InvalidActiveDayError(f"Invalid active days: '{active_days}'")
    else:
        values = list(active_days)

    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
            raise InvalidActiveDayError(f"Invalid active day: {value}")

    return frozenset(values)


def format_active_days(active_days: ActiveDaysInput) -> str:
    """Persisted form, sorted and de-duplicated"""
    days = parse_active_days(active_days)
    if not days:
        raise InvalidActiveDayError("At least one active day is required")
    return ",".join(str(day) for day in sorted(days))


def is_active_on(active_days: ActiveDaysInput, value: DateLike) -> bool:
    return DateHelpers.day_of_week(value) in parse_active_days(active_days)


def count_active_days_in_range(
    active_days: ActiveDaysInput, start_date: DateLike, end_date: DateLike
) -> int:
    """Possible completions: dates in [start, end] falling on an active weekday"""
    days = parse_active_days(active_days)
    start = DateHelpers.parse_date(start_date)
    end = DateHelpers.parse_date(end_date)

    if start > end or not days:
        return 0

    full_weeks, remainder = divmod((end - start).days + 1, 7)
    count = full_weeks * len(days)

    # Leftover days start on the same weekday as ``start``
    first_weekday = DateHelpers.day_of_week(start)
    for offset in range(remainder):
        if (first_weekday + offset) % 7 in days:
            count += 1

    return count
