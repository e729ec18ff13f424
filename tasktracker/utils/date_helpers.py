from datetime import datetime, timedelta, date
from typing import List, Optional, Tuple, Union
from dateutil.relativedelta import relativedelta
import calendar
import logging
import re

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DateLike = Union[str, date]


class InvalidDateError(ValueError):
    """Malformed or out-of-range calendar date"""

    pass


class DateHelpers:
    """Calendar-date arithmetic on local dates.

    Business "today" always comes from the caller as a YYYY-MM-DD string;
    nothing here consults the server clock except ``today`` when the caller
    supplies nothing.
    """

    @staticmethod
    def parse_date(value: DateLike) -> date:
        """Parse a YYYY-MM-DD string, rejecting anything else"""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
            raise InvalidDateError(f"Invalid date '{value}'. Expected YYYY-MM-DD")

        year, month, day = (int(part) for part in value.split("-"))
        try:
            return date(year, month, day)
        except ValueError:
            raise InvalidDateError(f"Invalid date '{value}': out of range")

    @staticmethod
    def format_date(value: date) -> str:
        return value.strftime(DATE_FORMAT)

    @staticmethod
    def today(caller_date: Optional[DateLike] = None) -> date:
        """Resolve the business date for a request.

        Falls back to server wall-clock only when the caller sent nothing.
        """
        if caller_date is not None:
            return DateHelpers.parse_date(caller_date)

        logger.warning("No caller date supplied, falling back to server local date")
        return date.today()

    @staticmethod
    def day_of_week(value: DateLike) -> int:
        """Day of week with 0 = Sunday .. 6 = Saturday"""
        return DateHelpers.parse_date(value).isoweekday() % 7

    @staticmethod
    def last_day_of_month(year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Invalid month: {month}")
        return calendar.monthrange(year, month)[1]

    @staticmethod
    def days_in_range(start_date: DateLike, end_date: DateLike) -> List[date]:
        """Every date from start to end, both inclusive"""
        start = DateHelpers.parse_date(start_date)
        end = DateHelpers.parse_date(end_date)

        days = []
        current = start
        while current <= end:
            days.append(current)
            current += timedelta(days=1)
        return days

    @staticmethod
    def get_month_boundaries(year: int, month: int) -> Tuple[date, date]:
        """First and last calendar day of a month"""
        start_date = date(year, month, 1)
        # day=31 clamps to the last day without leaving the month
        end_date = start_date + relativedelta(day=31)
        return start_date, end_date

    @staticmethod
    def get_month_to_date(as_of: DateLike) -> Tuple[date, date]:
        """First of the month containing ``as_of`` through ``as_of``"""
        as_of_date = DateHelpers.parse_date(as_of)
        return as_of_date.replace(day=1), as_of_date
