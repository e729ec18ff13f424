from .security import verify_password, get_password_hash
from .date_helpers import DateHelpers, InvalidDateError
from .active_days import (
    InvalidActiveDayError,
    count_active_days_in_range,
    format_active_days,
    parse_active_days,
)
from .constants import AppConstants, ResponseMessages, ErrorCodes

__all__ = [
    "verify_password",
    "get_password_hash",
    "DateHelpers",
    "InvalidDateError",
    "InvalidActiveDayError",
    "count_active_days_in_range",
    "format_active_days",
    "parse_active_days",
    "AppConstants",
    "ResponseMessages",
    "ErrorCodes",
]
