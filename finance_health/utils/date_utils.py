"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Union


def to_local(value: Union[date, datetime]) -> Union[date, datetime]:
    """Convert timezone-aware datetimes to local time; naive values pass through"""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone()
    return value


def is_same_month(value: Union[date, datetime], reference: date) -> bool:
    """True when `value` (in local time) falls in the calendar month of `reference`"""
    value = to_local(value)
    return value.year == reference.year and value.month == reference.month


def add_months(day: date, months: int) -> date:
    """First day of the month `months` away from the month containing `day`"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
