"""Calendar arithmetic on plain ``datetime.date`` values."""

from __future__ import annotations

import datetime
from typing import Protocol

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class _DateLike(Protocol):
    year: int
    month: int
    day: int


def is_leap_year(year: int) -> bool:
    """Return True when ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday of a date, 0 for Sunday through 6 for Saturday."""
    # Zeller's congruence, with January and February counted as months
    # 13 and 14 of the previous year.
    if month < 3:
        month += 12
        year -= 1
    century, year_of_century = divmod(year, 100)
    dow = (
        day
        + (13 * (month + 1)) // 5
        + year_of_century
        + year_of_century // 4
        + century // 4
        - 2 * century
    ) % 7
    return (dow + 6) % 7


def get_current_date() -> datetime.date:
    """Return today's date in local time."""
    return datetime.date.today()


def date_add_days(date: datetime.date, days: int) -> datetime.date:
    """Return ``date`` moved by ``days`` days, forwards or backwards."""
    return date + datetime.timedelta(days=days)


def date_compare(a: _DateLike, b: _DateLike) -> int:
    """Compare two dates field by field.

    The result is the difference of the first field that differs (year,
    then month, then day): negative when ``a`` is earlier, zero when equal,
    positive when ``a`` is later.
    """
    if a.year != b.year:
        return a.year - b.year
    if a.month != b.month:
        return a.month - b.month
    return a.day - b.day


def is_today(date: _DateLike) -> bool:
    """Return True when ``date`` is today's date."""
    return date_compare(date, get_current_date()) == 0