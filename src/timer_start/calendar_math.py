# slashAI - Discord Bot and MCP Server
# Copyright (c) 2025-2026 Slash Daemon slashdaemon@protonmail.com
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing: [slashdaemon@protonmail.com]

"""
Calendar Helpers

Month and weekday vocabulary, date validation, and calendar-aware
addition of fractional months and years.
"""

import math
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from .errors import TokenFormatError

MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Indexed by datetime.weekday(), Monday is 0
WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def parse_month(text: str) -> int:
    """
    Parse a month name or abbreviation into a month number (1-12).

    Raises:
        TokenFormatError: If the text does not start with a month abbreviation
    """
    prefix = text.strip().lower()[:3]
    for index, name in enumerate(MONTHS):
        if prefix == name[:3].lower():
            return index + 1
    raise TokenFormatError(f"Not a month: '{text}'")


def parse_weekday(text: str) -> int:
    """
    Parse a weekday name or abbreviation into a weekday number (Monday is 0).

    Raises:
        TokenFormatError: If the text does not start with a weekday abbreviation
    """
    prefix = text.strip().lower()[:3]
    for index, name in enumerate(WEEKDAYS):
        if prefix == name[:3].lower():
            return index
    raise TokenFormatError(f"Not a weekday: '{text}'")


def month_name(month: int) -> str:
    if month < 1 or month > 12:
        raise ValueError(f"Month out of range: {month}")
    return MONTHS[month - 1]


def weekday_name(weekday: int) -> str:
    if weekday < 0 or weekday > 6:
        raise ValueError(f"Weekday out of range: {weekday}")
    return WEEKDAYS[weekday]


def ordinal_day(day: int) -> str:
    """Format a day of the month with its English ordinal suffix ("1st", "22nd")."""
    if day < 1 or day > 31:
        raise ValueError(f"Day out of range: {day}")

    if day // 10 == 1:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def try_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, or return None if the fields do not form one."""
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date(
    year: Optional[int], month: Optional[int], day: Optional[int]
) -> bool:
    """
    Check whether the given (possibly partial) fields can form a date.

    Missing fields are filled with 2000-01-01 so that "29 February" without
    a year is accepted.
    """
    return (
        try_date(
            year if year is not None else 2000,
            month if month is not None else 1,
            day if day is not None else 1,
        )
        is not None
    )


def increment_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) that follows the given one."""
    if month < 1 or month > 12:
        raise ValueError(f"Month out of range: {month}")

    if month < 12:
        return year, month + 1
    return year + 1, 1


def add_months(value: datetime, months: float) -> datetime:
    """
    Add a possibly fractional number of months.

    Whole months are added on the calendar (Jan 31 + 1 month is Feb 28).
    The fractional remainder is scaled by the length of the month that
    starts at the date reached after the whole months.
    """
    whole = math.trunc(months)
    part = months - whole

    value = value + relativedelta(months=whole)
    if part > 0.0:
        month_length = (value + relativedelta(months=1)) - value
        value = value + month_length * part
    return value


def add_years(value: datetime, years: float) -> datetime:
    """
    Add a possibly fractional number of years.

    Whole years are added on the calendar (Feb 29 + 1 year is Feb 28).
    The fractional remainder is scaled by the length of the year that
    starts at the date reached after the whole years.
    """
    whole = math.trunc(years)
    part = years - whole

    value = value + relativedelta(years=whole)
    if part > 0.0:
        year_length = (value + relativedelta(years=1)) - value
        value = value + year_length * part
    return value
