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
Date Tokens

The date half of an absolute time expression. Each variant resolves to a
calendar date relative to a reference instant through
to_date(reference, inclusive): with inclusive=True the reference date
itself is an acceptable answer, with inclusive=False the date must be
strictly later. DateTimeToken tries the inclusive form first and falls
back to the exclusive form when the combined instant is not in the future.

Supported forms:
- Weekdays: "Friday", "next Fri", "Friday after next", "Friday next week"
- Relative days: "today", "tomorrow"
- Special days: "New Year", "Christmas Day", "xmas", "New Year's Eve", "nye"
- Calendar dates: "14 February", "Feb 14th, 2015", "the 14th", "March",
  "March 2016", "14/02", "02/14/2015", "2015-02-14", "03/2016", "2016-03"
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from .calendar_math import (
    increment_month,
    is_valid_date,
    month_name,
    ordinal_day,
    parse_month,
    parse_weekday,
    try_date,
    weekday_name,
)
from .culture import INVARIANT, Culture
from .errors import TokenFormatError, TokenResolutionError
from .rules import PatternRule


class DayOfWeekRelation(str, Enum):
    """How far ahead a named weekday is projected."""

    NEXT = "next"
    AFTER_NEXT = "after_next"
    NEXT_WEEK = "next_week"


class RelativeDate(str, Enum):
    """Days named relative to the reference date."""

    TODAY = "today"
    TOMORROW = "tomorrow"


class SpecialDate(str, Enum):
    """Fixed calendar anniversaries."""

    NEW_YEAR = "new_year"
    CHRISTMAS_DAY = "christmas_day"
    NEW_YEARS_EVE = "new_years_eve"


# (display name, month, day)
SPECIAL_DATES = {
    SpecialDate.NEW_YEAR: ("New Year", 1, 1),
    SpecialDate.CHRISTMAS_DAY: ("Christmas Day", 12, 25),
    SpecialDate.NEW_YEARS_EVE: ("New Year's Eve", 12, 31),
}


@dataclass(frozen=True)
class EmptyDateToken:
    """No date was given; the reference date is the anchor."""

    def to_date(self, reference: datetime, inclusive: bool = True) -> date:
        if inclusive:
            return reference.date()
        return reference.date() + timedelta(days=1)

    def describe(self, culture: Culture = INVARIANT) -> str:
        return ""

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class NormalDateToken:
    """
    A calendar date with any of year, month and day given.

    A year and a day without a month is rejected, as are fields that can
    never form a date ("30 February").
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self):
        if self.year is None and self.month is None and self.day is None:
            raise TokenFormatError("A date needs at least one of year, month or day")
        if self.year is not None and self.month is None and self.day is not None:
            raise TokenFormatError("A date with a year and a day needs a month")
        if not is_valid_date(self.year, self.month, self.day):
            raise TokenFormatError(
                f"Not a valid date: year={self.year} month={self.month} day={self.day}"
            )

    def to_date(self, reference: datetime, inclusive: bool = True) -> date:
        """
        Fill missing fields from the reference and roll forward until the
        date is not before the reference date (or strictly after it when
        inclusive is False).

        A day alone rolls by months, a month (with or without a day) rolls
        by years. An explicit year never rolls, so the date returned for
        one may be in the past.
        """
        today = reference.date()

        year = self.year if self.year is not None else today.year
        if self.month is not None:
            month = self.month
        elif self.year is None:
            month = today.month
        else:
            month = 1
        day = self.day if self.day is not None else 1

        while True:
            candidate = try_date(year, month, day)
            if candidate is not None and (
                candidate > today or (candidate == today and inclusive)
            ):
                return candidate

            if self.month is None and self.year is None:
                year, month = increment_month(year, month)
            elif self.year is None:
                year += 1
            elif candidate is None:
                raise TokenResolutionError(f"Not a valid date: {year}-{month}-{day}")
            else:
                return candidate

    def describe(self, culture: Culture = INVARIANT) -> str:
        if self.month is None:
            if self.year is None:
                return ordinal_day(self.day)
            return str(self.year)

        month = month_name(self.month)
        if self.day is None:
            return month if self.year is None else f"{month} {self.year}"

        if culture.is_month_first:
            text = f"{month} {self.day}"
            return text if self.year is None else f"{text}, {self.year}"

        text = f"{self.day} {month}"
        return text if self.year is None else f"{text} {self.year}"

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class DayOfWeekDateToken:
    """A named weekday (Monday is 0) and its relation to the reference."""

    weekday: int
    relation: DayOfWeekRelation = DayOfWeekRelation.NEXT

    def __post_init__(self):
        if self.weekday < 0 or self.weekday > 6:
            raise TokenFormatError(f"Weekday out of range: {self.weekday}")

    def to_date(self, reference: datetime, inclusive: bool = True) -> date:
        today = reference.date()

        if self.relation == DayOfWeekRelation.NEXT_WEEK:
            next_monday = today + timedelta(days=7 - today.weekday())
            return next_monday + timedelta(days=self.weekday)

        days_ahead = (self.weekday - today.weekday()) % 7 or 7
        candidate = today + timedelta(days=days_ahead)

        if self.relation == DayOfWeekRelation.AFTER_NEXT:
            candidate += timedelta(days=7)
        return candidate

    def describe(self, culture: Culture = INVARIANT) -> str:
        name = weekday_name(self.weekday)
        if self.relation == DayOfWeekRelation.AFTER_NEXT:
            return f"{name} after next"
        if self.relation == DayOfWeekRelation.NEXT_WEEK:
            return f"{name} next week"
        return name

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class RelativeDateToken:
    """Today or tomorrow."""

    relative: RelativeDate

    def to_date(self, reference: datetime, inclusive: bool = True) -> date:
        if self.relative == RelativeDate.TOMORROW:
            return reference.date() + timedelta(days=1)
        return reference.date()

    def describe(self, culture: Culture = INVARIANT) -> str:
        return self.relative.value

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class SpecialDateToken:
    """A fixed anniversary, resolved to its nearest occurrence."""

    special: SpecialDate

    def to_date(self, reference: datetime, inclusive: bool = True) -> date:
        today = reference.date()
        _, month, day = SPECIAL_DATES[self.special]

        candidate = date(today.year, month, day)
        if candidate < today or (candidate == today and not inclusive):
            candidate = date(today.year + 1, month, day)
        return candidate

    def describe(self, culture: Culture = INVARIANT) -> str:
        return SPECIAL_DATES[self.special][0]

    def __str__(self) -> str:
        return self.describe()


DateToken = Union[
    EmptyDateToken,
    NormalDateToken,
    DayOfWeekDateToken,
    RelativeDateToken,
    SpecialDateToken,
]


# Pattern fragments

WEEKDAY = r"(?P<weekday>sun|mon|tue|wed|thu|fri|sat)[a-z]*"
MONTH_NAME = r"(?P<month>jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*"
ORDINAL = r"(?:st|nd|rd|th)"
SHORT_YEAR = r"(?P<year>(?:\d\d)?\d\d)"
SEP = r"[./-]"

# ", 2015", ", 15" or " 2015"; a bare two-digit group after a space is a time
YEAR_SUFFIX = r"(?:(?:\s*,\s*|\s+(?=\d{4}))" + SHORT_YEAR + r")?"

# Four digits, or two digits that cannot be a day
LONG_YEAR = r"(?P<year>\d{4}|3[2-9]|[4-9]\d)"


def _build_weekday(match, culture: Culture) -> DayOfWeekDateToken:
    groups = match.groupdict()
    if groups.get("afternext"):
        relation = DayOfWeekRelation.AFTER_NEXT
    elif groups.get("nextweek"):
        relation = DayOfWeekRelation.NEXT_WEEK
    else:
        relation = DayOfWeekRelation.NEXT
    return DayOfWeekDateToken(parse_weekday(groups["weekday"]), relation)


def _build_normal(match, culture: Culture) -> NormalDateToken:
    groups = match.groupdict()

    day = int(groups["day"]) if groups.get("day") else None

    month = None
    if groups.get("month"):
        text = groups["month"]
        month = int(text) if text.isdigit() else parse_month(text)

    year = None
    if groups.get("year"):
        text = groups["year"]
        year = culture.expand_year(int(text)) if len(text) <= 2 else int(text)

    return NormalDateToken(year=year, month=month, day=day)


def _relative(relative: RelativeDate):
    return lambda match, culture: RelativeDateToken(relative)


def _special(special: SpecialDate):
    return lambda match, culture: SpecialDateToken(special)


SPECIAL_DATE_RULES = [
    PatternRule(
        "new_years_eve",
        r"nye | new\s*year(?:'?s)?\s*eve",
        _special(SpecialDate.NEW_YEARS_EVE),
    ),
    PatternRule(
        "new_year",
        r"ny | new\s*year(?:'?s)?(?:\s*day)?",
        _special(SpecialDate.NEW_YEAR),
    ),
    PatternRule(
        "christmas_day",
        r"(?:ch?rist?|x)-?mass?(?:\s*day)?",
        _special(SpecialDate.CHRISTMAS_DAY),
    ),
]

RELATIVE_DATE_RULES = [
    PatternRule("today", r"today | tdy", _relative(RelativeDate.TODAY)),
    PatternRule("tomorrow", r"tomorrow | tmrw? | tmw", _relative(RelativeDate.TOMORROW)),
]

WEEKDAY_RULES = [
    # "Friday next week", "fri next wk"
    PatternRule(
        "weekday_next_week",
        WEEKDAY + r"\s*(?P<nextweek>next\s*w(?:ee)?k)",
        _build_weekday,
    ),
    # "Friday next", "Friday after next"
    PatternRule(
        "weekday_after_next",
        WEEKDAY + r"(?:\s*after)?\s*(?P<afternext>next)",
        _build_weekday,
    ),
    # "Friday", "this Friday", "next Friday"
    PatternRule(
        "weekday_next",
        r"(?:(?:this|next)\s*)?" + WEEKDAY,
        _build_weekday,
    ),
]

# "14 February", "14th of February, 2015"
SPELLED_DAY_FIRST = PatternRule(
    "spelled_day_first",
    r"(?:the\s*)?(?P<day>\d\d?)(?:\s*" + ORDINAL + r")?(?:\s*of)?\s*" + MONTH_NAME
    + YEAR_SUFFIX,
    _build_normal,
)

# "February 14", "Feb 14th, 2015"
SPELLED_MONTH_FIRST = PatternRule(
    "spelled_month_first",
    MONTH_NAME + r"\s*(?:the\s*)?(?P<day>\d\d?)(?:\s*" + ORDINAL + r")?"
    + YEAR_SUFFIX,
    _build_normal,
)

# "14/02", "14.02.2015"
NUMERIC_DAY_FIRST = PatternRule(
    "numeric_day_first",
    r"(?P<day>\d\d?)" + SEP + r"(?P<month>\d\d?)(?:" + SEP + SHORT_YEAR + r")?",
    _build_normal,
)

# "02/14", "02/14/2015"
NUMERIC_MONTH_FIRST = PatternRule(
    "numeric_month_first",
    r"(?P<month>\d\d?)" + SEP + r"(?P<day>\d\d?)(?:" + SEP + SHORT_YEAR + r")?",
    _build_normal,
)

# "2015-02-14", "15/02/14"
NUMERIC_YEAR_FIRST = PatternRule(
    "numeric_year_first",
    SHORT_YEAR + SEP + r"(?P<month>\d\d?)" + SEP + r"(?P<day>\d\d?)",
    _build_normal,
)

# "14th", "the 14th"
DAY_ONLY = PatternRule(
    "day_only",
    r"(?:the\s*)?(?P<day>\d\d?)\s*" + ORDINAL,
    _build_normal,
)

# "March", "March 2016"
SPELLED_MONTH_AND_YEAR = PatternRule(
    "spelled_month_and_year",
    MONTH_NAME + r"(?:\s*,?\s*(?P<year>\d\d\d\d))?",
    _build_normal,
)

# "03/2016", "10/45"
NUMERIC_MONTH_AND_YEAR = PatternRule(
    "numeric_month_and_year",
    r"(?P<month>\d\d?)" + SEP + LONG_YEAR,
    _build_normal,
)

# "2016/03", "2016-03"
NUMERIC_YEAR_AND_MONTH = PatternRule(
    "numeric_year_and_month",
    r"(?P<year>\d{4})" + SEP + r"(?P<month>\d\d?)",
    _build_normal,
)


def normal_date_rules(culture: Culture) -> list[PatternRule]:
    """Calendar date rules, with the culture's own field order tried first."""
    if culture.is_month_first:
        ordered = [
            SPELLED_MONTH_FIRST,
            SPELLED_DAY_FIRST,
            NUMERIC_MONTH_FIRST,
            NUMERIC_DAY_FIRST,
            NUMERIC_YEAR_FIRST,
        ]
    elif culture.is_year_first:
        ordered = [
            SPELLED_DAY_FIRST,
            SPELLED_MONTH_FIRST,
            NUMERIC_YEAR_FIRST,
            NUMERIC_MONTH_FIRST,
            NUMERIC_DAY_FIRST,
        ]
    else:
        ordered = [
            SPELLED_DAY_FIRST,
            SPELLED_MONTH_FIRST,
            NUMERIC_DAY_FIRST,
            NUMERIC_MONTH_FIRST,
            NUMERIC_YEAR_FIRST,
        ]

    return ordered + [
        DAY_ONLY,
        SPELLED_MONTH_AND_YEAR,
        NUMERIC_MONTH_AND_YEAR,
        NUMERIC_YEAR_AND_MONTH,
    ]


def date_rules(culture: Culture) -> list[PatternRule]:
    """All date rules in priority order, literal vocabulary first."""
    return (
        SPECIAL_DATE_RULES
        + RELATIVE_DATE_RULES
        + WEEKDAY_RULES
        + normal_date_rules(culture)
    )
