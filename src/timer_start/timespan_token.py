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
Time Span Tokens

Durations come in two shapes.

Short form, plain numbers separated by ".", ":" or spaces. The right-most
number is seconds and each extra number reaches one unit further left:
- "5" (a lone number is minutes), "15:30", "1:15:30", "2 1:15:30"
- five numbers add months, six add years

Labeled form, numbers with unit suffixes, optionally joined by commas or
"and":
- "30s", "15 min", "72hr", "38 days", "54wk", "94mo", "21 years"
- "5d 2.5h 2.5m 2.5s", "1 hour and 30 minutes", "1h, 30m"
- "15m30" (an unlabeled number takes the next smaller unit after its
  labeled neighbor on the left)
"""

import logging
import math
import re
from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from typing import Optional

from .calendar_math import add_months, add_years
from .culture import INVARIANT, Culture
from .errors import InvalidArgumentError, TokenFormatError, TokenResolutionError

logger = logging.getLogger("timer_start.timespan_token")

# Display names, largest unit first
UNIT_NAMES = {
    "years": ("year", "years"),
    "months": ("month", "months"),
    "weeks": ("week", "weeks"),
    "days": ("day", "days"),
    "hours": ("hour", "hours"),
    "minutes": ("minute", "minutes"),
    "seconds": ("second", "seconds"),
}


@dataclass(frozen=True)
class TimeSpanToken:
    """A duration as independent, non-negative calendar quantities."""

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0

    def __post_init__(self):
        for item in fields(self):
            value = getattr(self, item.name)
            if not math.isfinite(value) or value < 0:
                raise TokenFormatError(f"{item.name} must be a non-negative number")

    @property
    def is_zero(self) -> bool:
        return all(getattr(self, item.name) == 0 for item in fields(self))

    def get_end_time(self, reference: datetime) -> datetime:
        """
        Add the duration to the reference.

        Weeks and smaller units are exact elapsed time and are added first.
        Months and then years follow on the calendar, whole units first and
        then the fraction scaled by the length of the unit reached.

        Raises:
            TokenResolutionError: If the result falls outside the supported calendar
        """
        try:
            end = reference + timedelta(
                weeks=self.weeks,
                days=self.days,
                hours=self.hours,
                minutes=self.minutes,
                seconds=self.seconds,
            )
            end = add_months(end, self.months)
            end = add_years(end, self.years)
        except (OverflowError, ValueError) as e:
            raise TokenResolutionError(f"'{self}' is out of range: {e}") from e

        logger.debug(f"Resolved '{self}' against {reference.isoformat()} to {end}")
        return end

    def try_get_end_time(self, reference: datetime) -> Optional[datetime]:
        """Like get_end_time, but returns None when the result is out of range."""
        try:
            return self.get_end_time(reference)
        except TokenResolutionError:
            return None

    def to_timedelta(self, reference: datetime) -> timedelta:
        """Elapsed time from the reference to the end time."""
        return self.get_end_time(reference) - reference

    def describe(self, culture: Culture = INVARIANT) -> str:
        parts = []
        for name, (singular, plural) in UNIT_NAMES.items():
            value = getattr(self, name)
            if value:
                parts.append(f"{value:g} {singular if value == 1 else plural}")
        return " ".join(parts) if parts else "0 seconds"

    def __str__(self) -> str:
        return self.describe()


# Short form: integer groups, seconds on the right
SHORT_FORM = re.compile(r"\d+(?:(?:\s*[.:,;]\s*|\s+)\d+){0,5}")
SHORT_FORM_UNITS = ["years", "months", "days", "hours", "minutes", "seconds"]

NUMBER = r"(?P<number>\d+(?:\.\d+)?|\.\d+)"
UNIT = (
    r"(?P<unit>years?|yrs?|y|months?|mons?|mo|weeks?|wks?|w|days?|dys?|d"
    r"|hours?|hrs?|h|minutes?|mins?|m|seconds?|secs?|s)(?![a-z])"
)
PART = re.compile(NUMBER + r"(?:\s*" + UNIT + r")?", re.IGNORECASE)
JOINER = re.compile(r"\s*(?:(?:,|and\b)\s*)?", re.IGNORECASE)

# Where an unlabeled number lands after a labeled one
NEXT_UNIT = {
    "years": "months",
    "months": "days",
    "weeks": "days",
    "days": "hours",
    "hours": "minutes",
    "minutes": "seconds",
}


def unit_field(unit: str) -> str:
    """Map a unit suffix ("hr", "mo", "secs") to a TimeSpanToken field name."""
    unit = unit.lower()
    if unit.startswith("mo"):
        return "months"
    return {
        "y": "years",
        "w": "weeks",
        "d": "days",
        "h": "hours",
        "m": "minutes",
        "s": "seconds",
    }[unit[0]]


class TimeSpanTokenParser:
    """Parses duration expressions into TimeSpanToken objects."""

    def parse(self, text: str, culture: Culture = INVARIANT) -> TimeSpanToken:
        """
        Parse a duration expression.

        Raises:
            InvalidArgumentError: If text is None
            TokenFormatError: If the text is not a duration
        """
        if text is None:
            raise InvalidArgumentError("text must not be None")

        stripped = text.strip()
        if not stripped:
            raise TokenFormatError("Empty duration")

        if SHORT_FORM.fullmatch(stripped):
            token = self._parse_short_form(stripped)
        else:
            token = self._parse_labeled(stripped)

        logger.debug(f"Parsed duration '{stripped}' as {token}")
        return token

    def _parse_short_form(self, text: str) -> TimeSpanToken:
        numbers = [float(group) for group in re.findall(r"\d+", text)]

        if len(numbers) == 1:
            return TimeSpanToken(minutes=numbers[0])

        units = SHORT_FORM_UNITS[-len(numbers):]
        return TimeSpanToken(**dict(zip(units, numbers)))

    def _parse_labeled(self, text: str) -> TimeSpanToken:
        parts = []
        position = 0
        while True:
            match = PART.match(text, position)
            if not match:
                raise TokenFormatError(f"Not a duration: '{text}'")

            unit = match.group("unit")
            parts.append((float(match.group("number")), unit_field(unit) if unit else None))

            position = match.end()
            if position == len(text):
                break
            position = JOINER.match(text, position).end()

        values = {}
        current = None
        for number, unit in parts:
            if unit is None:
                if current is None:
                    raise TokenFormatError(
                        f"Ambiguous duration, no unit before {number:g}: '{text}'"
                    )
                if current not in NEXT_UNIT:
                    raise TokenFormatError(
                        f"No unit smaller than {current} for {number:g}: '{text}'"
                    )
                unit = NEXT_UNIT[current]

            values[unit] = values.get(unit, 0.0) + number
            current = unit

        return TimeSpanToken(**values)
