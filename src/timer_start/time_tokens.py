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
Time Tokens

The time-of-day half of an absolute time expression. Each variant places
itself on a resolved date through to_datetime(day).

Supported forms:
- "noon", "midday", "12 noon", "12:00 noon", "midnight", "12 midnight"
- "5", "5pm", "5 p.m.", "2:30", "2:30:15 pm", "5 o'clock"
- compact clock strings: "230", "2300", "23015", "0730"

A bare hour with no am/pm marker keeps an undefined period until it is
resolved: 1-7 are afternoon hours, 8-11 are morning hours and 12 is noon.
Zero-padded and 24-hour forms ("0730", "1030", "17:45") carry an explicit
period from the start.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Union

from .culture import INVARIANT, Culture
from .errors import TokenFormatError
from .rules import PatternRule


class HourPeriod(str, Enum):
    """Half of the day a 12-hour clock value belongs to."""

    UNDEFINED = "undefined"
    AM = "am"
    PM = "pm"


class SpecialTime(str, Enum):
    """Named times of day."""

    MIDDAY = "midday"
    MIDNIGHT = "midnight"


# (display name, hour, minute, second)
SPECIAL_TIMES = {
    SpecialTime.MIDDAY: ("12 noon", 12, 0, 0),
    SpecialTime.MIDNIGHT: ("12 midnight", 0, 0, 0),
}


def resolve_period(hour: int) -> HourPeriod:
    """Pick the period for a bare 12-hour clock value."""
    if 1 <= hour <= 7:
        return HourPeriod.PM
    if 8 <= hour <= 11:
        return HourPeriod.AM
    return HourPeriod.PM


@dataclass(frozen=True)
class EmptyTimeToken:
    """No time was given; the day starts at midnight."""

    def to_datetime(self, day: date) -> datetime:
        return datetime.combine(day, time(0, 0, 0))

    def describe(self, culture: Culture = INVARIANT) -> str:
        return ""

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class NormalTimeToken:
    """A 12-hour clock time (hour 1-12) and its period."""

    hour: int
    minute: int = 0
    second: int = 0
    period: HourPeriod = HourPeriod.UNDEFINED

    def __post_init__(self):
        if not 1 <= self.hour <= 12:
            raise TokenFormatError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise TokenFormatError(f"Minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise TokenFormatError(f"Second out of range: {self.second}")

    @property
    def resolved_period(self) -> HourPeriod:
        if self.period == HourPeriod.UNDEFINED:
            return resolve_period(self.hour)
        return self.period

    @property
    def normalized_hour(self) -> int:
        """The hour on a 24-hour clock (0-23)."""
        period = self.resolved_period
        if period == HourPeriod.AM and self.hour == 12:
            return 0
        if period == HourPeriod.PM and self.hour < 12:
            return self.hour + 12
        return self.hour

    def to_datetime(self, day: date) -> datetime:
        return datetime.combine(
            day, time(self.normalized_hour, self.minute, self.second)
        )

    def describe(self, culture: Culture = INVARIANT) -> str:
        text = str(self.hour)
        if self.minute or self.second:
            text += f":{self.minute:02d}"
            if self.second:
                text += f":{self.second:02d}"

        if self.period == HourPeriod.UNDEFINED:
            return text if ":" in text else f"{text} o'clock"

        if self.minute == 0 and self.second == 0 and self.hour == 12:
            return f"{text} noon" if self.period == HourPeriod.PM else f"{text} midnight"
        return f"{text} {self.period.value}"

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class SpecialTimeToken:
    """Noon or midnight."""

    special: SpecialTime

    def to_datetime(self, day: date) -> datetime:
        _, hour, minute, second = SPECIAL_TIMES[self.special]
        return datetime.combine(day, time(hour, minute, second))

    def describe(self, culture: Culture = INVARIANT) -> str:
        return SPECIAL_TIMES[self.special][0]

    def __str__(self) -> str:
        return self.describe()


TimeToken = Union[EmptyTimeToken, NormalTimeToken, SpecialTimeToken]


# Pattern fragments

HOUR_PERIOD = (
    r"(?:\s*(?:(?P<am>a\.?(?:\s*m\.?)?)|(?P<pm>p\.?(?:\s*m\.?)?)))?"
    r"(?:\s*o'?clock)?"
)

TWELVE = r"(?:12(?:[.:]00(?:[.:]00)?)?\s*)?"


def _normal_time_builder(compact: bool):
    """
    Builder for clock times. A two-digit hour is read as 24-hour time when
    it is zero-padded, or when a compact string also carries minutes
    ("1030", "0730").
    """

    def build(match, culture: Culture) -> NormalTimeToken:
        groups = match.groupdict()
        hour_text = groups["hour"]
        hour = int(hour_text)
        minute = int(groups["minute"]) if groups.get("minute") else 0
        second = int(groups["second"]) if groups.get("second") else 0

        if groups.get("am") or groups.get("pm"):
            if not 1 <= hour <= 12:
                raise TokenFormatError(f"Hour out of range for am/pm: {hour}")
            period = HourPeriod.AM if groups.get("am") else HourPeriod.PM
            return NormalTimeToken(hour, minute, second, period)

        if hour > 23:
            raise TokenFormatError(f"Hour out of range: {hour}")

        military = len(hour_text) == 2 and (
            hour_text.startswith("0") or (compact and groups.get("minute"))
        )

        if hour == 0:
            return NormalTimeToken(12, minute, second, HourPeriod.AM)
        if hour > 12:
            return NormalTimeToken(hour - 12, minute, second, HourPeriod.PM)
        if military:
            period = HourPeriod.PM if hour == 12 else HourPeriod.AM
            return NormalTimeToken(hour, minute, second, period)
        return NormalTimeToken(hour, minute, second, HourPeriod.UNDEFINED)

    return build


def _special(special: SpecialTime):
    return lambda match, culture: SpecialTimeToken(special)


TIME_RULES = [
    PatternRule(
        "midday",
        TWELVE + r"(?:noon|mid(?:-?d)?ay)",
        _special(SpecialTime.MIDDAY),
    ),
    PatternRule(
        "midnight",
        TWELVE + r"mid-?night",
        _special(SpecialTime.MIDNIGHT),
    ),
    # "5", "5pm", "2:30", "2.30.15 p.m."
    PatternRule(
        "time_with_separators",
        r"(?P<hour>\d\d?)(?:[.:](?P<minute>\d\d)(?:[.:](?P<second>\d\d))?)?"
        + HOUR_PERIOD,
        _normal_time_builder(compact=False),
    ),
    # "230", "2300", "23015pm"
    PatternRule(
        "time_without_separators",
        r"(?P<hour>\d\d?)(?:(?P<minute>\d\d)(?P<second>\d\d)?)?" + HOUR_PERIOD,
        _normal_time_builder(compact=True),
    ),
]


def time_rules(culture: Culture) -> list[PatternRule]:
    """All time rules in priority order, literal vocabulary first."""
    return list(TIME_RULES)
