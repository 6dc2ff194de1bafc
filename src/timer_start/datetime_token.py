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
Date-Time Tokens

An absolute time expression is at most one date span and one time span,
in either order, separated by whitespace, a comma or "@" and optionally
joined by "at" or "on":

- "next Friday at 2:30:15 p.m."
- "Christmas Day noon"
- "5pm on the 14th"
- "today 5am", "tomorrow", "midnight"

DateTimeTokenParser compiles every (date rule, time rule) pair into one
anchored regex per culture and tries them in priority order: date alone,
time alone, date then time, time then date. The first combination whose
builders accept the match wins.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Optional

from .culture import INVARIANT, Culture
from .date_tokens import DateToken, EmptyDateToken, NormalDateToken, date_rules
from .errors import InvalidArgumentError, TokenFormatError, TokenResolutionError
from .rules import REGEX_FLAGS, PatternRule
from .time_tokens import EmptyTimeToken, TimeToken, time_rules

logger = logging.getLogger("timer_start.datetime_token")


@dataclass(frozen=True)
class DateTimeToken:
    """A date token and a time token, either of which may be empty."""

    date_token: DateToken = field(default_factory=EmptyDateToken)
    time_token: TimeToken = field(default_factory=EmptyTimeToken)

    @property
    def has_explicit_year(self) -> bool:
        return (
            isinstance(self.date_token, NormalDateToken)
            and self.date_token.year is not None
        )

    def get_end_time(self, reference: datetime) -> datetime:
        """
        Resolve to the first matching instant strictly after the reference.

        The date is resolved inclusively first (the reference date may be
        used). If the combined instant is not in the future the date is
        resolved again exclusively, and as a last resort the instant is
        pushed forward one day ("today 5am" in the afternoon is tomorrow).

        Raises:
            TokenResolutionError: If an explicit year puts the instant in the
                past, or the result falls outside the supported calendar
        """
        try:
            day = self.date_token.to_date(reference, inclusive=True)
            end = self.time_token.to_datetime(day)

            if end <= reference:
                day = self.date_token.to_date(reference, inclusive=False)
                end = self.time_token.to_datetime(day)

            if end <= reference:
                if self.has_explicit_year:
                    raise TokenResolutionError(
                        f"'{self}' is not after {reference.isoformat()}"
                    )
                end += timedelta(days=1)
        except OverflowError as e:
            raise TokenResolutionError(f"'{self}' is out of range: {e}") from e

        logger.debug(f"Resolved '{self}' against {reference.isoformat()} to {end}")
        return end

    def try_get_end_time(self, reference: datetime) -> Optional[datetime]:
        """Like get_end_time, but returns None when no end time exists."""
        try:
            return self.get_end_time(reference)
        except TokenResolutionError:
            return None

    def describe(self, culture: Culture = INVARIANT) -> str:
        date_text = self.date_token.describe(culture)
        time_text = self.time_token.describe(culture)
        if date_text and time_text:
            return f"{date_text} at {time_text}"
        return date_text or time_text

    def __str__(self) -> str:
        return self.describe()


# A whole expression may open with "at" or "on"
LEADING = r"(?:(?:at|on)\s+)?"

# "Friday at 5pm", "Friday, 5pm", "Friday @ 5pm"; the two spans never touch
DATE_TIME_SEPARATOR = r"(?:\s*,\s*(?:(?:at|@)\s*)?|\s*@\s*|\s+(?:at\s*)?)"

# "5pm on Friday", "5pm, Friday"
TIME_DATE_SEPARATOR = r"(?:\s*,\s*(?:on\s*)?|\s+(?:on\s+)?)"


@dataclass(frozen=True)
class _Combination:
    regex: re.Pattern
    date_rule: Optional[PatternRule]
    time_rule: Optional[PatternRule]

    @property
    def name(self) -> str:
        names = [rule.name for rule in (self.date_rule, self.time_rule) if rule]
        return "+".join(names)


@lru_cache(maxsize=16)
def _combinations(culture: Culture) -> tuple[_Combination, ...]:
    """Compile every date/time pairing for a culture, in priority order."""
    dates = date_rules(culture)
    times = time_rules(culture)

    def compile_(*parts: str) -> re.Pattern:
        return re.compile(LEADING + "".join(parts), REGEX_FLAGS)

    combinations = []
    for date_rule in dates:
        combinations.append(
            _Combination(compile_(f"(?:{date_rule.pattern})"), date_rule, None)
        )
    for time_rule in times:
        combinations.append(
            _Combination(compile_(f"(?:{time_rule.pattern})"), None, time_rule)
        )
    for date_rule in dates:
        for time_rule in times:
            combinations.append(
                _Combination(
                    compile_(
                        f"(?:{date_rule.pattern})",
                        DATE_TIME_SEPARATOR,
                        f"(?:{time_rule.pattern})",
                    ),
                    date_rule,
                    time_rule,
                )
            )
    for time_rule in times:
        for date_rule in dates:
            combinations.append(
                _Combination(
                    compile_(
                        f"(?:{time_rule.pattern})",
                        TIME_DATE_SEPARATOR,
                        f"(?:{date_rule.pattern})",
                    ),
                    date_rule,
                    time_rule,
                )
            )

    logger.debug(
        f"Compiled {len(combinations)} date/time combinations for {culture.name}"
    )
    return tuple(combinations)


class DateTimeTokenParser:
    """Parses absolute time expressions into DateTimeToken objects."""

    def parse(self, text: str, culture: Culture = INVARIANT) -> DateTimeToken:
        """
        Parse an absolute time expression.

        Raises:
            InvalidArgumentError: If text is None
            TokenFormatError: If no date/time combination consumes the text
        """
        if text is None:
            raise InvalidArgumentError("text must not be None")

        stripped = text.strip()
        if stripped:
            for combination in _combinations(culture):
                match = combination.regex.fullmatch(stripped)
                if not match:
                    continue

                try:
                    date_token = (
                        combination.date_rule.build(match, culture)
                        if combination.date_rule
                        else EmptyDateToken()
                    )
                    time_token = (
                        combination.time_rule.build(match, culture)
                        if combination.time_rule
                        else EmptyTimeToken()
                    )
                except ValueError as e:
                    logger.debug(f"Rule {combination.name} rejected '{stripped}': {e}")
                    continue

                logger.debug(f"Rule {combination.name} matched '{stripped}'")
                return DateTimeToken(date_token, time_token)

        raise TokenFormatError(f"Not a date or time: '{text}'")
