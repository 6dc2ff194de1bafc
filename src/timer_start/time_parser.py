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
Time Parser Module

Entry points for turning timer start text into an end time. Supports both
absolute expressions ("next Friday at 2:30pm", "Christmas Day noon") and
durations ("5d 2h 15m", "2.5 years", "15:30").

Only TimeParseError (bad text) and InvalidArgumentError (None text) leave
this module; token-level failures are translated.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .config import ParserConfig
from .culture import Culture
from .datetime_token import DateTimeToken, DateTimeTokenParser
from .errors import (
    InvalidArgumentError,
    TimeParseError,
    TokenFormatError,
    TokenResolutionError,
)
from .timespan_token import TimeSpanToken, TimeSpanTokenParser

logger = logging.getLogger("timer_start.time_parser")

TimerStartToken = Union[DateTimeToken, TimeSpanToken]

ABSOLUTE_HINT = (
    "Try formats like '5pm', 'tomorrow at 10am', 'next Friday 2:30pm' "
    "or 'Christmas Day noon'."
)
DURATION_HINT = "Try formats like '5', '15:30', '2h 15m' or '1.5 days'."

_date_time_parser = DateTimeTokenParser()
_time_span_parser = TimeSpanTokenParser()


class TimerStartKind(str, Enum):
    """Which of the two token kinds a timer start is."""

    TIME_SPAN = "time_span"
    DATE_TIME = "date_time"


def timer_start_kind(token: TimerStartToken) -> TimerStartKind:
    if isinstance(token, TimeSpanToken):
        return TimerStartKind.TIME_SPAN
    if isinstance(token, DateTimeToken):
        return TimerStartKind.DATE_TIME
    raise InvalidArgumentError(f"Not a timer start token: {token!r}")


def _resolve_culture(culture: Union[Culture, str, None]) -> Culture:
    """Accept a Culture, a locale name, or None for the configured default."""
    if isinstance(culture, Culture):
        return culture

    config = ParserConfig.from_env()
    if culture is not None:
        config.culture = culture
    return config.get_culture()


def _require_text(text: Optional[str]) -> str:
    if text is None:
        raise InvalidArgumentError("text must not be None")
    return text


def parse_absolute(
    text: str,
    reference: Optional[datetime] = None,
    culture: Union[Culture, str, None] = None,
) -> datetime:
    """
    Parse an absolute time expression and resolve it against a reference.

    Args:
        text: Expression such as "next Friday at 2:30pm"
        reference: The instant to resolve against (defaults to now)
        culture: Culture or locale name for numeric dates (defaults to config)

    Returns:
        An instant strictly after the reference

    Raises:
        InvalidArgumentError: If text is None
        TimeParseError: If the expression cannot be parsed or resolved
    """
    _require_text(text)
    reference = reference or datetime.now()

    try:
        token = _date_time_parser.parse(text, _resolve_culture(culture))
        return token.get_end_time(reference)
    except (TokenFormatError, TokenResolutionError) as e:
        logger.debug(f"Absolute parse of '{text}' failed: {e}")
        raise TimeParseError(
            f"Could not parse time expression: '{text}'. {ABSOLUTE_HINT}", text
        ) from e


def parse_duration(
    text: str,
    culture: Union[Culture, str, None] = None,
) -> TimeSpanToken:
    """
    Parse a duration expression.

    Returns:
        The parsed duration, possibly all zero but never negative

    Raises:
        InvalidArgumentError: If text is None
        TimeParseError: If the expression is not a duration
    """
    _require_text(text)

    try:
        return _time_span_parser.parse(text, _resolve_culture(culture))
    except TokenFormatError as e:
        logger.debug(f"Duration parse of '{text}' failed: {e}")
        raise TimeParseError(
            f"Could not parse duration: '{text}'. {DURATION_HINT}", text
        ) from e


def parse_duration_end_time(
    text: str,
    reference: Optional[datetime] = None,
    culture: Union[Culture, str, None] = None,
) -> datetime:
    """Parse a duration and add it to the reference (defaults to now)."""
    token = parse_duration(text, culture)
    reference = reference or datetime.now()

    try:
        return token.get_end_time(reference)
    except TokenResolutionError as e:
        raise TimeParseError(
            f"Duration '{text}' is out of range. {DURATION_HINT}", text
        ) from e


def parse_timer_start(
    text: str,
    culture: Union[Culture, str, None] = None,
    prefer_duration: Optional[bool] = None,
) -> TimerStartToken:
    """
    Parse text as either a duration or an absolute time.

    With prefer_duration (the default from config) "5" is five minutes;
    without it "5" is 5 pm.

    Raises:
        InvalidArgumentError: If text is None
        TimeParseError: If neither parser accepts the text
    """
    _require_text(text)

    if prefer_duration is None:
        prefer_duration = ParserConfig.from_env().prefer_duration
    resolved = _resolve_culture(culture)

    parsers = [_time_span_parser, _date_time_parser]
    if not prefer_duration:
        parsers.reverse()

    for parser in parsers:
        try:
            return parser.parse(text, resolved)
        except TokenFormatError as e:
            logger.debug(f"{type(parser).__name__} rejected '{text}': {e}")

    raise TimeParseError(
        f"Could not parse time expression: '{text}'. {ABSOLUTE_HINT} {DURATION_HINT}",
        text,
    )


def try_parse_timer_start(
    text: Optional[str],
    culture: Union[Culture, str, None] = None,
    prefer_duration: Optional[bool] = None,
) -> Optional[TimerStartToken]:
    """Like parse_timer_start, but returns None for None or unparseable text."""
    if text is None:
        return None

    try:
        return parse_timer_start(text, culture, prefer_duration)
    except TimeParseError:
        return None


def get_end_time(
    text: str,
    reference: Optional[datetime] = None,
    culture: Union[Culture, str, None] = None,
    prefer_duration: Optional[bool] = None,
) -> datetime:
    """
    Parse a timer start of either kind and resolve it against a reference.

    Raises:
        InvalidArgumentError: If text is None
        TimeParseError: If the text cannot be parsed or resolved
    """
    token = parse_timer_start(text, culture, prefer_duration)
    reference = reference or datetime.now()

    try:
        end_time = token.get_end_time(reference)
    except TokenResolutionError as e:
        raise TimeParseError(
            f"Time '{text}' has no end time after {reference.isoformat()}. "
            "Try specifying a future date like 'tomorrow at 10am'.",
            text,
        ) from e

    logger.info(f"Timer start '{text}' ends at {end_time.isoformat()}")
    return end_time
