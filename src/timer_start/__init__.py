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
Timer Start Package

Turns free-form timer start text ("next Friday at 2:30pm", "5d 2h 15m")
into an end time relative to a reference instant.
"""

from .config import ParserConfig
from .culture import EN_GB, EN_US, INVARIANT, JA_JP, Culture, DateOrder
from .date_tokens import (
    DayOfWeekDateToken,
    DayOfWeekRelation,
    EmptyDateToken,
    NormalDateToken,
    RelativeDate,
    RelativeDateToken,
    SpecialDate,
    SpecialDateToken,
)
from .datetime_token import DateTimeToken, DateTimeTokenParser
from .errors import (
    InvalidArgumentError,
    TimeParseError,
    TokenFormatError,
    TokenResolutionError,
)
from .time_parser import (
    TimerStartKind,
    TimerStartToken,
    get_end_time,
    parse_absolute,
    parse_duration,
    parse_duration_end_time,
    parse_timer_start,
    timer_start_kind,
    try_parse_timer_start,
)
from .time_tokens import (
    EmptyTimeToken,
    HourPeriod,
    NormalTimeToken,
    SpecialTime,
    SpecialTimeToken,
)
from .timespan_token import TimeSpanToken, TimeSpanTokenParser

__all__ = [
    "ParserConfig",
    "Culture",
    "DateOrder",
    "INVARIANT",
    "EN_US",
    "EN_GB",
    "JA_JP",
    "EmptyDateToken",
    "NormalDateToken",
    "DayOfWeekDateToken",
    "DayOfWeekRelation",
    "RelativeDateToken",
    "RelativeDate",
    "SpecialDateToken",
    "SpecialDate",
    "EmptyTimeToken",
    "NormalTimeToken",
    "HourPeriod",
    "SpecialTimeToken",
    "SpecialTime",
    "DateTimeToken",
    "DateTimeTokenParser",
    "TimeSpanToken",
    "TimeSpanTokenParser",
    "TimerStartToken",
    "TimerStartKind",
    "timer_start_kind",
    "InvalidArgumentError",
    "TimeParseError",
    "TokenFormatError",
    "TokenResolutionError",
    "parse_absolute",
    "parse_duration",
    "parse_duration_end_time",
    "parse_timer_start",
    "try_parse_timer_start",
    "get_end_time",
]
