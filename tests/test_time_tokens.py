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

"""Tests for time tokens and the time recognizers."""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from timer_start.culture import INVARIANT
from timer_start.errors import TokenFormatError
from timer_start.time_tokens import (
    EmptyTimeToken,
    HourPeriod,
    NormalTimeToken,
    SpecialTime,
    SpecialTimeToken,
    time_rules,
)

DAY = date(2015, 1, 1)


def parse_time(text):
    """Run the time rules alone, in order, the way the composite parser does."""
    for rule in time_rules(INVARIANT):
        match = rule.fullmatch(text)
        if not match:
            continue
        try:
            return rule.build(match, INVARIANT)
        except TokenFormatError:
            continue
    return None


class TestHourHeuristic:
    """Test resolution of bare hours without am/pm."""

    @pytest.mark.parametrize("hour", range(1, 8))
    def test_early_hours_are_afternoon(self, hour):
        token = NormalTimeToken(hour)
        assert token.resolved_period == HourPeriod.PM
        assert token.normalized_hour == hour + 12

    @pytest.mark.parametrize("hour", range(8, 12))
    def test_late_hours_are_morning(self, hour):
        token = NormalTimeToken(hour)
        assert token.resolved_period == HourPeriod.AM
        assert token.normalized_hour == hour

    def test_twelve_is_noon(self):
        assert NormalTimeToken(12).normalized_hour == 12

    def test_explicit_periods(self):
        assert NormalTimeToken(12, period=HourPeriod.AM).normalized_hour == 0
        assert NormalTimeToken(12, period=HourPeriod.PM).normalized_hour == 12
        assert NormalTimeToken(5, period=HourPeriod.AM).normalized_hour == 5
        assert NormalTimeToken(9, period=HourPeriod.PM).normalized_hour == 21


class TestTimeTokens:
    """Test placing time tokens on a day."""

    def test_normal(self):
        token = NormalTimeToken(2, 30, 15, HourPeriod.PM)
        assert token.to_datetime(DAY) == datetime(2015, 1, 1, 14, 30, 15)

    def test_special(self):
        assert SpecialTimeToken(SpecialTime.MIDDAY).to_datetime(DAY) == datetime(
            2015, 1, 1, 12
        )
        assert SpecialTimeToken(SpecialTime.MIDNIGHT).to_datetime(DAY) == datetime(
            2015, 1, 1
        )

    def test_empty_is_midnight(self):
        assert EmptyTimeToken().to_datetime(DAY) == datetime(2015, 1, 1)

    def test_out_of_range(self):
        with pytest.raises(TokenFormatError):
            NormalTimeToken(0)
        with pytest.raises(TokenFormatError):
            NormalTimeToken(13)
        with pytest.raises(TokenFormatError):
            NormalTimeToken(5, 60)
        with pytest.raises(TokenFormatError):
            NormalTimeToken(5, 0, 60)

    def test_describe(self):
        assert str(NormalTimeToken(2, 30, 15, HourPeriod.PM)) == "2:30:15 pm"
        assert str(NormalTimeToken(9, period=HourPeriod.AM)) == "9 am"
        assert str(NormalTimeToken(5)) == "5 o'clock"
        assert str(NormalTimeToken(5, 30)) == "5:30"
        assert str(NormalTimeToken(12, period=HourPeriod.PM)) == "12 noon"
        assert str(SpecialTimeToken(SpecialTime.MIDNIGHT)) == "12 midnight"


class TestTimeRecognizers:
    """Test the ordered time rules."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5", NormalTimeToken(5)),
            ("5 o'clock", NormalTimeToken(5)),
            ("5pm", NormalTimeToken(5, period=HourPeriod.PM)),
            ("5 p.m.", NormalTimeToken(5, period=HourPeriod.PM)),
            ("5 P M", NormalTimeToken(5, period=HourPeriod.PM)),
            ("9a", NormalTimeToken(9, period=HourPeriod.AM)),
            ("2:30", NormalTimeToken(2, 30)),
            ("2.30.15 pm", NormalTimeToken(2, 30, 15, HourPeriod.PM)),
            ("2:30:15 p.m.", NormalTimeToken(2, 30, 15, HourPeriod.PM)),
            ("17:45", NormalTimeToken(5, 45, 0, HourPeriod.PM)),
            ("00:30", NormalTimeToken(12, 30, 0, HourPeriod.AM)),
            ("07", NormalTimeToken(7, period=HourPeriod.AM)),
            ("230", NormalTimeToken(2, 30)),
            ("230pm", NormalTimeToken(2, 30, 0, HourPeriod.PM)),
            ("0730", NormalTimeToken(7, 30, 0, HourPeriod.AM)),
            ("1030", NormalTimeToken(10, 30, 0, HourPeriod.AM)),
            ("1230", NormalTimeToken(12, 30, 0, HourPeriod.PM)),
            ("2300", NormalTimeToken(11, 0, 0, HourPeriod.PM)),
            ("23015", NormalTimeToken(2, 30, 15)),
        ],
    )
    def test_clock_times(self, text, expected):
        assert parse_time(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["noon", "Midday", "mid-day", "12 noon", "12:00 noon", "12:00:00noon"],
    )
    def test_midday(self, text):
        assert parse_time(text) == SpecialTimeToken(SpecialTime.MIDDAY)

    @pytest.mark.parametrize("text", ["midnight", "mid-night", "12 midnight"])
    def test_midnight(self, text):
        assert parse_time(text) == SpecialTimeToken(SpecialTime.MIDNIGHT)

    @pytest.mark.parametrize("text", ["13pm", "24", "5:60", "2360", "noonish", ""])
    def test_rejected(self, text):
        assert parse_time(text) is None
