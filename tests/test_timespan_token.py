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

"""Tests for duration parsing and calendar-aware duration addition."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from timer_start.errors import (
    InvalidArgumentError,
    TokenFormatError,
    TokenResolutionError,
)
from timer_start.timespan_token import TimeSpanToken, TimeSpanTokenParser

REFERENCE = datetime(2015, 1, 1)


@pytest.fixture
def parser():
    return TimeSpanTokenParser()


class TestShortForm:
    """Test plain numbers with positional units."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5", TimeSpanToken(minutes=5)),
            ("15.30", TimeSpanToken(minutes=15, seconds=30)),
            ("15:30", TimeSpanToken(minutes=15, seconds=30)),
            ("15 30", TimeSpanToken(minutes=15, seconds=30)),
            ("1:15:30", TimeSpanToken(hours=1, minutes=15, seconds=30)),
            ("2 1:15:30", TimeSpanToken(days=2, hours=1, minutes=15, seconds=30)),
            (
                "3 2 1 15 30",
                TimeSpanToken(months=3, days=2, hours=1, minutes=15, seconds=30),
            ),
            (
                "4 3 2 1 15 30",
                TimeSpanToken(
                    years=4, months=3, days=2, hours=1, minutes=15, seconds=30
                ),
            ),
        ],
    )
    def test_positional(self, parser, text, expected):
        assert parser.parse(text) == expected

    def test_too_many_numbers(self, parser):
        with pytest.raises(TokenFormatError):
            parser.parse("1 2 3 4 5 6 7")

    def test_number_too_large(self, parser):
        with pytest.raises(TokenFormatError):
            parser.parse("1" * 400)
        with pytest.raises(TokenFormatError):
            parser.parse("1" * 400 + "h")


class TestLabeledForm:
    """Test numbers with unit suffixes."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("30s", TimeSpanToken(seconds=30)),
            ("30sec", TimeSpanToken(seconds=30)),
            ("30 seconds", TimeSpanToken(seconds=30)),
            ("15m", TimeSpanToken(minutes=15)),
            ("15min", TimeSpanToken(minutes=15)),
            ("15 Minutes", TimeSpanToken(minutes=15)),
            ("72h", TimeSpanToken(hours=72)),
            ("72hr", TimeSpanToken(hours=72)),
            ("72 hours", TimeSpanToken(hours=72)),
            ("38d", TimeSpanToken(days=38)),
            ("38dy", TimeSpanToken(days=38)),
            ("38 days", TimeSpanToken(days=38)),
            ("54w", TimeSpanToken(weeks=54)),
            ("54wk", TimeSpanToken(weeks=54)),
            ("54 weeks", TimeSpanToken(weeks=54)),
            ("94mo", TimeSpanToken(months=94)),
            ("94mon", TimeSpanToken(months=94)),
            ("94 months", TimeSpanToken(months=94)),
            ("21y", TimeSpanToken(years=21)),
            ("21yr", TimeSpanToken(years=21)),
            ("21 years", TimeSpanToken(years=21)),
        ],
    )
    def test_units(self, parser, text, expected):
        assert parser.parse(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("30.5s", TimeSpanToken(seconds=30.5)),
            ("2.5 years", TimeSpanToken(years=2.5)),
            (".5h", TimeSpanToken(hours=0.5)),
        ],
    )
    def test_decimals(self, parser, text, expected):
        assert parser.parse(text) == expected

    def test_scenario(self, parser):
        token = parser.parse("5d 2.5h 2.5m 2.5s")
        assert token == TimeSpanToken(days=5, hours=2.5, minutes=2.5, seconds=2.5)

        expected = (
            REFERENCE
            + timedelta(days=5)
            + timedelta(hours=2, minutes=30)
            + timedelta(minutes=2, seconds=30)
            + timedelta(seconds=2.5)
        )
        assert token.get_end_time(REFERENCE) == expected

    def test_joiners(self, parser):
        expected = TimeSpanToken(hours=1, minutes=30)
        assert parser.parse("1 hour and 30 minutes") == expected
        assert parser.parse("1h, 30m") == expected
        assert parser.parse("1h30m") == expected

    def test_repeated_units_add_up(self, parser):
        assert parser.parse("1h 1h") == TimeSpanToken(hours=2)


class TestUnitCascade:
    """Test unlabeled numbers following a labeled one."""

    def test_minutes_then_seconds(self, parser):
        assert parser.parse("15m30") == TimeSpanToken(minutes=15, seconds=30)

    def test_hours_then_minutes(self, parser):
        assert parser.parse("72h15") == TimeSpanToken(hours=72, minutes=15)

    def test_cascade_runs_down(self, parser):
        assert parser.parse("5d 5 5") == TimeSpanToken(days=5, hours=5, minutes=5)

    def test_weeks_cascade_to_days(self, parser):
        assert parser.parse("2w 3") == TimeSpanToken(weeks=2, days=3)

    def test_leading_unlabeled_number(self, parser):
        with pytest.raises(TokenFormatError):
            parser.parse("5 5d 5")

    def test_nothing_below_seconds(self, parser):
        with pytest.raises(TokenFormatError):
            parser.parse("5s 5")


class TestParseErrors:
    """Test rejected input."""

    def test_none(self, parser):
        with pytest.raises(InvalidArgumentError):
            parser.parse(None)

    @pytest.mark.parametrize(
        "text", ["", "  ", "garbage", "5 parsecs", "5ms", "-5m", "1h and", "next Friday"]
    )
    def test_unrecognized(self, parser, text):
        with pytest.raises(TokenFormatError):
            parser.parse(text)


class TestEndTime:
    """Test calendar-aware addition."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            (TimeSpanToken(seconds=1.5), datetime(2015, 1, 1, 0, 0, 1, 500000)),
            (TimeSpanToken(minutes=1.5), datetime(2015, 1, 1, 0, 1, 30)),
            (TimeSpanToken(hours=1.5), datetime(2015, 1, 1, 1, 30)),
            (TimeSpanToken(days=1.5), datetime(2015, 1, 2, 12)),
            (TimeSpanToken(weeks=1.5), datetime(2015, 1, 11, 12)),
            (TimeSpanToken(months=1.5), datetime(2015, 2, 15)),
            (TimeSpanToken(years=1.5), datetime(2016, 7, 2)),
        ],
    )
    def test_fractional_units(self, token, expected):
        assert token.get_end_time(REFERENCE) == expected

    def test_month_end(self):
        token = TimeSpanToken(months=1)
        assert token.get_end_time(datetime(2015, 1, 31, 9)) == datetime(2015, 2, 28, 9)

    def test_leap_year_boundary(self):
        token = TimeSpanToken(years=1)
        assert token.get_end_time(datetime(2016, 2, 29)) == datetime(2017, 2, 28)

    def test_months_before_years(self):
        token = TimeSpanToken(years=1, months=1)
        assert token.get_end_time(datetime(2015, 1, 31)) == datetime(2016, 2, 28)

    def test_elapsed_time_before_months(self):
        token = TimeSpanToken(months=1, days=1)
        assert token.get_end_time(datetime(2015, 1, 30)) == datetime(2015, 2, 28)

    def test_hours_cross_month_end_before_months(self):
        token = TimeSpanToken(months=1, hours=12)
        assert token.get_end_time(datetime(2015, 1, 31, 18)) == datetime(2015, 3, 1, 6)

    def test_zero_is_reference(self):
        token = TimeSpanToken()
        assert token.is_zero
        assert token.get_end_time(REFERENCE) == REFERENCE

    @pytest.mark.parametrize("field", ["years", "months", "weeks", "days", "hours", "minutes", "seconds"])
    def test_nonzero_is_after_reference(self, field):
        token = TimeSpanToken(**{field: 0.25})
        assert not token.is_zero
        assert token.get_end_time(REFERENCE) > REFERENCE

    def test_to_timedelta(self):
        assert TimeSpanToken(hours=2).to_timedelta(REFERENCE) == timedelta(hours=2)
        assert TimeSpanToken(months=1).to_timedelta(REFERENCE) == timedelta(days=31)

    def test_out_of_range(self):
        token = TimeSpanToken(years=9000)
        with pytest.raises(TokenResolutionError):
            token.get_end_time(REFERENCE)
        assert token.try_get_end_time(REFERENCE) is None

    def test_negative_quantities_rejected(self):
        with pytest.raises(TokenFormatError):
            TimeSpanToken(hours=-1)


class TestDescribe:
    """Test duration rendering."""

    def test_units(self):
        assert str(TimeSpanToken(days=5, hours=2.5)) == "5 days 2.5 hours"
        assert str(TimeSpanToken(hours=1)) == "1 hour"
        assert str(TimeSpanToken(years=1, seconds=30)) == "1 year 30 seconds"

    def test_zero(self):
        assert str(TimeSpanToken()) == "0 seconds"
