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
Culture Settings

The only locale-dependent parts of parsing are the field order of numeric
dates ("11/10" is 11 October in en-GB but November 10 in en-US) and the
expansion of two-digit years. Both are carried by a small immutable
Culture record so parsing stays deterministic.

Named cultures are looked up in the dateparser locale data, which records
a date_order ("MDY", "DMY", "YMD") for every supported locale.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from dateparser.languages.loader import LocaleDataLoader

logger = logging.getLogger("timer_start.culture")

# Windows and .NET default for Calendar.TwoDigitYearMax
DEFAULT_TWO_DIGIT_YEAR_MAX = 2029


class DateOrder(str, Enum):
    """Order of the day, month and year fields in a short numeric date."""

    DMY = "dmy"
    MDY = "mdy"
    YMD = "ymd"

    @classmethod
    def from_pattern(cls, pattern: str) -> "DateOrder":
        """
        Classify a date order string such as "MDY" or a short date pattern
        such as "dd/MM/yyyy".

        Raises:
            ValueError: If the pattern does not mention a day, month and year
        """
        lowered = pattern.lower()
        positions = {field: lowered.find(field) for field in "dmy"}
        if any(position < 0 for position in positions.values()):
            raise ValueError(f"Not a date order pattern: '{pattern}'")

        if positions["y"] < positions["m"] < positions["d"]:
            return cls.YMD
        if positions["m"] < positions["d"]:
            return cls.MDY
        return cls.DMY


@dataclass(frozen=True)
class Culture:
    """Locale settings that influence numeric date parsing."""

    name: str
    date_order: DateOrder = DateOrder.MDY
    two_digit_year_max: int = DEFAULT_TWO_DIGIT_YEAR_MAX

    @property
    def is_month_first(self) -> bool:
        return self.date_order == DateOrder.MDY

    @property
    def is_year_first(self) -> bool:
        return self.date_order == DateOrder.YMD

    def expand_year(self, year: int) -> int:
        """
        Expand a two-digit year into a four-digit year.

        The result is the latest year not after two_digit_year_max that ends
        in the given two digits, so with the default maximum of 2029 "29"
        becomes 2029 and "30" becomes 1930. Years of 100 and above are
        returned unchanged.
        """
        if year >= 100:
            return year

        expanded = (self.two_digit_year_max // 100) * 100 + year
        if expanded > self.two_digit_year_max:
            expanded -= 100
        return expanded

    def with_two_digit_year_max(self, two_digit_year_max: int) -> "Culture":
        """Return a copy of this culture with a different two-digit-year window."""
        return Culture(self.name, self.date_order, two_digit_year_max)

    @classmethod
    def from_name(
        cls,
        name: str,
        two_digit_year_max: int = DEFAULT_TWO_DIGIT_YEAR_MAX,
    ) -> "Culture":
        """
        Build a culture from a locale name such as "en-GB" or "ja".

        The full name is tried first, then the bare language ("en-US" falls
        back to "en").

        Raises:
            ValueError: If neither the name nor its language is known
        """
        if name.lower() == INVARIANT.name:
            return INVARIANT.with_two_digit_year_max(two_digit_year_max)

        date_order = _lookup_date_order(name)
        return cls(name, date_order, two_digit_year_max)


@lru_cache(maxsize=64)
def _lookup_date_order(name: str) -> DateOrder:
    """Read the date order of a locale from the dateparser locale data."""
    loader = LocaleDataLoader()
    language = name.replace("_", "-").split("-")[0]

    for candidate in dict.fromkeys([name.replace("_", "-"), language]):
        try:
            locale = loader.get_locale(candidate)
        except (ValueError, KeyError, StopIteration):
            logger.debug(f"No dateparser locale data for '{candidate}'")
            continue

        date_order = locale.info.get("date_order")
        if date_order:
            return DateOrder.from_pattern(date_order)

    raise ValueError(f"Unknown culture: '{name}'")


INVARIANT = Culture("invariant", DateOrder.MDY)
EN_US = Culture("en-US", DateOrder.MDY)
EN_GB = Culture("en-GB", DateOrder.DMY)
JA_JP = Culture("ja-JP", DateOrder.YMD)
