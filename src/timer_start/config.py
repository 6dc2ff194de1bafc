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
Parser Configuration

Default culture and parsing preferences for timer start expressions.
Values can be overridden via environment variables.
"""

import logging
import os
from dataclasses import dataclass

from .culture import DEFAULT_TWO_DIGIT_YEAR_MAX, INVARIANT, Culture

logger = logging.getLogger("timer_start.config")


@dataclass
class ParserConfig:
    """Configuration for timer start parsing."""

    # Locale name used for numeric date field order
    culture: str = "en-US"

    # Two-digit years expand to the latest year not after this one
    two_digit_year_max: int = DEFAULT_TWO_DIGIT_YEAR_MAX

    # Try the duration parser before the absolute-time parser
    prefer_duration: bool = True

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create config from environment variables with defaults."""
        return cls(
            culture=os.getenv("TIMER_START_CULTURE", "en-US"),
            two_digit_year_max=int(
                os.getenv(
                    "TIMER_START_TWO_DIGIT_YEAR_MAX", str(DEFAULT_TWO_DIGIT_YEAR_MAX)
                )
            ),
            prefer_duration=os.getenv("TIMER_START_PREFER_DURATION", "true").lower()
            == "true",
        )

    def get_culture(self) -> Culture:
        """
        Resolve the configured culture name.

        Unknown names fall back to the invariant culture.
        """
        try:
            return Culture.from_name(self.culture, self.two_digit_year_max)
        except ValueError:
            logger.warning(
                f"Unknown culture '{self.culture}', falling back to invariant"
            )
            return INVARIANT.with_two_digit_year_max(self.two_digit_year_max)
