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

"""Tests for parser configuration."""

import logging
import sys
from pathlib import Path
from unittest.mock import patch

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from timer_start.config import ParserConfig
from timer_start.culture import DateOrder


class TestParserConfig:
    """Test parser configuration defaults and environment overrides."""

    def test_default_config(self):
        config = ParserConfig()
        assert config.culture == "en-US"
        assert config.two_digit_year_max == 2029
        assert config.prefer_duration is True

    def test_config_from_env_default(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ParserConfig.from_env()
            assert config.culture == "en-US"
            assert config.two_digit_year_max == 2029
            assert config.prefer_duration is True

    def test_config_from_env_custom_values(self):
        with patch.dict("os.environ", {
            "TIMER_START_CULTURE": "en-GB",
            "TIMER_START_TWO_DIGIT_YEAR_MAX": "2049",
            "TIMER_START_PREFER_DURATION": "false",
        }):
            config = ParserConfig.from_env()
            assert config.culture == "en-GB"
            assert config.two_digit_year_max == 2049
            assert config.prefer_duration is False

    def test_prefer_duration_case_insensitive(self):
        with patch.dict("os.environ", {"TIMER_START_PREFER_DURATION": "TRUE"}):
            assert ParserConfig.from_env().prefer_duration is True


class TestGetCulture:
    """Test resolution of the configured culture."""

    def test_known_culture(self):
        culture = ParserConfig(culture="en-GB", two_digit_year_max=2049).get_culture()
        assert culture.name == "en-GB"
        assert culture.date_order == DateOrder.DMY
        assert culture.two_digit_year_max == 2049

    def test_unknown_culture_falls_back_to_invariant(self, caplog):
        with caplog.at_level(logging.WARNING, logger="timer_start.config"):
            culture = ParserConfig(culture="xx-YY").get_culture()

        assert culture.name == "invariant"
        assert culture.date_order == DateOrder.MDY
        assert "xx-YY" in caplog.text
