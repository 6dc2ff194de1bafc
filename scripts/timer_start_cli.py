#!/usr/bin/env python3
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
Timer Start CLI

Command-line tool for trying out timer start expressions.

Usage:
    # Resolve against now, duration first
    python scripts/timer_start_cli.py "5d 2h 15m"

    # Resolve against a fixed reference
    python scripts/timer_start_cli.py "next Friday at 2:30pm" --reference 2015-01-01T00:00:00

    # Absolute first, with a day-first culture
    python scripts/timer_start_cli.py "11/10 5pm" --absolute --culture en-GB

    # Show which rule matched
    python scripts/timer_start_cli.py "Christmas Day noon" --verbose
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

from timer_start import (
    InvalidArgumentError,
    ParserConfig,
    TimeParseError,
    TokenResolutionError,
    parse_timer_start,
    timer_start_kind,
)

load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Timer start expression tester")
    parser.add_argument("text", help="Expression such as '5pm' or '2h 15m'")
    parser.add_argument(
        "--reference",
        type=datetime.fromisoformat,
        help="ISO reference instant (defaults to now)",
    )
    parser.add_argument("--culture", help="Locale name such as en-GB (defaults to config)")
    parser.add_argument(
        "--absolute",
        action="store_true",
        help="Try the absolute-time parser before the duration parser",
    )
    parser.add_argument("--verbose", action="store_true", help="Show parser debug logs")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger("timer_start").setLevel(logging.DEBUG)

    config = ParserConfig.from_env()
    if args.culture:
        config.culture = args.culture
    culture = config.get_culture()
    prefer_duration = False if args.absolute else config.prefer_duration
    reference = args.reference or datetime.now()

    try:
        token = parse_timer_start(args.text, culture, prefer_duration)
        end_time = token.get_end_time(reference)
    except (TimeParseError, TokenResolutionError, InvalidArgumentError) as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info(f"Culture:   {culture.name} ({culture.date_order.value})")
    logger.info(f"Kind:      {timer_start_kind(token).value}")
    logger.info(f"Token:     {token.describe(culture)}")
    logger.info(f"Reference: {reference.isoformat()}")
    logger.info(f"End time:  {end_time.isoformat()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
