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
Recognizer Rules

A recognizer is an ordered list of PatternRule objects. Each rule pairs a
regular expression fragment with a builder that turns a successful match
into a token. Rules are tried in order; a builder that rejects its match
(by raising TokenFormatError) lets the next rule have a go.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

from .culture import Culture

REGEX_FLAGS = re.IGNORECASE | re.VERBOSE


@dataclass(frozen=True)
class PatternRule:
    """A regular expression fragment and the builder for its matches."""

    name: str
    pattern: str
    build: Callable[[re.Match, Culture], Any]

    def fullmatch(self, text: str) -> "re.Match | None":
        """Match the rule alone against the whole (stripped) text."""
        return re.fullmatch(self.pattern, text.strip(), REGEX_FLAGS)
