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

"""Exceptions raised while parsing and resolving timer start expressions."""


class TimeParseError(ValueError):
    """Raised when a time expression cannot be parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class InvalidArgumentError(TypeError):
    """Raised when a required argument is None."""

    pass


class TokenFormatError(ValueError):
    """Raised by token parsers when no rule consumes the input."""

    pass


class TokenResolutionError(ValueError):
    """Raised when a token cannot be resolved to an end time after the reference."""

    pass
