# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Model enumerations for parkour.

This module defines the small set of enumerations shared by the logging and
settings layers:

- Log output formats and verbosity levels
- Loggable components (one per operation module)
"""

from __future__ import annotations

import logging

from parkour.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogLevel(StrEnum):
    """Enumeration of supported log verbosity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_str(cls, raw: str) -> LogLevel:
        """Create a LogLevel enum from a string value.

        Args:
            raw: String representation of the log level.

        Returns:
            LogLevel enum value.

        Raises:
            ValueError: If the string does not match any LogLevel value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log level '{raw}'"
            raise ValueError(msg) from exc

    @property
    def numeric(self) -> int:
        """Return the matching ``logging`` module level."""
        return _NUMERIC_LEVELS[self]


_NUMERIC_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class LogComponent(StrEnum):
    """Enumeration of loggable library components.

    Attributes:
        TRAVERSE: Mapping, reducing and invoking callbacks.
        SEARCH: Short-circuiting predicate searches.
        TRANSFORM: Filtering and re-keying.
        RANGES: Lazy integer ranges.
        CONFIG: Settings resolution.
    """

    TRAVERSE = "traverse"
    SEARCH = "search"
    TRANSFORM = "transform"
    RANGES = "ranges"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Args:
            raw: String representation of the log component.

        Returns:
            LogComponent enum value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


__all__ = ["LogComponent", "LogFormat", "LogLevel"]
