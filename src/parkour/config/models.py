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

"""Settings models for parkour.

The pydantic ``SettingsModel`` validates raw values gathered from keyword
arguments and the environment; ``Settings`` is the frozen dataclass handed to
the rest of the library.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, field_validator

from parkour._internal.exceptions import ParkourValidationError
from parkour.core.model_types import LogFormat, LogLevel

LOG_FORMAT_ENV: Final[str] = "PARKOUR_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "PARKOUR_LOG_LEVEL"
DEFAULT_LOG_FORMAT: Final[LogFormat] = LogFormat.TEXT
DEFAULT_LOG_LEVEL: Final[LogLevel] = LogLevel.WARNING

STRICT_MODEL_CONFIG: ConfigDict = ConfigDict(extra="forbid", frozen=True)


class SettingsValidationError(ParkourValidationError):
    """Raised when resolved settings contain invalid values."""

    def __init__(self, error: Exception) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The pydantic validation error raised by ``SettingsModel``.
        """
        self.error = error
        super().__init__(f"Invalid parkour settings: {error}")


class SettingsModel(BaseModel):
    """Pydantic model for validating raw settings values.

    Attributes:
        log_format: Output format for the ``parkour`` logger.
        log_level: Verbosity for the ``parkour`` logger and its children.
    """

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    log_format: LogFormat = DEFAULT_LOG_FORMAT
    log_level: LogLevel = DEFAULT_LOG_LEVEL

    @field_validator("log_format", "log_level", mode="before")
    @classmethod
    def _normalise_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_format: LogFormat = DEFAULT_LOG_FORMAT
    log_level: LogLevel = DEFAULT_LOG_LEVEL


def settings_from_model(model: SettingsModel) -> Settings:
    return Settings(log_format=model.log_format, log_level=model.log_level)


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "Settings",
    "SettingsModel",
    "SettingsValidationError",
    "settings_from_model",
]
