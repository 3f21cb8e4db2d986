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

"""Configuration management for parkour.

Settings only govern the library's own diagnostics (log format and level);
the collection operations themselves take no configuration.
"""

from __future__ import annotations

from .loader import load_settings
from .models import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    Settings,
    SettingsModel,
    SettingsValidationError,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "Settings",
    "SettingsModel",
    "SettingsValidationError",
    "load_settings",
]
