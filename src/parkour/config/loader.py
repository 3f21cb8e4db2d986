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

"""Settings resolution for parkour.

Each setting resolves along the chain explicit keyword argument >
environment variable > default, and the merged values are validated through
``SettingsModel``.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pydantic import ValidationError

from parkour._internal.logging_utils import structured_extra
from parkour._internal.precedence import resolve_with_precedence
from parkour.core.model_types import LogComponent

from .models import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    Settings,
    SettingsModel,
    SettingsValidationError,
    settings_from_model,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from parkour.core.model_types import LogFormat, LogLevel

logger = logging.getLogger("parkour.config")


def _env_value(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None:
        return None
    return value.strip() or None


def load_settings(
    *,
    log_format: LogFormat | str | None = None,
    log_level: LogLevel | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve and validate parkour settings.

    Args:
        log_format: Explicit log format; overrides ``PARKOUR_LOG_FORMAT``.
        log_level: Explicit log level; overrides ``PARKOUR_LOG_LEVEL``.
        environ: Environment mapping to consult. Defaults to ``os.environ``.

    Returns:
        Frozen ``Settings`` instance.

    Raises:
        SettingsValidationError: If any resolved value is not a supported choice.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, object] = {
        "log_format": resolve_with_precedence(
            explicit_value=log_format,
            env_value=_env_value(env, LOG_FORMAT_ENV),
            default=DEFAULT_LOG_FORMAT,
        ),
        "log_level": resolve_with_precedence(
            explicit_value=log_level,
            env_value=_env_value(env, LOG_LEVEL_ENV),
            default=DEFAULT_LOG_LEVEL,
        ),
    }
    try:
        model = SettingsModel.model_validate(raw)
    except ValidationError as exc:
        raise SettingsValidationError(exc) from exc
    settings = settings_from_model(model)
    logger.debug(
        "Resolved settings",
        extra=structured_extra(
            component=LogComponent.CONFIG,
            operation="load_settings",
            details={"log_format": settings.log_format.value, "log_level": settings.log_level.value},
        ),
    )
    return settings


__all__ = ["load_settings"]
