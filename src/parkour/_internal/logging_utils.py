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

"""Structured logging utilities shared across parkour components."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Final, cast

from parkour.compat import UTC, TypedDict, Unpack, override
from parkour.core.model_types import LogComponent, LogFormat, LogLevel

if TYPE_CHECKING:
    from parkour.config import Settings

ROOT_LOGGER_NAME: Final[str] = "parkour"

STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "key",
    "count",
    "strict",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "parkour.traverse",
    "parkour.search",
    "parkour.transform",
    "parkour.ranges",
    "parkour.config",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter for terminal output."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())
    return handler


def _apply_child_levels(level: int, children: Iterable[str]) -> None:
    for child in children:
        logging.getLogger(child).setLevel(level)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: LogLevel | str | None = None,
) -> LogConfig:
    """Configure parkour logging according to the requested format and level.

    Args:
        log_format: Desired log output format. ``None`` falls back to the
            ``PARKOUR_LOG_FORMAT`` environment variable or ``text``.
        log_level: Preferred verbosity. ``None`` consults ``PARKOUR_LOG_LEVEL``
            or defaults to ``warning``.

    Returns:
        A ``LogConfig`` describing the selected formatter and resolved numeric
        log level, which is also applied to the root and child loggers.

    Raises:
        SettingsValidationError: If the format or level cannot be parsed.
    """
    from parkour.config import load_settings  # noqa: PLC0415

    settings: Settings = load_settings(log_format=log_format, log_level=log_level)
    level_value = settings.log_level.numeric

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(settings.log_format))
    root_logger.setLevel(level_value)
    root_logger.propagate = False

    _apply_child_levels(level_value, CHILD_LOGGERS)
    return LogConfig(
        format=settings.log_format,
        level=level_value,
        level_name=settings.log_level.value,
    )


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by parkour log records."""

    operation: str
    key: str
    count: int
    strict: bool
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    key: object
    count: int
    strict: bool
    details: Mapping[str, object]


def _maybe_assign(
    extra: StructuredLogExtra,
    *,
    key: str,
    kwargs: dict[str, object],
    transform: Callable[[object], object | None] | None = None,
) -> None:
    if key not in kwargs:
        return
    value = kwargs[key]
    if value is None:
        return
    if transform is not None:
        value = transform(value)
        if value is None:
            return
    cast("dict[str, object]", extra)[key] = value


def _to_int(value: object) -> int:
    return int(cast("int", value))


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (operation, key, count, etc.).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload_kwargs = cast("dict[str, object]", kwargs)
    _maybe_assign(extra, key="operation", kwargs=payload_kwargs, transform=str)
    _maybe_assign(extra, key="key", kwargs=payload_kwargs, transform=repr)
    _maybe_assign(extra, key="count", kwargs=payload_kwargs, transform=_to_int)
    _maybe_assign(extra, key="strict", kwargs=payload_kwargs, transform=bool)
    details = payload_kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "CHILD_LOGGERS",
    "ROOT_LOGGER_NAME",
    "JSONLogFormatter",
    "LogConfig",
    "StructuredLogExtra",
    "TextLogFormatter",
    "configure_logging",
    "structured_extra",
]
