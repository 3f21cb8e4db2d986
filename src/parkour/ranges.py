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

"""Lazy integer ranges."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from parkour._internal.logging_utils import structured_extra
from parkour._internal.validation import ensure_int, ensure_non_zero
from parkour.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_STEP = 1

logger = logging.getLogger("parkour.ranges")


def _walk(start: int, stop: int, step: int) -> Iterator[int]:
    current = start
    if step > 0:
        while current < stop:
            yield current
            current += step
    else:
        while current > stop:
            yield current
            current += step


def range(start: int, stop: int, step: int | None = None) -> Iterator[int]:  # noqa: A001
    """Lazily yield integers from ``start`` towards ``stop`` (exclusive).

    Values continue while ``current < stop`` for a positive step, or
    ``current > stop`` for a negative one. An omitted step is ``+1``; a step
    pointing away from ``stop`` produces an empty sequence. Arguments are
    checked when ``range`` is called, before any value is pulled, and every
    call returns an independent generator.

    Args:
        start: First value.
        stop: Exclusive bound.
        step: Non-zero increment. ``None`` means ``+1``.

    Returns:
        Generator of integers.

    Raises:
        ParkourTypeError: If an argument is not an integer.
        ParkourValidationError: If ``step`` is zero.

    Example:
        >>> list(range(10, 5, -2))
        [10, 8, 6]
        >>> list(range(10, 2))
        []
    """
    ensure_int(start, name="start")
    ensure_int(stop, name="stop")
    resolved_step = DEFAULT_STEP if step is None else ensure_non_zero(ensure_int(step, name="step"), name="step")
    logger.debug(
        "range created",
        extra=structured_extra(
            component=LogComponent.RANGES,
            operation="range",
            details={"start": start, "stop": stop, "step": resolved_step},
        ),
    )
    return _walk(start, stop, resolved_step)


__all__ = ["DEFAULT_STEP", "range"]
