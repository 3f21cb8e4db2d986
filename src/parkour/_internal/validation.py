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

"""Eager argument checks shared by the public operations.

Every operation validates its arguments before touching the collection, so a
contract violation surfaces at the call site even for lazy results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .exceptions import ParkourTypeError, ParkourValidationError


def ensure_callable(value: object, *, name: str) -> Callable[..., Any]:
    """Return ``value`` unchanged when it is callable.

    Args:
        value: Candidate callback.
        name: Parameter name used in the error message.

    Returns:
        The callable itself.

    Raises:
        ParkourTypeError: If ``value`` is not callable.
    """
    if not callable(value):
        message = f"{name} must be callable (got {type(value).__name__})"
        raise ParkourTypeError(message)
    return value


def ensure_optional_callable(value: object, *, name: str) -> Callable[..., Any] | None:
    if value is None:
        return None
    return ensure_callable(value, name=name)


def ensure_int(value: object, *, name: str) -> int:
    """Return ``value`` when it is a true integer (``bool`` is rejected).

    Raises:
        ParkourTypeError: If ``value`` is not an ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        message = f"{name} must be an integer (got {type(value).__name__})"
        raise ParkourTypeError(message)
    return value


def ensure_non_zero(value: int, *, name: str) -> int:
    if value == 0:
        message = f"{name} must not be zero"
        raise ParkourValidationError(message)
    return value


__all__ = [
    "ensure_callable",
    "ensure_int",
    "ensure_non_zero",
    "ensure_optional_callable",
]
