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

"""Generic precedence chain resolution for parkour settings.

Settings resolve along a single chain: explicit argument > environment >
default.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def resolve_with_precedence(
    *,
    explicit_value: T | None = None,
    env_value: T | None = None,
    default: T,
) -> T:
    """Resolve a value using parkour's precedence chain.

    Precedence (highest to lowest):
    1. Explicit keyword argument
    2. Environment variable
    3. Default value

    Args:
        explicit_value: Value passed by the caller.
        env_value: Value read from the environment.
        default: Fallback default value.

    Returns:
        The highest-precedence non-None value, or default.

    Example:
        >>> resolve_with_precedence(explicit_value="json", env_value="text", default="text")
        'json'
        >>> resolve_with_precedence(explicit_value=None, env_value="json", default="text")
        'json'
    """
    if explicit_value is not None:
        return explicit_value
    if env_value is not None:
        return env_value
    return default


__all__ = ["resolve_with_precedence"]
