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

"""Small reusable callbacks for the collection operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from parkour._internal.validation import ensure_callable

if TYPE_CHECKING:
    from parkour.core.type_aliases import Key, Predicate

V = TypeVar("V")


def identity(value: V, key: Key | None = None) -> V:
    """Return ``value`` unchanged."""
    return value


def add(accumulator: Any, value: Any, *_: object) -> Any:
    """Reducer returning ``accumulator + value``."""
    return accumulator + value


def multiply(accumulator: Any, value: Any, *_: object) -> Any:
    """Reducer returning ``accumulator * value``."""
    return accumulator * value


def negate(fn: Predicate[V]) -> Callable[[V, Key], bool]:
    """Return a predicate with the opposite truthiness of ``fn``.

    Raises:
        ParkourTypeError: If ``fn`` is not callable.
    """
    predicate = ensure_callable(fn, name="fn")

    def negated(value: V, key: Key) -> bool:
        return not predicate(value, key)

    return negated


__all__ = ["add", "identity", "multiply", "negate"]
