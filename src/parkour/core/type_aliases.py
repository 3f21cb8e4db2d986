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

"""Typed aliases used across parkour."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from parkour.compat import TypeAlias

V = TypeVar("V")
R = TypeVar("R")

Key: TypeAlias = "str | int"
Collection: TypeAlias = "Mapping[Key, V] | Iterable[V]"

EntryCallback: TypeAlias = "Callable[[V, Key], R]"
Predicate: TypeAlias = "Callable[[V, Key], object]"
Reducer: TypeAlias = "Callable[[R, V, Key, Any], R]"
PairProducer: TypeAlias = "Callable[[V, Key], Iterable[tuple[Key, Any]] | Mapping[Key, Any]]"

__all__ = [
    "Collection",
    "EntryCallback",
    "Key",
    "PairProducer",
    "Predicate",
    "R",
    "Reducer",
    "V",
]
