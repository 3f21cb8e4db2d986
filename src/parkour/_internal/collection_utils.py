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

"""Helper functions for ordered traversal of keyed collections.

A collection is either a mapping (its own keys, insertion order) or any other
non-text iterable such as a list, tuple or generator (keys are the positions
``0..n-1``).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, TypeVar, cast

from .exceptions import ParkourTypeError

if TYPE_CHECKING:
    from parkour.core.type_aliases import Collection, Key

V = TypeVar("V")

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def is_sequence(collection: object) -> bool:
    """Return True for collections keyed by position rather than by mapping key."""
    return (
        isinstance(collection, Iterable)
        and not isinstance(collection, Mapping)
        and not isinstance(collection, _TEXT_TYPES)
    )


def ensure_collection(value: object, *, name: str = "collection") -> None:
    """Reject anything that is neither a mapping nor a non-text iterable.

    Raises:
        ParkourTypeError: If ``value`` cannot be traversed as a collection.
    """
    if isinstance(value, Mapping) or is_sequence(value):
        return
    message = f"{name} must be a mapping or a non-string sequence (got {type(value).__name__})"
    raise ParkourTypeError(message)


def iter_entries(collection: Collection[V]) -> Iterator[tuple[Key, V]]:
    """Return an iterator over ``(key, value)`` entries in collection order.

    The collection type is checked before the iterator is created.

    Args:
        collection: Mapping, sequence or other iterable to traverse.

    Returns:
        Iterator of key/value pairs.

    Raises:
        ParkourTypeError: If ``collection`` is not a supported collection.
    """
    ensure_collection(collection)
    if isinstance(collection, Mapping):
        return iter(cast("Mapping[Key, V]", collection).items())
    return enumerate(cast("Iterable[V]", collection))


__all__ = ["ensure_collection", "is_sequence", "iter_entries"]
