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

"""Mapping, reducing and invoking callbacks over collections.

Every callback receives ``(value, key)``; reducers additionally receive the
accumulator first and the whole collection last.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from parkour._internal.collection_utils import is_sequence, iter_entries
from parkour._internal.logging_utils import structured_extra
from parkour._internal.validation import ensure_callable, ensure_optional_callable
from parkour.core.model_types import LogComponent
from parkour.functors import add, identity, multiply

if TYPE_CHECKING:
    from collections.abc import Callable

    from parkour.core.type_aliases import Collection, EntryCallback, Key, Reducer

V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A")

logger = logging.getLogger("parkour.traverse")


def map(collection: Collection[V], fn: EntryCallback[V, R]) -> list[R] | dict[Key, R]:  # noqa: A001
    """Apply ``fn(value, key)`` to every entry.

    Args:
        collection: Mapping or sequence to transform.
        fn: Callback producing the new value.

    Returns:
        A list when ``collection`` is a sequence, otherwise a dict with the
        same keys in the same order.

    Raises:
        ParkourTypeError: If ``fn`` is not callable or ``collection`` is not a
            collection.
    """
    ensure_callable(fn, name="fn")
    entries = iter_entries(collection)
    if is_sequence(collection):
        return [fn(value, key) for key, value in entries]
    return {key: fn(value, key) for key, value in entries}


def map_keys(collection: Collection[V], fn: Callable[[V, Key], Key]) -> dict[Key, V]:
    """Re-key entries with ``fn(value, key)``, keeping values.

    A later entry mapped onto an existing key overwrites its value but keeps
    the original position.
    """
    ensure_callable(fn, name="fn")
    result: dict[Key, V] = {}
    for key, value in iter_entries(collection):
        new_key = fn(value, key)
        if new_key in result:
            logger.debug(
                "map_keys overwrote duplicate key",
                extra=structured_extra(component=LogComponent.TRAVERSE, operation="map_keys", key=new_key),
            )
        result[new_key] = value
    return result


def reduce(collection: Collection[V], fn: Reducer[A, V], initial: A) -> A:
    """Fold entries left to right.

    ``fn(accumulator, value, key, collection)`` returns the next accumulator.
    An empty collection returns ``initial`` unchanged.

    ``collection`` is passed through as given. When it is a one-shot iterator
    (a generator, or the result of ``parkour.range``) the reducer receives the
    partly consumed iterator, and iterating it inside the reducer steals
    entries from the fold.
    """
    ensure_callable(fn, name="fn")
    accumulator = initial
    for key, value in iter_entries(collection):
        accumulator = fn(accumulator, value, key, collection)
    return accumulator


def map_reduce(
    collection: Collection[V],
    map_fn: EntryCallback[V, R],
    reduce_fn: Reducer[A, R],
    initial: A,
) -> A:
    """Map then reduce every entry in a single pass.

    Equivalent to ``reduce(map(collection, map_fn), reduce_fn, initial)``
    without building the intermediate collection. The reducer receives the
    original collection as its last argument; for a one-shot iterator that
    is the same partly consumed iterator the fold is pulling from.

    Args:
        collection: Mapping or sequence to fold.
        map_fn: Callback applied to each ``(value, key)``.
        reduce_fn: Reducer applied to ``(accumulator, mapped, key, collection)``.
        initial: Starting accumulator.

    Returns:
        The final accumulator, or ``initial`` for an empty collection.
    """
    ensure_callable(map_fn, name="map_fn")
    ensure_callable(reduce_fn, name="reduce_fn")
    accumulator = initial
    for key, value in iter_entries(collection):
        accumulator = reduce_fn(accumulator, map_fn(value, key), key, collection)
    return accumulator


def invoke(collection: Collection[V], fn: Callable[[V, Key], Any]) -> None:
    """Call ``fn(value, key)`` on every entry for its side effects."""
    ensure_callable(fn, name="fn")
    for key, value in iter_entries(collection):
        fn(value, key)


def sum(collection: Collection[V], fn: EntryCallback[V, Any] | None = None) -> Any:  # noqa: A001
    """Return the sum of ``fn(value, key)`` (or of the values), ``0`` when empty."""
    mapper = ensure_optional_callable(fn, name="fn") or identity
    return map_reduce(collection, mapper, add, 0)


def product(collection: Collection[V], fn: EntryCallback[V, Any] | None = None) -> Any:
    """Return the product of ``fn(value, key)`` (or of the values), ``1`` when empty."""
    mapper = ensure_optional_callable(fn, name="fn") or identity
    return map_reduce(collection, mapper, multiply, 1)


__all__ = ["invoke", "map", "map_keys", "map_reduce", "product", "reduce", "sum"]
