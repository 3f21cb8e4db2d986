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

"""Filtering and re-keying of collections."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

from parkour._internal.collection_utils import is_sequence, iter_entries
from parkour._internal.exceptions import ParkourTypeError, ParkourValidationError
from parkour._internal.logging_utils import structured_extra
from parkour._internal.validation import ensure_callable
from parkour.core.model_types import LogComponent
from parkour.functors import negate

if TYPE_CHECKING:
    from parkour.core.type_aliases import Collection, Key, PairProducer, Predicate

V = TypeVar("V")
D = TypeVar("D")

logger = logging.getLogger("parkour.transform")


def filter(  # noqa: A001
    collection: Collection[V],
    fn: Predicate[V],
    preserve_keys: bool = True,  # noqa: FBT001, FBT002
) -> dict[Key, V] | list[V]:
    """Keep the entries for which ``fn(value, key)`` is truthy.

    Args:
        collection: Mapping or sequence to filter.
        fn: Predicate called with ``(value, key)``.
        preserve_keys: Keep original keys (dict result) or reindex densely
            from zero (list result).

    Returns:
        The kept entries in their original relative order.
    """
    ensure_callable(fn, name="fn")
    kept = ((key, value) for key, value in iter_entries(collection) if fn(value, key))
    if preserve_keys:
        return dict(kept)
    return [value for _, value in kept]


def reject(
    collection: Collection[V],
    fn: Predicate[V],
    preserve_keys: bool = True,  # noqa: FBT001, FBT002
) -> dict[Key, V] | list[V]:
    """Drop the entries for which ``fn(value, key)`` is truthy."""
    return filter(collection, negate(fn), preserve_keys)


def split(
    collection: Collection[V],
    fn: Predicate[V],
    preserve_keys: bool = True,  # noqa: FBT001, FBT002
) -> tuple[dict[Key, V], dict[Key, V]] | tuple[list[V], list[V]]:
    """Partition entries into ``(kept, rejected)`` in one pass."""
    ensure_callable(fn, name="fn")
    kept: dict[Key, V] = {}
    rejected: dict[Key, V] = {}
    for key, value in iter_entries(collection):
        target = kept if fn(value, key) else rejected
        target[key] = value
    if preserve_keys:
        return kept, rejected
    return list(kept.values()), list(rejected.values())


def _as_pair(item: object, *, operation: str) -> tuple[Key, Any]:
    if isinstance(item, tuple | list) and len(item) == 2:  # noqa: PLR2004
        pair = cast("tuple[Key, Any] | list[Any]", item)
        return pair[0], pair[1]
    message = f"{operation} expects (key, value) pairs (got {item!r})"
    raise ParkourTypeError(message)


def _produced_pairs(produced: object) -> Iterator[tuple[Key, Any]]:
    if isinstance(produced, Mapping):
        yield from cast("Mapping[Key, Any]", produced).items()
        return
    if isinstance(produced, str | bytes | bytearray) or not isinstance(produced, Iterable):
        message = f"combine callback must return an iterable of pairs (got {type(produced).__name__})"
        raise ParkourTypeError(message)
    for item in cast("Iterable[object]", produced):
        yield _as_pair(item, operation="combine")


def combine(
    collection: Collection[V],
    fn: PairProducer[V],
    overwrite: bool = True,  # noqa: FBT001, FBT002
) -> dict[Key, Any]:
    """Merge the ``(key, value)`` pairs produced for every entry.

    ``fn(value, key)`` returns an iterable of pairs (a generator function
    works) or a mapping. Each key keeps the position of its first appearance.

    Args:
        collection: Mapping or sequence to combine.
        fn: Pair producer called with ``(value, key)``.
        overwrite: When True the last pair for a key wins; when False the
            first pair wins and later duplicates are dropped.

    Returns:
        The merged dict.
    """
    ensure_callable(fn, name="fn")
    result: dict[Key, Any] = {}
    for key, value in iter_entries(collection):
        for new_key, new_value in _produced_pairs(fn(value, key)):
            if not overwrite and new_key in result:
                logger.debug(
                    "combine dropped duplicate key",
                    extra=structured_extra(component=LogComponent.TRANSFORM, operation="combine", key=new_key),
                )
                continue
            result[new_key] = new_value
    return result


def reindex(
    collection: Collection[V],
    key_map: Mapping[Key, Key],
    preserve_unmapped: bool = True,  # noqa: FBT001, FBT002
) -> dict[Key, V]:
    """Copy values under the keys given by ``key_map``.

    For every entry ``(k, v)``, ``(k, v)`` is kept when ``preserve_unmapped``
    is set or ``k`` has no mapping, and ``(key_map[k], v)`` is added when
    ``k`` has one.
    """
    if not isinstance(key_map, Mapping):
        message = f"key_map must be a mapping (got {type(key_map).__name__})"
        raise ParkourTypeError(message)
    result: dict[Key, V] = {}
    for key, value in iter_entries(collection):
        mapped = key in key_map
        if preserve_unmapped or not mapped:
            result[key] = value
        if mapped:
            result[key_map[key]] = value
    return result


def _normalized_entry(item: object, default: D) -> tuple[Key, Any]:
    if isinstance(item, tuple):
        if len(item) != 2:  # noqa: PLR2004
            message = f"normalize expects (key, value) tuples of length 2 (got {item!r})"
            raise ParkourValidationError(message)
        return cast("tuple[Key, Any]", item)
    if isinstance(item, Mapping):
        entry = cast("Mapping[Key, Any]", item)
        if len(entry) != 1:
            message = f"normalize expects single-entry mappings (got {len(entry)} entries)"
            raise ParkourValidationError(message)
        return next(iter(entry.items()))
    if not isinstance(item, Hashable):
        message = f"normalize keys must be hashable (got {type(item).__name__})"
        raise ParkourTypeError(message)
    return cast("Key", item), default


def normalize(sequence: Iterable[object] | Mapping[Key, Any], default: D) -> dict[Key, Any]:
    """Turn a flexible option list into a key/value dict.

    Plain items become keys mapped to ``default``; ``(key, value)`` tuples and
    single-entry mappings are kept as-is. Order follows the input.

    Example:
        >>> normalize(["one", ("two", "three"), "four"], "default")
        {'one': 'default', 'two': 'three', 'four': 'default'}
    """
    if isinstance(sequence, Mapping):
        return dict(cast("Mapping[Key, Any]", sequence))
    if not is_sequence(sequence):
        message = f"normalize expects a sequence or mapping (got {type(sequence).__name__})"
        raise ParkourTypeError(message)
    result: dict[Key, Any] = {}
    for item in sequence:
        key, value = _normalized_entry(item, default)
        result[key] = value
    return result


__all__ = ["combine", "filter", "normalize", "reindex", "reject", "split"]
