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

"""Short-circuiting predicate searches over collections.

``all_ok``, ``one_ok`` and ``first_ok`` stop calling the predicate as soon as
the answer is known; entries after the decisive one are never evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from parkour._internal.collection_utils import iter_entries
from parkour._internal.exceptions import ParkourLookupError
from parkour._internal.logging_utils import structured_extra
from parkour._internal.validation import ensure_callable
from parkour.core.model_types import LogComponent

if TYPE_CHECKING:
    from parkour.core.type_aliases import Collection, Key, Predicate

V = TypeVar("V")

logger = logging.getLogger("parkour.search")


@dataclass(frozen=True, slots=True)
class FirstOk(Generic[V]):
    """Result of ``first_ok``: either one matched entry or nothing.

    The result behaves like a zero-or-one element container: ``len`` is 1 or
    0, iteration yields the single ``(key, value)`` pair, and truthiness
    reports whether a match was found.

    Attributes:
        entry: The matched ``(key, value)`` pair, or ``None`` when empty.
    """

    entry: tuple[Key, V] | None = None

    @classmethod
    def empty(cls) -> FirstOk[Any]:
        """Return the result reported when no entry matched."""
        return cls()

    @classmethod
    def of(cls, key: Key, value: V) -> FirstOk[V]:
        """Return a valid result holding ``key`` and ``value``."""
        return cls((key, value))

    def valid(self) -> bool:
        """Return True when an entry matched."""
        return self.entry is not None

    @property
    def key(self) -> Key:
        """Matched key.

        Raises:
            ParkourLookupError: If the result is empty.
        """
        return self._require()[0]

    @property
    def value(self) -> V:
        """Matched value.

        Raises:
            ParkourLookupError: If the result is empty.
        """
        return self._require()[1]

    def _require(self) -> tuple[Key, V]:
        if self.entry is None:
            message = "first_ok found no matching entry"
            raise ParkourLookupError(message)
        return self.entry

    def __bool__(self) -> bool:
        return self.entry is not None

    def __len__(self) -> int:
        return 0 if self.entry is None else 1

    def __iter__(self) -> Iterator[tuple[Key, V]]:
        if self.entry is not None:
            yield self.entry


def _passes(result: object, *, strict: bool) -> bool:
    if strict:
        return result is True
    return bool(result)


def all_ok(collection: Collection[V], fn: Predicate[V], strict: bool = False) -> bool:  # noqa: FBT001, FBT002
    """Return True when ``fn(value, key)`` holds for every entry.

    Args:
        collection: Mapping or sequence to check.
        fn: Predicate called with ``(value, key)``.
        strict: Require results to be exactly ``True`` instead of truthy.

    Returns:
        False as soon as one entry fails; True otherwise (including when the
        collection is empty).
    """
    ensure_callable(fn, name="fn")
    for key, value in iter_entries(collection):
        if not _passes(fn(value, key), strict=strict):
            logger.debug(
                "all_ok stopped at failing entry",
                extra=structured_extra(component=LogComponent.SEARCH, operation="all_ok", key=key, strict=strict),
            )
            return False
    return True


def one_ok(collection: Collection[V], fn: Predicate[V], strict: bool = False) -> bool:  # noqa: FBT001, FBT002
    """Return True when ``fn(value, key)`` holds for at least one entry.

    Args:
        collection: Mapping or sequence to check.
        fn: Predicate called with ``(value, key)``.
        strict: Require results to be exactly ``True`` instead of truthy.

    Returns:
        True as soon as one entry passes; False otherwise (including when the
        collection is empty).
    """
    ensure_callable(fn, name="fn")
    for key, value in iter_entries(collection):
        if _passes(fn(value, key), strict=strict):
            logger.debug(
                "one_ok stopped at passing entry",
                extra=structured_extra(component=LogComponent.SEARCH, operation="one_ok", key=key, strict=strict),
            )
            return True
    return False


def first_ok(collection: Collection[V], fn: Predicate[V]) -> FirstOk[V]:
    """Return the first entry for which ``fn(value, key)`` is truthy.

    Returns:
        ``FirstOk.of(key, value)`` for the first match, or ``FirstOk.empty()``
        when nothing matched.
    """
    ensure_callable(fn, name="fn")
    for key, value in iter_entries(collection):
        if fn(value, key):
            logger.debug(
                "first_ok matched",
                extra=structured_extra(component=LogComponent.SEARCH, operation="first_ok", key=key),
            )
            return FirstOk.of(key, value)
    return FirstOk.empty()


__all__ = ["FirstOk", "all_ok", "first_ok", "one_ok"]
