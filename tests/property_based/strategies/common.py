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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "int_sequences",
    "keyed_collections",
    "keys",
    "range_arguments",
    "string_mappings",
]


def keys() -> st.SearchStrategy[str | int]:
    """Return a strategy for collection keys (short strings or small ints)."""
    return st.one_of(st.text(max_size=4), st.integers(min_value=-50, max_value=50))


def string_mappings(max_size: int = 8) -> st.SearchStrategy[dict[str, int]]:
    """Return a strategy for small str-keyed mappings of integers."""
    return st.dictionaries(st.text(max_size=4), st.integers(min_value=-100, max_value=100), max_size=max_size)


def int_sequences(max_size: int = 8) -> st.SearchStrategy[list[int]]:
    """Return a strategy for small integer lists."""
    return st.lists(st.integers(min_value=-100, max_value=100), max_size=max_size)


def keyed_collections(max_size: int = 8) -> st.SearchStrategy[dict[str, int] | list[int]]:
    """Mappings or sequences, the two collection shapes parkour accepts.

    Returns:
        Hypothesis strategy emitting either a dict or a list.
    """
    return st.one_of(string_mappings(max_size), int_sequences(max_size))


def range_arguments(bound: int = 40) -> st.SearchStrategy[tuple[int, int, int]]:
    """Return ``(start, stop, step)`` triples with a non-zero step.

    Args:
        bound: Absolute bound for start and stop.

    Returns:
        Hypothesis strategy producing argument triples for ``parkour.range``.
    """
    ends = st.integers(min_value=-bound, max_value=bound)
    step = st.integers(min_value=-5, max_value=5).filter(lambda value: value != 0)
    return st.tuples(ends, ends, step)
