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

"""Unit tests for traversal operations."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest

import parkour
from parkour import ParkourTypeError

pytestmark = pytest.mark.unit


def test_map_keeps_keys_and_calls_with_value_then_key() -> None:
    fn = Mock(side_effect=[2, 4])

    result = parkour.map({"a": 1, "b": 2}, fn)

    assert result == {"a": 2, "b": 4}
    assert list(result) == ["a", "b"]
    assert fn.call_args_list == [call(1, "a"), call(2, "b")]


def test_map_over_sequence_returns_list_keyed_by_index() -> None:
    assert parkour.map([10, 20, 30], lambda value, key: value + key) == [10, 21, 32]


def test_map_does_not_mutate_input() -> None:
    data = {"a": 1}
    _ = parkour.map(data, lambda value, _key: value * 10)
    assert data == {"a": 1}


def test_map_keys_rekeys_and_keeps_first_position_on_collision() -> None:
    data = {"a": 1, "b": 2, "c": 3}

    result = parkour.map_keys(data, lambda value, _key: "odd" if value % 2 else "even")

    assert result == {"odd": 3, "even": 2}
    assert list(result) == ["odd", "even"]


def test_reduce_folds_left_to_right() -> None:
    data = [1, 2]
    fn = Mock(side_effect=[1, 3])

    assert parkour.reduce(data, fn, 0) == 3
    assert fn.call_args_list == [call(0, 1, 0, data), call(1, 2, 1, data)]


def test_reduce_on_empty_collection_returns_initial_untouched() -> None:
    fn = Mock()
    initial = object()

    assert parkour.reduce([], fn, initial) is initial
    fn.assert_not_called()


def test_map_reduce_maps_then_reduces_each_entry() -> None:
    data = [1, 2]
    mapper = Mock(side_effect=[2, 4])
    reducer = Mock(side_effect=[4, 8])

    assert parkour.map_reduce(data, mapper, reducer, 2) == 8
    assert mapper.call_args_list == [call(1, 0), call(2, 1)]
    assert reducer.call_args_list == [call(2, 2, 0, data), call(4, 4, 1, data)]


def test_map_reduce_interleaves_map_and_reduce_calls() -> None:
    events: list[str] = []

    def mapper(value: int, key: int) -> int:
        events.append(f"map:{key}")
        return value

    def reducer(acc: int, value: int, key: int, _collection: object) -> int:
        events.append(f"reduce:{key}")
        return acc + value

    assert parkour.map_reduce([5, 6], mapper, reducer, 0) == 11
    assert events == ["map:0", "reduce:0", "map:1", "reduce:1"]


def test_invoke_calls_every_entry_and_returns_none() -> None:
    fn = Mock(return_value="ignored")

    assert parkour.invoke({"a": 1, "b": 2}, fn) is None
    assert fn.call_args_list == [call(1, "a"), call(2, "b")]


@pytest.mark.parametrize(
    ("data", "expected_sum", "expected_product"),
    [
        ([], 0, 1),
        ([2, 3, 4], 9, 24),
        ({"a": 5, "b": -1}, 4, -5),
    ],
)
def test_sum_and_product_of_values(data: object, expected_sum: int, expected_product: int) -> None:
    assert parkour.sum(data) == expected_sum
    assert parkour.product(data) == expected_product


def test_sum_with_callback_uses_mapped_values() -> None:
    assert parkour.sum({"a": 1, "b": 2}, lambda value, key: len(key) * value * 10) == 30


@pytest.mark.parametrize(
    "operation",
    [
        lambda fn: parkour.map([1], fn),
        lambda fn: parkour.map_keys([1], fn),
        lambda fn: parkour.reduce([1], fn, 0),
        lambda fn: parkour.map_reduce([1], fn, parkour.add, 0),
        lambda fn: parkour.map_reduce([1], parkour.identity, fn, 0),
        lambda fn: parkour.invoke([1], fn),
        lambda fn: parkour.sum([1], fn),
    ],
)
def test_non_callable_callbacks_are_rejected(operation: object) -> None:
    with pytest.raises(ParkourTypeError, match="must be callable"):
        operation("not callable")  # type: ignore[operator]


@pytest.mark.parametrize("collection", ["abc", b"abc", 42, None])
def test_non_collections_are_rejected(collection: object) -> None:
    with pytest.raises(ParkourTypeError, match="mapping or a non-string sequence"):
        _ = parkour.map(collection, parkour.identity)  # type: ignore[arg-type]


def test_callback_errors_propagate_unmodified() -> None:
    error = KeyError("boom")

    def explode(_value: int, _key: int) -> int:
        raise error

    with pytest.raises(KeyError) as excinfo:
        _ = parkour.map([1], explode)
    assert excinfo.value is error


def test_reduce_passes_one_shot_iterators_through_unchanged() -> None:
    values = parkour.range(0, 4)
    seen: list[object] = []

    def remember(acc: int, value: int, _key: int, collection: object) -> int:
        seen.append(collection)
        return acc + value

    assert parkour.reduce(values, remember, 0) == 6
    assert all(collection is values for collection in seen)
    assert len(seen) == 4
