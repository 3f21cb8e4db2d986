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

"""Unit tests for short-circuiting searches."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest

import parkour
from parkour import FirstOk, ParkourLookupError, ParkourTypeError

pytestmark = pytest.mark.unit


def test_all_ok_stops_at_first_failure() -> None:
    fn = Mock(side_effect=[False, True])

    assert parkour.all_ok([1, 2], fn) is False
    assert fn.call_args_list == [call(1, 0)]


def test_all_ok_true_when_every_entry_passes() -> None:
    fn = Mock(side_effect=[True, True])

    assert parkour.all_ok([1, 2], fn) is True
    assert fn.call_count == 2


@pytest.mark.parametrize(
    ("results", "strict", "expected"),
    [
        ([1, "yes"], False, True),
        ([1, "yes"], True, False),
        ([True, True], True, True),
        ([True, 0], False, False),
    ],
)
def test_all_ok_strict_requires_exact_true(results: list[object], strict: bool, expected: bool) -> None:  # noqa: FBT001
    fn = Mock(side_effect=results)
    assert parkour.all_ok(["a", "b"], fn, strict) is expected


def test_all_ok_strict_still_short_circuits() -> None:
    fn = Mock(side_effect=[1, True])

    assert parkour.all_ok([1, 2], fn, strict=True) is False
    assert fn.call_count == 1


def test_all_ok_on_empty_collection_is_true() -> None:
    assert parkour.all_ok({}, Mock()) is True


def test_one_ok_false_when_nothing_passes() -> None:
    fn = Mock(side_effect=[False, False])

    assert parkour.one_ok([1, 2], fn) is False
    assert fn.call_args_list == [call(1, 0), call(2, 1)]


def test_one_ok_stops_at_first_success() -> None:
    fn = Mock(side_effect=[True, False])

    assert parkour.one_ok([1, 2], fn) is True
    assert fn.call_count == 1


def test_one_ok_strict_skips_truthy_non_true_results() -> None:
    fn = Mock(side_effect=["truthy", True])

    assert parkour.one_ok([1, 2], fn, strict=True) is True
    assert fn.call_count == 2


def test_one_ok_on_empty_collection_is_false() -> None:
    assert parkour.one_ok([], Mock()) is False


def test_first_ok_without_match_is_invalid() -> None:
    fn = Mock(return_value=False)

    result = parkour.first_ok([1, 2, 3, 4], fn)

    assert not result.valid()
    assert not result
    assert len(result) == 0
    assert list(result) == []
    assert fn.call_count == 4
    assert result == FirstOk.empty()


def test_first_ok_returns_first_match_and_stops() -> None:
    fn = Mock(side_effect=[False, True, False, False])

    result = parkour.first_ok([1, 2, 3, 4], fn)

    assert result.valid()
    assert len(result) == 1
    assert result.value == 2
    assert result.key == 1
    assert list(result) == [(1, 2)]
    assert fn.call_args_list == [call(1, 0), call(2, 1)]


def test_first_ok_on_mapping_reports_mapping_key() -> None:
    result = parkour.first_ok({"x": 1, "y": 5}, lambda value, _key: value > 3)
    assert result == FirstOk.of("y", 5)


def test_empty_first_ok_refuses_entry_access() -> None:
    result = FirstOk.empty()
    with pytest.raises(ParkourLookupError, match="no matching entry"):
        _ = result.key
    with pytest.raises(ParkourLookupError):
        _ = result.value


@pytest.mark.parametrize("operation", [parkour.all_ok, parkour.one_ok, parkour.first_ok])
def test_searches_reject_non_callable_predicates(operation: object) -> None:
    with pytest.raises(ParkourTypeError, match="fn must be callable"):
        operation([1], None)  # type: ignore[operator]
