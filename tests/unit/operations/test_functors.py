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

"""Unit tests for reusable callbacks."""

from __future__ import annotations

import pytest

from parkour import ParkourTypeError
from parkour.functors import add, identity, multiply, negate

pytestmark = pytest.mark.unit


def test_identity_returns_value() -> None:
    marker = object()
    assert identity(marker) is marker
    assert identity(marker, "key") is marker


def test_reducers_ignore_trailing_arguments() -> None:
    assert add(2, 3, "key", [1]) == 5
    assert multiply(2, 3, "key", [1]) == 6


def test_negate_flips_truthiness() -> None:
    predicate = negate(lambda value, _key: value)

    assert predicate(0, "a") is True
    assert predicate("x", "a") is False


def test_negate_requires_callable() -> None:
    with pytest.raises(ParkourTypeError):
        _ = negate(42)  # type: ignore[arg-type]
