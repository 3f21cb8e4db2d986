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

"""Compatibility layer for modern typing features.

This module consolidates typing constructs introduced across Python 3.10-3.12
into a single import location. Features are imported from the standard library
when available, and from `typing_extensions` otherwise.

Attributes:
    TypeAlias
    TypedDict
    Unpack
    override

Notes:
    - When type checking (`TYPE_CHECKING` is true), all names are imported
      from `typing_extensions` to give type checkers a consistent API even
      when targeting Python 3.10.
    - At runtime, stdlib versions are preferred where available, falling back
      to the backports only when necessary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typing_extensions import TypedDict, Unpack, override
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import Unpack  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import Unpack

__all__ = [
    "TypeAlias",
    "TypedDict",
    "Unpack",
    "override",
]
