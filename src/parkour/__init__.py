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

"""parkour - functional helpers for keyed collections.

Provides map, reduce, fused map-reduce, short-circuiting predicate searches,
filtering, re-keying, normalization and a lazy integer range over mappings and
sequences. Callbacks receive ``(value, key)``; sequences are keyed by index.
"""

from __future__ import annotations

from ._internal.error_codes import ErrorCode, error_code_catalog, error_code_for
from ._internal.exceptions import (
    ParkourError,
    ParkourLookupError,
    ParkourTypeError,
    ParkourValidationError,
)
from ._internal.logging_utils import LogConfig, configure_logging
from .config import Settings, SettingsValidationError, load_settings
from .functors import add, identity, multiply, negate
from .ranges import range  # noqa: A004
from .search import FirstOk, all_ok, first_ok, one_ok
from .transform import combine, filter, normalize, reindex, reject, split  # noqa: A004
from .traverse import invoke, map, map_keys, map_reduce, product, reduce, sum  # noqa: A004

__all__ = [
    "ErrorCode",
    "FirstOk",
    "LogConfig",
    "ParkourError",
    "ParkourLookupError",
    "ParkourTypeError",
    "ParkourValidationError",
    "Settings",
    "SettingsValidationError",
    "__version__",
    "add",
    "all_ok",
    "combine",
    "configure_logging",
    "error_code_catalog",
    "error_code_for",
    "filter",
    "first_ok",
    "identity",
    "invoke",
    "load_settings",
    "map",
    "map_keys",
    "map_reduce",
    "multiply",
    "negate",
    "normalize",
    "one_ok",
    "product",
    "range",
    "reduce",
    "reindex",
    "reject",
    "split",
    "sum",
]

__version__ = "0.1.0"
