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

"""Common exception hierarchy for parkour."""

from __future__ import annotations

__all__ = [
    "ParkourError",
    "ParkourLookupError",
    "ParkourTypeError",
    "ParkourValidationError",
]


class ParkourError(Exception):
    """Base error for all parkour exceptions."""


class ParkourValidationError(ParkourError, ValueError):
    """Raised when an argument has the right type but an unusable value."""


class ParkourTypeError(ParkourError, TypeError):
    """Raised when an argument has an unexpected type."""


class ParkourLookupError(ParkourError, LookupError):
    """Raised when reading the entry of an empty search result."""
