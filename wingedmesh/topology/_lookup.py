# SPDX-FileCopyrightText: Copyright (c) 2023 - 2026 NVIDIA CORPORATION & AFFILIATES.
# SPDX-FileCopyrightText: All rights reserved.
# SPDX-License-Identifier: Apache-2.0
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

"""Result types for adjacency queries and the fatal topology error.

Adjacency queries distinguish two kinds of failure:

- An *expected* miss, such as asking for the face across a boundary edge. The
  query returns a ``Lookup`` whose ``failure`` says why, and the caller picks
  another formula or branch.
- A *topology-invariant violation*, where the caller's own assumptions say the
  lookup must succeed. ``Lookup.unwrap`` turns the miss into a
  ``TopologyInvariantError``, which aborts the whole subdivision call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TopologyInvariantError(RuntimeError):
    """Raised when a mesh violates a topological assumption of an algorithm.

    Callers should treat this as "the input mesh is malformed"; no partial
    result is produced.
    """


class LookupFailure(Enum):
    """Reason an adjacency query has no answer."""

    BOUNDARY_REACHED = "boundary_reached"
    """The mesh ends here: no face across the edge, no further boundary edge."""

    INDEX_OUT_OF_RANGE = "index_out_of_range"
    """The entity is not in the store, or a face has no slot for the answer."""


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of an adjacency query: a value, or the reason there is none."""

    value: T | None = None
    failure: LookupFailure | None = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(value=value)

    @classmethod
    def missing(cls, failure: LookupFailure) -> "Lookup[T]":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self, message: str) -> T:
        """Return the value, or raise ``TopologyInvariantError`` with ``message``.

        Parameters
        ----------
        message : str
            Description of the assumption that the failed lookup violates.

        Raises
        ------
        TopologyInvariantError
            If the lookup failed.
        """
        if self.failure is not None:
            raise TopologyInvariantError(f"{message} ({self.failure.value})")
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self.value if self.failure is None else default  # type: ignore[return-value]
