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

"""Value-to-id interning for the winged-edge arenas."""

from typing import Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)


class InternTable(Generic[K]):
    """Append-only bijection between hashable values and dense integer ids.

    Ids are assigned in insertion order starting at 0 and never change, so
    iterating the table is deterministic for a given insertion history. Keys
    must honour the usual ``__eq__``/``__hash__`` contract; ``Vertex`` keys
    hash over their (sign-normalized) coordinates, which makes this the
    coordinate welding table for vertices.

    Examples
    --------
    >>> table = InternTable()
    >>> table.intern("a")
    (0, True)
    >>> table.intern("b")
    (1, True)
    >>> table.intern("a")
    (0, False)
    >>> table[1], len(table)
    ('b', 2)
    """

    def __init__(self) -> None:
        self._ids: dict[K, int] = {}
        self._values: list[K] = []

    def intern(self, value: K) -> tuple[int, bool]:
        """Return ``(id, created)`` for ``value``, assigning a new id if absent."""
        existing = self._ids.get(value)
        if existing is not None:
            return existing, False
        new_id = len(self._values)
        self._ids[value] = new_id
        self._values.append(value)
        return new_id, True

    def get(self, value: K) -> int | None:
        return self._ids.get(value)

    def __getitem__(self, index: int) -> K:
        return self._values[index]

    def __contains__(self, value: object) -> bool:
        return value in self._ids

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[K]:
        return iter(self._values)
