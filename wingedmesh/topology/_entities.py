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

"""Immutable value types for the winged-edge topology store.

``Vertex``, ``Edge`` and ``Face`` compare by value, not identity, so they can
be used directly as dictionary keys. Two vertices built independently from the
same coordinates are interchangeable, and an edge does not remember the order
in which its endpoints were given.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, order=True)
class Vertex:
    """A point in 3D space, equal to any other vertex with the same coordinates.

    ``-0.0`` is normalized to ``0.0`` on construction so that the two signed
    zeros hash and order identically.

    Examples
    --------
    >>> Vertex(1.0, 2.0, 3.0) == Vertex(1, 2, 3)
    True
    >>> Vertex(0.0, -0.0, 0.0).coords
    (0.0, 0.0, 0.0)
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        # Adding 0.0 maps -0.0 to 0.0 and leaves every other float unchanged
        object.__setattr__(self, "x", float(self.x) + 0.0)
        object.__setattr__(self, "y", float(self.y) + 0.0)
        object.__setattr__(self, "z", float(self.z) + 0.0)

    @property
    def coords(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)


@dataclass(frozen=True, order=True)
class Edge:
    """An unordered pair of vertices.

    Endpoints are stored in sorted order, so ``Edge(a, b) == Edge(b, a)`` and
    ``edge.v1 <= edge.v2`` regardless of construction order.

    Examples
    --------
    >>> a, b = Vertex(0, 0, 0), Vertex(1, 0, 0)
    >>> Edge(a, b) == Edge(b, a)
    True
    >>> Edge(b, a).v1 == a
    True
    """

    v1: Vertex
    v2: Vertex

    def __post_init__(self) -> None:
        if self.v2 < self.v1:
            v1, v2 = self.v2, self.v1
            object.__setattr__(self, "v1", v1)
            object.__setattr__(self, "v2", v2)

    @property
    def vertices(self) -> tuple[Vertex, Vertex]:
        return (self.v1, self.v2)

    def __contains__(self, vertex: object) -> bool:
        return vertex == self.v1 or vertex == self.v2

    @property
    def midpoint(self) -> Vertex:
        return Vertex(
            (self.v1.x + self.v2.x) / 2,
            (self.v1.y + self.v2.y) / 2,
            (self.v1.z + self.v2.z) / 2,
        )


@dataclass(frozen=True, eq=False)
class Face:
    """A triangle given by its three edges.

    Equality and hashing ignore the order of the edges, so a face built from a
    permutation of the same three edges is the same face. The edges are not
    checked to close a triangle; a malformed face surfaces later as a failed
    adjacency query.
    """

    e1: Edge
    e2: Edge
    e3: Edge
    _key: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_key", frozenset((self.e1, self.e2, self.e3)))

    @property
    def edges(self) -> tuple[Edge, Edge, Edge]:
        return (self.e1, self.e2, self.e3)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """Distinct endpoints of the face's edges, in first-seen order."""
        seen: list[Vertex] = []
        for edge in self.edges:
            for vertex in edge.vertices:
                if vertex not in seen:
                    seen.append(vertex)
        return tuple(seen)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)
