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

"""Assembly of a refined winged-edge store from a walk over source faces.

Strategies walk the source faces and describe their children with vertex
references: an original ``Vertex``, or the integer index of a pending
stencil. Stencils are memoised per edge, so the two faces sharing an edge get
the same new vertex. Once the walk is done, all stencils are evaluated in one
batched tensor operation and the children are inserted into a fresh store in
walk order.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Union

from wingedmesh.adjacency import get_adjacent_vertex
from wingedmesh.subdivision._stencils import Stencil, edge_stencil, evaluate_stencils
from wingedmesh.topology._entities import Edge, Face, Vertex

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh

logger = logging.getLogger(__name__)

VertexRef = Union[Vertex, int]


class RefinementBuilder:
    """Collects child triangles and pending stencils for one subdivision pass.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Source store. It is only read.
    """

    def __init__(self, mesh: "WingedEdgeMesh") -> None:
        self.mesh = mesh
        self._stencils: list[Stencil] = []
        self._stencil_index: dict[tuple[Edge, bool], int] = {}
        self._triangles: list[tuple[VertexRef, VertexRef, VertexRef]] = []

    def face_apexes(self, face: Face, context: str) -> tuple[Vertex, Vertex, Vertex]:
        """Return the corners of ``face`` opposite ``e1``, ``e2`` and ``e3``.

        Raises
        ------
        TopologyInvariantError
            If any apex is missing, i.e. ``face`` is not a proper triangle.
        """
        a1, a2, a3 = (
            get_adjacent_vertex(self.mesh, face, edge).unwrap(
                f"{context}: no apex opposite {edge} in {face}"
            )
            for edge in face.edges
        )
        return a1, a2, a3

    def new_vertex(
        self, face: Face, edge: Edge, apex: Vertex, linear: bool = False
    ) -> int:
        """Reference the new vertex on ``edge``, building its stencil on first use."""
        key = (edge, linear)
        index = self._stencil_index.get(key)
        if index is None:
            index = len(self._stencils)
            self._stencils.append(
                edge_stencil(self.mesh, face, edge, apex, linear=linear)
            )
            self._stencil_index[key] = index
        return index

    def add_triangles(
        self, triangles: Iterable[tuple[VertexRef, VertexRef, VertexRef]]
    ) -> None:
        self._triangles.extend(triangles)

    @property
    def n_triangles(self) -> int:
        return len(self._triangles)

    def build(self, name: str) -> "WingedEdgeMesh":
        """Evaluate pending stencils and insert all child triangles into a new store."""
        from wingedmesh.topology.winged_edge import WingedEdgeMesh

        positions = evaluate_stencils(self.mesh, self._stencils).tolist()
        new_vertices = [Vertex(*p) for p in positions]

        def resolve(ref: VertexRef) -> Vertex:
            return ref if isinstance(ref, Vertex) else new_vertices[ref]

        refined = WingedEdgeMesh()
        for a, b, c in self._triangles:
            refined.add_triangle(resolve(a), resolve(b), resolve(c))

        n_irregular = sum(
            s.kind == "butterfly" and not s.regular for s in self._stencils
        )
        n_boundary = sum(s.kind == "boundary" for s in self._stencils)
        logger.debug(
            "%s: vertices %d -> %d, edges %d -> %d, faces %d -> %d "
            "(%d stencils, %d boundary, %d irregular butterfly)",
            name,
            self.mesh.n_vertices,
            refined.n_vertices,
            self.mesh.n_edges,
            refined.n_edges,
            self.mesh.n_faces,
            refined.n_faces,
            len(self._stencils),
            n_boundary,
            n_irregular,
        )
        return refined
