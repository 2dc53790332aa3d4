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

r"""Vertex stencils for placing new subdivision vertices on edges.

A stencil is a weighted combination of existing vertices. Three are used:

- Midpoint (linear subdivision): :math:`\tfrac12 v_1 + \tfrac12 v_2`.
- Butterfly (interior edges, Dyn, Gregory & Levin 1990): endpoints
  :math:`v_1, v_2` weigh 1/2, the apexes :math:`b_1, b_2` of the two incident
  faces weigh 1/8, and the four wing vertices :math:`c_1 \ldots c_4` (apexes
  across the remaining edges of both faces) weigh -1/16.
- Boundary (4-point rule): :math:`\tfrac{9}{16}(v_1 + v_2) -
  \tfrac{1}{16}(v_3 + v_4)` where :math:`v_3, v_4` continue the boundary
  past :math:`v_1` and :math:`v_2`.

All three weight tables sum to exactly 1, and every weight is a dyadic
fraction, so the sums are exact in floating point.

Only the regular case (both endpoints of valence 6) is modelled for the
butterfly stencil. Irregular vertices get the same weights with no valence
correction.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Sequence

import torch

from wingedmesh.adjacency import (
    get_adjacent_face,
    get_adjacent_face_vertex,
    get_adjacent_vertex,
    get_other_boundary_vertex,
)
from wingedmesh.topology._entities import Edge, Face, Vertex

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh

StencilKind = Literal["midpoint", "butterfly", "boundary"]

MIDPOINT_WEIGHTS: tuple[float, ...] = (1 / 2, 1 / 2)
BUTTERFLY_WEIGHTS: tuple[float, ...] = (
    1 / 2,
    1 / 2,
    1 / 8,
    1 / 8,
    -1 / 16,
    -1 / 16,
    -1 / 16,
    -1 / 16,
)
BOUNDARY_WEIGHTS: tuple[float, ...] = (9 / 16, 9 / 16, -1 / 16, -1 / 16)

REGULAR_VALENCE = 6


@dataclass(frozen=True)
class Stencil:
    """Weighted vertex combination defining one new vertex.

    Attributes
    ----------
    kind : {"midpoint", "butterfly", "boundary"}
        Rule that produced the stencil.
    vertices : tuple[Vertex, ...]
        Source vertices, aligned with ``weights``.
    weights : tuple[float, ...]
        Weight of each source vertex.
    regular : bool
        False for a butterfly stencil whose edge touches a vertex of valence
        other than 6 (weights are applied uncorrected).
    """

    kind: StencilKind
    vertices: tuple[Vertex, ...]
    weights: tuple[float, ...]
    regular: bool = True


def midpoint_stencil(edge: Edge) -> Stencil:
    return Stencil("midpoint", edge.vertices, MIDPOINT_WEIGHTS)


def boundary_stencil(mesh: "WingedEdgeMesh", edge: Edge) -> Stencil:
    """Build the 4-point boundary stencil for ``edge``.

    The outer points are the boundary neighbours of each endpoint found by
    ``get_other_boundary_vertex``. An endpoint with no other boundary edge
    stands in for its own missing neighbour, which keeps the weights summing
    to 1 (this happens when the butterfly stencil falls back for an edge whose
    endpoints are not themselves on the boundary).
    """
    v1, v2 = edge.vertices
    v3 = get_other_boundary_vertex(mesh, v1, edge).value_or(v1)
    v4 = get_other_boundary_vertex(mesh, v2, edge).value_or(v2)
    return Stencil("boundary", (v1, v2, v3, v4), BOUNDARY_WEIGHTS)


def butterfly_stencil(
    mesh: "WingedEdgeMesh", face: Face, edge: Edge, apex: Vertex
) -> Stencil:
    """Build the 8-point butterfly stencil for ``edge`` seen from ``face``.

    Falls back to ``boundary_stencil`` as soon as any neighbour is missing:
    the face across ``edge``, its apex, or any of the four wing vertices.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Store containing ``face``.
    face : Face
        A face incident to ``edge``.
    edge : Edge
        Edge to place the new vertex on.
    apex : Vertex
        Corner of ``face`` opposite ``edge``.

    Returns
    -------
    Stencil
        A ``"butterfly"`` stencil, or a ``"boundary"`` stencil on fallback.
    """
    across = get_adjacent_face(mesh, face, edge)
    if not across.ok:
        return boundary_stencil(mesh, edge)
    other_face = across.value

    other_apex = get_adjacent_vertex(mesh, other_face, edge)
    if not other_apex.ok:
        return boundary_stencil(mesh, edge)

    wings = []
    for wing_face in (face, other_face):
        for wing_edge in wing_face.edges:
            if wing_edge == edge:
                continue
            wing = get_adjacent_face_vertex(mesh, wing_face, wing_edge)
            if not wing.ok:
                return boundary_stencil(mesh, edge)
            wings.append(wing.value)

    regular = all(len(mesh.vertex_edges(v)) == REGULAR_VALENCE for v in edge.vertices)
    return Stencil(
        "butterfly",
        (edge.v1, edge.v2, apex, other_apex.value, *wings),
        BUTTERFLY_WEIGHTS,
        regular=regular,
    )


def edge_stencil(
    mesh: "WingedEdgeMesh",
    face: Face,
    edge: Edge,
    apex: Vertex,
    linear: bool = False,
) -> Stencil:
    """Choose the stencil for a new vertex on ``edge``: midpoint or butterfly."""
    if linear:
        return midpoint_stencil(edge)
    return butterfly_stencil(mesh, face, edge, apex)


def evaluate_stencils(
    mesh: "WingedEdgeMesh", stencils: Sequence[Stencil]
) -> torch.Tensor:
    """Evaluate many stencils against ``mesh.points`` in one batched gather.

    Stencils are padded to a common width with zero weights, so the result
    for every row is exactly ``sum(w * p)`` over that stencil's own terms.

    Returns
    -------
    torch.Tensor
        New vertex positions, shape (len(stencils), 3), float64.
    """
    if len(stencils) == 0:
        return torch.zeros((0, 3), dtype=torch.float64)

    width = max(len(s.weights) for s in stencils)
    ids = []
    weights = []
    for stencil in stencils:
        pad = width - len(stencil.weights)
        ids.append([mesh.vertex_index(v) for v in stencil.vertices] + [0] * pad)
        weights.append(list(stencil.weights) + [0.0] * pad)

    ids = torch.tensor(ids, dtype=torch.long)  # (n_stencils, width)
    weights = torch.tensor(weights, dtype=torch.float64)  # (n_stencils, width)

    ### Gather source points and reduce: (n, width, 3) -> (n, 3)
    return (weights.unsqueeze(-1) * mesh.points[ids]).sum(dim=1)


def subdivide_edge(
    mesh: "WingedEdgeMesh",
    face: Face,
    edge: Edge,
    apex: Vertex,
    linear: bool = False,
) -> Vertex:
    """Compute the new vertex on ``edge`` of ``face`` whose apex is ``apex``.

    In linear mode this is the exact midpoint. Otherwise it is the butterfly
    stencil, or the boundary stencil when the butterfly neighbourhood is
    incomplete.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import single_triangle
    >>> mesh = single_triangle.load()
    >>> face = mesh.faces[0]
    >>> edge = face.e1
    >>> apex = mesh.get_adjacent_vertex(face, edge).value
    >>> subdivide_edge(mesh, face, edge, apex, linear=True) == edge.midpoint
    True
    """
    stencil = edge_stencil(mesh, face, edge, apex, linear=linear)
    return Vertex(*evaluate_stencils(mesh, [stencil])[0].tolist())
