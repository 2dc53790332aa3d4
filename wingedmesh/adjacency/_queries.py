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

"""Read-only traversal queries over a winged-edge store.

Every query returns a ``Lookup`` rather than raising. A boundary miss (no face
across an edge, no further boundary edge at a vertex) is an ordinary outcome
that callers branch on; only the caller knows whether a miss breaks one of its
assumptions, in which case it calls ``Lookup.unwrap``.
"""

from typing import TYPE_CHECKING

from wingedmesh.topology._entities import Edge, Face, Vertex
from wingedmesh.topology._lookup import Lookup, LookupFailure

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh


def get_other_vertex(edge: Edge, vertex: Vertex) -> Vertex:
    """Return the endpoint of ``edge`` that is not ``vertex``."""
    return edge.v2 if edge.v1 == vertex else edge.v1


def get_num_adjacent_faces(mesh: "WingedEdgeMesh", edge: Edge) -> int:
    """Count the faces incident to ``edge``.

    1 means a boundary edge and 2 an interior edge of a manifold mesh; any
    other value points at a defect. Edges not in the store have 0 faces.
    """
    return len(mesh.edge_faces(edge))


def get_adjacent_face(mesh: "WingedEdgeMesh", face: Face, edge: Edge) -> Lookup[Face]:
    """Find the face on the other side of ``edge`` from ``face``.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Store to query.
    face : Face
        Face on the known side of ``edge``.
    edge : Edge
        Edge to look across.

    Returns
    -------
    Lookup[Face]
        The first incident face of ``edge`` other than ``face``. Fails with
        ``BOUNDARY_REACHED`` if ``edge`` has no other face, and with
        ``INDEX_OUT_OF_RANGE`` if ``edge`` is not in the store.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import two_triangles
    >>> mesh = two_triangles.load()
    >>> first, second = mesh.faces
    >>> shared = next(e for e in first.edges if e in second.edges)
    >>> get_adjacent_face(mesh, first, shared).value == second
    True
    >>> outer = next(e for e in first.edges if e not in second.edges)
    >>> get_adjacent_face(mesh, first, outer).failure
    <LookupFailure.BOUNDARY_REACHED: 'boundary_reached'>
    """
    if mesh.edge_index(edge) is None:
        return Lookup.missing(LookupFailure.INDEX_OUT_OF_RANGE)

    for candidate in mesh.edge_faces(edge):
        if candidate != face:
            return Lookup.found(candidate)

    return Lookup.missing(LookupFailure.BOUNDARY_REACHED)


def get_adjacent_vertex(mesh: "WingedEdgeMesh", face: Face, edge: Edge) -> Lookup[Vertex]:
    """Find the apex of ``face``: its corner that is not on ``edge``.

    For a well-formed triangle that contains ``edge`` this always succeeds. A
    failure (``INDEX_OUT_OF_RANGE``) means ``edge`` is not one of the face's
    edges or the face does not have exactly one corner off ``edge``, which is
    a topology defect.
    """
    if edge not in face.edges:
        return Lookup.missing(LookupFailure.INDEX_OUT_OF_RANGE)

    apexes = [v for v in face.vertices if v not in edge]
    if len(apexes) != 1:
        return Lookup.missing(LookupFailure.INDEX_OUT_OF_RANGE)

    return Lookup.found(apexes[0])


def get_adjacent_face_vertex(
    mesh: "WingedEdgeMesh", face: Face, edge: Edge
) -> Lookup[Vertex]:
    """Find the apex of the face across ``edge`` from ``face``.

    Composition of ``get_adjacent_face`` and ``get_adjacent_vertex``; the
    first failure is passed through.
    """
    across = get_adjacent_face(mesh, face, edge)
    if not across.ok:
        return Lookup.missing(across.failure)
    return get_adjacent_vertex(mesh, across.value, edge)


def get_other_boundary_vertex(
    mesh: "WingedEdgeMesh", vertex: Vertex, forbidden_edge: Edge
) -> Lookup[Vertex]:
    """Walk along the boundary from ``vertex``, away from ``forbidden_edge``.

    Scans the star of ``vertex`` in insertion order for a boundary edge (one
    incident face) other than ``forbidden_edge`` and returns that edge's far
    endpoint.

    Returns
    -------
    Lookup[Vertex]
        The neighbouring boundary vertex. Fails with ``BOUNDARY_REACHED`` when
        ``vertex`` has no other boundary edge, and with ``INDEX_OUT_OF_RANGE``
        when ``vertex`` is not in the store.
    """
    if mesh.vertex_index(vertex) is None:
        return Lookup.missing(LookupFailure.INDEX_OUT_OF_RANGE)

    for edge in mesh.vertex_edges(vertex):
        if edge != forbidden_edge and get_num_adjacent_faces(mesh, edge) == 1:
            return Lookup.found(get_other_vertex(edge, vertex))

    return Lookup.missing(LookupFailure.BOUNDARY_REACHED)
