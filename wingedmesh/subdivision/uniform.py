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

"""Uniform 1-to-4 subdivision: butterfly and linear.

Every face is split into four children with the refinement template. The two
schemes differ only in where the new edge vertices go:

- Linear: exact edge midpoints.
- Butterfly: the 8-point butterfly stencil on interior edges, falling back to
  the 4-point boundary stencil wherever the butterfly neighbourhood is
  incomplete.

For a closed triangle mesh with V vertices, E edges and F faces, one pass
produces V + E vertices, 2E + 3F edges and 4F faces.
"""

from typing import TYPE_CHECKING

from wingedmesh.adjacency import get_num_adjacent_faces
from wingedmesh.subdivision._assembly import RefinementBuilder
from wingedmesh.subdivision._templates import perform_triangulation
from wingedmesh.topology._lookup import TopologyInvariantError

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh


def _subdivide_uniform(mesh: "WingedEdgeMesh", linear: bool) -> "WingedEdgeMesh":
    name = "subdivide_linear" if linear else "subdivide_butterfly"
    builder = RefinementBuilder(mesh)

    for face in mesh.faces:
        ### Every edge must be a manifold edge (boundary or interior)
        for edge in face.edges:
            n_adjacent = get_num_adjacent_faces(mesh, edge)
            if n_adjacent not in (1, 2):
                raise TopologyInvariantError(
                    f"{name}: edge {edge} has {n_adjacent} incident faces, "
                    "expected 1 or 2"
                )

        ### v1, v2, v3 are opposite e1, e2, e3; v4, v5, v6 lie on e1, e2, e3
        v1, v2, v3 = builder.face_apexes(face, name)
        v4 = builder.new_vertex(face, face.e1, v1, linear=linear)
        v5 = builder.new_vertex(face, face.e2, v2, linear=linear)
        v6 = builder.new_vertex(face, face.e3, v3, linear=linear)

        builder.add_triangles(perform_triangulation(v1, v2, v3, v4, v5, v6))

    return builder.build(name)


def subdivide_butterfly(mesh: "WingedEdgeMesh") -> "WingedEdgeMesh":
    """Perform one level of butterfly subdivision.

    Butterfly is interpolating: original vertices keep their positions and
    each edge gains one new vertex from the butterfly stencil (or the boundary
    stencil near the boundary). Only the regular valence-6 stencil is
    implemented; irregular vertices use the same weights uncorrected.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Input triangle mesh. It is not modified.

    Returns
    -------
    WingedEdgeMesh
        New store with four faces per input face.

    Raises
    ------
    TopologyInvariantError
        If a face is not a proper triangle or an edge has a number of incident
        faces other than 1 or 2.

    Examples
    --------
    >>> from wingedmesh.primitives.surfaces import octahedron_surface
    >>> mesh = octahedron_surface.load()
    >>> refined = subdivide_butterfly(mesh)
    >>> refined.n_faces == 4 * mesh.n_faces
    True
    """
    return _subdivide_uniform(mesh, linear=False)


def subdivide_linear(mesh: "WingedEdgeMesh") -> "WingedEdgeMesh":
    """Perform one level of linear (midpoint) subdivision.

    Each edge gains a vertex at its exact midpoint and each face is split into
    four. No adjacency beyond the face itself is consulted for positions.

    Raises
    ------
    TopologyInvariantError
        If a face is not a proper triangle or an edge has a number of incident
        faces other than 1 or 2.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import single_triangle
    >>> refined = subdivide_linear(single_triangle.load())
    >>> refined.n_vertices, refined.n_faces
    (6, 4)
    """
    return _subdivide_uniform(mesh, linear=True)
