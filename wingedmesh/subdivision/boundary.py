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

"""Boundary-classified subdivision.

Each face is refined according to how many of its edges lie on the mesh
boundary, so the mesh is refined along its boundary while the interior is left
as it is:

==========  ===================================================
boundary    result
==========  ===================================================
0           face copied through whole
1           boundary edge split, 2 children
2           both boundary edges split, interior edge kept, 3 children
3           all edges split, 4 children (refinement template)
==========  ===================================================

New vertices come from the butterfly stencil, which uses the 4-point boundary
stencil on boundary edges. Interior edges are never split, so neighbouring
faces stay conforming.
"""

import logging
from typing import TYPE_CHECKING

from wingedmesh.adjacency import get_num_adjacent_faces
from wingedmesh.subdivision._assembly import RefinementBuilder
from wingedmesh.subdivision._templates import (
    perform_triangulation,
    split_one_edge,
    split_two_edges,
)
from wingedmesh.topology._lookup import TopologyInvariantError

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh

logger = logging.getLogger(__name__)


def subdivide_boundary_triangular(mesh: "WingedEdgeMesh") -> "WingedEdgeMesh":
    """Subdivide only the faces that touch the boundary.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Input triangle mesh. It is not modified.

    Returns
    -------
    WingedEdgeMesh
        New store. Faces with no boundary edge appear unchanged; the others
        are split into 2, 3 or 4 children (see module docstring).

    Raises
    ------
    TopologyInvariantError
        If a face is not a proper triangle.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import two_triangles
    >>> refined = subdivide_boundary_triangular(two_triangles.load())
    >>> refined.n_faces
    6
    """
    name = "subdivide_boundary_triangular"
    builder = RefinementBuilder(mesh)
    n_copied = 0

    for face in mesh.faces:
        edges = face.edges
        apexes = builder.face_apexes(face, name)
        on_boundary = [get_num_adjacent_faces(mesh, edge) == 1 for edge in edges]
        boundary_count = sum(on_boundary)

        if boundary_count == 0:
            builder.add_triangles([apexes])
            n_copied += 1

        elif boundary_count == 1:
            ### Split the boundary edge (p, q) through its apex
            k = on_boundary.index(True)
            apex, p, q = apexes[k], apexes[(k + 1) % 3], apexes[(k + 2) % 3]
            m = builder.new_vertex(face, edges[k], apex)
            builder.add_triangles(split_one_edge(apex, p, q, m))

        elif boundary_count == 2:
            ### s is the corner shared by both boundary edges; (p, q) is interior
            k = on_boundary.index(False)
            s, p, q = apexes[k], apexes[(k + 1) % 3], apexes[(k + 2) % 3]
            # The edge opposite p joins s and q; the edge opposite q joins s and p
            m_sq = builder.new_vertex(face, edges[(k + 1) % 3], p)
            m_sp = builder.new_vertex(face, edges[(k + 2) % 3], q)
            builder.add_triangles(split_two_edges(s, p, q, m_sp, m_sq))

        elif boundary_count == 3:
            v1, v2, v3 = apexes
            v4 = builder.new_vertex(face, edges[0], v1)
            v5 = builder.new_vertex(face, edges[1], v2)
            v6 = builder.new_vertex(face, edges[2], v3)
            builder.add_triangles(perform_triangulation(v1, v2, v3, v4, v5, v6))

        else:
            raise TopologyInvariantError(
                f"{name}: face {face} reports {boundary_count} boundary edges"
            )

    logger.debug("%s: copied %d interior faces through", name, n_copied)
    return builder.build(name)
