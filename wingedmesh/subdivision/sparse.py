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

"""Selective ("sparse") subdivision.

Faces whose three edges are all interior are dropped; every other face is
split into four with butterfly stencils. Applied repeatedly, only a band along
the boundary survives each pass, which produces the nested, Pascal's-triangle
like patterns this scheme is named for.
"""

import logging
from typing import TYPE_CHECKING

from wingedmesh.adjacency import get_num_adjacent_faces
from wingedmesh.subdivision._assembly import RefinementBuilder
from wingedmesh.subdivision._templates import perform_triangulation

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh

logger = logging.getLogger(__name__)


def subdivide_sparse(mesh: "WingedEdgeMesh") -> "WingedEdgeMesh":
    """Drop fully interior faces and split the rest 1-to-4.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Input triangle mesh. It is not modified.

    Returns
    -------
    WingedEdgeMesh
        New store with four children for each face that has at least one edge
        not shared by exactly two faces.

    Raises
    ------
    TopologyInvariantError
        If a kept face is not a proper triangle.

    Examples
    --------
    >>> from wingedmesh.primitives.surfaces import tetrahedron_surface
    >>> subdivide_sparse(tetrahedron_surface.load()).n_faces
    0
    """
    name = "subdivide_sparse"
    builder = RefinementBuilder(mesh)
    n_dropped = 0

    for face in mesh.faces:
        if all(get_num_adjacent_faces(mesh, edge) == 2 for edge in face.edges):
            n_dropped += 1
            continue

        v1, v2, v3 = builder.face_apexes(face, name)
        v4 = builder.new_vertex(face, face.e1, v1)
        v5 = builder.new_vertex(face, face.e2, v2)
        v6 = builder.new_vertex(face, face.e3, v3)
        builder.add_triangles(perform_triangulation(v1, v2, v3, v4, v5, v6))

    logger.debug("%s: dropped %d interior faces", name, n_dropped)
    return builder.build(name)


subdivide_silly_pascal = subdivide_sparse
