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

"""Boundary detection for winged-edge stores.

An edge is on the boundary if exactly one face is incident to it. A vertex is
on the boundary if at least one of its edges is.
"""

from typing import TYPE_CHECKING

import torch

from wingedmesh.adjacency import get_num_adjacent_faces
from wingedmesh.topology._entities import Edge, Face

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import WingedEdgeMesh


def get_boundary_edges(mesh: "WingedEdgeMesh") -> tuple[Edge, ...]:
    """Return the boundary edges of ``mesh`` in edge-id order.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import single_triangle
    >>> len(get_boundary_edges(single_triangle.load()))
    3
    """
    return tuple(e for e in mesh.edges if get_num_adjacent_faces(mesh, e) == 1)


def get_boundary_vertices(mesh: "WingedEdgeMesh") -> torch.Tensor:
    """Identify vertices that lie on the mesh boundary.

    Returns
    -------
    torch.Tensor
        Boolean tensor of shape (n_vertices,) in vertex-id order, True where
        the vertex touches a boundary edge. All False for closed meshes.
    """
    is_boundary_vertex = torch.zeros(mesh.n_vertices, dtype=torch.bool)
    for edge in get_boundary_edges(mesh):
        is_boundary_vertex[mesh.vertex_index(edge.v1)] = True
        is_boundary_vertex[mesh.vertex_index(edge.v2)] = True
    return is_boundary_vertex


def count_boundary_edges(mesh: "WingedEdgeMesh", face: Face) -> int:
    """Count how many of ``face``'s edges are boundary edges (0 to 3)."""
    return sum(get_num_adjacent_faces(mesh, e) == 1 for e in face.edges)


def is_watertight(mesh: "WingedEdgeMesh") -> bool:
    """Check that every edge is shared by exactly two faces.

    An empty store is considered watertight.

    Examples
    --------
    >>> from wingedmesh.primitives.surfaces import tetrahedron_surface
    >>> is_watertight(tetrahedron_surface.load())
    True
    """
    return all(get_num_adjacent_faces(mesh, e) == 2 for e in mesh.edges)
