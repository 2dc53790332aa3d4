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

"""Icosahedral sphere surface in 3D space.

A sphere created by subdividing an icosahedron and projecting vertices
onto the sphere surface.

Dimensional: 2D manifold in 3D space (closed, no boundary).
"""

import torch

from wingedmesh.primitives.surfaces import icosahedron_surface
from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load(radius: float = 1.0, subdivisions: int = 2) -> WingedEdgeMesh:
    """Create a sphere by subdividing an icosahedron and projecting to sphere.

    Parameters
    ----------
    radius : float
        Radius of the sphere.
    subdivisions : int
        Number of linear subdivision levels to apply. Each level quadruples
        the triangle count:
        - 0: 20 triangles (base icosahedron)
        - 1: 80 triangles
        - 2: 320 triangles

    Returns
    -------
    WingedEdgeMesh
        Closed store with 20 * 4**subdivisions faces.

    Examples
    --------
    >>> mesh = load(radius=1.0, subdivisions=1)
    >>> mesh.n_vertices, mesh.n_edges, mesh.n_faces
    (42, 120, 80)
    """
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius=}")
    if subdivisions < 0:
        raise ValueError(f"subdivisions must be non-negative, got {subdivisions=}")

    ### Start with base icosahedron
    mesh = icosahedron_surface.load(radius=radius)
    if subdivisions == 0:
        return mesh

    ### Apply subdivision levels
    mesh = mesh.subdivide(levels=subdivisions, scheme="linear")

    ### Project all points back onto the sphere surface
    # New vertices sit at edge midpoints, inside the sphere. Projection keeps
    # distinct points distinct, so rebuilding welds nothing.
    indexed = mesh.to_mesh()
    norms = torch.norm(indexed.points, dim=-1, keepdim=True)
    return WingedEdgeMesh.from_arrays(indexed.points / norms * radius, indexed.cells)
