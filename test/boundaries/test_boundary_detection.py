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

"""Tests for boundary detection and watertightness checking."""

import torch

from wingedmesh.boundaries import (
    count_boundary_edges,
    get_boundary_edges,
    get_boundary_vertices,
    is_watertight,
)
from wingedmesh.primitives.planar import unit_square
from wingedmesh.primitives.surfaces import icosahedron_surface, tetrahedron_surface
from wingedmesh.topology import Edge, Vertex, WingedEdgeMesh


class TestBoundaryEdges:
    def test_single_triangle(self, triangle):
        assert get_boundary_edges(triangle) == triangle.edges

    def test_quad_excludes_diagonal(self, quad):
        boundary = get_boundary_edges(quad)
        assert len(boundary) == 4
        assert Edge(Vertex(0, 0, 0), Vertex(1, 1, 0)) not in boundary

    def test_closed_surface(self):
        assert get_boundary_edges(tetrahedron_surface.load()) == ()

    def test_grid_perimeter(self):
        """An n x n grid has 4n boundary edges."""
        mesh = unit_square.load(n=3)
        assert len(get_boundary_edges(mesh)) == 12
        assert len(mesh.get_boundary_edges()) == 12


class TestBoundaryVertices:
    def test_grid(self):
        mesh = unit_square.load(n=2)
        is_boundary = get_boundary_vertices(mesh)
        assert is_boundary.shape == (9,)
        assert is_boundary.dtype == torch.bool
        # Only the centre point is interior
        interior = mesh.vertices[int(torch.nonzero(~is_boundary).item())]
        assert interior == Vertex(0.5, 0.5, 0.0)

    def test_closed_surface_all_false(self):
        assert not get_boundary_vertices(icosahedron_surface.load()).any()


class TestCountBoundaryEdges:
    def test_counts(self, triangle, quad, non_manifold):
        assert count_boundary_edges(triangle, triangle.faces[0]) == 3
        assert [count_boundary_edges(quad, f) for f in quad.faces] == [2, 2]
        # Only the shared (non-manifold) edge is excluded
        assert [count_boundary_edges(non_manifold, f) for f in non_manifold.faces] == [
            2,
            2,
            2,
        ]

    def test_interior_face(self, fan):
        mesh = fan(6, closed=True)
        for face in mesh.faces:
            assert count_boundary_edges(mesh, face) == 1


class TestWatertight:
    def test_closed_surfaces(self):
        assert is_watertight(tetrahedron_surface.load())
        assert icosahedron_surface.load().is_watertight()

    def test_open_surfaces(self, triangle, quad):
        assert not is_watertight(triangle)
        assert not is_watertight(quad)

    def test_non_manifold_not_watertight(self, non_manifold):
        assert not is_watertight(non_manifold)

    def test_empty_mesh_watertight(self):
        """Empty mesh is considered watertight."""
        assert is_watertight(WingedEdgeMesh())
