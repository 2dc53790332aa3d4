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

"""Tests for subdivision stencils and their batched evaluation."""

import pytest
import torch

from wingedmesh.primitives.planar import unit_square
from wingedmesh.primitives.surfaces import octahedron_surface
from wingedmesh.subdivision import (
    BOUNDARY_WEIGHTS,
    BUTTERFLY_WEIGHTS,
    MIDPOINT_WEIGHTS,
    Stencil,
    boundary_stencil,
    butterfly_stencil,
    edge_stencil,
    evaluate_stencils,
    midpoint_stencil,
    subdivide_edge,
)
from wingedmesh.topology import Edge, Vertex


def _apex(mesh, face, edge):
    return mesh.get_adjacent_vertex(face, edge).unwrap("test")


def _position(mesh, stencil) -> tuple[float, ...]:
    return tuple(evaluate_stencils(mesh, [stencil])[0].tolist())


class TestWeights:
    @pytest.mark.parametrize(
        "weights", [MIDPOINT_WEIGHTS, BUTTERFLY_WEIGHTS, BOUNDARY_WEIGHTS]
    )
    def test_weights_sum_to_one(self, weights):
        """Dyadic weights sum to exactly 1 in floating point."""
        assert sum(weights) == 1.0

    def test_table_sizes(self):
        assert len(MIDPOINT_WEIGHTS) == 2
        assert len(BUTTERFLY_WEIGHTS) == 8
        assert len(BOUNDARY_WEIGHTS) == 4


class TestMidpoint:
    def test_exact_midpoint(self, triangle):
        edge = Edge(Vertex(0, 0, 0), Vertex(16, 0, 0))
        assert _position(triangle, midpoint_stencil(edge)) == (8.0, 0.0, 0.0)

    def test_edge_stencil_linear(self, quad):
        face = quad.faces[0]
        edge = face.e1
        stencil = edge_stencil(quad, face, edge, _apex(quad, face, edge), linear=True)
        assert stencil.kind == "midpoint"
        assert stencil.vertices == edge.vertices


class TestBoundaryStencil:
    def test_single_triangle(self, triangle):
        """Both outer points are the opposite corner: 9/16 (a + b) - 1/8 c."""
        edge = Edge(Vertex(0, 0, 0), Vertex(16, 0, 0))
        stencil = boundary_stencil(triangle, edge)
        assert stencil.kind == "boundary"
        assert stencil.vertices[2:] == (Vertex(0, 16, 0), Vertex(0, 16, 0))
        assert _position(triangle, stencil) == (9.0, -2.0, 0.0)

    def test_quad_boundary_edge(self, quad):
        edge = Edge(Vertex(0, 0, 0), Vertex(1, 0, 0))
        stencil = boundary_stencil(quad, edge)
        assert stencil.vertices[2:] == (Vertex(0, 1, 0), Vertex(1, 1, 0))
        assert _position(quad, stencil) == (0.5, -0.125, 0.0)

    def test_missing_neighbours_give_midpoint(self):
        """On a closed surface each endpoint stands in for its own neighbour."""
        mesh = octahedron_surface.load()
        for edge in mesh.edges:
            stencil = boundary_stencil(mesh, edge)
            assert stencil.vertices[2:] == edge.vertices
            assert Vertex(*_position(mesh, stencil)) == edge.midpoint


class TestButterflyStencil:
    def test_octahedron_edge(self):
        mesh = octahedron_surface.load()
        edge = Edge(Vertex(1, 0, 0), Vertex(0, 1, 0))
        face = mesh.edge_faces(edge)[0]
        stencil = butterfly_stencil(mesh, face, edge, _apex(mesh, face, edge))

        assert stencil.kind == "butterfly"
        assert not stencil.regular  # octahedron vertices have valence 4
        assert len(stencil.vertices) == 8
        assert set(stencil.vertices[2:4]) == {Vertex(0, 0, 1), Vertex(0, 0, -1)}
        assert sorted(stencil.vertices[4:]) == sorted(
            [Vertex(-1, 0, 0)] * 2 + [Vertex(0, -1, 0)] * 2
        )
        assert _position(mesh, stencil) == (0.625, 0.625, 0.0)

    def test_same_vertex_from_either_face(self):
        mesh = octahedron_surface.load()
        edge = Edge(Vertex(1, 0, 0), Vertex(0, 1, 0))
        positions = {
            subdivide_edge(mesh, face, edge, _apex(mesh, face, edge))
            for face in mesh.edge_faces(edge)
        }
        assert len(positions) == 1

    def test_falls_back_on_boundary_edge(self, triangle):
        face = triangle.faces[0]
        edge = Edge(Vertex(0, 0, 0), Vertex(16, 0, 0))
        stencil = butterfly_stencil(triangle, face, edge, Vertex(0, 16, 0))
        assert stencil.kind == "boundary"
        assert _position(triangle, stencil) == (9.0, -2.0, 0.0)

    def test_falls_back_on_incomplete_wings(self, quad):
        """The diagonal has two faces, but its wing edges are all boundary."""
        face = quad.faces[0]
        edge = Edge(Vertex(0, 0, 0), Vertex(1, 1, 0))
        stencil = butterfly_stencil(quad, face, edge, Vertex(1, 0, 0))
        assert stencil.kind == "boundary"
        assert _position(quad, stencil) == (7 / 16, 9 / 16, 0.0)

    def test_regular_grid_reproduces_midpoint(self):
        """On a regular planar grid the butterfly stencil is centrally symmetric."""
        mesh = unit_square.load(n=4)
        n_regular = 0
        for edge in mesh.edges:
            face = mesh.edge_faces(edge)[0]
            stencil = butterfly_stencil(mesh, face, edge, _apex(mesh, face, edge))
            if stencil.kind != "butterfly" or not stencil.regular:
                continue
            n_regular += 1
            position = torch.tensor(_position(mesh, stencil), dtype=torch.float64)
            expected = torch.tensor(edge.midpoint.coords, dtype=torch.float64)
            torch.testing.assert_close(position, expected, atol=1e-12, rtol=0.0)
        assert n_regular > 0


class TestEvaluate:
    def test_empty(self, quad):
        assert evaluate_stencils(quad, []).shape == (0, 3)

    def test_mixed_widths(self, triangle):
        """Padding with zero weights leaves every row unchanged."""
        a, b, c = Vertex(0, 0, 0), Vertex(16, 0, 0), Vertex(0, 16, 0)
        stencils = [
            midpoint_stencil(Edge(a, b)),
            boundary_stencil(triangle, Edge(a, b)),
            Stencil("midpoint", (b, c), MIDPOINT_WEIGHTS),
        ]
        positions = evaluate_stencils(triangle, stencils)
        assert positions.dtype == torch.float64
        assert positions.tolist() == [[8.0, 0.0, 0.0], [9.0, -2.0, 0.0], [8.0, 8.0, 0.0]]

    def test_linear_subdivide_edge(self, equilateral):
        face = equilateral.faces[0]
        for edge in face.edges:
            new = subdivide_edge(equilateral, face, edge, _apex(equilateral, face, edge), linear=True)
            assert new == edge.midpoint
