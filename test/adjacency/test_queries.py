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

"""Tests for adjacency queries over the winged-edge store."""

from wingedmesh.adjacency import (
    get_adjacent_face,
    get_adjacent_face_vertex,
    get_adjacent_vertex,
    get_num_adjacent_faces,
    get_other_boundary_vertex,
    get_other_vertex,
)
from wingedmesh.primitives.surfaces import tetrahedron_surface
from wingedmesh.topology import Edge, Face, LookupFailure, Vertex, WingedEdgeMesh

A = Vertex(0.0, 0.0, 0.0)
B = Vertex(1.0, 0.0, 0.0)
C = Vertex(1.0, 1.0, 0.0)
D = Vertex(0.0, 1.0, 0.0)


class TestAdjacentFace:
    def test_across_shared_edge(self, quad):
        first, second = quad.faces
        assert get_adjacent_face(quad, first, Edge(A, C)).value == second
        assert get_adjacent_face(quad, second, Edge(C, A)).value == first

    def test_boundary_edge(self, quad):
        first, _ = quad.faces
        result = get_adjacent_face(quad, first, Edge(A, B))
        assert result.failure is LookupFailure.BOUNDARY_REACHED

    def test_edge_not_in_store(self, quad):
        first, _ = quad.faces
        result = get_adjacent_face(quad, first, Edge(B, D))
        assert result.failure is LookupFailure.INDEX_OUT_OF_RANGE

    def test_method_delegates(self, quad):
        first, second = quad.faces
        assert quad.get_adjacent_face(first, Edge(A, C)).value == second


class TestAdjacentVertex:
    def test_apex(self, quad):
        first, second = quad.faces
        assert get_adjacent_vertex(quad, first, Edge(A, C)).value == B
        assert get_adjacent_vertex(quad, second, Edge(A, C)).value == D
        assert get_adjacent_vertex(quad, first, Edge(A, B)).value == C

    def test_every_edge_of_every_face_has_an_apex(self):
        mesh = tetrahedron_surface.load()
        for face in mesh.faces:
            for edge in face.edges:
                apex = get_adjacent_vertex(mesh, face, edge)
                assert apex.ok
                assert apex.value in face.vertices
                assert apex.value not in edge

    def test_edge_not_in_face(self, quad):
        first, _ = quad.faces
        result = get_adjacent_vertex(quad, first, Edge(C, D))
        assert result.failure is LookupFailure.INDEX_OUT_OF_RANGE

    def test_degenerate_face(self):
        ab = Edge(A, B)
        face = Face(ab, ab, ab)
        mesh = WingedEdgeMesh()
        mesh.add_face(ab, ab, ab)
        result = get_adjacent_vertex(mesh, face, ab)
        assert result.failure is LookupFailure.INDEX_OUT_OF_RANGE


class TestAdjacentFaceVertex:
    def test_opposite_apex(self, quad):
        first, second = quad.faces
        assert get_adjacent_face_vertex(quad, first, Edge(A, C)).value == D
        assert get_adjacent_face_vertex(quad, second, Edge(A, C)).value == B

    def test_boundary_passes_failure_through(self, quad):
        first, _ = quad.faces
        result = get_adjacent_face_vertex(quad, first, Edge(B, C))
        assert result.failure is LookupFailure.BOUNDARY_REACHED

    def test_closed_surface_never_fails(self):
        mesh = tetrahedron_surface.load()
        for face in mesh.faces:
            for edge in face.edges:
                apex = get_adjacent_face_vertex(mesh, face, edge).value
                assert apex not in face.vertices


class TestNumAdjacentFaces:
    def test_counts(self, quad):
        assert get_num_adjacent_faces(quad, Edge(A, C)) == 2
        assert get_num_adjacent_faces(quad, Edge(A, B)) == 1
        assert get_num_adjacent_faces(quad, Edge(B, D)) == 0
        assert quad.get_num_adjacent_faces(Edge(C, D)) == 1

    def test_non_manifold_edge(self, non_manifold):
        assert get_num_adjacent_faces(non_manifold, Edge(A, B)) == 3


class TestOtherBoundaryVertex:
    def test_walks_along_boundary(self, quad):
        # A's edges in insertion order: AB, AC (interior), DA
        assert get_other_boundary_vertex(quad, A, Edge(A, B)).value == D
        assert get_other_boundary_vertex(quad, A, Edge(D, A)).value == B
        assert get_other_boundary_vertex(quad, B, Edge(A, B)).value == C
        assert get_other_boundary_vertex(quad, C, Edge(B, C)).value == D

    def test_closed_surface(self):
        mesh = tetrahedron_surface.load()
        vertex = mesh.vertices[0]
        result = get_other_boundary_vertex(mesh, vertex, mesh.vertex_edges(vertex)[0])
        assert result.failure is LookupFailure.BOUNDARY_REACHED

    def test_vertex_not_in_store(self, quad):
        stray = Vertex(9.0, 9.0, 9.0)
        result = get_other_boundary_vertex(quad, stray, Edge(stray, A))
        assert result.failure is LookupFailure.INDEX_OUT_OF_RANGE

    def test_method_delegates(self, quad):
        assert quad.get_other_boundary_vertex(A, Edge(A, B)).value == D


def test_get_other_vertex():
    edge = Edge(A, B)
    assert get_other_vertex(edge, A) == B
    assert get_other_vertex(edge, B) == A
