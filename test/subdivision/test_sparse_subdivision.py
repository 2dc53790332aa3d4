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

"""Tests for sparse subdivision."""

import logging

from wingedmesh.primitives.planar import unit_square
from wingedmesh.primitives.surfaces import tetrahedron_surface
from wingedmesh.subdivision import (
    subdivide_butterfly,
    subdivide_silly_pascal,
    subdivide_sparse,
)


class TestSparseSubdivision:
    def test_closed_surface_vanishes(self):
        """Every face of a closed surface is interior and is dropped."""
        refined = subdivide_sparse(tetrahedron_surface.load())
        assert (refined.n_vertices, refined.n_edges, refined.n_faces) == (0, 0, 0)

    def test_all_faces_touch_boundary(self, quad):
        """With no interior face this is a butterfly pass."""
        sparse = subdivide_sparse(quad)
        butterfly = subdivide_butterfly(quad)
        assert sparse.faces == butterfly.faces
        assert sparse.vertices == butterfly.vertices

    def test_grid_drops_interior(self):
        mesh = unit_square.load(n=3)
        refined = subdivide_sparse(mesh)
        # 18 faces, 8 of them with only interior edges
        assert refined.n_faces == 4 * 10

    def test_kept_faces_split_four_ways(self, fan):
        mesh = fan(6, closed=True)
        assert subdivide_sparse(mesh).n_faces == 24

    def test_repeated_passes(self, quad):
        once = subdivide_sparse(quad)
        twice = subdivide_sparse(once)
        assert 0 < twice.n_faces < 4 * once.n_faces

    def test_input_unmodified(self, quad):
        before = quad.faces
        subdivide_sparse(quad)
        assert quad.faces == before

    def test_logs_dropped_faces(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="wingedmesh.subdivision"):
            subdivide_sparse(unit_square.load(n=3))
        assert "dropped 8 interior faces" in caplog.text

    def test_alias(self):
        assert subdivide_silly_pascal is subdivide_sparse

    def test_method_delegates(self, quad):
        assert quad.sparse_subdivide().faces == subdivide_sparse(quad).faces
