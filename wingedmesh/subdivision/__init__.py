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

"""Subdivision of winged-edge triangle meshes.

This module provides four refinement strategies, each taking one store and
returning a new one:
- Butterfly: 1-to-4 split, new vertices from the butterfly stencil
- Linear: 1-to-4 split, new vertices at exact edge midpoints
- Boundary-classified: only faces touching the boundary are refined
- Sparse: fully interior faces are dropped, the rest split 1-to-4

All strategies work by:
1. Walking the source faces in insertion order
2. Building one stencil per new edge vertex from the local adjacency
3. Evaluating all stencils in a single batched tensor operation
4. Inserting the child triangles into a fresh store

Example:
    >>> from wingedmesh.subdivision import subdivide_linear
    >>> from wingedmesh.primitives.planar import two_triangles
    >>> mesh = two_triangles.load()
    >>> subdivided = subdivide_linear(mesh)
    >>> assert subdivided.n_faces == mesh.n_faces * 4
"""

from wingedmesh.subdivision._dispatch import subdivide
from wingedmesh.subdivision._stencils import (
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
from wingedmesh.subdivision._templates import (
    perform_triangulation,
    split_one_edge,
    split_two_edges,
)
from wingedmesh.subdivision.boundary import subdivide_boundary_triangular
from wingedmesh.subdivision.sparse import subdivide_silly_pascal, subdivide_sparse
from wingedmesh.subdivision.uniform import subdivide_butterfly, subdivide_linear
