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

"""Winged-edge triangle meshes with adjacency queries and subdivision.

``WingedEdgeMesh`` stores vertices, edges and faces together with the
incidence between them. ``Mesh`` is the indexed tensor form used to move
geometry in and out of the store.
"""

from wingedmesh.mesh import Mesh
from wingedmesh.subdivision import (
    subdivide,
    subdivide_boundary_triangular,
    subdivide_butterfly,
    subdivide_linear,
    subdivide_silly_pascal,
    subdivide_sparse,
)
from wingedmesh.topology import (
    Edge,
    Face,
    Lookup,
    LookupFailure,
    TopologyInvariantError,
    Vertex,
    WingedEdgeMesh,
)

__version__ = "0.1.0"
