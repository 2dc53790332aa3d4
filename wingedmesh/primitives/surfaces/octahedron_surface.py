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

"""Regular octahedron surface in 3D space.

Dimensional: 2D manifold in 3D space (closed, no boundary). Every vertex has
valence 4.
"""

import torch

from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load(size: float = 1.0) -> WingedEdgeMesh:
    """Create a regular octahedron with vertices on the coordinate axes.

    Parameters
    ----------
    size : float
        Distance from the center to each vertex.

    Returns
    -------
    WingedEdgeMesh
        Store with 6 vertices, 12 edges and 8 faces.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size=}")

    points = size * torch.tensor(
        [
            [1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, -1.0, 0.0],
            [0.0, 0.0, 1.0],
            [0.0, 0.0, -1.0],
        ],
        dtype=torch.float64,
    )
    cells = torch.tensor(
        [
            [0, 2, 4],
            [2, 1, 4],
            [1, 3, 4],
            [3, 0, 4],
            [2, 0, 5],
            [1, 2, 5],
            [3, 1, 5],
            [0, 3, 5],
        ],
        dtype=torch.int64,
    )
    return WingedEdgeMesh.from_arrays(points, cells)
