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

"""Unit square triangulated on a regular grid in the z = 0 plane.

Open surface. Interior grid vertices have valence 6, so interior edges away
from the boundary get the regular butterfly stencil.
"""

import torch

from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load(n: int = 4) -> WingedEdgeMesh:
    """Create a triangulated unit square with ``n`` cells per side.

    Parameters
    ----------
    n : int
        Number of grid cells along each side. Each cell is split into two
        triangles along the same diagonal direction.

    Returns
    -------
    WingedEdgeMesh
        Store with (n + 1)^2 vertices and 2 n^2 faces.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n=}")

    # Create grid of points
    x = torch.linspace(0.0, 1.0, n + 1, dtype=torch.float64)
    y = torch.linspace(0.0, 1.0, n + 1, dtype=torch.float64)
    xx, yy = torch.meshgrid(x, y, indexing="ij")
    points = torch.stack(
        [xx.flatten(), yy.flatten(), torch.zeros_like(xx.flatten())], dim=1
    )

    # Create triangular cells
    cells = []
    for i in range(n):
        for j in range(n):
            idx = i * (n + 1) + j
            # Two triangles per quad
            cells.append([idx, idx + 1, idx + n + 1])
            cells.append([idx + 1, idx + n + 2, idx + n + 1])

    return WingedEdgeMesh.from_arrays(points, torch.tensor(cells, dtype=torch.int64))
