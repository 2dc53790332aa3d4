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

"""Regular tetrahedron surface in 3D space.

Dimensional: 2D manifold in 3D space (closed, no boundary). Every vertex has
valence 3.
"""

import torch

from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load(side_length: float = 1.0) -> WingedEdgeMesh:
    """Create a regular tetrahedron surface.

    Parameters
    ----------
    side_length : float
        Length of each edge.

    Returns
    -------
    WingedEdgeMesh
        Store with 4 vertices, 6 edges and 4 faces.

    Examples
    --------
    >>> mesh = load()
    >>> mesh.n_vertices, mesh.n_edges, mesh.n_faces
    (4, 6, 4)
    """
    if side_length <= 0:
        raise ValueError(f"side_length must be positive, got {side_length=}")

    # Alternate corners of a cube have edge length 2*sqrt(2)
    scale = side_length / (2 * 2**0.5)
    points = scale * torch.tensor(
        [
            [1.0, 1.0, 1.0],
            [1.0, -1.0, -1.0],
            [-1.0, 1.0, -1.0],
            [-1.0, -1.0, 1.0],
        ],
        dtype=torch.float64,
    )
    cells = torch.tensor(
        [[0, 1, 2], [0, 3, 1], [0, 2, 3], [1, 3, 2]],
        dtype=torch.int64,
    )
    return WingedEdgeMesh.from_arrays(points, cells)
