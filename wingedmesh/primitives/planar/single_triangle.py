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

"""Single equilateral triangle in the z = 0 plane.

Open surface: all three edges are boundary edges.
"""

import torch

from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load(side_length: float = 1.0, subdivisions: int = 0) -> WingedEdgeMesh:
    """Create an equilateral triangle.

    Parameters
    ----------
    side_length : float
        Length of each side.
    subdivisions : int
        Number of linear subdivision levels. Each level quadruples the number
        of triangles: 0 → 1, 1 → 4, 2 → 16, etc.

    Returns
    -------
    WingedEdgeMesh
        Store with 3 vertices, 3 edges and 1 face when ``subdivisions=0``.
    """
    if side_length <= 0:
        raise ValueError(f"side_length must be positive, got {side_length=}")
    if subdivisions < 0:
        raise ValueError(f"subdivisions must be non-negative, got {subdivisions=}")

    height = side_length * (3**0.5) / 2
    points = torch.tensor(
        [[0.0, 0.0, 0.0], [side_length, 0.0, 0.0], [side_length / 2, height, 0.0]],
        dtype=torch.float64,
    )
    cells = torch.tensor([[0, 1, 2]], dtype=torch.int64)

    return WingedEdgeMesh.from_arrays(points, cells).subdivide(
        levels=subdivisions, scheme="linear"
    )
