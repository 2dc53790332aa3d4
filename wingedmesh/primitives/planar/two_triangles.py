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

"""Unit square split into two triangles along its (0, 0)-(1, 1) diagonal.

Open surface: the diagonal is the only interior edge; the four sides are
boundary edges.
"""

import torch

from wingedmesh.topology.winged_edge import WingedEdgeMesh


def load() -> WingedEdgeMesh:
    """Create the two-triangle unit square in the z = 0 plane.

    Returns
    -------
    WingedEdgeMesh
        Store with 4 vertices, 5 edges and 2 faces.
    """
    points = torch.tensor(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]],
        dtype=torch.float64,
    )
    cells = torch.tensor([[0, 1, 2], [0, 2, 3]], dtype=torch.int64)
    return WingedEdgeMesh.from_arrays(points, cells)
