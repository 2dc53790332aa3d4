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

"""Pytest configuration and shared fixtures for wingedmesh tests.

All fixtures defined here are automatically available to all test files
without explicit imports.
"""

import pytest
import torch

from wingedmesh.primitives.planar import single_triangle, two_triangles
from wingedmesh.topology.winged_edge import WingedEdgeMesh

### Pytest Hooks ###


def pytest_configure(config):
    """Register custom pytest markers used in wingedmesh tests."""
    config.addinivalue_line(
        "markers", "cuda: mark test as requiring CUDA (skipped if unavailable)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (for optional exclusion)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'cuda' if CUDA is not available."""
    if torch.cuda.is_available():
        return  # CUDA available, run all tests

    skip_cuda = pytest.mark.skip(reason="CUDA not available")
    for item in items:
        if "cuda" in item.keywords:
            item.add_marker(skip_cuda)


### Mesh Generators (Standalone Functions) ###


def make_fan(n_blades: int, closed: bool = False) -> WingedEdgeMesh:
    """Create a triangle fan around the origin in the z = 0 plane.

    Args:
        n_blades: Number of triangles around the centre vertex.
        closed: If True the last blade shares an edge with the first, so the
            centre vertex is interior; otherwise the fan is an open wedge.

    Returns:
        A store whose centre vertex has valence ``n_blades`` (closed) or
        ``n_blades + 1`` (open).
    """
    n_rim = n_blades if closed else n_blades + 1
    step = (2 * torch.pi if closed else torch.pi) / n_blades
    angles = torch.arange(n_rim, dtype=torch.float64) * step
    rim = torch.stack(
        [torch.cos(angles), torch.sin(angles), torch.zeros_like(angles)], dim=1
    )
    points = torch.cat([torch.zeros((1, 3), dtype=torch.float64), rim])
    cells = [[0, 1 + i, 1 + (i + 1) % n_rim] for i in range(n_blades)]
    return WingedEdgeMesh.from_arrays(points, cells)


def make_non_manifold() -> WingedEdgeMesh:
    """Three triangles sharing the edge (0, 0, 0)-(1, 0, 0)."""
    points = [
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.5, 1.0, 0.0],
        [0.5, -1.0, 0.0],
        [0.5, 0.0, 1.0],
    ]
    cells = [[0, 1, 2], [0, 1, 3], [0, 1, 4]]
    return WingedEdgeMesh.from_arrays(points, cells)


### Fixtures ###


@pytest.fixture(
    params=[
        "cpu",
        pytest.param("cuda", marks=pytest.mark.cuda),
    ]
)
def device(request):
    """Parametrize tests over all available devices (CPU, CUDA)."""
    return request.param


@pytest.fixture
def triangle():
    """Single right triangle with legs of length 16 along x and y."""
    mesh = WingedEdgeMesh()
    a = mesh.add_vertex(0.0, 0.0, 0.0)
    b = mesh.add_vertex(16.0, 0.0, 0.0)
    c = mesh.add_vertex(0.0, 16.0, 0.0)
    mesh.add_triangle(a, b, c)
    return mesh


@pytest.fixture
def quad():
    """Unit square split along its (0, 0)-(1, 1) diagonal."""
    return two_triangles.load()


@pytest.fixture
def equilateral():
    return single_triangle.load()


@pytest.fixture
def non_manifold():
    return make_non_manifold()


@pytest.fixture
def fan():
    """Factory fixture: ``fan(n_blades, closed=False)`` builds a triangle fan."""
    return make_fan
