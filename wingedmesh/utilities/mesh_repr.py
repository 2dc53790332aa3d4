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

"""Utility functions for string-formatting mesh representations."""


def format_winged_edge_repr(mesh) -> str:
    """Format a one-line ``WingedEdgeMesh`` representation.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        The store to format.

    Returns
    -------
    str
        Class name followed by vertex, edge, face and boundary-edge counts.

    Examples
    --------
    >>> from wingedmesh.primitives.planar import single_triangle
    >>> single_triangle.load()
    WingedEdgeMesh(n_vertices=3, n_edges=3, n_faces=1, n_boundary_edges=3)
    """
    from wingedmesh.boundaries import get_boundary_edges

    parts = [
        f"n_vertices={mesh.n_vertices}",
        f"n_edges={mesh.n_edges}",
        f"n_faces={mesh.n_faces}",
        f"n_boundary_edges={len(get_boundary_edges(mesh))}",
    ]
    return f"{mesh.__class__.__name__}({', '.join(parts)})"


def format_mesh_repr(mesh) -> str:
    """Format an indexed ``Mesh`` representation.

    Parameters
    ----------
    mesh : Mesh
        The Mesh instance to format.

    Returns
    -------
    str
        Class name with point and cell counts, and the tensor dtypes aligned
        on their colons below it.
    """
    ### Build the first line with class name and key properties
    class_name = mesh.__class__.__name__
    parts = [
        f"spatial_dim={mesh.n_spatial_dims}",
        f"n_points={mesh.n_points}",
        f"n_cells={mesh.n_cells}",
    ]

    # mesh.device is None by default and only set when user calls .to(device)
    device = mesh.device
    if device is not None:
        parts.append(f"device={device}")

    lines = [f"{class_name}({', '.join(parts)})"]

    ### Align the colons of the tensor fields
    fields = ["points", "cells"]
    max_field_len = max(len(field) for field in fields)
    for field_name in fields:
        tensor = getattr(mesh, field_name)
        padded_field = field_name.ljust(max_field_len)
        lines.append(f"    {padded_field}: {tuple(tensor.shape)} {tensor.dtype}")

    return "\n".join(lines)
