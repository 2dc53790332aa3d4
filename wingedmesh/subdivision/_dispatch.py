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

"""Multi-level subdivision driver."""

from typing import TYPE_CHECKING, Callable

from wingedmesh.subdivision.boundary import subdivide_boundary_triangular
from wingedmesh.subdivision.sparse import subdivide_sparse
from wingedmesh.subdivision.uniform import subdivide_butterfly, subdivide_linear

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import SubdivisionScheme, WingedEdgeMesh

_SCHEMES: dict[str, Callable[["WingedEdgeMesh"], "WingedEdgeMesh"]] = {
    "butterfly": subdivide_butterfly,
    "linear": subdivide_linear,
    "boundary": subdivide_boundary_triangular,
    "sparse": subdivide_sparse,
}


def subdivide(
    mesh: "WingedEdgeMesh",
    levels: int = 1,
    scheme: "SubdivisionScheme" = "butterfly",
) -> "WingedEdgeMesh":
    """Apply a subdivision scheme ``levels`` times.

    Parameters
    ----------
    mesh : WingedEdgeMesh
        Input triangle mesh. It is not modified.
    levels : int, optional
        Number of passes. 0 returns ``mesh`` itself.
    scheme : {"butterfly", "linear", "boundary", "sparse"}, optional
        - "butterfly": uniform 1-to-4 split with butterfly stencils.
        - "linear": uniform 1-to-4 split at edge midpoints.
        - "boundary": boundary-classified split; interior faces kept whole.
        - "sparse": interior faces dropped, the rest split 1-to-4.

    Returns
    -------
    WingedEdgeMesh
        The refined store.

    Raises
    ------
    ValueError
        If ``levels`` is negative or ``scheme`` is unknown.

    Examples
    --------
    >>> from wingedmesh.primitives.surfaces import icosahedron_surface
    >>> mesh = icosahedron_surface.load()
    >>> subdivide(mesh, levels=2, scheme="linear").n_faces
    320
    """
    if levels < 0:
        raise ValueError(f"levels must be >= 0, got {levels=}")
    if scheme not in _SCHEMES:
        raise ValueError(
            f"Invalid {scheme=}. Must be one of: {', '.join(map(repr, _SCHEMES))}"
        )

    step = _SCHEMES[scheme]
    for _ in range(levels):
        mesh = step(mesh)
    return mesh
