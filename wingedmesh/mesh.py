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

from typing import TYPE_CHECKING, Any, Self

import torch
from tensordict import tensorclass

from wingedmesh.utilities.mesh_repr import format_mesh_repr

if TYPE_CHECKING:
    from wingedmesh.topology.winged_edge import SubdivisionScheme, WingedEdgeMesh


@tensorclass(tensor_only=True)
class Mesh:
    r"""An indexed triangle mesh held as two tensors.

    ``Mesh`` is the hand-off format between the winged-edge store and the
    outside world (file loaders, renderers, tensor pipelines):

    - ``points``: vertex coordinates with shape :math:`(N_p, 3)`.
    - ``cells``: triangle connectivity with shape :math:`(N_c, 3)`; each row
      lists three indices into ``points``.

    Topological work (adjacency queries, subdivision) happens on a
    ``WingedEdgeMesh``; convert with :meth:`to_winged_edge` and
    :meth:`WingedEdgeMesh.to_mesh`.

    Parameters
    ----------
    points : torch.Tensor
        Vertex coordinates with shape :math:`(N_p, 3)`. Must be floating-point.
    cells : torch.Tensor
        Triangle connectivity with shape :math:`(N_c, 3)`. Must be integer dtype.

    Raises
    ------
    ValueError
        If ``points`` is not (n_points, 3) or ``cells`` is not (n_cells, 3).
    TypeError
        If ``cells`` has a floating-point dtype.

    Examples
    --------
    >>> import torch
    >>> points = torch.tensor([
    ...     [0.0, 0.0, 0.0],
    ...     [1.0, 0.0, 0.0],
    ...     [1.0, 1.0, 0.0],
    ...     [0.0, 1.0, 0.0],
    ... ])
    >>> cells = torch.tensor([[0, 1, 2], [0, 2, 3]])
    >>> mesh = Mesh(points=points, cells=cells)
    >>> mesh.n_points, mesh.n_cells
    (4, 2)
    >>> mesh.subdivide(levels=1, scheme="linear").n_cells
    8
    """

    points: torch.Tensor  # shape: (n_points, 3)
    cells: torch.Tensor  # shape: (n_cells, 3)

    def __post_init__(self) -> None:
        ### Validate shapes and dtypes
        # The tensorclass-generated __init__ assigns the fields first
        if not torch.compiler.is_compiling():
            if self.points.ndim != 2 or self.points.shape[-1] != 3:
                raise ValueError(
                    f"`points` must have shape (n_points, 3), but got {self.points.shape=}."
                )
            if self.cells.ndim != 2 or self.cells.shape[-1] != 3:
                raise ValueError(
                    f"`cells` must have shape (n_cells, 3), but got {self.cells.shape=}."
                )
            if torch.is_floating_point(self.cells):
                raise TypeError(
                    f"`cells` must have an int-like dtype, but got {self.cells.dtype=}."
                )
            if self.points.device != self.cells.device:
                raise ValueError(
                    f"`points` and `cells` must be on the same device, "
                    f"but got {self.points.device=} and {self.cells.device=}."
                )

    if TYPE_CHECKING:
        # Type stub for the `to` method dynamically added by @tensorclass.
        def to(self, *args: Any, **kwargs: Any) -> Self:
            """Move points and cells to the specified device or dtype."""
            ...

    @property
    def n_points(self) -> int:
        return self.points.shape[0]

    @property
    def n_spatial_dims(self) -> int:
        return self.points.shape[-1]

    @property
    def n_cells(self) -> int:
        return self.cells.shape[0]

    @property
    def edges(self) -> torch.Tensor:
        """Unique undirected edges, shape (n_edges, 2), sorted so ``edges[:, 0] < edges[:, 1]``."""
        if self.n_cells == 0:
            return torch.empty((0, 2), dtype=self.cells.dtype, device=self.cells.device)
        ### Three edges per triangle, canonicalized then deduplicated
        candidate_edges = self.cells[:, [[0, 1], [1, 2], [2, 0]]].reshape(-1, 2)
        candidate_edges = torch.sort(candidate_edges, dim=1)[0]
        return torch.unique(candidate_edges, dim=0)

    def to_winged_edge(self) -> "WingedEdgeMesh":
        """Build a ``WingedEdgeMesh`` with one face per cell, welding coincident points."""
        from wingedmesh.topology.winged_edge import WingedEdgeMesh

        return WingedEdgeMesh.from_mesh(self)

    def subdivide(
        self,
        levels: int = 1,
        scheme: "SubdivisionScheme" = "butterfly",
    ) -> "Mesh":
        """Subdivide the mesh through the winged-edge store.

        The store keeps edges unordered, so cell winding (and therefore the
        sign of any normals computed from the cells) is not preserved; orient
        the result again if consistent normals are needed.

        Parameters
        ----------
        levels : int, optional
            Number of subdivision passes.
        scheme : {"butterfly", "linear", "boundary", "sparse"}, optional
            Strategy to apply; see :func:`wingedmesh.subdivision.subdivide`.

        Returns
        -------
        Mesh
            Refined mesh with the dtype and device of ``points``.

        Raises
        ------
        ValueError
            If ``levels`` < 0 or ``scheme`` is unknown.
        TopologyInvariantError
            If the mesh breaks the topological assumptions of ``scheme``.
        """
        from wingedmesh.subdivision import subdivide

        refined = subdivide(self.to_winged_edge(), levels=levels, scheme=scheme)
        return refined.to_mesh(dtype=self.points.dtype, device=self.points.device)


### Override the tensorclass __repr__ with custom formatting
# Note: Must be done after class definition because @tensorclass overrides __repr__
# even when defined inside the class body
def _mesh_repr(self) -> str:
    return format_mesh_repr(self)


Mesh.__repr__ = _mesh_repr  # type: ignore
