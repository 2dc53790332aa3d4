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

import warnings
from typing import TYPE_CHECKING, Literal, Sequence

import torch

from wingedmesh.topology._entities import Edge, Face, Vertex
from wingedmesh.topology._interning import InternTable
from wingedmesh.topology._lookup import Lookup, TopologyInvariantError
from wingedmesh.utilities.mesh_repr import format_winged_edge_repr

if TYPE_CHECKING:
    from wingedmesh.mesh import Mesh

SubdivisionScheme = Literal["butterfly", "linear", "boundary", "sparse"]


class WingedEdgeMesh:
    r"""Triangle mesh store that records vertices, edges and faces with adjacency.

    The store is an arena: every vertex, edge and face gets a stable integer id
    equal to its insertion index, and adjacency is kept as lists of ids:

    - vertex id -> ids of incident edges (the vertex *star*)
    - edge id -> ids of its two endpoints and of its incident faces
    - face id -> ids of its three edges

    Values are interned, so inserting a vertex, edge or face that is already
    present returns the canonical stored value and changes nothing. Vertices
    are keyed by coordinates, which means coincident points inserted through
    different faces are welded into one vertex without an explicit merge pass.

    Construction is append-only; there is no deletion. Subdivision strategies
    only read a store and always return a new one.

    Examples
    --------
    >>> mesh = WingedEdgeMesh()
    >>> a = mesh.add_vertex(0.0, 0.0, 0.0)
    >>> b = mesh.add_vertex(1.0, 0.0, 0.0)
    >>> c = mesh.add_vertex(0.0, 1.0, 0.0)
    >>> face = mesh.add_face(mesh.add_edge(a, b), mesh.add_edge(b, c), mesh.add_edge(c, a))
    >>> mesh.n_vertices, mesh.n_edges, mesh.n_faces
    (3, 3, 1)
    >>> mesh.add_vertex(0.0, 0.0, 0.0) == a
    True
    >>> mesh.n_vertices
    3
    """

    def __init__(self) -> None:
        self._vertex_table: InternTable[Vertex] = InternTable()
        self._edge_table: InternTable[Edge] = InternTable()
        self._face_table: InternTable[Face] = InternTable()

        self._vertex_star: list[list[int]] = []
        self._edge_vertices: list[tuple[int, int]] = []
        self._edge_faces: list[list[int]] = []
        self._face_edges: list[tuple[int, int, int]] = []

        self._points: torch.Tensor | None = None

    ### Construction ###

    def _intern_vertex(self, vertex: Vertex) -> int:
        index, created = self._vertex_table.intern(vertex)
        if created:
            self._vertex_star.append([])
            self._points = None
        return index

    def _intern_edge(self, edge: Edge) -> int:
        i1 = self._intern_vertex(edge.v1)
        i2 = self._intern_vertex(edge.v2)
        index, created = self._edge_table.intern(edge)
        if created:
            self._edge_vertices.append((i1, i2))
            self._edge_faces.append([])
            self._vertex_star[i1].append(index)
            if i2 != i1:
                self._vertex_star[i2].append(index)
        return index

    def add_vertex(self, x: float, y: float, z: float) -> Vertex:
        """Return the canonical vertex at ``(x, y, z)``, registering it if new.

        A newly registered vertex starts with an empty star.
        """
        return self._vertex_table[self._intern_vertex(Vertex(x, y, z))]

    def add_edge(self, v1: Vertex, v2: Vertex) -> Edge:
        """Return the canonical edge between ``v1`` and ``v2``, registering it if new.

        Both endpoints are registered if needed and the edge is linked into
        both of their stars.
        """
        return self._edge_table[self._intern_edge(Edge(v1, v2))]

    def add_face(self, e1: Edge, e2: Edge, e3: Edge) -> Face:
        """Return the canonical face with edges ``e1, e2, e3``, registering it if new.

        The edges (and their endpoints) are added first, so a face can be
        inserted from edges the store has never seen. The edges are assumed to
        close a triangle; this is not checked here.
        """
        edge_ids = (
            self._intern_edge(e1),
            self._intern_edge(e2),
            self._intern_edge(e3),
        )
        index, created = self._face_table.intern(Face(e1, e2, e3))
        if created:
            self._face_edges.append(edge_ids)
            for edge_id in dict.fromkeys(edge_ids):
                self._edge_faces[edge_id].append(index)
        return self._face_table[index]

    def add_triangle(self, v1: Vertex, v2: Vertex, v3: Vertex) -> Face:
        """Add the face with corners ``v1, v2, v3`` and return it."""
        return self.add_face(
            self.add_edge(v1, v2),
            self.add_edge(v2, v3),
            self.add_edge(v3, v1),
        )

    @classmethod
    def from_arrays(
        cls,
        points: torch.Tensor | Sequence[Sequence[float]],
        cells: torch.Tensor | Sequence[Sequence[int]],
    ) -> "WingedEdgeMesh":
        """Build a store from indexed triangle arrays.

        Faces are inserted in cell order, so face ids follow cell indices.
        Points that share coordinates are welded into one vertex, and points
        no cell refers to are not registered.

        Parameters
        ----------
        points : torch.Tensor or sequence
            Vertex coordinates, shape (n_points, 3).
        cells : torch.Tensor or sequence
            Triangle connectivity, shape (n_cells, 3), integer indices into
            ``points``.

        Returns
        -------
        WingedEdgeMesh
            A new store containing one face per cell.

        Raises
        ------
        ValueError
            If ``points`` is not (n_points, 3), ``cells`` is not (n_cells, 3),
            or a cell index is negative or not less than ``n_points``.
        TypeError
            If ``cells`` has a floating-point dtype.
        """
        points = torch.as_tensor(points)
        cells = torch.as_tensor(cells)
        if cells.numel() == 0:
            cells = cells.reshape(0, 3)

        if points.ndim != 2 or points.shape[-1] != 3:
            raise ValueError(
                f"`points` must have shape (n_points, 3), but got {points.shape=}."
            )
        if cells.ndim != 2 or cells.shape[-1] != 3:
            raise ValueError(
                f"`cells` must have shape (n_cells, 3), but got {cells.shape=}."
            )
        if torch.is_floating_point(cells):
            raise TypeError(
                f"`cells` must have an int-like dtype, but got {cells.dtype=}."
            )
        if cells.numel() > 0 and (cells.min() < 0 or cells.max() >= points.shape[0]):
            raise ValueError(
                f"`cells` must index into `points` (0 <= index < {points.shape[0]}), "
                f"but got {cells.min()=} and {cells.max()=}."
            )

        coords = points.detach().cpu().tolist()
        mesh = cls()
        for i, j, k in cells.detach().cpu().tolist():
            mesh.add_triangle(Vertex(*coords[i]), Vertex(*coords[j]), Vertex(*coords[k]))
        return mesh

    @classmethod
    def from_mesh(cls, mesh: "Mesh") -> "WingedEdgeMesh":
        """Build a store from an indexed ``Mesh``.

        Emits a warning if coincident points were welded together.
        """
        store = cls.from_arrays(mesh.points, mesh.cells)
        n_referenced = int(torch.unique(mesh.cells).numel()) if mesh.n_cells else 0
        if store.n_vertices < n_referenced:
            warnings.warn(
                f"Welded {n_referenced - store.n_vertices} coincident points while "
                f"building the winged-edge store ({n_referenced=}, {store.n_vertices=}).",
                stacklevel=2,
            )
        return store

    ### Counts and read access ###

    @property
    def n_vertices(self) -> int:
        return len(self._vertex_table)

    @property
    def n_edges(self) -> int:
        return len(self._edge_table)

    @property
    def n_faces(self) -> int:
        return len(self._face_table)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertex_table)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edge_table)

    @property
    def faces(self) -> tuple[Face, ...]:
        return tuple(self._face_table)

    def vertex_index(self, vertex: Vertex) -> int | None:
        return self._vertex_table.get(vertex)

    def edge_index(self, edge: Edge) -> int | None:
        return self._edge_table.get(edge)

    def face_index(self, face: Face) -> int | None:
        return self._face_table.get(face)

    def vertex_edges(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Edges incident to ``vertex`` in insertion order (empty if absent)."""
        index = self._vertex_table.get(vertex)
        if index is None:
            return ()
        return tuple(self._edge_table[e] for e in self._vertex_star[index])

    def edge_faces(self, edge: Edge) -> tuple[Face, ...]:
        """Faces incident to ``edge`` in insertion order (empty if absent)."""
        index = self._edge_table.get(edge)
        if index is None:
            return ()
        return tuple(self._face_table[f] for f in self._edge_faces[index])

    @property
    def points(self) -> torch.Tensor:
        """Vertex coordinates in id order, shape (n_vertices, 3), float64.

        The tensor is cached and rebuilt only after a new vertex is added.
        """
        if self._points is None:
            self._points = torch.tensor(
                [v.coords for v in self._vertex_table], dtype=torch.float64
            ).reshape(-1, 3)
        return self._points

    def edge_segments(self) -> torch.Tensor:
        """Endpoint coordinates of every edge, shape (n_edges, 2, 3).

        This is the rendering hand-off: drawing each row as a line segment
        gives the wireframe of the mesh.
        """
        edge_vertices = torch.tensor(self._edge_vertices, dtype=torch.long).reshape(
            -1, 2
        )
        return self.points[edge_vertices]

    def to_mesh(
        self,
        dtype: torch.dtype = torch.float64,
        device: torch.device | str = "cpu",
    ) -> "Mesh":
        """Convert to an indexed ``Mesh`` with one cell per face.

        Points follow vertex ids and cells follow face ids. Each cell lists
        the face's corners in the order they first appear along its edges;
        edges are unordered, so the winding of the source cells is not kept.

        Raises
        ------
        TopologyInvariantError
            If a face does not have exactly three distinct corners.
        """
        from wingedmesh.mesh import Mesh

        cells = []
        for face in self._face_table:
            corners = face.vertices
            if len(corners) != 3:
                raise TopologyInvariantError(
                    f"Face {face} has {len(corners)} distinct corners, expected 3"
                )
            cells.append([self._vertex_table.get(v) for v in corners])

        return Mesh(
            points=self.points.to(dtype=dtype, device=device),
            cells=torch.tensor(cells, dtype=torch.int64, device=device).reshape(-1, 3),
        )

    ### Adjacency queries ###

    def get_adjacent_face(self, face: Face, edge: Edge) -> Lookup[Face]:
        from wingedmesh.adjacency import get_adjacent_face

        return get_adjacent_face(self, face, edge)

    def get_adjacent_vertex(self, face: Face, edge: Edge) -> Lookup[Vertex]:
        from wingedmesh.adjacency import get_adjacent_vertex

        return get_adjacent_vertex(self, face, edge)

    def get_adjacent_face_vertex(self, face: Face, edge: Edge) -> Lookup[Vertex]:
        from wingedmesh.adjacency import get_adjacent_face_vertex

        return get_adjacent_face_vertex(self, face, edge)

    def get_num_adjacent_faces(self, edge: Edge) -> int:
        from wingedmesh.adjacency import get_num_adjacent_faces

        return get_num_adjacent_faces(self, edge)

    def get_other_boundary_vertex(
        self, vertex: Vertex, forbidden_edge: Edge
    ) -> Lookup[Vertex]:
        from wingedmesh.adjacency import get_other_boundary_vertex

        return get_other_boundary_vertex(self, vertex, forbidden_edge)

    def get_boundary_edges(self) -> tuple[Edge, ...]:
        from wingedmesh.boundaries import get_boundary_edges

        return get_boundary_edges(self)

    def is_watertight(self) -> bool:
        from wingedmesh.boundaries import is_watertight

        return is_watertight(self)

    ### Subdivision ###

    def butterfly_subdivide(self) -> "WingedEdgeMesh":
        from wingedmesh.subdivision import subdivide_butterfly

        return subdivide_butterfly(self)

    def linear_subdivide(self) -> "WingedEdgeMesh":
        from wingedmesh.subdivision import subdivide_linear

        return subdivide_linear(self)

    def boundary_triangular_subdivide(self) -> "WingedEdgeMesh":
        from wingedmesh.subdivision import subdivide_boundary_triangular

        return subdivide_boundary_triangular(self)

    def sparse_subdivide(self) -> "WingedEdgeMesh":
        from wingedmesh.subdivision import subdivide_sparse

        return subdivide_sparse(self)

    def subdivide(
        self, levels: int = 1, scheme: SubdivisionScheme = "butterfly"
    ) -> "WingedEdgeMesh":
        """Apply ``scheme`` ``levels`` times; see ``wingedmesh.subdivision.subdivide``."""
        from wingedmesh.subdivision import subdivide

        return subdivide(self, levels=levels, scheme=scheme)

    def __repr__(self) -> str:
        return format_winged_edge_repr(self)
