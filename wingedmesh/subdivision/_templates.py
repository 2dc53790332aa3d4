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

"""Face refinement templates.

Each template maps the corners of one source triangle and the new vertices on
its edges to the list of child triangles. Templates work on opaque vertex
references, so the same code serves original vertices and vertices whose
positions are still to be evaluated.

Naming follows the 1-to-4 split: ``v1, v2, v3`` are the source corners and
``v4, v5, v6`` are the new vertices on the edges opposite ``v1, v2, v3``::

              v1
             /  \\
           v6 -- v5
           / \\  / \\
         v2 -- v4 -- v3
"""

from typing import Hashable, TypeVar

R = TypeVar("R", bound=Hashable)

Triangle = tuple[R, R, R]


def perform_triangulation(v1: R, v2: R, v3: R, v4: R, v5: R, v6: R) -> list[Triangle]:
    """Split one triangle into three corner triangles and one centre triangle.

    Examples
    --------
    >>> perform_triangulation("a", "b", "c", "bc", "ac", "ab")
    [('a', 'ac', 'ab'), ('b', 'bc', 'ab'), ('c', 'bc', 'ac'), ('bc', 'ac', 'ab')]
    """
    return [
        (v1, v5, v6),
        (v2, v4, v6),
        (v3, v4, v5),
        (v4, v5, v6),
    ]


def split_one_edge(apex: R, p: R, q: R, m: R) -> list[Triangle]:
    """Split a triangle in two through the new vertex ``m`` on edge ``(p, q)``.

    ``apex`` is the corner opposite the split edge; both children share the
    edge ``(m, apex)``.
    """
    return [
        (m, apex, p),
        (m, apex, q),
    ]


def split_two_edges(s: R, p: R, q: R, m_sp: R, m_sq: R) -> list[Triangle]:
    """Split edges ``(s, p)`` and ``(s, q)`` while keeping ``(p, q)`` whole.

    ``m_sp`` and ``m_sq`` are the new vertices on ``(s, p)`` and ``(s, q)``.
    The result is the corner triangle at ``s`` plus the remaining
    quadrilateral ``(m_sp, p, q, m_sq)`` cut along its ``m_sp``-``q``
    diagonal, so the untouched edge ``(p, q)`` stays a single edge and a
    neighbour sharing it remains conforming.

    Examples
    --------
    >>> split_two_edges("s", "p", "q", "sp", "sq")
    [('s', 'sp', 'sq'), ('sp', 'p', 'q'), ('sp', 'q', 'sq')]
    """
    return [
        (s, m_sp, m_sq),
        (m_sp, p, q),
        (m_sp, q, m_sq),
    ]
