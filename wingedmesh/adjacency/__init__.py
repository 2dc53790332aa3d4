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

"""Adjacency queries over a winged-edge store.

Answers the local questions subdivision stencils ask: which face lies across
an edge, which corner of a face is opposite an edge, how many faces share an
edge, and where the boundary continues from a vertex.
"""

from wingedmesh.adjacency._queries import (
    get_adjacent_face,
    get_adjacent_face_vertex,
    get_adjacent_vertex,
    get_num_adjacent_faces,
    get_other_boundary_vertex,
    get_other_vertex,
)
