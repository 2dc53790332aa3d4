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

"""Winged-edge topology store and its value types.

This module provides:
1. ``Vertex``, ``Edge`` and ``Face``: immutable, value-compared mesh entities
2. ``WingedEdgeMesh``: the arena store recording entities and their adjacency
3. ``Lookup``, ``LookupFailure`` and ``TopologyInvariantError``: query results
   and the fatal error raised when a mesh breaks an algorithm's assumptions
"""

from wingedmesh.topology._entities import Edge, Face, Vertex
from wingedmesh.topology._interning import InternTable
from wingedmesh.topology._lookup import Lookup, LookupFailure, TopologyInvariantError
from wingedmesh.topology.winged_edge import SubdivisionScheme, WingedEdgeMesh
