## mesh payload for polyrule

## Copyright (c) 2026 polyrule contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Vertex/face mesh payload produced by primitives and rule evaluation."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from polyrule.errors import MeshError

Face = Tuple[int, ...]


def _check_faces(faces: Iterable[Sequence[int]], vertex_count: int) -> Tuple[Face, ...]:
    checked = []
    for n, face in enumerate(faces):
        face = tuple(face)
        if len(face) < 3:
            raise MeshError(f"face {n} has {len(face)} indices, need at least 3")
        for idx in face:
            if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
                raise MeshError(f"face {n} has non-integer index {idx!r}")
            if idx < 0 or idx >= vertex_count:
                raise MeshError(
                    f"face {n} references vertex {idx}, mesh has {vertex_count} vertices"
                )
        checked.append(tuple(int(i) for i in face))
    return tuple(checked)


class Mesh:
    """Ordered vertices plus faces that index into them.

    ``vertices`` is a read-only ``(N, 3)`` float array; row order defines
    the local vertex indices ``0..N-1``.  ``faces`` is a tuple of index
    tuples, each with at least three entries and every entry in
    ``[0, N)``.  Both invariants are checked here, so a ``Mesh`` that
    exists is valid.  ``name`` is only used to label groups on export.
    """

    __slots__ = ('vertices', 'faces', 'name')

    def __init__(self, vertices, faces: Iterable[Sequence[int]] = (), name: Optional[str] = None):
        try:
            verts = np.array(vertices, dtype=float)
        except (TypeError, ValueError) as e:
            raise MeshError(f"vertices must have shape (N, 3): {e}") from None
        if verts.size == 0:
            verts = verts.reshape(0, 3)
        if verts.ndim != 2 or verts.shape[1] != 3:
            raise MeshError(f"vertices must have shape (N, 3), got {verts.shape}")
        verts.setflags(write=False)
        self.vertices = verts
        self.faces = _check_faces(faces, len(verts))
        self.name = name

    @classmethod
    def _trusted(cls, vertices: np.ndarray, faces: Tuple[Face, ...], name: Optional[str]) -> 'Mesh':
        # faces already validated against an identical vertex count
        mesh = cls.__new__(cls)
        vertices.setflags(write=False)
        mesh.vertices = vertices
        mesh.faces = faces
        mesh.name = name
        return mesh

    def __repr__(self):
        label = f" {self.name!r}" if self.name else ""
        return f"<Mesh{label} vertices={len(self.vertices)} faces={len(self.faces)}>"

    def __len__(self):
        return len(self.vertices)

    def transformed(self, transform) -> 'Mesh':
        """Return a new mesh with every vertex mapped through ``transform``."""
        if transform.isidentity():
            return Mesh._trusted(self.vertices.copy(), self.faces, self.name)
        return Mesh._trusted(transform.apply_points(self.vertices), self.faces, self.name)

    def renamed(self, name: Optional[str]) -> 'Mesh':
        return Mesh._trusted(self.vertices, self.faces, name)

    def same_topology(self, other: 'Mesh') -> bool:
        return len(self.vertices) == len(other.vertices) and self.faces == other.faces

    def bbox(self) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
        """Return the ``(min, max)`` corners of the axis-aligned bounding box."""
        if len(self.vertices) == 0:
            raise MeshError("empty mesh has no bounding box")
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return tuple(float(c) for c in lo), tuple(float(c) for c in hi)


__all__ = ['Mesh', 'Face']
