## Wavefront OBJ export and import for polyrule

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

"""Wavefront OBJ export and import for polyrule meshes."""

from __future__ import annotations

import io
import logging
from typing import Iterable, List, Optional, Tuple

from polyrule.errors import ObjFormatError
from polyrule.mesh import Mesh
from polyrule.rule import evaluate

logger = logging.getLogger(__name__)


def write_meshes(meshes: Iterable[Mesh], path_or_file, *,
                 precision: Optional[int] = None, groups: bool = False) -> None:
    """Stream ``meshes`` to ``path_or_file`` as OBJ vertex and face records.

    ``meshes`` may be any iterable, including the generator returned by
    :func:`polyrule.rule.evaluate`; only one mesh is held at a time.
    ``path_or_file`` can be a filesystem path or an open stream.  Only
    ``io.TextIOBase`` instances receive ``str``; any other object with a
    ``write`` method is treated as a byte sink and receives ASCII
    ``bytes``.

    Each mesh writes its vertices and then its faces.  Face indices are
    1-based and global: a local index ``i`` is written as
    ``vertex_offset + i + 1``, where ``vertex_offset`` counts the
    vertices of every earlier mesh.

    ``precision`` fixes the number of decimals for coordinates (default
    is the shortest exact representation).  ``groups=True`` starts each
    mesh with an ``o`` record named after ``mesh.name`` or ``meshN``.

    Errors raised by the stream propagate unchanged; records already
    written stay written.
    """
    if precision is None:
        fmt = repr
    else:
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f"precision must be a non-negative integer: {precision!r}")
        fmt = f"{{:.{precision}f}}".format

    close_when_done = False
    if hasattr(path_or_file, 'write'):
        stream = path_or_file
    else:
        stream = open(path_or_file, 'w', encoding='ascii', newline='\n')
        close_when_done = True

    if isinstance(stream, io.TextIOBase):
        write = stream.write
    else:
        def write(text: str) -> None:
            stream.write(text.encode('ascii'))

    vertex_offset = 0
    count = 0
    try:
        for mesh in meshes:
            write(_render_mesh(mesh, vertex_offset, fmt,
                               _group_name(mesh, count) if groups else None))
            vertex_offset += len(mesh.vertices)
            count += 1
    finally:
        if close_when_done:
            stream.close()

    logger.debug("wrote %d meshes, %d vertices", count, vertex_offset)


def _group_name(mesh: Mesh, index: int) -> str:
    name = mesh.name or f"mesh{index}"
    # OBJ names end at whitespace
    return "_".join(name.split())


def _render_mesh(mesh: Mesh, vertex_offset: int, fmt, group: Optional[str]) -> str:
    lines = []
    if group is not None:
        lines.append(f"o {group}")
    for x, y, z in mesh.vertices.tolist():
        lines.append(f"v {fmt(x)} {fmt(y)} {fmt(z)}")
    base = vertex_offset + 1
    for face in mesh.faces:
        lines.append("f " + " ".join(str(base + i) for i in face))
    lines.append("")
    return "\n".join(lines)


def write_obj(rule, path_or_file, *, transform=None,
              precision: Optional[int] = None, groups: bool = False) -> None:
    """Evaluate ``rule`` and stream the resulting meshes as OBJ.

    >>> from polyrule import cube, Replicate, Translate
    >>> write_obj(cube().tf(Replicate.n(3, Translate.y(1.1))), 'column.obj')
    """
    write_meshes(evaluate(rule, transform), path_or_file,
                 precision=precision, groups=groups)


# ---------------------------------------------------------------------------
# OBJ Import
# ---------------------------------------------------------------------------


class _Group:
    def __init__(self, name: Optional[str], first_vertex: int):
        self.name = name
        self.first_vertex = first_vertex
        self.faces: List[Tuple[int, ...]] = []


def _parse_index(token: str, vertex_count: int, line_number: int) -> int:
    # "7", "7/2", "7//3" and "7/2/3" all name vertex 7
    head = token.split('/', 1)[0]
    try:
        n = int(head)
    except ValueError:
        raise ObjFormatError(f"bad vertex index {token!r}", line_number) from None
    if n > 0:
        idx = n - 1
    elif n < 0:
        idx = vertex_count + n
    else:
        raise ObjFormatError("vertex index 0 is not valid in OBJ", line_number)
    if idx < 0 or idx >= vertex_count:
        raise ObjFormatError(f"vertex index {n} is out of range", line_number)
    return idx


def read_obj(path_or_file) -> List[Mesh]:
    """Read the vertex/face subset of an OBJ file.

    Every ``o`` or ``g`` record starts a new mesh holding the vertices
    declared after it; faces are rebased onto those local vertices.  A
    file without grouping records yields a single mesh.  Records other
    than ``v``, ``f``, ``o`` and ``g`` are ignored.

    Examples
    --------
    >>> from polyrule.io.obj import read_obj, write_meshes
    >>> write_meshes(meshes, 'scene.obj', groups=True)
    >>> same = read_obj('scene.obj')
    """
    if hasattr(path_or_file, 'read'):
        data = path_or_file.read()
        if isinstance(data, bytes):
            data = data.decode('utf-8', errors='replace')
    else:
        with open(path_or_file, 'r', encoding='utf-8', errors='replace') as f:
            data = f.read()

    vertices: List[Tuple[float, float, float]] = []
    groups = [_Group(None, 0)]

    for line_number, raw in enumerate(data.splitlines(), start=1):
        fields = raw.split('#', 1)[0].split()
        if not fields:
            continue
        tag = fields[0]
        if tag == 'v':
            if len(fields) < 4:
                raise ObjFormatError("vertex record needs three coordinates", line_number)
            try:
                vertices.append((float(fields[1]), float(fields[2]), float(fields[3])))
            except ValueError:
                raise ObjFormatError(f"bad vertex record {raw.strip()!r}", line_number) from None
        elif tag == 'f':
            if len(fields) < 4:
                raise ObjFormatError("face record needs at least three indices", line_number)
            group = groups[-1]
            face = []
            for token in fields[1:]:
                idx = _parse_index(token, len(vertices), line_number)
                if idx < group.first_vertex:
                    raise ObjFormatError(
                        f"face references vertex {idx + 1} declared before its group",
                        line_number)
                face.append(idx - group.first_vertex)
            group.faces.append(tuple(face))
        elif tag in ('o', 'g'):
            name = " ".join(fields[1:]) or None
            groups.append(_Group(name, len(vertices)))

    meshes = []
    bounds = [g.first_vertex for g in groups[1:]] + [len(vertices)]
    for group, end in zip(groups, bounds):
        if group.first_vertex == end and not group.faces:
            continue
        meshes.append(Mesh(vertices[group.first_vertex:end], group.faces, name=group.name))
    return meshes


__all__ = ['write_meshes', 'write_obj', 'read_obj']
