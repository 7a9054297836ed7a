# -*- coding: utf-8 -*-
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

"""polyrule describes 3D structures with composable rules and writes
them out as Wavefront OBJ files.

Build rules from primitives and transforms::

    cube().tf(Translate.x(3))
    cube().tf(Replicate.n(3, Translate.y(1.1)))

then evaluate and stream them to a file::

    write_obj(rule, 'out.obj')
    write_meshes(rule.generate(), sink)
"""

from importlib.metadata import PackageNotFoundError, version

from polyrule.errors import MeshError, ObjFormatError, PolyruleError, RuleError
from polyrule.io.obj import read_obj, write_meshes, write_obj
from polyrule.mesh import Mesh
from polyrule.primitives import cube, icosphere, plane
from polyrule.rule import Replicate, Rule, ToRule, evaluate
from polyrule.xform import (IDENTITY, Rotate, Scale, Transform, Translate,
                            apply, compose)

try:
    __version__ = version("polyrule")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'IDENTITY', 'Mesh', 'MeshError', 'ObjFormatError', 'PolyruleError',
    'Replicate', 'Rotate', 'Rule', 'RuleError', 'Scale', 'ToRule',
    'Transform', 'Translate', 'apply', 'compose', 'cube', 'evaluate',
    'icosphere', 'plane', 'read_obj', 'write_meshes', 'write_obj',
]
