## built-in primitive meshes for polyrule

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

"""
==============================
Built-in primitives for rules
==============================

Each public function returns a leaf ``Rule`` ready to be transformed,
replicated or pushed into a larger rule.  The ``*_mesh`` variants return
the bare ``Mesh``.  All primitives are centred on the origin with unit
extent, so size and placement come from transforms.  Faces wind
counter-clockwise seen from outside.
"""

import math

from polyrule.geom import pi2
from polyrule.mesh import Mesh
from polyrule.rule import Rule


_CUBE_VERTICES = [
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
]

_CUBE_FACES = [
    (0, 3, 2, 1),   # bottom
    (4, 5, 6, 7),   # top
    (0, 1, 5, 4),   # front
    (2, 3, 7, 6),   # back
    (0, 4, 7, 3),   # left
    (1, 2, 6, 5),   # right
]


def cube_mesh(name=None):
    """unit cube, eight vertices and six quads"""
    return Mesh(_CUBE_VERTICES, _CUBE_FACES, name=name)

def cube(name=None):
    return Rule.leaf(cube_mesh(name))


def plane_mesh(name=None):
    """unit square in the XY plane facing +z, four vertices and one quad"""
    verts = [(-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.5, 0.5, 0.0), (-0.5, 0.5, 0.0)]
    return Mesh(verts, [(0, 1, 2, 3)], name=name)

def plane(name=None):
    return Rule.leaf(plane_mesh(name))


def sphere2cartesian(lat,lon,rad):
    """
    Utility function to convert spherical polar coordinates (degrees)
    to cartesian coordinates for a sphere centered at the origin.
    """
    if lat == 90:
        return (0.0,0.0,rad)
    elif lat == -90:
        return (0.0,0.0,-rad)
    latr = (((lat+90)%180)-90)*pi2/360.0
    lonr = (lon%360)*pi2/360.0

    smallrad = math.cos(latr)*rad
    z = math.sin(latr)*rad
    x = math.cos(lonr)*smallrad
    y = math.sin(lonr)*smallrad
    return (x,y,z)

## icosahedron-specific function, generate initial geometry
def makeIcoPoints(radius):
    points = [sphere2cartesian(90,0,radius)]
    for i in range(10):
        sgn = 1
        if i%2 == 0:
            sgn =-1
        lat = math.atan(0.5)*360.0*sgn/pi2
        points.append(sphere2cartesian(lat,i*36.0,radius))
    points.append(sphere2cartesian(-90,0,radius))
    return points

# face indices for icosahedron
icaIndices = [ (1,11,3),(3,11,5),(5,11,7),(7,11,9),(9,11,1),
               (2,1,3),(2,3,4),(4,3,5),(4,5,6),(6,5,7),(6,7,8),(8,7,9),(8,9,10),(10,9,1),(10,1,2),
               (0,2,4),(0,4,6),(0,6,8),(0,8,10),(0,10,2) ]


def _midpoint(i,j,verts,cache,rad):
    key = (i,j) if i < j else (j,i)
    if key in cache:
        return cache[key]
    a = verts[i]
    b = verts[j]
    m = (a[0]+b[0],a[1]+b[1],a[2]+b[2])
    s = rad/math.sqrt(m[0]*m[0]+m[1]*m[1]+m[2]*m[2])
    verts.append((m[0]*s,m[1]*s,m[2]*s))
    cache[key] = len(verts)-1
    return cache[key]

def icosphere_mesh(depth=1,name=None):
    """
    Geodesic sphere of diameter 1 built by subdividing an icosahedron
    ``depth`` times.  Each subdivision splits every triangle into four,
    giving ``10*4**depth + 2`` vertices.
    """
    if isinstance(depth,bool) or not isinstance(depth,int) or depth < 0:
        raise ValueError('icosphere depth must be a non-negative integer: {}'.format(depth))
    rad = 0.5
    verts = makeIcoPoints(rad)
    faces = icaIndices

    for _ in range(depth):
        cache = {}
        ff = []
        for f in faces:
            a = _midpoint(f[0],f[1],verts,cache,rad)
            b = _midpoint(f[1],f[2],verts,cache,rad)
            c = _midpoint(f[2],f[0],verts,cache,rad)
            ff += [(f[0],a,c),(a,f[1],b),(b,f[2],c),(a,b,c)]
        faces = ff

    return Mesh(verts,faces,name=name)

def icosphere(depth=1,name=None):
    return Rule.leaf(icosphere_mesh(depth,name))
