## affine transformations over 3D homogeneous coordinates for polyrule

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

from math import cos, sin

import numpy as np

import polyrule.geom as geom

## A transform is an immutable 4x4 matrix stored as a tuple of four
## row tuples.  Points are column vectors, so a transform M maps a
## point p to Mp, and the product AB applies B first and A second.
## Nothing in this module mutates a Transform once it is built; every
## operation returns a new value.

## The rule language builds transforms through the Translate, Scale
## and Rotate namespaces at the bottom of this file.  The capitalised
## builder functions (Translation, Scaling, Rotation) are the
## underlying constructors and are handy when a delta or axis is
## already available as a vector.


def _checknum(x):
    if not geom.isgoodnum(x):
        raise ValueError('bad element in transform initialization: {}'.format(x))
    return float(x)


class Transform:
    """Immutable 4x4 transformation matrix for homogeneous 3D coordinates"""

    __slots__ = ('_m',)

    def __init__(self,a=None):
        if a is None:
            m = ((1.0,0.0,0.0,0.0),
                 (0.0,1.0,0.0,0.0),
                 (0.0,0.0,1.0,0.0),
                 (0.0,0.0,0.0,1.0))
        elif isinstance(a,Transform):
            m = a._m
        elif isinstance(a,(tuple,list)) and len(a) == 4 and \
             all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a):
            m = tuple(tuple(_checknum(x) for x in r) for r in a)
        elif isinstance(a,(tuple,list)) and len(a) == 16:
            m = tuple(tuple(_checknum(a[i*4+j]) for j in range(4))
                      for i in range(4))
        else:
            raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))
        object.__setattr__(self,'_m',m)

    def __setattr__(self,name,value):
        raise AttributeError('Transform is immutable')

    def __repr__(self):
        return "Transform({},{},{},{})".format(*[list(r) for r in self._m])

    def __eq__(self,other):
        if not isinstance(other,Transform):
            return NotImplemented
        return self._m == other._m

    def __hash__(self):
        return hash(self._m)

    @property
    def m(self):
        return self._m

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self._m[i][j]

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self._m[i]

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return (self._m[0][j],self._m[1][j],self._m[2][j],self._m[3][j])

    def array(self):
        """return the matrix as a fresh 4x4 numpy array"""
        return np.array(self._m,dtype=float)

    def isidentity(self):
        return self == IDENTITY

    # If x is a Transform, compute the product self*x, which applies x
    # first.  If x is a point (any sequence of three or four numbers),
    # return the transformed point as an (x, y, z) tuple.

    def mul(self,x):
        if isinstance(x,Transform):
            rows = tuple(tuple(geom.dot4(self._m[i],x.getcol(j))
                               for j in range(4))
                         for i in range(4))
            return Transform(rows)
        elif isinstance(x,np.ndarray):
            return self.mul(x.astype(float).tolist())
        elif isinstance(x,(tuple,list)):
            p = geom.point(list(x))
            return (geom.dot4(self._m[0],p),
                    geom.dot4(self._m[1],p),
                    geom.dot4(self._m[2],p))

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def power(self,n):
        """return this transform composed with itself ``n`` times; the
        zeroth power is the identity"""
        if isinstance(n,bool) or not isinstance(n,int) or n < 0:
            raise ValueError('bad exponent passed to power: {}'.format(n))
        result = IDENTITY
        for _ in range(n):
            result = self.mul(result)
        return result

    def apply_points(self,points):
        """transform an ``(N, 3)`` array of points, returning a new array"""
        pts = np.asarray(points,dtype=float).reshape(-1,3)
        m = self.array()
        return pts @ m[:3,:3].T + m[:3,3]


IDENTITY = Transform()


def compose(outer,inner):
    """return the transform that applies ``inner`` first and ``outer``
    second"""
    return outer.mul(inner)


def apply(transform,p):
    """apply ``transform`` to the point ``p``, returning an (x, y, z) tuple"""
    return transform.mul(p)


# return the generalized 4x4 arbitrary axis rotation matrix, angle in degrees
def Rotation(axis,angle,inverse=False):
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    u = [axis[0]/m,axis[1]/m,axis[2]/m]

    if inverse:
        angle *= -1.0
    rad = (angle%360.0)*geom.pi2/360.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Transform(R)

def Translation(delta,inverse=False):
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    if inverse:
        dx,dy,dz = -dx,-dy,-dz
    T = [[1,0,0,dx],
         [0,1,0,dy],
         [0,0,1,dz],
         [0,0,0,1]]
    return Transform(T)

def Scaling(x,y=None,z=None,inverse=False):
    if geom.isgoodnum(x):
        sx = x
        if y is None and z is None:
            sy = sz = x
        elif geom.isgoodnum(y) and geom.isgoodnum(z):
            sy = y
            sz = z
        else:
            raise ValueError('per-axis scaling needs both y and z: {},{}'.format(y,z))
    elif isinstance(x,(tuple,list)) and len(x) >= 3:
        sx = x[0]
        sy = x[1]
        sz = x[2]
    else:
        raise ValueError('bad scaling values passed to Scaling')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx,0,0,0],
         [0,sy,0,0],
         [0,0,sz,0],
         [0,0,0,1.0]]
    return Transform(S)


## rule language namespaces
## ------------------------

class Translate:
    """translations along one axis or by an arbitrary offset"""

    @staticmethod
    def x(d):
        return Translation((d,0,0))

    @staticmethod
    def y(d):
        return Translation((0,d,0))

    @staticmethod
    def z(d):
        return Translation((0,0,d))

    @staticmethod
    def by(x,y,z):
        return Translation((x,y,z))


class Scale:
    """uniform or per-axis scaling about the origin"""

    @staticmethod
    def by(s):
        return Scaling(s)

    @staticmethod
    def xyz(x,y,z):
        return Scaling(x,y,z)

    @staticmethod
    def x(s):
        return Scaling(s,1,1)

    @staticmethod
    def y(s):
        return Scaling(1,s,1)

    @staticmethod
    def z(s):
        return Scaling(1,1,s)


class Rotate:
    """rotations in degrees about the principal axes"""

    @staticmethod
    def x(deg):
        return Rotation((1,0,0),deg)

    @staticmethod
    def y(deg):
        return Rotation((0,1,0),deg)

    @staticmethod
    def z(deg):
        return Rotation((0,0,1),deg)
