## scalar and vector helpers for polyrule

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

"""scalar and vector helpers shared by the transform and mesh modules

Points handed to polyrule are plain ``(x, y, z)`` sequences.  Internally
the transform code works in homogeneous coordinates, so ``point()``
lifts anything point-like into a four-element list with ``w=1``.
"""

from math import pi, sqrt

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## utility function to determine if argument is a "real" python
## number, since booleans are considered ints (True=1 and False=0 for
## integer arithmetic) but 1 and 0 are not considered boolean

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

## operations on points and vectors
## ---------------------------------

def point(x=0.0,y=0.0,z=0.0):
    """make a homogeneous point from three scalars or from a sequence
    of at least three scalars"""
    if isinstance(x,(tuple,list)):
        if len(x) < 3:
            raise ValueError('point needs three coordinates: {}'.format(x))
        x,y,z = x[0],x[1],x[2]
    for c in (x,y,z):
        if not isgoodnum(c):
            raise ValueError('bad coordinate passed to point: {}'.format(c))
    return [float(x),float(y),float(z),1.0]

def dot4(a,b):
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]

def mag(a):
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

