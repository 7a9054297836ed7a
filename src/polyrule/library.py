## example rules for polyrule

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
Example rules, usable as building blocks or rendered from the command
line with ``python -m polyrule SCENE``.

Recursive rules thread an explicit depth budget through the building
function and stop recursing when it reaches zero; the evaluator has no
recursion guard of its own.
"""

import random

from polyrule.primitives import cube, icosphere
from polyrule.rule import Replicate, Rule, ToRule
from polyrule.xform import Rotate, Scale, Translate


def shifted_cube():
    return cube().tf(Translate.x(3))

def cube_column(count=3, spacing=1.1):
    return cube().tf(Replicate.n(count, Translate.y(spacing)))

def recursive_tile(depth_budget):
    """three scaled cubes in a 2x2 tile, with the fourth quadrant
    holding a half-size copy of the whole tile"""
    rule = Rule() \
        .push(cube().tf(Translate.by(0.25, 0.25, 0.0)).tf(Scale.by(0.4))) \
        .push(cube().tf(Translate.by(-0.25, -0.25, 0.0)).tf(Scale.by(0.4))) \
        .push(cube().tf(Translate.by(-0.25, 0.25, 0.0)).tf(Scale.by(0.4)))
    if depth_budget > 0:
        return rule.push(recursive_tile(depth_budget - 1)
                         .tf(Translate.by(0.25, -0.25, 0.0))
                         .tf(Scale.by(0.5)))
    return rule


class RandCube(ToRule):
    """a cube nudged along x by an offset drawn fresh per occurrence"""

    offsets = (0.1, -0.1, 0.2, -0.2)

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self):
        return "RandCube()"

    def to_rule(self):
        return cube().tf(Translate.x(self.rng.choice(self.offsets)))


def random_column(count=4, rng=None):
    return Rule.of(RandCube(rng)).tf(Replicate.n(count, Translate.y(1.0)))


def spiral(count=12, rise=0.3, turn=30.0):
    """small spheres climbing around the z axis"""
    step = Rotate.z(turn).mul(Translate.z(rise))
    return icosphere(1).tf(Scale.by(0.4)).tf(Translate.x(1.5)) \
        .tf(Replicate.n(count, step))


## named scenes for the command line; each builder takes the depth
## budget and a random number generator
SCENES = {
    'cube': lambda depth, rng: cube(),
    'shifted': lambda depth, rng: shifted_cube(),
    'column': lambda depth, rng: cube_column(),
    'tile': lambda depth, rng: recursive_tile(depth),
    'random': lambda depth, rng: random_column(rng=rng),
    'spiral': lambda depth, rng: spiral(),
}


def scene(name, depth=3, rng=None):
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError('unknown scene {!r}, expected one of {}'.format(
            name, ', '.join(sorted(SCENES)))) from None
    return builder(depth, rng if rng is not None else random.Random())
