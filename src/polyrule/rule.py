## rule composition and evaluation for polyrule

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
Rules describe structure as a tree.

A Rule is one of three things:

* a **leaf** wrapping a single ``Mesh``,
* a **children** node holding ordered ``(child, attached transform)``
  pairs, or
* a **deferred** node holding a ``ToRule`` source that is asked for a
  concrete Rule every time the node is reached during evaluation.

Every Rule also carries one transform that applies to everything
beneath it.  Rules are immutable: ``tf`` and ``push`` return new Rules
and never touch the receiver, so a sub-rule can be shared freely
between several parents.

Transform order
---------------

``rule.tf(t)`` makes ``t`` the outermost transform, so the transform
applied last acts last on the geometry::

    cube().tf(Translate.by(0.25, 0.25, 0)).tf(Scale.by(0.4))

moves the cube to ``(0.25, 0.25, 0)`` and then scales the result about
the origin, leaving its centre at ``(0.1, 0.1, 0)``.

``tf`` only affects what the rule holds when it is called.  A child
pushed afterwards is not moved by it::

    Rule().push(a).tf(Translate.x(1)).push(b)   # a is shifted, b is not

Evaluation
----------

``evaluate`` walks the tree depth first, children in insertion order,
and yields one world-space ``Mesh`` per leaf reached.  The walk uses an
explicit stack rather than Python recursion.  Deferred sources are
resolved lazily as the walk reaches them, once per occurrence, and are
never cached; a deferred node replicated four times is resolved four
times on every evaluation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from polyrule.errors import RuleError
from polyrule.mesh import Mesh
from polyrule.xform import IDENTITY, Transform, compose

logger = logging.getLogger(__name__)

LEAF = 'leaf'
CHILDREN = 'children'
DEFERRED = 'deferred'


class ToRule(ABC):
    """Anything that can produce a Rule when evaluation reaches it.

    Implement ``to_rule`` and pass an instance to ``Rule.of`` (or push
    it directly) to defer the choice of structure until evaluation,
    e.g. to pick a random offset per occurrence.
    """

    @abstractmethod
    def to_rule(self) -> 'Rule':
        pass


@dataclass(frozen=True)
class Replicate:
    """``count`` copies of a rule, the i-th under ``step`` applied i times."""

    count: int
    step: Transform

    @classmethod
    def n(cls, count: int, step: Transform) -> 'Replicate':
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"replication count must be a non-negative integer: {count!r}")
        if not isinstance(step, Transform):
            raise RuleError(f"replication step must be a Transform, got {type(step).__name__}")
        return cls(count, step)

    def transforms(self) -> Iterator[Transform]:
        current = IDENTITY
        for _ in range(self.count):
            yield current
            current = compose(self.step, current)


Child = Tuple['Rule', Transform]


@dataclass(frozen=True, eq=False)
class Rule:
    """A node of the structure tree.  See the module docstring."""

    transform: Transform = IDENTITY
    children: Tuple[Child, ...] = ()
    mesh: Optional[Mesh] = None
    source: Any = None

    @property
    def kind(self) -> str:
        if self.mesh is not None:
            return LEAF
        if self.source is not None:
            return DEFERRED
        return CHILDREN

    def __repr__(self):
        kind = self.kind
        if kind == LEAF:
            detail = repr(self.mesh)
        elif kind == DEFERRED:
            detail = repr(self.source)
        else:
            detail = f"{len(self.children)} children"
        tf = "" if self.transform.isidentity() else f", transform={self.transform!r}"
        return f"Rule({kind}: {detail}{tf})"

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def leaf(cls, mesh: Mesh) -> 'Rule':
        if not isinstance(mesh, Mesh):
            raise RuleError(f"leaf rules wrap a Mesh, got {type(mesh).__name__}")
        return cls(mesh=mesh)

    @classmethod
    def defer(cls, source: Union[ToRule, Callable[[], 'Rule']]) -> 'Rule':
        if not (isinstance(source, ToRule) or callable(source)):
            raise RuleError(
                f"deferred rules need a ToRule or a callable, got {type(source).__name__}"
            )
        return cls(source=source)

    @classmethod
    def of(cls, value: Any) -> 'Rule':
        """Coerce ``value`` into a Rule.

        Rules are returned unchanged, meshes become leaves, and ``ToRule``
        instances or zero-argument callables become deferred rules.
        """
        if isinstance(value, Rule):
            return value
        if isinstance(value, Mesh):
            return cls.leaf(value)
        if isinstance(value, ToRule) or callable(value):
            return cls.defer(value)
        raise RuleError(f"cannot make a Rule from {type(value).__name__}: {value!r}")

    def tf(self, t: Union[Transform, Replicate]) -> 'Rule':
        """Return this rule under ``t``, which becomes the outermost transform.

        ``t`` may be a ``Replicate``, in which case the result is a
        children node holding ``t.count`` copies of this rule.
        """
        if isinstance(t, Replicate):
            return Rule(children=tuple((self, step) for step in t.transforms()))
        if isinstance(t, Transform):
            return Rule(transform=compose(t, self.transform),
                        children=self.children, mesh=self.mesh, source=self.source)
        raise RuleError(f"tf expects a Transform or Replicate, got {type(t).__name__}")

    def push(self, child: Any, tf: Optional[Transform] = None) -> 'Rule':
        """Return a children node with ``child`` appended after the existing content."""
        child = Rule.of(child)
        if tf is None:
            tf = IDENTITY
        elif not isinstance(tf, Transform):
            raise RuleError(f"attached transform must be a Transform, got {type(tf).__name__}")
        if self.kind == CHILDREN and self.transform.isidentity():
            base = self.children
        else:
            # keep the receiver whole so its transform stays off the new child
            base = ((self, IDENTITY),)
        return Rule(children=base + ((child, tf),))

    # ------------------------------------------------------------------
    # evaluation
    # ------------------------------------------------------------------

    def generate(self, transform: Optional[Transform] = None) -> Iterator[Mesh]:
        return evaluate(self, transform)

    def meshes(self, transform: Optional[Transform] = None) -> List[Mesh]:
        return list(evaluate(self, transform))


def _resolve(source: Any) -> Rule:
    if isinstance(source, ToRule):
        produced = source.to_rule()
    else:
        produced = source()
    if isinstance(produced, Rule):
        return produced
    if isinstance(produced, Mesh):
        return Rule.leaf(produced)
    raise RuleError(
        f"{source!r} produced {type(produced).__name__} where a Rule was expected"
    )


def evaluate(rule: Any, transform: Optional[Transform] = None) -> Iterator[Mesh]:
    """Flatten ``rule`` into world-space meshes.

    Meshes are yielded lazily in depth-first, pre-order, insertion order,
    each one placed by the composition of every transform on its path
    with ``transform`` outermost.  Deferred nodes are resolved when
    reached, so the generator is single use and two evaluations of a
    rule with random sources may differ.
    """
    rule = Rule.of(rule)
    if transform is None:
        transform = IDENTITY

    # (node, transform of the parent, transform attached to this edge)
    stack: List[Tuple[Rule, Transform, Transform]] = [(rule, transform, IDENTITY)]
    while stack:
        node, parent, attached = stack.pop()
        effective = compose(compose(parent, attached), node.transform)

        if node.mesh is not None:
            yield node.mesh.transformed(effective)
        elif node.source is not None:
            resolved = _resolve(node.source)
            logger.debug("resolved deferred %r to %r", node.source, resolved)
            stack.append((resolved, effective, IDENTITY))
        else:
            for child, child_tf in reversed(node.children):
                stack.append((child, effective, child_tf))


__all__ = ['Rule', 'ToRule', 'Replicate', 'evaluate', 'LEAF', 'CHILDREN', 'DEFERRED']
