import numpy as np
import pytest

from polyrule.errors import RuleError
from polyrule.mesh import Mesh
from polyrule.primitives import cube, cube_mesh, plane
from polyrule.rule import CHILDREN, DEFERRED, LEAF, Replicate, Rule, ToRule, evaluate
from polyrule.xform import IDENTITY, Rotate, Scale, Translate, Transform


CUBE = cube_mesh()


def _centre(mesh):
    return tuple(np.round(mesh.vertices.mean(axis=0), 9))


class Counter(ToRule):
    """hands out a cube moved along z by the number of calls so far"""

    def __init__(self):
        self.calls = 0

    def to_rule(self):
        self.calls += 1
        return cube().tf(Translate.z(self.calls))


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------


def test_kinds():
    assert cube().kind == LEAF
    assert Rule().kind == CHILDREN
    assert Rule.of(Counter()).kind == DEFERRED
    assert Rule.of(lambda: cube()).kind == DEFERRED
    assert Rule.of(CUBE).kind == LEAF


def test_of_rejects_junk():
    with pytest.raises(RuleError):
        Rule.of(42)
    with pytest.raises(RuleError):
        Rule().push("cube")
    with pytest.raises(RuleError):
        cube().tf((1, 0, 0))
    with pytest.raises(RuleError):
        Rule().push(cube(), tf="up")
    with pytest.raises(TypeError):
        Rule.leaf(cube())


def test_tf_and_push_do_not_mutate():
    base = cube()
    moved = base.tf(Translate.x(1))
    assert base.transform == IDENTITY
    assert moved is not base

    parent = Rule().push(cube())
    grown = parent.push(plane())
    assert len(parent.children) == 1
    assert len(grown.children) == 2


def test_empty_rule():
    assert Rule().meshes() == []
    assert cube().tf(Replicate.n(0, Translate.x(1))).meshes() == []


def test_replicate_validation():
    with pytest.raises(ValueError):
        Replicate.n(-1, Translate.x(1))
    with pytest.raises(ValueError):
        Replicate.n(2.5, Translate.x(1))
    with pytest.raises(RuleError):
        Replicate.n(2, (0, 1, 0))


# ---------------------------------------------------------------------------
# evaluation
# ---------------------------------------------------------------------------


def test_single_leaf():
    meshes = cube().meshes()
    assert len(meshes) == 1
    assert np.array_equal(meshes[0].vertices, CUBE.vertices)
    assert meshes[0].faces == CUBE.faces


def test_translate_x():
    mesh, = cube().tf(Translate.x(3)).meshes()
    np.testing.assert_allclose(mesh.vertices[:, 0], CUBE.vertices[:, 0] + 3)
    np.testing.assert_array_equal(mesh.vertices[:, 1:], CUBE.vertices[:, 1:])


def test_last_tf_is_outermost():
    rule = cube().tf(Translate.by(0.25, 0.25, 0.0)).tf(Scale.by(0.4))
    mesh, = rule.meshes()
    assert _centre(mesh) == pytest.approx((0.1, 0.1, 0.0))
    assert mesh.bbox()[1][2] == pytest.approx(0.2)


def test_replicate():
    meshes = cube().tf(Replicate.n(3, Translate.y(1.1))).meshes()
    assert len(meshes) == 3
    for i, mesh in enumerate(meshes):
        assert mesh.same_topology(CUBE)
        np.testing.assert_allclose(mesh.vertices[:, 1], CUBE.vertices[:, 1] + 1.1 * i)
        np.testing.assert_array_equal(mesh.vertices[:, [0, 2]], CUBE.vertices[:, [0, 2]])


def test_replicate_then_tf():
    meshes = cube().tf(Replicate.n(2, Translate.y(1))).tf(Translate.x(5)).meshes()
    assert [_centre(m) for m in meshes] == [(5, 0, 0), (5, 1, 0)]


def test_replicate_composes_with_rotation():
    meshes = cube().tf(Translate.x(2)).tf(Replicate.n(4, Rotate.z(90))).meshes()
    centres = [_centre(m) for m in meshes]
    expected = [(2, 0, 0), (0, 2, 0), (-2, 0, 0), (0, -2, 0)]
    for got, want in zip(centres, expected):
        assert got == pytest.approx(want, abs=1e-9)


def test_children_order():
    c0 = Rule().push(cube().tf(Translate.x(0))).push(cube().tf(Translate.x(1)))
    c1 = plane().tf(Translate.x(10))
    c2 = cube().tf(Replicate.n(2, Translate.x(1))).tf(Translate.x(20))
    meshes = Rule().push(c0).push(c1).push(c2).meshes()
    assert [_centre(m)[0] for m in meshes] == [0, 1, 10, 20, 21]
    assert [len(m) for m in meshes] == [8, 8, 4, 8, 8]


def test_push_attached_transform():
    meshes = Rule().push(cube(), Translate.y(2)).push(cube()).meshes()
    assert [_centre(m) for m in meshes] == [(0, 2, 0), (0, 0, 0)]


def test_tf_does_not_reach_later_children():
    rule = Rule().push(cube()).tf(Translate.x(1)).push(cube())
    assert [_centre(m) for m in rule.meshes()] == [(1, 0, 0), (0, 0, 0)]


def test_push_onto_leaf_keeps_leaf_transform():
    rule = cube().tf(Translate.z(3)).push(plane())
    meshes = rule.meshes()
    assert [_centre(m) for m in meshes] == [(0, 0, 3), (0, 0, 0)]


def test_nested_transforms():
    inner = Rule().push(cube().tf(Translate.x(1))).tf(Scale.by(2))
    outer = Rule().push(inner).tf(Translate.y(1))
    mesh, = outer.meshes()
    assert _centre(mesh) == (2, 1, 0)
    assert mesh.bbox()[1][0] - mesh.bbox()[0][0] == pytest.approx(2.0)


def test_inherited_transform_argument():
    mesh, = evaluate(cube().tf(Translate.x(1)), Scale.by(3))
    assert _centre(mesh) == (3, 0, 0)


def test_shared_subrule():
    leg = cube().tf(Scale.xyz(0.1, 0.1, 1))
    table = Rule().push(leg.tf(Translate.x(1))).push(leg.tf(Translate.x(-1)))
    assert [_centre(m) for m in table.meshes()] == [(1, 0, 0), (-1, 0, 0)]
    assert leg.meshes()[0].bbox()[1] == pytest.approx((0.05, 0.05, 0.5))


def test_deterministic():
    rule = Rule() \
        .push(cube().tf(Rotate.z(17)).tf(Replicate.n(5, Translate.y(1.1)))) \
        .push(plane().tf(Scale.by(0.4)).tf(Scale.by(2.5)))
    first = rule.meshes()
    second = rule.meshes()
    assert len(first) == len(second) == 6
    for a, b in zip(first, second):
        assert a.faces == b.faces
        assert a.vertices.tobytes() == b.vertices.tobytes()


def test_scale_round_trip():
    mesh, = cube().tf(Scale.by(0.4)).tf(Scale.by(2.5)).meshes()
    np.testing.assert_allclose(mesh.vertices, CUBE.vertices, rtol=1e-12, atol=1e-12)


def test_deep_nesting_is_iterative():
    rule = cube()
    for _ in range(3000):
        rule = Rule().push(rule)
    meshes = rule.meshes()
    assert len(meshes) == 1


def test_evaluate_is_lazy():
    source = Counter()
    gen = Rule.of(source).tf(Replicate.n(3, Translate.y(1))).generate()
    assert source.calls == 0
    next(gen)
    assert source.calls == 1
    rest = list(gen)
    assert len(rest) == 2
    assert source.calls == 3


# ---------------------------------------------------------------------------
# deferred rules
# ---------------------------------------------------------------------------


def test_deferred_resolved_per_replication():
    source = Counter()
    rule = Rule.of(source).tf(Replicate.n(4, Translate.y(1.0)))
    meshes = rule.meshes()
    assert source.calls == 4
    assert [_centre(m) for m in meshes] == [(0, 0, 1), (0, 1, 2), (0, 2, 3), (0, 3, 4)]


def test_deferred_never_cached_across_evaluations():
    source = Counter()
    rule = Rule.of(source).tf(Replicate.n(4, Translate.y(1.0)))
    rule.meshes()
    again = rule.meshes()
    assert source.calls == 8
    assert _centre(again[0]) == (0, 0, 5)


def test_deferred_callable_and_transform():
    calls = []

    def build():
        calls.append(1)
        return plane()

    meshes = Rule().push(build, Translate.x(2)).push(Rule.of(build).tf(Translate.x(-2))).meshes()
    assert len(calls) == 2
    assert [_centre(m) for m in meshes] == [(2, 0, 0), (-2, 0, 0)]


def test_deferred_may_return_mesh_or_nested_deferred():
    meshes = Rule().push(lambda: CUBE).push(lambda: Rule.of(lambda: plane())).meshes()
    assert [len(m) for m in meshes] == [8, 4]


def test_deferred_bad_result():
    rule = Rule.of(lambda: "not a rule")
    with pytest.raises(RuleError):
        rule.meshes()


def test_tf_on_deferred():
    mesh, = Rule.of(lambda: cube()).tf(Translate.x(4)).meshes()
    assert _centre(mesh) == (4, 0, 0)


def test_meshes_are_independent_of_tree():
    leaf_mesh = Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2)])
    out, = Rule.leaf(leaf_mesh).meshes()
    assert out is not leaf_mesh
    assert out.vertices is not leaf_mesh.vertices
    assert isinstance(Rule().transform, Transform)
