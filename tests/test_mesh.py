import numpy as np
import pytest

from polyrule.errors import MeshError, PolyruleError
from polyrule.mesh import Mesh
from polyrule.primitives import cube_mesh
from polyrule.xform import IDENTITY, Scale, Translate, compose


def _triangle():
    return Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2)], name='tri')


def test_mesh_basic():
    mesh = _triangle()
    assert mesh.vertices.shape == (3, 3)
    assert mesh.faces == ((0, 1, 2),)
    assert len(mesh) == 3
    assert 'tri' in repr(mesh)


def test_vertices_are_read_only():
    mesh = _triangle()
    with pytest.raises(ValueError):
        mesh.vertices[0, 0] = 5.0


def test_input_is_copied():
    verts = np.zeros((3, 3))
    mesh = Mesh(verts, [(0, 1, 2)])
    verts[0, 0] = 9.0
    assert mesh.vertices[0, 0] == 0.0


@pytest.mark.parametrize('faces', [
    [(0, 1)],            # too few indices
    [(0, 1, 3)],         # out of range
    [(0, -1, 2)],        # negative
    [(0, 1, 2.0)],       # not an integer
    [(0, True, 2)],      # booleans are not indices
])
def test_bad_faces_rejected(faces):
    with pytest.raises(MeshError):
        Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], faces)


def test_bad_vertices_rejected():
    with pytest.raises(MeshError):
        Mesh([(0, 0), (1, 0), (0, 1)], [(0, 1, 2)])
    with pytest.raises(ValueError):
        Mesh([(0, 0, 0, 1)], [])
    # ragged rows
    with pytest.raises(MeshError):
        Mesh([(0, 0, 0), (1, 0)], [])


def test_mesh_error_hierarchy():
    assert issubclass(MeshError, PolyruleError)
    assert issubclass(MeshError, ValueError)


def test_empty_mesh():
    mesh = Mesh([], [])
    assert mesh.vertices.shape == (0, 3)
    assert mesh.faces == ()
    with pytest.raises(MeshError):
        mesh.bbox()


def test_transformed_keeps_topology():
    mesh = cube_mesh()
    moved = mesh.transformed(compose(Translate.x(3), Scale.by(2)))
    assert moved is not mesh
    assert moved.same_topology(mesh)
    np.testing.assert_allclose(moved.vertices[:, 0], mesh.vertices[:, 0] * 2 + 3)
    np.testing.assert_allclose(moved.vertices[:, 1:], mesh.vertices[:, 1:] * 2)
    # the source mesh is untouched
    assert mesh.bbox() == ((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5))


def test_transformed_identity_is_a_copy():
    mesh = cube_mesh('box')
    same = mesh.transformed(IDENTITY)
    assert same is not mesh
    assert same.name == 'box'
    assert np.array_equal(same.vertices, mesh.vertices)
    assert not same.vertices.flags.writeable


def test_renamed():
    mesh = _triangle().renamed('other')
    assert mesh.name == 'other'
    assert mesh.faces == ((0, 1, 2),)
