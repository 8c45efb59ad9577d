from collections import Counter

import pytest

from graphrender.meshutils import Vertex, create_cube_vertices


def test_cube_has_36_vertices_as_triangles():
    vertices = create_cube_vertices()
    assert len(vertices) == 36
    assert len(vertices) % 3 == 0
    assert all(isinstance(v, Vertex) for v in vertices)


def test_each_face_has_six_vertices():
    counts = Counter(v.normal for v in create_cube_vertices())
    assert len(counts) == 6
    assert set(counts.values()) == {6}


def test_normals_are_unit_axis_vectors():
    for v in create_cube_vertices():
        assert sum(c * c for c in v.normal) == pytest.approx(1.0)
        assert sorted(abs(c) for c in v.normal) == [0.0, 0.0, 1.0]


def test_positions_lie_on_their_face():
    for v in create_cube_vertices():
        assert all(abs(c) == 0.5 for c in v.position)
        assert sum(p * n for p, n in zip(v.position, v.normal)) == pytest.approx(0.5)


def test_tex_coords_in_unit_square():
    for v in create_cube_vertices():
        assert all(c in (0.0, 1.0) for c in v.tex_coords)


def test_every_corner_is_used():
    corners = {v.position for v in create_cube_vertices()}
    assert len(corners) == 8


def test_vertex_is_immutable():
    v = create_cube_vertices()[0]
    with pytest.raises(AttributeError):
        v.position = (0.0, 0.0, 0.0)
    assert tuple(v.position) == (-0.5, -0.5, -0.5)


def test_fresh_list_each_call():
    a = create_cube_vertices()
    a.clear()
    assert len(create_cube_vertices()) == 36