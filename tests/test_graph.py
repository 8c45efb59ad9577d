import numpy as np
import pytest

from graphrender.function_library import FunctionName, get_function, get_next_function_name
from graphrender.graph import Graph
from graphrender.meshutils import create_cube_vertices


@pytest.mark.parametrize("resolution", [1, 4, 10])
def test_point_count(resolution):
    g = Graph(FunctionName.WAVE, resolution)
    assert g.point_count == resolution * resolution
    assert len(g.positions) == g.point_count


def test_positions_inside_domain_and_centred():
    g = Graph(FunctionName.WAVE, 8)
    xs = np.array([p[0] for p in g.positions])
    zs = np.array([p[2] for p in g.positions])
    assert np.all(np.abs(xs) < 1.0)
    assert np.all(np.abs(zs) < 1.0)
    assert xs.sum() == pytest.approx(0.0, abs=1e-9)
    assert zs.sum() == pytest.approx(0.0, abs=1e-9)
    assert all(p[1] == 0.0 for p in g.positions)


def test_x_varies_fastest():
    g = Graph(FunctionName.WAVE, 5)
    assert g.positions[0][2] == g.positions[4][2]
    assert g.positions[5][2] == pytest.approx(g.positions[0][2] + g.step)
    assert g.positions[1][0] == pytest.approx(g.positions[0][0] + g.step)


def test_step_spacing():
    g = Graph(FunctionName.RIPPLE, 10)
    assert g.step * g.resolution == pytest.approx(2.0)
    assert g.positions[0][0] == pytest.approx(-1.0 + g.step / 2)


def test_model_matrix_uses_function():
    g = Graph(FunctionName.SPHERE, 6)
    expected = get_function(FunctionName.SPHERE)(g.positions[7], 0.3, 6)
    np.testing.assert_allclose(g.model_matrix(7, 0.3), expected)


def test_all_model_matrices_match_individual():
    g = Graph(FunctionName.TORUS, 4)
    all_m = g.all_model_matrices(1.2)
    assert all_m.shape == (g.point_count, 4, 4)
    for i, m in enumerate(all_m):
        np.testing.assert_allclose(m, g.model_matrix(i, 1.2))


def test_update_below_duration_keeps_function():
    g = Graph(FunctionName.WAVE, 3)
    g.update(0.5)
    assert g.function_name is FunctionName.WAVE
    assert g.duration == pytest.approx(0.5)


def test_update_switches_to_next_function():
    g = Graph(FunctionName.WAVE, 3)
    g.update(0.6)
    g.update(0.6)
    assert g.function_name is get_next_function_name(FunctionName.WAVE)
    assert g.duration == pytest.approx(0.2)
    np.testing.assert_allclose(
        g.model_matrix(0, 0.1),
        get_function(g.function_name)(g.positions[0], 0.1, 3),
    )


def test_update_advances_only_once_per_call():
    g = Graph(FunctionName.TORUS, 2)
    g.update(2.5)
    assert g.function_name is FunctionName.WAVE
    assert g.duration == pytest.approx(1.5)


def test_graph_carries_cube_vertices():
    g = Graph(FunctionName.WAVE, 2)
    assert g.vertices == create_cube_vertices()