import math
import random

import numpy as np
import pytest

from graphrender.function_library import (
    FunctionName,
    get_function,
    get_next_function_name,
    get_random_function_name,
    get_random_function_name_other_than,
    multi_wave,
    ripple,
    sphere,
    torus,
    wave,
)

SAMPLES = [(-0.9, 0.0, 0.3), (0.1, 0.0, -0.7), (0.55, 0.0, 0.55), (0.0, 0.0, 0.0)]


@pytest.mark.parametrize("name", list(FunctionName))
@pytest.mark.parametrize("resolution", [10, 100])
def test_scale_is_uniform_and_bottom_row_affine(name, resolution):
    m = get_function(name)((0.2, 0.0, -0.4), 0.3, resolution)
    assert m.shape == (4, 4)
    assert m[0, 0] == pytest.approx(2.0 / resolution)
    assert m[0, 0] == pytest.approx(m[1, 1])
    assert m[1, 1] == pytest.approx(m[2, 2])
    np.testing.assert_allclose(m[3], [0, 0, 0, 1])


@pytest.mark.parametrize("func", [wave, multi_wave, ripple])
@pytest.mark.parametrize("point", SAMPLES)
def test_height_functions_keep_x_and_z(func, point):
    m = func(point, 1.7, 20)
    assert m[0, 3] == pytest.approx(point[0])
    assert m[2, 3] == pytest.approx(point[2])


@pytest.mark.parametrize("point", SAMPLES)
def test_wave_is_periodic_in_time(point):
    a = wave(point, 0.3, 10)
    b = wave(point, 2.3, 10)
    np.testing.assert_allclose(a, b, atol=1e-9)


@pytest.mark.parametrize("point", SAMPLES)
def test_wave_height_bounded(point):
    assert abs(wave(point, 0.8, 10)[1, 3]) <= 1.0


@pytest.mark.parametrize("point", SAMPLES)
def test_ripple_damped(point):
    m = ripple(point, 0.4, 10)
    d = math.hypot(point[0], point[2])
    assert abs(m[1, 3]) <= 1.0 / (1.0 + 10.0 * d) + 1e-12


@pytest.mark.parametrize("point", SAMPLES)
@pytest.mark.parametrize("t", [0.0, 0.5, 3.1])
def test_sphere_radius_within_band(point, t):
    m = sphere(point, t, 10)
    radius = np.linalg.norm(m[:3, 3])
    assert 0.8 - 1e-9 <= radius <= 1.0 + 1e-9


@pytest.mark.parametrize("point", SAMPLES)
def test_torus_points_away_from_axis(point):
    m = torus(point, 1.0, 10)
    x, y, z = m[:3, 3]
    assert math.hypot(x, z) >= 0.6 - 0.2 - 1e-9
    assert abs(y) <= 0.2 + 1e-9


def test_get_function_matches_names():
    assert get_function(FunctionName.WAVE) is wave
    assert get_function(FunctionName.MULTI_WAVE) is multi_wave
    assert get_function(FunctionName.RIPPLE) is ripple
    assert get_function(FunctionName.SPHERE) is sphere
    assert get_function(FunctionName.TORUS) is torus


def test_next_function_name_order():
    assert get_next_function_name(FunctionName.WAVE) is FunctionName.MULTI_WAVE
    assert get_next_function_name(FunctionName.SPHERE) is FunctionName.TORUS
    assert get_next_function_name(FunctionName.TORUS) is FunctionName.WAVE


@pytest.mark.parametrize("start", list(FunctionName))
def test_next_function_name_cycles_back(start):
    name = start
    for _ in range(len(FunctionName)):
        name = get_next_function_name(name)
    assert name is start


def test_random_function_name_covers_all():
    rng = random.Random(1234)
    seen = {get_random_function_name(rng) for _ in range(500)}
    assert seen == set(FunctionName)


def test_random_function_name_default_rng():
    assert get_random_function_name() in set(FunctionName)


@pytest.mark.parametrize("excluded", list(FunctionName))
def test_random_other_than_excludes(excluded):
    rng = random.Random(99)
    seen = {get_random_function_name_other_than(excluded, rng) for _ in range(400)}
    assert excluded not in seen
    assert seen == set(FunctionName) - {excluded}