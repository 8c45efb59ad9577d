import pytest

from graphrender.camera import Camera
from graphrender.renderer import Renderer, aspect_ratio


def test_aspect_ratio_square_is_one():
    assert aspect_ratio(600, 600) == 1.0


def test_aspect_ratio_wide():
    assert aspect_ratio(800, 400) == 2.0


@pytest.mark.parametrize("width,height", [(800, 600), (1, 3), (1920, 1080), (7, 13)])
def test_aspect_ratio_times_height_gives_width(width, height):
    assert aspect_ratio(width, height) * height == pytest.approx(width)


@pytest.mark.parametrize("height", [0, -1, -600])
def test_aspect_ratio_rejects_non_positive_height(height):
    with pytest.raises(ValueError):
        aspect_ratio(800, height)


def test_render_before_init_raises():
    renderer = Renderer()
    with pytest.raises(RuntimeError):
        renderer.render(Camera(), 0.016)


def test_render_before_init_leaves_no_graph():
    renderer = Renderer(resolution=10)
    with pytest.raises(RuntimeError):
        renderer.render(Camera(), 0.5)
    assert renderer.graph is None
    assert renderer.resolution == 10