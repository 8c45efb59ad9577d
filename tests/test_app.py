import pytest

from graphrender.app import SCREEN_HEIGHT, SCREEN_WIDTH, MouseTracker, main


def test_first_update_gives_no_offset():
    tracker = MouseTracker()
    assert tracker.update(123.0, 456.0) == (0.0, 0.0)


def test_first_update_records_position():
    tracker = MouseTracker()
    tracker.update(123.0, 456.0)
    assert (tracker.last_x, tracker.last_y) == (123.0, 456.0)
    assert tracker.first is False


def test_default_start_is_screen_centre_until_first_update():
    tracker = MouseTracker()
    assert tracker.last_x == SCREEN_WIDTH / 2.0
    assert tracker.last_y == SCREEN_HEIGHT / 2.0
    tracker.update(0.0, 0.0)
    assert (tracker.last_x, tracker.last_y) == (0.0, 0.0)


def test_y_offset_is_inverted():
    tracker = MouseTracker()
    tracker.update(100.0, 100.0)
    xoffset, yoffset = tracker.update(110.0, 95.0)
    assert xoffset == 10.0
    assert yoffset == 5.0


def test_offsets_sum_to_total_movement():
    tracker = MouseTracker()
    points = [(0.0, 0.0), (3.0, -2.0), (-4.0, 7.0), (10.0, 1.0)]
    total_x = total_y = 0.0
    for x, y in points:
        dx, dy = tracker.update(x, y)
        total_x += dx
        total_y += dy
    assert total_x == pytest.approx(points[-1][0] - points[0][0])
    assert total_y == pytest.approx(points[0][1] - points[-1][1])


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as exc:
        main(["--no-such-option"])
    assert exc.value.code == 2