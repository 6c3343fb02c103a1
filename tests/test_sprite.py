import pytest

from zombieshooter.geometry import Vec2
from zombieshooter.sprite import Sprite


def test_move_accumulates():
    s = Sprite(Vec2(10.0, 20.0))
    s.move(5.0, -3.0)
    s.move(1.0, 1.0)
    assert s.position == Vec2(16.0, 18.0)


def test_default_position_is_origin():
    assert Sprite().position == Vec2(0.0, 0.0)


def test_rotation_normalised_into_range():
    s = Sprite(rotation=-90.0)
    assert s.rotation == pytest.approx(270.0)
    assert 0.0 <= s.rotation < 360.0


def test_rotate_adds_and_wraps():
    s = Sprite(rotation=350.0)
    s.rotate(20.0)
    assert 0.0 <= s.rotation < 360.0
    s.rotate(-20.0)
    assert s.rotation == pytest.approx(350.0)


def test_initial_frame_is_top_left():
    s = Sprite(frame_size=(280.0, 220.0))
    assert s.texture_rect == (0, 0, 280, 220)


def test_set_frame_selects_cell():
    s = Sprite(frame_size=(280.0, 220.0))
    s.set_frame(3, 2)
    left, top, width, height = s.texture_rect
    assert (width, height) == (280, 220)
    assert left == 3 * width
    assert top == 2 * height


def test_set_frame_without_frame_size_raises():
    with pytest.raises(ValueError):
        Sprite().set_frame(1, 0)


def test_origin_is_frame_centre():
    s = Sprite(frame_size=(256.0, 256.0))
    assert s.origin * 2.0 == Vec2(256.0, 256.0)
    assert Sprite().origin == Vec2(0.0, 0.0)