import pytest

from blockcraft.collision import sprites_collide


def test_identical_rectangles_collide():
    assert sprites_collide(10, 10, 10, 10, 16, 16, 16, 16) is True


def test_touching_edges_do_not_collide():
    assert sprites_collide(0, 0, 16, 0, 16, 16, 16, 16) is False
    assert sprites_collide(0, 0, 0, 16, 16, 16, 16, 16) is False


def test_one_pixel_overlap_collides():
    assert sprites_collide(0, 0, 15, 15, 16, 16, 16, 16) is True


def test_far_apart():
    assert sprites_collide(0, 0, 100, 100, 8, 8, 8, 8) is False


def test_contained_rectangle():
    assert sprites_collide(0, 0, 4, 4, 32, 32, 2, 2) is True


@pytest.mark.parametrize("args", [
    (0, 0, 5, 3, 8, 8, 4, 4),
    (3, 9, 0, 0, 4, 4, 6, 12),
    (0, 0, 20, 0, 8, 8, 8, 8),
    (-5, -5, 0, 0, 5, 5, 5, 5),
])
def test_symmetry(args):
    x1, y1, x2, y2, w1, h1, w2, h2 = args
    assert sprites_collide(x1, y1, x2, y2, w1, h1, w2, h2) == \
        sprites_collide(x2, y2, x1, y1, w2, h2, w1, h1)