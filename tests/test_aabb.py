import pytest

from pbasim.aabb import AABB
from pbasim.vector import Vector

BOX = AABB(Vector(-1.0, -2.0, -3.0), Vector(1.0, 2.0, 3.0))


def test_center_inside():
    assert BOX.is_inside(Vector(0.0, 0.0, 0.0)) is True


@pytest.mark.parametrize("corner", [BOX.llc, BOX.urc])
def test_corners_inside(corner):
    assert BOX.is_inside(corner) is True


@pytest.mark.parametrize(
    "point",
    [
        Vector(-1.5, 0.0, 0.0),
        Vector(1.5, 0.0, 0.0),
        Vector(0.0, -2.5, 0.0),
        Vector(0.0, 2.5, 0.0),
        Vector(0.0, 0.0, -3.5),
        Vector(0.0, 0.0, 3.5),
    ],
)
def test_outside_each_axis(point):
    assert BOX.is_inside(point) is False


def test_default_box_contains_only_origin():
    box = AABB()
    assert box.is_inside(Vector()) is True
    assert box.is_inside(Vector(0.0, 1e-9, 0.0)) is False