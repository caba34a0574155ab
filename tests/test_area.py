import pytest

from quadcache.area import NodeArea, Quadrant
from quadcache.errors import NoQuadrantError


def test_unit_area_contains_only_its_cell():
    a = NodeArea(0, 0, 1, 1)
    assert a.contains(0, 0)
    assert not a.contains(1, 1)
    assert a.is_unit


def test_classify_around_negative_center():
    a = NodeArea(-1, -1, 2, 2)
    assert a.contains(-1, -1)
    assert a.contains(0, 0)
    assert not a.contains(1, 1)

    assert a.classify(-1, -1) == Quadrant.NW
    assert a.classify(0, 0) == Quadrant.SE
    assert a.classify(0, -1) == Quadrant.NE
    assert a.classify(-1, 0) == Quadrant.SW


@pytest.mark.parametrize("point", [(2, 0), (0, 2), (2, 2), (-2, -2)])
def test_classify_outside_is_none(point):
    assert NodeArea(-1, -1, 2, 2).classify(*point) == Quadrant.NONE


def test_quadrant_values_index_child_slots():
    assert [int(q) for q in (Quadrant.NW, Quadrant.SW, Quadrant.NE, Quadrant.SE)] == [0, 1, 2, 3]
    assert Quadrant.NONE == -1


def test_sub_areas_tile_parent():
    a = NodeArea(4, -8, 8, 8)
    assert a.sub_area(Quadrant.NW) == NodeArea(4, -8, 4, 4)
    assert a.sub_area(Quadrant.NE) == NodeArea(8, -8, 4, 4)
    assert a.sub_area(Quadrant.SW) == NodeArea(4, -4, 4, 4)
    assert a.sub_area(Quadrant.SE) == NodeArea(8, -4, 4, 4)


def test_sub_area_of_none_raises():
    with pytest.raises(NoQuadrantError):
        NodeArea(0, 0, 2, 2).sub_area(Quadrant.NONE)


def test_contains_area_checks_both_corners():
    outer = NodeArea(0, 0, 8, 8)
    assert outer.contains_area(NodeArea(2, 2, 2, 2))
    # The far corner is exclusive, so a flush sub area is not contained.
    assert not outer.contains_area(NodeArea(4, 4, 4, 4))
    assert not outer.contains_area(NodeArea(-1, 0, 2, 2))
