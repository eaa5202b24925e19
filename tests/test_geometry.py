import pytest

from sansrpg.geometry import Rect


@pytest.mark.parametrize(
    "point",
    [(170, 220), (380, 270), (275, 245)],
)
def test_contains_inside_and_edges(point):
    assert Rect(170, 220, 210, 50).contains(point) is True


@pytest.mark.parametrize(
    "point",
    [(169, 220), (381, 270), (170, 271), (200, 219)],
)
def test_contains_outside(point):
    assert Rect(170, 220, 210, 50).contains(point) is False


def test_far_edge_truncated():
    rect = Rect(0.5, 0, 10.9, 10)
    assert rect.contains((11, 5)) is True
    assert rect.contains((12, 5)) is False


def test_near_edge_not_truncated():
    assert Rect(0.5, 0, 10, 10).contains((0, 5)) is False


def test_zero_size_contains_its_corner():
    assert Rect(5, 5, 0, 0).contains((5, 5)) is True