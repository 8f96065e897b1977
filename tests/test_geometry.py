import pytest

from askit.geometry import (
    DEFAULT_AREA,
    distance,
    in_area,
    is_area,
    nearest,
    to_pixels,
    to_pixels_x,
    to_pixels_y,
)


def test_distance_three_four_five():
    assert distance((0, 0), (3, 4)) == 5.0


def test_distance_symmetric_and_zero():
    a, b = (1.5, -2.0), (7.0, 3.25)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0.0


def test_nearest_picks_closest():
    points = [(0, 0), (10, 10), (2, 2)]
    index, gap = nearest(points, (3, 3))
    assert index == 2
    assert gap == distance((2, 2), (3, 3))


def test_nearest_first_wins_on_tie():
    index, _ = nearest([(1, 0), (-1, 0)], (0, 0))
    assert index == 0


def test_nearest_empty_raises():
    with pytest.raises(ValueError):
        nearest([], (0, 0))


def test_is_area():
    assert is_area(DEFAULT_AREA) is False
    assert is_area((0, 0, 10, 10)) is True
    assert is_area((0, -1, 10, 10)) is False


def test_in_area_edges_inclusive():
    area = (0, 0, 10, 10)
    assert in_area(area, (0, 0))
    assert in_area(area, (10, 10))
    assert in_area(area, (5, 5))
    assert not in_area(area, (11, 5))
    assert not in_area(area, (5, -1))


def test_to_pixels_full_window():
    assert to_pixels((0.0, 0.0, 1.0, 1.0), (360, 640)) == (0, 0, 360, 640)


def test_to_pixels_zero_rect():
    assert to_pixels((0.0, 0.0, 0.0, 0.0), (360, 640)) == (0, 0, 0, 0)


def test_square_pixels_match_plain_conversion():
    rect = (0.1, 0.2, 0.5, 0.5)
    window = (200, 200)
    assert to_pixels_x(rect, window, (1, 1)) == to_pixels(rect, window)
    assert to_pixels_y(rect, window, (1, 1)) == to_pixels(rect, window)


def test_aspect_variants_keep_leading_edges():
    rect = (0.25, 0.5, 0.75, 0.5)
    window = (400, 300)
    plain = to_pixels(rect, window)
    assert to_pixels_x(rect, window, (16, 9))[:3] == plain[:3]
    assert to_pixels_y(rect, window, (16, 9))[:2] == plain[:2]
    assert to_pixels_y(rect, window, (16, 9))[3] == plain[3]