"""Distances between points, rectangle checks and ratio-to-pixel conversion.

Points are ``(x, y)`` pairs and rectangles are ``(x1, y1, x2, y2)`` tuples.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from askit.color import Color, ColorRGB

Point = Sequence[float]
Rect = Sequence[float]

DEFAULT_AREA = (-1, -1, -1, -1)
DEFAULT_WINDOW_SIZE = (360, 640)
FULL_SCREEN = (-1, -1)
DEFAULT_BG_COLOR = ColorRGB(230, 230, 230)

WHITE = ColorRGB(250, 250, 250)
WHITE_A = Color(250, 250, 250, 255)
BLACK = ColorRGB(0, 0, 0)
BLACK_A = Color(0, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def nearest(points: Iterable[Point], target: Point) -> tuple[int, float]:
    """Index of the point closest to ``target`` and its distance.

    On ties the earliest point wins. An empty sequence is rejected.
    """
    best: tuple[int, float] | None = None
    for index, point in enumerate(points):
        gap = distance(point, target)
        if best is None or gap < best[1]:
            best = (index, gap)
    if best is None:
        raise ValueError("no points to search")
    return best


def is_area(area: Rect) -> bool:
    """True unless any corner coordinate is negative."""
    return all(value >= 0 for value in area[:4])


def in_area(area: Rect, point: Point) -> bool:
    """True if ``point`` lies inside ``area``, edges included."""
    x1, y1, x2, y2 = area[:4]
    x, y = point[0], point[1]
    return x1 <= x <= x2 and y1 <= y <= y2


def to_pixels(ratio_rect: Rect, window_size: Point) -> tuple[int, int, int, int]:
    """Scale a rectangle given in window ratios to whole pixels, truncating."""
    x1, y1, x2, y2 = ratio_rect[:4]
    wx, wy = float(window_size[0]), float(window_size[1])
    return int(x1 * wx), int(y1 * wy), int(x2 * wx), int(y2 * wy)


def to_pixels_x(ratio_rect: Rect, window_size: Point, pixel: Point) -> tuple[int, int, int, int]:
    """Like ``to_pixels`` but the bottom edge follows ``x2`` and the pixel aspect."""
    x1, y1, x2, _ = ratio_rect[:4]
    wx, wy = float(window_size[0]), float(window_size[1])
    aspect = float(pixel[0]) / float(pixel[1])
    return int(x1 * wx), int(y1 * wy), int(x2 * wx), int(x2 * aspect * wy)


def to_pixels_y(ratio_rect: Rect, window_size: Point, pixel: Point) -> tuple[int, int, int, int]:
    """Like ``to_pixels`` but the right edge follows ``y2`` and the pixel aspect."""
    x1, y1, _, y2 = ratio_rect[:4]
    wx, wy = float(window_size[0]), float(window_size[1])
    aspect = float(pixel[1]) / float(pixel[0])
    return int(x1 * wx), int(y1 * wy), int(y2 * aspect * wx), int(y2 * wy)