from __future__ import annotations

from typing import Tuple

Point = Tuple[int, int]


def reflect(point: Point, about: Point) -> Point:
    """
    Mirror image of `point` through `about`.
    """
    return (2 * about[0] - point[0], 2 * about[1] - point[1])


def is_non_negative(point: Point) -> bool:
    return point[0] >= 0 and point[1] >= 0
