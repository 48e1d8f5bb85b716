"""Plane geometry: distances, triangle areas and the smallest enclosing circle."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle abc by Heron's formula."""
    ab, bc, ca = distance(a, b), distance(b, c), distance(c, a)
    p = (ab + bc + ca) / 2
    return math.sqrt(max(0.0, p * (p - ab) * (p - bc) * (p - ca)))


def contains_all(points: Iterable[Point], center: Point, radius: float) -> bool:
    """True when no point lies farther than radius from center."""
    return all(distance(point, center) <= radius for point in points)


def _circumcircle(a: Point, b: Point, c: Point) -> tuple[Point, float] | None:
    denominator = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    if denominator == 0:
        return None
    area = triangle_area(a, b, c)
    if area == 0:
        return None
    sa = a.x * a.x + a.y * a.y
    sb = b.x * b.x + b.y * b.y
    sc = c.x * c.x + c.y * c.y
    center = Point(
        -0.5 * (a.y * (sb - sc) + b.y * (sc - sa) + c.y * (sa - sb)) / denominator,
        0.5 * (a.x * (sb - sc) + b.x * (sc - sa) + c.x * (sa - sb)) / denominator,
    )
    radius = distance(a, b) * distance(b, c) * distance(c, a) / (4 * area)
    return center, radius


def smallest_enclosing_circle(points: Iterable[Point]) -> tuple[Point, float]:
    """Smallest circle holding every point, as (center, radius).

    Every circumcircle of three points and every circle on two points as its
    diameter is tried; the smallest that holds all points wins, later
    candidates winning ties.
    """
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("at least two points are needed")

    candidates: list[tuple[Point, float]] = []
    for a, b, c in combinations(pts, 3):
        circle = _circumcircle(a, b, c)
        if circle is not None:
            candidates.append(circle)
    for a, b in combinations(pts, 2):
        center = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        candidates.append((center, distance(center, a)))

    best: tuple[Point, float] | None = None
    for center, radius in candidates:
        if contains_all(pts, center, radius) and (best is None or radius <= best[1]):
            best = (center, radius)
    if best is None:
        raise ValueError("no enclosing circle found")
    return best