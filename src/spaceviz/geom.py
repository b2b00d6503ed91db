"""Point and point-cloud value types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union, overload

Bounds = Tuple[Tuple[float, float, float], Tuple[float, float, float]]


@dataclass(frozen=True)
class Point:
    """Immutable 3D coordinate triple."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to ``other``."""
        return distance(self, other)


def distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between two points."""

    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2 + (p2.z - p1.z) ** 2)


def manhattan_distance(p1: Point, p2: Point) -> float:
    """Return the sum of absolute coordinate differences."""

    return abs(p2.x - p1.x) + abs(p2.y - p1.y) + abs(p2.z - p1.z)


class PointCloud:
    """
    Ordered collection of points.

    Insertion order is preserved and is the order in which points are
    drawn.  Duplicates are kept.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self._points: List[Point] = []
        if points is not None:
            self.extend(points)

    def add(self, point: Point) -> None:
        if not isinstance(point, Point):
            raise ValueError(f"not a Point: {point!r}")
        self._points.append(point)

    def extend(self, points: Iterable[Point]) -> None:
        for p in points:
            self.add(p)

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def bounds(self) -> Optional[Bounds]:
        """Axis-aligned ``(min, max)`` corners, or ``None`` for an empty cloud."""
        if not self._points:
            return None
        xs = [p.x for p in self._points]
        ys = [p.y for p in self._points]
        zs = [p.z for p in self._points]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> "PointCloud": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return PointCloud(self._points[index])
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointCloud):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"PointCloud({len(self._points)} points)"
