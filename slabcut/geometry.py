"""Two-dimensional points and closed polygon outlines, measured in millimetres."""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union


@dataclass(frozen=True)
class Point2D:
    """A 2D coordinate in mm."""

    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Point2D":
        return cls(float(data.get("x") or 0.0), float(data.get("y") or 0.0))


PointLike = Union[Point2D, Tuple[float, float]]


class Outline(tuple):
    """A closed polygon; the last point connects back to the first."""

    def __new__(cls, points: Iterable[PointLike] = ()) -> "Outline":
        return super().__new__(
            cls, (p if isinstance(p, Point2D) else Point2D(*p) for p in points)
        )

    def _edges(self) -> Iterator[Tuple[Point2D, Point2D]]:
        """Yield (start, end) for every edge, including the closing one."""
        return zip(self, tuple(self[1:]) + tuple(self[:1]))

    def bounding_box(self) -> Tuple[Point2D, Point2D]:
        """Return the (min, max) corners; both are the origin for an empty outline."""
        if not self:
            return Point2D(), Point2D()
        xs = [p.x for p in self]
        ys = [p.y for p in self]
        return Point2D(min(xs), min(ys)), Point2D(max(xs), max(ys))

    def translate(self, dx: float, dy: float) -> "Outline":
        return Outline(Point2D(p.x + dx, p.y + dy) for p in self)

    def perimeter(self) -> float:
        if len(self) < 2:
            return 0.0
        return sum(math.hypot(b.x - a.x, b.y - a.y) for a, b in self._edges())

    def rotate(self, radians: float) -> "Outline":
        """Rotate around the centroid, then shift so the bounding box starts at (0, 0)."""
        if not self or radians == 0:
            return self
        cx = sum(p.x for p in self) / len(self)
        cy = sum(p.y for p in self) / len(self)
        cos, sin = math.cos(radians), math.sin(radians)
        rotated = Outline(
            Point2D(
                cx + (p.x - cx) * cos - (p.y - cy) * sin,
                cy + (p.x - cx) * sin + (p.y - cy) * cos,
            )
            for p in self
        )
        low, _ = rotated.bounding_box()
        return rotated.translate(-low.x, -low.y)

    def area(self) -> float:
        """Absolute polygon area by the shoelace formula."""
        if len(self) < 3:
            return 0.0
        total = sum(a.x * b.y - b.x * a.y for a, b in self._edges())
        return abs(total) / 2.0

    def contains_point(self, px: float, py: float) -> bool:
        """Ray-casting point-in-polygon test."""
        if len(self) < 3:
            return False
        inside = False
        previous = tuple(self[-1:]) + tuple(self[:-1])
        for cur, prev in zip(self, previous):
            if (cur.y > py) != (prev.y > py):
                x_cross = cur.x + (py - cur.y) / (prev.y - cur.y) * (prev.x - cur.x)
                if px < x_cross:
                    inside = not inside
        return inside

    def to_list(self) -> list:
        return [p.to_dict() for p in self]

    @classmethod
    def from_list(cls, data: Iterable[Mapping[str, Any]]) -> "Outline":
        return cls(Point2D.from_dict(item) for item in (data or ()))


def _cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _on_segment(p: Point2D, q: Point2D, r: Point2D) -> bool:
    return min(p.x, q.x) <= r.x <= max(p.x, q.x) and min(p.y, q.y) <= r.y <= max(p.y, q.y)


def _segments_intersect(a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> bool:
    d1 = _cross(c, d, a)
    d2 = _cross(c, d, b)
    d3 = _cross(a, b, c)
    d4 = _cross(a, b, d)
    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True
    return (
        (d1 == 0 and _on_segment(c, d, a))
        or (d2 == 0 and _on_segment(c, d, b))
        or (d3 == 0 and _on_segment(a, b, c))
        or (d4 == 0 and _on_segment(a, b, d))
    )


def outlines_overlap(
    a: Outline, ax: float, ay: float, b: Outline, bx: float, by: float
) -> bool:
    """Whether outline ``a`` placed at (ax, ay) overlaps ``b`` placed at (bx, by)."""
    if len(a) < 3 or len(b) < 3:
        return False
    abs_a = Outline(a).translate(ax, ay)
    abs_b = Outline(b).translate(bx, by)
    for a1, a2 in abs_a._edges():
        for b1, b2 in abs_b._edges():
            if _segments_intersect(a1, a2, b1, b2):
                return True
    if abs_b.contains_point(abs_a[0].x, abs_a[0].y):
        return True
    return abs_a.contains_point(abs_b[0].x, abs_b[0].y)