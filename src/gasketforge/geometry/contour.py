from __future__ import annotations

"""Stadium contour primitives: two half-circle caps joined by straight lines."""

from dataclasses import dataclass
import math
from typing import Union

from ..errors import ErrorKind, GeometryError

Point2D = tuple[float, float]


@dataclass(frozen=True)
class Arc:
    center: Point2D
    radius: float
    start_angle: float
    end_angle: float

    @property
    def start_point(self) -> Point2D:
        return _polar(self.center, self.radius, self.start_angle)

    @property
    def end_point(self) -> Point2D:
        return _polar(self.center, self.radius, self.end_angle)


@dataclass(frozen=True)
class Line:
    start: Point2D
    end: Point2D

    @property
    def start_point(self) -> Point2D:
        return self.start

    @property
    def end_point(self) -> Point2D:
        return self.end

    @property
    def length(self) -> float:
        return math.dist(self.start, self.end)


Primitive = Union[Arc, Line]


@dataclass(frozen=True)
class Contour:
    """Closed loop walked counter-clockwise: bottom line, right cap, top line, left cap."""

    primitives: tuple[Primitive, ...]
    cap_offset: float
    radius: float

    def is_closed(self, tol: float = 1e-9) -> bool:
        count = len(self.primitives)
        for idx, prim in enumerate(self.primitives):
            following = self.primitives[(idx + 1) % count]
            if math.dist(prim.end_point, following.start_point) > tol:
                return False
        return True

    @property
    def arcs(self) -> tuple[Arc, ...]:
        return tuple(p for p in self.primitives if isinstance(p, Arc))

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(p for p in self.primitives if isinstance(p, Line))


class ContourBuilder:
    """Outer and inner gasket outlines.

    Both contours share the arc centers ``(+-(A/2 - B/2), 0)``; the inner one
    only shrinks the radius by the cross-section thickness ``H``.
    """

    def __init__(self, length: float, width: float, thickness: float) -> None:
        self._length = length
        self._width = width
        self._thickness = thickness

    @property
    def cap_offset(self) -> float:
        return self._length / 2.0 - self._width / 2.0

    def build(self) -> tuple[Contour, Contour]:
        return self.outer(), self.inner()

    def outer(self) -> Contour:
        return stadium(self.cap_offset, self._width / 2.0)

    def inner(self) -> Contour:
        radius = self._width / 2.0 - self._thickness
        if radius <= 0:
            raise GeometryError(
                ErrorKind.DEGENERATE_CROSS_SECTION,
                f"inner radius {radius:g} must be > 0 (B={self._width:g}, H={self._thickness:g})",
            )
        return stadium(self.cap_offset, radius)


def stadium(cap_offset: float, radius: float) -> Contour:
    cx = cap_offset
    primitives = (
        Line((-cx, -radius), (cx, -radius)),
        Arc((cx, 0.0), radius, -90.0, 90.0),
        Line((cx, radius), (-cx, radius)),
        Arc((-cx, 0.0), radius, 90.0, 270.0),
    )
    return Contour(primitives=primitives, cap_offset=cap_offset, radius=radius)


def _polar(center: Point2D, radius: float, angle_deg: float) -> Point2D:
    theta = math.radians(angle_deg)
    return (center[0] + radius * math.cos(theta), center[1] + radius * math.sin(theta))
