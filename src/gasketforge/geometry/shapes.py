from __future__ import annotations

"""Contour / hole -> Shapely geometry, used for plausibility checks and previews."""

import logging
import math
from typing import Iterable, Sequence

from shapely.geometry import Point, Polygon
from shapely.strtree import STRtree

from .contour import Arc, Contour, Line
from .holes import HoleCenter

logger = logging.getLogger(__name__)

DEFAULT_ARC_STEPS = 64
DEFAULT_CURVE_RESOLUTION = 16


def contour_to_polygon(contour: Contour, arc_steps: int = DEFAULT_ARC_STEPS) -> Polygon:
    # 圆弧离散成折线，再按轮廓顺序拼接
    points = []
    for prim in contour.primitives:
        if isinstance(prim, Line):
            segment = [prim.start, prim.end]
        elif isinstance(prim, Arc):
            segment = arc_points(prim, arc_steps)
        else:
            continue
        if points and math.dist(points[-1], segment[0]) < 1e-9:
            segment = segment[1:]
        points.extend(segment)
    poly = Polygon(points)
    if not poly.is_valid:
        logger.debug("Contour polygon invalid, repairing with buffer(0)")
        poly = poly.buffer(0)
    return poly


def arc_points(arc: Arc, steps: int) -> list[tuple[float, float]]:
    # DXF arcs always run counter-clockwise from start to end
    steps = max(8, steps)
    start = math.radians(arc.start_angle)
    end = math.radians(arc.end_angle)
    if end <= start:
        end += 2 * math.pi
    cx, cy = arc.center
    angles = [start + (end - start) * i / (steps - 1) for i in range(steps)]
    return [(cx + arc.radius * math.cos(a), cy + arc.radius * math.sin(a)) for a in angles]


def hole_disk(hole: HoleCenter, resolution: int = DEFAULT_CURVE_RESOLUTION):
    return Point(hole.x, hole.y).buffer(hole.radius, quad_segs=resolution)


def gasket_face(outer: Contour, inner: Contour, arc_steps: int = DEFAULT_ARC_STEPS):
    return contour_to_polygon(outer, arc_steps).difference(contour_to_polygon(inner, arc_steps))


def gasket_with_holes(outer: Contour, inner: Contour, holes: Iterable[HoleCenter]):
    face = gasket_face(outer, inner)
    for hole in holes:
        face = face.difference(hole_disk(hole))
    return face


def find_overlaps(holes: Sequence[HoleCenter], tol: float = 1e-9) -> list[tuple[int, int]]:
    """Index pairs of holes whose disks intersect (touching disks do not count)."""
    if len(holes) < 2:
        return []
    centers = [Point(h.x, h.y) for h in holes]
    tree = STRtree(centers)
    pairs = []
    for idx, hole in enumerate(holes):
        search = centers[idx].buffer(hole.radius * 2.0)
        for other in sorted(int(i) for i in tree.query(search)):
            if other <= idx:
                continue
            limit = hole.radius + holes[other].radius - tol
            if math.hypot(hole.x - holes[other].x, hole.y - holes[other].y) < limit:
                pairs.append((idx, other))
    return pairs


def holes_outside(face, holes: Sequence[HoleCenter], tol: float = 1e-6) -> list[int]:
    """Indices of holes whose disks are not fully inside the gasket face."""
    if face is None or face.is_empty:
        return list(range(len(holes)))
    grown = face.buffer(tol)
    return [idx for idx, hole in enumerate(holes) if not grown.contains(hole_disk(hole))]


def min_center_distance(holes: Sequence[HoleCenter]) -> float | None:
    if len(holes) < 2:
        return None
    centers = [Point(h.x, h.y) for h in holes]
    tree = STRtree(centers)
    _, distances = tree.query_nearest(centers, return_distance=True, exclusive=True)
    return float(distances.min())
