from __future__ import annotations

import math

import pytest

from gasketforge.geometry import ContourBuilder, HoleCenter, HolePatternAssembler
from gasketforge.geometry.shapes import (
    contour_to_polygon,
    find_overlaps,
    gasket_face,
    gasket_with_holes,
    holes_outside,
    min_center_distance,
)
from gasketforge.params import GeometryParams


def test_contour_polygon_area_matches_stadium() -> None:
    outer = ContourBuilder(200, 100, 10).outer()
    poly = contour_to_polygon(outer, arc_steps=256)
    expected = 100 * 100 + math.pi * 50**2
    assert poly.is_valid
    assert poly.area == pytest.approx(expected, rel=1e-3)


def test_gasket_face_is_a_ring() -> None:
    outer, inner = ContourBuilder(200, 100, 10).build()
    face = gasket_face(outer, inner)
    assert face.geom_type == "Polygon"
    assert len(face.interiors) == 1
    assert face.bounds == pytest.approx((-100.0, -50.0, 100.0, 50.0), abs=0.05)


def test_find_overlaps_reports_pairs() -> None:
    holes = [HoleCenter(0.0, 0.0, 1.0), HoleCenter(1.5, 0.0, 1.0), HoleCenter(2.0, 0.0, 1.0), HoleCenter(10.0, 0.0, 1.0)]
    assert find_overlaps(holes) == [(0, 1), (1, 2)]


def test_touching_disks_do_not_overlap() -> None:
    holes = [HoleCenter(0.0, 0.0, 1.0), HoleCenter(2.0, 0.0, 1.0)]
    assert find_overlaps(holes) == []
    assert min_center_distance(holes) == pytest.approx(2.0)
    assert min_center_distance(holes[:1]) is None


def test_reference_holes_lie_inside_the_face() -> None:
    params = GeometryParams.from_mapping(
        {
            "A": 200,
            "B": 100,
            "C": 190,
            "D": 90,
            "E": 20,
            "F": 15,
            "I": 20,
            "H": 10,
            "holeDiameter": 8,
            "holeConfiguration": "centered",
        }
    )
    outer, inner = ContourBuilder(params.A, params.B, params.H).build()
    pattern = HolePatternAssembler(params).assemble()
    face = gasket_face(outer, inner)
    assert holes_outside(face, pattern.holes) == []

    drilled = gasket_with_holes(outer, inner, pattern.holes)
    assert drilled.area < face.area


def test_holes_outside_flags_stray_holes() -> None:
    outer, inner = ContourBuilder(200, 100, 10).build()
    face = gasket_face(outer, inner)
    holes = [HoleCenter(0.0, 45.0, 2.0), HoleCenter(0.0, 0.0, 2.0), HoleCenter(0.0, 49.0, 2.0)]
    assert holes_outside(face, holes) == [1, 2]
