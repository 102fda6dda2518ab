from __future__ import annotations

import pytest

from gasketforge.errors import ErrorKind, GeometryError
from gasketforge.geometry import Arc, ContourBuilder, Line


def test_reference_stadium_dimensions() -> None:
    outer, inner = ContourBuilder(20, 10, 1).build()

    assert sorted(arc.center for arc in outer.arcs) == [(-5.0, 0.0), (5.0, 0.0)]
    assert all(arc.radius == 5.0 for arc in outer.arcs)
    assert sorted(arc.center for arc in inner.arcs) == [(-5.0, 0.0), (5.0, 0.0)]
    assert all(arc.radius == 4.0 for arc in inner.arcs)

    assert sorted(line.start[1] for line in outer.lines) == [-5.0, 5.0]
    assert sorted(line.start[1] for line in inner.lines) == [-4.0, 4.0]
    for line in (*outer.lines, *inner.lines):
        assert line.length == pytest.approx(10.0)
        assert line.start[1] == line.end[1]


def test_arcs_span_half_circles() -> None:
    outer = ContourBuilder(20, 10, 1).outer()
    for arc in outer.arcs:
        assert (arc.end_angle - arc.start_angle) % 360 == pytest.approx(180.0)


@pytest.mark.parametrize(
    ("length", "width", "thickness"),
    [(20, 10, 1), (200, 100, 10), (12.5, 12.4, 6.1), (1000, 3, 0.2), (7, 1, 0.49)],
)
def test_contours_are_closed(length: float, width: float, thickness: float) -> None:
    outer, inner = ContourBuilder(length, width, thickness).build()
    assert outer.is_closed(tol=1e-9)
    assert inner.is_closed(tol=1e-9)
    assert len(outer.primitives) == 4
    assert [type(p) for p in outer.primitives] == [Line, Arc, Line, Arc]


def test_open_loop_is_detected() -> None:
    outer = ContourBuilder(20, 10, 1).outer()
    broken = type(outer)(primitives=outer.primitives[:3], cap_offset=outer.cap_offset, radius=outer.radius)
    assert not broken.is_closed()


def test_inner_radius_must_stay_positive() -> None:
    with pytest.raises(GeometryError) as excinfo:
        ContourBuilder(20, 10, 5).inner()
    assert excinfo.value.kind is ErrorKind.DEGENERATE_CROSS_SECTION
