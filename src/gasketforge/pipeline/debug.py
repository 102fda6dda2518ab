from __future__ import annotations

"""调试输出：外/内轮廓与孔位的 SVG 预览。"""

import logging
from pathlib import Path
from typing import Sequence

from ..geometry import Contour, HoleCenter
from ..geometry.shapes import contour_to_polygon, gasket_with_holes

logger = logging.getLogger(__name__)


def write_debug_svg(
    output_path: Path,
    outer: Contour,
    inner: Contour,
    holes: Sequence[HoleCenter],
) -> list[Path]:
    if output_path is None:
        return []
    out_dir = output_path.parent
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    hole_radius = max((h.radius for h in holes), default=1.0)
    for name, geom, color in (
        ("outer", contour_to_polygon(outer), "#d64545"),
        ("inner", contour_to_polygon(inner), "#2e7d32"),
        ("gasket", gasket_with_holes(outer, inner, holes), "#1e3a8a"),
    ):
        if geom is None or geom.is_empty:
            continue
        bounds = geom.bounds
        width = bounds[2] - bounds[0]
        height = bounds[3] - bounds[1]
        if width <= 0 or height <= 0:
            continue
        padding = 2.0 * hole_radius
        view = (
            bounds[0] - padding,
            bounds[1] - padding,
            width + padding * 2,
            height + padding * 2,
        )
        svg = geom.svg(scale_factor=1.0)
        svg = (
            f"<svg xmlns=\"http://www.w3.org/2000/svg\" "
            f"viewBox=\"{view[0]} {view[1]} {view[2]} {view[3]}\">{svg}</svg>"
        )
        svg = svg.replace(
            "stroke=\"#555555\"",
            f"stroke=\"{color}\"",
        )
        path = out_dir / f"{output_path.stem}_debug_{name}.svg"
        path.write_text(svg, encoding="utf-8")
        written.append(path)
    logger.info("Debug SVG written: %s", ", ".join(p.name for p in written))
    return written
