from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping
import logging

from ..config import GasketConfig
from ..geometry import Arc, Contour, ContourBuilder, HolePattern, HolePatternAssembler, Line
from ..geometry.shapes import find_overlaps, gasket_face, holes_outside, min_center_distance
from ..params import GeometryParams
from .debug import write_debug_svg
from .sink import DrawingSink, DxfDrawingSink

logger = logging.getLogger(__name__)


@dataclass
class GasketResult:
    params: GeometryParams
    outer: Contour
    inner: Contour
    pattern: HolePattern
    file_name: str
    output_path: Path | None = None
    dxf_text: str | None = None
    overlaps: list[tuple[int, int]] = field(default_factory=list)
    outside: list[int] = field(default_factory=list)
    min_spacing: float | None = None

    @property
    def hole_count(self) -> int:
        return self.pattern.hole_count


def generate_gasket(
    raw_params: Mapping | GeometryParams,
    config: GasketConfig,
    sink: DrawingSink | None = None,
    output_dir: Path | None = None,
) -> GasketResult:
    # 主流程：参数校验 -> 轮廓 -> 孔位 -> 检查 -> 输出 DXF
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    config.validate()
    if isinstance(raw_params, GeometryParams):
        params = raw_params
        params.validate()
    else:
        params = GeometryParams.from_mapping(raw_params)
    logger.info("Gasket parameters: %s", params.to_dict())

    # 1) 外/内轮廓
    outer, inner = ContourBuilder(params.A, params.B, params.H).build()
    logger.info(
        "Contours: cap_offset=%.4f outer_r=%.4f inner_r=%.4f",
        outer.cap_offset,
        outer.radius,
        inner.radius,
    )

    # 2) 孔位：单象限布置后镜像
    pattern = HolePatternAssembler(params, max_holes=config.max_hole_count).assemble()

    # 3) 几何检查只告警，不阻断输出
    overlaps = find_overlaps(pattern.holes)
    if overlaps:
        logger.warning("Hole disks overlap: %s pair(s), first=%s", len(overlaps), overlaps[0])
    face = gasket_face(outer, inner)
    outside = holes_outside(face, pattern.holes)
    if outside:
        logger.warning("%s hole(s) extend beyond the gasket face", len(outside))
    min_spacing = min_center_distance(pattern.holes)

    # 4) 输出
    if sink is None:
        sink = DxfDrawingSink.from_config(config)
    emit_drawing(sink, config, outer, inner, pattern)

    file_name = suggested_file_name(params, pattern.hole_count)
    result = GasketResult(
        params=params,
        outer=outer,
        inner=inner,
        pattern=pattern,
        file_name=file_name,
        overlaps=overlaps,
        outside=outside,
        min_spacing=min_spacing,
    )
    if output_dir is not None:
        output_path = Path(output_dir) / file_name
        sink.save(output_path)
        result.output_path = output_path
        if config.debug_svg:
            write_debug_svg(output_path, outer, inner, pattern.holes)
    else:
        result.dxf_text = sink.to_string()
    logger.info("Gasket done: holes=%s file=%s", pattern.hole_count, file_name)
    return result


def emit_drawing(
    sink: DrawingSink,
    config: GasketConfig,
    outer: Contour,
    inner: Contour,
    pattern: HolePattern,
) -> None:
    sink.set_layer(config.layer_name, config.layer_color, config.layer_linetype)
    for contour in (outer, inner):
        for prim in contour.primitives:
            if isinstance(prim, Arc):
                sink.arc(prim.center[0], prim.center[1], prim.radius, prim.start_angle, prim.end_angle)
            elif isinstance(prim, Line):
                sink.line(prim.start[0], prim.start[1], prim.end[0], prim.end[1])
    for hole in pattern.holes:
        sink.circle(hole.x, hole.y, hole.radius)


def suggested_file_name(params: GeometryParams, hole_count: int) -> str:
    dims = "_".join(
        f"{name}{fmt(getattr(params, name))}" for name in ("A", "B", "C", "D", "E", "F", "I", "H")
    )
    return (
        f"gasket_{hole_count}holes_{dims}_d{fmt(params.hole_diameter)}"
        f"_{params.hole_configuration.value}.dxf"
    )


def fmt(n: float) -> str:
    return f"{n:.3f}".rstrip("0").rstrip(".")
