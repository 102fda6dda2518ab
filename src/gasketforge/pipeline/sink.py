from __future__ import annotations

"""Drawing sinks: where the gasket primitives end up."""

import io
import logging
from pathlib import Path
from typing import Protocol

import ezdxf
from ezdxf import units as dxf_units

from ..config import GasketConfig

logger = logging.getLogger(__name__)

_DXF_UNITS = {
    "mm": dxf_units.MM,
    "cm": dxf_units.CM,
    "m": dxf_units.M,
    "in": dxf_units.IN,
}

# ezdxf ships DOT/DASHED/...; the names below are added on demand
_FALLBACK_LINETYPES = {
    "DOTTED": ("Dotted . . . . . . . .", [0.2, 0.0, -0.2]),
    "DASH": ("Dashed __ __ __ __", [0.6, 0.5, -0.1]),
}


class DrawingSink(Protocol):
    def set_layer(self, name: str, color: int, linetype: str) -> None:
        ...

    def arc(self, cx: float, cy: float, radius: float, start_deg: float, end_deg: float) -> None:
        ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def circle(self, cx: float, cy: float, radius: float) -> None:
        ...

    def to_string(self) -> str:
        ...

    def save(self, path: Path) -> None:
        ...


class DxfDrawingSink:
    def __init__(self, units: str = "cm", dxf_version: str = "R2010") -> None:
        if units not in _DXF_UNITS:
            raise ValueError(f"Unsupported DXF units: {units}")
        # setup=True 会预置 DOTTED 等标准线型
        self.doc = ezdxf.new(dxf_version, setup=True)
        self.doc.units = _DXF_UNITS[units]
        self.msp = self.doc.modelspace()
        self._layer = "0"

    @staticmethod
    def from_config(config: GasketConfig) -> "DxfDrawingSink":
        return DxfDrawingSink(units=config.units, dxf_version=config.dxf_version)

    @property
    def active_layer(self) -> str:
        return self._layer

    def set_layer(self, name: str, color: int, linetype: str) -> None:
        if linetype not in self.doc.linetypes:
            fallback = _FALLBACK_LINETYPES.get(linetype.upper())
            if fallback is None:
                logger.warning("Linetype %s not available, using Continuous", linetype)
                linetype = "Continuous"
            else:
                description, pattern = fallback
                self.doc.linetypes.add(linetype, pattern=pattern, description=description)
        if name not in self.doc.layers:
            self.doc.layers.add(name, color=color, linetype=linetype)
        self._layer = name

    def arc(self, cx: float, cy: float, radius: float, start_deg: float, end_deg: float) -> None:
        self.msp.add_arc(
            (cx, cy),
            radius,
            start_deg,
            end_deg,
            dxfattribs={"layer": self._layer},
        )

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.msp.add_line((x1, y1), (x2, y2), dxfattribs={"layer": self._layer})

    def circle(self, cx: float, cy: float, radius: float) -> None:
        self.msp.add_circle((cx, cy), radius, dxfattribs={"layer": self._layer})

    def to_string(self) -> str:
        stream = io.StringIO()
        self.doc.write(stream)
        return stream.getvalue()

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.doc.saveas(str(path))
        logger.info("DXF written: %s", path)
