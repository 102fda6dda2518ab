from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

UNIT_NAMES = ("mm", "cm", "m", "in")


@dataclass(frozen=True)
class GasketConfig:
    dxf_version: str
    units: str
    layer_name: str
    layer_color: int
    layer_linetype: str
    output_dir: str
    max_hole_count: int
    debug_svg: bool
    host: str
    port: int
    api_key: str

    @staticmethod
    def default_path(project_root: Path) -> Path:
        return _user_config_dir() / "gasketforge.json"

    @staticmethod
    def load_default(project_root: Path) -> "GasketConfig":
        user_path = GasketConfig.default_path(project_root)
        if user_path.exists():
            return GasketConfig.from_json(user_path)
        bundled_path = project_root / "config" / "gasketforge.json"
        if bundled_path.exists():
            return GasketConfig.from_json(bundled_path)
        return GasketConfig.from_dict({})

    @staticmethod
    def from_json(path: Path) -> "GasketConfig":
        data = json.loads(path.read_text(encoding="utf-8"))
        return GasketConfig.from_dict(data)

    @staticmethod
    def from_dict(data: dict) -> "GasketConfig":
        dxf_version = str(data.get("dxf_version", "R2010"))
        units = str(data.get("units", "cm")).lower()
        layer_name = str(data.get("layer_name", "l_yellow"))
        layer_color = int(data.get("layer_color", 2))
        layer_linetype = str(data.get("layer_linetype", "DOTTED"))
        output_dir = str(data.get("output_dir", "output"))
        max_hole_count = int(data.get("max_hole_count", 10000))
        debug_svg = bool(data.get("debug_svg", False))
        host = str(data.get("host", "127.0.0.1"))
        port = int(data.get("port", os.environ.get("GASKETFORGE_PORT", 8080)))
        api_key = str(data.get("api_key") or os.environ.get("GASKETFORGE_API_KEY", ""))
        return GasketConfig(
            dxf_version=dxf_version,
            units=units,
            layer_name=layer_name,
            layer_color=layer_color,
            layer_linetype=layer_linetype,
            output_dir=output_dir,
            max_hole_count=max_hole_count,
            debug_svg=debug_svg,
            host=host,
            port=port,
            api_key=api_key,
        )

    def validate(self) -> None:
        if self.units not in UNIT_NAMES:
            raise ValueError("units must be mm, cm, m, or in")
        if not self.layer_name:
            raise ValueError("layer_name must not be empty")
        if not 1 <= self.layer_color <= 255:
            raise ValueError("layer_color must be in [1, 255]")
        if not self.layer_linetype:
            raise ValueError("layer_linetype must not be empty")
        if self.max_hole_count <= 0:
            raise ValueError("max_hole_count must be > 0")
        if not 0 < self.port < 65536:
            raise ValueError("port must be in [1, 65535]")


def _user_config_dir() -> Path:
    if os.name == "nt":
        base = os.environ.get("APPDATA") or os.environ.get("USERPROFILE")
        if base:
            return Path(base) / "GasketForge"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "gasketforge"
    return Path.home() / ".config" / "gasketforge"
