from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .config import GasketConfig
from .errors import GeometryError
from .pipeline import generate_gasket

logger = logging.getLogger(__name__)

_DIMENSIONS = ("A", "B", "C", "D", "E", "F", "I", "H")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a stadium gasket DXF.")
    for name in _DIMENSIONS:
        parser.add_argument(f"-{name}", dest=name, type=float, default=None, help=f"Dimension {name}")
    parser.add_argument("--hole-diameter", dest="hole_diameter", type=float, default=None)
    parser.add_argument(
        "--hole-configuration",
        dest="hole_configuration",
        choices=["centered", "straddled"],
        default=None,
    )
    parser.add_argument(
        "--params",
        type=Path,
        default=None,
        help="JSON file with gasket parameters; flags override its values",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to gasketforge.json config",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for the DXF")
    parser.add_argument("--debug-svg", action="store_true", help="Also write SVG previews")
    return parser


def collect_params(args: argparse.Namespace) -> dict:
    data: dict = {}
    if args.params is not None:
        data.update(json.loads(args.params.read_text(encoding="utf-8")))
    for name in (*_DIMENSIONS, "hole_diameter", "hole_configuration"):
        value = getattr(args, name)
        if value is not None:
            data[name] = value
    return data


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    project_root = Path.cwd()
    if args.config is not None:
        config_data = json.loads(args.config.read_text(encoding="utf-8"))
    else:
        config_path = GasketConfig.default_path(project_root)
        config_data = json.loads(config_path.read_text(encoding="utf-8")) if config_path.exists() else {}
    if args.debug_svg:
        config_data["debug_svg"] = True
    config = GasketConfig.from_dict(config_data)
    output_dir = args.output_dir or Path(config.output_dir)

    try:
        result = generate_gasket(collect_params(args), config, output_dir=output_dir)
    except GeometryError as exc:
        logger.error("%s: %s", exc.kind.value, exc)
        return 2
    print(result.output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
